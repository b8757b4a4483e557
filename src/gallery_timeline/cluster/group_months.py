"""Bucket image records into one provisional group per calendar month."""

from __future__ import annotations

import logging
from typing import Sequence

import pandas as pd

from gallery_timeline.cluster.month_math import month_bounds
from gallery_timeline.models import ImageGroup, ImageRecord

log = logging.getLogger(__name__)

# Provisional center; RangeFinalizer replaces it with the exact midpoint.
INITIAL_CENTER_DAY = 15


def group_by_month(records: Sequence[ImageRecord]) -> list[ImageGroup]:
    """Partition records by `month_key`, one group per distinct month.

    Records keep their input order inside each group.

    Args:
        records: Parsed image records.

    Returns:
        Provisional groups sorted ascending by `start_date`.
    """
    if not records:
        return []

    pdf = pd.DataFrame({"month": [r.month_key for r in records]})

    groups: list[ImageGroup] = []
    for month, part in pdf.groupby("month", sort=True):
        start, end = month_bounds(str(month))
        members = tuple(records[i] for i in part.index)
        groups.append(
            ImageGroup(
                label=str(month),
                start_date=start,
                end_date=end,
                center_date=start.replace(day=INITIAL_CENTER_DAY),
                size=len(members),
                records=members,
            )
        )

    groups.sort(key=lambda g: g.start_date)
    log.info("Bucketed %d records into %d months", len(records), len(groups))
    return groups
