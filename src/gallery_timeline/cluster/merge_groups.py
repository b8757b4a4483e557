"""Greedy merge pass over the sorted month groups.

The pass walks the groups once from left to right. Each group is either
folded into the last accumulated group or appended as a new one; earlier
decisions are never revisited. The result therefore depends on scan order
and is not a globally optimal clustering (fewest groups, most balanced
sizes): it is the deterministic outcome of local decisions.

Merge rule for `last` (accumulated) and `cur` (next month group), with
`months_diff` the calendar month gap between `last.end_date` and
`cur.start_date`:

1. `last` is small and the gap is at most `max_months_distance`, or
2. `cur` is small and the gap is at most `max_months_distance`, or
3. the gap is at most `pair_max_months` and both together hold no more than
   `2 * min_group_size` images.

"Small" means fewer than `min_group_size` images.
"""

from __future__ import annotations

import logging
from typing import Sequence

from gallery_timeline.cluster.month_math import midpoint, months_between, range_label
from gallery_timeline.config import ClusterConfig
from gallery_timeline.models import ImageGroup

log = logging.getLogger(__name__)


def should_merge(last: ImageGroup, cur: ImageGroup, config: ClusterConfig) -> bool:
    """Return True when `cur` should be folded into `last`."""
    months_diff = months_between(last.end_date, cur.start_date)
    near = months_diff <= config.max_months_distance
    return (
        (last.size < config.min_group_size and near)
        or (cur.size < config.min_group_size and near)
        or (
            months_diff <= config.pair_max_months
            and last.size + cur.size <= 2 * config.min_group_size
        )
    )


def absorb(last: ImageGroup, cur: ImageGroup) -> ImageGroup:
    """Return `last` extended with the records and span of `cur`."""
    records = last.records + cur.records
    end = max(last.end_date, cur.end_date)
    return ImageGroup(
        label=range_label(last.start_date, end),
        start_date=last.start_date,
        end_date=end,
        center_date=midpoint(last.start_date, end),
        size=len(records),
        records=records,
    )


def merge_groups(groups: Sequence[ImageGroup], config: ClusterConfig | None = None) -> list[ImageGroup]:
    """Merge neighbouring month groups in one forward pass.

    Args:
        groups: Provisional groups sorted ascending by `start_date`.
        config: Merge thresholds; defaults to `ClusterConfig()`.

    Returns:
        Merged groups, still ascending by `start_date`.
    """
    config = config or ClusterConfig()
    merged: list[ImageGroup] = []

    for group in groups:
        if merged and should_merge(merged[-1], group, config):
            merged[-1] = absorb(merged[-1], group)
        else:
            merged.append(group)

    log.info("Merged %d month groups into %d groups", len(groups), len(merged))
    return merged
