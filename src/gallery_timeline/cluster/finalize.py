"""Final label and center date for merged groups."""

from __future__ import annotations

from typing import Sequence

from gallery_timeline.cluster.month_math import midpoint, month_key, same_month
from gallery_timeline.models import ImageGroup


def finalize_group(group: ImageGroup) -> ImageGroup:
    """Recompute `center_date` as the exact span midpoint and settle the label.

    A group spanning a single month is labelled with that month; a wider
    group keeps the range label set while merging. Applying this twice gives
    the same group.
    """
    label = month_key(group.start_date) if same_month(group.start_date, group.end_date) else group.label
    return group.model_copy(
        update={"label": label, "center_date": midpoint(group.start_date, group.end_date)}
    )


def finalize_groups(groups: Sequence[ImageGroup]) -> list[ImageGroup]:
    return [finalize_group(g) for g in groups]
