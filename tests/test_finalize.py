from __future__ import annotations

from datetime import datetime
from gallery_timeline.cluster.finalize import finalize_group, finalize_groups
from gallery_timeline.cluster.group_months import group_by_month
from gallery_timeline.cluster.merge_groups import merge_groups
from gallery_timeline.ingest.parse_filename import parse_identifier


def test_single_month_gets_exact_midpoint_and_month_label() -> None:
    [group] = group_by_month([parse_identifier(f"2023-05-{i}.jpg") for i in range(4)])
    final = finalize_group(group)

    assert final.label == "2023-05"
    assert final.center_date == datetime(2023, 5, 16, 11, 59, 59, 999500)
    assert final.size == 4


def test_range_label_kept_for_multi_month_group() -> None:
    groups = group_by_month([parse_identifier(n) for n in ["2023-01-a.jpg", "2023-03-a.jpg"]])
    [final] = finalize_groups(merge_groups(groups))

    assert final.label == "2023-01 to 2023-03"
    assert final.start_date <= final.center_date <= final.end_date


def test_finalize_is_idempotent() -> None:
    groups = group_by_month([parse_identifier(n) for n in ["2023-01-a.jpg", "2023-02-a.jpg", "2023-09-a.jpg"]])
    once = finalize_groups(merge_groups(groups))
    assert finalize_groups(once) == once
