from __future__ import annotations

from datetime import datetime
from gallery_timeline.cluster.group_months import group_by_month
from gallery_timeline.cluster.month_math import month_bounds, months_between
from gallery_timeline.ingest.parse_filename import parse_identifier


def test_month_bounds_cover_whole_month() -> None:
    start, end = month_bounds("2024-02")
    assert start == datetime(2024, 2, 1)
    assert end == datetime(2024, 2, 29, 23, 59, 59, 999000)


def test_months_between_counts_calendar_months() -> None:
    _, feb_end = month_bounds("2023-02")
    aug_start, _ = month_bounds("2023-08")
    assert months_between(feb_end, aug_start) == 6
    _, dec_end = month_bounds("2022-12")
    jan_start, _ = month_bounds("2023-01")
    assert months_between(dec_end, jan_start) == 1


def test_group_by_month_buckets_and_sorts() -> None:
    names = ["2023-03-a.jpg", "2022-11-a.jpg", "2023-03-b.jpg", "2023-01-a.jpg"]
    groups = group_by_month([parse_identifier(n) for n in names])

    assert [g.label for g in groups] == ["2022-11", "2023-01", "2023-03"]
    assert [g.size for g in groups] == [1, 1, 2]
    march = groups[2]
    assert [r.identifier for r in march.records] == ["2023-03-a.jpg", "2023-03-b.jpg"]
    assert march.start_date == datetime(2023, 3, 1)
    assert march.end_date == datetime(2023, 3, 31, 23, 59, 59, 999000)
    assert march.center_date == datetime(2023, 3, 15)


def test_group_by_month_empty() -> None:
    assert group_by_month([]) == []


def test_month_bounds_at_datetime_limits() -> None:
    assert month_bounds("0001-01")[0] == datetime(1, 1, 1)
    assert month_bounds("9999-12")[1] == datetime(9999, 12, 31, 23, 59, 59, 999000)
