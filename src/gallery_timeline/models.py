"""Pydantic models for parsed images and timeline groups.

The field aliases define the JSON wire shape consumed by the gallery front
end (`filename`, `dateRange`, `startDate`, ...). Dump with `by_alias=True`.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, model_validator

# Naive local date-times at second precision, e.g. "2023-01-31T23:59:59".
IsoDateTime = Annotated[
    datetime,
    PlainSerializer(lambda d: d.isoformat(timespec="seconds"), return_type=str, when_used="json"),
]


class ImageRecord(BaseModel):
    """One dated image.

    Attributes:
        identifier: Original filename.
        date: First instant of the year-month parsed from the filename.
        month_key: `YYYY-MM` grouping key.
        glb_file: Companion `.glb` model next to the image, if any.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")
    identifier: str = Field(..., min_length=1, serialization_alias="filename")
    date: IsoDateTime
    month_key: str = Field(..., pattern=r"^[0-9]{4}-[0-9]{2}$", serialization_alias="month")
    glb_file: str | None = Field(default=None, serialization_alias="glbFile")

    @model_validator(mode="after")
    def _month_matches_date(self) -> ImageRecord:
        if f"{self.date.year:04d}-{self.date.month:02d}" != self.month_key:
            raise ValueError(f"month_key {self.month_key} does not match date {self.date.isoformat()}")
        return self


class ImageGroup(BaseModel):
    """A contiguous time range of images shown as one timeline cluster.

    Attributes:
        label: `YYYY-MM` for a single month, otherwise `YYYY-MM to YYYY-MM`.
        start_date: First instant of the earliest month.
        end_date: Last millisecond of the latest month.
        center_date: Point between start and end used to place the cluster.
        size: Number of records; always `len(records)`.
        records: Images in this group.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")
    label: str = Field(..., serialization_alias="dateRange")
    start_date: IsoDateTime = Field(..., serialization_alias="startDate")
    end_date: IsoDateTime = Field(..., serialization_alias="endDate")
    center_date: IsoDateTime = Field(..., serialization_alias="centerDate")
    size: int = Field(..., ge=0)
    records: tuple[ImageRecord, ...] = Field(..., serialization_alias="images")

    @model_validator(mode="after")
    def _check_span_and_size(self) -> ImageGroup:
        if self.size != len(self.records):
            raise ValueError(f"size {self.size} does not match {len(self.records)} records")
        if not self.start_date <= self.center_date <= self.end_date:
            raise ValueError("center_date must lie between start_date and end_date")
        return self
