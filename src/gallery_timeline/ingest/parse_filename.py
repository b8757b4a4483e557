"""Filename parsing into dated image records.

Image names are expected to start with a `YYYY-MM` token, e.g.
`2023-05-beach.jpg` or `2023-05.jpg`. Only the year and month are kept; any
day in the name is ignored.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import PurePath
from typing import Iterable

from gallery_timeline.cluster.month_math import month_key
from gallery_timeline.errors import InvalidDateToken
from gallery_timeline.models import ImageRecord

log = logging.getLogger(__name__)

IMAGE_RE = re.compile(r"\.(jpg|jpeg|png|gif)$", re.IGNORECASE)
TOKEN_RE = re.compile(r"^([0-9]{4})-([0-9]{2})$")
TOKEN_LEN = 7


@dataclass
class ParseResult:
    """Records parsed from a listing plus the names that were rejected."""
    records: list[ImageRecord] = field(default_factory=list)
    rejected: list[str] = field(default_factory=list)


def is_image_filename(name: str) -> bool:
    """Return True when `name` carries a recognised image suffix."""
    return IMAGE_RE.search(name) is not None


def parse_identifier(name: str, glb_file: str | None = None) -> ImageRecord:
    """Parse one image filename into an `ImageRecord`.

    Args:
        name: Filename such as `2023-05-beach.jpg`.
        glb_file: Optional companion model filename to attach.

    Returns:
        Record dated on the first day of the parsed month.

    Raises:
        InvalidDateToken: if the leading token is not a valid `YYYY-MM`.
    """
    token = name.split(".")[0][:TOKEN_LEN]
    m = TOKEN_RE.match(token)
    if not m:
        raise InvalidDateToken(name, token)

    try:
        date = datetime(int(m.group(1)), int(m.group(2)), 1)
    except ValueError:
        raise InvalidDateToken(name, token) from None

    return ImageRecord(
        identifier=name,
        date=date,
        month_key=month_key(date),
        glb_file=glb_file,
    )


def parse_identifiers(names: Iterable[str]) -> ParseResult:
    """Parse a listing of filenames, skipping non-images and bad dates.

    A `<stem>.glb` file present in the same listing is attached to the image
    with that stem.

    Args:
        names: Filenames in listing order.

    Returns:
        `ParseResult` with records in input order and the rejected names.
    """
    names = list(names)
    available = set(names)
    result = ParseResult()

    for name in names:
        if not is_image_filename(name):
            continue
        glb = f"{PurePath(name).stem}.glb"
        try:
            result.records.append(parse_identifier(name, glb if glb in available else None))
        except InvalidDateToken as e:
            log.warning("Skipping %s: %s", name, e.message)
            result.rejected.append(name)

    log.info("Parsed %d images (%d rejected)", len(result.records), len(result.rejected))
    return result
