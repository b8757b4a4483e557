"""Write timeline groups as the static `images.json` artifact.

The front end can read this file instead of calling `/api/images`; both carry
the same array.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Sequence

from pydantic import TypeAdapter

from gallery_timeline.models import ImageGroup

log = logging.getLogger(__name__)

_GROUPS = TypeAdapter(list[ImageGroup])


def to_wire(groups: Sequence[ImageGroup]) -> list[dict[str, Any]]:
    """Return the groups as JSON-ready dicts using the wire field names."""
    return _GROUPS.dump_python(list(groups), mode="json", by_alias=True, exclude_none=True)


def dump_json(groups: Sequence[ImageGroup]) -> str:
    return _GROUPS.dump_json(list(groups), by_alias=True, exclude_none=True, indent=2).decode("utf-8")


def write_static_json(groups: Sequence[ImageGroup], path: Path) -> Path:
    """Write the groups to `path`, creating parent directories.

    Args:
        groups: Finalized timeline groups.
        path: Destination file.

    Returns:
        The path written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_json(groups), encoding="utf-8")
    log.info("Saved: %s (%d groups)", path, len(groups))
    return path
