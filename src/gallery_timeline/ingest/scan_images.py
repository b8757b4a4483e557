"""Directory listing for the image source."""

from __future__ import annotations

import logging
from pathlib import Path

from gallery_timeline.errors import SourceUnavailable

log = logging.getLogger(__name__)


def list_image_dir(image_dir: Path) -> list[str]:
    """Return the sorted file names found directly inside `image_dir`.

    Sub-directories are skipped. No filtering by suffix happens here; the
    parser decides which names are images.

    Args:
        image_dir: Directory to list.

    Returns:
        File names (not paths), sorted.

    Raises:
        SourceUnavailable: if the directory is missing or cannot be read.
    """
    if not image_dir.exists():
        raise SourceUnavailable(image_dir, "directory does not exist")
    if not image_dir.is_dir():
        raise SourceUnavailable(image_dir, "not a directory")

    try:
        names = sorted(p.name for p in image_dir.iterdir() if p.is_file())
    except OSError as e:
        raise SourceUnavailable(image_dir, str(e)) from e

    log.info("Listed %d files in %s", len(names), image_dir)
    return names
