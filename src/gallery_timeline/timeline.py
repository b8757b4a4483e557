"""Run the full clustering pipeline: parse → group → merge → finalize."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from gallery_timeline.cluster.finalize import finalize_groups
from gallery_timeline.cluster.group_months import group_by_month
from gallery_timeline.cluster.merge_groups import merge_groups
from gallery_timeline.config import ClusterConfig
from gallery_timeline.ingest.parse_filename import parse_identifiers
from gallery_timeline.ingest.scan_images import list_image_dir
from gallery_timeline.models import ImageGroup

log = logging.getLogger(__name__)


def build_timeline(names: Iterable[str], config: ClusterConfig | None = None) -> list[ImageGroup]:
    """Cluster a listing of image filenames into timeline groups.

    Names that are not images are ignored and names with an unparseable
    date are dropped; neither aborts the run.

    Args:
        names: Filenames, in any order.
        config: Merge thresholds; defaults to `ClusterConfig()`.

    Returns:
        Finalized groups ascending by `start_date`.
    """
    parsed = parse_identifiers(names)
    groups = group_by_month(parsed.records)
    return finalize_groups(merge_groups(groups, config))


def scan_timeline(image_dir: Path, config: ClusterConfig | None = None) -> list[ImageGroup]:
    """List `image_dir` and cluster its images.

    Raises:
        SourceUnavailable: if the directory cannot be read.
    """
    groups = build_timeline(list_image_dir(image_dir), config)
    log.info("Built %d timeline groups from %s", len(groups), image_dir)
    return groups
