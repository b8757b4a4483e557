"""Configuration helpers and Settings container.

This module provides the `ClusterConfig` thresholds used by the merge pass,
a `Settings` dataclass for paths and the HTTP listener, and `get_settings`
which reads them from the environment (a `.env` file at the project root is
loaded first).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os

from dotenv import load_dotenv

from gallery_timeline.logging_config import parse_level

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")

DEFAULT_MIN_GROUP_SIZE = 7
DEFAULT_MAX_MONTHS_DISTANCE = 3
# Clause 3 distance bound; shares its default with DEFAULT_MIN_GROUP_SIZE.
DEFAULT_PAIR_MAX_MONTHS = 7


@dataclass(frozen=True)
class ClusterConfig:
    """Thresholds for merging neighbouring month groups.

    Attributes:
        min_group_size: Groups smaller than this pull in close neighbours.
        max_months_distance: Month gap bridged when either side is small.
        pair_max_months: Month gap bridged when two groups together stay
            within twice `min_group_size`.
    """
    min_group_size: int = DEFAULT_MIN_GROUP_SIZE
    max_months_distance: int = DEFAULT_MAX_MONTHS_DISTANCE
    pair_max_months: int = DEFAULT_PAIR_MAX_MONTHS

    def __post_init__(self) -> None:
        if self.min_group_size < 1:
            raise ValueError("min_group_size must be >= 1")
        if self.max_months_distance < 0:
            raise ValueError("max_months_distance must be >= 0")
        if self.pair_max_months < 0:
            raise ValueError("pair_max_months must be >= 0")


@dataclass(frozen=True)
class Settings:
    """Container for gallery configuration read from the environment.

    Attributes:
        image_dir: Directory holding the dated image files.
        output_path: Destination of the static JSON artifact.
        public_dir: Directory served as static files by the HTTP app.
        log_path: File the CLI writes logs to.
        log_level: Logging level name, e.g. "INFO".
        min_group_size: See `ClusterConfig`.
        max_months_distance: See `ClusterConfig`.
        pair_max_months: See `ClusterConfig`.
        host: HTTP listen address.
        port: HTTP listen port.
    """
    image_dir: Path
    output_path: Path
    public_dir: Path
    log_path: Path
    log_level: str
    min_group_size: int
    max_months_distance: int
    pair_max_months: int
    host: str
    port: int

    def cluster_config(self) -> ClusterConfig:
        """Return the merge thresholds as a `ClusterConfig`."""
        return ClusterConfig(
            min_group_size=self.min_group_size,
            max_months_distance=self.max_months_distance,
            pair_max_months=self.pair_max_months,
        )


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}.") from None


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if a numeric variable is set to a non-integer value or
            `LOG_LEVEL` is not a level name.
    """
    public_dir = Path(os.getenv("PUBLIC_DIR", "public"))
    image_dir = Path(os.getenv("IMAGE_DIR", str(public_dir / "imgs")))
    output_path = Path(os.getenv("OUTPUT_PATH", str(public_dir / "data" / "images.json")))
    log_path = Path(os.getenv("LOG_PATH", "logs/gallery.log"))
    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    try:
        parse_level(log_level)
    except ValueError:
        raise RuntimeError(f"LOG_LEVEL must be a logging level name, got {log_level!r}.") from None

    return Settings(
        image_dir=image_dir,
        output_path=output_path,
        public_dir=public_dir,
        log_path=log_path,
        log_level=log_level,
        min_group_size=_int_env("MIN_GROUP_SIZE", DEFAULT_MIN_GROUP_SIZE),
        max_months_distance=_int_env("MAX_MONTHS_DISTANCE", DEFAULT_MAX_MONTHS_DISTANCE),
        pair_max_months=_int_env("PAIR_MAX_MONTHS", DEFAULT_PAIR_MAX_MONTHS),
        host=os.getenv("HOST", "127.0.0.1"),
        port=_int_env("PORT", 3000),
    )
