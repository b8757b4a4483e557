"""Command-line interface for the gallery timeline.

Provides subcommands: `generate`, `show`, and `serve`. Each command is
implemented as a `cmd_*` function that accepts an argparse namespace.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from dotenv import load_dotenv

from gallery_timeline.config import ClusterConfig, Settings, get_settings
from gallery_timeline.errors import SourceUnavailable
from gallery_timeline.export.write_static import write_static_json
from gallery_timeline.logging_config import configure_logging
from gallery_timeline.server import create_app
from gallery_timeline.timeline import scan_timeline

log = logging.getLogger(__name__)


# --------------------------------------------------
# Helpers
# --------------------------------------------------
def _cluster_config(args: argparse.Namespace, s: Settings) -> ClusterConfig:
    """Return thresholds from settings, overridden by any CLI flags given."""
    return ClusterConfig(
        min_group_size=args.min_group_size if args.min_group_size is not None else s.min_group_size,
        max_months_distance=(
            args.max_months_distance if args.max_months_distance is not None else s.max_months_distance
        ),
        pair_max_months=args.pair_max_months if args.pair_max_months is not None else s.pair_max_months,
    )


def _int_at_least(minimum: int):
    """Return an argparse `type` accepting integers >= `minimum`."""
    def check(raw: str) -> int:
        try:
            value = int(raw)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid int value: {raw!r}") from None
        if value < minimum:
            raise argparse.ArgumentTypeError(f"must be >= {minimum}, got {value}")
        return value
    return check


def _image_dir(args: argparse.Namespace, s: Settings) -> Path:
    return args.image_dir if args.image_dir is not None else s.image_dir


# --------------------------------------------------
# GENERATE
# --------------------------------------------------
def cmd_generate(args: argparse.Namespace) -> None:
    """Cluster the image directory and write the static JSON artifact.

    Args:
        args: argparse namespace with `image_dir`, `output` and thresholds.
    """
    s = get_settings()
    groups = scan_timeline(_image_dir(args, s), _cluster_config(args, s))
    output = args.output if args.output is not None else s.output_path
    write_static_json(groups, output)
    log.info("Successfully generated static JSON file")


# --------------------------------------------------
# SHOW
# --------------------------------------------------
def cmd_show(args: argparse.Namespace) -> None:
    """Log one line per timeline group."""
    s = get_settings()
    groups = scan_timeline(_image_dir(args, s), _cluster_config(args, s))

    if not groups:
        log.warning("No dated images found.")
        return

    for g in groups:
        log.info("%s | %d images | center %s", g.label, g.size, g.center_date.date().isoformat())


# --------------------------------------------------
# SERVE
# --------------------------------------------------
def cmd_serve(args: argparse.Namespace) -> None:
    """Run the HTTP app serving `/api/images` and the public directory."""
    s = get_settings()
    host = args.host if args.host is not None else s.host
    port = args.port if args.port is not None else s.port
    log.info("Gallery app listening at http://%s:%d", host, port)
    create_app(s).run(host=host, port=port)


# --------------------------------------------------
# CLI
# --------------------------------------------------
def _add_cluster_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--image-dir", type=Path, default=None)
    p.add_argument("--min-group-size", type=_int_at_least(1), default=None)
    p.add_argument("--max-months-distance", type=_int_at_least(0), default=None)
    p.add_argument("--pair-max-months", type=_int_at_least(0), default=None)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser for the CLI.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    p = argparse.ArgumentParser(prog="gallery-timeline")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_generate = sub.add_parser("generate")
    _add_cluster_args(p_generate)
    p_generate.add_argument("--output", type=Path, default=None)

    p_show = sub.add_parser("show")
    _add_cluster_args(p_show)

    p_serve = sub.add_parser("serve")
    p_serve.add_argument("--host", default=None)
    p_serve.add_argument("--port", type=_int_at_least(0), default=None)

    return p


def main(argv: list[str] | None = None) -> None:
    """CLI entry point: parse args, configure logging and dispatch commands."""
    load_dotenv()
    args = build_parser().parse_args(argv)
    s = get_settings()
    configure_logging(s.log_path, s.log_level)

    try:
        if args.cmd == "generate":
            cmd_generate(args)
        elif args.cmd == "show":
            cmd_show(args)
        elif args.cmd == "serve":
            cmd_serve(args)
        else:
            raise SystemExit(2)
    except SourceUnavailable as e:
        log.error("Error generating image groups: %s", e.message)
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()
