"""Flask app serving the gallery front end and the `/api/images` endpoint.

The timeline is rebuilt from the image directory on every request.
"""

from __future__ import annotations

import logging

from flask import Flask, jsonify

from gallery_timeline.config import Settings, get_settings
from gallery_timeline.errors import GalleryError
from gallery_timeline.export.write_static import to_wire
from gallery_timeline.timeline import scan_timeline

log = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> Flask:
    """Build the Flask app.

    Args:
        settings: Configuration; read from the environment when omitted.
    """
    settings = settings or get_settings()

    app = Flask(
        __name__,
        static_folder=str(settings.public_dir.resolve()),
        static_url_path="",
    )
    # Keep the wire field order.
    app.json.sort_keys = False  # type: ignore[attr-defined]

    @app.get("/api/images")
    def api_images():
        try:
            groups = scan_timeline(settings.image_dir, settings.cluster_config())
        except GalleryError as e:
            log.error("Failed to build image groups: %s", e.message)
            return jsonify({"error": e.message}), 500
        return jsonify(to_wire(groups))

    return app
