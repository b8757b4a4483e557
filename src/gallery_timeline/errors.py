"""Exceptions raised by the gallery pipeline."""

from __future__ import annotations

from pathlib import Path


class GalleryError(Exception):
    """Base class for gallery pipeline failures."""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidDateToken(GalleryError, ValueError):
    """Raised when a filename does not start with a valid `YYYY-MM` token.

    Handled inside the parser: the offending item is dropped, never fatal.
    """
    def __init__(self, identifier: str, token: str):
        super().__init__(f"Invalid date token {token!r} in {identifier!r}")
        self.identifier = identifier
        self.token = token


class SourceUnavailable(GalleryError, RuntimeError):
    """Raised when the image listing cannot be read."""
    def __init__(self, path: Path, reason: str):
        super().__init__(f"Image source {str(path)!r} is unavailable: {reason}")
        self.path = path
