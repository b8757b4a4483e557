"""Serialization of timeline groups to the JSON wire shape."""
