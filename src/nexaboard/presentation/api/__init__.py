"""HTTP API for Nexaboard."""

from nexaboard.presentation.api.app import API_PREFIX, create_app

__all__ = ["API_PREFIX", "create_app"]
