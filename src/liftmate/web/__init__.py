"""Web API for liftmate."""

from .app import create_app

__all__ = ["create_app"]
