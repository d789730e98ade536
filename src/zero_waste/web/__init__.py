"""Interactive web front end."""

from .app import create_app, reload_catalog

__all__ = ["create_app", "reload_catalog"]
