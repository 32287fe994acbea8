"""Infrastructure modules for httpbrowser."""

from . import config_store

__all__ = ["config_store"]
