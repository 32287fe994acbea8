"""Scriptable HTTP browser with pluggable request engines."""

from . import browser, constants, domain, errors, infra, paths

__all__ = [
    "browser",
    "constants",
    "domain",
    "errors",
    "infra",
    "paths",
]
