"""Browser subsystem: request dispatch, automatic headers and redirect following."""

from httpbrowser.browser.engines import CallableEngine, RequestEngine
from httpbrowser.browser.errors import (
    BrowserConfigurationError,
    BrowserError,
    BrowserNavigationError,
    InfiniteRedirectionError,
    RedirectionLoopError,
    TooManyRedirectsError,
    TransportError,
)
from httpbrowser.browser.headers import AutomaticHeaders
from httpbrowser.browser.host import Browser, BrowsingResult
from httpbrowser.browser.navigation import normalize_uri, resolve_location

__all__ = [
    "AutomaticHeaders",
    "Browser",
    "BrowserConfigurationError",
    "BrowserError",
    "BrowserNavigationError",
    "BrowsingResult",
    "CallableEngine",
    "InfiniteRedirectionError",
    "RedirectionLoopError",
    "RequestEngine",
    "TooManyRedirectsError",
    "TransportError",
    "normalize_uri",
    "resolve_location",
]
