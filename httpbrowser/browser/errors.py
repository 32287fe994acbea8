from httpbrowser.errors import ConfigurationError, ExternalServiceError, ProjectError, ValidationError


class BrowserError(ProjectError):
    """Base browser subsystem error."""


class BrowserConfigurationError(BrowserError, ConfigurationError):
    """Raised when the browser has no usable request engine."""


class BrowserNavigationError(BrowserError, ValidationError):
    """Raised for URIs the browser cannot request."""


class TransportError(BrowserError, ExternalServiceError):
    """Raised by request engines for network-level failures."""


class InfiniteRedirectionError(BrowserError):
    """Base for redirect chains the browser refuses to follow."""

    def __init__(self, message, history=()):
        super().__init__(message)
        self.history = tuple(history)


class RedirectionLoopError(InfiniteRedirectionError):
    """Raised when a redirect points back to a URI already visited."""

    def __init__(self, uri, history=()):
        super().__init__(f"Redirection loop detected at {uri} after {len(history)} request(s).", history)
        self.uri = uri


class TooManyRedirectsError(InfiniteRedirectionError):
    """Raised when a redirect chain exceeds the configured ceiling."""

    def __init__(self, max_redirects, history=()):
        super().__init__(f"Exceeded the maximum of {max_redirects} redirect(s).", history)
        self.max_redirects = max_redirects


__all__ = [
    "BrowserConfigurationError",
    "BrowserError",
    "BrowserNavigationError",
    "InfiniteRedirectionError",
    "RedirectionLoopError",
    "TooManyRedirectsError",
    "TransportError",
]
