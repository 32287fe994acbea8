import logging
from dataclasses import dataclass

from httpbrowser.browser.engines import CallableEngine, is_request_engine
from httpbrowser.browser.errors import (
    BrowserConfigurationError,
    RedirectionLoopError,
    TooManyRedirectsError,
)
from httpbrowser.browser.headers import AutomaticHeaders
from httpbrowser.browser.navigation import (
    encode_form_arguments,
    normalize_uri,
    resolve_location,
    with_query_arguments,
)
from httpbrowser.constants import (
    BODYLESS_METHODS,
    DEFAULT_FOLLOW_REDIRECTS,
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_METHOD,
    FORM_CONTENT_TYPE,
)
from httpbrowser.domain.messages import Request, redirect_location
from httpbrowser.errors import ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BrowsingResult:
    request: Request
    response: object
    history: tuple[str, ...] = ()

    @property
    def redirect_count(self) -> int:
        return max(0, len(self.history) - 1)


class Browser:
    """Sends requests through a request engine and follows redirects.

    One instance serves many calls, but not concurrently: the last
    request/response and the redirect history belong to the instance.
    """

    def __init__(
        self,
        request_engine=None,
        max_redirects=DEFAULT_MAX_REDIRECTS,
        follow_redirects=DEFAULT_FOLLOW_REDIRECTS,
        automatic_headers=None,
    ):
        self._request_engine = None
        self._automatic_headers = AutomaticHeaders(automatic_headers)
        self._redirect_history = []
        self.max_redirects = DEFAULT_MAX_REDIRECTS
        self.follow_redirects = bool(follow_redirects)
        self.last_request = None
        self.last_response = None
        self.set_maximum_redirections(max_redirects)
        if request_engine is not None:
            self.set_request_engine(request_engine)

    @classmethod
    def from_config(cls, config, request_engine=None):
        return cls(
            request_engine=request_engine,
            max_redirects=config.max_redirects(),
            follow_redirects=config.follow_redirects(),
            automatic_headers=config.automatic_headers(),
        )

    def set_request_engine(self, request_engine) -> None:
        if is_request_engine(request_engine):
            self._request_engine = request_engine
        elif callable(request_engine):
            self._request_engine = CallableEngine(request_engine)
        else:
            raise BrowserConfigurationError(
                f"Not a request engine: {type(request_engine).__name__}"
            )

    def get_request_engine(self):
        return self._request_engine

    def set_follow_redirects(self, follow_redirects: bool) -> None:
        self.follow_redirects = bool(follow_redirects)

    def set_maximum_redirections(self, max_redirects: int) -> None:
        try:
            value = int(max_redirects)
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid redirect ceiling: {max_redirects!r}") from exc
        if value < 0:
            raise ValidationError("Redirect ceiling cannot be negative.")
        self.max_redirects = value

    def add_automatic_request_header(self, name: str, value) -> None:
        self._automatic_headers.add(name, value)

    def remove_automatic_request_header(self, name: str) -> None:
        self._automatic_headers.remove(name)

    def get_last_request(self):
        return self.last_request

    def get_last_response(self):
        return self.last_response

    @property
    def redirect_history(self) -> tuple[str, ...]:
        return tuple(self._redirect_history)

    def request(self, uri_or_request, method=DEFAULT_METHOD, arguments=None, content=None, headers=None):
        return self.fetch(
            uri_or_request,
            method=method,
            arguments=arguments,
            content=content,
            headers=headers,
        ).response

    def fetch(self, uri_or_request, method=DEFAULT_METHOD, arguments=None, content=None, headers=None):
        engine = self._ensure_engine_ready()
        self.last_request = None
        self.last_response = None
        self._redirect_history = []
        current = self._build_request(uri_or_request, method, arguments, content, headers)

        self._redirect_history = [current.uri]
        redirects = 0

        while True:
            current = self._automatic_headers.apply_to(current)
            self.last_request = current
            logger.debug("Sending %s %s (hop %s)", current.method, current.uri, redirects + 1)
            response = engine.send_request(current)
            self.last_response = response

            location = self._redirect_location(response)
            if location is None:
                return BrowsingResult(current, response, tuple(self._redirect_history))

            target = resolve_location(current.uri, location)
            if target in self._redirect_history:
                logger.warning("Redirection loop at %s after %s request(s)", target, redirects + 1)
                raise RedirectionLoopError(target, self._redirect_history)
            if redirects >= self.max_redirects:
                logger.warning("Redirect ceiling of %s reached at %s", self.max_redirects, target)
                raise TooManyRedirectsError(self.max_redirects, self._redirect_history + [target])

            logger.debug("Following %s redirect to %s", _status_of(response), target)
            self._redirect_history.append(target)
            redirects += 1
            current = Request(uri=target)

    def _redirect_location(self, response):
        if not self.follow_redirects:
            return None
        return redirect_location(response)

    def _build_request(self, uri_or_request, method, arguments, content, headers):
        if isinstance(uri_or_request, Request):
            if arguments or content is not None:
                raise ValidationError("Arguments and content cannot be combined with a prepared request.")
            request = uri_or_request.with_uri(normalize_uri(uri_or_request.uri))
        else:
            request = self._request_from_uri(normalize_uri(uri_or_request), method, arguments, content)

        for name, value in (headers or {}).items():
            request = request.with_header(name, value)
        return request

    @staticmethod
    def _request_from_uri(uri, method, arguments, content):
        method = str(method or DEFAULT_METHOD).upper()
        if content is not None:
            return Request(uri=with_query_arguments(uri, arguments), method=method, body=content)
        if arguments and method not in BODYLESS_METHODS:
            return Request(
                uri=uri,
                method=method,
                headers={"Content-Type": FORM_CONTENT_TYPE},
                body=encode_form_arguments(arguments),
            )
        return Request(uri=with_query_arguments(uri, arguments), method=method)

    def _ensure_engine_ready(self):
        if self._request_engine is not None:
            return self._request_engine
        raise BrowserConfigurationError("No request engine configured; call set_request_engine() first.")


def _status_of(response):
    try:
        return int(getattr(response, "status_code"))
    except (AttributeError, TypeError, ValueError):
        return None


__all__ = ["Browser", "BrowsingResult"]
