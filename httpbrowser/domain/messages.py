"""Immutable HTTP message values exchanged between the browser and request engines."""

from dataclasses import dataclass, field, replace

from requests.structures import CaseInsensitiveDict

from httpbrowser.constants import DEFAULT_METHOD, REDIRECT_STATUS_MAX, REDIRECT_STATUS_MIN


def _as_values(value) -> tuple[str, ...]:
    if isinstance(value, (list, tuple)):
        return tuple(str(item) for item in value)
    return (str(value),)


class Headers:
    """Ordered, case-insensitive, multi-value header collection.

    Instances are never modified in place: every ``with_*`` method returns a
    new collection. Names keep the casing of their most recent write.
    """

    def __init__(self, data=None):
        self._store = CaseInsensitiveDict()
        if data is None:
            return
        if isinstance(data, Headers):
            self._store = data._store.copy()
            return
        pairs = data.items() if hasattr(data, "items") else data
        for name, value in pairs:
            name = str(name).strip()
            if not name:
                continue
            existing = self._store.get(name, ())
            self._store[name] = existing + _as_values(value)

    def _copy(self):
        clone = Headers()
        clone._store = self._store.copy()
        return clone

    def has(self, name: str) -> bool:
        return name in self._store

    def get_all(self, name: str) -> list[str]:
        return list(self._store.get(name, ()))

    def get_line(self, name: str) -> str:
        return ", ".join(self._store.get(name, ()))

    def get(self, name: str, default=None):
        if name not in self._store:
            return default
        return self.get_line(name)

    def with_header(self, name: str, value) -> "Headers":
        clone = self._copy()
        clone._store[name] = _as_values(value)
        return clone

    def with_added_header(self, name: str, value) -> "Headers":
        clone = self._copy()
        existing = clone._store.get(name, ())
        clone._store[name] = existing + _as_values(value)
        return clone

    def without_header(self, name: str) -> "Headers":
        if name not in self._store:
            return self
        clone = self._copy()
        del clone._store[name]
        return clone

    def items(self):
        for name in self._store:
            yield name, self.get_line(name)

    def __contains__(self, name) -> bool:
        return name in self._store

    def __iter__(self):
        return iter(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Headers):
            return NotImplemented
        return dict(self._store.lower_items()) == dict(other._store.lower_items())

    def __hash__(self):
        return hash(tuple(sorted(self._store.lower_items())))

    def __repr__(self) -> str:
        return f"Headers({dict(self.items())!r})"


def _coerce_headers(value) -> Headers:
    if isinstance(value, Headers):
        return value
    return Headers(value)


def _coerce_body(value) -> bytes:
    if value is None:
        return b""
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


@dataclass(frozen=True)
class Request:
    uri: str
    method: str = DEFAULT_METHOD
    headers: Headers = field(default_factory=Headers)
    body: bytes = b""

    def __post_init__(self):
        object.__setattr__(self, "uri", str(self.uri))
        object.__setattr__(self, "method", str(self.method or DEFAULT_METHOD).upper())
        object.__setattr__(self, "headers", _coerce_headers(self.headers))
        object.__setattr__(self, "body", _coerce_body(self.body))

    def has_header(self, name: str) -> bool:
        return self.headers.has(name)

    def get_header_line(self, name: str) -> str:
        return self.headers.get_line(name)

    def with_header(self, name: str, value) -> "Request":
        return replace(self, headers=self.headers.with_header(name, value))

    def with_added_header(self, name: str, value) -> "Request":
        return replace(self, headers=self.headers.with_added_header(name, value))

    def without_header(self, name: str) -> "Request":
        return replace(self, headers=self.headers.without_header(name))

    def with_uri(self, uri: str) -> "Request":
        return replace(self, uri=uri)

    def with_method(self, method: str) -> "Request":
        return replace(self, method=method)

    def with_body(self, body) -> "Request":
        return replace(self, body=body)


@dataclass(frozen=True)
class Response:
    status_code: int = 200
    headers: Headers = field(default_factory=Headers)
    body: bytes = b""

    def __post_init__(self):
        object.__setattr__(self, "status_code", int(self.status_code))
        object.__setattr__(self, "headers", _coerce_headers(self.headers))
        object.__setattr__(self, "body", _coerce_body(self.body))

    @property
    def location(self) -> str | None:
        return self.headers.get("Location")

    @property
    def is_redirect(self) -> bool:
        return redirect_location(self) is not None

    def has_header(self, name: str) -> bool:
        return self.headers.has(name)

    def get_header_line(self, name: str) -> str:
        return self.headers.get_line(name)


def redirect_location(response):
    """Return the Location of a 3xx response, or None when it is not a redirect.

    Works for any object with ``status_code`` and a mapping-like ``headers``;
    plain mappings are looked up case-insensitively.
    """
    try:
        status = int(getattr(response, "status_code"))
    except (AttributeError, TypeError, ValueError):
        return None
    if not REDIRECT_STATUS_MIN <= status <= REDIRECT_STATUS_MAX:
        return None

    headers = getattr(response, "headers", None)
    if not hasattr(headers, "get"):
        return None
    if not isinstance(headers, (Headers, CaseInsensitiveDict)):
        headers = CaseInsensitiveDict(headers)
    return headers.get("Location") or None


__all__ = ["Headers", "Request", "Response", "redirect_location"]
