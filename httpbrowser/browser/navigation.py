from urllib.parse import parse_qsl, urlencode, urljoin, urlsplit, urlunsplit

from httpbrowser.browser.errors import BrowserNavigationError
from httpbrowser.constants import ALLOWED_SCHEMES


def normalize_uri(uri) -> str:
    normalized = str(uri if uri is not None else "").strip()
    if not normalized:
        raise BrowserNavigationError("Empty URI cannot be requested.")

    try:
        parts = urlsplit(normalized)
    except ValueError as exc:
        raise BrowserNavigationError(f"Malformed URI: {normalized}") from exc

    scheme = (parts.scheme or "").lower()
    if scheme not in ALLOWED_SCHEMES:
        raise BrowserNavigationError(f"Unsupported URI scheme: {scheme or '(none)'}")
    if not parts.netloc:
        raise BrowserNavigationError(f"URI has no host: {normalized}")

    return urlunsplit((scheme, _lower_host(parts.netloc), parts.path or "/", parts.query, ""))


def _lower_host(netloc: str) -> str:
    userinfo, at, hostport = netloc.rpartition("@")
    return f"{userinfo}{at}{hostport.lower()}"


def resolve_location(base_uri: str, location: str) -> str:
    target = (location or "").strip()
    if not target:
        raise BrowserNavigationError("Redirect response carries an empty Location header.")
    return normalize_uri(urljoin(base_uri, target))


def with_query_arguments(uri: str, arguments) -> str:
    if not arguments:
        return uri
    parts = urlsplit(uri)
    query = parse_qsl(parts.query, keep_blank_values=True)
    query.extend(_argument_pairs(arguments))
    return urlunsplit(parts._replace(query=urlencode(query)))


def encode_form_arguments(arguments) -> bytes:
    return urlencode(_argument_pairs(arguments)).encode("utf-8")


def _argument_pairs(arguments):
    pairs = []
    for name, value in dict(arguments).items():
        if isinstance(value, (list, tuple)):
            pairs.extend((str(name), str(item)) for item in value)
        else:
            pairs.append((str(name), "" if value is None else str(value)))
    return pairs
