import dataclasses

import pytest

from httpbrowser.domain.messages import Headers, Request, Response, redirect_location


def test_headers_are_case_insensitive_and_multi_valued():
    headers = Headers([("Accept", "text/html"), ("accept", "application/json"), ("X-One", 1)])

    assert headers.has("ACCEPT")
    assert headers.get_all("Accept") == ["text/html", "application/json"]
    assert headers.get_line("accept") == "text/html, application/json"
    assert headers.get("x-one") == "1"
    assert headers.get("Missing", "fallback") == "fallback"
    assert len(headers) == 2


def test_headers_with_methods_return_new_collections():
    original = Headers({"Cookie": ["a=1", "b=2"]})

    replaced = original.with_header("cookie", "c=3")
    added = original.with_added_header("COOKIE", "d=4")
    removed = original.without_header("Cookie")

    assert original.get_all("Cookie") == ["a=1", "b=2"]
    assert replaced.get_all("Cookie") == ["c=3"]
    assert added.get_all("Cookie") == ["a=1", "b=2", "d=4"]
    assert not removed.has("Cookie")
    assert original.without_header("Missing") is original


def test_headers_equality_ignores_name_case():
    assert Headers({"Content-Type": "text/plain"}) == Headers({"content-type": "text/plain"})
    assert Headers({"A": "1"}) != Headers({"A": "2"})


def test_headers_copy_preserves_multiple_values():
    original = Headers({"Via": ["a", "b"]})
    assert Headers(original).get_all("Via") == ["a", "b"]


def test_request_normalizes_fields():
    request = Request("http://localhost/", method="post", headers={"X-A": "1"}, body="héllo")

    assert request.method == "POST"
    assert isinstance(request.headers, Headers)
    assert request.body == "héllo".encode("utf-8")


def test_request_is_immutable():
    request = Request("http://localhost/")

    with pytest.raises(dataclasses.FrozenInstanceError):
        request.uri = "http://elsewhere/"

    changed = request.with_header("X-A", "1").with_uri("http://elsewhere/").with_method("delete")
    assert request.uri == "http://localhost/"
    assert not request.has_header("X-A")
    assert changed.method == "DELETE"
    assert changed.get_header_line("X-A") == "1"


def test_response_location_and_redirect_flag():
    assert Response(301, {"location": "/next"}).is_redirect
    assert Response(301, {"Location": "/next"}).location == "/next"
    assert not Response(301).is_redirect
    assert not Response(201, {"Location": "/created"}).is_redirect
    assert Response().location is None
    assert Response().status_code == 200


def test_redirect_location_accepts_response_like_objects():
    class _Loose:
        def __init__(self, status_code, headers):
            self.status_code = status_code
            self.headers = headers

    assert redirect_location(_Loose(302, {"location": "/next"})) == "/next"
    assert redirect_location(_Loose(200, {"Location": "/next"})) is None
    assert redirect_location(_Loose("junk", {"Location": "/next"})) is None
    assert redirect_location(_Loose(301, None)) is None
    assert redirect_location(Response(308, {"LOCATION": "/moved"})) == "/moved"
