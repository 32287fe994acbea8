import pytest

from httpbrowser.browser.headers import AutomaticHeaders
from httpbrowser.domain.messages import Request
from httpbrowser.errors import ValidationError


def test_add_replaces_case_insensitively():
    headers = AutomaticHeaders()
    headers.add("X-Token", "one")
    headers.add("x-token", "two")

    assert len(headers) == 1
    assert headers.items() == [("x-token", "two")]


def test_remove_missing_header_is_noop():
    headers = AutomaticHeaders({"Accept": "text/html"})
    headers.remove("X-Missing")
    headers.remove("ACCEPT")

    assert "Accept" not in headers
    assert len(headers) == 0


def test_add_rejects_empty_name():
    with pytest.raises(ValidationError):
        AutomaticHeaders().add("  ", "value")


def test_apply_to_overwrites_and_leaves_original_untouched():
    headers = AutomaticHeaders({"Content-Type": "text/plain", "X-Extra": 5})
    original = Request("http://localhost/", headers={"content-type": "application/json", "Accept": "*/*"})

    applied = headers.apply_to(original)

    assert applied.headers.get_all("Content-Type") == ["text/plain"]
    assert applied.get_header_line("X-Extra") == "5"
    assert applied.get_header_line("Accept") == "*/*"
    assert original.get_header_line("Content-Type") == "application/json"
    assert not original.has_header("X-Extra")


def test_clear_removes_everything():
    headers = AutomaticHeaders({"A": "1", "B": "2"})
    headers.clear()

    request = headers.apply_to(Request("http://localhost/"))
    assert len(request.headers) == 0


def test_remove_normalizes_name_like_add():
    headers = AutomaticHeaders()
    headers.add(" X-Token ", "abc")
    headers.remove(" x-token ")

    assert "X-Token" not in headers
    assert len(headers) == 0
