import pytest

from httpbrowser.browser.engines import CallableEngine, RequestEngine, is_request_engine
from httpbrowser.domain.messages import Request, Response


def test_request_engine_is_abstract():
    with pytest.raises(TypeError):
        RequestEngine()


def test_subclass_implementing_send_request_is_an_engine():
    class _Engine(RequestEngine):
        def send_request(self, request):
            return Response(200)

    engine = _Engine()
    assert is_request_engine(engine)
    assert engine.send_request(Request("http://localhost/")).status_code == 200


def test_duck_typed_engine_is_accepted():
    class _Duck:
        def send_request(self, request):
            return None

    assert is_request_engine(_Duck())
    assert not is_request_engine(lambda request: None)
    assert not is_request_engine(object())


def test_callable_engine_delegates():
    engine = CallableEngine(lambda request: Response(418, body=request.uri))

    response = engine.send_request(Request("http://localhost/teapot"))

    assert response.status_code == 418
    assert response.body == b"http://localhost/teapot"


def test_callable_engine_requires_callable():
    with pytest.raises(TypeError):
        CallableEngine("not callable")
