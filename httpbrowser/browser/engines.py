from abc import ABC, abstractmethod


class RequestEngine(ABC):
    @abstractmethod
    def send_request(self, request):
        """Send one request and return the response, or raise.

        Engines must not follow redirects: a 3xx response is returned as-is
        and the browser decides what to do with it. Network-level failures
        should be raised as ``TransportError``.
        """


class CallableEngine(RequestEngine):
    """Adapts a plain ``func(request) -> response`` to the engine interface."""

    def __init__(self, func):
        if not callable(func):
            raise TypeError("CallableEngine requires a callable.")
        self.func = func

    def send_request(self, request):
        return self.func(request)

    def __repr__(self):
        return f"CallableEngine({self.func!r})"


def is_request_engine(candidate) -> bool:
    return isinstance(candidate, RequestEngine) or callable(getattr(candidate, "send_request", None))


__all__ = ["CallableEngine", "RequestEngine", "is_request_engine"]
