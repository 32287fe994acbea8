from requests.structures import CaseInsensitiveDict

from httpbrowser.errors import ValidationError


class AutomaticHeaders:
    """Headers set on every request the browser dispatches.

    Names compare case-insensitively and hold a single value; the latest
    ``add`` wins. Registered values overwrite same-named headers already on
    the request.
    """

    def __init__(self, initial=None):
        self._headers = CaseInsensitiveDict()
        for name, value in (initial or {}).items():
            self.add(name, value)

    def add(self, name: str, value) -> None:
        key = str(name or "").strip()
        if not key:
            raise ValidationError("Automatic header name cannot be empty.")
        self._headers.pop(key, None)
        self._headers[key] = str(value)

    def remove(self, name: str) -> None:
        self._headers.pop(str(name or "").strip(), None)

    def clear(self) -> None:
        self._headers.clear()

    def items(self):
        return list(self._headers.items())

    def apply_to(self, request):
        for name, value in self._headers.items():
            request = request.with_header(name, value)
        return request

    def __contains__(self, name) -> bool:
        return name in self._headers

    def __len__(self) -> int:
        return len(self._headers)
