"""Domain values shared by the browser and request engines."""

from httpbrowser.domain.messages import Headers, Request, Response, redirect_location

__all__ = ["Headers", "Request", "Response", "redirect_location"]
