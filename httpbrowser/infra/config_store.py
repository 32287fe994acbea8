import json
import os

from httpbrowser.constants import DEFAULT_FOLLOW_REDIRECTS, DEFAULT_MAX_REDIRECTS
from httpbrowser.paths import CONFIG_DIR, CONFIG_FILE


class Config:
    """Persistent browser configuration."""

    def __init__(self):
        self.load_error = None
        self.data = {
            "max_redirects": DEFAULT_MAX_REDIRECTS,
            "follow_redirects": DEFAULT_FOLLOW_REDIRECTS,
            "automatic_headers": {},
        }
        self.load()

    def load(self):
        self.load_error = None
        if os.path.exists(CONFIG_FILE):
            try:
                with open(CONFIG_FILE, "r", encoding="utf-8") as f:
                    saved = json.load(f)
                if not isinstance(saved, dict):
                    raise ValueError("Config payload must be a JSON object.")
                self.data.update(saved)
            except (OSError, json.JSONDecodeError, TypeError, ValueError) as exc:
                self.load_error = str(exc)

    def save(self):
        os.makedirs(CONFIG_DIR, exist_ok=True)
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def set(self, key, value):
        self.data[key] = value
        self.save()

    def max_redirects(self) -> int:
        try:
            return max(0, int(self.get("max_redirects", DEFAULT_MAX_REDIRECTS)))
        except (TypeError, ValueError):
            return DEFAULT_MAX_REDIRECTS

    def follow_redirects(self) -> bool:
        value = self.get("follow_redirects", DEFAULT_FOLLOW_REDIRECTS)
        if isinstance(value, bool):
            return value
        return DEFAULT_FOLLOW_REDIRECTS

    def automatic_headers(self) -> dict:
        headers = self.get("automatic_headers")
        if not isinstance(headers, dict):
            return {}
        return {str(name): str(value) for name, value in headers.items()}
