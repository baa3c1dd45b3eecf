"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields so the client can be
constructed without any setup when pointed at a local development
server.  Deployments differ only in ``EVENTS_API_URL``; there is a
single client implementation regardless of environment.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    return float(raw)


@dataclass
class Settings:
    """Client settings loaded from environment variables."""

    # Scheme and host of the events service, e.g. ``https://events.example.com``.
    api_url: str = os.getenv("EVENTS_API_URL", "http://localhost:5000")
    events_path: str = os.getenv("EVENTS_API_PATH", "/api/Events")

    # Seconds to wait for a response.  Unset means requests wait
    # indefinitely.
    request_timeout: Optional[float] = _optional_float("EVENTS_API_TIMEOUT")

    # JSON file standing in for the browser's local storage, and the key
    # under which the signed token is kept.
    credential_store_path: str = os.getenv(
        "CREDENTIAL_STORE_PATH", str(Path.home() / ".event_roster" / "storage.json")
    )
    credential_key: str = os.getenv("CREDENTIAL_KEY", "jwt")

    # Role name that marks a user as privileged (compared case-insensitively).
    privileged_role: str = os.getenv("PRIVILEGED_ROLE", "admin")

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    @property
    def events_url(self) -> str:
        """Absolute URL of the events collection resource."""
        return self.api_url.rstrip("/") + "/" + self.events_path.strip("/")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before this module is imported.
settings = Settings()
