"""
Credential providers.

:class:`~event_roster.roles.RoleResolver` only needs something with a
``get_credential()`` method returning the stored token or ``None``.
:class:`FileCredentialStore` keeps tokens in a small JSON file, the
command line counterpart of the browser's local storage; the other two
providers serve tests and scripted use.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Protocol


logger = logging.getLogger(__name__)


class CredentialProvider(Protocol):
    def get_credential(self) -> Optional[str]:
        ...


class StaticCredentialProvider:
    """Always returns the token it was created with."""

    def __init__(self, token: Optional[str] = None) -> None:
        self.token = token

    def get_credential(self) -> Optional[str]:
        return self.token


class EnvCredentialProvider:
    """Reads the token from an environment variable on every call."""

    def __init__(self, variable: str = "EVENTS_API_TOKEN") -> None:
        self.variable = variable

    def get_credential(self) -> Optional[str]:
        return os.getenv(self.variable) or None


class FileCredentialStore:
    """Key/value JSON file holding the signed token.

    The file maps string keys to string values.  It is read on every
    :meth:`get_credential` call so changes made by another process are
    picked up immediately.
    """

    def __init__(self, path: str, key: str = "jwt") -> None:
        self.path = Path(path).expanduser()
        self.key = key

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Failed to read credential store %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Credential store %s does not contain a JSON object", self.path)
            return {}
        return data

    def _save(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def get_credential(self) -> Optional[str]:
        value = self._load().get(self.key)
        if value is None:
            return None
        if not isinstance(value, str):
            logger.warning("Credential %r in %s is not a string", self.key, self.path)
            return None
        return value or None

    def store_credential(self, token: str) -> None:
        data = self._load()
        data[self.key] = token
        self._save(data)
        logger.info("Stored credential under %r in %s", self.key, self.path)

    def clear(self) -> None:
        data = self._load()
        if data.pop(self.key, None) is not None:
            self._save(data)
            logger.info("Removed credential %r from %s", self.key, self.path)
