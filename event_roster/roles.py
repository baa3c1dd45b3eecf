"""
Role hints derived from a stored token.

The token is a compact ``header.payload.signature`` string.  Its
payload is decoded without checking the signature, so the roles found
here only decide what to display.  The events service remains the
authority for privileged actions.
"""

import base64
import binascii
import json
import logging
from typing import Any, Dict, FrozenSet

from .credentials import CredentialProvider
from .errors import DecodeFailure


logger = logging.getLogger(__name__)


def _b64_url_decode(data: str) -> bytes:
    """Decode a base64url segment, restoring the standard alphabet and padding."""
    standard = data.replace("-", "+").replace("_", "/")
    padding = "=" * (-len(standard) % 4)
    try:
        return base64.b64decode(standard + padding, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeFailure(f"Invalid base64 in token payload: {exc}") from exc


def decode_claims(token: str) -> Dict[str, Any]:
    """Return the payload claims of ``token`` without verifying it.

    Raises:
        DecodeFailure: the token is not three dot separated segments or
            its payload is not a base64url encoded UTF-8 JSON object.
    """
    parts = token.split(".")
    if len(parts) != 3:
        raise DecodeFailure(f"Expected 3 token segments, got {len(parts)}")
    raw = _b64_url_decode(parts[1])
    try:
        payload = json.loads(raw.decode("utf-8"))
    except ValueError as exc:
        raise DecodeFailure(f"Token payload is not UTF-8 JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise DecodeFailure("Token payload is not a JSON object")
    return payload


def normalize_roles(claim: Any) -> FrozenSet[str]:
    if not claim:
        return frozenset()
    if isinstance(claim, str):
        return frozenset([claim])
    if isinstance(claim, (list, tuple, set, frozenset)):
        return frozenset(role for role in claim if isinstance(role, str))
    raise DecodeFailure(f"Unsupported role claim type {type(claim).__name__}")


class RoleResolver:
    """Derive the current user's roles from the credential provider.

    Nothing is cached: each access to :attr:`roles` or
    :attr:`is_privileged` reads the credential again, so a token
    replaced in storage takes effect on the next access.
    """

    def __init__(self, provider: CredentialProvider, privileged_role: str = "admin") -> None:
        self.provider = provider
        self.privileged_role = privileged_role

    @property
    def roles(self) -> FrozenSet[str]:
        token = self.provider.get_credential()
        if not token:
            return frozenset()
        try:
            return normalize_roles(decode_claims(token).get("role"))
        except DecodeFailure as exc:
            logger.debug("Ignoring unreadable credential: %s", exc)
            return frozenset()

    @property
    def is_privileged(self) -> bool:
        target = self.privileged_role.lower()
        return any(role.lower() == target for role in self.roles)
