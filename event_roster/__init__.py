"""
Client-side data access for the events service.

The package talks to the remote ``/api/Events`` resource through
:class:`~event_roster.client.EventClient`, keeps the last fetched list
of events in an observable :class:`~event_roster.cache.EventCache` and
derives display-level authorization hints from a stored token via
:class:`~event_roster.roles.RoleResolver`.
"""

from .cache import EventCache
from .client import EventClient
from .credentials import EnvCredentialProvider, FileCredentialStore, StaticCredentialProvider
from .errors import DecodeFailure, EventsApiError, NetworkFailure, ShapeFailure, StatusFailure
from .roles import RoleResolver

__all__ = [
    "EventCache",
    "EventClient",
    "RoleResolver",
    "FileCredentialStore",
    "StaticCredentialProvider",
    "EnvCredentialProvider",
    "EventsApiError",
    "NetworkFailure",
    "StatusFailure",
    "ShapeFailure",
    "DecodeFailure",
]
