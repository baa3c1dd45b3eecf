"""Events service client.

This module defines a thin client around the remote ``/api/Events``
resource.  It uses the ``requests`` library internally and exposes one
method per operation:

* :meth:`EventClient.create_event` - create an event.
* :meth:`EventClient.fetch_events` - refresh the cached event list.
* :meth:`EventClient.get_event_by_id` - fetch a single event.
* :meth:`EventClient.register_for_event` - add a participant.
* :meth:`EventClient.confirm_participation` - set a participant's
  confirmed flag.
* :meth:`EventClient.remove_participant` - delete a participant.

Failures are handled differently per kind of operation.  Listing
events never raises and leaves the cache empty on error.  Fetching a
single event never raises and returns ``None`` on error.  Every write
logs the failure and re-raises it, so the caller always learns that a
write did not happen.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

import requests
from pydantic import ValidationError

from .cache import EventCache
from .core.config import Settings, settings as default_settings
from .errors import EventsApiError, NetworkFailure, ShapeFailure, StatusFailure
from .schemas.participant import Participant


logger = logging.getLogger(__name__)

_NO_BODY = object()


class EventClient:
    """Client for the events service.

    The client owns an :class:`EventCache` holding the result of the
    last :meth:`fetch_events` call.  No other method touches the cache,
    so participant changes only show up there after the next fetch.
    """

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        cache: Optional[EventCache] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: URL of the events collection, e.g.
                ``https://example.com/api/Events``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            cache: Optional cache to populate.  A private one is created
                when omitted.
            timeout: Seconds to wait for each response.  ``None`` waits
                indefinitely.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.cache = cache if cache is not None else EventCache()
        self.timeout = timeout

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None, **kwargs: Any) -> "EventClient":
        config = config or default_settings
        kwargs.setdefault("timeout", config.request_timeout)
        return cls(base_url=config.events_url, **kwargs)

    @property
    def events(self) -> List[Dict[str, Any]]:
        """Events from the last successful :meth:`fetch_events` call."""
        return self.cache.events

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _send(self, method: str, path: str = "", *, json_body: Any = _NO_BODY) -> requests.Response:
        """Perform an HTTP request and return the successful response.

        Args:
            method: HTTP method (``GET``, ``POST``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/42/participants``).
            json_body: Value to serialize as the JSON request body.  When
                omitted no body and no ``Content-Type`` header are sent.
        Raises:
            NetworkFailure: the request could not be completed.
            StatusFailure: the server answered with a non-success status.
        """
        url = f"{self.base_url}{path}"
        kwargs: Dict[str, Any] = {"timeout": self.timeout}
        if json_body is None:
            # requests drops json=None; the service expects a literal null.
            kwargs["data"] = b"null"
            kwargs["headers"] = {"Content-Type": "application/json"}
        elif json_body is not _NO_BODY:
            kwargs["json"] = json_body
            kwargs["headers"] = {"Content-Type": "application/json"}
        logger.debug("Sending %s request to %s", method, url)
        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as exc:
            raise NetworkFailure(f"{method} {url} failed: {exc}") from exc
        if not response.ok:
            raise StatusFailure(response.status_code, response.reason or "", _error_message(response))
        return response

    @staticmethod
    def _parse_json(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise ShapeFailure(f"Response body is not valid JSON: {exc}", body=response.text) from exc

    def _parse_if_content(self, response: requests.Response) -> Optional[Any]:
        """Parse the body only when ``Content-Length`` announces one.

        A missing, non-numeric or non-positive length means the server
        sent no content; the JSON parser is not invoked in that case.
        """
        content_length = response.headers.get("Content-Length")
        try:
            length = int(content_length) if content_length is not None else 0
        except ValueError:
            length = 0
        if length <= 0:
            return None
        return self._parse_json(response)

    # ------------------------------------------------------------------
    # Event operations
    # ------------------------------------------------------------------
    def create_event(self, event_data: Dict[str, Any]) -> Dict[str, Any]:
        """Create an event and return the server's copy of it.

        Raises:
            EventsApiError: the event was not created.
        """
        try:
            response = self._send("POST", json_body=event_data)
            data = self._parse_json(response)
            if not isinstance(data, dict):
                raise ShapeFailure(f"Expected an event object, got {type(data).__name__}")
            return data
        except EventsApiError as exc:
            logger.error("Error creating event: %s", exc)
            raise

    def fetch_events(self) -> None:
        """Refresh :attr:`cache` with the full list of events.

        On any failure the error is logged and the cache is emptied;
        nothing is raised.
        """
        logger.debug("Fetching events from %s", self.base_url)
        try:
            response = self._send("GET")
            data = self._parse_json(response)
            if not isinstance(data, list):
                raise ShapeFailure("Invalid API response (expected an array)")
        except EventsApiError as exc:
            logger.error("Error fetching events: %s", exc)
            self.cache.replace([])
            return
        self.cache.replace(data)
        logger.info("Fetched %d events", len(data))

    def get_event_by_id(self, event_id: Any) -> Optional[Dict[str, Any]]:
        """Retrieve a single event, or ``None`` if it cannot be fetched."""
        try:
            response = self._send("GET", f"/{event_id}")
            data = self._parse_json(response)
            if not isinstance(data, dict):
                raise ShapeFailure(f"Expected an event object, got {type(data).__name__}")
            return data
        except EventsApiError as exc:
            logger.error("Error fetching event %s: %s", event_id, exc)
            return None

    # ------------------------------------------------------------------
    # Participant operations
    # ------------------------------------------------------------------
    def register_for_event(self, event_id: Any, participant_name: str) -> Optional[Any]:
        """Register ``participant_name`` for an event as an unconfirmed participant.

        Returns:
            The parsed response body, or ``None`` when the server sent
            no content.
        Raises:
            EventsApiError: the registration was not accepted.
        """
        return self._write(
            "POST",
            f"/{event_id}/participants",
            lambda: Participant(user_name=participant_name, name=participant_name, confirmed=False).to_payload(),
            action="registering for event",
        )

    def confirm_participation(self, event_id: Any, participant_id: Any, confirmed: bool) -> Optional[Any]:
        """Send the target ``confirmed`` value for a participant.

        The participant identifier doubles as user name and display
        name in the request body.
        """
        return self._write(
            "POST",
            f"/{event_id}/participants/confirm",
            lambda: Participant(
                id=participant_id,
                user_name=str(participant_id),
                name=str(participant_id),
                confirmed=confirmed,
            ).to_payload(),
            action="confirming participation",
        )

    def remove_participant(self, event_id: Any, participant_id: Any) -> Optional[Any]:
        """Delete a participant; the raw identifier is the request body."""
        return self._write(
            "DELETE",
            f"/{event_id}/participants",
            lambda: participant_id,
            action="removing participant",
        )

    def _write(self, method: str, path: str, build_body: Callable[[], Any], *, action: str) -> Optional[Any]:
        try:
            response = self._send(method, path, json_body=build_body())
            return self._parse_if_content(response)
        except (EventsApiError, ValidationError) as exc:
            logger.error("Error %s: %s", action, exc)
            raise


def _error_message(response: requests.Response) -> str:
    """Best effort human readable error from a failed response."""
    try:
        err_json = response.json()
    except ValueError:
        return (response.text or "").strip()
    if isinstance(err_json, dict):
        message = err_json.get("detail") or err_json.get("message") or err_json.get("title")
        if message:
            return str(message)
    return str(err_json)
