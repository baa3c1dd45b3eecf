"""Pydantic models describing the events service payloads."""

from .event import Event
from .participant import Participant

__all__ = ["Event", "Participant"]
