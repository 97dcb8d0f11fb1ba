"""Diagnostic event manager: records and tracks error events."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ecusim.types import EcuError

logger = logging.getLogger(__name__)

MAX_DIAGNOSTIC_EVENTS = 10
_DESCRIPTION_LIMIT = 49


class DemError(EcuError):
    """Raised when an event cannot be stored or is not known."""


@dataclass
class DiagnosticEvent:
    """One recorded diagnostic event."""

    event_id: int
    description: str
    active: bool = True


class DiagnosticEventManager:
    """Holds up to ``capacity`` diagnostic events."""

    def __init__(self, capacity: int = MAX_DIAGNOSTIC_EVENTS) -> None:
        self.capacity = capacity
        self._events: list[DiagnosticEvent] = []
        self.reset()

    @property
    def events(self) -> tuple[DiagnosticEvent, ...]:
        return tuple(self._events)

    def reset(self) -> None:
        """Forget every recorded event."""
        self._events.clear()
        logger.info("Diagnostic Event Manager (DEM) Initialized.")

    def _find(self, event_id: int) -> DiagnosticEvent | None:
        return next((e for e in self._events if e.event_id == event_id), None)

    def report_error(self, event_id: int, description: str) -> DiagnosticEvent:
        """Activate an event, adding it if it is new."""
        if len(self._events) >= self.capacity:
            raise DemError(
                "Cannot report more events. Maximum diagnostic events reached."
            )
        event = self._find(event_id)
        if event is not None:
            event.active = True
            logger.info(
                "Event ID %d already exists. Updating its status to active.", event_id
            )
            return event
        event = DiagnosticEvent(event_id, description[:_DESCRIPTION_LIMIT])
        self._events.append(event)
        logger.info(
            "New diagnostic event reported: ID = %d, Description = %s",
            event_id,
            description,
        )
        return event

    def clear_error(self, event_id: int) -> None:
        """Mark an event as no longer active."""
        event = self._find(event_id)
        if event is None:
            raise DemError(f"Event ID {event_id} not found.")
        event.active = False
        logger.info("Event ID %d cleared (no longer active).", event_id)

    def check_error(self, event_id: int) -> bool:
        """Return whether the event is active."""
        event = self._find(event_id)
        if event is None:
            raise DemError(f"Event ID {event_id} not found.")
        logger.info(
            "Event ID %d is %s.", event_id, "active" if event.active else "inactive"
        )
        return event.active

    def format_event_list(self) -> str:
        """Render every recorded event, one per line."""
        lines = ["Diagnostic Events List:"]
        lines.extend(
            f"ID: {e.event_id}, Description: {e.description}, "
            f"Status: {'Active' if e.active else 'Inactive'}"
            for e in self._events
        )
        return "\n".join(lines)