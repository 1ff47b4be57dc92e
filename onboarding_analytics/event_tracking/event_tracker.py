"""
Event Tracker

Main class for forwarding onboarding events, with their merged
parameters, to an analytics sink.
"""

import logging
from typing import Any, Dict, Optional

from .event_types import EventType
from .models import Event
from .sinks import AnalyticsSink

logger = logging.getLogger(__name__)


class EventTracker:
    """Main event tracking system."""

    def __init__(self, sink: AnalyticsSink):
        """Initialize the event tracker.

        Args:
            sink: Analytics sink receiving every tracked event
        """
        self.sink = sink

    def track(self, event_type: EventType, parameters: Optional[Dict[str, Any]] = None) -> None:
        """Track an event type with optional extra parameters.

        The event type's own parameters are applied over the caller's, so
        they win on a key collision. When neither side has parameters the
        event carries none.

        Args:
            event_type: Event to track
            parameters: Extra parameters supplied by the caller
        """
        final_parameters = None
        if parameters is not None:
            final_parameters = dict(parameters)
        intrinsic = event_type.parameters
        if intrinsic is not None:
            final_parameters = {**(final_parameters or {}), **intrinsic}

        self.track_event(Event(type=event_type, parameters=final_parameters))

    def track_event(self, event: Event) -> None:
        """Forward an event to the sink.

        Args:
            event: Event record; absent parameters are sent as an empty mapping
        """
        parameters = event.parameters if event.parameters is not None else {}
        logger.debug(f"Tracking {event.key} with {parameters}")
        self.sink.log(event.key, parameters)

    def track_event_start(self, event_type: EventType) -> None:
        """Track the start of a timed event.

        Sinks have no notion of timed events, so this tracks a regular event.
        """
        self.track_event(Event(type=event_type, parameters=event_type.parameters))

    def track_event_end(self, event_type: EventType) -> None:
        """Track the end of a timed event.

        Intentionally a no-op: sinks have no paired end event. Kept so
        callers can report start and end symmetrically.
        """
