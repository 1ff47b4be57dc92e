"""
Data Models for Event Tracking

Defines the records handed to analytics sinks and the payload accepted
from the frontend.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .event_types import EventType


@dataclass(frozen=True)
class Event:
    """Immutable event record forwarded to a sink.

    ``parameters`` is stored exactly as given; merging with the event
    type's own parameters happens in ``EventTracker.track``. Events
    compare by value but are not hashable, since parameters are a dict.
    """

    type: EventType
    parameters: Optional[Dict[str, Any]] = None

    __hash__ = None

    @classmethod
    def from_type(cls, event_type: EventType) -> 'Event':
        """Create an Event carrying the event type's own parameters."""
        return cls(type=event_type, parameters=event_type.parameters)

    @classmethod
    def from_typed_parameters(
        cls,
        event_type: EventType,
        parameters: Optional[Mapping[EventType, Any]] = None
    ) -> 'Event':
        """Create an Event from parameters keyed by other event types.

        Each key is replaced by its tracking key. A missing mapping gives
        an empty dict rather than None.
        """
        mapped = {t.key: value for t, value in (parameters or {}).items()}
        return cls(type=event_type, parameters=mapped)

    @property
    def key(self) -> str:
        return self.type.key

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "key": self.type.key,
            "parameters": dict(self.parameters) if self.parameters is not None else None
        }


@dataclass
class OnboardingEventPayload:
    """Payload structure for onboarding events reported by the frontend."""

    key: str
    screen: Optional[str] = None
    extension: Optional[str] = None
    parameters: Dict[str, Any] = field(default_factory=dict)
    phase: Optional[str] = None

    def validate(self) -> bool:
        """Validate the payload structure.

        Start/end phases track the event type's own parameters only, so a
        phase combined with extra parameters is rejected.
        """
        return (
            isinstance(self.key, str) and
            (self.screen is None or isinstance(self.screen, str)) and
            (self.extension is None or isinstance(self.extension, str)) and
            isinstance(self.parameters, dict) and
            self.phase in (None, "start", "end") and
            not (self.phase and self.parameters)
        )

    def to_event_type(self) -> EventType:
        """Resolve the payload into an event type.

        Raises:
            ValueError: If the key or payload values are not part of the taxonomy
        """
        return EventType.from_key(self.key, screen=self.screen, extension=self.extension)
