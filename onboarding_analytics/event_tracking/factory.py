"""
Factory for creating event tracking module.
"""
from .routes import create_event_tracking_blueprint
from .event_tracker import EventTracker
from .sinks import AnalyticsSink


def create_event_tracking_module(sink: AnalyticsSink) -> dict:
    """Create event tracking module with service and routes.

    Args:
        sink: Analytics sink receiving tracked events

    Returns:
        Dictionary containing the service and blueprint
    """
    event_tracker = EventTracker(sink)

    blueprint = create_event_tracking_blueprint(event_tracker)

    return {
        "service": event_tracker,
        "blueprint": blueprint
    }
