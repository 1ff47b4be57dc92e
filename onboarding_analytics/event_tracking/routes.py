"""
Event Tracking Routes

Flask routes letting a web frontend report onboarding events.
"""

import logging

from flask import Blueprint, request, jsonify

from .event_tracker import EventTracker
from .event_types import EventType
from .models import OnboardingEventPayload

logger = logging.getLogger(__name__)


def create_event_tracking_blueprint(event_tracker: EventTracker):
    """Create a Flask blueprint for event tracking routes.

    Args:
        event_tracker: Tracker that forwards reported events to the sink

    Returns:
        Flask blueprint with event tracking routes
    """
    bp = Blueprint('event_tracking', __name__, url_prefix='/onboarding')

    @bp.route("/event", methods=["POST"])
    def ingest_event():
        """Ingest an onboarding event from the frontend."""
        payload_data = request.get_json(silent=True)
        if not isinstance(payload_data, dict):
            return jsonify({"error": "invalid-json"}), 400

        payload = OnboardingEventPayload(
            key=str(payload_data.get("key", "")).strip(),
            screen=payload_data.get("screen"),
            extension=payload_data.get("extension"),
            parameters=payload_data.get("parameters", {}),
            phase=payload_data.get("phase")
        )
        if not payload.validate():
            return jsonify({"error": "invalid-payload"}), 400

        try:
            event_type = payload.to_event_type()
        except ValueError as exc:
            logger.info(f"Rejected onboarding event: {exc}")
            return jsonify({"error": str(exc)}), 400

        if payload.phase == "start":
            event_tracker.track_event_start(event_type)
        elif payload.phase == "end":
            event_tracker.track_event_end(event_type)
        else:
            event_tracker.track(event_type, payload.parameters or None)

        return jsonify({"status": "ok", "key": event_type.key})

    @bp.route("/events", methods=["GET"])
    def list_event_keys():
        """List every tracking key the taxonomy can produce."""
        return jsonify({
            "status": "ok",
            "keys": sorted(EventType.all_keys())
        })

    return bp
