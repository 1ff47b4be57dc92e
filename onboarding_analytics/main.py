"""
Flask application for the Onboarding Analytics service.
"""

from typing import Optional

from flask import Flask, jsonify
from werkzeug.middleware.proxy_fix import ProxyFix

from config_manager import ConfigManager
from onboarding_analytics.event_tracking.factory import create_event_tracking_module
from onboarding_analytics.event_tracking.sinks import AnalyticsSink, create_sink


def create_app(
    config_manager: Optional[ConfigManager] = None,
    sink: Optional[AnalyticsSink] = None
) -> Flask:
    """Create the Flask application.

    Args:
        config_manager: Configuration source (a default ConfigManager otherwise)
        sink: Sink overriding the configured one

    Returns:
        Configured Flask app
    """
    config_manager = config_manager or ConfigManager()

    app = Flask(__name__)
    app.wsgi_app = ProxyFix(app.wsgi_app, x_proto=1, x_host=1, x_prefix=1)

    if sink is None:
        sink = create_sink(config_manager.get_sink_config())

    event_tracking_module = create_event_tracking_module(sink)
    app.register_blueprint(event_tracking_module["blueprint"])
    app.extensions["event_tracker"] = event_tracking_module["service"]

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"})

    return app
