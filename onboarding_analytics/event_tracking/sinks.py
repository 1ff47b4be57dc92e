"""
Analytics Sinks

A sink transmits a named event with its parameters somewhere. Sinks are
fire-and-forget: ``log`` never raises to the caller.
"""

import json
import logging
from typing import Any, List, Mapping, Optional, Protocol, Tuple, runtime_checkable

import requests

logger = logging.getLogger(__name__)


@runtime_checkable
class AnalyticsSink(Protocol):
    """Capability that accepts a tracking key and its parameters."""

    def log(self, key: str, parameters: Mapping[str, Any]) -> None:
        ...


class LoggingSink:
    """Writes every event to a logger."""

    def __init__(self, logger_name: str = "onboarding_analytics.events"):
        self._logger = logging.getLogger(logger_name)

    def log(self, key: str, parameters: Mapping[str, Any]) -> None:
        self._logger.info(f"{key} {dict(parameters)}")


class NullSink:
    """Discards every event."""

    def log(self, key: str, parameters: Mapping[str, Any]) -> None:
        pass


class RecordingSink:
    """Keeps every event in memory, oldest first."""

    def __init__(self):
        self.calls: List[Tuple[str, Mapping[str, Any]]] = []

    def log(self, key: str, parameters: Mapping[str, Any]) -> None:
        self.calls.append((key, parameters))


class HttpSink:
    """Posts events as JSON to a collector endpoint."""

    def __init__(
        self,
        endpoint: str,
        timeout: float = 5.0,
        session: Optional[requests.Session] = None
    ):
        """Initialize the HTTP sink.

        Args:
            endpoint: Collector URL receiving ``{"key", "parameters"}`` bodies
            timeout: Request timeout in seconds
            session: Optional requests session (a new one is created otherwise)
        """
        self.endpoint = endpoint
        self.timeout = timeout
        self.session = session or requests.Session()

    def log(self, key: str, parameters: Mapping[str, Any]) -> None:
        # Values JSON cannot encode (datetimes, UUIDs) are sent as strings
        body = json.dumps({"key": key, "parameters": dict(parameters)}, default=str)
        try:
            response = self.session.post(
                self.endpoint,
                data=body,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout
            )
            response.raise_for_status()
        except requests.RequestException as e:
            # Tracking is best effort; the caller never sees delivery failures
            logger.warning(f"Failed to deliver event {key} to {self.endpoint}: {e}")


def create_sink(sink_config) -> AnalyticsSink:
    """Create a sink from sink configuration.

    Args:
        sink_config: SinkConfig with ``kind``, ``endpoint`` and ``timeout``

    Returns:
        Configured sink

    Raises:
        ValueError: If the kind is unknown or an HTTP sink has no endpoint
    """
    kind = sink_config.kind.lower()
    if kind == "logging":
        return LoggingSink()
    if kind == "null":
        return NullSink()
    if kind == "http":
        if not sink_config.endpoint:
            raise ValueError("HTTP sink requires an endpoint")
        return HttpSink(sink_config.endpoint, timeout=sink_config.timeout)
    raise ValueError(f"Unknown sink kind: {sink_config.kind!r}")
