"""
Event Tracking Subsystem

Typed onboarding event taxonomy and a tracker that forwards events to an
analytics sink.
"""

from .event_tracker import EventTracker
from .event_types import (
    ActionKind,
    EventType,
    Extension,
    OnboardingAction,
    OnboardingCategory,
    OnboardingEvent,
    Screen,
    PARAMETER_EXTENSION,
    PARAMETER_SCREEN,
)
from .models import Event, OnboardingEventPayload
from .sinks import AnalyticsSink, HttpSink, LoggingSink, NullSink, RecordingSink, create_sink

__all__ = [
    'EventTracker',
    'ActionKind',
    'EventType',
    'Extension',
    'OnboardingAction',
    'OnboardingCategory',
    'OnboardingEvent',
    'Screen',
    'PARAMETER_EXTENSION',
    'PARAMETER_SCREEN',
    'Event',
    'OnboardingEventPayload',
    'AnalyticsSink',
    'HttpSink',
    'LoggingSink',
    'NullSink',
    'RecordingSink',
    'create_sink',
]
