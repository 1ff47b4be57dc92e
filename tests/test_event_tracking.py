"""
Tests for the event tracker and event models.
"""

import pytest

from onboarding_analytics.event_tracking.event_tracker import EventTracker
from onboarding_analytics.event_tracking.event_types import (
    EventType,
    Extension,
    OnboardingAction,
    OnboardingEvent,
    Screen,
)
from onboarding_analytics.event_tracking.models import Event, OnboardingEventPayload
from onboarding_analytics.event_tracking.sinks import RecordingSink


def general(action):
    return EventType.onboarding(OnboardingEvent.general(action))


class TestEventModels:
    """Test event data models."""

    def test_from_type_uses_intrinsic_parameters(self):
        """Test that from_type carries the event type's parameters."""
        event_type = general(OnboardingAction.screen_skipped(Screen.EMOJI_REQUEST))
        event = Event.from_type(event_type)
        assert event.key == "ONBOARDING_screen_skipped"
        assert event.parameters == {"screen": "Emoji Request"}

    def test_from_type_without_parameters(self):
        """Test that from_type keeps absent parameters absent."""
        event = Event.from_type(general(OnboardingAction.complete()))
        assert event.parameters is None

    def test_explicit_parameters_are_not_merged(self):
        """Test that explicit parameters are stored verbatim."""
        event_type = general(OnboardingAction.screen_shown(Screen.GAME_REWARD))
        event = Event(type=event_type, parameters={"extra": "x"})
        assert event.parameters == {"extra": "x"}

    def test_from_typed_parameters(self):
        """Test that event-type keys are projected to tracking keys."""
        event_type = general(OnboardingAction.complete())
        source = general(OnboardingAction.start())
        event = Event.from_typed_parameters(event_type, {source: 3})
        assert event.parameters == {"ONBOARDING_start": 3}

    def test_from_typed_parameters_without_mapping(self):
        """Test that a missing mapping gives empty parameters."""
        event = Event.from_typed_parameters(general(OnboardingAction.complete()))
        assert event.parameters == {}

    def test_event_is_immutable(self):
        """Test that Event fields cannot be reassigned."""
        event = Event.from_type(general(OnboardingAction.start()))
        with pytest.raises(AttributeError):
            event.parameters = {"a": 1}

    def test_event_compares_by_value(self):
        """Test that events with equal type and parameters are equal."""
        event_type = general(OnboardingAction.start())
        assert Event(type=event_type, parameters={"a": 1}) == Event(type=event_type, parameters={"a": 1})
        assert Event(type=event_type) != Event(type=event_type, parameters={"a": 1})

    def test_event_is_not_hashable(self):
        """Test that events are unhashable with or without parameters."""
        event_type = general(OnboardingAction.screen_shown(Screen.GAME_REWARD))
        for event in (Event(type=event_type), Event.from_type(event_type)):
            with pytest.raises(TypeError):
                hash(event)

    def test_to_dict(self):
        """Test Event serialization to dict."""
        event = Event.from_type(general(OnboardingAction.install_confirmed(Extension.KEYBOARD)))
        assert event.to_dict() == {
            "key": "ONBOARDING_install_confirmed",
            "parameters": {"extension": "Keyboard"}
        }

    def test_payload_validation(self):
        """Test OnboardingEventPayload validation."""
        assert OnboardingEventPayload(key="ONBOARDING_start").validate()
        assert OnboardingEventPayload(key="ONBOARDING_start", phase="end").validate()
        assert not OnboardingEventPayload(key=123).validate()
        assert not OnboardingEventPayload(key="ONBOARDING_start", phase="middle").validate()
        assert not OnboardingEventPayload(key="ONBOARDING_start", parameters=["x"]).validate()
        assert not OnboardingEventPayload(key="ONBOARDING_start", parameters=None).validate()

    def test_payload_phase_rejects_parameters(self):
        """Test that a phase cannot be combined with extra parameters."""
        for phase in ("start", "end"):
            assert not OnboardingEventPayload(
                key="ONBOARDING_start", parameters={"a": 1}, phase=phase
            ).validate()
            assert OnboardingEventPayload(key="ONBOARDING_start", phase=phase).validate()


class TestEventTracker:
    """Test the main EventTracker class."""

    @pytest.fixture
    def sink(self):
        """Create a recording sink."""
        return RecordingSink()

    @pytest.fixture
    def tracker(self, sink):
        """Create an EventTracker instance for testing."""
        return EventTracker(sink)

    def test_track_with_intrinsic_parameters(self, tracker, sink):
        """Test tracking an event type with its own parameters."""
        tracker.track(general(OnboardingAction.screen_shown(Screen.GAME_REWARD)))
        assert sink.calls == [("ONBOARDING_screen_shown", {"screen": "Game Reward"})]

    def test_intrinsic_parameters_win_on_collision(self, tracker, sink):
        """Test that intrinsic parameters override caller parameters."""
        tracker.track(
            general(OnboardingAction.screen_shown(Screen.KEYBOARD_INSTALL)),
            parameters={"screen": "OVERRIDE", "extra": "x"}
        )
        assert sink.calls == [
            ("ONBOARDING_screen_shown", {"screen": "Keyboard Install", "extra": "x"})
        ]

    def test_caller_parameters_kept_when_no_intrinsic(self, tracker, sink):
        """Test that caller parameters pass through unchanged."""
        tracker.track(general(OnboardingAction.reward_collected()), parameters={"coins": 10})
        assert sink.calls == [("ONBOARDING_reward_collected", {"coins": 10})]

    def test_caller_parameters_not_mutated(self, tracker):
        """Test that the caller's dict is left untouched by the merge."""
        caller = {"screen": "OVERRIDE"}
        tracker.track(general(OnboardingAction.back_selected(Screen.GAME_REWARD)), parameters=caller)
        assert caller == {"screen": "OVERRIDE"}

    def test_no_parameters_sends_empty_mapping(self, tracker, sink):
        """Test that an event with no parameters reaches the sink with {}."""
        tracker.track(general(OnboardingAction.start()))
        assert sink.calls == [("ONBOARDING_start", {})]

    def test_track_event_with_absent_parameters(self, tracker, sink):
        """Test that absent Event parameters are forwarded as an empty mapping."""
        tracker.track_event(Event(type=general(OnboardingAction.complete())))
        key, parameters = sink.calls[0]
        assert key == "ONBOARDING_complete"
        assert parameters == {}
        assert parameters is not None

    def test_track_event_forwards_parameters_verbatim(self, tracker, sink):
        """Test that track_event does not merge intrinsic parameters."""
        event = Event(type=general(OnboardingAction.screen_shown(Screen.GAME_REWARD)), parameters={"a": 1})
        tracker.track_event(event)
        assert sink.calls == [("ONBOARDING_screen_shown", {"a": 1})]

    def test_track_event_start(self, tracker, sink):
        """Test that an event start is tracked as a regular event."""
        tracker.track_event_start(general(OnboardingAction.flow_dismissed(Screen.EMOJI_GAMES)))
        assert sink.calls == [("ONBOARDING_flow_dismissed", {"screen": "Emoji Games"})]

    def test_track_event_end_is_a_no_op(self, tracker, sink):
        """Test that an event end never reaches the sink."""
        for action in (
            OnboardingAction.start(),
            OnboardingAction.screen_shown(Screen.GAME_REWARD),
            OnboardingAction.install_confirmed(Extension.IMESSAGE),
        ):
            tracker.track_event_end(general(action))
        assert sink.calls == []

    def test_one_sink_call_per_track(self, tracker, sink):
        """Test that each tracking call invokes the sink exactly once."""
        event_type = general(OnboardingAction.start())
        tracker.track(event_type)
        tracker.track(event_type, {"a": 1})
        tracker.track_event_start(event_type)
        assert len(sink.calls) == 3
