"""
Event Types for the Onboarding Analytics System

Defines the closed taxonomy of trackable onboarding events. Every value
derives a stable tracking key (the analytics event name) and an optional
parameter payload.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union


PARAMETER_SCREEN = "screen"
PARAMETER_EXTENSION = "extension"


class Screen(Enum):
    """Onboarding screens, valued by their human-readable label."""

    GAME_REWARD = "Game Reward"
    IMESSAGE_INSTALL = "iMessage Install"
    KEYBOARD_INSTALL = "Keyboard Install"
    EMOJI_REQUEST = "Emoji Request"
    EMOJI_GAMES = "Emoji Games"


class Extension(Enum):
    """App extensions the onboarding flow can install."""

    IMESSAGE = "iMessage"
    KEYBOARD = "Keyboard"


class ActionKind(Enum):
    """Onboarding actions, valued by their tracking name."""

    SCREEN_SHOWN = "screen_shown"
    REWARD_COLLECTED = "reward_collected"
    BACK_SELECTED = "back_selected"
    FLOW_DISMISSED = "flow_dismissed"
    SCREEN_SKIPPED = "screen_skipped"
    CTA_SELECTED = "cta_selected"
    INSTALL_CONFIRMED = "install_confirmed"
    VIDEO_INSTRUCTIONS_DISMISSED = "video_instructions_dismissed"
    START = "start"
    COMPLETE = "complete"


# Payload carried by each action kind (None: the action carries nothing)
_PAYLOAD_TYPES = {
    ActionKind.SCREEN_SHOWN: Screen,
    ActionKind.REWARD_COLLECTED: None,
    ActionKind.BACK_SELECTED: Screen,
    ActionKind.FLOW_DISMISSED: Screen,
    ActionKind.SCREEN_SKIPPED: Screen,
    ActionKind.CTA_SELECTED: Screen,
    ActionKind.INSTALL_CONFIRMED: Extension,
    ActionKind.VIDEO_INSTRUCTIONS_DISMISSED: Extension,
    ActionKind.START: None,
    ActionKind.COMPLETE: None,
}

if set(_PAYLOAD_TYPES) != set(ActionKind):
    raise RuntimeError("every ActionKind needs a payload entry")


@dataclass(frozen=True)
class OnboardingAction:
    """A single onboarding action, optionally carrying a screen or extension.

    Use the named constructors (``OnboardingAction.screen_shown(...)``)
    rather than building instances by hand.
    """

    kind: ActionKind
    payload: Optional[Union[Screen, Extension]] = None

    def __post_init__(self):
        expected = _PAYLOAD_TYPES[self.kind]
        if expected is None:
            if self.payload is not None:
                raise TypeError(f"{self.kind.value} takes no payload")
        elif not isinstance(self.payload, expected):
            raise TypeError(f"{self.kind.value} requires a {expected.__name__}")

    @classmethod
    def screen_shown(cls, screen: Screen) -> 'OnboardingAction':
        return cls(ActionKind.SCREEN_SHOWN, screen)

    @classmethod
    def reward_collected(cls) -> 'OnboardingAction':
        return cls(ActionKind.REWARD_COLLECTED)

    @classmethod
    def back_selected(cls, screen: Screen) -> 'OnboardingAction':
        return cls(ActionKind.BACK_SELECTED, screen)

    @classmethod
    def flow_dismissed(cls, screen: Screen) -> 'OnboardingAction':
        return cls(ActionKind.FLOW_DISMISSED, screen)

    @classmethod
    def screen_skipped(cls, screen: Screen) -> 'OnboardingAction':
        return cls(ActionKind.SCREEN_SKIPPED, screen)

    @classmethod
    def cta_selected(cls, screen: Screen) -> 'OnboardingAction':
        return cls(ActionKind.CTA_SELECTED, screen)

    @classmethod
    def install_confirmed(cls, extension: Extension) -> 'OnboardingAction':
        return cls(ActionKind.INSTALL_CONFIRMED, extension)

    @classmethod
    def video_instructions_dismissed(cls, extension: Extension) -> 'OnboardingAction':
        return cls(ActionKind.VIDEO_INSTRUCTIONS_DISMISSED, extension)

    @classmethod
    def start(cls) -> 'OnboardingAction':
        return cls(ActionKind.START)

    @classmethod
    def complete(cls) -> 'OnboardingAction':
        return cls(ActionKind.COMPLETE)

    @property
    def key(self) -> str:
        """Tracking name of the action; the payload never affects it."""
        return self.kind.value

    @property
    def parameters(self) -> Optional[Dict[str, Any]]:
        """Single-entry mapping for screen/extension actions, else None."""
        if isinstance(self.payload, Screen):
            return {PARAMETER_SCREEN: self.payload.value}
        if isinstance(self.payload, Extension):
            return {PARAMETER_EXTENSION: self.payload.value}
        return None


class OnboardingCategory(Enum):
    """Onboarding event categories, valued by their key prefix."""

    GENERAL = "ONBOARDING_"
    FIRST_START = "FIRST_OPEN_INTRO_"


@dataclass(frozen=True)
class OnboardingEvent:
    """An onboarding action reported under a category."""

    category: OnboardingCategory
    action: OnboardingAction

    @classmethod
    def general(cls, action: OnboardingAction) -> 'OnboardingEvent':
        return cls(OnboardingCategory.GENERAL, action)

    @classmethod
    def first_start(cls, action: OnboardingAction) -> 'OnboardingEvent':
        return cls(OnboardingCategory.FIRST_START, action)

    @property
    def key(self) -> str:
        return self.category.value + self.action.key

    @property
    def parameters(self) -> Optional[Dict[str, Any]]:
        return self.action.parameters


@dataclass(frozen=True, eq=False)
class EventType:
    """Top-level trackable event.

    Equality and hashing use the derived ``key`` only: two values whose
    payloads differ but whose keys match are the same event type. Events
    are looked up by tracking key, so this narrowing is intentional.
    """

    observed: OnboardingEvent

    @classmethod
    def onboarding(cls, event: OnboardingEvent) -> 'EventType':
        return cls(event)

    @property
    def key(self) -> str:
        return self.observed.key

    @property
    def parameters(self) -> Optional[Dict[str, Any]]:
        return self.observed.parameters

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EventType):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    @classmethod
    def all_keys(cls) -> set[str]:
        """Get every tracking key the taxonomy can produce."""
        return {
            category.value + kind.value
            for category in OnboardingCategory
            for kind in ActionKind
        }

    @classmethod
    def is_valid(cls, key: str) -> bool:
        """Check if a tracking key belongs to the taxonomy."""
        return key in cls.all_keys()

    @classmethod
    def from_key(
        cls,
        key: str,
        screen: Optional[str] = None,
        extension: Optional[str] = None
    ) -> 'EventType':
        """Parse a tracking key back into an event type.

        Args:
            key: Tracking key, e.g. ``ONBOARDING_screen_shown``
            screen: Screen label for screen-carrying actions
            extension: Extension value for extension-carrying actions

        Returns:
            The matching EventType

        Raises:
            ValueError: If the key, label or extension is unknown, or a
                required payload is missing
        """
        for category in OnboardingCategory:
            if key.startswith(category.value):
                name = key[len(category.value):]
                break
        else:
            raise ValueError(f"Unknown event key: {key!r}")

        try:
            kind = ActionKind(name)
        except ValueError:
            raise ValueError(f"Unknown event key: {key!r}") from None

        expected = _PAYLOAD_TYPES[kind]
        payload = None
        if expected is Screen:
            if screen is None:
                raise ValueError(f"{key} requires a screen")
            payload = Screen(screen)
        elif expected is Extension:
            if extension is None:
                raise ValueError(f"{key} requires an extension")
            payload = Extension(extension)

        return cls(OnboardingEvent(category, OnboardingAction(kind, payload)))
