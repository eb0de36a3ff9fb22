"""Top-level game states and a small state machine with deferred transitions."""

from __future__ import annotations

import enum
from typing import Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


class Screen(enum.Enum):
    """The game's main screen states. The game starts on SPLASH."""

    SPLASH = "splash"
    TITLE = "title"
    LOADING = "loading"
    GAMEPLAY = "gameplay"


class Menu(enum.Enum):
    """The menu overlays. NONE, meaning no menu is open, is the starting value."""

    NONE = "none"
    MAIN = "main"
    CREDITS = "credits"
    SETTINGS = "settings"
    PAUSE = "pause"


class AppSystems(enum.IntEnum):
    """Groups of per-frame work, run in ascending order each frame."""

    TICK_TIMERS = 1
    RECORD_INPUT = 2
    UPDATE = 3


class StateMachine(Generic[T]):
    """Holds a current state and a queued next state.

    A queued state only takes effect when :meth:`apply` runs, so every change
    requested during a frame lands together at the frame's end. Queuing the
    state that is already current still counts as a transition.
    """

    def __init__(self, initial: T) -> None:
        self._current = initial
        self._next: Optional[Tuple[T]] = None

    def set(self, value: T) -> None:
        """Queue ``value`` to become the state on the next :meth:`apply`."""
        self._next = (value,)

    def apply(self) -> Optional[Tuple[T, T]]:
        """Apply a queued state and return ``(old, new)``, or None if nothing was queued."""
        if self._next is None:
            return None
        (new,) = self._next
        self._next = None
        old, self._current = self._current, new
        return old, new

    def current(self) -> T:
        """Return the state in effect."""
        return self._current

    def __repr__(self) -> str:
        return f"StateMachine({self._current!r})"