"""Timers and the player's sprite animation."""

from __future__ import annotations

import enum
from typing import Tuple

_NANOS = 1_000_000_000
_U32_MAX = 2**32 - 1


def _to_nanos(seconds: float) -> int:
    return round(seconds * _NANOS)


class TimerMode(enum.Enum):
    """Whether a timer stops once it finishes or starts over."""

    ONCE = "once"
    REPEATING = "repeating"


class Timer:
    """Counts elapsed time towards a duration, in seconds.

    Time is kept in whole nanoseconds so that repeated ticks add up exactly.
    """

    def __init__(self, duration: float, mode: TimerMode) -> None:
        if duration < 0:
            raise ValueError("timer duration must not be negative")
        self._duration = _to_nanos(duration)
        self._elapsed = 0
        self.mode = mode
        self._finished = False
        self._times_finished_this_tick = 0

    @classmethod
    def from_seconds(cls, seconds: float, mode: TimerMode) -> "Timer":
        """Create a timer lasting ``seconds``."""
        return cls(seconds, mode)

    @property
    def duration(self) -> float:
        return self._duration / _NANOS

    @property
    def elapsed(self) -> float:
        return self._elapsed / _NANOS

    @property
    def times_finished_this_tick(self) -> int:
        return self._times_finished_this_tick

    def tick(self, delta: float) -> "Timer":
        """Advance the timer by ``delta`` seconds."""
        if delta < 0:
            raise ValueError("cannot tick a timer backwards")
        if self.mode is TimerMode.ONCE and self._finished:
            self._times_finished_this_tick = 0
            return self
        self._elapsed += _to_nanos(delta)
        self._finished = self._elapsed >= self._duration
        if not self._finished:
            self._times_finished_this_tick = 0
        elif self.mode is TimerMode.REPEATING:
            if self._duration == 0:
                self._times_finished_this_tick = _U32_MAX
                self._elapsed = 0
            else:
                laps, self._elapsed = divmod(self._elapsed, self._duration)
                self._times_finished_this_tick = min(laps, _U32_MAX)
        else:
            self._times_finished_this_tick = 1
            self._elapsed = self._duration
        return self

    def finished(self) -> bool:
        """True if the timer reached its duration (for repeating timers: during the last tick)."""
        return self._finished

    def just_finished(self) -> bool:
        """True if the timer reached its duration during the last tick."""
        return self._times_finished_this_tick > 0


class PlayerAnimationState(enum.Enum):
    IDLING = "idling"
    WALKING = "walking"


class PlayerAnimation:
    """The player's animation state, bound to the sprite's texture atlas layout."""

    IDLE_FRAMES = 2
    IDLE_INTERVAL = 0.5
    WALKING_FRAMES = 6
    WALKING_INTERVAL = 0.05

    def __init__(self) -> None:
        self._reset(PlayerAnimationState.IDLING)

    def _reset(self, state: PlayerAnimationState) -> None:
        interval = (
            self.IDLE_INTERVAL if state is PlayerAnimationState.IDLING else self.WALKING_INTERVAL
        )
        self._timer = Timer(interval, TimerMode.REPEATING)
        self._frame = 0
        self._state = state

    @property
    def frame(self) -> int:
        return self._frame

    @property
    def state(self) -> PlayerAnimationState:
        return self._state

    def update_timer(self, delta: float) -> None:
        """Advance the frame timer by ``delta`` seconds."""
        self._timer.tick(delta)
        if not self._timer.finished():
            return
        frames = (
            self.IDLE_FRAMES if self._state is PlayerAnimationState.IDLING else self.WALKING_FRAMES
        )
        self._frame = (self._frame + 1) % frames

    def update_state(self, state: PlayerAnimationState) -> None:
        """Switch to ``state``, restarting the animation, if it differs."""
        if self._state is not state:
            self._reset(state)

    def changed(self) -> bool:
        """Whether the frame advanced on the last tick."""
        return self._timer.finished()

    def atlas_index(self) -> int:
        """Index of the current frame in the sprite atlas."""
        if self._state is PlayerAnimationState.IDLING:
            return self._frame
        return self.WALKING_FRAMES + self._frame

    def is_step_frame(self) -> bool:
        """Whether a footstep sound belongs to this tick."""
        return (
            self._state is PlayerAnimationState.WALKING
            and self.changed()
            and self._frame in (2, 5)
        )


def state_for_intent(intent: Tuple[float, float]) -> PlayerAnimationState:
    """Idle when there is no movement intent, walking otherwise."""
    x, y = intent
    if x == 0.0 and y == 0.0:
        return PlayerAnimationState.IDLING
    return PlayerAnimationState.WALKING


def sprite_flip(intent_x: float, flipped: bool) -> bool:
    """Face left when moving left, right when moving right; keep facing when still."""
    if intent_x != 0.0:
        return intent_x < 0.0
    return flipped