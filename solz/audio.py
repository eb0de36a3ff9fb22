"""Audio instances grouped into music and sound effects, with global volume."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Hashable, Iterable


class AudioCategory(enum.Enum):
    """Organisational category of a playing sound."""

    MUSIC = "music"
    SOUND_EFFECT = "sound_effect"


class PlaybackMode(enum.Enum):
    """What happens when a sound reaches its end."""

    LOOP = "loop"
    DESPAWN = "despawn"


@dataclass
class AudioInstance:
    """A playing sound.

    ``volume`` is the instance's own linear volume; ``sink_volume`` is the
    volume actually applied, after the global volume is taken into account.
    """

    handle: Hashable
    mode: PlaybackMode
    category: AudioCategory
    volume: float = 1.0
    sink_volume: float = 1.0


def music(handle: Hashable) -> AudioInstance:
    """A looping music instance."""
    return AudioInstance(handle, PlaybackMode.LOOP, AudioCategory.MUSIC)


def sound_effect(handle: Hashable) -> AudioInstance:
    """A one-shot sound effect instance, removed when it ends."""
    return AudioInstance(handle, PlaybackMode.DESPAWN, AudioCategory.SOUND_EFFECT)


def apply_global_volume(global_volume: float, instances: Iterable[AudioInstance]) -> None:
    """Update the applied volume of already-running instances."""
    for instance in instances:
        instance.sink_volume = global_volume * instance.volume