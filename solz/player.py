"""The player character, its input handling and the level's assets."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import AbstractSet, Optional, Tuple

from .animation import PlayerAnimation, sprite_flip, state_for_intent
from .audio import AudioInstance, sound_effect
from .movement import MovementController, Vec2, Vec3, apply_movement, screen_wrap

UP_KEYS = frozenset({"w", "up"})
DOWN_KEYS = frozenset({"s", "down"})
LEFT_KEYS = frozenset({"a", "left"})
RIGHT_KEYS = frozenset({"d", "right"})

ATLAS_TILE_SIZE = 32
ATLAS_COLUMNS = 6
ATLAS_ROWS = 2
ATLAS_PADDING = 1

PLAYER_SCALE: Vec3 = (8.0, 8.0, 1.0)
LEVEL_PLAYER_SPEED = 400.0


@dataclass(frozen=True)
class PlayerAssets:
    """Image and footstep sounds used by the player."""

    ducky: str = "images/ducky.png"
    steps: Tuple[str, ...] = (
        "audio/sound_effects/step1.ogg",
        "audio/sound_effects/step2.ogg",
        "audio/sound_effects/step3.ogg",
        "audio/sound_effects/step4.ogg",
    )


@dataclass(frozen=True)
class LevelAssets:
    """Assets of the main level."""

    music: str = "audio/music/Fluffing A Duck.ogg"


def directional_intent(pressed: AbstractSet[str]) -> Vec2:
    """Turn the set of pressed key names into a unit movement direction, or zero."""
    x = y = 0.0
    if pressed & UP_KEYS:
        y += 1.0
    if pressed & DOWN_KEYS:
        y -= 1.0
    if pressed & LEFT_KEYS:
        x -= 1.0
    if pressed & RIGHT_KEYS:
        x += 1.0
    length = math.hypot(x, y)
    if length == 0.0 or not math.isfinite(length):
        return (0.0, 0.0)
    return (x / length, y / length)


@dataclass
class Player:
    """The player character: sprite, movement and animation."""

    image: str
    controller: MovementController = field(default_factory=MovementController)
    animation: PlayerAnimation = field(default_factory=PlayerAnimation)
    translation: Vec3 = (0.0, 0.0, 0.0)
    scale: Vec3 = PLAYER_SCALE
    flip_x: bool = False
    atlas_index: int = 0
    name: str = "Player"

    def __post_init__(self) -> None:
        self.atlas_index = self.animation.atlas_index()

    def record_input(self, pressed: AbstractSet[str]) -> None:
        """Set the movement intent from the pressed keys."""
        self.controller.intent = directional_intent(pressed)

    def tick(self, delta: float) -> None:
        """Advance the animation timer by ``delta`` seconds."""
        self.animation.update_timer(delta)

    def update(self, delta_secs: float, window_size: Vec2) -> None:
        """Update facing, animation and atlas frame, then move and wrap in the window."""
        intent = self.controller.intent
        self.flip_x = sprite_flip(intent[0], self.flip_x)
        self.animation.update_state(state_for_intent(intent))
        if self.animation.changed():
            self.atlas_index = self.animation.atlas_index()

        moved = apply_movement(self.translation, self.controller, delta_secs)
        x, y = screen_wrap((moved[0], moved[1]), window_size)
        self.translation = (x, y, moved[2])

    def step_sound(
        self, assets: PlayerAssets, rng: Optional[random.Random] = None
    ) -> Optional[AudioInstance]:
        """A random footstep sound if one belongs to this tick, else None."""
        if not self.animation.is_step_frame():
            return None
        chooser = rng if rng is not None else random
        return sound_effect(chooser.choice(assets.steps))


def player(max_speed: float, assets: PlayerAssets) -> Player:
    """Create the player with the given top speed."""
    return Player(image=assets.ducky, controller=MovementController(max_speed=max_speed))