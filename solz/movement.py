"""Character movement from intent and wrapping around the window edges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]

WRAP_MARGIN = 256.0


@dataclass
class MovementController:
    """Movement parameters: a desired direction and a top speed in pixels per second."""

    intent: Vec2 = (0.0, 0.0)
    max_speed: float = 400.0


def apply_movement(translation: Vec3, controller: MovementController, delta_secs: float) -> Vec3:
    """Return ``translation`` moved by the controller's velocity over ``delta_secs``."""
    x, y, z = translation
    ix, iy = controller.intent
    return (
        x + controller.max_speed * ix * delta_secs,
        y + controller.max_speed * iy * delta_secs,
        z,
    )


def screen_wrap(position: Vec2, window_size: Vec2) -> Vec2:
    """Wrap ``position`` into the window, padded by a margin, centred on the origin."""
    return tuple(  # type: ignore[return-value]
        (p + size / 2.0) % size - size / 2.0
        for p, size in ((p, w + WRAP_MARGIN) for p, w in zip(position, window_size))
    )