"""The splash screen shown briefly at startup."""

from __future__ import annotations

from dataclasses import dataclass

from .animation import Timer, TimerMode
from .theme import Color, Widget, ui_root

SPLASH_BACKGROUND_COLOR = Color.srgb(0.157, 0.157, 0.157)
SPLASH_DURATION_SECS = 1.8
SPLASH_FADE_DURATION_SECS = 0.6
SPLASH_IMAGE = "images/splash.png"


@dataclass
class FadeInOut:
    """Fades an image in and out over a total duration."""

    total_duration: float
    fade_duration: float
    t: float = 0.0

    def alpha(self) -> float:
        """Opacity: a trapezoid rising from 0, flat at 1, falling back to 0."""
        t = min(max(self.t / self.total_duration, 0.0), 1.0)
        fade = self.fade_duration / self.total_duration
        return min((1.0 - abs(2.0 * t - 1.0)) / fade, 1.0)

    def tick(self, delta_secs: float) -> None:
        """Advance the progress by ``delta_secs`` seconds."""
        self.t += delta_secs


class SplashScreen:
    """The splash image, its fade and the timer that ends the screen."""

    def __init__(self) -> None:
        self.fade = FadeInOut(SPLASH_DURATION_SECS, SPLASH_FADE_DURATION_SECS)
        self.timer = Timer.from_seconds(SPLASH_DURATION_SECS, TimerMode.ONCE)
        self.image = Widget(
            "Splash image",
            image=SPLASH_IMAGE,
            style={"margin": "auto", "width": "70%"},
        )
        self.root = ui_root("Splash Screen")
        self.root.background = SPLASH_BACKGROUND_COLOR
        self.root.children.append(self.image)
        self.image_alpha = self.fade.alpha()

    def tick(self, delta_secs: float) -> bool:
        """Advance by ``delta_secs``; True on the tick the splash time runs out."""
        self.fade.tick(delta_secs)
        self.timer.tick(delta_secs)
        self.image_alpha = self.fade.alpha()
        return self.timer.just_finished()