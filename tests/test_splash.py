import pytest

from solz.splash import (
    SPLASH_BACKGROUND_COLOR,
    SPLASH_DURATION_SECS,
    SPLASH_FADE_DURATION_SECS,
    FadeInOut,
    SplashScreen,
)


def make_fade(t=0.0):
    return FadeInOut(SPLASH_DURATION_SECS, SPLASH_FADE_DURATION_SECS, t)


def test_alpha_starts_and_ends_at_zero():
    assert make_fade(0.0).alpha() == 0.0
    assert make_fade(SPLASH_DURATION_SECS).alpha() == 0.0


def test_alpha_full_in_middle():
    assert make_fade(SPLASH_DURATION_SECS / 2).alpha() == 1.0


def test_alpha_clamped_outside_range():
    assert make_fade(-1.0).alpha() == 0.0
    assert make_fade(SPLASH_DURATION_SECS * 3).alpha() == 0.0


@pytest.mark.parametrize("t", [0.1, 0.2, 0.35, 0.5])
def test_alpha_symmetric(t):
    assert make_fade(t).alpha() == pytest.approx(make_fade(SPLASH_DURATION_SECS - t).alpha())


def test_alpha_rises_during_fade_in():
    values = [make_fade(t).alpha() for t in (0.0, 0.1, 0.2, 0.3, 0.4, 0.5)]
    assert values == sorted(values)
    assert all(0.0 <= v <= 1.0 for v in values)


def test_fade_tick_advances():
    fade = make_fade()
    fade.tick(0.25)
    fade.tick(0.25)
    assert fade.t == pytest.approx(0.5)


def test_splash_screen_layout():
    screen = SplashScreen()
    assert screen.root.name == "Splash Screen"
    assert screen.root.background == SPLASH_BACKGROUND_COLOR
    image = screen.root.find("Splash image")
    assert image.image == "images/splash.png"
    assert screen.image_alpha == 0.0


def test_splash_finishes_once():
    screen = SplashScreen()
    assert screen.tick(SPLASH_DURATION_SECS / 2) is False
    assert screen.image_alpha == 1.0
    assert screen.tick(SPLASH_DURATION_SECS / 2) is True
    assert screen.tick(0.1) is False


def test_splash_image_alpha_follows_fade():
    screen = SplashScreen()
    screen.tick(0.2)
    assert screen.image_alpha == screen.fade.alpha()
    assert 0.0 < screen.image_alpha < 1.0