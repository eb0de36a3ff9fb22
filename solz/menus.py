"""The game's menus: main, credits, pause and settings."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Sequence, Tuple

from .states import Menu, Screen
from .theme import Widget, button, button_small, header, label, ui_root

if TYPE_CHECKING:
    from .screens import Game

MIN_VOLUME = 0.0
MAX_VOLUME = 3.0
VOLUME_STEP = 0.1
MENU_Z_INDEX = 2

CREDITS_MUSIC = "audio/music/Monkeys Spinning Monkeys.ogg"

CREATED_BY: Tuple[Tuple[str, str], ...] = (
    ("Joe Shmoe", "Implemented alligator wrestling AI"),
    ("Jane Doe", "Made the music for the alien invasion"),
)

ASSET_CREDITS: Tuple[Tuple[str, str], ...] = (
    ("Ducky sprite", "CC0 by Caz Creates Games"),
    ("Button SFX", "CC0 by Jaszunio15"),
    ("Music", "CC BY 3.0 by Kevin MacLeod"),
    ("Splash logo", "Used with permission on the splash screen when unmodified"),
)

_GRID_STYLE = {
    "display": "grid",
    "row_gap": 10.0,
    "column_gap": 30.0,
    "grid_template_columns": (400.0, 400.0),
}


def lower_volume(volume: float) -> float:
    """The linear volume one step lower, not below the minimum."""
    return max(volume - VOLUME_STEP, MIN_VOLUME)


def raise_volume(volume: float) -> float:
    """The linear volume one step higher, not above the maximum."""
    return min(volume + VOLUME_STEP, MAX_VOLUME)


def volume_label(volume: float) -> str:
    """The volume as a percentage, three characters wide."""
    return f"{100.0 * volume:3.0f}%"


def grid(content: Sequence[Sequence[str]]) -> Widget:
    """A two-column grid of labels, the left column right-aligned."""
    cells = []
    for row in content:
        if len(row) != 2:
            raise ValueError("every grid row must have exactly two cells")
        cells.extend(label(text) for text in row)
    for i, cell in enumerate(cells):
        cell.style["justify_self"] = "end" if i % 2 == 0 else "start"
    return Widget("Grid", style=dict(_GRID_STYLE), children=cells)


def settings_back_target(screen: Screen) -> Menu:
    """The menu that leaving the settings returns to."""
    return Menu.MAIN if screen is Screen.TITLE else Menu.PAUSE


def _menu_root(name: str, children: Sequence[Widget]) -> Widget:
    root = ui_root(name)
    root.z_index = MENU_Z_INDEX
    root.children.extend(children)
    return root


def main_menu(game: "Game") -> Widget:
    """The title screen's menu."""
    buttons = [
        button("Play", game.play),
        button("Settings", game.open_settings),
        button("Credits", game.open_credits),
    ]
    if sys.platform != "emscripten":
        buttons.append(button("Exit", game.exit))
    return _menu_root("Main Menu", buttons)


def credits_menu(game: "Game") -> Widget:
    """The credits listing."""
    return _menu_root(
        "Credits Menu",
        [
            header("Created by"),
            grid(CREATED_BY),
            header("Assets"),
            grid(ASSET_CREDITS),
            button("Back", game.back),
        ],
    )


def pause_menu(game: "Game") -> Widget:
    """The menu shown while the game is paused."""
    return _menu_root(
        "Pause Menu",
        [
            header("Game paused"),
            button("Continue", game.close_menu),
            button("Settings", game.open_settings),
            button("Quit to title", game.quit_to_title),
        ],
    )


def settings_menu(game: "Game") -> Widget:
    """The settings, currently the master volume."""
    master = label("Master Volume")
    master.style["justify_self"] = "end"
    current = Widget(
        "Current Volume",
        style={"padding_horizontal": 10.0, "justify_content": "center"},
        children=[label(volume_label(game.volume))],
    )
    volume_widget = Widget(
        "Global Volume Widget",
        style={"justify_self": "start"},
        children=[
            button_small("-", game.lower_volume),
            current,
            button_small("+", game.raise_volume),
        ],
    )
    settings_grid = Widget(
        "Settings Grid", style=dict(_GRID_STYLE), children=[master, volume_widget]
    )
    return _menu_root(
        "Settings Menu",
        [header("Settings"), settings_grid, button("Back", game.back)],
    )