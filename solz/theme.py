"""Colours, interaction palettes and the UI widget tree."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from .audio import AudioInstance, sound_effect


@dataclass(frozen=True)
class Color:
    """An sRGB colour with components between 0 and 1."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def srgb(cls, red: float, green: float, blue: float) -> "Color":
        return cls(red, green, blue)

    @classmethod
    def srgba(cls, red: float, green: float, blue: float, alpha: float) -> "Color":
        return cls(red, green, blue, alpha)

    def with_alpha(self, alpha: float) -> "Color":
        return replace(self, alpha=alpha)

    @property
    def rgba8(self) -> Tuple[int, int, int, int]:
        """The colour as four 8-bit channels."""
        return tuple(  # type: ignore[return-value]
            max(0, min(255, round(c * 255)))
            for c in (self.red, self.green, self.blue, self.alpha)
        )

    @property
    def hex(self) -> str:
        """The colour as ``#rrggbb``."""
        r, g, b, _ = self.rgba8
        return f"#{r:02x}{g:02x}{b:02x}"


LABEL_TEXT = Color.srgb(0.867, 0.827, 0.412)
HEADER_TEXT = Color.srgb(0.988, 0.984, 0.800)
BUTTON_TEXT = Color.srgb(0.925, 0.925, 0.925)
BUTTON_BACKGROUND = Color.srgb(0.275, 0.400, 0.750)
BUTTON_HOVERED_BACKGROUND = Color.srgb(0.384, 0.600, 0.820)
BUTTON_PRESSED_BACKGROUND = Color.srgb(0.239, 0.286, 0.600)

HEADER_FONT_SIZE = 40.0
LABEL_FONT_SIZE = 24.0
BUTTON_FONT_SIZE = 40.0


class Interaction(enum.Enum):
    """The pointer's relation to a widget."""

    NONE = "none"
    HOVERED = "hovered"
    PRESSED = "pressed"


@dataclass(frozen=True)
class InteractionPalette:
    """Background colours of a widget for each interaction state."""

    none: Color
    hovered: Color
    pressed: Color

    def color_for(self, interaction: Interaction) -> Color:
        """The background colour for ``interaction``."""
        return {
            Interaction.NONE: self.none,
            Interaction.HOVERED: self.hovered,
            Interaction.PRESSED: self.pressed,
        }[interaction]


@dataclass(frozen=True)
class InteractionAssets:
    """Sounds played when the pointer enters or clicks an interactive widget."""

    hover: str = "audio/sound_effects/button_hover.ogg"
    click: str = "audio/sound_effects/button_click.ogg"

    def sound_for(self, event: str) -> AudioInstance:
        """A sound effect for the pointer event ``"over"`` or ``"click"``."""
        if event == "over":
            return sound_effect(self.hover)
        if event == "click":
            return sound_effect(self.click)
        raise ValueError(f"no sound for pointer event {event!r}")


@dataclass(eq=False)
class Widget:
    """A node of the UI tree."""

    name: str
    text: Optional[str] = None
    font_size: Optional[float] = None
    text_color: Optional[Color] = None
    background: Optional[Color] = None
    image: Optional[str] = None
    palette: Optional[InteractionPalette] = None
    action: Optional[Callable[[], object]] = None
    style: Dict[str, object] = field(default_factory=dict)
    pickable: bool = True
    z_index: int = 0
    children: List["Widget"] = field(default_factory=list)

    def walk(self) -> Iterator["Widget"]:
        """This widget and all descendants, depth first, parents before children."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, name: str) -> Optional["Widget"]:
        """The first widget named ``name`` in :meth:`walk` order, or None."""
        return next((w for w in self.walk() if w.name == name), None)


def ui_root(name: str) -> Widget:
    """A root node that fills the window and centres its content in a column."""
    return Widget(
        name,
        style={
            "position": "absolute",
            "width": "100%",
            "height": "100%",
            "align_items": "center",
            "justify_content": "center",
            "flex_direction": "column",
            "row_gap": 20.0,
        },
        pickable=False,
    )


def header(text: str) -> Widget:
    """A large header label."""
    return Widget("Header", text=text, font_size=HEADER_FONT_SIZE, text_color=HEADER_TEXT)


def label(text: str) -> Widget:
    """A plain text label."""
    return Widget("Label", text=text, font_size=LABEL_FONT_SIZE, text_color=LABEL_TEXT)


def _button_base(text: str, action: Callable[[], object], style: Dict[str, object]) -> Widget:
    text_widget = Widget(
        "Button Text",
        text=text,
        font_size=BUTTON_FONT_SIZE,
        text_color=BUTTON_TEXT,
        pickable=False,
    )
    inner = Widget(
        "Button Inner",
        background=BUTTON_BACKGROUND,
        palette=InteractionPalette(
            none=BUTTON_BACKGROUND,
            hovered=BUTTON_HOVERED_BACKGROUND,
            pressed=BUTTON_PRESSED_BACKGROUND,
        ),
        action=action,
        style=style,
        children=[text_widget],
    )
    return Widget("Button", children=[inner])


def button(text: str, action: Callable[[], object]) -> Widget:
    """A large rounded button that runs ``action`` when clicked."""
    return _button_base(
        text,
        action,
        {
            "width": 380.0,
            "height": 80.0,
            "align_items": "center",
            "justify_content": "center",
            "border_radius": "max",
        },
    )


def button_small(text: str, action: Callable[[], object]) -> Widget:
    """A small square button that runs ``action`` when clicked."""
    return _button_base(
        text,
        action,
        {
            "width": 30.0,
            "height": 30.0,
            "align_items": "center",
            "justify_content": "center",
        },
    )