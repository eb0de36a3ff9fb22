import pytest

from solz.audio import AudioCategory, PlaybackMode
from solz.theme import (
    BUTTON_BACKGROUND,
    BUTTON_HOVERED_BACKGROUND,
    BUTTON_PRESSED_BACKGROUND,
    BUTTON_TEXT,
    HEADER_TEXT,
    LABEL_TEXT,
    Color,
    Interaction,
    InteractionAssets,
    InteractionPalette,
    Widget,
    button,
    button_small,
    header,
    label,
    ui_root,
)


@pytest.mark.parametrize(
    "color, expected",
    [
        (LABEL_TEXT, "#ddd369"),
        (HEADER_TEXT, "#fcfbcc"),
        (BUTTON_TEXT, "#ececec"),
        (BUTTON_BACKGROUND, "#4666bf"),
        (BUTTON_HOVERED_BACKGROUND, "#6299d1"),
        (BUTTON_PRESSED_BACKGROUND, "#3d4999"),
    ],
)
def test_palette_hex(color, expected):
    assert color.hex == expected


def test_color_with_alpha_keeps_rgb():
    c = LABEL_TEXT.with_alpha(0.5)
    assert c.alpha == 0.5
    assert c.rgba8[:3] == LABEL_TEXT.rgba8[:3]
    assert Color.srgba(1.0, 0.0, 0.0, 1.0).rgba8 == (255, 0, 0, 255)


def test_palette_color_for():
    palette = InteractionPalette(BUTTON_BACKGROUND, BUTTON_HOVERED_BACKGROUND, BUTTON_PRESSED_BACKGROUND)
    assert palette.color_for(Interaction.NONE) == BUTTON_BACKGROUND
    assert palette.color_for(Interaction.HOVERED) == BUTTON_HOVERED_BACKGROUND
    assert palette.color_for(Interaction.PRESSED) == BUTTON_PRESSED_BACKGROUND


def test_interaction_sounds():
    assets = InteractionAssets()
    hover = assets.sound_for("over")
    click = assets.sound_for("click")
    assert hover.handle == "audio/sound_effects/button_hover.ogg"
    assert click.handle == "audio/sound_effects/button_click.ogg"
    assert hover.category is AudioCategory.SOUND_EFFECT
    assert click.mode is PlaybackMode.DESPAWN


def test_interaction_sound_unknown_event():
    with pytest.raises(ValueError):
        InteractionAssets().sound_for("drag")


def test_ui_root():
    root = ui_root("Main Menu")
    assert root.name == "Main Menu"
    assert root.pickable is False
    assert root.style["width"] == "100%"
    assert root.style["flex_direction"] == "column"
    assert root.children == []


def test_header_and_label():
    h = header("Settings")
    lab = label("Master Volume")
    assert (h.name, h.text, h.font_size, h.text_color) == ("Header", "Settings", 40.0, HEADER_TEXT)
    assert (lab.name, lab.text, lab.font_size, lab.text_color) == (
        "Label",
        "Master Volume",
        24.0,
        LABEL_TEXT,
    )


def test_button_structure():
    clicks = []
    b = button("Play", lambda: clicks.append("play"))
    assert [w.name for w in b.walk()] == ["Button", "Button Inner", "Button Text"]
    inner = b.find("Button Inner")
    assert inner.background == BUTTON_BACKGROUND
    assert inner.palette.color_for(Interaction.HOVERED) == BUTTON_HOVERED_BACKGROUND
    assert inner.style["width"] == 380.0
    assert inner.style["height"] == 80.0
    text = b.find("Button Text")
    assert text.text == "Play"
    assert text.pickable is False
    assert text.text_color == BUTTON_TEXT
    inner.action()
    assert clicks == ["play"]


def test_button_small_structure():
    b = button_small("+", lambda: None)
    inner = b.find("Button Inner")
    assert inner.style["width"] == 30.0
    assert inner.style["height"] == 30.0
    assert "border_radius" not in inner.style
    assert b.find("Button Text").text == "+"


def test_walk_is_depth_first():
    root = ui_root("Root")
    root.children.extend([header("A"), button("B", lambda: None), label("C")])
    names = [w.name for w in root.walk()]
    assert names == ["Root", "Header", "Button", "Button Inner", "Button Text", "Label"]


def test_find_missing_returns_none():
    assert Widget("Root").find("Nothing") is None