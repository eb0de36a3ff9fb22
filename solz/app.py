"""The game window: input, drawing and audio around a :class:`Game`."""

from __future__ import annotations

import argparse
import os
from typing import Dict, List, Optional, Sequence, Tuple

import pygame

from .screens import Game
from .theme import Interaction, Widget

TITLE = "Solz"
BACKGROUND = (40, 40, 40)
PLAYER_COLOR = (250, 220, 90)
TILE = 32


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="solz", description="Run the game.")
    parser.add_argument("--width", type=int, default=1280)
    parser.add_argument("--height", type=int, default=720)
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    parser.add_argument("--assets", default="assets", help="asset directory")
    parser.add_argument("--dev", action="store_true", help="enable development tools")
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0 or args.fps <= 0:
        parser.error("width, height and fps must be positive")
    return args


def _rgb(color) -> Tuple[int, int, int]:
    return color.rgba8[:3]


class _Audio:
    def __init__(self, assets: str) -> None:
        self._assets = assets
        self._sounds: Dict[str, "pygame.mixer.Sound"] = {}
        self._music: Dict[int, "pygame.mixer.Sound"] = {}
        try:
            pygame.mixer.init()
            self.enabled = True
        except pygame.error:
            self.enabled = False

    def _load(self, handle: str):
        if handle not in self._sounds:
            path = os.path.join(self._assets, handle)
            if not os.path.isfile(path):
                return None
            try:
                self._sounds[handle] = pygame.mixer.Sound(path)
            except pygame.error:
                return None
        return self._sounds[handle]

    def sync(self, game: Game) -> None:
        effects, game.sound_effects = game.sound_effects, []
        if not self.enabled:
            return
        for instance in effects:
            sound = self._load(str(instance.handle))
            if sound is not None:
                sound.set_volume(min(instance.sink_volume, 1.0))
                sound.play()
        live = {id(i): i for i in game.music.values()}
        for key in list(self._music):
            if key not in live:
                self._music.pop(key).stop()
        for key, instance in live.items():
            if key not in self._music:
                sound = self._load(str(instance.handle))
                if sound is None:
                    continue
                sound.play(loops=-1)
                self._music[key] = sound
            self._music[key].set_volume(min(instance.sink_volume, 1.0))


class _Renderer:
    def __init__(self, assets: str) -> None:
        self._assets = assets
        self._fonts: Dict[int, "pygame.font.Font"] = {}
        self._images: Dict[str, Optional["pygame.Surface"]] = {}
        self.buttons: List[Tuple["pygame.Rect", Widget]] = []
        self.pressed: Optional[Widget] = None
        self.hovered: Optional[Widget] = None

    def _font(self, size: float):
        key = int(size)
        if key not in self._fonts:
            self._fonts[key] = pygame.font.Font(None, key)
        return self._fonts[key]

    def _image(self, path: str):
        if path not in self._images:
            full = os.path.join(self._assets, path)
            try:
                self._images[path] = pygame.image.load(full) if os.path.isfile(full) else None
            except pygame.error:
                self._images[path] = None
        return self._images[path]

    def widget_at(self, pos) -> Optional[Widget]:
        return next((w for rect, w in reversed(self.buttons) if rect.collidepoint(pos)), None)

    def _interaction(self, widget: Widget) -> Interaction:
        if widget is self.pressed and widget is self.hovered:
            return Interaction.PRESSED
        if widget is self.hovered:
            return Interaction.HOVERED
        return Interaction.NONE

    def _size(self, widget: Widget) -> Tuple[int, int]:
        if widget.name == "Button Inner":
            return int(widget.style.get("width", 0)), int(widget.style.get("height", 0))
        if widget.text is not None:
            return self._font(widget.font_size or 24).size(widget.text or " ")
        if widget.name in ("Grid", "Settings Grid"):
            rows = [widget.children[i:i + 2] for i in range(0, len(widget.children), 2)]
            height = sum(max(self._size(c)[1] for c in row) for row in rows)
            return 830, height + 10 * max(len(rows) - 1, 0)
        sizes = [self._size(c) for c in widget.children]
        return sum(w for w, _ in sizes), max((h for _, h in sizes), default=0)

    def _draw(self, surface, widget: Widget, x: int, y: int) -> None:
        w, h = self._size(widget)
        if widget.name == "Button Inner":
            rect = pygame.Rect(x, y, w, h)
            color = widget.palette.color_for(self._interaction(widget)) if widget.palette else widget.background
            pygame.draw.rect(surface, _rgb(color), rect, border_radius=h // 2 if "border_radius" in widget.style else 0)
            self.buttons.append((rect, widget))
            for child in widget.children:
                cw, ch = self._size(child)
                self._draw(surface, child, x + (w - cw) // 2, y + (h - ch) // 2)
            return
        if widget.text is not None:
            text = self._font(widget.font_size or 24).render(widget.text, True, _rgb(widget.text_color))
            surface.blit(text, (x, y))
            return
        if widget.name in ("Grid", "Settings Grid"):
            row_y = y
            for i in range(0, len(widget.children), 2):
                row = widget.children[i:i + 2]
                rh = max(self._size(c)[1] for c in row)
                left = row[0]
                self._draw(surface, left, x + 400 - self._size(left)[0], row_y)
                if len(row) > 1:
                    self._draw(surface, row[1], x + 430, row_y)
                row_y += rh + 10
            return
        cx = x
        for child in widget.children:
            cw, ch = self._size(child)
            self._draw(surface, child, cx, y + (h - ch) // 2)
            cx += cw

    def _draw_root(self, surface, root: Widget, alpha: float) -> None:
        width, height = surface.get_size()
        if root.background is not None and not root.children:
            overlay = pygame.Surface((width, height), pygame.SRCALPHA)
            overlay.fill(root.background.rgba8)
            surface.blit(overlay, (0, 0))
            return
        if root.background is not None:
            surface.fill(_rgb(root.background))
        gap = int(root.style.get("row_gap", 20.0))
        sizes = [self._size(c) for c in root.children]
        total = sum(h for _, h in sizes) + gap * max(len(sizes) - 1, 0)
        y = (height - total) // 2
        for child, (w, h) in zip(root.children, sizes):
            if child.image is not None:
                image = self._image(child.image)
                if image is not None:
                    scaled_w = int(width * 0.7)
                    scaled_h = int(image.get_height() * scaled_w / max(image.get_width(), 1))
                    scaled = pygame.transform.smoothscale(image.convert_alpha(), (scaled_w, scaled_h))
                    scaled.set_alpha(int(255 * alpha))
                    surface.blit(scaled, ((width - scaled_w) // 2, (height - scaled_h) // 2))
                continue
            self._draw(surface, child, (width - w) // 2, y)
            y += h + gap

    def draw(self, surface, game: Game) -> None:
        self.buttons = []
        surface.fill(BACKGROUND)
        sprite = game.player
        if sprite is not None:
            width, height = surface.get_size()
            size = int(TILE * sprite.scale[0])
            x, y, _ = sprite.translation
            rect = pygame.Rect(0, 0, size, size)
            rect.center = (int(width / 2 + x), int(height / 2 - y))
            pygame.draw.rect(surface, PLAYER_COLOR, rect)
        alpha = game.splash.image_alpha if game.splash is not None else 1.0
        for root in game.ui_roots():
            self._draw_root(surface, root, alpha)
            if game.debug_ui:
                for rect, _ in self.buttons:
                    pygame.draw.rect(surface, (255, 0, 0), rect, 1)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    pygame.init()
    try:
        surface = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        game = Game()
        game.window_size = (float(args.width), float(args.height))
        renderer = _Renderer(args.assets)
        audio = _Audio(args.assets)
        clock = pygame.time.Clock()
        frame = 0
        while not game.exit_requested:
            just = set()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.exit()
                elif event.type == pygame.KEYDOWN:
                    name = pygame.key.name(event.key)
                    just.add(name)
                    game.held.add(name)
                elif event.type == pygame.KEYUP:
                    game.held.discard(pygame.key.name(event.key))
                elif event.type == pygame.VIDEORESIZE:
                    game.window_size = (float(event.w), float(event.h))
                elif event.type == pygame.MOUSEMOTION:
                    target = renderer.widget_at(event.pos)
                    if target is not None and target is not renderer.hovered and "interaction" in game.resources:
                        game.spawn_sound(game.interaction_assets.sound_for("over"))
                    renderer.hovered = target
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    renderer.pressed = renderer.widget_at(event.pos)
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    target = renderer.widget_at(event.pos)
                    if target is not None and target is renderer.pressed:
                        if "interaction" in game.resources:
                            game.spawn_sound(game.interaction_assets.sound_for("click"))
                        if target.action is not None:
                            target.action()
                    renderer.pressed = None
            if not args.dev:
                just.discard("`")
            delta = clock.tick(args.fps) / 1000.0
            game.update(delta, just)
            audio.sync(game)
            renderer.draw(surface, game)
            pygame.display.flip()
            frame += 1
            if args.frames is not None and frame >= args.frames:
                break
    finally:
        pygame.quit()
    return 0