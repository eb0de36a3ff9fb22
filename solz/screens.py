"""The game: screens, menus, pausing and the transitions between them."""

from __future__ import annotations

from typing import AbstractSet, Callable, Dict, Hashable, List, Optional, Set, Tuple

from . import menus
from .asset_tracking import ResourceHandles
from .audio import AudioInstance, apply_global_volume, music
from .player import LEVEL_PLAYER_SPEED, LevelAssets, Player, PlayerAssets, player
from .splash import SplashScreen
from .states import Menu, Screen, StateMachine
from .theme import Color, InteractionAssets, Widget, label, ui_root

PAUSE_KEYS = frozenset({"p", "escape"})
DEBUG_TOGGLE_KEY = "`"
OVERLAY_COLOR = Color.srgba(0.0, 0.0, 0.0, 0.8)
RESOURCE_NAMES = ("level", "player", "credits", "interaction")


class Game:
    """All game state, advanced one frame at a time by :meth:`update`."""

    def __init__(self, resource_handles: Optional[ResourceHandles] = None) -> None:
        self.screen: StateMachine[Screen] = StateMachine(Screen.SPLASH)
        self.menu: StateMachine[Menu] = StateMachine(Menu.NONE)
        self.pause: StateMachine[bool] = StateMachine(False)
        self.volume = 1.0
        self.held: Set[str] = set()
        self.window_size: Tuple[float, float] = (1280.0, 720.0)
        self.asset_loaded: Callable[[Hashable], bool] = lambda handle: True
        self.resources: Set[Hashable] = set()
        self.player_assets = PlayerAssets()
        self.level_assets = LevelAssets()
        self.interaction_assets = InteractionAssets()
        self.music: Dict[str, AudioInstance] = {}
        self.sound_effects: List[AudioInstance] = []
        self.player: Optional[Player] = None
        self.splash: Optional[SplashScreen] = None
        self.debug_ui = False
        self.exit_requested = False
        self._ui: Dict[str, Widget] = {}
        if resource_handles is None:
            resource_handles = ResourceHandles()
            for name in RESOURCE_NAMES:
                resource_handles.load_resource(name, self.resources.add)
        self.resource_handles = resource_handles
        self._enter_screen(Screen.SPLASH)

    def ui_roots(self) -> List[Widget]:
        """The spawned UI roots, lowest z-index first."""
        return sorted(self._ui.values(), key=lambda w: w.z_index)

    def _spawn_music(self, key: str, handle: Hashable) -> None:
        instance = music(handle)
        instance.sink_volume = self.volume * instance.volume
        self.music[key] = instance

    def spawn_sound(self, instance: AudioInstance) -> None:
        """Start a sound effect at the current global volume."""
        instance.sink_volume = self.volume * instance.volume
        self.sound_effects.append(instance)

    def update(
        self, delta_secs: float, just_pressed: AbstractSet[str] = frozenset()
    ) -> List[Tuple[object, object]]:
        """Advance one frame; return the state transitions applied at its end."""
        self.resource_handles.update(self.asset_loaded)
        just = frozenset(just_pressed)
        screen = self.screen.current()
        menu = self.menu.current()
        paused = self.pause.current()

        if DEBUG_TOGGLE_KEY in just:
            self.debug_ui = not self.debug_ui

        if screen is Screen.SPLASH:
            if self.splash is not None and self.splash.tick(delta_secs):
                self.screen.set(Screen.TITLE)
            if "escape" in just:
                self.screen.set(Screen.TITLE)

        if self.player is not None and not paused:
            self.player.tick(delta_secs)
            self.player.record_input(self.held)
            self.player.update(delta_secs, self.window_size)
            if "player" in self.resources:
                sound = self.player.step_sound(self.player_assets)
                if sound is not None:
                    self.spawn_sound(sound)

        if screen is Screen.LOADING and self.resource_handles.is_all_done():
            self.screen.set(Screen.GAMEPLAY)

        if screen is Screen.GAMEPLAY:
            if menu is Menu.NONE and just & PAUSE_KEYS:
                self.pause.set(True)
                overlay = Widget(
                    "Pause Overlay",
                    background=OVERLAY_COLOR,
                    style={"width": "100%", "height": "100%"},
                    z_index=1,
                )
                self._ui["overlay"] = overlay
                self.menu.set(Menu.PAUSE)
            elif menu is not Menu.NONE and "p" in just:
                self.menu.set(Menu.NONE)

        if "escape" in just and menu in (Menu.CREDITS, Menu.PAUSE, Menu.SETTINGS):
            self.back()

        if menu is Menu.SETTINGS:
            self._refresh_volume_label()

        return self.apply_transitions()

    def _refresh_volume_label(self) -> None:
        root = self._ui.get("menu")
        current = root.find("Current Volume") if root is not None else None
        if current is not None and current.children:
            current.children[0].text = menus.volume_label(self.volume)

    def apply_transitions(self) -> List[Tuple[object, object]]:
        """Apply queued screen, menu and pause changes, running their enter and exit work."""
        changes: List[Tuple[object, object]] = []
        change = self.screen.apply()
        if change is not None:
            self._exit_screen(change[0])
            self._enter_screen(change[1])
            changes.append(change)
        change = self.menu.apply()
        if change is not None:
            self._exit_menu(change[0])
            self._enter_menu(change[1])
            changes.append(change)
        change = self.pause.apply()
        if change is not None:
            if change[0]:
                self._ui.pop("overlay", None)
            changes.append(change)
        return changes

    def _enter_screen(self, screen: Screen) -> None:
        if screen is Screen.SPLASH:
            self.splash = SplashScreen()
            self._ui["screen"] = self.splash.root
        elif screen is Screen.TITLE:
            self.menu.set(Menu.MAIN)
        elif screen is Screen.LOADING:
            root = ui_root("Loading Screen")
            root.children.append(label("Loading..."))
            self._ui["screen"] = root
        elif screen is Screen.GAMEPLAY:
            self.player = player(LEVEL_PLAYER_SPEED, self.player_assets)
            self._spawn_music("level", self.level_assets.music)

    def _exit_screen(self, screen: Screen) -> None:
        if screen is Screen.SPLASH:
            self.splash = None
            self._ui.pop("screen", None)
        elif screen is Screen.TITLE:
            self.menu.set(Menu.NONE)
        elif screen is Screen.LOADING:
            self._ui.pop("screen", None)
        elif screen is Screen.GAMEPLAY:
            self.menu.set(Menu.NONE)
            self.pause.set(False)
            self.player = None
            self.music.pop("level", None)

    def _enter_menu(self, menu: Menu) -> None:
        if menu is Menu.NONE:
            if self.screen.current() is Screen.GAMEPLAY:
                self.pause.set(False)
            return
        builders = {
            Menu.MAIN: menus.main_menu,
            Menu.CREDITS: menus.credits_menu,
            Menu.PAUSE: menus.pause_menu,
            Menu.SETTINGS: menus.settings_menu,
        }
        self._ui["menu"] = builders[menu](self)
        if menu is Menu.CREDITS and "credits" in self.resources:
            self._spawn_music("credits", menus.CREDITS_MUSIC)

    def _exit_menu(self, menu: Menu) -> None:
        self._ui.pop("menu", None)
        if menu is Menu.CREDITS:
            self.music.pop("credits", None)

    def play(self) -> None:
        """Start the game, through the loading screen if assets are still loading."""
        if self.resource_handles.is_all_done():
            self.screen.set(Screen.GAMEPLAY)
        else:
            self.screen.set(Screen.LOADING)

    def open_settings(self) -> None:
        self.menu.set(Menu.SETTINGS)

    def open_credits(self) -> None:
        self.menu.set(Menu.CREDITS)

    def close_menu(self) -> None:
        self.menu.set(Menu.NONE)

    def quit_to_title(self) -> None:
        self.screen.set(Screen.TITLE)

    def back(self) -> None:
        """Leave the open menu for the one it was reached from."""
        menu = self.menu.current()
        if menu is Menu.CREDITS:
            self.menu.set(Menu.MAIN)
        elif menu is Menu.SETTINGS:
            self.menu.set(menus.settings_back_target(self.screen.current()))
        elif menu is Menu.PAUSE:
            self.menu.set(Menu.NONE)

    def exit(self) -> None:
        self.exit_requested = True

    def _set_volume(self, volume: float) -> None:
        self.volume = volume
        apply_global_volume(self.volume, self.music.values())

    def lower_volume(self) -> None:
        self._set_volume(menus.lower_volume(self.volume))

    def raise_volume(self) -> None:
        self._set_volume(menus.raise_volume(self.volume))

    def paused(self) -> bool:
        return self.pause.current()