"""The game window, main loop and command-line entry point."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Set, Tuple, Union

import pygame

from sokoban.assets import AssetStore
from sokoban.core import SCREEN_HEIGHT, SCREEN_WIDTH, TARGET_FPS, TICK_TIME, point_in_rect
from sokoban.levels import load_levels
from sokoban.render import (
    draw_button,
    draw_level_scene,
    draw_level_select_scene,
    draw_menu_scene,
)
from sokoban.scenes import (
    Key,
    change_scene,
    handle_level_scene_input,
    handle_level_select_click,
    update_level_scene,
)
from sokoban.state import GameState, Scene

log = logging.getLogger(__name__)

_KEYS = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_r: Key.R,
}


def _load_image(path: Path) -> pygame.Surface:
    return pygame.image.load(str(path))


def _load_sound(path: Path) -> Any:
    return pygame.mixer.Sound(str(path))


class Game:
    """Owns the game state, its assets and the frame loop."""

    def __init__(self, resource_dir: Union[str, Path] = "res") -> None:
        root = Path(resource_dir)
        self.levels = load_levels(root / "levels")

        self.sprites: AssetStore[pygame.Surface] = AssetStore(_load_image)
        self.sprites.load_directory(root / "sprites")

        self.previews: List[pygame.Surface] = [
            pygame.image.load(str(level.path))
            if level.path is not None
            else pygame.Surface((max(level.width, 1), max(level.height, 1)))
            for level in self.levels
        ]

        sounds: Optional[AssetStore[Any]] = None
        try:
            pygame.mixer.init()
        except (pygame.error, NotImplementedError) as exc:
            log.warning("Audio unavailable: %s", exc)
        else:
            sounds = AssetStore(_load_sound)
            sounds.load_directory(root / "sounds")

        self.state = GameState(levels=self.levels, sounds=sounds)
        self.screen = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
        self._mouse_pos: Tuple[float, float] = (-1.0, -1.0)
        self._fonts: Dict[int, pygame.font.Font] = {}
        change_scene(self.state, Scene.MENU)

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = self._fonts[size] = pygame.font.Font(None, size)
        return font

    def handle_input(self, events: Iterable[pygame.event.Event]) -> None:
        """React to one frame's worth of window events."""
        state = self.state
        escape = False
        click: Optional[Tuple[float, float]] = None
        pressed: Set[Key] = set()

        for event in events:
            if event.type == pygame.QUIT:
                state.should_exit = True
                return
            if event.type == pygame.MOUSEMOTION:
                self._mouse_pos = tuple(event.pos)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    escape = True
                elif event.key in _KEYS:
                    pressed.add(_KEYS[event.key])
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                click = tuple(event.pos)
                self._mouse_pos = click

        if escape:
            change_scene(state, Scene.MENU)
            return

        if click is not None:
            for button in list(state.buttons):
                if not point_in_rect(click, button.rect):
                    continue
                state.play("menu_click")
                if button.on_click is not None:
                    button.on_click(state)
                # A button may switch scene; the click must not reach the new one.
                return

        if state.scene is Scene.LEVEL_SELECT:
            if click is not None:
                handle_level_select_click(state, click)
        elif state.scene in (Scene.LEVEL, Scene.TEST):
            handle_level_scene_input(state, pressed)

    def update(self, dt: float) -> None:
        """Advance the game by dt seconds in fixed ticks."""
        state = self.state
        state.time_since_last_tick += dt
        while state.time_since_last_tick >= TICK_TIME:
            if state.scene is Scene.LEVEL:
                update_level_scene(state)
            state.time_since_last_tick -= TICK_TIME

    def draw(self) -> None:
        """Render the current scene and its buttons onto the screen surface."""
        state = self.state
        if state.scene is Scene.LEVEL_SELECT:
            draw_level_select_scene(self.screen, state, self.previews, self._font)
        elif state.scene is Scene.MENU:
            draw_menu_scene(self.screen, state)
        elif state.scene is Scene.LEVEL:
            draw_level_scene(self.screen, state, self.sprites, self._font)

        for button in state.buttons:
            draw_button(self.screen, self._font, button, self._mouse_pos)

    def run(self) -> None:
        """Open the window and run the frame loop until the game exits."""
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Sokoban")
        clock = pygame.time.Clock()
        try:
            while not self.state.should_exit:
                self.handle_input(pygame.event.get())
                self.update(clock.tick(TARGET_FPS) / 1000.0)
                self.draw()
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="sokoban", description="Play Sokoban.")
    parser.add_argument(
        "--resources",
        default="res",
        help="directory holding levels/, sprites/ and sounds/ (default: res)",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    Game(args.resources).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())