"""Drawing of scenes and buttons onto pygame surfaces."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, List, Sequence, Tuple

import pygame

from sokoban.assets import AssetStore
from sokoban.core import SCREEN_HEIGHT, SCREEN_WIDTH, Button, point_in_rect
from sokoban.levels import FloorType
from sokoban.scenes import (
    LEVEL_DISPLAY_BOX,
    LEVEL_DISPLAY_BOX_PADDING,
    LEVEL_IMAGE_HEIGHT,
    LEVEL_IMAGE_WIDTH,
    LEVEL_SELECT_FONT_SIZE,
    TILE_SIZE,
    UI_HEIGHT,
    fit_rect,
)
from sokoban.state import GameState, LevelState

if TYPE_CHECKING:
    FontFactory = Callable[[int], pygame.font.Font]
else:
    FontFactory = Callable[[int], Any]

Color = Tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
LIGHT_GRAY: Color = (200, 200, 200)
DARK_GRAY: Color = (80, 80, 80)
RED: Color = (230, 41, 55)

BUTTON_BORDER = 5
FINISHED_TEXT = "You did it!"
FINISHED_FONT_SIZE = 20


def _text_width(font: FontFactory, text: str, size: int) -> int:
    return int(font(size).size(text)[0])


def _draw_text(
    surface: pygame.Surface, font: FontFactory, text: str, x: float, y: float, size: int, color: Color
) -> None:
    rendered = font(size).render(text, True, color)
    surface.blit(rendered, (int(x), int(y)))


def _blit_tile(surface: pygame.Surface, sprite: pygame.Surface, x: int, y: int) -> None:
    surface.blit(pygame.transform.scale(sprite, (TILE_SIZE, TILE_SIZE)), (x, y))


def tile_sprite_name(layout: Sequence[Sequence[FloorType]], x: int, y: int) -> str:
    """Return the name of the sprite used for the floor tile at (x, y)."""
    row = layout[y]
    floor = row[x]
    if floor is FloorType.SOLID:
        if y != len(layout) - 1 and layout[y + 1][x] is FloorType.SOLID:
            return "wall_2"
        return "wall"
    if floor is FloorType.DESTINATION:
        return "destination"
    if x != len(row) - 1 and row[x + 1] is FloorType.SOLID:
        return "floor_shadow"
    return "floor"


def draw_button(
    surface: pygame.Surface, font: FontFactory, button: Button, mouse_pos: Sequence[float]
) -> None:
    """Draw a button, darkened while the mouse hovers over it."""
    background = DARK_GRAY if point_in_rect(mouse_pos, button.rect) else LIGHT_GRAY
    rect = pygame.Rect(
        int(button.rect.x), int(button.rect.y), int(button.rect.width), int(button.rect.height)
    )
    pygame.draw.rect(surface, background, rect)
    pygame.draw.rect(surface, BLACK, rect, BUTTON_BORDER)

    text_width = _text_width(font, button.text, button.font_size)
    x = button.rect.x + button.rect.width / 2 - text_width // 2
    y = button.rect.y + button.rect.height / 2 - button.font_size // 2
    _draw_text(surface, font, button.text, x, y, button.font_size, RED)


def draw_level_scene(
    surface: pygame.Surface, state: GameState, sprites: AssetStore[pygame.Surface], font: FontFactory
) -> None:
    """Draw the level grid, boxes and player, or the completion message."""
    surface.fill(WHITE)

    if state.level_state is LevelState.FINISHED:
        width = _text_width(font, FINISHED_TEXT, FINISHED_FONT_SIZE)
        _draw_text(
            surface,
            font,
            FINISHED_TEXT,
            SCREEN_WIDTH // 2 - width // 2,
            SCREEN_HEIGHT // 2,
            FINISHED_FONT_SIZE,
            BLACK,
        )
        return

    level = state.level
    offset_x = SCREEN_WIDTH // 2 - (level.width * TILE_SIZE) // 2
    offset_y = SCREEN_HEIGHT // 2 - (level.height * TILE_SIZE) // 2

    for y, row in enumerate(level.layout):
        for x, _ in enumerate(row):
            sprite = sprites.get(tile_sprite_name(level.layout, x, y))
            _blit_tile(surface, sprite, x * TILE_SIZE + offset_x, y * TILE_SIZE + offset_y)

    for box in state.box_positions:
        on_destination = level.layout[box.y][box.x] is FloorType.DESTINATION
        sprite = sprites.get("box_on_destination" if on_destination else "box")
        _blit_tile(surface, sprite, box.x * TILE_SIZE + offset_x, box.y * TILE_SIZE + offset_y)

    player = state.player_position
    _blit_tile(
        surface,
        sprites.get("player"),
        player.x * TILE_SIZE + offset_x,
        player.y * TILE_SIZE + offset_y,
    )


def draw_level_select_scene(
    surface: pygame.Surface,
    state: GameState,
    previews: Sequence[pygame.Surface],
    font: FontFactory,
) -> None:
    """Draw the preview image and name of the currently selected level."""
    surface.fill(WHITE)

    index = state.level_selection_index
    if index >= len(state.levels) or index >= len(previews):
        return

    level = state.levels[index]
    preview = previews[index]

    dest = fit_rect(
        preview.get_width(),
        preview.get_height(),
        LEVEL_IMAGE_WIDTH - LEVEL_DISPLAY_BOX_PADDING,
        LEVEL_IMAGE_HEIGHT - LEVEL_DISPLAY_BOX_PADDING,
    )
    pos_x = (SCREEN_WIDTH - LEVEL_IMAGE_WIDTH) / 2.0 + dest.x
    pos_y = (SCREEN_HEIGHT - LEVEL_IMAGE_HEIGHT) / 2.0 + dest.y

    box = pygame.Rect(
        int(LEVEL_DISPLAY_BOX.x),
        int(LEVEL_DISPLAY_BOX.y),
        int(LEVEL_DISPLAY_BOX.width),
        int(LEVEL_DISPLAY_BOX.height),
    )
    pygame.draw.rect(surface, BLACK, box, 1)

    scaled = pygame.transform.scale(preview, (max(int(dest.width), 1), max(int(dest.height), 1)))
    surface.blit(scaled, (int(pos_x), int(pos_y)))

    level_name = f"Level {level.index + 1}"
    text_width = _text_width(font, level_name, LEVEL_SELECT_FONT_SIZE)
    _draw_text(
        surface,
        font,
        level_name,
        SCREEN_WIDTH / 2.0 - text_width // 2,
        UI_HEIGHT,
        LEVEL_SELECT_FONT_SIZE,
        BLACK,
    )


def draw_menu_scene(surface: pygame.Surface, state: GameState) -> None:
    """Clear the screen for the menu; its buttons are drawn separately."""
    surface.fill(WHITE)


__all__: List[str] = [
    "tile_sprite_name",
    "draw_button",
    "draw_level_scene",
    "draw_level_select_scene",
    "draw_menu_scene",
]