"""Scene set-up, input handling and update logic for menu, level select and levels."""

from __future__ import annotations

import enum
from typing import Collection, List, Optional, Sequence

from sokoban.core import SCREEN_HEIGHT, SCREEN_WIDTH, Button, Point, Rect, point_in_rect
from sokoban.levels import FloorType, Level
from sokoban.state import GameState, LevelState, Scene, load_level


class Key(enum.Enum):
    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    R = enum.auto()


class OccupiedType(enum.Enum):
    NONE = enum.auto()
    WALL = enum.auto()
    BOX = enum.auto()


# Menu layout
MENU_BUTTON_HEIGHT = 40
MENU_BUTTON_WIDTH = 200
MENU_BUTTON_GAP = 50
MENU_FONT_SIZE = 20
MENU_BUTTON_POS = Point(
    SCREEN_WIDTH // 2 - MENU_BUTTON_WIDTH // 2,
    SCREEN_HEIGHT // 2 - MENU_BUTTON_HEIGHT // 2,
)


def _menu_rect(slot: int) -> Rect:
    return Rect(
        float(MENU_BUTTON_POS.x),
        float(MENU_BUTTON_POS.y + (MENU_BUTTON_HEIGHT + MENU_BUTTON_GAP) * slot),
        MENU_BUTTON_WIDTH,
        MENU_BUTTON_HEIGHT,
    )


# Level-select layout
LEVEL_SELECT_FONT_SIZE = 30
LEVEL_IMAGE_WIDTH = SCREEN_WIDTH * 0.6
LEVEL_IMAGE_HEIGHT = SCREEN_HEIGHT * 0.6
UI_HEIGHT = (SCREEN_WIDTH // 2) + (LEVEL_IMAGE_HEIGHT / 2)
LEVEL_DISPLAY_BOX = Rect(
    (SCREEN_WIDTH // 2) - (LEVEL_IMAGE_WIDTH / 2),
    (SCREEN_HEIGHT // 2) - (LEVEL_IMAGE_HEIGHT / 2),
    LEVEL_IMAGE_WIDTH,
    LEVEL_IMAGE_HEIGHT,
)
LEVEL_DISPLAY_BOX_PADDING = 30

# Level scene
TILE_SIZE = 50

_DIRECTIONS = (
    (Key.UP, Point(0, -1)),
    (Key.DOWN, Point(0, 1)),
    (Key.RIGHT, Point(1, 0)),
    (Key.LEFT, Point(-1, 0)),
)


def change_scene(state: GameState, scene: Scene) -> None:
    """Switch to a scene, discarding the previous scene's buttons."""
    state.scene = scene
    state.buttons.clear()
    if scene is Scene.MENU:
        init_menu_scene(state)
    elif scene is Scene.LEVEL_SELECT:
        init_level_select_scene(state)


def _quit(state: GameState) -> None:
    state.should_exit = True


def init_menu_scene(state: GameState) -> None:
    """Add the main-menu buttons."""
    entries = (
        ("Level Select", lambda s: change_scene(s, Scene.LEVEL_SELECT)),
        ("Game", lambda s: change_scene(s, Scene.LEVEL)),
        ("Test", lambda s: change_scene(s, Scene.TEST)),
        ("Quit", _quit),
    )
    for slot, (text, action) in enumerate(entries):
        state.buttons.append(
            Button(rect=_menu_rect(slot), text=text, font_size=MENU_FONT_SIZE, on_click=action)
        )


def _select_previous(state: GameState) -> None:
    if state.level_selection_index <= 0:
        return
    state.level_selection_index -= 1


def _select_next(state: GameState) -> None:
    if state.level_selection_index >= len(state.levels) - 1:
        return
    state.level_selection_index += 1


def init_level_select_scene(state: GameState) -> None:
    """Add the previous/next arrows of the level selector."""
    state.buttons.append(
        Button(
            rect=Rect(SCREEN_WIDTH // 2 - 150, UI_HEIGHT, 50, LEVEL_SELECT_FONT_SIZE),
            text="<",
            font_size=LEVEL_SELECT_FONT_SIZE,
            on_click=_select_previous,
        )
    )
    state.buttons.append(
        Button(
            rect=Rect(SCREEN_WIDTH // 2 + 100, UI_HEIGHT, 50, LEVEL_SELECT_FONT_SIZE),
            text=">",
            font_size=LEVEL_SELECT_FONT_SIZE,
            on_click=_select_next,
        )
    )


def fit_rect(
    texture_width: float, texture_height: float, box_width: float, box_height: float
) -> Rect:
    """Fit a texture into a box preserving aspect ratio, centred and padded."""
    tex_aspect = texture_width / texture_height
    box_aspect = box_width / box_height
    if tex_aspect > box_aspect:
        draw_w = box_width
        draw_h = box_width / tex_aspect
    else:
        draw_h = box_height
        draw_w = box_height * tex_aspect
    pos_x = (box_width - draw_w) / 2.0
    pos_y = (box_height - draw_h) / 2.0
    half_pad = LEVEL_DISPLAY_BOX_PADDING // 2
    return Rect(pos_x + half_pad, pos_y + half_pad, draw_w, draw_h)


def handle_level_select_click(state: GameState, mouse_pos: Sequence[float]) -> bool:
    """Start the selected level if the click hit the preview; return whether it did."""
    if state.level_selection_index >= len(state.levels):
        return False
    if not point_in_rect(mouse_pos, LEVEL_DISPLAY_BOX):
        return False
    load_level(state, state.levels[state.level_selection_index])
    change_scene(state, Scene.LEVEL)
    return True


def occupied_grid(level: Level, boxes: Sequence[Point]) -> List[List[OccupiedType]]:
    """Return a grid marking walls and boxes of the level."""
    grid = [[OccupiedType.NONE] * level.width for _ in range(level.height)]
    for y, row in enumerate(level.layout):
        for x, floor in enumerate(row):
            if floor is FloorType.SOLID:
                grid[y][x] = OccupiedType.WALL
    for box in boxes:
        grid[box.y][box.x] = OccupiedType.BOX
    return grid


def _occupied_at(grid: List[List[OccupiedType]], point: Point) -> OccupiedType:
    if 0 <= point.y < len(grid) and 0 <= point.x < len(grid[point.y]):
        return grid[point.y][point.x]
    return OccupiedType.WALL


def _next_level(state: GameState) -> None:
    change_scene(state, Scene.LEVEL)
    load_level(state, state.levels[state.level.index + 1])


def update_level_scene(state: GameState) -> None:
    """Apply the pending move, pushing boxes and detecting completion."""
    if state.level_state is LevelState.FINISHED:
        return
    move = state.desired_move
    if move.x == 0 and move.y == 0:
        return

    grid = occupied_grid(state.level, state.box_positions)
    target = state.player_position + move
    occupied = _occupied_at(grid, target)

    if occupied is OccupiedType.NONE:
        state.play("walk")
        state.player_position = target
    elif occupied is OccupiedType.BOX:
        push_to = target + move
        if _occupied_at(grid, push_to) is OccupiedType.NONE:
            box_index = state.box_positions.index(target)
            state.box_positions[box_index] = push_to
            state.player_position = target
            state.play("box_move")
            if push_to in state.destinations:
                state.play("box_connect")
        else:
            state.play("fail")
    else:
        state.play("fail")

    state.desired_move = Point(0, 0)

    if all(box in state.destinations for box in state.box_positions):
        state.play("celebrate")
        state.level_state = LevelState.FINISHED
        if state.level.index < len(state.levels) - 1:
            state.buttons.append(
                Button(
                    rect=Rect(SCREEN_WIDTH // 2 - 100, SCREEN_HEIGHT // 2 + 100, 200, 50),
                    text="Next level",
                    font_size=20,
                    on_click=_next_level,
                )
            )


def handle_level_scene_input(state: GameState, pressed: Collection[Key]) -> None:
    """Record a move from the pressed keys and restart the level on R."""
    move: Optional[Point] = next(
        (direction for key, direction in _DIRECTIONS if key in pressed), None
    )
    if move is not None:
        state.desired_move = move
    if Key.R in pressed:
        state.play("fail")
        load_level(state, state.level)