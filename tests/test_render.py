import pygame
import pytest

from sokoban import render
from sokoban.assets import AssetStore
from sokoban.core import SCREEN_HEIGHT, SCREEN_WIDTH, Button, Point, Rect
from sokoban.levels import FloorType, Level
from sokoban.scenes import LEVEL_DISPLAY_BOX, TILE_SIZE
from sokoban.state import GameState, LevelState, load_level

S = FloorType.SOLID
N = FloorType.NONE
D = FloorType.DESTINATION

SPRITE_COLORS = {
    "wall": (20, 20, 120),
    "wall_2": (20, 120, 20),
    "floor": (120, 20, 20),
    "floor_shadow": (120, 120, 20),
    "destination": (20, 120, 120),
    "box": (160, 60, 160),
    "box_on_destination": (60, 160, 60),
    "player": (100, 200, 40),
}


class FakeFont:
    def __init__(self, point_size, log):
        self.point_size = point_size
        self.log = log

    def size(self, text):
        return (len(text) * 8, self.point_size)

    def render(self, text, antialias, color):
        self.log.append((text, self.point_size, tuple(color)))
        surf = pygame.Surface(self.size(text), 0, 32)
        surf.fill(color)
        return surf


@pytest.fixture
def font_log():
    return []


@pytest.fixture
def font(font_log):
    return lambda size: FakeFont(size, font_log)


@pytest.fixture
def screen():
    return pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), 0, 32)


@pytest.fixture
def sprites(tmp_path):
    for name in SPRITE_COLORS:
        (tmp_path / f"{name}.png").touch()

    def loader(path):
        surf = pygame.Surface((1, 1), 0, 32)
        surf.fill(SPRITE_COLORS[path.stem])
        return surf

    store = AssetStore(loader)
    store.load_directory(tmp_path)
    return store


def count_color(surface, color):
    mask = pygame.mask.from_threshold(surface, color, (1, 1, 1, 255))
    return mask.count()


def rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


LAYOUT = [
    [S, S, S, S, S],
    [S, N, N, D, S],
    [S, S, S, S, S],
]


def make_level():
    return Level(
        index=0,
        width=5,
        height=3,
        layout=[list(row) for row in LAYOUT],
        boxes=[Point(2, 1)],
        player=Point(1, 1),
    )


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (0, 0, "wall_2"),
        (1, 0, "wall"),
        (0, 2, "wall"),
        (3, 1, "destination"),
        (1, 1, "floor"),
        (3, 1, "destination"),
    ],
)
def test_tile_sprite_name(x, y, expected):
    assert render.tile_sprite_name(LAYOUT, x, y) == expected


def test_floor_next_to_wall_is_shadowed():
    layout = [[N, S], [N, N]]
    assert render.tile_sprite_name(layout, 0, 0) == "floor_shadow"
    assert render.tile_sprite_name(layout, 1, 1) == "floor"


def test_draw_menu_scene_clears_to_white(screen):
    screen.fill((10, 10, 10))
    render.draw_menu_scene(screen, GameState())
    assert rgb(screen, (0, 0)) == render.WHITE
    assert rgb(screen, (SCREEN_WIDTH - 1, SCREEN_HEIGHT - 1)) == render.WHITE


def test_draw_button_hover_and_idle(screen, font, font_log):
    button = Button(rect=Rect(100, 100, 200, 50), text="Go", font_size=20)

    render.draw_button(screen, font, button, (0, 0))
    assert rgb(screen, (110, 110)) == render.LIGHT_GRAY
    assert rgb(screen, (100, 100)) == render.BLACK

    render.draw_button(screen, font, button, (150, 125))
    assert rgb(screen, (110, 110)) == render.DARK_GRAY
    assert ("Go", 20, render.RED) in font_log


def test_draw_level_scene_finished_shows_message(screen, sprites, font, font_log):
    state = GameState(level_state=LevelState.FINISHED)
    render.draw_level_scene(screen, state, sprites, font)
    assert font_log == [("You did it!", 20, render.BLACK)]
    assert count_color(screen, SPRITE_COLORS["player"]) == 0


def test_draw_level_scene_draws_player_and_boxes(screen, sprites, font, font_log):
    state = GameState()
    load_level(state, make_level())
    render.draw_level_scene(screen, state, sprites, font)

    tile_area = TILE_SIZE * TILE_SIZE
    assert count_color(screen, SPRITE_COLORS["player"]) == tile_area
    assert count_color(screen, SPRITE_COLORS["box"]) == tile_area
    assert count_color(screen, SPRITE_COLORS["box_on_destination"]) == 0
    assert count_color(screen, SPRITE_COLORS["destination"]) == tile_area
    assert font_log == []


def test_box_on_destination_uses_its_own_sprite(screen, sprites, font):
    state = GameState()
    load_level(state, make_level())
    state.box_positions = [Point(3, 1)]
    render.draw_level_scene(screen, state, sprites, font)

    tile_area = TILE_SIZE * TILE_SIZE
    assert count_color(screen, SPRITE_COLORS["box_on_destination"]) == tile_area
    assert count_color(screen, SPRITE_COLORS["box"]) == 0
    assert count_color(screen, SPRITE_COLORS["destination"]) == 0


def test_draw_level_select_scene_shows_preview(screen, font, font_log):
    preview_color = (10, 200, 30)
    preview = pygame.Surface((2, 1), 0, 32)
    preview.fill(preview_color)
    state = GameState(levels=[Level(index=0, width=2, height=1)], level_selection_index=0)

    render.draw_level_select_scene(screen, state, [preview], font)

    assert rgb(screen, (SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)) == preview_color
    corner = (int(LEVEL_DISPLAY_BOX.x), int(LEVEL_DISPLAY_BOX.y))
    assert rgb(screen, corner) == render.BLACK
    assert ("Level 1", 30, render.BLACK) in font_log


def test_draw_level_select_scene_out_of_range_is_blank(screen, font, font_log):
    preview = pygame.Surface((2, 1), 0, 32)
    preview.fill((10, 200, 30))
    state = GameState(levels=[Level(index=0, width=2, height=1)], level_selection_index=1)

    render.draw_level_select_scene(screen, state, [preview], font)

    assert rgb(screen, (SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)) == render.WHITE
    assert font_log == []