"""Mutable game state shared by every scene."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, List, Optional

from sokoban.assets import AssetStore
from sokoban.core import Button, Point
from sokoban.levels import FloorType, Level


class LevelState(enum.Enum):
    ACTIVE = enum.auto()
    FINISHED = enum.auto()


class Scene(enum.Enum):
    MENU = enum.auto()
    LEVEL_SELECT = enum.auto()
    LEVEL = enum.auto()
    TEST = enum.auto()


@dataclass
class GameState:
    time_since_last_tick: float = 0.0
    level: Level = field(default_factory=Level)
    box_positions: List[Point] = field(default_factory=list)
    destinations: List[Point] = field(default_factory=list)
    player_position: Point = field(default_factory=Point)
    desired_move: Point = field(default_factory=Point)
    scene: Scene = Scene.MENU
    level_state: LevelState = LevelState.FINISHED
    should_exit: bool = False
    level_selection_index: int = 0
    buttons: List[Button] = field(default_factory=list)
    levels: List[Level] = field(default_factory=list)
    sounds: Optional[AssetStore[Any]] = None

    def play(self, name: str) -> None:
        """Play the named sound, if a sound store is attached."""
        if self.sounds is None:
            return
        self.sounds.get(name).play()


def get_destinations(level: Level) -> List[Point]:
    """Return destination tiles in row-major order."""
    return [
        Point(x, y)
        for y, row in enumerate(level.layout)
        for x, floor in enumerate(row)
        if floor is FloorType.DESTINATION
    ]


def load_level(state: GameState, level: Level) -> None:
    """Reset the state to the start of the given level."""
    state.level_state = LevelState.ACTIVE
    state.level = level
    state.box_positions = list(level.boxes)
    state.destinations = get_destinations(level)
    state.player_position = level.player
    state.desired_move = Point(0, 0)
    state.time_since_last_tick = 0.0