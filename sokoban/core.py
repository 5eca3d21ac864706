"""Shared geometry, UI primitives and game-wide constants."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterator, Optional, Sequence

if TYPE_CHECKING:
    from sokoban.state import GameState

TARGET_FPS = 60
SCREEN_WIDTH = 1440
SCREEN_HEIGHT = 1200
TICKS_PER_SECOND = 60
TICK_TIME = 1.0 / TICKS_PER_SECOND


@dataclass(frozen=True)
class Point:
    """An integer grid position or offset."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y


@dataclass
class Rect:
    """An axis-aligned rectangle in screen coordinates."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


class ButtonState(enum.Enum):
    NONE = enum.auto()
    HOVER = enum.auto()
    ACTIVE = enum.auto()


@dataclass
class Button:
    """A clickable, labelled rectangle."""

    rect: Rect
    text: str = "Placeholder"
    font_size: int = 14
    state: ButtonState = ButtonState.NONE
    on_click: Optional[Callable[["GameState"], None]] = None


def point_in_rect(point: Sequence[float], rect: Rect) -> bool:
    """Return True when the point lies strictly inside the rectangle."""
    px, py = point
    return (
        rect.x < px < rect.x + rect.width
        and rect.y < py < rect.y + rect.height
    )