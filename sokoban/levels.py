"""Level definitions and loading of levels from colour-coded images."""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from PIL import Image

from sokoban.core import Point

log = logging.getLogger(__name__)


class FloorType(enum.Enum):
    NONE = enum.auto()
    SOLID = enum.auto()
    DESTINATION = enum.auto()


class TileType(enum.Enum):
    FLOOR = enum.auto()
    WALL = enum.auto()
    PLAYER = enum.auto()
    BOX = enum.auto()
    DESTINATION = enum.auto()
    BOX_ON_DESTINATION = enum.auto()


COLOR_MAP: Dict[Tuple[int, int, int, int], TileType] = {
    (255, 255, 255, 255): TileType.FLOOR,
    (0, 0, 0, 255): TileType.WALL,
    (34, 177, 76, 255): TileType.PLAYER,
    (185, 122, 87, 255): TileType.BOX,
    (237, 28, 36, 255): TileType.DESTINATION,
    (66, 44, 31, 255): TileType.BOX_ON_DESTINATION,
}


class LevelFormatError(ValueError):
    """Raised when a level file name or image cannot be interpreted."""


@dataclass
class Level:
    index: int = 0
    width: int = 0
    height: int = 0
    layout: List[List[FloorType]] = field(default_factory=lambda: [[]])
    boxes: List[Point] = field(default_factory=list)
    player: Point = field(default_factory=Point)
    path: Optional[Path] = None


_INDEX_RE = re.compile(r"\s*[+-]?\d+")
_FILENAME_HINT = "Invalid filename. Expect {}-{index}.png"


def get_level_index(filename: Union[str, Path]) -> int:
    """Extract the number between the last '-' and the following '.'."""
    name = str(filename)
    dash = name.rfind("-")
    if dash == -1:
        raise LevelFormatError(_FILENAME_HINT)
    last_part = name[dash + 1 :]
    dot = last_part.find(".")
    if dot == -1:
        raise LevelFormatError(_FILENAME_HINT)
    match = _INDEX_RE.match(last_part[:dot])
    if match is None:
        raise LevelFormatError(_FILENAME_HINT)
    return int(match.group())


def parse_level_image(image: Image.Image, index: int) -> Level:
    """Build a level from an image whose pixel colours encode tiles."""
    rgba = image.convert("RGBA")
    width, height = rgba.size
    pixels = rgba.load()
    level = Level(
        index=index,
        width=width,
        height=height,
        layout=[[FloorType.NONE] * width for _ in range(height)],
    )
    for y in range(height):
        for x in range(width):
            tile = COLOR_MAP.get(tuple(pixels[x, y]))
            if tile is None:
                raise LevelFormatError("Invalid color found")
            if tile is TileType.WALL:
                level.layout[y][x] = FloorType.SOLID
            elif tile is TileType.PLAYER:
                level.player = Point(x, y)
            elif tile is TileType.DESTINATION:
                level.layout[y][x] = FloorType.DESTINATION
            elif tile is TileType.BOX_ON_DESTINATION:
                level.layout[y][x] = FloorType.DESTINATION
                level.boxes.append(Point(x, y))
            elif tile is TileType.BOX:
                level.boxes.append(Point(x, y))
    return level


def parse_level_file(path: Union[str, Path]) -> Level:
    """Read a level image named '<name>-<index>.<ext>'."""
    path = Path(path)
    index = get_level_index(path)
    with Image.open(path) as image:
        level = parse_level_image(image, index)
    level.path = path
    return level


def load_levels(directory: Union[str, Path]) -> List[Level]:
    """Load every level file in the directory, ordered by index."""
    levels: List[Level] = []
    try:
        entries = sorted(Path(directory).iterdir())
    except OSError as exc:
        log.error("Error occurred during file operation: %s", exc)
        return levels
    for path in entries:
        if not path.is_file():
            continue
        levels.append(parse_level_file(path))
        log.info("Pushed level %s", path.name)
    levels.sort(key=lambda level: level.index)
    return levels