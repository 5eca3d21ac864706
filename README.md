# sokoban

A small Sokoban puzzle game built on pygame. Push every box onto a destination
tile to finish a level, then move on to the next one.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
sokoban
sokoban --resources path/to/res
```

`--resources` names the directory that holds the game's assets. It defaults to
`res` in the current directory. Inside it:

- `levels/` holds the levels, one image per level.
- `sprites/` holds the tile images: `floor`, `floor_shadow`, `wall`, `wall_2`,
  `destination`, `box`, `box_on_destination` and `player`.
- `sounds/` holds the sound effects: `walk`, `box_move`, `box_connect`,
  `fail`, `celebrate` and `menu_click`.

Each sprite and sound is named by its file name without the extension. A
missing directory is logged and skipped. If audio cannot be started the game
runs without sound.

### Menu

The main menu has four buttons:

- **Level Select** opens the level selector. Use the `<` and `>` buttons to
  browse. Click the preview image to start that level. The selected level is
  shown as "Level N", where N is its index plus one.
- **Game** switches to the level scene and shows whatever level was last
  loaded. Before any level has been started it shows only the completion
  message.
- **Test** switches to an empty scene that takes the same keys as a level.
- **Quit** closes the game.

### Controls in a level

- Arrow keys move the player. Walking into a box pushes it if the space behind
  it is free. Walls, blocked boxes and the edge of the grid stop the move.
- `R` restarts the current level.
- `Escape` returns to the main menu from any scene.

When every box stands on a destination, the message "You did it!" is shown. If
there is another level after it, a **Next level** button appears as well.

## Level files

A level file is named `<anything>-<index>.<ext>`, for example `level-0.png`.
Levels are sorted by that index. **Next level** goes to the level at position
`index + 1` in that sorted list, so number the levels from 0 without gaps.

Every pixel is one tile, and its colour decides what the tile is:

| Colour (RGBA)         | Tile                    |
|-----------------------|-------------------------|
| 255, 255, 255, 255    | floor                   |
| 0, 0, 0, 255          | wall                    |
| 34, 177, 76, 255      | player start            |
| 185, 122, 87, 255     | box                     |
| 237, 28, 36, 255      | destination             |
| 66, 44, 31, 255       | box on a destination    |

A file name without a `-<index>.` part, or a pixel of any other colour, raises
`sokoban.levels.LevelFormatError`.

## Using the pieces

You can read and play levels without opening a window:

```python
from sokoban.levels import parse_level_file
from sokoban.state import GameState, load_level
from sokoban.scenes import update_level_scene
from sokoban.core import Point

level = parse_level_file("res/levels/level-0.png")
state = GameState()
load_level(state, level)
state.desired_move = Point(1, 0)
update_level_scene(state)
print(state.player_position, state.level_state)
```

The modules:

- `sokoban.core` holds the constants, `Point`, `Rect`, `Button` and
  `point_in_rect`.
- `sokoban.levels` holds `Level`, `FloorType`, `get_level_index`,
  `parse_level_image`, `parse_level_file` and `load_levels`.
- `sokoban.assets` holds `AssetStore`, which maps file stems to loaded assets.
- `sokoban.state` holds `GameState`, `Scene`, `LevelState`, `get_destinations`
  and `load_level`.
- `sokoban.scenes` holds scene set-up, input handling and the move logic
  (`change_scene`, `handle_level_scene_input`, `update_level_scene`,
  `occupied_grid`, `fit_rect`, `handle_level_select_click`).
- `sokoban.render` draws the scenes and buttons onto pygame surfaces.
- `sokoban.app` holds `Game` and the `main` entry point.

## What it does not do

The game has no undo, no move counter and no saved progress. Progress is kept
only while the game is running.