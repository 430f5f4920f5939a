# raycube

Pure-Python building blocks for a first-person raycasting maze. The package
has no dependencies beyond the standard library. It provides:

- player, key and colour state, together with the game's constants;
- an XPM image decoder for wall textures, which understands the X11 colour names;
- player movement with wall collision, and turning;
- small text helpers for reading scene files.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `raycube.config`

- Constants: `WIDTH` and `HEIGHT` (1920×1080), the key codes `KEY_W`,
  `KEY_A`, `KEY_S`, `KEY_D`, `KEY_LEFT`, `KEY_RIGHT` and `KEY_ESC`,
  `PLANE_LENGTH` (0.66), `TURN_RADIAN` (0.04) and `MOVE_SPEED` (0.1).
- `Direction`: an enum of `NORTH`, `SOUTH`, `WEST` and `EAST`. Each value is
  its map letter (`"N"`, `"S"`, `"W"`, `"E"`).
- `Color(r, g, b, defined)`: `packed()` returns `0xRRGGBB`.
- `Player`: position, view direction (`dir_x`, `dir_y`), camera plane
  (`plane_x`, `plane_y`), `move_speed` and `turn_radian`.
  `face(direction)` sets the view direction and camera plane for a starting
  direction. North gives a view of `(0, -1)` and a plane of `(0.66, 0)`.
- `Keys`: flags for `w`, `a`, `s`, `d`, `left` and `right`.

### `raycube.movement`

- `strafe(player, grid, keys)`: A and D move the player along the camera plane.
- `advance(player, grid, keys)`: W and S move the player along the view direction.
- `turn(player, keys)`: the right and left keys rotate the view and the plane
  by `player.turn_radian`.
- `update(player, grid, keys)`: strafing, then advancing, then turning.

`grid` is a sequence of strings. The cell `"1"` is a wall, and any cell
outside the grid also counts as a wall. Movement is checked on each axis
separately, so the player slides along walls.

```python
from raycube.config import Direction, Keys, Player
from raycube.movement import update

grid = ["1111", "1001", "1001", "1111"]
player = Player(x=1.5, y=1.5)
player.face(Direction.EAST)
update(player, grid, Keys(w=True))   # player.x is now about 1.6
```

### `raycube.xpm`

- `load_xpm(path)` reads an XPM file and returns an `XpmImage`.
- `parse_xpm(text)` decodes the text of an XPM file.
- `parse_xpm_lines(lines)` decodes the quoted strings directly: the header,
  then the colour lines, then the pixel rows.
- `XpmImage` has `width`, `height` and `pixels`, with the pixels stored row by
  row. `pixel(x, y)` returns the colour at that point. Colours set to `None`
  become `TRANSPARENT` (`0xFF000000`).
- `strip_comments(text)` blanks out `/* */` and `//` comments that are not
  inside quotes.
- `text_to_rgb(name, end)` reads `#RRGGBB` or looks up a colour name.
- `words(text)` splits text on spaces and tabs.
- Malformed or unreadable data raises `XpmError`, which is a `ValueError`.

### `raycube.colors`

- `lookup_color(name)` looks up an X11 colour name without regard to case and
  returns `0xRRGGBB`. `"none"` returns `-1`, and an unknown name returns `None`.

### `raycube.textutil`

- `split_words`: splits on spaces and tabs.
- `split_commas`: splits on commas. It raises `ValueError` for a leading comma
  or for two commas in a row.
- `atoi`: reads a leading integer the way C's `atoi` does.
- `trim`: strips the given characters from both ends.
- `is_space`: true for a space or a newline.
- `is_blank`: true if the text holds only whitespace.
- `read_lines(path)`: returns the file's lines, each keeping its newline.

## What this package does not do

The package has no command to run and opens no window. It does not parse or
validate `.cub` scene files into a scene; only the text helpers for that are
here. It has no raycasting renderer. It supplies the state, textures and
movement that such a game would be built on.