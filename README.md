# cubecaster

cubecaster renders first-person views of tile maps with a classic grid
raycaster. Walls are drawn from four textures, one per compass face (east,
south, west, north); the ceiling and floor are flat colours. Frames are
drawn into an in-memory buffer that can be turned into a Pillow image.

## Modules

- `cubecaster.grid` – map geometry: `count_points` gives a `MapInfo` with
  the total number of characters, the widest row and the number of rows;
  `build_cells` turns the rows into `Cell` objects; `find_player` returns a
  `Player` standing in the middle of the first `N`, `S`, `W` or `E` cell
  (or `None`), facing as `direction_angles` says; `is_cub_file` checks that
  a file name ends in `.cub`. Problems are reported as `CubError`.
- `cubecaster.controls` – key handling with X11 key codes in `Key`: `move`
  walks forward and back (W, S) or strafes (A, D), `rotate` turns by fifteen
  degrees (left and right arrows), and `handle_key` applies any key press,
  returning `False` for Escape.
- `cubecaster.textures` – `Texture` holds an image as rows of `0xRRGGBB`
  values; `Texture.from_file` loads any image Pillow can read and
  `load_textures` loads the four wall textures in the order east, south,
  west, north. A texture that cannot be read raises `TextureError`.
- `cubecaster.render` – the raycaster: `cast_ray` walks one ray through the
  grid until it meets a wall or leaves the map and returns a `Ray`;
  `wall_span` gives the on-screen height and extent of that wall slice;
  `fill_background` paints ceiling and floor; `draw_column` paints a
  textured slice; `render` draws a whole view into a `FrameBuffer`
  (`put`, `get`, `to_image`).
- `cubecaster.app` – `check_arguments` checks that an argument list names
  exactly one existing, readable and writable `.cub` file (raising
  `ArgumentError` otherwise), and `Game` ties the map rows, the player, the
  textures and the colours together: `press` applies a key and redraws,
  `redraw` draws the current view into `Game.frame`.
- `cubecaster.libft` – small helpers: character classes (`chars`), decimal
  conversion (`numbers`), byte buffers (`memory`), strings (`strings`), a
  linked list (`linked`), formatted output (`output`) and line-by-line
  reading (`lines`).

## Example

```python
from cubecaster.app import Game
from cubecaster.controls import Key
from cubecaster.grid import count_points, is_cub_file
from cubecaster.textures import Texture

rows = [
    "111111",
    "100001",
    "10N001",
    "111111",
]

is_cub_file("level.cub")     # True
is_cub_file("level.txt")     # False
info = count_points(rows)
info.size_x, info.size_y     # (6, 4)

def plain(color):
    return Texture(64, 64, [color] * (64 * 64))

textures = [plain(0xAA0000), plain(0x00AA00), plain(0x0000AA), plain(0xAAAA00)]
game = Game(rows, textures, ceiling=0x87CEEB, floor=0x444444)
game.press(Key.W)
game.frame.to_image().save("view.png")
```

The default view is 500 by 500 pixels with a 45 degree field of view.

## What it does not do

- It does not read the contents of a `.cub` file: the texture paths, the
  ceiling and floor colours and the map rows must be supplied to `Game` by
  the caller. `check_arguments` only checks the name and that the file can
  be opened.
- It opens no window and reads no keyboard itself; key presses are passed
  to `Game.press`, and frames are left in `Game.frame` for the caller to
  show or save.
- It installs no command.

## Running the tests

```
pip install -e ".[test]"
pytest
```