# cubcaster

A pure-Python library for grid-based raycasting scenes described by `.cub`
files. It reads and validates a scene, places the player, moves and turns
them, casts rays across the field of view, and draws the result into an
in-memory 32-bit pixel buffer. It has no dependencies beyond the standard
library.

## Installing

```
pip install .
```

## The `.cub` format

The header lines come first. They may appear in any order, and blank lines
between them are allowed:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

- Texture paths are resolved against a base directory (the working
  directory when reading with `parse_file`) and must be readable files.
- `F` and `C` take three comma separated values from 0 to 255.
- Each key may appear once; a line that is rejected does not count.

The map follows the header:

```
        1111111111111
        1000000000001
111111111011000001111
100000000000000000001
1111111111110000N0001
           11111111111
```

- `1` is a wall, `0` is open floor, and a space is void.
- `N`, `S`, `E` or `W` marks the start and the direction the player faces.
  The map must hold exactly one start.
- The map must be closed: no floor cell may touch the void or the map edge,
  and every floor and start cell must be reachable from the start.
- The map may not contain empty lines once it has begun.

Any problem raises `cubcaster.map_check.MapError` with a short message such
as `"Map not closed"`, `"Duplicate start position"`, `"Invalid char"`,
`"Missing player start"`, `"Map contains island"` or
`"Missing texture or RGB config!"`.

## Modules

- `cubcaster.geometry` – the `Vector` dataclass, `reset_angle`,
  `deg_to_rad`, `calc_hyp`, and the window, field-of-view and player
  constants.
- `cubcaster.image` – `Image`, a width × height buffer of `0xTTRRGGBB`
  pixels with `put_pixel`, `get_pixel`, `draw_rectangle`, `draw_line` and
  `rgb_bytes`; `Rect`; and `create_trgb`.
- `cubcaster.map_check` – `check_map(rows)` validates a grid and returns
  the `(x, y)` of the start.
- `cubcaster.parsing` – `parse_file(path)` returns `(rows, paths)`;
  `parse_header`, `parse_map_lines`, `parse_rgb`, `is_blank`, the
  `Identifier` enum and the `Paths` dataclass.
- `cubcaster.player` – `Player` with `spawn`, `move`,
  `move_with_collision`, `look` and `within_bounds`; `find_start`.
- `cubcaster.raycasting` – `Ray`, `cast_single` and `cast_rays`.
- `cubcaster.rendering` – `Textures`, `texture_for_ray`,
  `draw_textured_ray`, `draw_background`, `draw_player`, `draw_map`,
  `draw_rays_2d` and `draw_rays_3d`.

## Example

```python
from cubcaster.geometry import WIN_HEIGHT, WIN_WIDTH
from cubcaster.image import Image, create_trgb
from cubcaster.parsing import parse_file
from cubcaster.player import Player
from cubcaster.raycasting import cast_rays
from cubcaster.rendering import Textures, draw_background, draw_rays_3d

rows, paths = parse_file("scene.cub")
player = Player.spawn(rows, wall_size=16)   # replaces the start marker with "0"

player.m_up = True
player.move_with_collision(rows)
player.look(refresh_delta=True)

rays = cast_rays(player, rows, dof=20)

def solid(color):
    texture = Image(64, 64)
    texture.draw_rectangle(...)  # or fill texture.pixels yourself
    return texture

brick = Image(64, 64)
for i in range(len(brick.pixels)):
    brick.pixels[i] = create_trgb(0, 150, 60, 40)

textures = Textures(brick, brick, brick, brick, paths.floor, paths.ceiling)
frame = Image(WIN_WIDTH, WIN_HEIGHT)
draw_background(frame, textures)
draw_rays_3d(frame, rays, player, textures)
pixels = frame.rgb_bytes()   # packed R, G, B bytes, row by row
```

`Player.move` applies the movement keys with no collision test;
`Player.move_with_collision` refuses each axis step that would enter a wall.
`Player.look` turns by the held look keys and refreshes the movement vector
when exactly one of them is held, or always with `refresh_delta=True`.

## What this package does not do

- It opens no window and reads no keyboard or mouse; it only produces
  frames as `Image` buffers. Showing them is up to the caller.
- It does not decode image files. `parse_file` checks that the texture
  files exist and are readable, but wall textures must be supplied as
  `Image` objects built by the caller.
- It installs no command-line program.