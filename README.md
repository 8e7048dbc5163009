# tmxviewer

Display a map made with the Tiled editor (a `.tmx` file) in a pygame window
and walk a player square around on it with the arrow keys.

## Installing

```
pip install .
```

For running the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
tmxviewer [MAP_FILE] [--entity-image IMAGE]
```

- `MAP_FILE` defaults to `res/map/MAP.tmx`, relative to the current directory.
- `--entity-image` defaults to `res/tilesets/sprite-mario.jpeg`. The image is
  loaded at start-up and must exist, although the player is drawn as a plain
  red 32×32 square with a black outline, starting at (64, 64).

The window, titled "TMX Map", is sized to the whole map (map width × tile
width by map height × tile height) over a light blue background. Each press
of an arrow key moves the player by one map tile. Close the window to quit.

If the map, the tileset image or the entity image cannot be loaded, or the
window cannot be opened, `Fatal error: ...` is printed to standard error and
the command exits with status 1; otherwise it exits with 0.

## Supported maps

- the first `<tileset>` of the map, either embedded or referenced through an
  external `.tsx` file via its `source` attribute; its `<image>` must give a
  `source`, and its `width` sets how many tile columns the tileset has (with
  no width, nothing is drawn);
- the first `<layer>`, whose `<data>` must use `encoding="csv"`;
- the number of tile ids must equal the map's width × height.

Tile ids below the tileset's `firstgid` (such as `0`, an empty cell) are left
undrawn. When the tileset's tile size differs from the map's tile size, each
tile is scaled to fit the map grid.

## Using it from Python

```python
from tmxviewer.tmxloader import load_from_file, TMXError
from tmxviewer.renderer import tile_placements

layer = load_from_file("res/map/MAP.tmx")   # raises TMXError on a bad map
print(layer.map_width, layer.map_height, layer.is_valid())

for source_rect, dest_rect in tile_placements(layer):
    ...
```

- `tmxviewer.tilelayer.TileLayer` is a dataclass holding the map and tileset
  geometry, the first gid, the tileset image path and the tile ids;
  `is_valid()` tells whether it has a size, an image and tiles.
- `tmxviewer.renderer` has `load_tileset(path)` (raises `OSError`),
  `tile_placements(layer)` and `render(surface, tileset, layer)`.
- `tmxviewer.entity.Entity` is a rectangle that can be moved with `move`,
  placed with `set_position`, given a velocity with `set_velocity` and
  advanced with `update(delta_time)`; only movable entities move.
- `tmxviewer.game.Game` ties these together in a window; it raises
  `GameError` when it cannot be set up, handles arrow keys through
  `handle_key(key)`, and can be used as a context manager.

## What it does not do

Only the first tileset and the first tile layer of a map are read. Base64 or
compressed layer data, object layers, multiple tilesets, tile animations and
scrolling larger than the window are not supported, and the map cannot be
edited or saved.