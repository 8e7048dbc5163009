"""A single tile layer of a TMX map together with its tileset description."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TileLayer:
    """Map geometry, tileset geometry and the global tile ids of one layer."""

    map_width: int = 0
    map_height: int = 0
    map_tile_width: int = 0
    map_tile_height: int = 0

    tileset_tile_width: int = 0
    tileset_tile_height: int = 0
    tileset_cols: int = 0

    first_gid: int = 0
    tileset_image_path: str = ""
    tiles: list[int] = field(default_factory=list)

    def is_valid(self) -> bool:
        """Return True when the layer has a size, an image and some tiles."""
        return (
            self.map_width > 0
            and self.map_height > 0
            and bool(self.tileset_image_path)
            and bool(self.tiles)
        )