"""Loading of tileset images and drawing of tile layers onto a surface."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pygame

from .tilelayer import TileLayer


def load_tileset(path: str | Path) -> pygame.Surface:
    """Load a tileset image, raising OSError when it cannot be read."""
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, OSError) as exc:
        raise OSError(f"cannot load tileset {path}: {exc}") from exc
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def tile_placements(layer: TileLayer) -> Iterator[tuple[pygame.Rect, pygame.Rect]]:
    """Yield (source, destination) rectangles for every drawable tile of a layer."""
    if not layer.is_valid() or layer.tileset_cols == 0:
        return
    cols = layer.tileset_cols
    for index, tile_id in enumerate(layer.tiles[: layer.map_width * layer.map_height]):
        actual_id = tile_id - layer.first_gid
        if actual_id < 0:
            continue
        row, col = divmod(index, layer.map_width)
        src_row, src_col = divmod(actual_id, cols)
        src = pygame.Rect(
            src_col * layer.tileset_tile_width,
            src_row * layer.tileset_tile_height,
            layer.tileset_tile_width,
            layer.tileset_tile_height,
        )
        dst = pygame.Rect(
            col * layer.map_tile_width,
            row * layer.map_tile_height,
            layer.map_tile_width,
            layer.map_tile_height,
        )
        yield src, dst


def render(
    surface: pygame.Surface, tileset: pygame.Surface | None, layer: TileLayer
) -> None:
    """Draw every tile of a layer onto a surface, scaling tiles to the map grid."""
    if tileset is None or not layer.is_valid():
        return
    bounds = tileset.get_rect()
    for src, dst in tile_placements(layer):
        if src.size == dst.size:
            surface.blit(tileset, dst.topleft, src)
            continue
        area = src.clip(bounds)
        if area.width == 0 or area.height == 0 or dst.width <= 0 or dst.height <= 0:
            continue
        tile = pygame.transform.scale(tileset.subsurface(area), dst.size)
        surface.blit(tile, dst.topleft)