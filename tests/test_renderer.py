import pygame
import pytest

from tmxviewer.renderer import load_tileset, render, tile_placements
from tmxviewer.tilelayer import TileLayer

RED = (255, 0, 0)
BLUE = (0, 0, 255)
BACKGROUND = (10, 20, 30)


def make_layer(tiles, map_tile=16, tileset_tile=16, cols=2, first_gid=1):
    return TileLayer(
        map_width=2,
        map_height=1,
        map_tile_width=map_tile,
        map_tile_height=map_tile,
        tileset_tile_width=tileset_tile,
        tileset_tile_height=tileset_tile,
        tileset_cols=cols,
        first_gid=first_gid,
        tileset_image_path="tiles.png",
        tiles=list(tiles),
    )


def make_tileset():
    surface = pygame.Surface((32, 16))
    surface.fill(RED, pygame.Rect(0, 0, 16, 16))
    surface.fill(BLUE, pygame.Rect(16, 0, 16, 16))
    return surface


def test_first_gid_maps_to_origin_of_tileset():
    placements = list(tile_placements(make_layer([1, 0])))
    assert len(placements) == 1
    src, dst = placements[0]
    assert src.topleft == (0, 0)
    assert dst.topleft == (0, 0)
    assert src.size == (16, 16)


def test_tiles_below_first_gid_are_skipped():
    layer = make_layer([0, 0])
    assert list(tile_placements(layer)) == []


def test_placement_count_matches_drawable_tiles():
    layer = make_layer([1, 2])
    placements = list(tile_placements(layer))
    assert len(placements) == 2
    assert [dst.size for _, dst in placements] == [(16, 16), (16, 16)]


def test_zero_columns_draws_nothing():
    assert list(tile_placements(make_layer([1, 2], cols=0))) == []


def test_invalid_layer_draws_nothing():
    layer = make_layer([1, 2])
    layer.tileset_image_path = ""
    assert list(tile_placements(layer)) == []


def test_render_blits_tiles_in_grid_order():
    screen = pygame.Surface((32, 16))
    screen.fill(BACKGROUND)
    render(screen, make_tileset(), make_layer([2, 1]))
    assert tuple(screen.get_at((0, 0)))[:3] == BLUE
    assert tuple(screen.get_at((16, 0)))[:3] == RED


def test_render_leaves_empty_cells_untouched():
    screen = pygame.Surface((32, 16))
    screen.fill(BACKGROUND)
    render(screen, make_tileset(), make_layer([0, 1]))
    assert tuple(screen.get_at((0, 0)))[:3] == BACKGROUND
    assert tuple(screen.get_at((16, 0)))[:3] == RED


def test_render_scales_tiles_to_map_grid():
    screen = pygame.Surface((64, 32))
    screen.fill(BACKGROUND)
    render(screen, make_tileset(), make_layer([1, 2], map_tile=32))
    assert tuple(screen.get_at((31, 31)))[:3] == RED
    assert tuple(screen.get_at((63, 31)))[:3] == BLUE


def test_render_without_tileset_does_nothing():
    screen = pygame.Surface((32, 16))
    screen.fill(BACKGROUND)
    render(screen, None, make_layer([1, 2]))
    assert tuple(screen.get_at((0, 0)))[:3] == BACKGROUND


def test_load_tileset_round_trip(tmp_path):
    path = tmp_path / "tiles.png"
    pygame.image.save(make_tileset(), str(path))
    image = load_tileset(path)
    assert image.get_size() == (32, 16)
    assert tuple(image.get_at((20, 5)))[:3] == BLUE


def test_load_tileset_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_tileset(tmp_path / "missing.png")