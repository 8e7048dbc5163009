"""Loading of orthogonal TMX maps whose first layer is CSV encoded."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from pathlib import Path

from .tilelayer import TileLayer

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_CSV_INT = re.compile(r"[+-]?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class TMXError(Exception):
    """Raised when a TMX map or its tileset cannot be loaded."""


def _int_attr(element: ET.Element, name: str, default: int = 0) -> int:
    """Read an integer attribute, keeping the default when absent or malformed."""
    value = element.get(name)
    if value is None:
        return default
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else default


def _parse_root(path: Path, expected_tag: str) -> ET.Element:
    try:
        root = ET.parse(path).getroot()
    except (OSError, ET.ParseError) as exc:
        raise TMXError(f"cannot read {path}: {exc}") from exc
    if root.tag != expected_tag:
        raise TMXError(f"{path}: root element is not <{expected_tag}>")
    return root


def _read_tileset(element: ET.Element, base_dir: Path, layer: TileLayer) -> None:
    layer.tileset_tile_width = _int_attr(element, "tilewidth", layer.tileset_tile_width)
    layer.tileset_tile_height = _int_attr(element, "tileheight", layer.tileset_tile_height)

    image = element.find("image")
    if image is None or image.get("source") is None:
        raise TMXError("tileset has no image source")

    layer.tileset_image_path = str(base_dir / image.get("source"))

    image_width = _int_attr(image, "width", 0)
    if layer.tileset_tile_width > 0:
        layer.tileset_cols = image_width // layer.tileset_tile_width


def _parse_csv(text: str) -> list[int]:
    tiles = []
    for item in text.split(","):
        item = "".join(ch for ch in item if not ch.isspace())
        if not item:
            continue
        match = _CSV_INT.match(item)
        if match is None:
            raise TMXError(f"invalid tile id: {item!r}")
        tile_id = int(match.group())
        if not _INT_MIN <= tile_id <= _INT_MAX:
            raise TMXError(f"tile id out of range: {item!r}")
        tiles.append(tile_id)
    return tiles


def load_from_file(tmx_file_path: str | Path) -> TileLayer:
    """Load the first tileset and first CSV layer of a TMX map."""
    tmx_path = Path(tmx_file_path)
    layer = TileLayer()

    map_elem = _parse_root(tmx_path, "map")
    layer.map_width = _int_attr(map_elem, "width")
    layer.map_height = _int_attr(map_elem, "height")
    layer.map_tile_width = _int_attr(map_elem, "tilewidth")
    layer.map_tile_height = _int_attr(map_elem, "tileheight")

    tileset = map_elem.find("tileset")
    if tileset is None:
        raise TMXError("map has no <tileset>")
    layer.first_gid = _int_attr(tileset, "firstgid")

    base_dir = tmx_path.parent
    source = tileset.get("source")
    if source is not None:
        tsx_path = base_dir / source
        tsx_root = _parse_root(tsx_path, "tileset")
        _read_tileset(tsx_root, tsx_path.parent, layer)
    else:
        _read_tileset(tileset, base_dir, layer)

    layer_elem = map_elem.find("layer")
    if layer_elem is None:
        raise TMXError("map has no <layer>")

    data = layer_elem.find("data")
    if data is None or data.get("encoding") != "csv":
        raise TMXError("layer data is missing or not CSV encoded")

    layer.tiles = _parse_csv(data.text or "")

    expected = layer.map_width * layer.map_height
    if len(layer.tiles) != expected:
        raise TMXError(
            f"layer has {len(layer.tiles)} tiles, expected {expected}"
        )

    return layer