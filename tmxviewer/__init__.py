"""View Tiled TMX maps (first tileset, first CSV layer) in a pygame window with a movable player."""

__version__ = "0.1.0"