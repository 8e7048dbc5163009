"""The viewer window: a TMX map with a player entity moved by the arrow keys."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pygame

from . import renderer
from .entity import Entity
from .tmxloader import TMXError, load_from_file

DEFAULT_MAP_FILE = "res/map/MAP.tmx"
DEFAULT_ENTITY_IMAGE = "res/tilesets/sprite-mario.jpeg"
BACKGROUND_COLOUR = (92, 148, 252)
WINDOW_TITLE = "TMX Map"


class GameError(Exception):
    """Raised when the viewer cannot be set up."""


class Game:
    """Owns the window, the loaded map, the tileset and the entities."""

    def __init__(
        self,
        map_file: str | Path = DEFAULT_MAP_FILE,
        entity_image: str | Path = DEFAULT_ENTITY_IMAGE,
    ) -> None:
        self.is_running = False
        self.entities: list[Entity] = []
        try:
            self.tile_layer = load_from_file(map_file)
        except TMXError as exc:
            raise GameError(f"cannot load TMX map: {exc}") from exc

        try:
            pygame.display.init()
        except pygame.error as exc:
            raise GameError(f"cannot initialise video: {exc}") from exc

        if not pygame.image.get_extended():
            self.close()
            raise GameError("PNG image support is unavailable")

        layer = self.tile_layer
        self.window_width = layer.map_width * layer.map_tile_width
        self.window_height = layer.map_height * layer.map_tile_height

        try:
            self.screen = pygame.display.set_mode((self.window_width, self.window_height))
            pygame.display.set_caption(WINDOW_TITLE)
        except pygame.error as exc:
            self.close()
            raise GameError(f"cannot create window: {exc}") from exc

        try:
            self.tileset = renderer.load_tileset(layer.tileset_image_path)
        except OSError as exc:
            self.close()
            raise GameError(f"cannot load tileset: {exc}") from exc

        try:
            self.entity_texture = pygame.image.load(str(entity_image))
        except (pygame.error, OSError) as exc:
            self.close()
            raise GameError(f"cannot load entity image: {exc}") from exc

        self.entities.append(Entity(64, 64, 32, 32, self.entity_texture, True))

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def handle_key(self, key: int) -> None:
        """Move the player one map tile in the direction of an arrow key."""
        layer = self.tile_layer
        offsets = {
            pygame.K_UP: (0, -layer.map_tile_height),
            pygame.K_DOWN: (0, layer.map_tile_height),
            pygame.K_LEFT: (-layer.map_tile_width, 0),
            pygame.K_RIGHT: (layer.map_tile_width, 0),
        }
        offset = offsets.get(key)
        if offset is not None and self.entities:
            self.entities[0].move(*offset)

    def render(self) -> None:
        """Draw the background, the map and the entities, then show the frame."""
        self.screen.fill(BACKGROUND_COLOUR)
        renderer.render(self.screen, self.tileset, self.tile_layer)
        for entity in self.entities:
            entity.render(self.screen)
        pygame.display.flip()

    def run(self) -> None:
        """Process events and draw frames until the window is closed."""
        self.is_running = True
        while self.is_running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.is_running = False
                elif event.type == pygame.KEYDOWN:
                    self.handle_key(event.key)
            self.render()

    def close(self) -> None:
        """Close the window and shut the display down."""
        pygame.display.quit()
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Open the viewer on a map file and run it until closed."""
    parser = argparse.ArgumentParser(prog="tmxviewer", description="View a TMX map.")
    parser.add_argument("map_file", nargs="?", default=DEFAULT_MAP_FILE)
    parser.add_argument("--entity-image", default=DEFAULT_ENTITY_IMAGE)
    args = parser.parse_args(argv)
    try:
        with Game(args.map_file, args.entity_image) as game:
            game.run()
    except Exception as exc:  # any failure is fatal for the viewer
        print(f"Fatal error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())