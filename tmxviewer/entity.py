"""Rectangular on-screen entities that can move around the map."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pygame

_FILL_COLOUR = (255, 0, 0, 255)
_OUTLINE_COLOUR = (0, 0, 0, 255)


@dataclass
class Entity:
    """A rectangle with an optional texture, a velocity and a speed."""

    x: int
    y: int
    width: int
    height: int
    texture: Any = None
    movable: bool = True
    src_rect: tuple[int, int, int, int] | None = None
    vx: float = 0.0
    vy: float = 0.0
    speed: float = 100.0

    def __post_init__(self) -> None:
        if self.src_rect is None:
            self.src_rect = (0, 0, self.width, self.height)

    @property
    def rect(self) -> pygame.Rect:
        """The entity's destination rectangle, as a fresh copy."""
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the entity as a red rectangle with a black outline."""
        rect = self.rect
        pygame.draw.rect(surface, _FILL_COLOUR, rect)
        pygame.draw.rect(surface, _OUTLINE_COLOUR, rect, 1)

    def move(self, dx: int, dy: int) -> None:
        """Shift the entity by a fixed offset if it is movable."""
        if self.movable:
            self.x += dx
            self.y += dy

    def set_position(self, x: int, y: int) -> None:
        """Place the entity at a position, movable or not."""
        self.x = x
        self.y = y

    def update(self, delta_time: float) -> None:
        """Advance the entity by its velocity over the elapsed time."""
        if self.movable:
            self.x += int(self.vx * delta_time)
            self.y += int(self.vy * delta_time)

    def set_velocity(self, vx: float, vy: float) -> None:
        """Set the velocity used by update."""
        self.vx = vx
        self.vy = vy