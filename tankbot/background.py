"""The tiled ground the battle takes place on."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

import pygame

from tankbot.geometry import GROUND_HEIGHT, GROUND_WIDTH
from tankbot.terrain import GroundType, SurfaceType, generate_roads, generate_surface
from tankbot.texture_names import background_texture_name


class _Store(Protocol):
    def get_texture(self, path: str) -> pygame.Surface: ...


class Ground:
    """One tile of the background."""

    def __init__(self, texture: pygame.Surface) -> None:
        self.texture = texture

    def draw(self, surface: pygame.Surface, x: int, y: int) -> None:
        """Blit the tile with its top-left corner at (x, y)."""
        surface.blit(self.texture, (x, y))


class Background:
    """A grid of ground tiles built from surface and road layouts.

    Layouts not given are generated at random.
    """

    def __init__(
        self,
        store: _Store,
        surfaces: Optional[Sequence[Sequence[SurfaceType]]] = None,
        roads: Optional[Sequence[Sequence[bool]]] = None,
    ) -> None:
        surfaces = surfaces if surfaces is not None else generate_surface()
        roads = roads if roads is not None else generate_roads()
        grid = [
            [GroundType(surface, is_road) for surface, is_road in zip(surface_row, road_row)]
            for surface_row, road_row in zip(surfaces, roads)
        ]
        self.texture_names = [
            [background_texture_name(grid, i, j) for j, _ in enumerate(row)]
            for i, row in enumerate(grid)
        ]
        self.grounds = [
            [Ground(store.get_texture(name)) for name in row] for row in self.texture_names
        ]

    def draw(self, surface: pygame.Surface) -> None:
        for i, row in enumerate(self.grounds):
            for j, ground in enumerate(row):
                ground.draw(surface, j * GROUND_HEIGHT, i * GROUND_WIDTH)