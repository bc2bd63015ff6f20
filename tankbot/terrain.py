"""Ground types and random layouts of surfaces and roads."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from tankbot.fill import fill_grid
from tankbot.geometry import FIELDS_HEIGHT, FIELDS_WIDTH
from tankbot.rand import random_range


class SurfaceType(Enum):
    SAND = "sand"
    GRASS = "grass"


@dataclass(frozen=True)
class GroundType:
    """Surface of one field and whether a road runs over it."""

    surface: SurfaceType
    is_road: bool


class SurfacePattern(IntEnum):
    VERTICAL_SAND_GRASS = 0
    VERTICAL_GRASS_SAND = 1
    HORIZONTAL_SAND_GRASS = 2
    HORIZONTAL_GRASS_SAND = 3


class RoadPattern(IntEnum):
    VERTICAL_LINE = 0
    HORIZONTAL_LINE = 1
    SINGLE_CROSSROAD = 2
    T_LETTER = 3


def generate_surface() -> list[list[SurfaceType]]:
    """Split the board into a grass part and a sand part along a random line."""
    grid = [[SurfaceType.GRASS] * FIELDS_WIDTH for _ in range(FIELDS_HEIGHT)]
    pattern = SurfacePattern(random_range(0, len(SurfacePattern) - 1))
    last_row, last_col = FIELDS_HEIGHT - 1, FIELDS_WIDTH - 1
    sand = SurfaceType.SAND

    if pattern is SurfacePattern.VERTICAL_SAND_GRASS:
        column = random_range(2, FIELDS_WIDTH - 3)
        fill_grid(grid, 0, column, last_row, last_col, sand)
    elif pattern is SurfacePattern.VERTICAL_GRASS_SAND:
        column = random_range(2, FIELDS_WIDTH - 3)
        fill_grid(grid, 0, 0, last_row, column, sand)
    elif pattern is SurfacePattern.HORIZONTAL_SAND_GRASS:
        row = random_range(2, FIELDS_HEIGHT - 3)
        fill_grid(grid, 0, 0, row, last_col, sand)
    else:
        row = random_range(2, FIELDS_HEIGHT - 3)
        fill_grid(grid, row, 0, last_row, last_col, sand)
    return grid


def generate_roads() -> list[list[bool]]:
    """Lay a random road pattern; True marks a road field."""
    grid = [[False] * FIELDS_WIDTH for _ in range(FIELDS_HEIGHT)]
    pattern = RoadPattern(random_range(0, len(RoadPattern) - 1))
    last_row, last_col = FIELDS_HEIGHT - 1, FIELDS_WIDTH - 1

    if pattern is RoadPattern.VERTICAL_LINE:
        column = random_range(2, FIELDS_WIDTH - 2)
        fill_grid(grid, 0, column, last_row, column, True)
    elif pattern is RoadPattern.HORIZONTAL_LINE:
        row = random_range(2, FIELDS_HEIGHT - 2)
        fill_grid(grid, row, 0, row, last_col, True)
    elif pattern is RoadPattern.SINGLE_CROSSROAD:
        row = random_range(2, FIELDS_HEIGHT - 2)
        column = random_range(2, FIELDS_WIDTH - 2)
        fill_grid(grid, row, 0, row, last_col, True)
        fill_grid(grid, 0, column, last_row, column, True)
    else:
        row = random_range(2, FIELDS_HEIGHT - 2)
        column = random_range(2, FIELDS_WIDTH - 2)
        fill_grid(grid, row, 0, row, last_col, True)
        fill_grid(grid, row, column, last_row, column, True)
    return grid