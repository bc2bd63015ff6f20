"""Choosing the texture file for a field from its ground and its neighbours."""

from __future__ import annotations

from typing import Optional, Sequence

from tankbot.rand import one_of
from tankbot.terrain import GroundType, SurfaceType

GroundGrid = Sequence[Sequence[GroundType]]


def _cell(grid: GroundGrid, x: int, y: int) -> Optional[GroundType]:
    if 0 <= x < len(grid) and 0 <= y < len(grid[0]):
        return grid[x][y]
    return None


def _neighbors(grid: GroundGrid, x: int, y: int) -> tuple[Optional[GroundType], ...]:
    return (
        _cell(grid, x, y - 1),
        _cell(grid, x + 1, y),
        _cell(grid, x - 1, y),
        _cell(grid, x, y + 1),
    )


def _is_road(cell: Optional[GroundType]) -> bool:
    return cell is not None and cell.is_road


def _absent_or_road(cell: Optional[GroundType]) -> bool:
    return cell is None or cell.is_road


def _absent_or_not_road(cell: Optional[GroundType]) -> bool:
    return cell is None or not cell.is_road


def _is_t_crossroad(grid: GroundGrid, x: int, y: int) -> bool:
    left, down, _up, right = _neighbors(grid, x, y)
    return _is_road(down) and _is_road(left) and _is_road(right)


def _is_x_crossroad(grid: GroundGrid, x: int, y: int) -> bool:
    return all(_absent_or_road(cell) for cell in _neighbors(grid, x, y))


def _is_vertical_road(grid: GroundGrid, x: int, y: int) -> bool:
    left, down, up, right = _neighbors(grid, x, y)
    return (
        _absent_or_not_road(right)
        and _absent_or_not_road(left)
        and _absent_or_road(up)
        and _absent_or_road(down)
    )


def _is_horizontal_road(grid: GroundGrid, x: int, y: int) -> bool:
    left, down, up, right = _neighbors(grid, x, y)
    return (
        _absent_or_not_road(up)
        and _absent_or_not_road(down)
        and _absent_or_road(left)
        and _absent_or_road(right)
    )


def _is_grass_road(cell: Optional[GroundType]) -> bool:
    return _is_road(cell) and cell.surface is SurfaceType.GRASS


def _road_name(grid: GroundGrid, x: int, y: int) -> str:
    me = grid[x][y]
    # the second and third neighbours are read as "up" and "down" here
    left, up, down, right = _neighbors(grid, x, y)
    prefix = "tileSand_road" if me.surface is SurfaceType.SAND else "tileGrass_road"

    if _is_x_crossroad(grid, x, y):
        return prefix + one_of("CrossingRound.png", "Crossing.png")
    if _is_t_crossroad(grid, x, y):
        return prefix + "SplitS.png"

    if me.surface is SurfaceType.SAND:
        for neighbor, side in ((left, "E"), (right, "W"), (up, "N"), (down, "S")):
            if _is_grass_road(neighbor):
                return "tileGrass_road" + one_of(
                    f"Transition{side}.png", f"Transition{side}_dirt.png"
                )

    if _is_vertical_road(grid, x, y):
        return prefix + "North.png"
    if _is_horizontal_road(grid, x, y):
        return prefix + "East.png"
    raise ValueError("Not recognized background pattern")


def _is_grass(cell: Optional[GroundType]) -> bool:
    return cell is not None and cell.surface is SurfaceType.GRASS


def _surface_name(grid: GroundGrid, x: int, y: int) -> str:
    if grid[x][y].surface is SurfaceType.SAND:
        if _is_grass(_cell(grid, x - 1, y)):
            return "tileGrass_transitionS.png"
        if _is_grass(_cell(grid, x, y - 1)):
            return "tileGrass_transitionE.png"
        if _is_grass(_cell(grid, x + 1, y)):
            return "tileGrass_transitionN.png"
        if _is_grass(_cell(grid, x, y + 1)):
            return "tileGrass_transitionW.png"
        return one_of("tileSand1.png", "tileSand2.png")
    return one_of("tileGrass1.png", "tileGrass2.png")


def background_texture_name(grid: GroundGrid, x: int, y: int) -> str:
    """Texture file name for the field in row x, column y of the grid."""
    if grid[x][y].is_road:
        return _road_name(grid, x, y)
    return _surface_name(grid, x, y)