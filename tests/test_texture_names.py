import pytest

from tankbot.terrain import GroundType, SurfaceType
from tankbot.texture_names import background_texture_name

SAND = GroundType(SurfaceType.SAND, False)
SAND_ROAD = GroundType(SurfaceType.SAND, True)
GRASS = GroundType(SurfaceType.GRASS, False)
GRASS_ROAD = GroundType(SurfaceType.GRASS, True)


def name_of(grid):
    return background_texture_name(grid, 1, 1)


def test_surface_sand():
    grid = [[SAND] * 3 for _ in range(3)]
    assert name_of(grid) in {"tileSand1.png", "tileSand2.png"}


def test_surface_grass():
    grid = [[GRASS] * 3 for _ in range(3)]
    assert name_of(grid) in {"tileGrass1.png", "tileGrass2.png"}


def test_surface_vertical_grass_to_sand():
    grid = [[GRASS, SAND, SAND] for _ in range(3)]
    assert name_of(grid) == "tileGrass_transitionE.png"


def test_surface_vertical_sand_to_grass():
    grid = [[SAND, SAND, GRASS] for _ in range(3)]
    assert name_of(grid) == "tileGrass_transitionW.png"


def test_surface_horizontal_sand_to_grass():
    grid = [[SAND, SAND, SAND], [SAND, SAND, SAND], [GRASS, GRASS, GRASS]]
    assert name_of(grid) == "tileGrass_transitionN.png"


def test_surface_horizontal_grass_to_sand():
    grid = [[GRASS, GRASS, GRASS], [SAND, SAND, SAND], [SAND, SAND, SAND]]
    assert name_of(grid) == "tileGrass_transitionS.png"


def test_road_vertical_grass():
    grid = [[GRASS] * 3, [GRASS_ROAD] * 3, [GRASS] * 3]
    assert name_of(grid) == "tileGrass_roadEast.png"


def test_road_horizontal_grass():
    grid = [[GRASS, GRASS_ROAD, GRASS] for _ in range(3)]
    assert name_of(grid) == "tileGrass_roadNorth.png"


def test_road_vertical_sand():
    grid = [[SAND] * 3, [SAND_ROAD] * 3, [SAND] * 3]
    assert name_of(grid) == "tileSand_roadEast.png"


def test_road_horizontal_sand():
    grid = [[SAND, SAND_ROAD, SAND] for _ in range(3)]
    assert name_of(grid) == "tileSand_roadNorth.png"


def test_road_vertical_sand_to_grass():
    grid = [[SAND] * 3, [GRASS_ROAD, SAND_ROAD, SAND_ROAD], [SAND] * 3]
    assert name_of(grid) in {
        "tileGrass_roadTransitionE.png",
        "tileGrass_roadTransitionE_dirt.png",
    }


def test_road_vertical_grass_to_sand():
    grid = [[SAND] * 3, [SAND_ROAD, SAND_ROAD, GRASS_ROAD], [SAND] * 3]
    assert name_of(grid) in {
        "tileGrass_roadTransitionW.png",
        "tileGrass_roadTransitionW_dirt.png",
    }


def test_road_horizontal_grass_to_sand():
    grid = [
        [SAND, GRASS_ROAD, SAND],
        [SAND, SAND_ROAD, SAND],
        [SAND, SAND_ROAD, SAND],
    ]
    assert name_of(grid) in {
        "tileGrass_roadTransitionS.png",
        "tileGrass_roadTransitionS_dirt.png",
    }


def test_road_horizontal_sand_to_grass():
    grid = [
        [SAND, SAND_ROAD, SAND],
        [SAND, SAND_ROAD, SAND],
        [SAND, GRASS_ROAD, SAND],
    ]
    assert name_of(grid) in {
        "tileGrass_roadTransitionN.png",
        "tileGrass_roadTransitionN_dirt.png",
    }


def test_sand_crossroad():
    grid = [
        [SAND, SAND_ROAD, SAND],
        [SAND_ROAD, SAND_ROAD, SAND_ROAD],
        [SAND, SAND_ROAD, SAND],
    ]
    assert name_of(grid) in {"tileSand_roadCrossingRound.png", "tileSand_roadCrossing.png"}


def test_grass_crossroad():
    grid = [
        [GRASS, GRASS_ROAD, GRASS],
        [GRASS_ROAD, GRASS_ROAD, GRASS_ROAD],
        [GRASS, GRASS_ROAD, GRASS],
    ]
    assert name_of(grid) in {"tileGrass_roadCrossingRound.png", "tileGrass_roadCrossing.png"}


def test_grass_t_letter():
    grid = [
        [GRASS, GRASS, GRASS],
        [GRASS_ROAD, GRASS_ROAD, GRASS_ROAD],
        [GRASS, GRASS_ROAD, GRASS],
    ]
    assert name_of(grid) == "tileGrass_roadSplitS.png"


def test_sand_t_letter():
    grid = [
        [SAND, SAND, SAND],
        [SAND_ROAD, SAND_ROAD, SAND_ROAD],
        [SAND, SAND_ROAD, SAND],
    ]
    assert name_of(grid) == "tileSand_roadSplitS.png"


def test_isolated_road_is_not_recognized():
    grid = [[GRASS] * 3, [GRASS, GRASS_ROAD, GRASS], [GRASS] * 3]
    with pytest.raises(ValueError):
        name_of(grid)


def test_single_road_field_without_neighbors_is_crossing():
    assert background_texture_name([[GRASS_ROAD]], 0, 0) in {
        "tileGrass_roadCrossingRound.png",
        "tileGrass_roadCrossing.png",
    }