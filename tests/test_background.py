import pygame
import pytest

from tankbot.background import Background, Ground
from tankbot.geometry import FIELDS_HEIGHT, FIELDS_WIDTH, GROUND_HEIGHT, GROUND_WIDTH, HEIGHT, WIDTH
from tankbot.terrain import SurfaceType

GREEN = (0, 200, 0)


class FakeStore:
    def __init__(self):
        self.requested = []

    def get_texture(self, path, area=None):
        self.requested.append(path)
        texture = pygame.Surface((GROUND_WIDTH, GROUND_HEIGHT))
        texture.fill(GREEN)
        return texture


def _all_grass():
    return [[SurfaceType.GRASS] * FIELDS_WIDTH for _ in range(FIELDS_HEIGHT)]


def _no_roads():
    return [[False] * FIELDS_WIDTH for _ in range(FIELDS_HEIGHT)]


def test_grass_only_background_uses_grass_tiles():
    store = FakeStore()
    background = Background(store, _all_grass(), _no_roads())
    names = [name for row in background.texture_names for name in row]
    assert len(background.texture_names) == FIELDS_HEIGHT
    assert all(len(row) == FIELDS_WIDTH for row in background.texture_names)
    assert set(names) <= {"tileGrass1.png", "tileGrass2.png"}
    assert store.requested == names


def test_horizontal_road_row_uses_east_tiles():
    roads = _no_roads()
    roads[4] = [True] * FIELDS_WIDTH
    background = Background(FakeStore(), _all_grass(), roads)
    assert set(background.texture_names[4]) == {"tileGrass_roadEast.png"}
    assert "tileGrass_roadEast.png" not in background.texture_names[3]


def test_vertical_road_column_uses_north_tiles():
    roads = _no_roads()
    for row in roads:
        row[5] = True
    background = Background(FakeStore(), _all_grass(), roads)
    assert {row[5] for row in background.texture_names} == {"tileGrass_roadNorth.png"}


@pytest.mark.parametrize("attempt", range(20))
def test_random_background_requests_every_tile(attempt):
    store = FakeStore()
    background = Background(store)
    names = [name for row in background.texture_names for name in row]
    assert len(names) == FIELDS_WIDTH * FIELDS_HEIGHT
    assert all(name.startswith("tile") and name.endswith(".png") for name in names)
    assert store.requested == names
    assert len(background.grounds) == FIELDS_HEIGHT


def test_ground_draw_blits_at_position():
    texture = pygame.Surface((8, 8))
    texture.fill(GREEN)
    surface = pygame.Surface((40, 40))
    surface.fill((0, 0, 0))
    Ground(texture).draw(surface, 10, 20)
    assert tuple(surface.get_at((10, 20)))[:3] == GREEN
    assert tuple(surface.get_at((17, 27)))[:3] == GREEN
    assert tuple(surface.get_at((9, 20)))[:3] == (0, 0, 0)
    assert tuple(surface.get_at((18, 28)))[:3] == (0, 0, 0)


def test_background_draw_covers_the_board():
    background = Background(FakeStore(), _all_grass(), _no_roads())
    surface = pygame.Surface((WIDTH, HEIGHT))
    surface.fill((0, 0, 0))
    background.draw(surface)
    for point in ((0, 0), (WIDTH - 1, 0), (0, HEIGHT - 1), (WIDTH - 1, HEIGHT - 1)):
        assert tuple(surface.get_at(point))[:3] == GREEN