import pygame
import pytest

from tankbot.controllers import (
    SHOT_COOLDOWN,
    SWITCH_INTERVAL,
    DummyController,
    DummyMove,
    KeyboardController,
)
from tankbot.engine import Gear
from tankbot.tank import Rotation


class FakeTank:
    def __init__(self):
        self.calls = []

    def set_gear(self, gear):
        self.calls.append(("set_gear", gear))

    def rotate_body(self, rotation):
        self.calls.append(("rotate_body", rotation))

    def rotate_tower(self, rotation):
        self.calls.append(("rotate_tower", rotation))


class FakeBoard:
    def __init__(self):
        self.fired = []

    def fire_missile(self, tank):
        self.fired.append(tank)


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def parts():
    return FakeTank(), FakeBoard(), FakeClock()


EXPECTED_DUMMY_CALLS = {
    DummyMove.FORWARD: [("set_gear", Gear.DRIVE)],
    DummyMove.IDLE: [("set_gear", Gear.NEUTRAL)],
    DummyMove.SHOT: [],
    DummyMove.TURN_LEFT: [
        ("rotate_body", Rotation.CLOCKWISE),
        ("rotate_tower", Rotation.CLOCKWISE),
    ],
    DummyMove.TURN_RIGHT: [
        ("rotate_body", Rotation.COUNTERCLOCKWISE),
        ("rotate_tower", Rotation.COUNTERCLOCKWISE),
    ],
}


def test_dummy_starts_idle(parts):
    tank, board, clock = parts
    controller = DummyController(tank, board, clock)
    clock.now = SWITCH_INTERVAL / 2
    controller.update()
    assert controller.current_move is DummyMove.IDLE
    assert tank.calls == [("set_gear", Gear.NEUTRAL)]
    assert board.fired == []


def test_dummy_actions_follow_chosen_move(parts):
    tank, board, clock = parts
    controller = DummyController(tank, board, clock)
    for _ in range(40):
        clock.now += SWITCH_INTERVAL * 2
        tank.calls.clear()
        board.fired.clear()
        controller.update()
        move = controller.current_move
        assert tank.calls == EXPECTED_DUMMY_CALLS[move]
        assert board.fired == ([tank] if move is DummyMove.SHOT else [])


def test_dummy_keeps_move_within_interval(parts):
    tank, board, clock = parts
    controller = DummyController(tank, board, clock)
    for _ in range(5):
        controller.update()
    assert controller.current_move is DummyMove.IDLE
    assert tank.calls == [("set_gear", Gear.NEUTRAL)] * 5


@pytest.mark.parametrize(
    "key, expected",
    [
        (pygame.K_a, ("rotate_body", Rotation.COUNTERCLOCKWISE)),
        (pygame.K_d, ("rotate_body", Rotation.CLOCKWISE)),
        (pygame.K_LEFT, ("rotate_tower", Rotation.COUNTERCLOCKWISE)),
        (pygame.K_RIGHT, ("rotate_tower", Rotation.CLOCKWISE)),
        (pygame.K_w, ("set_gear", Gear.DRIVE)),
        (pygame.K_s, ("set_gear", Gear.REVERSE)),
    ],
)
def test_key_press(parts, key, expected):
    tank, board, clock = parts
    KeyboardController(tank, board, clock).update(pygame.event.Event(pygame.KEYDOWN, key=key))
    assert tank.calls == [expected]


@pytest.mark.parametrize(
    "key, expected",
    [
        (pygame.K_a, ("rotate_body", Rotation.NONE)),
        (pygame.K_d, ("rotate_body", Rotation.NONE)),
        (pygame.K_LEFT, ("rotate_tower", Rotation.NONE)),
        (pygame.K_RIGHT, ("rotate_tower", Rotation.NONE)),
        (pygame.K_w, ("set_gear", Gear.NEUTRAL)),
        (pygame.K_s, ("set_gear", Gear.NEUTRAL)),
    ],
)
def test_key_release(parts, key, expected):
    tank, board, clock = parts
    KeyboardController(tank, board, clock).update(pygame.event.Event(pygame.KEYUP, key=key))
    assert tank.calls == [expected]


def test_other_keys_and_events_are_ignored(parts):
    tank, board, clock = parts
    controller = KeyboardController(tank, board, clock)
    controller.update(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q))
    controller.update(pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE))
    controller.update(pygame.event.Event(pygame.QUIT))
    assert tank.calls == []
    assert board.fired == []


def test_space_respects_shot_cooldown(parts):
    tank, board, clock = parts
    controller = KeyboardController(tank, board, clock)
    space = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)

    clock.now = SHOT_COOLDOWN / 5
    controller.update(space)
    assert board.fired == []

    clock.now = SHOT_COOLDOWN
    controller.update(space)
    assert board.fired == [tank]

    clock.now = SHOT_COOLDOWN * 1.5
    controller.update(space)
    assert board.fired == [tank]

    clock.now = SHOT_COOLDOWN * 2
    controller.update(space)
    assert board.fired == [tank, tank]
    assert tank.calls == []