"""Controllers steering tanks: random moves and the keyboard."""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable, Protocol

import pygame

from tankbot.engine import Gear
from tankbot.rand import one_of
from tankbot.tank import Rotation, Tank

SWITCH_INTERVAL = 0.2
SHOT_COOLDOWN = 0.5

Clock = Callable[[], float]


class _Board(Protocol):
    def fire_missile(self, tank: Tank) -> None: ...


class DummyMove(Enum):
    FORWARD = "forward"
    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"
    SHOT = "shot"
    IDLE = "idle"


class DummyController:
    """Picks a random move every so often; a shot is never repeated."""

    def __init__(self, tank: Tank, board: _Board, clock: Clock = time.monotonic) -> None:
        self._tank = tank
        self._board = board
        self._clock = clock
        self._current_move = DummyMove.IDLE
        self._last_change = clock()

    @property
    def current_move(self) -> DummyMove:
        return self._current_move

    def update(self) -> None:
        now = self._clock()
        if now - self._last_change > SWITCH_INTERVAL or self._current_move is DummyMove.SHOT:
            self._current_move = one_of(
                DummyMove.FORWARD,
                DummyMove.IDLE,
                DummyMove.SHOT,
                DummyMove.TURN_LEFT,
                DummyMove.TURN_RIGHT,
            )
            self._last_change = now

        move = self._current_move
        if move is DummyMove.SHOT:
            self._board.fire_missile(self._tank)
        elif move is DummyMove.FORWARD:
            self._tank.set_gear(Gear.DRIVE)
        elif move is DummyMove.TURN_LEFT:
            self._tank.rotate_body(Rotation.CLOCKWISE)
            self._tank.rotate_tower(Rotation.CLOCKWISE)
        elif move is DummyMove.TURN_RIGHT:
            self._tank.rotate_body(Rotation.COUNTERCLOCKWISE)
            self._tank.rotate_tower(Rotation.COUNTERCLOCKWISE)
        else:
            self._tank.set_gear(Gear.NEUTRAL)


_KEY_PRESSES = {
    pygame.K_a: ("rotate_body", Rotation.COUNTERCLOCKWISE),
    pygame.K_d: ("rotate_body", Rotation.CLOCKWISE),
    pygame.K_LEFT: ("rotate_tower", Rotation.COUNTERCLOCKWISE),
    pygame.K_RIGHT: ("rotate_tower", Rotation.CLOCKWISE),
    pygame.K_w: ("set_gear", Gear.DRIVE),
    pygame.K_s: ("set_gear", Gear.REVERSE),
}

_KEY_RELEASES = {
    pygame.K_a: ("rotate_body", Rotation.NONE),
    pygame.K_d: ("rotate_body", Rotation.NONE),
    pygame.K_LEFT: ("rotate_tower", Rotation.NONE),
    pygame.K_RIGHT: ("rotate_tower", Rotation.NONE),
    pygame.K_w: ("set_gear", Gear.NEUTRAL),
    pygame.K_s: ("set_gear", Gear.NEUTRAL),
}


class KeyboardController:
    """Drives a tank from key presses and releases."""

    def __init__(self, tank: Tank, board: _Board, clock: Clock = time.monotonic) -> None:
        self._tank = tank
        self._board = board
        self._clock = clock
        self._last_shot = clock()

    def update(self, event: pygame.event.Event) -> None:
        key = getattr(event, "key", None)
        if event.type == pygame.KEYDOWN:
            if key == pygame.K_SPACE:
                self._handle_shot()
            elif key in _KEY_PRESSES:
                self._apply(*_KEY_PRESSES[key])
        elif event.type == pygame.KEYUP and key in _KEY_RELEASES:
            self._apply(*_KEY_RELEASES[key])

    def _apply(self, action: str, argument: object) -> None:
        if action == "rotate_body":
            self._tank.rotate_body(argument)
        elif action == "rotate_tower":
            self._tank.rotate_tower(argument)
        else:
            self._tank.set_gear(argument)

    def _handle_shot(self) -> None:
        now = self._clock()
        if now - self._last_shot >= SHOT_COOLDOWN:
            self._last_shot = now
            self._board.fire_missile(self._tank)