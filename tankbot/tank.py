"""A tank made of body, tower and muzzle flash, driven by an engine."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import pygame

from tankbot.engine import Engine, Gear
from tankbot.geometry import (
    Sprite,
    Vector2,
    is_sprite_x_in_board,
    is_sprite_y_in_board,
    to_radians,
)
from tankbot.traces import TracesHandler, TracesHandlerConfig

TANK_INITIAL_ROTATION = 180
ROTATION_OFFSET = 90
TANK_PART_ROTATE = 10
SHOT_ANIMATION_DISTANCE = 30
SHOT_ANIMATION_DURATION = 0.1


class Rotation(Enum):
    NONE = "none"
    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"


class TankPart:
    """One textured piece of a tank, turning about its centre."""

    def __init__(self, texture: pygame.Surface) -> None:
        self.texture = texture
        width, height = texture.get_size()
        self.sprite = Sprite(width, height, origin=Vector2(width / 2, height / 2))
        self.mode = Rotation.NONE

    @property
    def rotation(self) -> float:
        return self.sprite.rotation

    @rotation.setter
    def rotation(self, angle: float) -> None:
        self.sprite.rotation = angle

    def rotate(self, rotation: Rotation) -> None:
        """Choose how the part turns on each update."""
        self.mode = rotation

    def update(self) -> None:
        if self.mode is Rotation.CLOCKWISE:
            self.sprite.rotate(TANK_PART_ROTATE)
        elif self.mode is Rotation.COUNTERCLOCKWISE:
            self.sprite.rotate(-TANK_PART_ROTATE)

    def draw(self, surface: pygame.Surface, x: float, y: float) -> None:
        """Blit the part centred at (x, y)."""
        self.sprite.position = Vector2(x, y)
        rotated = pygame.transform.rotate(self.texture, -self.sprite.rotation)
        surface.blit(rotated, rotated.get_rect(center=(round(x), round(y))))


@dataclass(frozen=True)
class TankTextures:
    body: pygame.Surface
    tower: pygame.Surface
    shot: pygame.Surface
    tracks: pygame.Surface


class Tank:
    """A tank on the board that moves, turns its tower and fires."""

    def __init__(
        self,
        x: float,
        y: float,
        textures: TankTextures,
        engine: Engine,
        traces_config: Optional[TracesHandlerConfig] = None,
    ) -> None:
        self.textures = textures
        self.engine = engine
        self._pos = Vector2(x, y)
        self._body = TankPart(textures.body)
        self._tower = TankPart(textures.tower)
        self._shot = TankPart(textures.shot)
        self._shot_start = float("-inf")
        self._draw_shot = False
        self.set_rotation(TANK_INITIAL_ROTATION)
        self._place_parts()
        self.traces_handler = TracesHandler(
            textures.tracks, self._body.sprite, self._pos, traces_config
        )

    @property
    def _parts(self) -> tuple[TankPart, TankPart, TankPart]:
        return self._body, self._tower, self._shot

    def copy(self) -> Tank:
        """An independent tank in the same state, with a fresh copy of the engine."""
        clone = Tank(
            self._pos.x,
            self._pos.y,
            self.textures,
            self.engine.copy(),
            self.traces_handler.config,
        )
        for source, target in zip(self._parts, clone._parts):
            target.rotation = source.rotation
            target.mode = source.mode
        clone._shot_start = self._shot_start
        clone._draw_shot = self._draw_shot
        return clone

    def set_gear(self, gear: Gear) -> None:
        self.engine.set_gear(gear)

    def rotate_body(self, rotation: Rotation) -> None:
        self._body.rotate(rotation)

    def rotate_tower(self, rotation: Rotation) -> None:
        self._tower.rotate(rotation)
        self._shot.rotate(rotation)

    def set_rotation(self, angle: float) -> None:
        """Turn body, tower and muzzle flash to the same angle in degrees."""
        for part in self._parts:
            part.rotation = angle

    @property
    def position(self) -> Vector2:
        return self._pos

    @property
    def tower_rotation(self) -> float:
        return self._tower.rotation

    @property
    def current_speed(self) -> float:
        return self.engine.current_speed

    def update(self) -> None:
        """Advance the tank by one frame."""
        for part in self._parts:
            part.update()
        self.engine.update()
        self._update_position()
        self.traces_handler.update()
        self._update_shot()

    def shot(self) -> None:
        """Start the muzzle flash animation."""
        self._shot_start = time.monotonic()
        self._draw_shot = True

    def draw(self, surface: pygame.Surface) -> None:
        self._body.draw(surface, self._pos.x, self._pos.y)
        self._tower.draw(surface, self._pos.x, self._pos.y)
        if self._draw_shot:
            self._draw_shot_animation(surface)
        for trace in self.traces_handler.traces:
            trace.draw(surface)

    def _place_parts(self) -> None:
        for part in self._parts:
            part.sprite.position = self._pos

    def _update_position(self) -> None:
        delta = self.engine.position_delta(to_radians(self._body.rotation))
        new_pos = self._pos + delta
        x = new_pos.x if is_sprite_x_in_board(new_pos.x, self._body.sprite) else self._pos.x
        y = new_pos.y if is_sprite_y_in_board(new_pos.y, self._body.sprite) else self._pos.y
        self._pos = Vector2(x, y)
        self._place_parts()

    def _update_shot(self) -> None:
        if time.monotonic() - self._shot_start > SHOT_ANIMATION_DURATION:
            self._draw_shot = False

    def _draw_shot_animation(self, surface: pygame.Surface) -> None:
        heading = to_radians(self._tower.rotation - ROTATION_OFFSET)
        x = self._pos.x + SHOT_ANIMATION_DISTANCE * math.cos(heading)
        y = self._pos.y + SHOT_ANIMATION_DISTANCE * math.sin(heading)
        self._shot.draw(surface, x, y)