"""Track marks left behind a moving tank, and their ageing and decay."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass

import pygame

from tankbot.geometry import (
    MovementState,
    Sprite,
    Vector2,
    approx_equal,
    get_angle,
    get_opposite_angle,
    vectors_equal,
)


def _rotate(vec: Vector2, degrees: float) -> Vector2:
    radians = math.radians(degrees)
    cos, sin = math.cos(radians), math.sin(radians)
    return Vector2(vec.x * cos - vec.y * sin, vec.x * sin + vec.y * cos)


class Trace:
    """A strip of track texture anchored at its top middle and rotated by an angle."""

    def __init__(self, texture: pygame.Surface, state: MovementState, start_height: float) -> None:
        self.texture = texture
        self.position = Vector2(state.x, state.y)
        self._rotation = state.angle
        self._width = float(texture.get_width())
        self._top = 0.0
        self._bottom = float(start_height)

    @property
    def rotation(self) -> float:
        return self._rotation

    @property
    def height(self) -> float:
        return abs(self._top - self._bottom)

    def increase_height(self, amount: float) -> None:
        """Extend the far end of the strip."""
        self._bottom += amount

    def decrease_height(self, amount: float) -> None:
        """Shorten the strip from its anchored end."""
        self._top += amount

    def draw(self, surface: pygame.Surface) -> None:
        """Blit the strip, tiling the texture vertically, onto a surface."""
        width = int(self._width)
        height = int(round(self.height))
        texture_height = self.texture.get_height()
        if width <= 0 or height <= 0 or texture_height <= 0:
            return
        strip = pygame.Surface((width, height), pygame.SRCALPHA)
        y = -(int(min(self._top, self._bottom)) % texture_height)
        while y < height:
            strip.blit(self.texture, (0, y))
            y += texture_height
        rotated = pygame.transform.rotate(strip, -self._rotation)
        local_centre = Vector2(0.0, (self._top + self._bottom) / 2)
        centre = self.position + _rotate(local_centre, self._rotation)
        rect = rotated.get_rect(center=(round(centre.x), round(centre.y)))
        surface.blit(rotated, rect)


@dataclass(frozen=True)
class TracesHandlerConfig:
    max_trace_age: int = 50
    decay_rate: float = 0.1


@dataclass
class _AgedTrace:
    trace: Trace
    age: int = 0


def _middle_top(sprite: Sprite, additional: float = 0.0) -> Vector2:
    bounds = sprite.local_bounds()
    return sprite.transform_point(
        Vector2(bounds.left + bounds.width / 2, bounds.top + additional)
    )


def _middle_bottom(sprite: Sprite, additional: float = 0.0) -> Vector2:
    bounds = sprite.local_bounds()
    return sprite.transform_point(
        Vector2(bounds.left + bounds.width / 2, bounds.top + bounds.height + additional)
    )


class TracesHandler:
    """Follows a tank sprite and keeps the traces it leaves, oldest first."""

    def __init__(
        self,
        texture: pygame.Surface,
        tank_sprite: Sprite,
        start_pos: Vector2,
        config: TracesHandlerConfig | None = None,
    ) -> None:
        self.trace_texture = texture
        self.config = config if config is not None else TracesHandlerConfig()
        self._tank_sprite = tank_sprite
        self._last_tank_pos = start_pos
        self._max_texture_height = texture.get_height()
        self._entries: deque[_AgedTrace] = deque()

    @property
    def traces(self) -> tuple[Trace, ...]:
        return tuple(entry.trace for entry in self._entries)

    def update(self) -> None:
        """Age and decay existing traces, then record the tank's latest move."""
        position = self._tank_sprite.position
        move = position - self._last_tank_pos
        self._last_tank_pos = position
        self._age_traces()
        self._decay_traces()
        if vectors_equal(move, Vector2(0.0, 0.0)):
            return
        if not self._entries or self._is_move_angle_changed(move):
            self._entries.append(_AgedTrace(self._make_trace(move)))
            return
        self._entries[-1].trace.increase_height(move.hypot())

    def _age_traces(self) -> None:
        for entry in self._entries:
            if entry.age < self.config.max_trace_age:
                entry.age += 1

    def _decay_traces(self) -> None:
        if not self._entries:
            return
        oldest = self._entries[0]
        if oldest.age < self.config.max_trace_age:
            return
        decrease_by = self.config.decay_rate * self._max_texture_height
        if oldest.trace.height <= decrease_by:
            self._entries.popleft()
            return
        oldest.trace.decrease_height(decrease_by)

    def _is_move_angle_changed(self, move: Vector2) -> bool:
        return bool(self._entries) and not approx_equal(
            self._entries[-1].trace.rotation, get_opposite_angle(get_angle(move)), 1.0
        )

    def _is_moving_forward(self, move: Vector2) -> bool:
        return approx_equal(get_angle(move), self._tank_sprite.rotation, 1.0)

    def _make_trace(self, move: Vector2) -> Trace:
        angle = get_opposite_angle(get_angle(move))
        distance = move.hypot()
        if self._is_moving_forward(move):
            pos = _middle_bottom(self._tank_sprite, distance)
        else:
            pos = _middle_top(self._tank_sprite, -distance)
        return Trace(self.trace_texture, MovementState(pos.x, pos.y, angle), distance)