"""Missiles flying straight across the board."""

from __future__ import annotations

import math

import pygame

from tankbot.geometry import PI, MovementState, Vector2

MISSILE_SPEED = 20.0


class Missile:
    """A projectile moving along its heading by a fixed distance each frame."""

    def __init__(
        self, texture: pygame.Surface, state: MovementState, speed: float = MISSILE_SPEED
    ) -> None:
        self.texture = texture
        self.position = Vector2(state.x, state.y)
        self.angle = state.angle
        self.speed = speed

    def update(self) -> None:
        """Move one frame along the heading; angle 0 points up."""
        heading = PI / 180.0 * (self.angle - 90)
        step = Vector2(self.speed * math.cos(heading), self.speed * math.sin(heading))
        self.position = self.position + step

    def draw(self, surface: pygame.Surface) -> None:
        """Advance the missile and blit it at its new position."""
        self.update()
        rotated = pygame.transform.rotate(self.texture, -self.angle)
        centre = (round(self.position.x), round(self.position.y))
        surface.blit(rotated, rotated.get_rect(center=centre))