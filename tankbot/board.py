"""The game board: window, tanks, missiles and the main loop."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import pygame

from tankbot.background import Background
from tankbot.controllers import DummyController, KeyboardController
from tankbot.geometry import HEIGHT, WIDTH, MovementState
from tankbot.missile import Missile
from tankbot.tank import Tank
from tankbot.tank_factory import random_tank
from tankbot.textures import TextureStore, asset_path

TITLE = "TankBotFight"
FRAME_RATE = 30
TANK_POSITIONS = ((WIDTH / 2.0, 50.0), (WIDTH / 2.0, 400.0))
FONT_FILE = "DejaVuSans.ttf"
FONT_SIZE = 30
MISSILE_TEXTURE = "bulletDark3.png"
BACKGROUND_COLOUR = (0, 0, 0)
TEXT_COLOUR = (255, 255, 255)


class Board:
    """Holds everything on the battlefield and runs the game loop.

    Without a surface, a display window of the board size is opened.
    """

    def __init__(
        self,
        surface: Optional[pygame.Surface] = None,
        store: Optional[TextureStore] = None,
    ) -> None:
        self.store = store if store is not None else TextureStore()
        self._owns_display = surface is None
        if surface is None:
            surface = pygame.display.set_mode((WIDTH, HEIGHT))
            pygame.display.set_caption(TITLE)
        self.surface = surface
        self.background = Background(self.store)
        self.tanks: list[Tank] = []
        self.missiles: list[Missile] = []
        self.is_open = True
        self._font: Optional[pygame.font.Font] = None
        self._clock = pygame.time.Clock()

    def register_tanks(self) -> None:
        """Place the player's tank and the computer's tank on the board."""
        self.tanks.extend(random_tank(self.store, x, y) for x, y in TANK_POSITIONS)
        pygame.font.init()
        font_path = Path(asset_path()) / FONT_FILE
        self._font = pygame.font.Font(str(font_path) if font_path.is_file() else None, FONT_SIZE)

    def fire_missile(self, tank: Tank) -> None:
        """Launch a missile from the tank along its tower heading."""
        position = tank.position
        texture = self.store.get_texture(MISSILE_TEXTURE)
        state = MovementState(position.x, position.y, tank.tower_rotation)
        self.missiles.append(Missile(texture, state))
        tank.shot()

    def run(self) -> None:
        """Run frames until the window is closed or Escape is pressed."""
        if len(self.tanks) < 2:
            raise RuntimeError("register tanks before running the board")
        keyboard = KeyboardController(self.tanks[0], self)
        dummy = DummyController(self.tanks[1], self)

        while self.is_open:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.is_open = False
                if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    self.is_open = False
                keyboard.update(event)

            for tank in self.tanks:
                tank.update()
            dummy.update()
            self._draw()
            self._remove_missiles()
            self._clock.tick(FRAME_RATE)

        if self._owns_display:
            pygame.display.quit()

    def _draw(self) -> None:
        self.surface.fill(BACKGROUND_COLOUR)
        self.background.draw(self.surface)
        for tank in self.tanks:
            tank.draw(self.surface)
        for missile in self.missiles:
            missile.draw(self.surface)
        self._display_speed()
        if self._owns_display:
            pygame.display.flip()

    def _display_speed(self) -> None:
        if self._font is None or not self.tanks:
            return
        text = self._font.render(f"{self.tanks[0].current_speed:.6f}", True, TEXT_COLOUR)
        self.surface.blit(text, (0, 0))

    def _remove_missiles(self) -> None:
        self.missiles = [
            missile
            for missile in self.missiles
            if 0 <= missile.position.x <= WIDTH and 0 <= missile.position.y <= HEIGHT
        ]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and play until it is closed."""
    pygame.init()
    try:
        board = Board()
        board.register_tanks()
        board.run()
    finally:
        pygame.quit()
    return 0