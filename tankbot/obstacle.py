"""Static obstacles placed on the board."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import pygame

from tankbot.geometry import Sprite, Vector2
from tankbot.textures import asset_path

OBSTACLE_IMAGE = "przeszkoda-obedience.jpg"
SCALE_FACTOR = 0.1


class Obstacle:
    """An image centred at a board position and scaled down."""

    def __init__(self, x: int, y: int, image_path: Optional[Union[str, Path]] = None) -> None:
        path = Path(image_path) if image_path is not None else Path(asset_path()) / OBSTACLE_IMAGE
        if not path.is_file():
            raise FileNotFoundError("Cannot read graphic file!")
        try:
            self.texture = pygame.image.load(str(path))
        except pygame.error as exc:
            raise ValueError("Cannot read graphic file!") from exc
        width, height = self.texture.get_size()
        self.sprite = Sprite(
            width,
            height,
            origin=Vector2(width / 2, height / 2),
            position=Vector2(float(x), float(y)),
            scale=Vector2(SCALE_FACTOR, SCALE_FACTOR),
        )