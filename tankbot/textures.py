"""Asset locations and a cache of textures loaded from image files."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

import pygame

Area = Union[pygame.Rect, Sequence[int]]


def asset_path() -> str:
    """Directory holding the game's resources, with a trailing separator."""
    return str(Path(__file__).resolve().parent / "res") + "/"


def default_size_path() -> str:
    """Directory holding the default-size sprite images, with a trailing separator."""
    return asset_path() + "PNG/Default size/"


class TextureStore:
    """Loads each texture once and hands out the same surface on later requests."""

    def __init__(self, root: Optional[Union[str, Path]] = None) -> None:
        self.root = Path(root) if root is not None else Path(default_size_path())
        self._textures: dict[str, pygame.Surface] = {}

    def get_texture(self, path: str, area: Optional[Area] = None) -> pygame.Surface:
        """Return the texture stored under path, loading it on first use.

        An area (left, top, width, height) with a non-zero size restricts the
        texture to that part of the image.
        """
        texture = self._textures.get(path)
        if texture is None:
            texture = self._load(path, area)
            self._textures[path] = texture
        return texture

    def _load(self, path: str, area: Optional[Area]) -> pygame.Surface:
        full_path = self.root / path
        if not full_path.is_file():
            raise FileNotFoundError(f"Texture {path} not found")
        try:
            image = pygame.image.load(str(full_path))
        except pygame.error as exc:
            raise ValueError(f"Texture {path} could not be loaded") from exc
        if area is None:
            return image
        rect = pygame.Rect(area)
        if rect.width <= 0 or rect.height <= 0:
            return image
        clipped = rect.clip(image.get_rect())
        return image.subsurface(clipped).copy()