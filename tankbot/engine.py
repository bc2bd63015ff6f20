"""Tank engines turning a gear selection into speed and movement."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from tankbot.geometry import PI, Vector2


class Gear(Enum):
    DRIVE = "drive"
    NEUTRAL = "neutral"
    REVERSE = "reverse"


class Engine(ABC):
    """Interface of an engine driving a tank."""

    @abstractmethod
    def set_gear(self, gear: Gear) -> None:
        """Select the gear used by following updates."""

    @property
    @abstractmethod
    def current_speed(self) -> float:
        """Signed speed; negative while moving backwards."""

    @abstractmethod
    def position_delta(self, rotation_radians: float) -> Vector2:
        """Movement for one frame with the body turned by the given angle."""

    @abstractmethod
    def update(self) -> None:
        """Advance the engine by one frame."""

    @abstractmethod
    def copy(self) -> Engine:
        """A fresh engine with the same configuration."""


@dataclass(frozen=True)
class SquareRootEngineConfig:
    step_count: int = 70
    max_speed: float = 5.0


class SquareRootEngine(Engine):
    """Engine whose speed grows with the square root of the acceleration step."""

    def __init__(self, config: SquareRootEngineConfig | None = None) -> None:
        self.config = config if config is not None else SquareRootEngineConfig()
        self._gear = Gear.NEUTRAL
        self._speed = 0.0
        self._step = 0
        self._brake = False

    def copy(self) -> SquareRootEngine:
        return SquareRootEngine(self.config)

    def set_gear(self, gear: Gear) -> None:
        if self._gear is Gear.NEUTRAL and gear is not Gear.NEUTRAL:
            self._step = self._step_for_current_speed()
        self._gear = gear

    @property
    def current_speed(self) -> float:
        return self._speed

    def update(self) -> None:
        self._brake = self._is_braking()
        self._speed = self._next_speed()
        self._step = self._next_step()

    def position_delta(self, rotation_radians: float) -> Vector2:
        heading = rotation_radians - PI / 2
        return Vector2(self._speed * math.cos(heading), self._speed * math.sin(heading))

    def _step_for_current_speed(self) -> int:
        if self._speed == 0:
            return 1
        ratio = self._speed * math.sqrt(self.config.step_count) / self.config.max_speed
        return int(ratio**2)

    def _is_braking(self) -> bool:
        if self._gear is Gear.REVERSE and self._speed > 0:
            return True
        return self._gear is Gear.DRIVE and self._speed < 0

    def _next_step(self) -> int:
        if self._speed == 0:
            return 1
        if self._step < self.config.step_count:
            return self._step + 1
        return self._step

    def _next_speed(self) -> float:
        if self._brake:
            return self._reduce_abs_speed_by(3 * self._freeride())
        if self._gear is Gear.NEUTRAL:
            return self._reduce_abs_speed_by(self._freeride())
        if self._gear is Gear.DRIVE:
            return self._speed + self._speed_delta()
        return self._speed - self._speed_delta()

    def _reduce_abs_speed_by(self, amount: float) -> float:
        if self._speed < 0:
            return min(self._speed + amount, 0.0)
        if self._speed > 0:
            return max(self._speed - amount, 0.0)
        return self._speed

    def _speed_delta(self) -> float:
        fraction = math.sqrt(self._step) / math.sqrt(self.config.step_count)
        return self.config.max_speed * fraction - abs(self._speed)

    def _freeride(self) -> float:
        return self.config.max_speed / self.config.step_count