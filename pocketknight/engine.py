"""Core game-object model: rectangles, clocks, entities, collidables and attacks."""

from __future__ import annotations

import random
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable

_rng = random.Random()


def random_int(low: int, high: int) -> int:
    """Return a uniformly distributed integer in the closed range [low, high]."""
    if low > high:
        raise ValueError(f"empty range: {low} > {high}")
    return _rng.randint(low, high)


@dataclass
class Rect:
    """Axis-aligned rectangle with float coordinates."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def _span(self) -> tuple[float, float, float, float]:
        right = self.left + self.width
        bottom = self.top + self.height
        return (
            min(self.left, right),
            max(self.left, right),
            min(self.top, bottom),
            max(self.top, bottom),
        )

    def intersects(self, other: Rect) -> bool:
        """True if the two rectangles overlap by a non-zero area."""
        min_x1, max_x1, min_y1, max_y1 = self._span()
        min_x2, max_x2, min_y2, max_y2 = other._span()
        return max(min_x1, min_x2) < min(max_x1, max_x2) and max(min_y1, min_y2) < min(
            max_y1, max_y2
        )


class Clock:
    """Measures time elapsed since creation or the last restart, in seconds."""

    def __init__(self, time_source: Callable[[], float] = time.monotonic) -> None:
        self._now = time_source
        self._start = self._now()

    def elapsed(self) -> float:
        """Seconds since the clock was started or last restarted."""
        return self._now() - self._start

    def restart(self) -> float:
        """Restart the clock and return the time that had elapsed."""
        now = self._now()
        elapsed = now - self._start
        self._start = now
        return elapsed


class Entity(ABC):
    """Something in the game world that is updated every frame."""

    def __init__(self) -> None:
        self.is_alive = True

    @abstractmethod
    def update_state(self) -> None:
        """Advance the entity by one frame."""


class Collidable(Entity):
    """An entity with bounds that can collide with other collidables."""

    def __init__(self) -> None:
        super().__init__()
        self.last_collision: Collidable | None = None

    @abstractmethod
    def global_bounds(self) -> Rect:
        """Bounds of the object in world coordinates."""

    def is_colliding_with(self, other: Collidable) -> bool:
        return self.global_bounds().intersects(other.global_bounds())

    def on_collision_with(self, other: Collidable) -> None:
        """React to a collision; by default only remembers the other object."""
        self.last_collision = other


ATTACK_LIFETIME = 0.1


class Attack(Collidable):
    """A short-lived damaging area that expires shortly after being started."""

    def __init__(self, bounds: Rect | None = None, clock: Clock | None = None) -> None:
        super().__init__()
        self.bounds = bounds if bounds is not None else Rect()
        self.alive_clock = clock if clock is not None else Clock()

    def global_bounds(self) -> Rect:
        return self.bounds

    def update_state(self) -> None:
        if self.alive_clock.elapsed() >= ATTACK_LIFETIME:
            self.is_alive = False


class MapBorder(Collidable):
    """An invisible, immovable wall on the map."""

    def __init__(self, width: float, height: float, x: float, y: float) -> None:
        super().__init__()
        self._bounds = Rect(x, y, width, height)

    def global_bounds(self) -> Rect:
        left, right, top, bottom = self._bounds._span()
        return Rect(left, top, right - left, bottom - top)

    def update_state(self) -> None:
        """Borders never change."""