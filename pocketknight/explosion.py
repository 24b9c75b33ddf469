"""Explosions left behind by detonated TNT."""

from __future__ import annotations

import time
from typing import Callable

import pygame

from pocketknight.animation import Sprite
from pocketknight.assets import Assets
from pocketknight.engine import Attack, Clock, Rect

EXPLOSION_SIZE = 64
EXPLOSION_ANIMATION = "explosion"


class Explosion(Attack):
    """A blast that damages whatever stands in it during its first instant."""

    def __init__(
        self,
        tnt_position: tuple[float, float],
        assets: Assets,
        time_source: Callable[[], float] = time.monotonic,
    ) -> None:
        x, y = float(tnt_position[0]), float(tnt_position[1])
        super().__init__(Rect(x, y, EXPLOSION_SIZE, EXPLOSION_SIZE), Clock(time_source))
        self._animation = assets.animation(EXPLOSION_ANIMATION)
        self._animation_clock = Clock(time_source)
        self._time_of_explosion = Clock(time_source)
        self.sprite = Sprite(position=(x - EXPLOSION_SIZE, y - EXPLOSION_SIZE))

    @property
    def time_of_explosion(self) -> Clock:
        """Clock started when the explosion went off."""
        return self._time_of_explosion

    def global_bounds(self) -> Rect:
        return self.bounds

    def render(self, target: pygame.Surface) -> None:
        """Draw the explosion onto the target surface."""
        self.sprite.draw(target)

    def update_state(self) -> None:
        self._animation.update_frame(self._animation_clock)
        self._animation.apply_texture(self.sprite)
        super().update_state()