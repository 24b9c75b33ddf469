"""Goblins: enemies that walk in from the islands and chase their target."""

from __future__ import annotations

import copy
import dataclasses
import time
from enum import Enum
from typing import Callable

import pygame

from pocketknight.animation import Sprite
from pocketknight.assets import Assets
from pocketknight.engine import Attack, Clock, Collidable, Rect, random_int
from pocketknight.explosion import Explosion

STARTING_HEALTH = 50
MOVING_SPEED = 1.5
SCALE = (0.5, 0.5)
BOUNDS_OFFSET = (43.0, 54.0)
BOUNDS_SIZE = 10.0
ATTACK_OFFSET = (43.0, 56.0)
ATTACK_SIZE = 32.0
ATTACK_HOLD = 0.1
ATTACK_DURATION = 0.6
DEFAULT_CHASED_POSITION = (416.0, 320.0)

WEST_LINE = 160.0
NORTH_LINE = 176.0
EAST_LINE = 544.0

ATTACK_DAMAGE = (10, 20)
EXPLOSION_DAMAGE = (20, 30)


class GoblinState(Enum):
    STANDING = "standing"
    RUNNING_LEFT = "running_left"
    RUNNING_RIGHT = "running_right"
    ATTACKING = "attacking"


class GoblinFacing(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


_STATE_ANIMATIONS = {
    GoblinState.STANDING: "goblinStanding",
    GoblinState.RUNNING_RIGHT: "goblinRunningRight",
    GoblinState.RUNNING_LEFT: "goblinRunningLeft",
}

_ATTACK_ANIMATIONS = {
    GoblinFacing.RIGHT: "goblinAttackRight",
    GoblinFacing.LEFT: "goblinAttackLeft",
    GoblinFacing.UP: "goblinAttackUp",
    GoblinFacing.DOWN: "goblinAttackDown",
}

_DIRECTIONS = {
    GoblinFacing.LEFT: (-1, 0),
    GoblinFacing.RIGHT: (1, 0),
    GoblinFacing.UP: (0, -1),
    GoblinFacing.DOWN: (0, 1),
}


class Goblin(Collidable):
    """An enemy that attacks any collidable of a ``prey`` type it reaches."""

    def __init__(
        self,
        assets: Assets,
        *,
        prey: tuple[type, ...] = (),
        time_source: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__()
        self.prey = prey
        self.health = STARTING_HEALTH
        self.state = GoblinState.STANDING
        self.facing = GoblinFacing.DOWN

        self._position = (0.0, 0.0)
        self.sprite = Sprite(position=self._position, scale=SCALE)
        self.bounds = Rect(BOUNDS_OFFSET[0], BOUNDS_OFFSET[1], BOUNDS_SIZE, BOUNDS_SIZE)

        names = [*_STATE_ANIMATIONS.values(), *_ATTACK_ANIMATIONS.values()]
        self._animations = {name: copy.copy(assets.animation(name)) for name in names}
        self._animation_clock = Clock(time_source)

        self.ready_to_chase = False
        self.velocity = (0.0, 0.0)
        self.next_position_bounds = dataclasses.replace(self.bounds)
        self.chased_position = DEFAULT_CHASED_POSITION

        self.is_attacking = False
        self._attack_animation_clock = Clock(time_source)
        self._attack_position = self._position
        self.attack_bounds = Rect(ATTACK_OFFSET[0], ATTACK_OFFSET[1], ATTACK_SIZE, ATTACK_SIZE)
        self.current_attack = Attack(dataclasses.replace(self.attack_bounds), Clock(time_source))

        self.is_colliding = False
        self._collidables: list[Collidable] = []

    @property
    def position(self) -> tuple[float, float]:
        return self._position

    @position.setter
    def position(self, value: tuple[float, float]) -> None:
        self._position = (float(value[0]), float(value[1]))
        self.sprite.position = self._position

    def global_bounds(self) -> Rect:
        return self.bounds

    def render(self, target: pygame.Surface) -> None:
        """Draw the goblin onto the target surface."""
        self.sprite.draw(target)

    def update_state(self) -> None:
        if self.health <= 0:
            self.is_alive = False
        self._update_attack()
        self._update_movement()
        if self.is_colliding:
            self._update_collision()
        self._update_texture()

    def is_colliding_with(self, other: Collidable) -> bool:
        other_bounds = other.global_bounds()
        if (
            self.prey
            and isinstance(other, self.prey)
            and self.attack_bounds.intersects(other_bounds)
            and not self.is_attacking
        ):
            self.state = GoblinState.ATTACKING
            self._attack_animation_clock.restart()
            self.is_attacking = True
            self._attack_position = self._position
            self.current_attack.bounds = dataclasses.replace(self.attack_bounds)
            self.current_attack.is_alive = True
            self.current_attack.alive_clock.restart()
        return self.next_position_bounds.intersects(other_bounds)

    def on_collision_with(self, other: Collidable) -> None:
        if isinstance(other, Explosion):
            if other.is_alive:
                self.health -= random_int(*EXPLOSION_DAMAGE)
        elif isinstance(other, Attack):
            if other.is_alive:
                self.health -= random_int(*ATTACK_DAMAGE)
        else:
            self.is_colliding = True
            self._collidables.append(other)

    def _update_attack(self) -> None:
        if not self.is_attacking:
            return
        self.current_attack.update_state()
        elapsed = self._attack_animation_clock.elapsed()
        if elapsed <= ATTACK_HOLD:
            self.sprite.position = self._attack_position
        if elapsed >= ATTACK_DURATION:
            self.is_attacking = False

    def _update_movement(self) -> None:
        if not self.ready_to_chase:
            self._move_to_chasing_position()
        elif not self.is_attacking:
            self._chase()

    def _update_collision(self) -> None:
        self._collidables = [c for c in self._collidables if self.is_colliding_with(c)]
        if not self._collidables:
            self.is_colliding = False

    def _update_texture(self) -> None:
        if self.state is GoblinState.ATTACKING:
            name = _ATTACK_ANIMATIONS[self.facing]
        else:
            name = _STATE_ANIMATIONS[self.state]
        animation = self._animations[name]
        animation.update_frame(self._animation_clock)
        animation.apply_texture(self.sprite)

    def _move_to_chasing_position(self) -> None:
        if self._position[0] <= WEST_LINE:
            self._move(GoblinFacing.RIGHT)
            if self._position[0] >= WEST_LINE:
                self.ready_to_chase = True
        if self._position[1] <= NORTH_LINE:
            self._move(GoblinFacing.DOWN)
            if self._position[1] >= NORTH_LINE:
                self.ready_to_chase = True
        if self._position[0] >= EAST_LINE:
            self._move(GoblinFacing.LEFT)
            if self._position[0] <= EAST_LINE:
                self.ready_to_chase = True

    def _chase(self) -> None:
        target_x, target_y = self.chased_position
        if self._position[0] > target_x:
            self._move(GoblinFacing.LEFT)
        if self._position[0] < target_x:
            self._move(GoblinFacing.RIGHT)
        if self._position[1] > target_y:
            self._move(GoblinFacing.UP)
        if self._position[1] < target_y:
            self._move(GoblinFacing.DOWN)

    def _move(self, facing: GoblinFacing) -> None:
        if facing is GoblinFacing.LEFT:
            self.state = GoblinState.RUNNING_LEFT
        elif facing is GoblinFacing.RIGHT:
            self.state = GoblinState.RUNNING_RIGHT
        elif self.state is GoblinState.STANDING:
            # a first vertical step still gets a running animation
            self.state = (
                GoblinState.RUNNING_LEFT if facing is GoblinFacing.UP else GoblinState.RUNNING_RIGHT
            )
        self.facing = facing

        dx, dy = _DIRECTIONS[facing]
        self.velocity = (dx * MOVING_SPEED, dy * MOVING_SPEED)
        if not self.is_colliding:
            self.sprite.move(self.velocity)

        self._position = self.sprite.position
        self.bounds.left = self._position[0] + BOUNDS_OFFSET[0]
        self.bounds.top = self._position[1] + BOUNDS_OFFSET[1]
        self._update_attack_bounds()
        self._update_next_position_bounds()

    def _update_next_position_bounds(self) -> None:
        dx, dy = _DIRECTIONS[self.facing]
        self.next_position_bounds.left = self.bounds.left + dx * MOVING_SPEED
        self.next_position_bounds.top = self.bounds.top + dy * MOVING_SPEED

    def _update_attack_bounds(self) -> None:
        if self.is_attacking:
            return
        ahead = self.next_position_bounds
        if self.facing is GoblinFacing.LEFT:
            left, top = ahead.left - 32, ahead.top - 11
        elif self.facing is GoblinFacing.RIGHT:
            left, top = ahead.left + 10, ahead.top - 11
        elif self.facing is GoblinFacing.UP:
            left, top = ahead.left - 11, ahead.top - 32
        else:
            left, top = self.bounds.left - 11, self.bounds.top + 10
        self.attack_bounds.left = left
        self.attack_bounds.top = top