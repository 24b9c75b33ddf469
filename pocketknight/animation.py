"""Sprites, frame animations and map tiles."""

from __future__ import annotations

import copy

import pygame

from pocketknight.engine import Clock

FRAME_DURATION = 0.1


class Sprite:
    """A positioned, scaled view onto a region of a texture."""

    def __init__(
        self,
        texture: pygame.Surface | None = None,
        texture_rect: pygame.Rect | None = None,
        position: tuple[float, float] = (0.0, 0.0),
        scale: tuple[float, float] = (1.0, 1.0),
    ) -> None:
        self.texture = texture
        self.texture_rect = texture_rect
        self.position = (float(position[0]), float(position[1]))
        self.scale = (float(scale[0]), float(scale[1]))

    def move(self, offset: tuple[float, float]) -> None:
        """Shift the sprite by the given offset."""
        self.position = (self.position[0] + offset[0], self.position[1] + offset[1])

    def draw(self, target: pygame.Surface) -> None:
        """Blit the sprite onto the target surface."""
        if self.texture is None:
            return
        area = self.texture.get_rect()
        if self.texture_rect is not None:
            area = pygame.Rect(self.texture_rect).clip(area)
        if area.width == 0 or area.height == 0:
            return
        image = self.texture.subsurface(area)
        sx, sy = self.scale
        if (sx, sy) != (1.0, 1.0):
            size = (round(area.width * abs(sx)), round(area.height * abs(sy)))
            if size[0] == 0 or size[1] == 0:
                return
            image = pygame.transform.scale(image, size)
            if sx < 0 or sy < 0:
                image = pygame.transform.flip(image, sx < 0, sy < 0)
        target.blit(image, (round(self.position[0]), round(self.position[1])))


class Animation:
    """Cycles through the frames of one row of a sprite sheet."""

    def __init__(
        self,
        texture: pygame.Surface | None,
        width: int,
        height: int,
        frames_in_texture: int,
        rows_in_texture: int,
        row: int,
        frame_count: int,
    ) -> None:
        self.texture = texture
        frame_width = width // frames_in_texture
        frame_height = height // rows_in_texture
        self.frames = [
            pygame.Rect(i * frame_width, (row - 1) * frame_height, frame_width, frame_height)
            for i in range(frame_count)
        ]
        self.index = 0

    def _advance(self) -> None:
        self.index = self.index + 1 if self.index < len(self.frames) - 1 else 0

    def apply_texture(self, sprite: Sprite) -> None:
        """Show the current frame on the sprite."""
        sprite.texture = self.texture
        sprite.texture_rect = pygame.Rect(self.frames[self.index])

    def update_frame(self, clock: Clock) -> None:
        """Move to the next frame once a frame's duration has passed on the clock."""
        if clock.elapsed() >= FRAME_DURATION:
            self._advance()
            clock.restart()


class MapTile:
    """A static tile of the map."""

    def __init__(
        self,
        texture: pygame.Surface | None = None,
        rect: pygame.Rect | None = None,
    ) -> None:
        self.tile = Sprite(texture, pygame.Rect(rect) if rect is not None else None)

    @property
    def position(self) -> tuple[float, float]:
        return self.tile.position

    @position.setter
    def position(self, value: tuple[float, float]) -> None:
        self.tile.position = (float(value[0]), float(value[1]))

    @property
    def scale(self) -> tuple[float, float]:
        return self.tile.scale

    @scale.setter
    def scale(self, value: tuple[float, float]) -> None:
        self.tile.scale = (float(value[0]), float(value[1]))

    def render(self, target: pygame.Surface) -> None:
        self.tile.draw(target)


class MapTileAnimated(MapTile):
    """A map tile driven by its own copy of an animation."""

    def __init__(self, animation: Animation, clock: Clock | None = None) -> None:
        super().__init__()
        self.animation = copy.copy(animation)
        self.animation_clock = clock if clock is not None else Clock()

    def update_textures(self) -> None:
        self.animation.update_frame(self.animation_clock)
        self.animation.apply_texture(self.tile)