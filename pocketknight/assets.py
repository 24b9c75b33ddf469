"""Textures, animations, map tiles and subtitles used by the game."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

import pygame

from pocketknight.animation import Animation, MapTile, MapTileAnimated
from pocketknight.tiles import TILE_GROUPS, build_tile_maps

logger = logging.getLogger(__name__)

TEXTURE_DIR = "TinySwords"
FONT_FILE = Path("Fonts") / "alagard.ttf"

TEXTURE_FILES = {
    "bannerTexture": "Banner.png",
    "knightTexture": "Knight.png",
    "knightTextureFlipped": "KnightFlipped.png",
    "goblinTexture": "Goblin.png",
    "goblinTextureFlipped": "GoblinFlipped.png",
    "mapTileGrassSandTexture": "MapTileGrassSand.png",
    "mapTileWallTexture": "MapTileWall.png",
    "mapTileBridgeTexture": "MapTileBridge.png",
    "mapTileShadowTexture": "Shadow.png",
    "tileFoamTexture": "Foam.png",
    "sheepTexture": "Sheep.png",
    "meatTexture": "Meat.png",
    "tntBlueTexture": "TntBlue.png",
    "tntRedTexture": "TntRed.png",
    "explosionTexture": "Explosion.png",
    "mushroomTexture": "Mushroom.png",
}

# name: (texture, sheet width, sheet height, frames per row, rows, row, frames)
ANIMATIONS = {
    "foam": ("tileFoamTexture", 1536, 192, 8, 1, 1, 8),
    "knightStanding": ("knightTexture", 1152, 1536, 6, 8, 1, 6),
    "knightRunningRight": ("knightTexture", 1152, 1536, 6, 8, 2, 6),
    "knightRunningLeft": ("knightTextureFlipped", 1152, 1536, 6, 8, 2, 6),
    "knightAttackRight": ("knightTexture", 1152, 1536, 6, 8, 4, 6),
    "knightAttackLeft": ("knightTextureFlipped", 1152, 1536, 6, 8, 4, 6),
    "knightAttackUp": ("knightTexture", 1152, 1536, 6, 8, 7, 6),
    "knightAttackDown": ("knightTexture", 1152, 1536, 6, 8, 5, 6),
    "goblinStanding": ("goblinTexture", 1152, 960, 6, 5, 1, 6),
    "goblinRunningRight": ("goblinTexture", 1152, 960, 6, 5, 2, 6),
    "goblinRunningLeft": ("goblinTextureFlipped", 1152, 960, 6, 5, 2, 6),
    "goblinAttackRight": ("goblinTexture", 1152, 960, 6, 5, 3, 6),
    "goblinAttackLeft": ("goblinTextureFlipped", 1152, 960, 6, 5, 3, 6),
    "goblinAttackUp": ("goblinTexture", 1152, 960, 6, 5, 5, 6),
    "goblinAttackDown": ("goblinTexture", 1152, 960, 6, 5, 4, 6),
    "sheepStanding": ("sheepTexture", 1024, 256, 8, 2, 1, 8),
    "sheepBouncing": ("sheepTexture", 1024, 256, 8, 2, 2, 6),
    "meatSpawning": ("meatTexture", 896, 128, 7, 1, 1, 7),
    "tntBlueOut": ("tntBlueTexture", 768, 768, 6, 6, 2, 6),
    "tntBlueRunning": ("tntBlueTexture", 768, 768, 6, 6, 5, 3),
    "tntBlueFire": ("tntBlueTexture", 768, 768, 6, 6, 6, 3),
    "tntRedOut": ("tntRedTexture", 768, 768, 6, 6, 2, 6),
    "tntRedRunning": ("tntRedTexture", 768, 768, 6, 6, 5, 3),
    "tntRedFire": ("tntRedTexture", 768, 768, 6, 6, 6, 3),
    "explosion": ("explosionTexture", 1728, 192, 9, 1, 1, 9),
}

MAP_TILE_SIZE = 64
FOAM_TILE = "MapTileFoam"

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

# name: (text, character size, position)
_SUBTITLES = {
    "easy": ("1 EASY", 60, (320, 120)),
    "medium": ("2 MEDIUM", 60, (280, 260)),
    "hard": ("3 HARD", 60, (320, 400)),
    "wave1": ("Wave 1", 100, (256, 128)),
    "wave2": ("Wave 2", 100, (256, 128)),
    "wave3": ("Wave 3", 100, (256, 128)),
    "attackBySpace": ("Attack goblins by hitting SPACE", 50, (48, 256)),
    "plantTnt": ("Plant TNTs by hitting T", 50, (148, 256)),
    "bewareOfTnt": ("Beware of TNTs!", 50, (248, 256)),
    "gameOver": ("Game over", 100, (176, 128)),
    "victory!": ("Victory!", 100, (224, 128)),
}
SUBTITLE_OUTLINE = 5.0


@lru_cache(maxsize=None)
def _font(path: str | None, size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, size)


@dataclass
class Subtitle:
    """A line of outlined text drawn at a fixed position."""

    text: str
    size: int
    position: tuple[float, float]
    fill_color: tuple[int, int, int] = WHITE
    outline_color: tuple[int, int, int] = BLACK
    outline_thickness: float = SUBTITLE_OUTLINE
    font_path: str | None = None

    def render(self, target: pygame.Surface) -> None:
        """Draw the text, outline first, onto the target surface."""
        font = _font(self.font_path, self.size)
        x, y = round(self.position[0]), round(self.position[1])
        thickness = round(self.outline_thickness)
        if thickness > 0:
            outline = font.render(self.text, True, self.outline_color)
            for dx in range(-thickness, thickness + 1):
                for dy in range(-thickness, thickness + 1):
                    if dx * dx + dy * dy <= thickness * thickness:
                        target.blit(outline, (x + dx, y + dy))
        target.blit(font.render(self.text, True, self.fill_color), (x, y))


def _copy_tile(tile: MapTile) -> MapTile:
    if isinstance(tile, MapTileAnimated):
        return MapTileAnimated(tile.animation)
    fresh = MapTile(tile.tile.texture, tile.tile.texture_rect)
    fresh.position = tile.position
    fresh.scale = tile.scale
    return fresh


class Assets:
    """Loads every texture and the font, and builds what is made from them.

    Files are looked up below ``root``: textures in ``TinySwords/`` and the
    font in ``Fonts/``. A file that cannot be loaded is reported and left
    empty, so the game still runs without it.
    """

    def __init__(self, root: str | Path = "..") -> None:
        self.root = Path(root)
        self.textures: dict[str, pygame.Surface | None] = {}
        self.font_path: str | None = None
        self._animations: dict[str, Animation] = {}
        self._tiles: dict[str, dict[str, MapTile]] = {}
        self._subtitles: dict[str, Subtitle] = {}
        self.load_textures()
        self.load_font()

    def load_textures(self) -> None:
        """Load all textures, then rebuild the animations and map tiles."""
        textures: dict[str, pygame.Surface | None] = {}
        for name, filename in TEXTURE_FILES.items():
            path = self.root / TEXTURE_DIR / filename
            try:
                textures[name] = pygame.image.load(str(path))
            except (OSError, pygame.error):
                logger.warning("Could not load from file: %s/%s", TEXTURE_DIR, filename)
                textures[name] = None
        self.textures = textures
        self._animations = {
            name: Animation(textures[texture], *geometry)
            for name, (texture, *geometry) in ANIMATIONS.items()
        }
        self._tiles = build_tile_maps(textures, MAP_TILE_SIZE)
        self._tiles["foam"] = {FOAM_TILE: MapTileAnimated(self._animations["foam"])}

    def load_font(self) -> None:
        """Locate the subtitle font and rebuild the subtitles with it."""
        path = self.root / FONT_FILE
        if path.is_file():
            self.font_path = str(path)
        else:
            logger.warning("Font could not be loaded from file: %s", path)
            self.font_path = None
        self._subtitles = {
            name: Subtitle(text, size, position, font_path=self.font_path)
            for name, (text, size, position) in _SUBTITLES.items()
        }

    def texture(self, name: str) -> pygame.Surface | None:
        """The named texture, or None if its file could not be loaded."""
        return self.textures[name]

    def animation(self, name: str) -> Animation:
        """The shared animation of that name."""
        return self._animations[name]

    def tiles(self, group: str) -> dict[str, MapTile]:
        """Fresh copies of the map tiles of a group, keyed by tile name."""
        try:
            tiles = self._tiles[group]
        except KeyError:
            groups = ", ".join((*TILE_GROUPS, "shadow", "foam"))
            raise ValueError(
                f"unknown tile group {group!r}; expected one of {groups}"
            ) from None
        return {name: _copy_tile(tile) for name, tile in tiles.items()}

    def subtitle(self, name: str) -> Subtitle:
        """The subtitle of that name."""
        return self._subtitles[name]