"""Layout of the map tiles inside their sprite sheets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

import pygame

from pocketknight.animation import MapTile

GRASS_SAND_TEXTURE = "mapTileGrassSandTexture"
WALL_TEXTURE = "mapTileWallTexture"
BRIDGE_TEXTURE = "mapTileBridgeTexture"
SHADOW_TEXTURE = "mapTileShadowTexture"

SHADOW_TILE = "MapTileShadow"
SHADOW_SIZE = 192

TILE_GROUPS = ("grass", "sand", "wall", "stairs", "bridge")


@dataclass(frozen=True)
class TileSpec:
    """Where one tile sits in a sprite sheet, in whole tile cells."""

    texture: str
    column: int
    row: int

    def rect(self, tile_size: int) -> pygame.Rect:
        """Pixel rectangle of the tile for cells of the given size."""
        return pygame.Rect(
            self.column * tile_size, self.row * tile_size, tile_size, tile_size
        )


# Grass and sand share one sheet; sand sits five columns to the right.
_GROUND_CELLS = (
    ("CornerLeftUp", 0, 0),
    ("BorderUp", 1, 0),
    ("CornerRightUp", 2, 0),
    ("EndUp", 3, 0),
    ("Wall", 4, 0),
    ("BorderLeft", 0, 1),
    ("Middle", 1, 1),
    ("BorderRight", 2, 1),
    ("BordersLeftRight", 3, 1),
    ("CornerLeftDown", 0, 2),
    ("BorderDown", 1, 2),
    ("CornerRightDown", 2, 2),
    ("EndDown", 3, 2),
    ("EndLeft", 0, 3),
    ("BordersUpDown", 1, 3),
    ("EndRight", 2, 3),
    ("", 3, 3),
)

_WALL_CELLS = (
    ("CornerLeftUp", 0, 0),
    ("BorderUp", 1, 0),
    ("CornerRightUp", 2, 0),
    ("EndUp", 3, 0),
    ("BorderLeft", 0, 1),
    ("Middle", 1, 1),
    ("BorderRight", 2, 1),
    ("BordersLeftRight", 3, 1),
    ("CornerLeftDown", 0, 2),
    ("BorderDown", 1, 2),
    ("CornerRightDown", 2, 2),
    ("EndDown", 3, 2),
    ("EndLeft", 0, 4),
    ("BordersUpDown", 1, 4),
    ("EndRight", 2, 4),
    ("", 3, 4),
    ("WallLeft", 0, 3),
    ("WallMiddle", 1, 3),
    ("WallRight", 2, 3),
    ("Wall", 3, 3),
)

_STAIRS_CELLS = (
    ("Left", 0, 7),
    ("Middle", 1, 7),
    ("Right", 2, 7),
    ("", 3, 7),
)

_BRIDGE_CELLS = (
    ("EndLeft", 0, 0),
    ("Horizontal", 1, 0),
    ("EndRight", 2, 0),
    ("EndUp", 0, 1),
    ("Crushed1", 1, 1),
    ("Crushed2", 2, 1),
    ("Vertical", 0, 2),
    ("Crushed3", 1, 2),
    ("EndDown", 0, 3),
    ("Shadow", 2, 3),
)

_LAYOUTS = {
    "grass": ("MapTileGrass", GRASS_SAND_TEXTURE, _GROUND_CELLS, 0),
    "sand": ("MapTileSand", GRASS_SAND_TEXTURE, _GROUND_CELLS, 5),
    "wall": ("MapTileWall", WALL_TEXTURE, _WALL_CELLS, 0),
    "stairs": ("MapTileStairs", WALL_TEXTURE, _STAIRS_CELLS, 0),
    "bridge": ("MapTileBridge", BRIDGE_TEXTURE, _BRIDGE_CELLS, 0),
}


def tile_layout(group: str) -> dict[str, TileSpec]:
    """Return the tiles of a group, keyed by tile name."""
    try:
        prefix, texture, cells, column_offset = _LAYOUTS[group]
    except KeyError:
        raise ValueError(
            f"unknown tile group {group!r}; expected one of {', '.join(TILE_GROUPS)}"
        ) from None
    return {
        prefix + suffix: TileSpec(texture, column + column_offset, row)
        for suffix, column, row in cells
    }


def build_tile_maps(
    textures: Mapping[str, pygame.Surface | None], tile_size: int
) -> dict[str, dict[str, MapTile]]:
    """Create the map tiles of every group, plus the shadow tile.

    Textures missing from the mapping leave their tiles without a texture.
    """
    if tile_size <= 0:
        raise ValueError(f"tile size must be positive, got {tile_size}")
    maps = {
        group: {
            name: MapTile(textures.get(spec.texture), spec.rect(tile_size))
            for name, spec in tile_layout(group).items()
        }
        for group in TILE_GROUPS
    }
    maps["shadow"] = {
        SHADOW_TILE: MapTile(
            textures.get(SHADOW_TEXTURE), pygame.Rect(0, 0, SHADOW_SIZE, SHADOW_SIZE)
        )
    }
    return maps