import pygame
import pytest

from pocketknight.tiles import (
    BRIDGE_TEXTURE,
    GRASS_SAND_TEXTURE,
    SHADOW_TEXTURE,
    TILE_GROUPS,
    WALL_TEXTURE,
    TileSpec,
    build_tile_maps,
    tile_layout,
)


@pytest.fixture
def textures():
    return {
        GRASS_SAND_TEXTURE: pygame.Surface((640, 256)),
        WALL_TEXTURE: pygame.Surface((256, 512)),
        BRIDGE_TEXTURE: pygame.Surface((192, 256)),
        SHADOW_TEXTURE: pygame.Surface((192, 192)),
    }


def test_grass_corner_cell():
    assert tile_layout("grass")["MapTileGrassCornerLeftUp"] == TileSpec(GRASS_SAND_TEXTURE, 0, 0)


def test_wall_end_left_is_on_row_four():
    assert tile_layout("wall")["MapTileWallEndLeft"] == TileSpec(WALL_TEXTURE, 0, 4)


def test_stairs_use_wall_sheet_row_seven():
    layout = tile_layout("stairs")
    assert layout["MapTileStairs"] == TileSpec(WALL_TEXTURE, 3, 7)
    assert all(spec.texture == WALL_TEXTURE for spec in layout.values())
    assert {spec.row for spec in layout.values()} == {7}


def test_sand_mirrors_grass_shifted_five_columns():
    grass = tile_layout("grass")
    sand = tile_layout("sand")
    assert len(grass) == len(sand)
    for name, spec in grass.items():
        twin = sand[name.replace("MapTileGrass", "MapTileSand")]
        assert (twin.column, twin.row) == (spec.column + 5, spec.row)
        assert twin.texture == spec.texture == GRASS_SAND_TEXTURE


@pytest.mark.parametrize("group", TILE_GROUPS)
def test_cells_are_unique_within_group(group):
    layout = tile_layout(group)
    cells = [(spec.texture, spec.column, spec.row) for spec in layout.values()]
    assert len(set(cells)) == len(cells)


def test_group_prefixes():
    for group, prefix in [
        ("grass", "MapTileGrass"),
        ("sand", "MapTileSand"),
        ("wall", "MapTileWall"),
        ("stairs", "MapTileStairs"),
        ("bridge", "MapTileBridge"),
    ]:
        assert all(name.startswith(prefix) for name in tile_layout(group))


def test_unknown_group_raises():
    with pytest.raises(ValueError):
        tile_layout("lava")


def test_spec_rect_scales_with_tile_size():
    spec = TileSpec(WALL_TEXTURE, 2, 3)
    assert spec.rect(1) == pygame.Rect(2, 3, 1, 1)
    assert spec.rect(64) == pygame.Rect(128, 192, 64, 64)


def test_build_tile_maps_groups_and_rects(textures):
    maps = build_tile_maps(textures, 64)
    assert set(maps) == set(TILE_GROUPS) | {"shadow"}
    for group in TILE_GROUPS:
        layout = tile_layout(group)
        assert set(maps[group]) == set(layout)
        for name, tile in maps[group].items():
            assert tile.tile.texture_rect == layout[name].rect(64)
            assert tile.tile.texture is textures[layout[name].texture]


def test_shadow_tile(textures):
    shadow = build_tile_maps(textures, 64)["shadow"]["MapTileShadow"]
    assert shadow.tile.texture_rect == pygame.Rect(0, 0, 192, 192)
    assert shadow.tile.texture is textures[SHADOW_TEXTURE]


def test_missing_texture_leaves_tile_blank():
    maps = build_tile_maps({}, 64)
    tile = maps["bridge"]["MapTileBridgeHorizontal"]
    assert tile.tile.texture is None
    assert tile.tile.texture_rect == pygame.Rect(64, 0, 64, 64)


def test_tile_rects_lie_inside_their_sheets(textures):
    maps = build_tile_maps(textures, 64)
    for group in TILE_GROUPS:
        for tile in maps[group].values():
            assert tile.tile.texture.get_rect().contains(tile.tile.texture_rect)


@pytest.mark.parametrize("size", [0, -64])
def test_non_positive_tile_size_raises(size):
    with pytest.raises(ValueError):
        build_tile_maps({}, size)