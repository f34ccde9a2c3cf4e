import pytest

from bubbleworld.sprite import Rect
from bubbleworld import tiles
from bubbleworld.tiles import Tile, tile_rect


def test_source_fixed_values():
    assert Tile(100) is Tile.PLAYER
    assert Tile(150) is Tile.BLOCKWITH3
    assert Tile(80) is Tile.LASER
    assert tiles.is_laser(80) is True


def test_interval_aliases():
    assert Tile.STATIC_FIRST is Tile.BLOCKWITH1
    assert Tile.LASER_LAST is Tile.LASER_FRAME2
    assert Tile(Tile.FLOOR_FIRST) is Tile.FLOOR


def test_rect_uses_tile_size():
    n = 16
    assert tile_rect(Tile.BLOCKWITH1, n) == Rect(0, n, n, n)
    assert tile_rect(Tile.CORNER, n) == Rect(n, n, n, n)


def test_rect_scales_with_tile_size():
    small = tile_rect(Tile.FLOOR100, 8)
    large = tile_rect(Tile.FLOOR100, 16)
    assert (large.x, large.y) == (small.x * 2, small.y * 2)


def test_cartel_is_wide():
    rect = tile_rect(Tile.DRUNK_CARTEL, 8)
    assert rect.width == 13 * 8
    assert rect.height == 3 * 8


def test_tiles_without_image():
    assert tile_rect(Tile.AIR, 8) is None
    assert tile_rect(Tile.PLAYER, 8) is None
    assert tile_rect(9999, 8) is None


def test_accepts_plain_ints():
    assert tile_rect(int(Tile.LOCK_RED), 8) == tile_rect(Tile.LOCK_RED, 8)
    assert tiles.is_static(1) is True


@pytest.mark.parametrize("tile", [Tile.BLOCKWITH1, Tile.BLOCKWITHOUT1, Tile.BLOCKWITH30, Tile.BLOCK100])
def test_static(tile):
    assert tiles.is_static(tile)
    assert not tiles.is_solid(tile)


@pytest.mark.parametrize("tile", [Tile.PLATFORMBASIC, Tile.CORNER, Tile.PLAT100, Tile.PLATFORMDEDOS])
def test_solid(tile):
    assert tiles.is_solid(tile)
    assert not tiles.is_static(tile)


def test_laser_range():
    assert all(tiles.is_laser(t) for t in (Tile.LASER, Tile.LASER_FRAME0, Tile.LASER_FRAME2))
    assert not tiles.is_laser(Tile.LASER_L)


def test_lock():
    assert tiles.is_lock(Tile.LOCK_RED)
    assert not tiles.is_lock(Tile.LOCK_YELLOW)


def test_half_cubes():
    assert tiles.is_half_cube_right(Tile.PLATFORMBEGINNING)
    assert tiles.is_half_cube_right(Tile.NOYESNONO100)
    assert tiles.is_half_cube_right_alt(Tile.FLOOR30L)
    assert tiles.is_half_cube_left(Tile.PLATFORMEND)
    assert tiles.is_half_cube_left_alt(Tile.NONONOYES100)
    assert not tiles.is_half_cube_left(Tile.PLATFORMBEGINNING)


def test_half_walls():
    assert tiles.is_half_wall_left(Tile.HALWALLLEFTLVL2)
    assert tiles.is_half_wall_right(Tile.WALLWSHADETOP30)
    assert not tiles.is_half_wall_right(Tile.HALWALLLEFTLVL2)


def test_air():
    assert tiles.is_air(Tile.AIR)
    assert not tiles.is_air(Tile.EMPTY)


def test_floor_implies_floor_or_ceiling():
    for tile in Tile:
        if tiles.is_floor(tile):
            assert tiles.is_floor_or_ceiling(tile)


def test_floor_or_ceiling_includes_platforms():
    assert tiles.is_floor_or_ceiling(Tile.PLATFORMBASIC)
    assert not tiles.is_floor(Tile.PLATFORMBASIC)
    assert tiles.is_floor(Tile.CORNERABAJOIZQ)


def test_ladder_top():
    assert tiles.is_ladder_top(Tile.LADDER_TOP_L)
    assert tiles.is_ladder_top(Tile.LADDER_TOP_R)
    assert not tiles.is_ladder_top(Tile.LADDER_L)