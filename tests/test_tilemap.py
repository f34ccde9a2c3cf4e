import pytest

from bubbleworld.tiles import Tile, tile_rect
from bubbleworld.tilemap import AABB, Point, TileMap

TS = 16


def make_map(rows, anim_delay=4):
    tm = TileMap(TS, anim_delay)
    tm.load([t for row in rows for t in row], len(rows[0]), len(rows))
    return tm


A = Tile.AIR
W = Tile.BLOCKWITH1
P = Tile.PLATFORMBASIC


def test_point_addition():
    assert Point(3, 4) + Point(1, -2) == Point(4, 2)


def test_load_rejects_wrong_size():
    tm = TileMap(TS)
    with pytest.raises(ValueError):
        tm.load([0, 0, 0], 2, 2)


def test_tile_size_must_be_positive():
    with pytest.raises(ValueError):
        TileMap(0)


def test_tile_at_in_and_out_of_bounds():
    tm = make_map([[W, A], [A, P]])
    assert tm.tile_at(0, 0) == Tile.BLOCKWITH1
    assert tm.tile_at(1, 1) == Tile.PLATFORMBASIC
    assert tm.tile_at(0, 5) == Tile.AIR
    assert tm.tile_at(-1, 0) == Tile.AIR


def test_wall_left_and_right():
    tm = make_map([[W, A, A, W], [W, A, A, W]])
    near_left = AABB(Point(0, 0), TS, TS)
    middle = AABB(Point(TS, 0), TS, TS)
    near_right = AABB(Point(2 * TS + 1, 0), TS, TS)
    assert tm.test_collision_wall_left(near_left)
    assert not tm.test_collision_wall_left(middle)
    assert not tm.test_collision_wall_right(middle)
    assert tm.test_collision_wall_right(near_right)


def test_lock_blocks_sideways():
    tm = make_map([[Tile.LOCK_RED, A, A]])
    assert tm.test_collision_wall_left(AABB(Point(0, 0), TS, TS))


def test_ground_on_platform_snaps_to_tile_top():
    tm = make_map([[A, A, A], [A, A, A], [P, P, P]])
    box = AABB(Point(TS, TS), TS, TS)
    result = tm.test_collision_ground(box, 2 * TS + 3)
    assert result == 2 * TS


def test_no_ground_in_open_air():
    tm = make_map([[A, A, A], [A, A, A], [A, A, A]])
    box = AABB(Point(TS, 0), TS, TS)
    assert tm.test_collision_ground(box, TS + 2) is None


def test_ground_on_floor_uses_half_tile():
    tm = make_map([[A, A, A], [Tile.FLOOR] * 3])
    box = AABB(Point(TS, TS - 1), TS, TS)
    result = tm.test_collision_ground(box, 5)
    assert result == TS // 2


def test_falling():
    tm = make_map([[A, A], [A, A], [P, P]])
    standing = AABB(Point(0, TS), TS, TS)
    floating = AABB(Point(0, 0), TS, TS)
    assert not tm.test_falling(standing)
    assert tm.test_falling(floating)


def test_head_hits_lock():
    tm = make_map([[Tile.LOCK_RED, A], [A, A]])
    assert tm.test_collision_head(AABB(Point(0, TS), TS, TS))
    assert not tm.test_collision_head(AABB(Point(TS, TS), TS, TS))


def test_laser_below():
    tm = make_map([[A, A], [Tile.LASER, A]])
    assert tm.test_collision_laser(AABB(Point(0, 0), TS, TS))
    assert not tm.test_collision_laser(AABB(Point(TS, 0), TS, TS))


def test_half_walls():
    tm = make_map([[A, Tile.HALWALLLEFTLVL2, Tile.HALFWALLRIGHTLVL2]])
    assert tm.test_collision_half_wall_left(AABB(Point(1, 0), TS, TS))
    assert not tm.test_collision_half_wall_left(AABB(Point(0, 0), 1, TS))
    assert tm.test_collision_half_wall_right(AABB(Point(TS + 8, 0), TS, TS))


def test_collision_air():
    tm = make_map([[A, W]])
    assert tm.test_collision_air(AABB(Point(0, 0), TS, TS))
    assert not tm.test_collision_air(AABB(Point(TS, 0), 8, TS))


def test_swept_area_between_solids():
    row = [P, A, A, A, A, A, P, A]
    tm = make_map([row])
    hitbox = AABB(Point(3 * TS, 0), TS, TS)
    area = tm.get_swept_area_x(hitbox)
    assert area.pos.x == 1 * TS
    assert area.pos.x + area.width == 6 * TS
    assert area.pos.y == hitbox.pos.y
    assert area.height == hitbox.height
    assert area.pos.x <= hitbox.pos.x
    assert hitbox.pos.x + hitbox.width <= area.pos.x + area.width


def test_swept_area_open_row_spans_map():
    tm = make_map([[A] * 5])
    area = tm.get_swept_area_x(AABB(Point(2 * TS, 0), TS, TS))
    assert area.pos.x == 0
    assert area.width == 5 * TS


def test_render_lists_visible_tiles():
    tm = make_map([[W, A], [A, Tile.LASER]])
    draws = tm.render()
    assert draws[0] == (Point(0, 0), tile_rect(Tile.BLOCKWITH1, TS))
    assert draws[1] == (Point(TS, TS), tile_rect(Tile.LASER_FRAME0, TS))
    assert len(draws) == 2


def test_update_animates_laser():
    tm = make_map([[Tile.LASER]], anim_delay=2)
    tm.update()
    tm.update()
    assert tm.render()[0][1] == tile_rect(Tile.LASER_FRAME1, TS)


def test_release_clears_laser_frames():
    tm = make_map([[Tile.LASER, W]])
    tm.release()
    draws = tm.render()
    assert draws == [(Point(TS, 0), tile_rect(Tile.BLOCKWITH1, TS))]