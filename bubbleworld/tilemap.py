"""A grid of tiles with collision queries against axis-aligned boxes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from bubbleworld.sprite import Rect, Sprite
from bubbleworld.tiles import (
    Tile,
    is_air,
    is_floor,
    is_floor_or_ceiling,
    is_half_cube_left,
    is_half_cube_left_alt,
    is_half_cube_right,
    is_half_cube_right_alt,
    is_half_wall_left,
    is_half_wall_right,
    is_ladder_top,
    is_laser,
    is_lock,
    is_solid,
    is_static,
    tile_rect,
)


def _div(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    q = abs(a) // b
    return q if a >= 0 else -q


@dataclass(frozen=True)
class Point:
    """A pixel position."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)


@dataclass(frozen=True)
class AABB:
    """An axis-aligned box: top-left position and size in pixels."""

    pos: Point = Point()
    width: int = 0
    height: int = 0


class TileMap:
    """A rectangular level of tiles and its collision rules."""

    def __init__(self, tile_size: int = 16, anim_delay: int = 4) -> None:
        if tile_size <= 0:
            raise ValueError("tile size must be positive")
        self.tile_size = tile_size
        self.width = 0
        self.height = 0
        self.tiles: list[int] = []
        self.laser = Sprite(None)
        self.laser.set_number_animations(1)
        self.laser.set_animation_delay(0, anim_delay)
        for frame_tile in (Tile.LASER_FRAME0, Tile.LASER_FRAME1, Tile.LASER_FRAME2):
            self.laser.add_key_frame(0, tile_rect(frame_tile, tile_size))
        self.laser.set_animation(0)

    @property
    def size(self) -> int:
        return self.width * self.height

    def load(self, data: Iterable[int], width: int, height: int) -> None:
        """Replace the map with ``width`` x ``height`` tiles in row order."""
        tiles = [int(value) for value in data]
        if width < 0 or height < 0 or len(tiles) != width * height:
            raise ValueError(
                f"expected {width}x{height} tiles, got {len(tiles)}"
            )
        self.width = width
        self.height = height
        self.tiles = tiles

    def tile_at(self, x: int, y: int) -> int:
        """The tile at column ``x``, row ``y``; AIR when the index is outside the map."""
        index = x + y * self.width
        if index < 0 or index >= self.size:
            return int(Tile.AIR)
        return self.tiles[index]

    def update(self) -> None:
        """Advance the laser animation by one tick."""
        self.laser.update()

    # Column and row scans

    def _column_hits(self, p: Point, distance: int, test: Callable[[int], bool]) -> bool:
        ts = self.tile_size
        x = _div(p.x, ts)
        y0 = _div(p.y, ts)
        y1 = _div(p.y + distance - 1, ts)
        return any(test(self.tile_at(x, y)) for y in range(y0, y1 + 1))

    def _row_hits(self, p: Point, distance: int, test: Callable[[int], bool]) -> bool:
        ts = self.tile_size
        y = _div(p.y, ts)
        x0 = _div(p.x, ts)
        x1 = _div(p.x + distance - 1, ts)
        return any(test(self.tile_at(x, y)) for x in range(x0, x1 + 1))

    @staticmethod
    def _blocks_sideways(tile: int) -> bool:
        return is_lock(tile) or is_static(tile)

    @staticmethod
    def _blocks_downward(tile: int) -> bool:
        return is_solid(tile) or is_ladder_top(tile) or is_lock(tile)

    @staticmethod
    def _air_or_surface(tile: int) -> bool:
        return is_air(tile) or is_floor_or_ceiling(tile)

    # Collision queries

    def test_collision_wall_left(self, box: AABB) -> bool:
        return self._column_hits(box.pos, box.height, self._blocks_sideways)

    def test_collision_wall_right(self, box: AABB) -> bool:
        return self._column_hits(
            box.pos + Point(box.width - 1, 0), box.height, self._blocks_sideways
        )

    def test_collision_half_wall_left(self, box: AABB) -> bool:
        return self._column_hits(
            box.pos + Point(box.width - 1, 0), box.height, is_half_wall_left
        )

    def test_collision_half_wall_right(self, box: AABB) -> bool:
        return self._column_hits(
            box.pos + Point(box.width - 8, 0), box.height, is_half_wall_right
        )

    def test_collision_air(self, box: AABB) -> bool:
        return self._column_hits(
            box.pos + Point(box.width - 8, 0), box.height, self._air_or_surface
        )

    def test_collision_ground(self, box: AABB, py: int) -> int | None:
        """Check for ground at height ``py`` under ``box``.

        Returns the corrected y position that rests on the ground, or None
        when there is no ground.
        """
        ts = self.tile_size
        x = box.pos.x
        below = box.pos.y + 1
        top = _div(py, ts) * ts
        half = top + ts // 2
        checks = (
            (Point(x, py), self._blocks_downward, top),
            (Point(x, below), is_floor, half),
            (Point(x - 8, py), is_half_cube_right, top),
            (Point(x + 8, py), is_half_cube_left, top),
            (Point(x + 7, below), is_half_cube_right_alt, half),
            (Point(x - 7, below), is_half_cube_left_alt, half),
        )
        for point, test, result in checks:
            if self._row_hits(point, box.width, test):
                return result
        return None

    def test_collision_head(self, box: AABB) -> bool:
        """Whether a red lock tile is directly above the box."""
        return self._row_hits(Point(box.pos.x, box.pos.y - 1), box.width, is_lock)

    def test_collision_laser(self, box: AABB) -> bool:
        """Whether a laser tile lies 16 pixels below the top of the box."""
        return self._row_hits(Point(box.pos.x, box.pos.y + 16), box.width, is_laser)

    def test_falling(self, box: AABB) -> bool:
        """Whether there is no ground tile just below the box."""
        return not self._row_hits(
            box.pos + Point(0, box.height), box.width, self._blocks_downward
        )

    def get_swept_area_x(self, hitbox: AABB) -> AABB:
        """The horizontal span reachable from ``hitbox`` before a solid tile."""
        ts = self.tile_size
        column = _div(hitbox.pos.x, ts)
        y0 = _div(hitbox.pos.y, ts)
        y1 = _div(hitbox.pos.y + hitbox.height - 1, ts)

        def blocked(x: int) -> bool:
            return any(is_solid(self.tile_at(x, y)) for y in range(y0, y1 + 1))

        left = column - 1
        while left >= 0 and not blocked(left):
            left -= 1
        start = (left + 1) * ts

        right = column + 1
        while right < self.width and not blocked(right):
            right += 1

        return AABB(Point(start, hitbox.pos.y), right * ts - start, hitbox.height)

    def render(self) -> list[tuple[Point, Rect]]:
        """Screen positions and sheet rectangles of every visible tile, row by row."""
        ts = self.tile_size
        draws: list[tuple[Point, Rect]] = []
        for index, tile in enumerate(self.tiles):
            if tile == Tile.AIR:
                continue
            row, column = divmod(index, self.width)
            rect = self.laser.frame() if tile == Tile.LASER else tile_rect(tile, ts)
            if rect is not None:
                draws.append((Point(column * ts, row * ts), rect))
        return draws

    def release(self) -> None:
        """Drop the laser animation."""
        self.laser.release()