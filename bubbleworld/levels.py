"""The built-in stages: tile layouts and what each one places at start."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from bubbleworld.tilemap import Point
from bubbleworld.tiles import Tile

LEVEL_WIDTH = 16
LEVEL_HEIGHT = 13


class EnemyKind(Enum):
    """The kinds of enemy a stage or the game can spawn."""

    SLIME = "slime"
    DSLIME = "angry slime"
    DRUNK = "drunk"
    DDRUNK = "angry drunk"
    SD = "super drunk"
    BOTTLE = "bottle"


@dataclass(frozen=True)
class EnemySpawn:
    """An enemy to place when the stage starts.

    ``hitbox_kind`` is the kind whose hitbox is used to work out the
    enemy's roaming area.
    """

    kind: EnemyKind
    position: Point
    hitbox_kind: EnemyKind


@dataclass
class LevelPlan:
    """A stage's tiles and the entities it places at start."""

    stage: int
    width: int
    height: int
    tiles: tuple[int, ...]
    enemies_to_clear: int
    player: Point | None = None
    player2: Point | None = None
    enemies: list[EnemySpawn] = field(default_factory=list)
    bubbles: list[Point] = field(default_factory=list)
    objects: list[Point] = field(default_factory=list)
    dots: list[Point] = field(default_factory=list)


def _edge(left: int, second: int, fill: int, right: int) -> tuple[int, ...]:
    return (left, second) + (fill,) * (LEVEL_WIDTH - 3) + (right,)


def _start_row(wall: int, inner: int) -> tuple[int, ...]:
    return (wall, inner, int(Tile.PLAYER)) + (0,) * 10 + (int(Tile.PLAYER2), 0, wall)


_STAGE_1_PLATFORM = (2, 3, 4, 12) + (11,) * 8 + (13, 0, 16, 2)

_STAGE_5_PILLARS = (219, 229, 0, 0, 222, 223, 0, 0, 0, 0, 222, 223, 0, 0, 0, 219)
_STAGE_5_PILLAR_BASE = (219, 229, 0, 0, 230, 231, 0, 0, 0, 0, 230, 231, 0, 0, 0, 219)
_STAGE_5_LEDGES = (219, 229, 0, 224, 232, 0, 0, 225, 226, 0, 0, 0, 224, 232, 0, 219)

_STAGE_4_FLOOR = _edge(196, 202, 203, 196)
_STAGE_4_SHADE = _edge(196, 204, 205, 196)
_STAGE_4_TWO_DRUNKS = (196, 201, 105) + (0,) * 10 + (105, 0, 196)
_STAGE_4_LEDGE = _edge(196, 199, 200, 196)

_LAYOUTS: dict[int, tuple[tuple[int, ...], ...]] = {
    1: (
        _edge(1, 3, 173, 2),
        (2, 5, 0, 0, 0, 0, 0, 0, 103, 0, 0, 0, 0, 0, 0, 2),
        (2, 5, 0, 0, 0, 0, 0, 0, 103, 0, 0, 0, 0, 0, 0, 2),
        (2, 5, 0, 0, 0, 0, 0, 0, 103, 0, 0, 0, 0, 0, 0, 2),
        _edge(2, 5, 0, 2),
        _STAGE_1_PLATFORM,
        _edge(2, 5, 0, 2),
        (2, 43, 21, 17) + (42,) * 8 + (18, 0, 42, 2),
        (2, 9, 6, 10) + (19,) * 8 + (20, 0, 7, 2),
        _edge(2, 5, 0, 2),
        _STAGE_1_PLATFORM,
        _start_row(2, 5),
        _edge(2, 43, 42, 2),
    ),
    2: (
        (150, 158, 171, 171, 153, 0, 172, 171, 171, 153, 0, 172, 171, 171, 171, 151),
        (151, 162, 0, 0, 0, 103, 0, 0, 0, 0, 103, 0, 0, 0, 0, 151),
        (151, 162, 156, 155, 155, 155, 157, 0, 0, 156, 155, 155, 155, 157, 0, 151),
        (151, 162, 160, 164, 166, 166, 163, 0, 0, 165, 166, 166, 166, 161, 0, 151),
        (151, 162, 160, 162, 0, 0, 0, 0, 0, 0, 0, 0, 0, 161, 0, 151),
        (151, 162, 160, 158, 152, 152, 152, 167, 0, 168, 152, 152, 152, 161, 0, 151),
        (151, 162, 160, 162, 0, 0, 102, 0, 0, 0, 0, 0, 0, 161, 0, 151),
        (151, 162, 160, 159, 155, 155, 155, 157, 156, 155, 155, 155, 155, 161, 0, 151),
        (151, 162, 165, 166, 166, 166, 166, 163, 165, 166, 166, 166, 166, 163, 0, 151),
        (151, 162, 0, 0, 103, 0, 0, 0, 0, 0, 0, 103, 0, 0, 0, 151),
        (151, 158, 152, 170, 154, 152, 169, 0, 0, 0, 168, 170, 154, 152, 152, 151),
        _start_row(151, 162),
        (151, 159, 155, 155, 157, 0, 156, 155, 155, 157, 0, 156, 155, 155, 155, 151),
    ),
    3: (
        (174, 207, 193, 175, 192, 215, 207, 215, 215, 192, 193, 207, 215, 217, 192, 175),
        (175, 208, 210, 214, 185, 212, 208, 210, 210, 185, 216, 208, 209, 211, 185, 175),
        (175, 208, 209, 211, 185, 208, 208, 209, 210, 185, 208, 208, 210, 214, 192, 175),
        _edge(175, 192, 193, 175),
        (175, 185, 105, 0, 0, 107, 107, 0, 107, 105, 0, 105, 0, 0, 105, 175),
        _edge(175, 185, 0, 175),
        _edge(175, 185, 0, 175),
        _edge(175, 185, 0, 175),
        _edge(175, 185, 0, 175),
        _edge(175, 185, 0, 175),
        _edge(175, 185, 0, 175),
        _start_row(175, 185),
        _edge(175, 176, 177, 175),
    ),
    4: (
        _edge(197, 199, 206, 196),
        (196, 201, 0, 0, 0, 0, 0, 0, 105, 0, 0, 0, 0, 0, 0, 196),
        _STAGE_4_FLOOR,
        _STAGE_4_SHADE,
        _STAGE_4_TWO_DRUNKS,
        _STAGE_4_LEDGE,
        (196, 201, 0, 105, 0, 0, 0, 0, 0, 0, 0, 0, 105, 0, 0, 196),
        _STAGE_4_FLOOR,
        _STAGE_4_SHADE,
        _STAGE_4_TWO_DRUNKS,
        _STAGE_4_LEDGE,
        _start_row(196, 201),
        _STAGE_4_FLOOR,
    ),
    5: (
        _edge(218, 220, 227, 219),
        _edge(219, 229, 0, 219),
        _STAGE_5_PILLARS,
        _STAGE_5_PILLAR_BASE,
        (219, 229, 0, 233, 0, 0, 0, 0, 0, 0, 0, 0, 233, 0, 0, 219),
        _STAGE_5_LEDGES,
        _edge(219, 229, 0, 219),
        (219, 229, 0, 0, 222, 223, 0, 108, 0, 0, 222, 223, 0, 0, 0, 219),
        _STAGE_5_PILLAR_BASE,
        _edge(219, 229, 0, 219),
        _STAGE_5_LEDGES,
        _start_row(219, 229),
        _edge(219, 221, 228, 219),
    ),
}

_BASE_ENEMIES = {1: 3, 2: 4, 3: 7, 4: 7, 5: 4}

# Enemy tiles: (kind spawned, kind whose hitbox sizes the roaming area)
_ENEMY_TILES = {
    Tile.ZENCHAN: (EnemyKind.SLIME, EnemyKind.SLIME),
    Tile.DRUNK: (EnemyKind.DRUNK, EnemyKind.SD),
    Tile.SD: (EnemyKind.SD, EnemyKind.SLIME),
    Tile.DRUNKR: (EnemyKind.DRUNK, EnemyKind.SLIME),
}


def level_layout(stage: int) -> tuple[tuple[int, ...], ...]:
    """The rows of tile ids of a stage; ValueError for an unknown stage."""
    try:
        return _LAYOUTS[stage]
    except KeyError:
        raise ValueError(f"stage {stage} doesn't exist") from None


def load_level(stage: int, tile_size: int = 16) -> LevelPlan:
    """Read a stage's layout into its tiles and starting entities."""
    if tile_size <= 0:
        raise ValueError("tile size must be positive")
    rows = level_layout(stage)
    plan = LevelPlan(
        stage=stage,
        width=LEVEL_WIDTH,
        height=LEVEL_HEIGHT,
        tiles=tuple(value for row in rows for value in row),
        enemies_to_clear=_BASE_ENEMIES[stage],
    )
    for y, row in enumerate(rows):
        for x, value in enumerate(row):
            pos = Point(x * tile_size, y * tile_size + tile_size - 1)
            if value == Tile.PLAYER:
                plan.player = pos
            elif value == Tile.PLAYER2:
                plan.player2 = pos
            elif value in _ENEMY_TILES:
                kind, hitbox_kind = _ENEMY_TILES[Tile(value)]
                plan.enemies.append(EnemySpawn(kind, pos, hitbox_kind))
                if value == Tile.SD and stage != 4:
                    plan.enemies_to_clear += 1
            elif value == Tile.BUBBLE:
                plan.bubbles.append(pos)
            elif value == Tile.OBJECT:
                plan.objects.append(pos)
            elif value == Tile.DOT:
                plan.dots.append(pos)
    return plan