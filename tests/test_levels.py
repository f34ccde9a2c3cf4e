import pytest

from bubbleworld.levels import (
    EnemyKind,
    EnemySpawn,
    LevelPlan,
    level_layout,
    load_level,
)
from bubbleworld.tilemap import Point
from bubbleworld.tiles import Tile

STAGES = [1, 2, 3, 4, 5]


@pytest.mark.parametrize("stage", STAGES)
def test_layout_is_16_by_13(stage):
    rows = level_layout(stage)
    assert len(rows) == 13
    assert all(len(row) == 16 for row in rows)


@pytest.mark.parametrize("stage", [0, 6, -1])
def test_unknown_stage_raises(stage):
    with pytest.raises(ValueError):
        level_layout(stage)
    with pytest.raises(ValueError):
        load_level(stage)


def test_bad_tile_size_raises():
    with pytest.raises(ValueError):
        load_level(1, 0)


@pytest.mark.parametrize("stage", STAGES)
def test_tiles_are_flattened_layout(stage):
    plan = load_level(stage)
    assert isinstance(plan, LevelPlan)
    assert plan.tiles == tuple(v for row in level_layout(stage) for v in row)
    assert (plan.width, plan.height) == (16, 13)


@pytest.mark.parametrize("stage", STAGES)
def test_players_start_on_row_11(stage):
    ts = 16
    plan = load_level(stage, ts)
    assert plan.player.x // ts == 2
    assert plan.player.y // ts == 11
    assert plan.player.y % ts == ts - 1
    assert plan.player2.x // ts == 13
    assert plan.player2.y // ts == 11


def test_stage_one_slimes():
    plan = load_level(1, 16)
    assert len(plan.enemies) == 3
    assert all(e.kind is EnemyKind.SLIME for e in plan.enemies)
    assert {e.position.x // 16 for e in plan.enemies} == {8}
    assert plan.enemies_to_clear == 3


def test_enemy_counts_from_source():
    assert load_level(2).enemies_to_clear == 4
    assert load_level(3).enemies_to_clear == 7
    assert load_level(4).enemies_to_clear == 7
    # stage 5 adds one for its boss tile
    assert load_level(5).enemies_to_clear == 5


def test_stage_three_drunk_kinds():
    plan = load_level(3, 16)
    drunk_tiles = sum(
        1 for row in level_layout(3) for v in row if v in (Tile.DRUNK, Tile.DRUNKR)
    )
    assert len(plan.enemies) == drunk_tiles
    assert all(e.kind is EnemyKind.DRUNK for e in plan.enemies)
    for enemy in plan.enemies:
        col, row = enemy.position.x // 16, enemy.position.y // 16
        tile = level_layout(3)[row][col]
        expected = EnemyKind.SD if tile == Tile.DRUNK else EnemyKind.SLIME
        assert enemy.hitbox_kind is expected


def test_stage_five_boss_and_dots():
    plan = load_level(5, 16)
    assert [e.kind for e in plan.enemies] == [EnemyKind.SD]
    assert plan.enemies[0] == EnemySpawn(
        EnemyKind.SD, Point(7 * 16, 7 * 16 + 15), EnemyKind.SLIME
    )
    assert len(plan.dots) == 2
    assert sorted(p.x // 16 for p in plan.dots) == [3, 12]


def test_tile_size_scales_positions():
    small = load_level(2, 8)
    large = load_level(2, 16)
    assert [e.position.x * 2 for e in small.enemies] == [
        e.position.x for e in large.enemies
    ]


@pytest.mark.parametrize("stage", STAGES)
def test_no_bubbles_or_objects_placed(stage):
    plan = load_level(stage)
    assert plan.bubbles == []
    assert plan.objects == []