"""Stage state: the loaded level, its timers and the end-of-stage countdown."""

from __future__ import annotations

import random
from enum import IntEnum

from bubbleworld.levels import EnemySpawn, load_level
from bubbleworld.tilemap import Point, TileMap

# Seconds without enemies before the stage asks to move on.
STAGE_CLEAR_DELAY = 7.0
# Seconds a player must wait between two bubbles.
BUBBLE_COOLDOWN = 0.3
# Where stage 2 lets bubbles rise from the floor gaps.
STAGE_2_LEFT_VENT = Point(80, 226)
STAGE_2_RIGHT_VENT = Point(160, 226)


class DebugMode(IntEnum):
    """What the scene draws: sprites, hitboxes or both."""

    OFF = 0
    SPRITES_AND_HITBOXES = 1
    ONLY_HITBOXES = 2


class Scene:
    """One playing stage: its tiles, starting entities and timers."""

    def __init__(self, tile_size: int = 16) -> None:
        self.tile_size = tile_size
        self.tilemap = TileMap(tile_size)
        self.stage = 1
        self.debug = DebugMode.OFF
        self.num_enemies = 0
        self.all_objects = 0
        self.player_position: Point | None = None
        self.player2_position: Point | None = None
        self.enemies: list[EnemySpawn] = []
        self.bubbles: list[tuple[Point, str]] = []
        self.objects: list[Point] = []
        self.dots: list[Point] = []
        self.frame_time = 0.0
        self.bubbling_time = 0.0
        self.transition_time = 0.0
        self.next_scene_trigger = False
        self.spawn_timer_x = float(random.randint(-1, 1))
        self.spawn_timer_y = float(random.randint(-1, 1))

    def load_level(self, stage: int) -> None:
        """Load a stage, replacing everything placed by the previous one.

        Raises ValueError for a stage that does not exist.
        """
        plan = load_level(stage, self.tile_size)
        self.tilemap.load(plan.tiles, plan.width, plan.height)
        self.stage = stage
        self.num_enemies = plan.enemies_to_clear
        self.player_position = plan.player
        self.player2_position = plan.player2
        self.enemies = list(plan.enemies)
        self.bubbles = [(pos, "left") for pos in plan.bubbles]
        self.objects = list(plan.objects)
        self.dots = list(plan.dots)
        self.all_objects += len(plan.objects)

    def cycle_debug(self) -> DebugMode:
        """Switch to the next debug mode, wrapping around, and return it."""
        self.debug = DebugMode((self.debug + 1) % len(DebugMode))
        return self.debug

    def enemy_popped(self) -> int:
        """Count one trapped enemy as popped; return how many remain."""
        self.num_enemies -= 1
        return self.num_enemies

    def can_shoot_bubble(self) -> bool:
        """Whether enough time has passed since the last bubble."""
        return self.bubbling_time >= BUBBLE_COOLDOWN

    def tick(self, dt: float) -> None:
        """Advance the scene by ``dt`` seconds."""
        self.frame_time = dt
        self.bubbling_time += dt
        if self.num_enemies <= 0:
            self.transition_time += dt
            if self.transition_time > STAGE_CLEAR_DELAY:
                self.next_scene_trigger = True
        else:
            self.transition_time = 0.0
            self.next_scene_trigger = False
        self.tilemap.update()
        self.spawn_stage_bubbles(random.randint(5, 10), random.randint(5, 10))

    def spawn_stage_bubbles(
        self, max_time_x: float, max_time_y: float
    ) -> tuple[Point, str] | None:
        """On stage 2, release a rising bubble from a vent when its timer is due.

        Returns the bubble released, if any.
        """
        if self.stage != 2:
            return None
        spawned = None
        if self.spawn_timer_x >= max_time_x:
            spawned = (STAGE_2_LEFT_VENT, "left")
            self.spawn_timer_x = 0.0
        elif self.spawn_timer_y >= max_time_y:
            spawned = (STAGE_2_RIGHT_VENT, "right")
            self.spawn_timer_y = 0.0
        if spawned is not None:
            self.bubbles.append(spawned)
        self.spawn_timer_x += self.frame_time
        self.spawn_timer_y += self.frame_time
        return spawned