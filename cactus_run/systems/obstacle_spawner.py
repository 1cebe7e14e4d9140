"""
obstacle_spawner.py
-------------------
Spawns, updates, renders and culls the obstacles of one run.

Responsibilities
----------------
- Spawn a new obstacle at the right edge every spawn interval (wall clock).
- Advance every active obstacle each frame.
- Drop obstacles once they are fully off the left edge.
- Answer the per-frame "did the player hit anything" query.
"""

from typing import Callable, List

import pygame

from cactus_run.core.debug.debug_logger import DebugLogger
from cactus_run.core.runtime.game_settings import Display, SpawnerSettings
from cactus_run.entities.obstacle import Obstacle


class ObstacleSpawner:
    """
    Owner of the active obstacle list.

    Spawn cadence follows the wall clock rather than accumulated frame dt,
    so it keeps running at the same rate whatever the frame rate is.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(
        self,
        image=None,
        viewport_width: float = Display.WIDTH,
        viewport_height: float = Display.HEIGHT,
        spawn_interval: float = SpawnerSettings.SPAWN_INTERVAL_MS,
        bottom_offset: float = SpawnerSettings.BOTTOM_OFFSET,
        clock: Callable[[], float] = pygame.time.get_ticks,
        obstacle_config: dict = None,
    ):
        """
        Args:
            image: Shared sprite handle passed to every obstacle
            viewport_width, viewport_height: Drawing surface size
            spawn_interval: Milliseconds between spawns
            bottom_offset: Distance from the bottom edge to an obstacle's top
            clock: Wall-clock source in milliseconds
            obstacle_config: Extra keyword arguments for each Obstacle
        """
        self.image = image
        self.viewport_width = viewport_width
        self.viewport_height = viewport_height
        self.spawn_interval = spawn_interval
        self.bottom_offset = bottom_offset
        self.clock = clock
        self.obstacle_config = obstacle_config or {}

        self.obstacles: List[Obstacle] = []  # oldest first
        self.last_spawn = 0

        self._spawn_stats = {
            "total_spawned": 0,
            "total_removed": 0,
        }

    # ===========================================================
    # Spawning
    # ===========================================================

    def spawn(self) -> Obstacle:
        """Append a new obstacle at the right edge of the viewport."""
        obstacle = Obstacle(
            self.viewport_width,
            self.viewport_height - self.bottom_offset,
            image=self.image,
            **self.obstacle_config
        )
        self.obstacles.append(obstacle)
        self._spawn_stats["total_spawned"] += 1
        DebugLogger.trace(f"Spawned {obstacle}", category="entity_spawn")
        return obstacle

    # ===========================================================
    # Frame Hooks
    # ===========================================================

    def update(self, dt: float):
        """
        Spawn if due, move every obstacle, then drop the ones that left the screen.

        Args:
            dt: Milliseconds since the previous frame
        """
        now = self.clock()
        if now - self.last_spawn > self.spawn_interval:
            self.spawn()
            self.last_spawn = now

        for obstacle in self.obstacles:
            obstacle.update(dt)

        self.cleanup()

    def cleanup(self):
        """Remove obstacles whose right edge is at or past x = 0."""
        before = len(self.obstacles)
        self.obstacles = [o for o in self.obstacles if not o.off_screen]

        removed = before - len(self.obstacles)
        if removed:
            self._spawn_stats["total_removed"] += removed
            DebugLogger.trace(f"Removed {removed} off-screen obstacle(s)", category="entity_cleanup")

    def draw(self, surface):
        for obstacle in self.obstacles:
            obstacle.draw(surface)

    # ===========================================================
    # Queries
    # ===========================================================

    def collide_with(self, player) -> bool:
        """Return True if any active obstacle strictly overlaps the player."""
        for obstacle in self.obstacles:
            if obstacle.overlaps(player):
                DebugLogger.trace(f"Collision: {obstacle} vs {player}", category="collision")
                return True
        return False

    def get_stats(self) -> dict:
        """Return a copy of spawn statistics."""
        return {**self._spawn_stats, "active": len(self.obstacles)}
