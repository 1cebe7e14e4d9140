"""
run_state.py
------------
State of a single run, from start (or restart) until game over.
"""

from dataclasses import dataclass
from enum import Enum

from cactus_run.entities.ground import Ground
from cactus_run.entities.player import Player
from cactus_run.systems.obstacle_spawner import ObstacleSpawner


class RunPhase(Enum):
    """Controller states."""
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass
class RunState:
    """Everything a run mutates. Built fresh on start and on restart."""
    player: Player
    ground: Ground
    spawner: ObstacleSpawner
    score: int = 0
    phase: RunPhase = RunPhase.RUNNING
    last_time: float = 0

    @property
    def is_game_over(self) -> bool:
        return self.phase is RunPhase.GAME_OVER
