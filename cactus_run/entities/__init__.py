"""
cactus_run/entities/__init__.py
-------------------------------
Entity module exports.

Exports:
    BaseEntity - Shared box geometry and frame hooks
    Player     - Jumping runner
    Ground     - Static ground strip
    Obstacle   - Left-moving cactus trap
"""

from cactus_run.entities.base_entity import BaseEntity
from cactus_run.entities.ground import Ground
from cactus_run.entities.obstacle import Obstacle
from cactus_run.entities.player import Player

__all__ = [
    'BaseEntity',
    'Ground',
    'Obstacle',
    'Player',
]
