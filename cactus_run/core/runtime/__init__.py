"""
Runtime configuration exports.

Provides game-wide constants and settings. All exports are lightweight
class constants with no initialization overhead.
"""

from cactus_run.core.runtime.game_settings import (
    Display,
    Fonts,
    Physics,
    PlayerSettings,
    GroundSettings,
    ObstacleSettings,
    SpawnerSettings,
    Hud,
    Debug,
    DEFAULT_GAME_CONFIG,
)

__all__ = [
    'Display',
    'Fonts',
    'Physics',
    'PlayerSettings',
    'GroundSettings',
    'ObstacleSettings',
    'SpawnerSettings',
    'Hud',
    'Debug',
    'DEFAULT_GAME_CONFIG',
]
