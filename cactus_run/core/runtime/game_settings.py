"""
game_settings.py
----------------
Centralized constants for all game systems.

The classes below are the built-in defaults. `DEFAULT_GAME_CONFIG` mirrors
them as a nested dict so `config/game.json` can override any value through
`load_config`.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 800
    HEIGHT: int = 300
    FPS: int = 60
    CAPTION: str = "Cactus Run"
    CLEAR_COLOR: str = "white"


# ===========================================================
# Font Configuration
# ===========================================================

class Fonts:
    # None selects pygame's bundled default font
    DEFAULT: str = None
    GAME_OVER_SIZE: int = 30
    HUD_SIZE: int = 20


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Per-frame physics timing."""
    # Steps are applied once per frame unless SCALE_WITH_DT is enabled,
    # in which case each step is scaled by dt / REFERENCE_FRAME_MS.
    SCALE_WITH_DT: bool = False
    REFERENCE_FRAME_MS: float = 1000 / 60
    # Longest dt a single scaled step may cover (first frame of a run, stalls)
    MAX_STEP_MS: float = 100


# ===========================================================
# Entity Defaults
# ===========================================================

class PlayerSettings:
    """Player configuration defaults."""
    X: float = 10
    WIDTH: float = 44
    HEIGHT: float = 62.67
    GROUND_MARGIN: float = 5
    GRAVITY: float = 0.5
    JUMP_POWER: float = -10
    COLOR: str = "black"


class GroundSettings:
    """Ground strip defaults. Wider than the viewport for future scrolling."""
    WIDTH: int = 2400
    HEIGHT: int = 24
    COLOR: str = "sandybrown"


class ObstacleSettings:
    """Obstacle (cactus) defaults."""
    WIDTH: float = 20
    HEIGHT: float = 40
    SPEED: float = 5
    COLOR: str = "green"
    DRAW_SPRITE: bool = False
    SPRITE_PATH: str = "assets/images/cactus.png"


class SpawnerSettings:
    """Obstacle spawning defaults."""
    SPAWN_INTERVAL_MS: int = 2000
    BOTTOM_OFFSET: float = 50


# ===========================================================
# HUD & Messages
# ===========================================================

class Hud:
    SHOW_SCORE: bool = True
    SCORE_POS = (10, 24)
    TEXT_COLOR: str = "dimgray"

    GAME_OVER_TEXT: str = "Game Over!"
    GAME_OVER_POS = (150, 100)
    GAME_OVER_COLOR: str = "red"

    RESTART_HINT: str = "Press Enter to restart"
    RESTART_HINT_POS = (150, 130)


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Visual debug toggles -- not related to logging."""
    FRAME_TIME_WARNING: float = 16.67


# ===========================================================
# Config Defaults
# ===========================================================

DEFAULT_GAME_CONFIG = {
    "display": {
        "width": Display.WIDTH,
        "height": Display.HEIGHT,
        "fps": Display.FPS,
        "caption": Display.CAPTION,
        "clear_color": Display.CLEAR_COLOR,
    },
    "physics": {
        "scale_with_dt": Physics.SCALE_WITH_DT,
    },
    "player": {
        "x": PlayerSettings.X,
        "width": PlayerSettings.WIDTH,
        "height": PlayerSettings.HEIGHT,
        "ground_margin": PlayerSettings.GROUND_MARGIN,
        "gravity": PlayerSettings.GRAVITY,
        "jump_power": PlayerSettings.JUMP_POWER,
        "color": PlayerSettings.COLOR,
    },
    "ground": {
        "width": GroundSettings.WIDTH,
        "height": GroundSettings.HEIGHT,
        "color": GroundSettings.COLOR,
    },
    "obstacle": {
        "width": ObstacleSettings.WIDTH,
        "height": ObstacleSettings.HEIGHT,
        "speed": ObstacleSettings.SPEED,
        "color": ObstacleSettings.COLOR,
        "draw_sprite": ObstacleSettings.DRAW_SPRITE,
        "sprite_path": ObstacleSettings.SPRITE_PATH,
    },
    "spawner": {
        "spawn_interval_ms": SpawnerSettings.SPAWN_INTERVAL_MS,
        "bottom_offset": SpawnerSettings.BOTTOM_OFFSET,
    },
    "hud": {
        "show_score": Hud.SHOW_SCORE,
    },
}
