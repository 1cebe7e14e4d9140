"""
game_controller.py
------------------
Per-frame orchestration of a run: update, draw, collision, score, restart.

Responsibilities
----------------
- Own the RunState (player, ground, spawner, score, phase).
- Run one frame per scheduled callback while RUNNING.
- Switch to GAME_OVER on collision and stop requesting frames.
- React to the "jump" and "restart" actions.
"""

from cactus_run.core.debug.debug_logger import DebugLogger
from cactus_run.core.runtime.game_settings import DEFAULT_GAME_CONFIG, Fonts, Hud
from cactus_run.core.runtime.run_state import RunPhase, RunState
from cactus_run.core.services.config_manager import load_config
from cactus_run.entities.ground import Ground
from cactus_run.entities.player import Player
from cactus_run.systems.obstacle_spawner import ObstacleSpawner


class GameController:
    """
    Two-state machine (RUNNING, GAME_OVER) driving the frame loop.

    The host delivers frames through a FrameScheduler. `frame()` does one
    tick and re-arms the scheduler only if the run is still going.
    """

    def __init__(self, draw_manager, scheduler, config=None, clock=None):
        """
        Args:
            draw_manager: Drawing surface (clear / fill_rect / fill_text)
            scheduler: FrameScheduler used to request the next frame
            config: Game config dict (loaded from game.json when None)
            clock: Optional wall-clock source for obstacle spawning (ms)
        """
        self.draw_manager = draw_manager
        self.scheduler = scheduler
        self.cfg = config or load_config("game.json", DEFAULT_GAME_CONFIG)
        self.clock = clock

        self.best_score = 0
        self.state = self._new_run()

        DebugLogger.init_entry("GameController")

    # ===========================================================
    # Run Construction
    # ===========================================================

    def _new_run(self) -> RunState:
        """Build a fresh RunState from config."""
        return RunState(
            player=self._create_player(),
            ground=self._create_ground(),
            spawner=self._create_spawner(),
        )

    def _create_player(self) -> Player:
        player_cfg = self.cfg["player"]
        return Player(
            viewport_height=self.cfg["display"]["height"],
            x=player_cfg["x"],
            width=player_cfg["width"],
            height=player_cfg["height"],
            ground_margin=player_cfg["ground_margin"],
            gravity=player_cfg["gravity"],
            jump_power=player_cfg["jump_power"],
            color=player_cfg["color"],
            scale_with_dt=self.cfg["physics"]["scale_with_dt"],
        )

    def _create_ground(self) -> Ground:
        ground_cfg = self.cfg["ground"]
        return Ground(
            viewport_height=self.cfg["display"]["height"],
            width=ground_cfg["width"],
            height=ground_cfg["height"],
            color=ground_cfg["color"],
        )

    def _create_spawner(self) -> ObstacleSpawner:
        display = self.cfg["display"]
        obstacle_cfg = self.cfg["obstacle"]
        spawner_cfg = self.cfg["spawner"]

        image = self.draw_manager.load_image(
            "cactus",
            obstacle_cfg["sprite_path"],
            size=(obstacle_cfg["width"], obstacle_cfg["height"]),
        )

        kwargs = {}
        if self.clock is not None:
            kwargs["clock"] = self.clock

        return ObstacleSpawner(
            image=image,
            viewport_width=display["width"],
            viewport_height=display["height"],
            spawn_interval=spawner_cfg["spawn_interval_ms"],
            bottom_offset=spawner_cfg["bottom_offset"],
            obstacle_config={
                "width": obstacle_cfg["width"],
                "height": obstacle_cfg["height"],
                "speed": obstacle_cfg["speed"],
                "color": obstacle_cfg["color"],
                "draw_sprite": obstacle_cfg["draw_sprite"],
                "scale_with_dt": self.cfg["physics"]["scale_with_dt"],
            },
            **kwargs
        )

    # ===========================================================
    # Properties
    # ===========================================================

    @property
    def player(self) -> Player:
        return self.state.player

    @property
    def ground(self) -> Ground:
        return self.state.ground

    @property
    def spawner(self) -> ObstacleSpawner:
        return self.state.spawner

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def is_game_over(self) -> bool:
        return self.state.is_game_over

    # ===========================================================
    # Frame Loop
    # ===========================================================

    def start(self):
        """Request the first frame of the current run."""
        DebugLogger.state("Run started")
        self.scheduler.request(self.frame)

    def frame(self, timestamp: float) -> bool:
        """
        Run one frame.

        Args:
            timestamp: Host time in milliseconds

        Returns:
            bool: True if another frame was requested.
        """
        state = self.state
        if state.is_game_over:
            return False

        dt = timestamp - state.last_time
        state.last_time = timestamp

        self.draw_manager.clear()
        for entity in (state.ground, state.player, state.spawner):
            entity.update(dt)
            entity.draw(self.draw_manager)

        if state.spawner.collide_with(state.player):
            self._end_run()
            return False

        state.score += 1
        self._draw_hud()
        self.scheduler.request(self.frame)
        return True

    def _end_run(self):
        """Enter GAME_OVER and draw the final overlay. No frame is requested."""
        self.state.phase = RunPhase.GAME_OVER
        self.best_score = max(self.best_score, self.state.score)
        stats = self.state.spawner.get_stats()
        DebugLogger.state(
            f"Game over at score {self.state.score} (best {self.best_score}), "
            f"obstacles spawned {stats['total_spawned']}, cleared {stats['total_removed']}"
        )

        self._draw_hud()
        self.draw_manager.fill_text(
            Hud.GAME_OVER_TEXT,
            *Hud.GAME_OVER_POS,
            (Fonts.DEFAULT, Fonts.GAME_OVER_SIZE),
            Hud.GAME_OVER_COLOR,
        )
        self.draw_manager.fill_text(
            Hud.RESTART_HINT,
            *Hud.RESTART_HINT_POS,
            (Fonts.DEFAULT, Fonts.HUD_SIZE),
            Hud.TEXT_COLOR,
        )

    def _draw_hud(self):
        if not self.cfg["hud"]["show_score"]:
            return
        best = max(self.best_score, self.state.score)
        self.draw_manager.fill_text(
            f"Score: {self.state.score}   Best: {best}",
            *Hud.SCORE_POS,
            (Fonts.DEFAULT, Fonts.HUD_SIZE),
            Hud.TEXT_COLOR,
        )

    # ===========================================================
    # Input
    # ===========================================================

    def handle_action(self, action) -> bool:
        """
        Apply a logical input action.

        Returns:
            bool: True if the action had an effect.
        """
        if action == "jump" and not self.state.is_game_over:
            self.state.player.jump()
            return True

        if action == "restart" and self.state.is_game_over:
            self.restart_game()
            return True

        return False

    def restart_game(self):
        """Replace the run with a fresh one and resume frames."""
        self.state = self._new_run()
        DebugLogger.state("Run restarted")
        self.scheduler.request(self.frame)
