"""
game_loop.py
------------
Defines the GameLoop class, the pygame host that drives the game.

Responsibilities
----------------
- Initialize pygame, the window and the core services
- Pump pygame events into the InputManager and GameController
- Dispatch the pending frame callback once per clock tick
- Present the surface and warn about slow frames
"""

import time

import pygame

from cactus_run.core.debug.debug_logger import DebugLogger
from cactus_run.core.runtime.frame_scheduler import FrameScheduler
from cactus_run.core.runtime.game_settings import DEFAULT_GAME_CONFIG, Debug
from cactus_run.core.services.config_manager import load_config
from cactus_run.core.services.input_manager import InputManager
from cactus_run.graphics.draw_manager import DrawManager
from cactus_run.scenes.game_controller import GameController


class GameLoop:
    """Core runtime controller that owns the window and the main loop."""

    def __init__(self, config=None):
        """Initialize pygame and all foundational systems."""
        DebugLogger.section("Initializing GameLoop")

        self.cfg = config or load_config("game.json", DEFAULT_GAME_CONFIG)
        display_cfg = self.cfg["display"]

        # -------------------------------------------------------
        # Initialize pygame systems
        # -------------------------------------------------------
        pygame.init()
        pygame.font.init()
        pygame.display.set_caption(display_cfg["caption"])
        self.screen = pygame.display.set_mode((display_cfg["width"], display_cfg["height"]))
        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {display_cfg['width']}x{display_cfg['height']}")

        # -------------------------------------------------------
        # Core Systems
        # -------------------------------------------------------
        self.input_manager = InputManager()
        self.draw_manager = DrawManager(self.screen, clear_color=display_cfg["clear_color"])
        self.scheduler = FrameScheduler()
        self.controller = GameController(self.draw_manager, self.scheduler, config=self.cfg)

        self.clock = pygame.time.Clock()
        self.fps = display_cfg["fps"]
        self.running = True
        self._last_perf_warn_time = 0

        DebugLogger.init_entry("GameLoop Runtime")

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================
    def run(self):
        """Main loop that runs until the window is closed."""
        DebugLogger.section("Game Loop")
        self.controller.start()

        while self.running:
            self.clock.tick(self.fps)

            self._handle_events()
            if not self.running:
                break

            start = time.perf_counter()
            if self.scheduler.dispatch(pygame.time.get_ticks()):
                pygame.display.flip()
                self._check_frame_time((time.perf_counter() - start) * 1000)

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    # ===========================================================
    # Event Handling
    # ===========================================================
    def _handle_events(self):
        """Route pygame events to the controller as logical actions."""
        for event in pygame.event.get():
            action = self.input_manager.action_for_event(event)
            if action is None:
                continue

            if action == "quit":
                self.running = False
                self.scheduler.cancel()
                DebugLogger.action("Quit signal received")
                break

            if self.controller.handle_action(action):
                DebugLogger.action(f"Handled '{action}'", category="input")

    def _check_frame_time(self, frame_time_ms):
        """Warn at most once per second when a frame takes too long."""
        if frame_time_ms <= Debug.FRAME_TIME_WARNING:
            return
        now = time.perf_counter()
        if now - self._last_perf_warn_time > 1.0:
            self._last_perf_warn_time = now
            DebugLogger.warn(f"Slow frame: {frame_time_ms:.2f} ms", category="performance")
