"""
input_manager.py
----------------
Translates raw pygame key events into logical game actions.

Provides:
- Context-free key -> action lookup built from binding tables
- Discrete "pressed" actions (jump, restart, quit)
- Silent rejection of unbound keys
"""

import pygame

from cactus_run.core.debug.debug_logger import DebugLogger


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "gameplay": {
        "jump": [pygame.K_SPACE, pygame.K_UP],
        "restart": [pygame.K_RETURN, pygame.K_KP_ENTER],
    },
    "system": {
        "quit": [pygame.K_ESCAPE],
    },
}


class InputManager:
    """
    Maps key presses to logical actions.

    Usage:
        action = input_manager.action_for_event(event)
        if action == "jump":
            player.jump()
    """

    def __init__(self, key_bindings=None):
        """
        Initialize input system.

        Args:
            key_bindings: Custom key bindings dict (uses DEFAULT_KEY_BINDINGS if None)
        """
        DebugLogger.init_entry("InputManager")

        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self._init_lookup_table()
        self._validate_bindings()

    def _init_lookup_table(self):
        """Build key -> action lookup across all contexts."""
        self._key_to_action = {}
        for actions in self.key_bindings.values():
            for action_name, keys in actions.items():
                for key in keys:
                    self._key_to_action[key] = action_name

    def _validate_bindings(self):
        """Warn if one key is bound to more than one action."""
        seen = {}
        for actions in self.key_bindings.values():
            for action_name, keys in actions.items():
                for key in keys:
                    if key in seen and seen[key] != action_name:
                        DebugLogger.warn(
                            f"Key {key} bound to both '{seen[key]}' and '{action_name}'",
                            category="input"
                        )
                    seen[key] = action_name

    # ===========================================================
    # Public API
    # ===========================================================

    def action_for_key(self, key):
        """Return the action bound to a key code, or None."""
        return self._key_to_action.get(key)

    def action_for_event(self, event):
        """
        Resolve a pygame event to an action name.

        Returns:
            str | None: "jump", "restart", "quit", or None for anything else.
        """
        if event.type == pygame.QUIT:
            return "quit"
        if event.type != pygame.KEYDOWN:
            return None

        action = self.action_for_key(event.key)
        if action is None:
            DebugLogger.trace(f"Ignored key {event.key}", category="input")
        return action
