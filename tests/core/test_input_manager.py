"""
test_input_manager.py
---------------------
Tests for key event to action mapping.
"""

from types import SimpleNamespace

import pygame
import pytest

from cactus_run.core.services.input_manager import InputManager


@pytest.fixture
def input_manager():
    return InputManager()


def key_event(key):
    return SimpleNamespace(type=pygame.KEYDOWN, key=key)


@pytest.mark.parametrize("key, action", [
    (pygame.K_SPACE, "jump"),
    (pygame.K_UP, "jump"),
    (pygame.K_RETURN, "restart"),
    (pygame.K_KP_ENTER, "restart"),
    (pygame.K_ESCAPE, "quit"),
])
def test_bound_keys(input_manager, key, action):
    assert input_manager.action_for_event(key_event(key)) == action


def test_unbound_key_ignored(input_manager):
    assert input_manager.action_for_event(key_event(pygame.K_z)) is None


def test_non_key_events_ignored(input_manager):
    event = SimpleNamespace(type=pygame.KEYUP, key=pygame.K_SPACE)
    assert input_manager.action_for_event(event) is None


def test_window_close_is_quit(input_manager):
    assert input_manager.action_for_event(SimpleNamespace(type=pygame.QUIT)) == "quit"


def test_custom_bindings():
    manager = InputManager({"gameplay": {"jump": [pygame.K_w]}})

    assert manager.action_for_key(pygame.K_w) == "jump"
    assert manager.action_for_key(pygame.K_SPACE) is None
