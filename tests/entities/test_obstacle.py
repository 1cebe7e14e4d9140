"""
test_obstacle.py
----------------
Tests for Obstacle movement, AABB overlap and rendering fallback.
"""

import pytest

from cactus_run.entities.obstacle import Obstacle
from cactus_run.entities.player import Player


class TestObstacleMovement:

    def test_moves_left_by_speed_each_frame(self):
        obstacle = Obstacle(800, 250)
        obstacle.update(16)
        obstacle.update(40)

        assert obstacle.x == 790

    def test_off_screen_only_after_right_edge_passes_zero(self):
        obstacle = Obstacle(-19, 250)
        assert obstacle.off_screen is False

        obstacle.x = -20
        assert obstacle.off_screen is True


    def test_edges(self):
        obstacle = Obstacle(100, 250)

        assert obstacle.right == 120
        assert obstacle.bottom == 290


class TestObstacleOverlap:

    @pytest.fixture
    def player(self):
        return Player(viewport_height=300)

    def test_overlapping_boxes(self, player):
        obstacle = Obstacle(20, player.y)
        assert obstacle.overlaps(player)
        assert player.overlaps(obstacle)

    def test_distant_boxes(self, player):
        obstacle = Obstacle(100, player.y)
        assert not obstacle.overlaps(player)

    def test_touching_edges_do_not_overlap(self):
        player = Player(viewport_height=300, height=60)
        right_edge = Obstacle(player.x + player.width, player.y)
        above = Obstacle(player.x, player.y - 40)

        assert not right_edge.overlaps(player)
        assert not above.overlaps(player)


class TestObstacleDraw:

    def test_flat_rect_even_with_sprite(self, mock_draw_manager):
        sprite = object()
        obstacle = Obstacle(100, 250, image=sprite)
        obstacle.draw(mock_draw_manager)

        mock_draw_manager.fill_rect.assert_called_once_with(100, 250, 20, 40, "green")
        mock_draw_manager.draw_image.assert_not_called()

    def test_sprite_when_enabled(self, mock_draw_manager):
        sprite = object()
        obstacle = Obstacle(100, 250, image=sprite, draw_sprite=True)
        obstacle.draw(mock_draw_manager)

        mock_draw_manager.draw_image.assert_called_once_with(sprite, 100, 250, 20, 40)
        mock_draw_manager.fill_rect.assert_not_called()
