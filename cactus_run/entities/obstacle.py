"""
obstacle.py
-----------
Cactus trap that slides left across the ground at a constant speed.
"""

from cactus_run.core.runtime.game_settings import ObstacleSettings
from cactus_run.entities.base_entity import BaseEntity, frame_scale


class Obstacle(BaseEntity):
    """
    Moving obstacle.

    The sprite handle is shared by every obstacle from one spawner. It is
    only drawn when draw_sprite is set; otherwise a flat rectangle is used.
    """

    __slots__ = ('speed', 'image', 'draw_sprite', 'scale_with_dt')

    def __init__(
        self,
        x: float,
        y: float,
        image=None,
        width: float = ObstacleSettings.WIDTH,
        height: float = ObstacleSettings.HEIGHT,
        speed: float = ObstacleSettings.SPEED,
        color=ObstacleSettings.COLOR,
        draw_sprite: bool = ObstacleSettings.DRAW_SPRITE,
        scale_with_dt: bool = False,
    ):
        super().__init__(x, y, width, height, color)
        self.speed = speed
        self.image = image
        self.draw_sprite = draw_sprite
        self.scale_with_dt = scale_with_dt

    @property
    def off_screen(self) -> bool:
        """True once the right edge has passed the left edge of the viewport."""
        return self.right <= 0

    def update(self, dt: float):
        self.x -= self.speed * frame_scale(dt, self.scale_with_dt)

    def draw(self, surface):
        if self.draw_sprite and self.image is not None:
            surface.draw_image(self.image, self.x, self.y, self.width, self.height)
        else:
            super().draw(surface)
