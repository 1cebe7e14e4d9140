"""
ground.py
---------
Static ground strip anchored to the bottom of the viewport.
"""

from cactus_run.core.runtime.game_settings import Display, GroundSettings
from cactus_run.entities.base_entity import BaseEntity


class Ground(BaseEntity):
    """Flat filled strip. Wider than the viewport so it can scroll later without gaps."""

    __slots__ = ()

    def __init__(
        self,
        viewport_height: float = Display.HEIGHT,
        width: float = GroundSettings.WIDTH,
        height: float = GroundSettings.HEIGHT,
        color=GroundSettings.COLOR,
    ):
        super().__init__(0, viewport_height - height, width, height, color)

    def update(self, dt: float):
        # Ground does not scroll yet
        pass
