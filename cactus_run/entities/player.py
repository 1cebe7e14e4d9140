"""
player.py
---------
The jumping runner.

Responsibilities
----------------
- Apply jump impulse and constant gravity each frame.
- Keep the player resting on the ground line (never below it).
- Prevent mid-air double jumps.
"""

from cactus_run.core.debug.debug_logger import DebugLogger
from cactus_run.core.runtime.game_settings import Display, PlayerSettings
from cactus_run.entities.base_entity import BaseEntity, frame_scale


class Player(BaseEntity):
    """Player character with semi-implicit Euler jump physics."""

    __slots__ = ('gravity', 'velocity', 'jump_power', 'is_jumping', 'ground_y', 'scale_with_dt')

    def __init__(
        self,
        viewport_height: float = Display.HEIGHT,
        x: float = PlayerSettings.X,
        width: float = PlayerSettings.WIDTH,
        height: float = PlayerSettings.HEIGHT,
        ground_margin: float = PlayerSettings.GROUND_MARGIN,
        gravity: float = PlayerSettings.GRAVITY,
        jump_power: float = PlayerSettings.JUMP_POWER,
        color=PlayerSettings.COLOR,
        scale_with_dt: bool = False,
    ):
        """
        Args:
            viewport_height: Height of the drawing surface
            x: Fixed horizontal position
            width, height: Bounding box size
            ground_margin: Gap between the player's feet and the bottom edge
            gravity: Velocity added per frame
            jump_power: Velocity set by a jump (negative is up)
            color: Fill color
            scale_with_dt: Scale physics steps by measured frame time
        """
        ground_y = viewport_height - height - ground_margin
        super().__init__(x, ground_y, width, height, color)

        self.gravity = gravity
        self.velocity = 0.0
        self.jump_power = jump_power
        self.is_jumping = False
        self.ground_y = ground_y
        self.scale_with_dt = scale_with_dt

    @property
    def airborne(self) -> bool:
        return self.is_jumping

    def jump(self):
        """Start a jump. Ignored while already airborne."""
        if self.is_jumping:
            return
        self.velocity = self.jump_power
        self.is_jumping = True
        DebugLogger.trace("Jump", category="input")

    def update(self, dt: float):
        """
        Integrate one frame.

        Position is advanced before gravity is applied, so the first frame
        after a jump moves by the full jump impulse.
        """
        step = frame_scale(dt, self.scale_with_dt)

        self.y += self.velocity * step
        self.velocity += self.gravity * step

        if self.y > self.ground_y:
            self.y = self.ground_y
            self.is_jumping = False
