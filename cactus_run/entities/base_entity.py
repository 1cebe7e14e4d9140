"""
base_entity.py
--------------
Shared shape for the game's entities (Player, Ground, Obstacle).

Coordinate System
-----------------
Entities use canvas-style top-left coordinates:
- (x, y) is the top-left corner of the bounding box
- y grows downward, so "up" means smaller y
- Geometry is kept as floats and only rounded when drawn
"""

from cactus_run.core.runtime.game_settings import Physics


def frame_scale(dt, scale_with_dt):
    """
    Return the multiplier applied to one per-frame physics step.

    Args:
        dt: Milliseconds since the previous frame
        scale_with_dt: False keeps the fixed per-frame step

    dt is clamped to [0, Physics.MAX_STEP_MS].
    """
    if not scale_with_dt:
        return 1.0
    dt = max(0.0, min(dt, Physics.MAX_STEP_MS))
    return dt / Physics.REFERENCE_FRAME_MS


class BaseEntity:
    """Axis-aligned box with per-frame update and draw hooks."""

    __slots__ = ('x', 'y', 'width', 'height', 'color')

    def __init__(self, x: float, y: float, width: float, height: float, color="magenta"):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.color = color

    # ===========================================================
    # Geometry
    # ===========================================================

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def bounds(self):
        """Return (x, y, width, height)."""
        return self.x, self.y, self.width, self.height

    def overlaps(self, other) -> bool:
        """
        Strict AABB overlap test.

        Boxes that only share an edge do not overlap.
        """
        return (
            self.x < other.right and
            self.right > other.x and
            self.y < other.bottom and
            self.bottom > other.y
        )

    # ===========================================================
    # Frame Hooks
    # ===========================================================

    def update(self, dt: float):
        """Advance one frame. Static by default."""
        pass

    def draw(self, surface):
        """Fill the bounding box with the entity color."""
        surface.fill_rect(self.x, self.y, self.width, self.height, self.color)

    def __repr__(self):
        return (
            f"{type(self).__name__}(x={self.x:.2f}, y={self.y:.2f}, "
            f"w={self.width}, h={self.height})"
        )
