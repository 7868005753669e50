"""
Force generators and pointer input for the cloth simulation.
"""

from dataclasses import dataclass
from typing import Sequence, Union
from .vector import Vector2

# Screen coordinates: +y points down
DEFAULT_GRAVITY = Vector2(0.0, 981.0)
DRAG_FORCE_SCALE = 10000.0


@dataclass(frozen=True)
class PointerState:
    """Pointer sample for one frame, as reported by the host."""
    position: Vector2 = Vector2.ZERO
    left_down: bool = False
    right_down: bool = False

    @classmethod
    def at(cls, position: Union[Vector2, Sequence[float]], left_down: bool = False,
           right_down: bool = False) -> 'PointerState':
        return cls(Vector2.from_tuple(position), bool(left_down), bool(right_down))


class GravityForce:
    """Constant acceleration applied to every free point."""

    def __init__(self):
        self.gravity = DEFAULT_GRAVITY

    def acceleration(self) -> Vector2:
        return self.gravity


class PointerDragForce:
    """Force pulling selected points along with the pointer while it is dragged."""

    def __init__(self, limit: float, scale: float = DRAG_FORCE_SCALE):
        """
        Initialize the drag force.

        Args:
            limit: Per-axis clamp applied to the pointer displacement
            scale: Multiplier turning the clamped displacement into a force
        """
        self.limit = float(limit)
        self.scale = float(scale)

    def acceleration(self, pointer_position: Vector2, prev_pointer_position: Vector2) -> Vector2:
        """Pointer displacement since the last frame, clamped per axis and scaled."""
        diff = pointer_position - prev_pointer_position
        clamped = Vector2(min(max(diff.x, -self.limit), self.limit),
                          min(max(diff.y, -self.limit), self.limit))
        return clamped * self.scale
