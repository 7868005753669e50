"""
Distance constraints connecting cloth points.
"""

from typing import Any, Dict, List
import logging
from .primitives import Point

logger = logging.getLogger(__name__)

MIN_DISTANCE = 1e-10


class Stick:
    """Breakable distance constraint between two points of a cloth."""

    def __init__(self, stick_id: int, p1: int, p2: int, length: float,
                 elasticity: float):
        """
        Initialize a stick.

        Args:
            stick_id: Stable handle used by points to refer to this stick
            p1: Index of the first endpoint in the cloth's point list
            p2: Index of the second endpoint
            length: Rest length
            elasticity: Fraction of the rest length the stick may stretch
                before it breaks

        Raises:
            ValueError: If elasticity is negative
        """
        if elasticity < 0:
            raise ValueError("Elasticity must be non-negative")

        self.id = int(stick_id)
        self.p1 = int(p1)
        self.p2 = int(p2)
        self.length = float(length)
        self.elasticity = float(elasticity)
        self.selected = False
        self.broken = False

    @property
    def max_length(self) -> float:
        """Length beyond which the stick breaks."""
        return self.length * (1.0 + self.elasticity)

    def current_length(self, points: List[Point]) -> float:
        return points[self.p1].position.distance(points[self.p2].position)

    def apply_constraint(self, points: List[Point]) -> None:
        """
        Pull both endpoints halfway toward the rest length, once.

        Marks the stick broken when it is stretched past max_length; the
        correction is still applied in that case.
        """
        point1 = points[self.p1]
        point2 = points[self.p2]

        diff = point1.position - point2.position
        dist = diff.magnitude()

        if dist > self.max_length:
            self.broken = True
            logger.debug(f"Stick {self.id} broke at length {dist:.3f} (max {self.max_length:.3f})")

        if dist < MIN_DISTANCE:
            logger.debug(f"Stick {self.id} endpoints coincide, skipping correction")
            return

        offset = diff * ((self.length - dist) / dist) * 0.5
        point1.position = point1.position + offset
        point2.position = point2.position - offset

    def get_constraint_info(self) -> Dict[str, Any]:
        """Get constraint information for debugging."""
        return {
            'id': self.id,
            'p1': self.p1,
            'p2': self.p2,
            'length': self.length,
            'elasticity': self.elasticity,
            'selected': self.selected,
            'broken': self.broken
        }
