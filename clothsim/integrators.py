"""
Numerical integration scheme for the cloth points.
"""

from typing import List, Sequence
from .primitives import Point
from .vector import Vector2


class VerletIntegrator:
    """
    Position Verlet with uniform velocity damping.

    The implied velocity (position - prev_position) and the acceleration
    term are both scaled by (1 - drag).
    """

    def __init__(self, drag: float = 0.05):
        """
        Initialize the integrator.

        Args:
            drag: Per-step damping coefficient in [0, 1)

        Raises:
            ValueError: If drag is outside [0, 1)
        """
        if not (0.0 <= drag < 1.0):
            raise ValueError("Drag must be in [0, 1)")
        self.drag = float(drag)

    def integrate_point(self, point: Point, acceleration: Vector2, dt: float) -> None:
        """Advance a single point; pinned points snap back to their anchor."""
        if point.pinned:
            point.position = point.initial_position
            return

        damping = 1.0 - self.drag
        new_position = (point.position
                        + (point.position - point.prev_position) * damping
                        + acceleration * damping * dt * dt)
        point.prev_position = point.position
        point.position = new_position

    def integrate(self, points: List[Point], accelerations: Sequence[Vector2],
                  dt: float) -> None:
        """
        Integrate all points forward by dt.

        Args:
            points: Points to advance
            accelerations: One acceleration per point, same order
            dt: Time step in seconds
        """
        for point, acceleration in zip(points, accelerations):
            self.integrate_point(point, acceleration, dt)
