"""
Cloth: a grid of Verlet points joined by breakable sticks.
"""

from typing import Any, Dict, List, NamedTuple, Optional, Sequence, Union
import logging
import numpy as np
from .constraints import Stick
from .forces import GravityForce, PointerDragForce
from .integrators import VerletIntegrator
from .primitives import Point, HORIZONTAL_SLOT, VERTICAL_SLOT
from .vector import Vector2

logger = logging.getLogger(__name__)

CURSOR_RADIUS = 10.0
DEFAULT_DRAG = 0.05


class StickSegment(NamedTuple):
    """Render data for one stick."""
    start: Vector2
    end: Vector2
    selected: bool
    broken: bool


class Cloth:
    """
    Rectangular cloth of width x height points.

    Points are stored row-major and never removed. Sticks join horizontal
    and vertical neighbours only; each point keeps the id of one horizontal
    and one vertical stick in its slots.
    """

    def __init__(self, width: int, height: int, spacing: float,
                 start_x: float, start_y: float, elasticity: float):
        """
        Build the grid.

        Args:
            width: Points per row
            height: Number of rows
            spacing: Rest length between neighbours
            start_x: X coordinate of the top-left point
            start_y: Y coordinate of the top-left point
            elasticity: Stretch-before-break fraction shared by all sticks;
                also the per-axis clamp of the pointer drag

        Raises:
            ValueError: If the grid is empty, spacing is non-positive or
                elasticity is negative
        """
        if width < 1 or height < 1:
            raise ValueError("Cloth width and height must be at least 1")
        if spacing <= 0:
            raise ValueError("Spacing must be positive")
        if elasticity < 0:
            raise ValueError("Elasticity must be non-negative")

        self.width = int(width)
        self.height = int(height)
        self.spacing = float(spacing)
        self.elasticity = float(elasticity)
        self.drag = DEFAULT_DRAG

        self.points: List[Point] = []
        self.sticks: List[Stick] = []
        self._sticks_by_id: Dict[int, Stick] = {}
        self._next_stick_id = 0
        self.removed_count = 0

        self.gravity = GravityForce()
        self.drag_force = PointerDragForce(self.elasticity)
        self.integrator = VerletIntegrator(self.drag)

        for y in range(self.height):
            for x in range(self.width):
                index = len(self.points)
                self.points.append(Point((start_x + x * spacing, start_y + y * spacing)))

                if x != 0:
                    self._connect(index, index - 1, HORIZONTAL_SLOT)

                if y != 0:
                    self._connect(index, x + (y - 1) * self.width, VERTICAL_SLOT)

                # Pin every other point of the top row
                if y == 0 and x % 2 == 0:
                    self.points[index].pin()

        logger.debug(f"Built {self.width}x{self.height} cloth with "
                     f"{len(self.points)} points and {len(self.sticks)} sticks")

    def _connect(self, index: int, neighbour: int, slot: int) -> Stick:
        stick = Stick(self._next_stick_id, index, neighbour, self.spacing, self.elasticity)
        self._next_stick_id += 1
        self.sticks.append(stick)
        self._sticks_by_id[stick.id] = stick
        self.points[neighbour].add_stick(stick.id, slot)
        self.points[index].add_stick(stick.id, slot)
        return stick

    def get_point(self, x: int, y: int) -> Point:
        """Point at grid column x, row y."""
        return self.points[x + y * self.width]

    def get_stick(self, stick_id: int) -> Optional[Stick]:
        """Stick with the given id, or None once it has been removed."""
        return self._sticks_by_id.get(stick_id)

    def select_points(self, pointer_position: Union[Vector2, Sequence[float]]) -> List[bool]:
        """Which points lie within CURSOR_RADIUS of the pointer."""
        pointer = Vector2.from_tuple(pointer_position)
        radius_sq = CURSOR_RADIUS * CURSOR_RADIUS
        return [(point.position - pointer).magnitude_squared() <= radius_sq
                for point in self.points]

    def break_sticks(self, index: int) -> List[int]:
        """
        Tear a point: mark the sticks held in its slots broken and empty the slots.

        The other endpoint keeps its reference until the stick is swept at
        the end of the frame.

        Returns:
            Ids of the sticks that were marked broken
        """
        released = self.points[index].break_sticks()
        for stick_id in released:
            self._sticks_by_id[stick_id].broken = True
        if released:
            logger.debug(f"Tore point {index}, breaking sticks {released}")
        return released

    def highlight_sticks(self, selected: Sequence[bool]) -> None:
        """Flag every stick held in the slots of a selected point; clear the rest."""
        highlighted = set()
        for point, is_selected in zip(self.points, selected):
            if is_selected:
                highlighted.update(stick_id for stick_id in point.sticks if stick_id is not None)
        for stick in self.sticks:
            stick.selected = stick.id in highlighted

    def update(self, dt: float, pointer_position: Union[Vector2, Sequence[float]],
               pointer_left_down: bool, pointer_right_down: bool,
               prev_pointer_position: Union[Vector2, Sequence[float]]) -> int:
        """
        Advance the cloth by one frame.

        Args:
            dt: Frame duration in seconds
            pointer_position: Current pointer position
            pointer_left_down: Left button held (drag)
            pointer_right_down: Right button held (tear)
            prev_pointer_position: Pointer position of the previous frame

        Returns:
            Number of sticks removed this frame

        Raises:
            ValueError: If dt is non-positive
        """
        if dt <= 0:
            raise ValueError("Time step must be positive")

        pointer = Vector2.from_tuple(pointer_position)
        prev_pointer = Vector2.from_tuple(prev_pointer_position)
        selected = self.select_points(pointer)

        if pointer_right_down and not pointer_left_down:
            for index, is_selected in enumerate(selected):
                if is_selected:
                    self.break_sticks(index)
        self.highlight_sticks(selected)

        gravity = self.gravity.acceleration()
        if pointer_left_down:
            dragged = gravity + self.drag_force.acceleration(pointer, prev_pointer)
            accelerations = [dragged if is_selected else gravity for is_selected in selected]
        else:
            accelerations = [gravity] * len(self.points)
        self.integrator.integrate(self.points, accelerations, dt)

        for stick in self.sticks:
            stick.apply_constraint(self.points)

        # Corrections move pinned endpoints too; put them back on their anchors
        for point in self.points:
            if point.pinned:
                point.position = point.initial_position

        removed = self.remove_broken_sticks()
        self._validate_state()
        return removed

    def remove_broken_sticks(self) -> int:
        """
        Drop every broken stick, keeping the order of the others.

        Both endpoints forget the stick, so no point refers to a removed stick.

        Returns:
            Number of sticks removed
        """
        indices = [i for i, stick in enumerate(self.sticks) if stick.broken]
        for i in reversed(indices):
            stick = self.sticks.pop(i)
            del self._sticks_by_id[stick.id]
            self.points[stick.p1].clear_stick(stick.id)
            self.points[stick.p2].clear_stick(stick.id)

        if indices:
            self.removed_count += len(indices)
            logger.debug(f"Removed {len(indices)} broken sticks, {len(self.sticks)} remain")
        return len(indices)

    def render_data(self) -> List[StickSegment]:
        """Endpoints and flags of every stick still in the cloth."""
        return [StickSegment(self.points[stick.p1].position,
                             self.points[stick.p2].position,
                             stick.selected, stick.broken)
                for stick in self.sticks]

    def positions(self) -> np.ndarray:
        """Point positions as an (n, 2) array."""
        return np.array([point.position.to_tuple() for point in self.points],
                        dtype=np.float64).reshape(-1, 2)

    def segments(self) -> np.ndarray:
        """Stick endpoints as an (n, 2, 2) array, one row per stick."""
        return np.array([(self.points[stick.p1].position.to_tuple(),
                          self.points[stick.p2].position.to_tuple())
                         for stick in self.sticks],
                        dtype=np.float64).reshape(-1, 2, 2)

    def highlight_mask(self) -> np.ndarray:
        """Selected flag of every stick, aligned with segments()."""
        return np.array([stick.selected for stick in self.sticks], dtype=bool)

    def _validate_state(self) -> None:
        """Log points whose position is no longer finite."""
        bad = np.flatnonzero(~np.isfinite(self.positions()).all(axis=1))
        if bad.size:
            logger.error(f"Non-finite position in {bad.size} points (first: {int(bad[0])})")

    def get_debug_info(self) -> Dict[str, Any]:
        """Get debugging information."""
        return {
            'width': self.width,
            'height': self.height,
            'point_count': len(self.points),
            'pinned_count': sum(1 for point in self.points if point.pinned),
            'stick_count': len(self.sticks),
            'removed_count': self.removed_count,
            'selected_count': sum(1 for stick in self.sticks if stick.selected),
            'max_stretch': max((stick.current_length(self.points) / stick.length
                                for stick in self.sticks), default=0.0)
        }
