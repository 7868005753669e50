"""
Engine holding independent cloths and the host-side pointer history.
"""

from typing import Any, Dict, List, Optional
import logging
from .cloth import Cloth, StickSegment
from .forces import PointerState
from .vector import Vector2

logger = logging.getLogger(__name__)


class ClothEngine:
    """Steps every cloth of a scene with the same frame time and pointer sample."""

    def __init__(self, dt: float = 1.0 / 60.0):
        """
        Initialize the engine.

        Args:
            dt: Default frame duration in seconds

        Raises:
            ValueError: If dt is non-positive
        """
        if dt <= 0:
            raise ValueError("Time step must be positive")

        self.dt = float(dt)
        self.time = 0.0
        self.frame_count = 0
        self.paused = False
        self.cloths: List[Cloth] = []
        self.prev_pointer_position = Vector2.ZERO

        # Frames longer than this make the cloth explode
        self.max_safe_dt = 0.1

        logger.info(f"Cloth engine initialized, dt={self.dt:.4f}")

    def add_cloth(self, cloth: Cloth) -> None:
        """Add a cloth to the scene."""
        self.cloths.append(cloth)
        logger.debug(f"Added {cloth.width}x{cloth.height} cloth")

    def remove_cloth(self, cloth: Cloth) -> bool:
        """Remove a cloth. Returns True if it was in the scene."""
        try:
            self.cloths.remove(cloth)
        except ValueError:
            return False
        logger.debug("Removed cloth")
        return True

    def step(self, pointer: Optional[PointerState] = None, dt: Optional[float] = None) -> int:
        """
        Advance every cloth by one frame.

        Args:
            pointer: Pointer sample for this frame; no interaction if None
            dt: Frame duration, defaults to the engine's dt

        Returns:
            Number of sticks removed across all cloths
        """
        if self.paused:
            return 0

        step_dt = dt if dt is not None else self.dt
        if step_dt > self.max_safe_dt:
            logger.warning(f"Time step {step_dt} exceeds maximum safe value {self.max_safe_dt}")

        if pointer is None:
            pointer = PointerState(self.prev_pointer_position)

        removed = 0
        for cloth in self.cloths:
            removed += cloth.update(step_dt, pointer.position, pointer.left_down,
                                    pointer.right_down, self.prev_pointer_position)

        self.prev_pointer_position = pointer.position
        self.time += step_dt
        self.frame_count += 1
        return removed

    def step_n(self, n_steps: int, pointer: Optional[PointerState] = None) -> None:
        """Advance by n frames with the same pointer sample."""
        for _ in range(n_steps):
            self.step(pointer)

    def pause(self) -> None:
        """Pause the simulation."""
        self.paused = True
        logger.debug("Simulation paused")

    def resume(self) -> None:
        """Resume the simulation."""
        self.paused = False
        logger.debug("Simulation resumed")

    def render_data(self) -> List[StickSegment]:
        """Segments of every cloth, in scene order."""
        segments = []
        for cloth in self.cloths:
            segments.extend(cloth.render_data())
        return segments

    def get_debug_info(self) -> Dict[str, Any]:
        """Get debugging information."""
        return {
            'time': self.time,
            'dt': self.dt,
            'frame_count': self.frame_count,
            'cloth_count': len(self.cloths),
            'stick_count': sum(len(cloth.sticks) for cloth in self.cloths),
            'removed_count': sum(cloth.removed_count for cloth in self.cloths),
            'paused': self.paused
        }
