"""
Mass nodes of the cloth grid.
"""

from typing import List, Optional, Sequence, Union
import logging
from .vector import Vector2

logger = logging.getLogger(__name__)

HORIZONTAL_SLOT = 0
VERTICAL_SLOT = 1


class Point:
    """A point mass advanced by Verlet integration."""

    def __init__(self, position: Union[Vector2, Sequence[float]], pinned: bool = False):
        """
        Initialize a point at rest.

        Args:
            position: Initial position [x, y]; also the anchor used when pinned
            pinned: Whether the point is held at its initial position
        """
        self.position = Vector2.from_tuple(position)
        self.prev_position = self.position
        self.initial_position = self.position
        self.pinned = bool(pinned)

        # Stick ids, indexed by HORIZONTAL_SLOT / VERTICAL_SLOT
        self.sticks: List[Optional[int]] = [None, None]

    def pin(self) -> None:
        """Hold the point at its initial position."""
        self.pinned = True

    def add_stick(self, stick_id: int, slot: int) -> None:
        """Register a stick in one of the two slots, replacing any previous entry."""
        if slot not in (HORIZONTAL_SLOT, VERTICAL_SLOT):
            raise ValueError(f"Invalid stick slot: {slot}")
        self.sticks[slot] = stick_id

    def clear_stick(self, stick_id: int) -> bool:
        """Clear every slot holding the given stick. Returns True if one was held."""
        cleared = False
        for slot, held in enumerate(self.sticks):
            if held == stick_id:
                self.sticks[slot] = None
                cleared = True
        return cleared

    def break_sticks(self) -> List[int]:
        """
        Empty both slots.

        Returns:
            Ids of the sticks that were held, so the caller can mark them broken
        """
        released = [stick_id for stick_id in self.sticks if stick_id is not None]
        self.sticks = [None, None]
        return released
