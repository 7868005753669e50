"""
2D Cloth Simulator Package

Verlet-integrated mass-spring cloth with interactive dragging and tearing.
"""

__version__ = "1.0.0"

from .vector import Vector2
from .primitives import Point
from .constraints import Stick
from .forces import PointerState
from .cloth import Cloth, StickSegment, CURSOR_RADIUS
from .engine import ClothEngine
from .io import ConfigLoader

__all__ = [
    'Vector2',
    'Point',
    'Stick',
    'PointerState',
    'Cloth',
    'StickSegment',
    'CURSOR_RADIUS',
    'ClothEngine',
    'ConfigLoader'
]
