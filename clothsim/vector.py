"""
Two-dimensional vector type used throughout the cloth simulation.
"""

from typing import Iterator, Sequence, Union
import math


class Vector2:
    """Immutable 2D vector with float components."""

    __slots__ = ('x', 'y')

    def __init__(self, x: float = 0.0, y: float = 0.0):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))

    def __setattr__(self, name, value):
        raise AttributeError("Vector2 is immutable")

    @classmethod
    def from_tuple(cls, value: Union['Vector2', Sequence[float]]) -> 'Vector2':
        """Build a vector from another vector or any (x, y) sequence."""
        if isinstance(value, Vector2):
            return value
        x, y = value
        return cls(x, y)

    def __add__(self, other: 'Vector2') -> 'Vector2':
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Vector2') -> 'Vector2':
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> 'Vector2':
        return Vector2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> 'Vector2':
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> 'Vector2':
        return Vector2(self.x / scalar, self.y / scalar)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Vector2({self.x!r}, {self.y!r})"

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.magnitude_squared())

    def magnitude_squared(self) -> float:
        """Squared length; use for radius comparisons to skip the sqrt."""
        return self.x * self.x + self.y * self.y

    def distance(self, other: 'Vector2') -> float:
        return (self - other).magnitude()

    def to_tuple(self) -> tuple:
        return (self.x, self.y)


Vector2.ZERO = Vector2(0.0, 0.0)
