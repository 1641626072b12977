"""Small mutable 2D vector used for positions, velocities and forces.

Every method returns a fresh ``Vector2`` except the ones whose name ends in
``_in_place`` (and :meth:`Vector2.reset`), which mutate the receiver and
return it so calls can be chained.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .errors import DegenerateVectorError, DivideByZeroError


@dataclass(slots=True)
class Vector2:
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)

    def copy(self) -> Vector2:
        return Vector2(self.x, self.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def add(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def add_in_place(self, other: Vector2) -> Vector2:
        self.x += other.x
        self.y += other.y
        return self

    def subtract(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    def scale_in_place(self, factor: float) -> Vector2:
        self.x *= factor
        self.y *= factor
        return self

    def reset(self) -> Vector2:
        self.x = 0.0
        self.y = 0.0
        return self

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vector2:
        """Return the unit vector with the same direction.

        Raises
        ------
        DegenerateVectorError
            If the vector has zero length.
        """

        length = self.magnitude()
        if length == 0.0:
            raise DegenerateVectorError("cannot normalize a zero-length vector")
        return Vector2(self.x / length, self.y / length)

    def divide(self, divisor: float) -> Vector2:
        if divisor == 0:
            raise DivideByZeroError(f"cannot divide {self!r} by zero")
        return Vector2(self.x / divisor, self.y / divisor)

    def __add__(self, other: Vector2) -> Vector2:
        return self.add(other)

    def __sub__(self, other: Vector2) -> Vector2:
        return self.subtract(other)

    def __mul__(self, factor: float) -> Vector2:
        return self.scale(factor)

    __rmul__ = __mul__


__all__ = ["Vector2"]
