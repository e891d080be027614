"""A plain 2D vector for node placement."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real


@dataclass(frozen=True)
class Position:
    """A point in the editor's grid space; defaults to the origin."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __add__(self, other: object) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: object) -> Position:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Position(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: object) -> Position:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Position(self.x / scalar, self.y / scalar)