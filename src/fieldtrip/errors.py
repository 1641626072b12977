"""Exception types raised by the simulation core."""

from __future__ import annotations


class SimulationError(Exception):
    """Base class for every error raised by ``fieldtrip``."""


class InvalidMassError(SimulationError, ValueError):
    """A body or attractor was constructed with a non-positive mass."""

    def __init__(self, mass: float, kind: str = "body") -> None:
        super().__init__(f"{kind} mass must be a positive finite number, got {mass!r}")
        self.mass = mass
        self.kind = kind


class DegenerateVectorError(SimulationError, ZeroDivisionError):
    """Attempted to normalize a zero-length vector."""


class DivideByZeroError(SimulationError, ZeroDivisionError):
    """Attempted to divide a vector by zero."""


__all__ = [
    "SimulationError",
    "InvalidMassError",
    "DegenerateVectorError",
    "DivideByZeroError",
]
