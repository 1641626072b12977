"""Tunable simulation parameters and JSON loading."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Tuple

from .core import CHAOS_BOOST, DEFAULT_DECAY, SNOW_BOOST, WIND_BOOST


def _as_int(value: Any, name: str) -> int:
    # JSON has no integer type of its own, so 2.0 is accepted as 2.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return int(value)


@dataclass(frozen=True)
class SimulationConfig:
    """Every constant the world needs, with the values the sketch shipped with.

    ``chaos_boost``, ``snow_boost`` and ``wind_boost`` are cosmetic: they only
    control how strongly non-calm modes exaggerate each frame's acceleration.
    """

    width: float = 800.0
    height: float = 600.0
    decay: int = DEFAULT_DECAY
    margin: float = 50.0
    min_distance: float = 5.0
    max_distance: float = 25.0
    gravitational_constant: float = 1.0
    attractor_mass: float = 50.0
    drag_coefficient: float = 0.1
    initial_bodies: int = 2
    initial_speed: float = 1.0
    spawn_speed: float = 2.0
    body_mass_range: Tuple[float, float] = (10.0, 30.0)
    chaos_boost: float = CHAOS_BOOST
    snow_boost: float = SNOW_BOOST
    wind_boost: float = WIND_BOOST
    seed_limit: int = 10000

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", float(self.width))
        object.__setattr__(self, "height", float(self.height))
        object.__setattr__(self, "body_mass_range", tuple(float(v) for v in self.body_mass_range))
        for name in ("decay", "initial_bodies", "seed_limit"):
            object.__setattr__(self, name, _as_int(getattr(self, name), name))
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be positive")
        if self.decay < 1:
            raise ValueError("decay must be at least 1")
        if self.margin < 0:
            raise ValueError("margin must be non-negative")
        if self.min_distance <= 0 or self.max_distance < self.min_distance:
            raise ValueError("min_distance/max_distance must satisfy 0 < min <= max")
        if self.attractor_mass <= 0:
            raise ValueError("attractor_mass must be positive")
        if self.drag_coefficient < 0:
            raise ValueError("drag_coefficient must be non-negative")
        if self.initial_bodies < 0:
            raise ValueError("initial_bodies must be non-negative")
        if len(self.body_mass_range) != 2:
            raise ValueError("body_mass_range must be a (low, high) pair")
        low, high = self.body_mass_range
        if low <= 0 or high < low:
            raise ValueError("body_mass_range must satisfy 0 < low <= high")
        if self.seed_limit <= 0:
            raise ValueError("seed_limit must be positive")

    @property
    def viewport(self) -> Tuple[float, float]:
        return (self.width, self.height)

    def with_viewport(self, width: float, height: float) -> SimulationConfig:
        return replace(self, width=float(width), height=float(height))

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["body_mass_range"] = list(self.body_mass_range)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SimulationConfig:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**dict(data))


def load_config(path: Path | str) -> SimulationConfig:
    """Read a :class:`SimulationConfig` from a JSON object file."""

    path = Path(path)
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    return SimulationConfig.from_dict(data)


__all__ = ["SimulationConfig", "load_config"]
