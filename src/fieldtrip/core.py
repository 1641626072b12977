from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidMassError
from .vector import Vector2

DEFAULT_DECAY = 1000
MIN_ATTRACTION_DISTANCE = 5.0
MAX_ATTRACTION_DISTANCE = 25.0
DEFAULT_DRAG_COEFFICIENT = 0.1

CHAOS_BOOST = 16.0
SNOW_BOOST = 0.25
WIND_BOOST = 64.0


class Mode(Enum):
    """Mutually exclusive presentation modes of the simulation."""

    CALM = "calm"
    CHAOS = "chaos"
    SNOW = "snow"
    WIND = "wind"

    @classmethod
    def parse(cls, value: Mode | str) -> Mode:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(mode.value for mode in cls)
            raise ValueError(f"unknown mode {value!r}; expected one of: {names}") from None

    @property
    def spawn_count(self) -> int:
        """Number of bodies a single click spawns in this mode."""
        return _SPAWN_COUNTS[self]

    @property
    def label(self) -> str:
        return _LABELS[self]


_SPAWN_COUNTS = {Mode.CALM: 1, Mode.CHAOS: 2, Mode.SNOW: 3, Mode.WIND: 4}
_LABELS = {Mode.CALM: "Calm", Mode.CHAOS: "Chaos", Mode.SNOW: "Snow", Mode.WIND: "Hurricane"}


def boost_factor(
    mode: Mode,
    *,
    chaos_boost: float = CHAOS_BOOST,
    snow_boost: float = SNOW_BOOST,
    wind_boost: float = WIND_BOOST,
) -> float:
    """Extra multiple of acceleration added to velocity for ``mode`` (0 in calm)."""

    if mode is Mode.CHAOS:
        return chaos_boost
    if mode is Mode.SNOW:
        return snow_boost
    if mode is Mode.WIND:
        return wind_boost
    return 0.0


def _check_mass(mass: float, kind: str) -> float:
    mass = float(mass)
    if not math.isfinite(mass) or mass <= 0.0:
        raise InvalidMassError(mass, kind)
    return mass


class Body:
    """A finite-lifetime particle pulled around by attractors.

    ``acceleration`` only holds a value while forces are being accumulated for
    the current frame; :meth:`update` consumes it and resets it to zero.
    """

    def __init__(
        self,
        x: float,
        y: float,
        vx: float = 0.0,
        vy: float = 0.0,
        mass: float = 1.0,
        *,
        lifetime: int = DEFAULT_DECAY,
    ) -> None:
        self._mass = _check_mass(mass, "body")
        self.position = Vector2(float(x), float(y))
        self.velocity = Vector2(float(vx), float(vy))
        self.acceleration = Vector2.zero()
        self.lifetime = int(lifetime)
        self.remaining_lifetime = self.lifetime

    @property
    def mass(self) -> float:
        return self._mass

    def apply_force(self, force: Vector2) -> None:
        # Vector2.divide raises DivideByZeroError for a massless body.
        self.acceleration.add_in_place(force.divide(self._mass))

    def update(
        self,
        mode: Mode = Mode.CALM,
        *,
        chaos_boost: float = CHAOS_BOOST,
        snow_boost: float = SNOW_BOOST,
        wind_boost: float = WIND_BOOST,
    ) -> None:
        """Integrate one frame of motion and age the body by one tick."""

        self.velocity.add_in_place(self.acceleration)
        if mode is not Mode.CALM:
            factor = boost_factor(
                mode,
                chaos_boost=chaos_boost,
                snow_boost=snow_boost,
                wind_boost=wind_boost,
            )
            self.velocity.add_in_place(self.acceleration.scale(factor))
        self.position.add_in_place(self.velocity)
        self.acceleration.reset()
        self.remaining_lifetime -= 1

    def is_expired(self) -> bool:
        return self.remaining_lifetime <= 0

    def __repr__(self) -> str:
        return (
            f"Body(position={self.position.as_tuple()}, velocity={self.velocity.as_tuple()}, "
            f"mass={self._mass}, remaining_lifetime={self.remaining_lifetime})"
        )


@dataclass(frozen=True)
class Attractor:
    """A stationary point source of inverse-square attraction."""

    x: float
    y: float
    mass: float = 50.0
    gravitational_constant: float = 1.0
    min_distance: float = MIN_ATTRACTION_DISTANCE
    max_distance: float = MAX_ATTRACTION_DISTANCE

    def __post_init__(self) -> None:
        object.__setattr__(self, "mass", _check_mass(self.mass, "attractor"))
        if self.min_distance <= 0.0 or self.max_distance < self.min_distance:
            raise ValueError(
                f"distance clamp must satisfy 0 < min <= max, got [{self.min_distance}, {self.max_distance}]"
            )

    @property
    def position(self) -> Vector2:
        return Vector2(self.x, self.y)

    def clamped_distance(self, body: Body) -> float:
        distance = self.position.subtract(body.position).magnitude()
        return min(max(distance, self.min_distance), self.max_distance)

    def attract(self, body: Body) -> Vector2:
        """Return the force pulling ``body`` toward this attractor.

        The separation is clamped to ``[min_distance, max_distance]`` before
        the inverse-square law is applied, which keeps close passes from
        blowing up and keeps far bodies from being released entirely.
        """

        offset = self.position.subtract(body.position)
        length = offset.magnitude()
        if length == 0.0:
            # Direction is undefined when the body sits on the attractor.
            return Vector2.zero()
        distance = self.clamped_distance(body)
        strength = self.gravitational_constant * self.mass * body.mass / (distance * distance)
        return offset.normalize().scale(strength)


@dataclass(frozen=True)
class DragZone:
    """Axis-aligned rectangle that applies linear drag to bodies inside it."""

    x: float
    y: float
    width: float
    height: float
    coefficient: float = DEFAULT_DRAG_COEFFICIENT

    def __post_init__(self) -> None:
        if self.width < 0.0 or self.height < 0.0:
            raise ValueError(f"drag zone size must be non-negative, got {self.width}x{self.height}")
        if self.coefficient < 0.0:
            raise ValueError(f"drag coefficient must be non-negative, got {self.coefficient}")

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """``(left, top, right, bottom)`` edges of the zone."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    def contains(self, body: Body) -> bool:
        left, top, right, bottom = self.bounds
        px, py = body.position.x, body.position.y
        return left < px < right and top < py < bottom

    def drag_force(self, body: Body) -> Vector2:
        return body.velocity.scale(-self.coefficient)

    def apply_effect(self, body: Body) -> None:
        body.apply_force(self.drag_force(body))


__all__ = [
    "DEFAULT_DECAY",
    "Mode",
    "boost_factor",
    "Body",
    "Attractor",
    "DragZone",
]
