"""The simulation aggregate: bodies, attractors, the drag zone and the mode."""

from __future__ import annotations

import logging
import random
from typing import List, Tuple

import numpy as np

from .config import SimulationConfig
from .core import Attractor, Body, DragZone, Mode
from .random_source import RandomSource

logger = logging.getLogger(__name__)


class SimulationWorld:
    """Owns all simulation state and advances it one frame at a time.

    A frame is three stages run in order by :meth:`step`:

    1. :meth:`accumulate_forces` - attractor pulls plus drag inside the zone
    2. :meth:`integrate` - per-body motion update under the active mode
    3. :meth:`cleanup` - drop expired and off-screen bodies

    Spawns, mode changes and resets are meant to be called between frames.
    """

    def __init__(self, config: SimulationConfig | None = None, *, seed: int | None = None) -> None:
        self.config = config or SimulationConfig()
        self.W, self.H = self.config.viewport
        if seed is None:
            seed = random.Random().randrange(self.config.seed_limit)
        self.rng = RandomSource(seed)
        self.drag_zone = DragZone(
            x=self.W / 4.0,
            y=self.H / 4.0,
            width=self.W / 2.0,
            height=self.H / 2.0,
            coefficient=self.config.drag_coefficient,
        )
        self.bodies: List[Body] = []
        self.attractors: List[Attractor] = []
        self._mode = Mode.CALM
        self.frame = 0
        self._populate()

    @property
    def seed(self) -> int:
        return self.rng.seed

    @property
    def mode(self) -> Mode:
        return self._mode

    def set_mode(self, mode: Mode | str) -> Mode:
        new_mode = Mode.parse(mode)
        if new_mode is not self._mode:
            logger.info("Mode changed: %s -> %s", self._mode.value, new_mode.value)
        self._mode = new_mode
        return new_mode

    # ------------------------------------------------------------------
    # Frame stages

    def step(self) -> int:
        """Advance one frame; return how many bodies were purged."""

        self.accumulate_forces()
        self.integrate()
        purged = self.cleanup()
        self.frame += 1
        if purged:
            logger.debug("Frame %d purged %d bodies (%d alive)", self.frame, purged, len(self.bodies))
        return purged

    def accumulate_forces(self) -> None:
        for body in self.bodies:
            for attractor in self.attractors:
                body.apply_force(attractor.attract(body))
            if self.drag_zone.contains(body):
                self.drag_zone.apply_effect(body)

    def integrate(self) -> None:
        cfg = self.config
        for body in self.bodies:
            body.update(
                self._mode,
                chaos_boost=cfg.chaos_boost,
                snow_boost=cfg.snow_boost,
                wind_boost=cfg.wind_boost,
            )

    def cleanup(self) -> int:
        before = len(self.bodies)
        self.bodies[:] = [
            body for body in self.bodies if not (body.is_expired() or self.is_out_of_bounds(body))
        ]
        return before - len(self.bodies)

    def is_out_of_bounds(self, body: Body) -> bool:
        margin = self.config.margin
        x, y = body.position.x, body.position.y
        return x < -margin or x > self.W + margin or y < -margin or y > self.H + margin

    # ------------------------------------------------------------------
    # Spawning

    def add_body(self, body: Body) -> Body:
        self.bodies.append(body)
        return body

    def add_attractor(self, attractor: Attractor) -> Attractor:
        self.attractors.append(attractor)
        return attractor

    def spawn_body_at(self, x: float, y: float) -> List[Body]:
        """Spawn ``mode.spawn_count`` bodies at a point with a small random kick."""

        speed = self.config.spawn_speed
        spawned = [self._random_body(x, y, speed) for _ in range(self._mode.spawn_count)]
        self.bodies.extend(spawned)
        logger.debug("Spawned %d bodies at (%.1f, %.1f)", len(spawned), x, y)
        return spawned

    def spawn_attractor_at(self, x: float, y: float) -> Attractor:
        attractor = self._make_attractor(x, y)
        self.attractors.append(attractor)
        logger.debug("Spawned attractor at (%.1f, %.1f)", x, y)
        return attractor

    def _make_attractor(self, x: float, y: float) -> Attractor:
        cfg = self.config
        return Attractor(
            x=float(x),
            y=float(y),
            mass=cfg.attractor_mass,
            gravitational_constant=cfg.gravitational_constant,
            min_distance=cfg.min_distance,
            max_distance=cfg.max_distance,
        )

    def _random_body(self, x: float, y: float, speed: float) -> Body:
        low, high = self.config.body_mass_range
        vx = self.rng.next_float(-speed, speed)
        vy = self.rng.next_float(-speed, speed)
        mass = self.rng.next_float(low, high)
        return Body(x, y, vx, vy, mass, lifetime=self.config.decay)

    # ------------------------------------------------------------------
    # Resets

    def soft_reset(self) -> int:
        """Restart from the current seed, replaying the original start."""

        self.rng.reseed(self.seed)
        self._populate()
        logger.info("Soft reset with seed %d", self.seed)
        return self.seed

    def hard_reset(self) -> int:
        """Draw a fresh seed from the current stream and restart from it."""

        new_seed = self.rng.next_int(self.config.seed_limit)
        self.rng.reseed(new_seed)
        self._populate()
        logger.info("Hard reset with new seed %d", new_seed)
        return new_seed

    def _populate(self) -> None:
        self.bodies.clear()
        self.attractors.clear()
        self.attractors.append(self._make_attractor(self.W / 2.0, self.H / 2.0))
        for _ in range(self.config.initial_bodies):
            x = self.rng.next_float(0.0, self.W)
            y = self.rng.next_float(0.0, self.H)
            self.bodies.append(self._random_body(x, y, self.config.initial_speed))

    # ------------------------------------------------------------------
    # Read accessors

    def positions(self) -> List[Tuple[float, float]]:
        return [body.position.as_tuple() for body in self.bodies]

    def state_array(self) -> np.ndarray:
        """Return an ``(N, 4)`` array of ``x, y, vx, vy`` per live body."""

        rows = [
            (body.position.x, body.position.y, body.velocity.x, body.velocity.y)
            for body in self.bodies
        ]
        return np.array(rows, dtype=np.float64).reshape(-1, 4)


__all__ = ["SimulationWorld"]
