"""Translate pointer and key events into world operations."""

from __future__ import annotations

import logging
from typing import Callable, Dict

from .core import Mode
from .world import SimulationWorld

logger = logging.getLogger(__name__)

HELP_LINES = (
    "T: show overlay",
    "M: calm mode",
    "L: chaos mode",
    "N: new seed",
    "R: reset seed",
    "S: snow mode",
    "W: wind mode",
)


class Controller:
    """Input collaborator for a :class:`SimulationWorld`.

    The overlay flag is display state only; the world never reads it.
    """

    def __init__(self, world: SimulationWorld, *, show_overlay: bool = True) -> None:
        self.world = world
        self.show_overlay = show_overlay
        self._bindings: Dict[str, Callable[[], object]] = {
            "t": self.toggle_overlay,
            "m": lambda: world.set_mode(Mode.CALM),
            "l": lambda: world.set_mode(Mode.CHAOS),
            "s": lambda: world.set_mode(Mode.SNOW),
            "w": lambda: world.set_mode(Mode.WIND),
            "r": world.soft_reset,
            "n": world.hard_reset,
        }

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(self._bindings)

    def click(self, x: float, y: float, modifier: bool = False) -> None:
        """Primary click spawns bodies; a modified click adds an attractor."""

        if modifier:
            self.world.spawn_attractor_at(x, y)
        else:
            self.world.spawn_body_at(x, y)

    def key(self, key: str | None) -> bool:
        """Dispatch a key press. Returns ``False`` for keys with no binding."""

        if not key:
            return False
        action = self._bindings.get(key.lower())
        if action is None:
            return False
        action()
        return True

    def toggle_overlay(self) -> bool:
        self.show_overlay = not self.show_overlay
        logger.debug("Overlay %s", "shown" if self.show_overlay else "hidden")
        return self.show_overlay


__all__ = ["Controller", "HELP_LINES"]
