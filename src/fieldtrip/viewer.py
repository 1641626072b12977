"""Interactive matplotlib window that drives the simulation frame by frame."""

from __future__ import annotations

import logging
from typing import Iterable

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.animation import FuncAnimation

from .config import SimulationConfig
from .controls import Controller
from .rendering import FrameRenderer
from .world import SimulationWorld

logger = logging.getLogger(__name__)


class Viewer:
    """Frame driver plus event wiring around one world.

    Each animation tick runs ``world.step()`` and then redraws. Clicks and key
    presses are handled by matplotlib on the same thread between ticks.
    """

    def __init__(
        self,
        world: SimulationWorld,
        *,
        interval: int = 16,
        show_overlay: bool = True,
        controller: Controller | None = None,
    ) -> None:
        self.world = world
        self.controller = controller if controller is not None else Controller(world, show_overlay=show_overlay)
        self.renderer = FrameRenderer(world)
        self.interval = interval
        self.animation: FuncAnimation | None = None

        self.fig, self.ax = plt.subplots(figsize=(world.W / 100.0, world.H / 100.0))
        self.ax.set_axis_off()
        self.fig.subplots_adjust(left=0, right=1, bottom=0, top=1)
        self.image = self.ax.imshow(
            self._frame_array(),
            extent=(0, world.W, world.H, 0),
            interpolation="nearest",
        )
        self.fig.canvas.mpl_connect("button_press_event", self.on_click)
        self.fig.canvas.mpl_connect("key_press_event", self.on_key)

    def _frame_array(self) -> np.ndarray:
        return np.asarray(self.renderer.render(show_overlay=self.controller.show_overlay))

    def tick(self, _frame: int = 0):
        self.world.step()
        self.image.set_data(self._frame_array())
        return (self.image,)

    def on_click(self, event) -> None:
        if event.inaxes is not self.ax or event.xdata is None or event.ydata is None:
            return
        modifier = bool(event.key) and "shift" in event.key
        self.controller.click(float(event.xdata), float(event.ydata), modifier=modifier)

    def on_key(self, event) -> None:
        self.controller.key(event.key)

    def start(self) -> FuncAnimation:
        self.animation = FuncAnimation(
            self.fig,
            self.tick,
            interval=self.interval,
            blit=False,
            cache_frame_data=False,
        )
        return self.animation


def keymap_overrides(keys: Iterable[str]) -> dict[str, list[str]]:
    """Return ``keymap.*`` rc values with the given single-key shortcuts removed.

    Only keymaps that actually contain one of ``keys`` are returned, so the
    result can be passed straight to :func:`matplotlib.pyplot.rc_context`.
    Matching is case-insensitive, like :meth:`Controller.key`.
    """

    bound = {key.lower() for key in keys}
    overrides: dict[str, list[str]] = {}
    for name, shortcuts in plt.rcParams.items():
        if not name.startswith("keymap."):
            continue
        kept = [shortcut for shortcut in shortcuts if shortcut.lower() not in bound]
        if len(kept) != len(shortcuts):
            overrides[name] = kept
    return overrides


def run_viewer(
    config: SimulationConfig | None = None,
    *,
    seed: int | None = None,
    interval: int = 16,
) -> Viewer:
    """Open the interactive window and block until it is closed."""

    world = SimulationWorld(config, seed=seed)
    controller = Controller(world)
    # Bound keys must not also trigger matplotlib shortcuts such as "s" (save).
    with plt.rc_context(keymap_overrides(controller.keys)):
        viewer = Viewer(world, interval=interval, controller=controller)
        viewer.start()
        logger.info("Viewer started with seed %d", world.seed)
        plt.show()
    return viewer


__all__ = ["Viewer", "keymap_overrides", "run_viewer"]
