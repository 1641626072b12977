"""Pillow rendering of a :class:`SimulationWorld`.

Rendering only reads world state. Nothing here feeds back into physics, so a
world can be stepped headless and rendered (or not) at any point.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from PIL import Image, ImageDraw, ImageFont

from .controls import HELP_LINES
from .core import Mode
from .world import SimulationWorld

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]

LINE_HEIGHT = 20
HELP_COLUMN_OFFSET = 170


@dataclass(frozen=True)
class Theme:
    background: RGB
    body: RGB
    attractor: RGB
    text: RGB


_THEMES = {
    Mode.CALM: Theme(background=(30, 30, 30), body=(200, 200, 255), attractor=(255, 100, 100), text=(255, 255, 255)),
    Mode.CHAOS: Theme(background=(200, 200, 200), body=(20, 20, 20), attractor=(0, 55, 155), text=(0, 0, 0)),
    Mode.SNOW: Theme(background=(80, 80, 80), body=(230, 230, 255), attractor=(135, 255, 135), text=(255, 255, 255)),
    Mode.WIND: Theme(background=(245, 245, 245), body=(10, 10, 10), attractor=(255, 175, 40), text=(0, 0, 0)),
}


def theme_for(mode: Mode) -> Theme:
    return _THEMES[mode]


def fade_alpha(remaining: float, decay: float) -> int:
    """Map remaining lifetime linearly from ``[0, decay]`` onto ``[0, 255]``."""

    if decay <= 0:
        return 0
    alpha = round(255.0 * remaining / decay)
    return max(0, min(255, int(alpha)))


def overlay_lines(world: SimulationWorld) -> Tuple[List[str], List[str]]:
    """Return ``(help_lines, stats_lines)`` for the info panel."""

    stats = [
        f"Bodies: {len(world.bodies)}",
        f"Attractors: {len(world.attractors)}",
        f"Mode: {world.mode.label}",
        f"Seed: {world.seed}",
    ]
    return list(HELP_LINES), stats


class FrameRenderer:
    """Draws the current world state onto a Pillow image."""

    def __init__(self, world: SimulationWorld) -> None:
        self.world = world
        self.size = (max(int(round(world.W)), 1), max(int(round(world.H)), 1))
        self._font = ImageFont.load_default()

    def render(self, show_overlay: bool = True) -> Image.Image:
        world = self.world
        theme = theme_for(world.mode)
        image = Image.new("RGBA", self.size, color=theme.background + (255,))

        # Bodies fade out over their lifetime, so they go on a translucent layer.
        layer = Image.new("RGBA", self.size, color=(0, 0, 0, 0))
        layer_draw = ImageDraw.Draw(layer)
        decay = world.config.decay
        for body in world.bodies:
            alpha = fade_alpha(body.remaining_lifetime, decay)
            layer_draw.ellipse(_circle_bbox(body.position.x, body.position.y, body.mass), fill=theme.body + (alpha,))
        image = Image.alpha_composite(image, layer)

        draw = ImageDraw.Draw(image)
        for attractor in world.attractors:
            draw.ellipse(_circle_bbox(attractor.x, attractor.y, attractor.mass), fill=theme.attractor + (255,))

        if show_overlay:
            self._draw_overlay(draw, theme)
        return image.convert("RGB")

    def _draw_overlay(self, draw: ImageDraw.ImageDraw, theme: Theme) -> None:
        help_lines, stats = overlay_lines(self.world)
        width = self.size[0]
        for row, line in enumerate(help_lines):
            draw.text((width - HELP_COLUMN_OFFSET, LINE_HEIGHT * (row + 1)), line, fill=theme.text, font=self._font)
        for row, line in enumerate(stats):
            draw.text((20, LINE_HEIGHT * (row + 1)), line, fill=theme.text, font=self._font)


def _circle_bbox(x: float, y: float, diameter: float) -> Tuple[float, float, float, float]:
    radius = diameter / 2.0
    return (x - radius, y - radius, x + radius, y + radius)


def export_gif(
    world: SimulationWorld,
    path: Path | str,
    frames: int,
    *,
    show_overlay: bool = False,
    frame_duration_ms: int = 33,
) -> Path:
    """Step ``world`` ``frames`` times and save every rendered frame as a GIF."""

    if frames <= 0:
        raise ValueError("frames must be positive")
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    renderer = FrameRenderer(world)
    images: List[Image.Image] = []
    for _ in range(frames):
        world.step()
        images.append(renderer.render(show_overlay=show_overlay))

    images[0].save(
        path,
        save_all=True,
        append_images=images[1:],
        duration=frame_duration_ms,
        loop=0,
    )
    logger.info("Wrote %d frames to %s", frames, path)
    return path


__all__ = ["Theme", "theme_for", "fade_alpha", "overlay_lines", "FrameRenderer", "export_gif"]
