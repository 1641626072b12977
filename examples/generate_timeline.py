"""Generate a JSON timeline of body positions for offline inspection."""

from __future__ import annotations

import json
import math
import sys
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from fieldtrip import Mode, SimulationConfig, SimulationWorld  # noqa: E402

OUTPUT_PATH = Path(__file__).with_name("sim_data.json")


def _spawn_ring(world: SimulationWorld, count: int, radius: float) -> None:
    cx, cy = world.W / 2.0, world.H / 2.0
    for i in range(count):
        heading = 2 * math.pi * i / count
        world.spawn_body_at(cx + math.cos(heading) * radius, cy + math.sin(heading) * radius)


def run_simulation(
    steps: int = 600,
    *,
    seed: int = 1337,
    mode: Mode = Mode.CALM,
    record_every: int = 5,
) -> None:
    config = SimulationConfig(width=800, height=600)
    world = SimulationWorld(config, seed=seed)
    world.set_mode(mode)
    _spawn_ring(world, count=12, radius=180.0)

    timeline = [{"step": 0, "positions": world.positions()}]
    for step in range(1, steps + 1):
        world.step()
        if step % record_every == 0:
            timeline.append({"step": step, "positions": world.positions()})

    payload = {
        "canvas": {"width": config.width, "height": config.height},
        "seed": world.seed,
        "mode": world.mode.value,
        "attractors": [{"x": a.x, "y": a.y, "mass": a.mass} for a in world.attractors],
        "drag_zone": {
            "x": world.drag_zone.x,
            "y": world.drag_zone.y,
            "width": world.drag_zone.width,
            "height": world.drag_zone.height,
        },
        "timeline": timeline,
    }

    OUTPUT_PATH.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    print(f"Saved timeline with {len(timeline)} frames to {OUTPUT_PATH}")


if __name__ == "__main__":
    run_simulation()
