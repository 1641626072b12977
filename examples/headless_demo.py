"""Quick headless demo: step a seeded world and report body counts."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from fieldtrip import Mode, SimulationConfig, SimulationWorld  # noqa: E402


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    world = SimulationWorld(SimulationConfig(width=800, height=600), seed=1337)
    world.spawn_attractor_at(200.0, 150.0)
    world.set_mode(Mode.SNOW)
    world.spawn_body_at(400.0, 100.0)

    print("Initial positions:")
    print(world.positions())

    for step in range(1, 301):
        world.step()
        if step % 50 == 0:
            print(f"After {step} steps: {len(world.bodies)} bodies alive")

    print("Final positions:")
    for idx, (x, y) in enumerate(world.positions()):
        print(f"  Body {idx}: ({x:.2f}, {y:.2f})")


if __name__ == "__main__":
    main()
