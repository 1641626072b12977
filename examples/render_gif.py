"""Render a seeded simulation run to an animated GIF."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from fieldtrip import Mode, SimulationConfig, SimulationWorld, export_gif, load_config  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", type=Path, default=None, help="Optional JSON config file")
    parser.add_argument("--mode", choices=[mode.value for mode in Mode], default=Mode.CALM.value)
    parser.add_argument("--seed", type=int, default=42, help="Simulation seed")
    parser.add_argument("--frames", type=int, default=240, help="Number of frames to render")
    parser.add_argument(
        "--spawn",
        type=float,
        nargs=2,
        action="append",
        metavar=("X", "Y"),
        default=None,
        help="Spawn bodies at X Y before the run (repeatable)",
    )
    parser.add_argument(
        "--attractor",
        type=float,
        nargs=2,
        action="append",
        metavar=("X", "Y"),
        default=None,
        help="Add an attractor at X Y before the run (repeatable)",
    )
    parser.add_argument("--overlay", action="store_true", help="Draw the info overlay on every frame")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(__file__).with_name("simulation.gif"),
        help="Where to save the GIF",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO)
    config = load_config(args.config) if args.config else SimulationConfig()
    world = SimulationWorld(config, seed=args.seed)
    world.set_mode(args.mode)
    for x, y in args.attractor or []:
        world.spawn_attractor_at(x, y)
    for x, y in args.spawn or []:
        world.spawn_body_at(x, y)

    path = export_gif(world, args.output, args.frames, show_overlay=args.overlay)
    summary = {
        "output": str(path),
        "frames": args.frames,
        "seed": world.seed,
        "mode": world.mode.value,
        "bodies_alive": len(world.bodies),
    }
    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()
