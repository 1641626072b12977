"""Open the interactive simulation window.

Click to spawn bodies, shift-click to add an attractor. Keys: T overlay,
M/L/S/W calm/chaos/snow/wind, R replay seed, N new seed.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from fieldtrip import SimulationConfig, load_config  # noqa: E402
from fieldtrip.viewer import run_viewer  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--config", type=Path, default=None, help="Optional JSON config file")
    parser.add_argument("--width", type=float, default=None, help="Override viewport width")
    parser.add_argument("--height", type=float, default=None, help="Override viewport height")
    parser.add_argument("--seed", type=int, default=None, help="Start seed (random when omitted)")
    parser.add_argument("--interval", type=int, default=16, help="Milliseconds between frames")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    config = load_config(args.config) if args.config else SimulationConfig()
    if args.width is not None or args.height is not None:
        config = config.with_viewport(args.width or config.width, args.height or config.height)
    run_viewer(config, seed=args.seed, interval=args.interval)


if __name__ == "__main__":
    main()
