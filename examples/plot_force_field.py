"""Render the attractor force field as a heatmap with body trajectories on top."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from fieldtrip import Body, Mode, SimulationWorld  # noqa: E402


def _sample_force_field(
    world: SimulationWorld,
    grid_cols: int,
    grid_rows: int,
    probe_mass: float,
) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    xs = np.linspace(0.0, world.W, grid_cols)
    ys = np.linspace(0.0, world.H, grid_rows)
    magnitudes = np.zeros((grid_rows, grid_cols), dtype=np.float64)
    vectors = np.zeros((grid_rows, grid_cols, 2), dtype=np.float64)
    for yi, y in enumerate(ys):
        for xi, x in enumerate(xs):
            probe = Body(float(x), float(y), mass=probe_mass)
            for attractor in world.attractors:
                probe.apply_force(attractor.attract(probe))
            vectors[yi, xi, 0] = probe.acceleration.x * probe_mass
            vectors[yi, xi, 1] = probe.acceleration.y * probe_mass
            magnitudes[yi, xi] = probe.acceleration.magnitude() * probe_mass
    return xs, ys, magnitudes, vectors


def _record_trajectories(world: SimulationWorld, steps: int) -> list[np.ndarray]:
    """Step the world and collect each surviving body's path.

    Bodies are tracked by identity because cleanup removes entries mid-run.
    """

    paths: dict[int, list[tuple[float, float]]] = {id(b): [b.position.as_tuple()] for b in world.bodies}
    for _ in range(steps):
        world.step()
        for body in world.bodies:
            paths.setdefault(id(body), []).append(body.position.as_tuple())
    return [np.asarray(path) for path in paths.values() if len(path) > 1]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=7, help="Simulation seed")
    parser.add_argument("--mode", choices=[mode.value for mode in Mode], default=Mode.CALM.value)
    parser.add_argument("--steps", type=int, default=400, help="Frames to simulate for trajectories")
    parser.add_argument("--bursts", type=int, default=6, help="Number of click spawns placed on a diagonal")
    parser.add_argument("--grid-cols", type=int, default=160, help="Samples across the viewport width")
    parser.add_argument("--grid-rows", type=int, default=120, help="Samples across the viewport height")
    parser.add_argument("--probe-mass", type=float, default=20.0, help="Mass of the probe body")
    parser.add_argument("--cmap", type=str, default="magma", help="Matplotlib colormap name to use")
    parser.add_argument("--quiver-stride", type=int, default=12, help="Stride for arrows (0 disables)")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(__file__).with_name("force_field.png"),
        help="Where to save the rendered figure",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    world = SimulationWorld(seed=args.seed)
    world.set_mode(args.mode)
    world.spawn_attractor_at(world.W * 0.25, world.H * 0.7)
    for i in range(args.bursts):
        t = (i + 1) / (args.bursts + 1)
        world.spawn_body_at(world.W * t, world.H * (1.0 - t))

    xs, ys, magnitudes, vectors = _sample_force_field(world, args.grid_cols, args.grid_rows, args.probe_mass)
    trajectories = _record_trajectories(world, args.steps)

    fig, ax = plt.subplots(figsize=(10, 7.5))
    extent = (0, world.W, world.H, 0)
    im = ax.imshow(np.log1p(magnitudes), extent=extent, origin="upper", cmap=args.cmap)
    cbar = fig.colorbar(im, ax=ax)
    cbar.set_label("log(1 + |force|)")

    zone = world.drag_zone
    ax.add_patch(
        plt.Rectangle(
            (zone.x, zone.y),
            zone.width,
            zone.height,
            edgecolor="white",
            facecolor="none",
            linewidth=1.5,
            linestyle="--",
            alpha=0.8,
        )
    )
    ax.scatter(
        [a.x for a in world.attractors],
        [a.y for a in world.attractors],
        s=80,
        marker="x",
        color="cyan",
        label="attractors",
    )
    for path in trajectories:
        ax.plot(path[:, 0], path[:, 1], linewidth=0.8, alpha=0.9)

    if args.quiver_stride > 0:
        stride = args.quiver_stride
        qx, qy = np.meshgrid(xs[::stride], ys[::stride])
        sampled = vectors[::stride, ::stride]
        ax.quiver(qx, qy, sampled[:, :, 0], -sampled[:, :, 1], color="white", alpha=0.4)

    ax.set_xlim(0, world.W)
    ax.set_ylim(world.H, 0)
    ax.set_title(f"Attractor field, {world.mode.label} mode, seed {world.seed}")
    ax.legend(loc="upper right", fontsize=8)
    fig.tight_layout()
    fig.savefig(args.output, dpi=160)
    plt.close(fig)
    print(f"Force field plot saved to {args.output}")


if __name__ == "__main__":
    main()
