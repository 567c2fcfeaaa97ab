"""Command-line entry point running an SPH simulation from a TOML configuration."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from ruspahy.config import SimConfig, load_config
from ruspahy.integrator import integrate
from ruspahy.output import write_vtk
from ruspahy.particle import ParticleSystem

DEFAULT_CONFIG = "assets/config.toml"
DEFAULT_OUTPUT_DIR = "output"


def run_simulation(
    config: SimConfig, output_dir: str | os.PathLike[str] = DEFAULT_OUTPUT_DIR
) -> list[Path]:
    """Run the simulation loop, writing a VTK snapshot every ``output_interval`` steps.

    Returns the paths of the files written, in order.
    """
    if config.num_steps > 0 and config.output_interval == 0:
        raise ValueError("output_interval must be positive")

    psys = ParticleSystem(config)
    out_dir = Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for step in range(config.num_steps):
        psys.build_neighbor_list()
        psys.compute_forces()
        integrate(psys, config.time_step)

        if step % config.output_interval == 0:
            path = out_dir / f"step_{step}.vtk"
            write_vtk(psys, path)
            print(f"Output: {path}")
            written.append(path)
    return written


def main(argv: Sequence[str] | None = None) -> int:
    """Load the configuration, run the simulation and report completion."""
    parser = argparse.ArgumentParser(prog="ruspahy", description="Run an SPH solid simulation.")
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="path of the TOML configuration")
    parser.add_argument(
        "--output-dir", default=DEFAULT_OUTPUT_DIR, help="directory receiving VTK snapshots"
    )
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as exc:
        print(f"error: cannot load configuration {args.config}: {exc}", file=sys.stderr)
        return 1

    try:
        run_simulation(config, args.output_dir)
    except (OSError, ValueError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print("Simulation completed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())