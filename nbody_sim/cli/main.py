"""CLI main entry point."""

import argparse
import sys
from dataclasses import replace

import numpy as np

from nbody_sim.errors import NBodySimError
from nbody_sim.physics.simulator import SimulationCore
from nbody_sim.physics.force_calculator import FORCE_METHODS
from nbody_sim.presets import list_presets
from nbody_sim.utils.config import Config, load_config
from nbody_sim.utils.logging_config import setup_logging
from nbody_sim.utils.reproducibility import set_all_seeds


def build_config(args) -> Config:
    """Merge a config file (if any) with command-line overrides."""
    config = load_config(args.config) if args.config else Config()
    overrides = {
        'preset': args.preset,
        'steps': args.steps,
        'gravitational_constant': args.G,
        'time_scale': args.time_scale,
        'max_trail_length': args.trail_length,
        'force_method': args.force_method,
        'seed': args.seed,
        'log_level': args.log_level,
    }
    return replace(config, **{k: v for k, v in overrides.items() if v is not None})


def run_simulation(config: Config) -> SimulationCore:
    """Run a preset headlessly and print a conservation report."""
    if config.seed is not None:
        set_all_seeds(config.seed)

    core = SimulationCore.from_config(config)
    core.load_preset(config.preset, seed=config.seed)

    p0 = core.total_momentum()
    E0 = core.total_energy()

    print(f"Running simulation: {config.preset} with {len(core)} bodies")
    print(f"G: {core.gravitational_constant}, dt: {core.time_step:.6f}, "
          f"force method: {core.force_calculator.method}")

    core.start()
    for _ in range(config.steps):
        core.tick()
    core.pause()

    p1 = core.total_momentum()
    E1 = core.total_energy()
    drift = abs(E1 - E0) / abs(E0) if abs(E0) > 1e-12 else abs(E1 - E0)

    print(f"Steps: {core.step_count}, simulated time: {core.time:.4f}")
    print(f"Momentum change: {np.linalg.norm(p1 - p0):.3e}")
    print(f"Energy: E0 = {E0:.6f}, E1 = {E1:.6f}, relative drift = {drift:.3e}")
    for body in core.get_bodies():
        x, y, z = body.position
        print(f"  {body.id[:8]}  m={body.mass:.3f}  pos=({x:.3f}, {y:.3f}, {z:.3f})  trail={len(body.trail)}")

    return core


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="Gravitational N-body simulation core")
    parser.add_argument('--preset', choices=list_presets(), help='Preset scenario')
    parser.add_argument('--steps', type=int, help='Number of steps to run')
    parser.add_argument('--G', type=float, help='Gravitational constant')
    parser.add_argument('--time-scale', type=float, help='Multiplier on the 1/60 s base step')
    parser.add_argument('--trail-length', type=int, help='Maximum trail length per body')
    parser.add_argument('--force-method', choices=FORCE_METHODS, help='Force accumulation method')
    parser.add_argument('--seed', type=int, help='Random seed (random preset)')
    parser.add_argument('--config', help='JSON or YAML config file')
    parser.add_argument('--log-level', help='Logging level (DEBUG, INFO, WARNING, ...)')
    parser.add_argument('--list-presets', action='store_true', help='List available presets')

    args = parser.parse_args(argv)

    if args.list_presets:
        for name in list_presets():
            print(name)
        return 0

    try:
        config = build_config(args)
        setup_logging(config.log_level)
        run_simulation(config)
    except (NBodySimError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    return 0


if __name__ == '__main__':
    sys.exit(main())
