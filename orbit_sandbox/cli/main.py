"""CLI main entry point."""

import argparse
import dataclasses
import numpy as np
from orbit_sandbox.physics.diagnostics import compute_angular_momentum, compute_kinetic_energy
from orbit_sandbox.physics.simulator import Simulator
from orbit_sandbox.render.renderer_2d import Renderer2D
from orbit_sandbox.utils.config import Config, load_config
from orbit_sandbox.utils.reproducibility import set_all_seeds


def build_config(args) -> Config:
    """Config from --config, with command-line overrides applied on top."""
    config = load_config(args.config) if args.config else Config()
    overrides = {
        name: getattr(args, name)
        for name in ("width", "height", "seed", "max_bodies", "force_method")
        if getattr(args, name) is not None
    }
    # replace() re-runs validation
    return dataclasses.replace(config, **overrides)


def _print_row(step: int, time: float, sim_state):
    K = compute_kinetic_energy(sim_state)
    Lz = compute_angular_momentum(sim_state)
    print(f"{step:<8} {time:<10.2f} {len(sim_state):<8} {K:<14.2f} {Lz:<14.2f}")


def run_simulation(args):
    """Run a headless (or live-rendered) simulation."""
    config = build_config(args)

    if config.seed is not None:
        set_all_seeds(config.seed)

    sim = Simulator(config)
    state = sim.initialize(config.width, config.height)

    time_scale = args.time_scale if args.time_scale is not None else config.time_scale
    clamped = sim.clamp_time_scale(time_scale)
    if clamped != time_scale:
        print(f"Time scale {time_scale} clamped to {clamped}")
    time_scale = clamped

    for x, y in args.spawn or []:
        state = sim.spawn_at(state, x, y)
    for _ in range(args.random_spawns):
        x = np.random.uniform(0, config.width)
        y = np.random.uniform(0, config.height)
        state = sim.spawn_at(state, x, y)

    renderer = None
    if args.render or args.save_frame:
        renderer = Renderer2D(width=config.width, height=config.height, interactive=args.render)

    dt = config.base_time_step * time_scale
    print(f"Running simulation: {len(state)} bodies, {args.steps} steps")
    print(f"G: {config.G}, dt: {dt:.4f} (base {config.base_time_step} x {time_scale}), "
          f"trail: {config.tail_length}, forces: {config.force_method}")

    print(f"{'Step':<8} {'Time':<10} {'Bodies':<8} {'K':<14} {'Lz':<14}")
    print("-" * 56)
    _print_row(0, 0.0, state)

    for step in range(1, args.steps + 1):
        state = sim.step(state, time_scale)

        if renderer and args.render and step % args.render_every == 0:
            renderer.render(state)

        if step % args.report_every == 0:
            _print_row(step, step * dt, state)

    if args.save_frame:
        renderer.render(state)
        renderer.save_frame(args.save_frame)
        print(f"Frame saved to {args.save_frame}")

    if renderer:
        renderer.close()

    print("Simulation complete!")
    return state


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Orbit Sandbox - anchor-plus-satellites gravity simulation")

    # Simulation parameters
    parser.add_argument('--config', type=str, default=None,
                       help='Config file (.json or .yaml)')
    parser.add_argument('--steps', type=int, default=500,
                       help='Number of simulation steps')
    parser.add_argument('--time-scale', type=float, default=None,
                       help='Time scale multiplier (clamped to the configured range, default: 1.0)')
    parser.add_argument('--width', type=int, default=None,
                       help='Viewport width (default: 800)')
    parser.add_argument('--height', type=int, default=None,
                       help='Viewport height (default: 600)')
    parser.add_argument('--force-method', type=str, default=None,
                       choices=['vectorized', 'direct'],
                       help='Force summation method')
    parser.add_argument('--max-bodies', type=int, default=None,
                       help='Reject spawns beyond this many bodies (default: unbounded)')
    parser.add_argument('--report-every', type=int, default=50,
                       help='Print diagnostics every N steps')

    # Spawning
    parser.add_argument('--spawn', type=float, nargs=2, action='append', metavar=('X', 'Y'),
                       help='Spawn a body at X Y (repeatable)')
    parser.add_argument('--random-spawns', type=int, default=0,
                       help='Spawn N bodies at random points in the viewport')

    # Rendering
    parser.add_argument('--render', action='store_true',
                       help='Enable real-time rendering')
    parser.add_argument('--render-every', type=int, default=1,
                       help='Render every N steps')
    parser.add_argument('--save-frame', type=str, default=None,
                       help='Save the final frame to an image file')

    # Reproducibility
    parser.add_argument('--seed', type=int, default=None,
                       help='Random seed for reproducibility')

    args = parser.parse_args(argv)

    if args.report_every < 1 or args.render_every < 1:
        parser.error("--report-every and --render-every must be at least 1")

    run_simulation(args)


if __name__ == '__main__':
    main()
