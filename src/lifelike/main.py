"""
Command-line interface for lifelike simulations.

Usage:
    python -m lifelike.main --help
    python -m lifelike.main --steps 200 --rule B36/S23
    python -m lifelike.main --pattern glider --width 16 --height 16 --detect-period
"""

import argparse
import json
import logging
import sys
from typing import Optional

from .config import Config, LOG_LEVELS
from .metrics import classify, simulate
from .patterns import PATTERNS
from .rules import PRESETS
from .simulation import Simulation


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with all options."""
    parser = argparse.ArgumentParser(
        description="lifelike - life-like cellular automata on a torus",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Basic options
    parser.add_argument(
        "--steps", type=int, default=100,
        help="Number of generations"
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed for the initial fill"
    )

    # Grid options
    parser.add_argument("--width", type=int, default=64, help="Grid columns")
    parser.add_argument("--height", type=int, default=64, help="Grid rows")

    # Rule and initial state
    parser.add_argument(
        "--rule", type=str, default="B3/S23",
        help=f"Rule string or preset ({', '.join(sorted(PRESETS))})"
    )
    parser.add_argument(
        "--density", type=float, default=0.3,
        help="Initial live-cell probability for random fills"
    )
    parser.add_argument(
        "--pattern", type=str, default=None, choices=sorted(PATTERNS),
        help="Place a named pattern at the centre instead of a random fill"
    )

    # Output options
    parser.add_argument(
        "--print-every", type=int, default=0,
        help="Print the population every N steps (0 disables)"
    )
    parser.add_argument(
        "--no-progress", action="store_true",
        help="Hide the progress bar"
    )
    parser.add_argument(
        "--detect-period", action="store_true",
        help="Classify the final state as still life, oscillator or extinct"
    )
    parser.add_argument(
        "--save-state", type=str, default=None,
        help="Save the final state to a JSON file"
    )
    parser.add_argument(
        "--log-level", type=str, default="WARNING", dest="log_level",
        choices=LOG_LEVELS,
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_args(args)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    print("lifelike simulation")
    print(f"  Grid: {config.width}x{config.height}")
    print(f"  Rule: {config.life_rule}")
    print(f"  Steps: {config.steps}")
    if config.pattern is not None:
        print(f"  Pattern: {config.pattern}")
    else:
        print(f"  Seed: {config.seed if config.seed is not None else 'default'}")
    print()

    sim = Simulation.from_config(config)
    print(f"Initial population: {sim.population}")

    population_callback = None
    if args.print_every > 0:
        def population_callback(s: Simulation) -> None:
            print(f"  Step {s.step_count}: population={s.population}")

    sim.run(
        config.steps,
        callback=population_callback,
        callback_interval=max(args.print_every, 1),
        show_progress=not args.no_progress,
    )

    print(f"Final population: {sim.population}")

    if args.detect_period:
        history = simulate(sim.automaton, sim.space.read_state(), steps=config.steps or 50)
        print(f"Outcome: {classify(history)}")

    if args.save_state:
        with open(args.save_state, "w") as f:
            json.dump(sim.get_state_dict(), f)
        print(f"State saved to {args.save_state}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
