#!/usr/bin/env python3
"""
Basic lifelike simulation example.

This script demonstrates:
1. Building a space and a rule by hand
2. Driving generations through read_state / update / write_state
3. Running a configured simulation with a progress bar
4. Classifying how patterns end up
"""

import mlx.core as mx

from lifelike import Config, LifeLikeAutomaton, TwoDimensional, get_rule
from lifelike.metrics import classify, simulate
from lifelike.patterns import PATTERNS, place_pattern
from lifelike.simulation import Simulation


def main():
    print("=" * 60)
    print("lifelike - Life-like cellular automata")
    print("Basic Simulation Example")
    print("=" * 60)
    print()

    print(f"MLX device: {mx.default_device()}")
    print()

    # Manual driver loop: the engine never touches the space itself
    extents = (10, 10)
    space = TwoDimensional(*extents, state=place_pattern(extents, "glider"))
    life = LifeLikeAutomaton(get_rule("life"), space.size())

    print("Glider, 4 generations by hand:")
    for generation in range(4):
        space.write_state(life.update(space.read_state()))
        print(f"  Generation {generation + 1}: population={int(mx.sum(space.read_state()))}")
    print()

    # Configured run
    config = Config(width=64, height=64, rule="highlife", steps=200, seed=42)
    sim = Simulation.from_config(config)

    print(f"HighLife on {config.width}x{config.height}, density {config.density}")
    print(f"  Initial population: {sim.population}")

    sim.run(
        steps=config.steps,
        callback=lambda s: print(f"  Step {s.step_count}: population={s.population}"),
        callback_interval=50,
        show_progress=True,
    )
    print()

    # Pattern zoo
    print("Pattern outcomes under B3/S23:")
    zoo_extents = (12, 12)
    zoo_rule = LifeLikeAutomaton(get_rule("B3/S23"), zoo_extents)
    for name in sorted(PATTERNS):
        start = place_pattern(zoo_extents, name).reshape(-1)
        history = simulate(zoo_rule, start, steps=20)
        print(f"  {name:8s} -> {classify(history)}")
    print()


if __name__ == "__main__":
    main()
