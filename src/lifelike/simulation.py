"""
Simulation loop for lifelike automata.

Holds a two-axis space and a rule and applies the rule one generation at a
time: read the flat state, compute the next one, write it back.
"""

import logging
from typing import Callable, Optional

import mlx.core as mx
from tqdm import tqdm

from .config import Config
from .dynamics import LifeLikeAutomaton
from .metrics import population
from .patterns import place_pattern, random_state
from .space import DiscreteSpace, TwoDimensional

logger = logging.getLogger(__name__)


class Simulation:
    """
    Lifelike simulation manager.

    Owns the space exclusively while running; nothing else should write to
    it between steps.

    Attributes:
        space: Two-axis space holding the current generation
        automaton: Rule applied each step
        step_count: Number of steps executed
    """

    def __init__(self, space: DiscreteSpace, automaton: LifeLikeAutomaton):
        """
        Initialize simulation.

        Args:
            space: Space holding the initial generation
            automaton: Rule bound to the same extents as the space
        """
        self.space = space
        self.automaton = automaton
        self.step_count = 0
        self._initial_state = space.read_state()

    @classmethod
    def from_config(cls, config: Config) -> "Simulation":
        """
        Build a simulation from a configuration.

        The grid is seeded with config.pattern at its centre if one is set,
        otherwise with a random fill of the configured density.
        """
        if config.pattern is not None:
            space = TwoDimensional(
                config.width, config.height,
                state=place_pattern(config.extents, config.pattern),
            )
        else:
            space = TwoDimensional(config.width, config.height)
            space.write_state(random_state(config.extents, config.density, config.seed))

        automaton = LifeLikeAutomaton(config.life_rule, config.extents)
        return cls(space, automaton)

    @property
    def population(self) -> int:
        """Number of live cells in the current generation."""
        return population(self.space.read_state())

    def step(self) -> None:
        """Advance simulation by one generation."""
        self.automaton.step_space(self.space)
        self.step_count += 1
        logger.debug("step %d done", self.step_count)

    def run(
        self,
        steps: int,
        callback: Optional[Callable[["Simulation"], None]] = None,
        callback_interval: int = 100,
        show_progress: bool = True,
    ) -> None:
        """
        Run simulation for multiple steps.

        Args:
            steps: Number of steps to run
            callback: Optional function called periodically
            callback_interval: How often to call callback
            show_progress: Whether to show progress bar
        """
        iterator = range(steps)
        if show_progress:
            iterator = tqdm(iterator, desc="Simulating")

        for i in iterator:
            self.step()

            if callback is not None and (i + 1) % callback_interval == 0:
                mx.eval(self.space.read_state())  # Force evaluation before callback
                callback(self)

        logger.info(
            "ran %d steps with %s, population %d",
            steps, self.automaton.rule, self.population,
        )

    def reset(self) -> None:
        """Restore the initial generation."""
        self.space.write_state(self._initial_state)
        self.step_count = 0

    def get_state_dict(self) -> dict:
        """Get serializable state dictionary."""
        return {
            "step_count": self.step_count,
            "rule": self.automaton.rule.to_string(),
            "extents": list(self.space.size()),
            "state": self.space.read_state().tolist(),
        }
