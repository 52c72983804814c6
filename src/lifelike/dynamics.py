"""
Rule evaluation for life-like cellular automata.

The engine maps one generation's flat state to the next on a two-axis
toroidal grid. It never holds a space; callers read a flat state, pass it to
update() and write the result back.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable

import mlx.core as mx

from .rules import Rule
from .space import CELL_DTYPE, DiscreteSpace, Dimension, ShapeMismatchError, as_flat

# Moore neighborhood offsets (dy, dx), center excluded
MOORE_OFFSETS = tuple(
    (dy, dx) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if not (dy == 0 and dx == 0)
)


class Dynamic(ABC):
    """A rule that advances a flat state by one generation."""

    @property
    @abstractmethod
    def states(self) -> int:
        """Number of distinct cell states the rule works with."""

    @abstractmethod
    def update(self, state: Any) -> mx.array:
        """Compute the next generation from a flat state."""


def count_neighbors(grid: mx.array) -> mx.array:
    """
    Sum of the 8 Moore neighbors of every cell, with toroidal wraparound.

    Args:
        grid: Cell values [Y, X]

    Returns:
        Neighbor sums [Y, X]
    """
    total = mx.zeros(grid.shape, dtype=CELL_DTYPE)
    for dy, dx in MOORE_OFFSETS:
        # roll wraps, so edges see the opposite edge
        shifted = mx.roll(mx.roll(grid, shift=dy, axis=0), shift=dx, axis=1)
        total = total + shifted
    return total


def _matches(neighbors: mx.array, counts: Iterable[int]) -> mx.array:
    mask = mx.zeros(neighbors.shape, dtype=mx.bool_)
    for count in sorted(counts):
        mask = mx.logical_or(mask, neighbors == count)
    return mask


def life_update(state: Any, extents: tuple[int, int], rule: Rule) -> mx.array:
    """
    Advance a two-axis toroidal grid by one generation.

    Every cell is evaluated against the same snapshot of the input:
        1. neighbor count in rule.birth     -> 1
        2. neighbor count in rule.survival  -> current value, unchanged
        3. otherwise                        -> 0

    Survival only keeps a value, so a dead cell whose count is in the
    survival set stays dead.

    Args:
        state: Flat state of X*Y values, flat index = y*X + x
        extents: Grid extents (X, Y)
        rule: Birth/survival rule

    Returns:
        New flat uint32 state of the same length

    Raises:
        ShapeMismatchError: If the state does not hold exactly X*Y values
    """
    width, height = extents
    cells = as_flat(state, width * height)
    grid = cells.reshape(height, width)

    neighbors = count_neighbors(grid)
    born = _matches(neighbors, rule.birth)
    kept = _matches(neighbors, rule.survival)

    dead = mx.zeros(grid.shape, dtype=CELL_DTYPE)
    alive = mx.ones(grid.shape, dtype=CELL_DTYPE)
    next_grid = mx.where(born, alive, mx.where(kept, grid, dead))

    return next_grid.reshape(-1)


class LifeLikeAutomaton(Dynamic):
    """
    Life-like automaton bound to a rule and a grid size.

    Stateless apart from its configuration, so one instance can be shared
    between threads working on independent states.

    Attributes:
        rule: Birth/survival rule
        extents: Grid extents (X, Y)
    """

    def __init__(self, rule: Rule, extents: tuple[int, int]):
        if len(extents) != 2:
            raise ValueError(f"life-like automata need 2 extents, got {extents}")
        if extents[0] < 1 or extents[1] < 1:
            raise ValueError(f"extents must be positive, got {tuple(extents)}")
        self.rule = rule
        self.extents = (int(extents[0]), int(extents[1]))

    @property
    def states(self) -> int:
        return self.rule.states

    def update(self, state: Any) -> mx.array:
        return life_update(state, self.extents, self.rule)

    def step_space(self, space: DiscreteSpace) -> None:
        """Read a space, advance it one generation and write it back."""
        if space.dimension() is not Dimension.TWO or space.size() != self.extents:
            raise ShapeMismatchError(self.extents, space.size(), "space")
        space.write_state(self.update(space.read_state()))

    def __repr__(self) -> str:
        return f"LifeLikeAutomaton({self.rule.to_string()}, extents={self.extents})"
