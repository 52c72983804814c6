"""
Initial patterns for two-axis life grids.

Patterns are lists of rows indexed [y][x], the same nesting TwoDimensional
accepts as an initial state.
"""

from typing import Optional, Sequence, Union

import mlx.core as mx
import numpy as np

from .space import as_cells

# Still lifes
BLOCK = [
    [1, 1],
    [1, 1],
]

BEEHIVE = [
    [0, 1, 1, 0],
    [1, 0, 0, 1],
    [0, 1, 1, 0],
]

# Period-2 oscillators
BLINKER = [
    [1, 1, 1],
]

TOAD = [
    [0, 1, 1, 1],
    [1, 1, 1, 0],
]

# Spaceship, moves one cell diagonally every 4 generations
GLIDER = [
    [0, 1, 0],
    [0, 0, 1],
    [1, 1, 1],
]

PATTERNS: dict[str, list[list[int]]] = {
    "block": BLOCK,
    "beehive": BEEHIVE,
    "blinker": BLINKER,
    "toad": TOAD,
    "glider": GLIDER,
}

Pattern = Union[str, Sequence[Sequence[int]]]


def get_pattern(name: str) -> list[list[int]]:
    """Look up a named pattern."""
    try:
        return PATTERNS[name.lower()]
    except KeyError:
        raise ValueError(
            f"unknown pattern {name!r}, expected one of {sorted(PATTERNS)}"
        ) from None


def place_pattern(
    extents: tuple[int, int],
    pattern: Pattern,
    offset: Optional[tuple[int, int]] = None,
) -> np.ndarray:
    """
    Stamp a pattern onto an empty grid.

    Args:
        extents: Grid extents (X, Y)
        pattern: Pattern name or rows of cell values
        offset: (x, y) of the pattern's top-left cell, centred if omitted.
            Cells past an edge wrap to the opposite side.

    Returns:
        Grid [Y, X] of uint32 cell values

    Raises:
        ValueError: If the pattern is wider or taller than the grid
    """
    width, height = extents
    if isinstance(pattern, str):
        pattern = get_pattern(pattern)
    cells = np.array(as_cells(pattern))
    if cells.ndim != 2:
        raise ValueError(f"patterns must be 2-D rows, got shape {cells.shape}")

    rows, cols = cells.shape
    # Larger patterns would wrap onto themselves and overwrite cells
    if rows > height or cols > width:
        raise ValueError(
            f"pattern of {cols}x{rows} cells does not fit a {width}x{height} grid"
        )
    if offset is None:
        offset = ((width - cols) // 2, (height - rows) // 2)
    x0, y0 = offset

    grid = np.zeros((height, width), dtype=np.uint32)
    ys = (y0 + np.arange(rows)) % height
    xs = (x0 + np.arange(cols)) % width
    grid[np.ix_(ys, xs)] = cells
    return grid


def random_state(
    extents: tuple[int, ...],
    density: float = 0.3,
    seed: Optional[int] = None,
) -> mx.array:
    """
    Random flat state with each cell alive with probability density.

    Args:
        extents: Per-axis extents
        density: Probability in [0, 1] that a cell starts alive
        seed: Random seed for reproducibility

    Returns:
        Flat uint32 mx.array of 0/1 values
    """
    if not 0 <= density <= 1:
        raise ValueError(f"density must be in [0, 1], got {density}")

    key = mx.random.key(seed if seed is not None else 42)
    count = int(np.prod(extents))
    draws = mx.random.uniform(shape=(count,), key=key)
    return (draws < density).astype(mx.uint32)
