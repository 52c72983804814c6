"""
Measurements over life states and histories.
"""

from typing import Any, Optional

import mlx.core as mx
import numpy as np

from .dynamics import Dynamic
from .space import as_cells


def population(state: Any) -> int:
    """Number of live (non-zero) cells in a state."""
    cells = as_cells(state)
    return int(mx.sum((cells > 0).astype(mx.uint32)))


def density(state: Any) -> float:
    """Fraction of cells that are alive, using the same count as population."""
    cells = as_cells(state)
    if cells.size == 0:
        return 0.0
    return population(cells) / cells.size


def _key(state: mx.array) -> bytes:
    return np.array(state).tobytes()


def simulate(dynamic: Dynamic, state: Any, steps: int = 50) -> list[mx.array]:
    """
    Run a rule until a state repeats or steps run out.

    Args:
        dynamic: Rule to apply
        state: Initial flat state
        steps: Maximum number of generations

    Returns:
        History starting with the initial state. If a repeat was found it is
        the last entry.
    """
    current = as_cells(state)
    history = [current]
    seen = {_key(current)}
    for _ in range(steps):
        current = dynamic.update(current)
        history.append(current)
        key = _key(current)
        if key in seen:
            break
        seen.add(key)
    return history


def detect_period(history: list[mx.array]) -> Optional[int]:
    """
    Period of the cycle the last state closes, relative to the final state.

    Returns 1 for a still life, p > 1 for an oscillator of period p, and
    None if the final state does not occur earlier in the history.
    """
    if len(history) <= 1:
        return None
    last = _key(history[-1])
    for p in range(1, len(history)):
        if _key(history[-1 - p]) == last:
            return p
    return None


def classify(history: list[mx.array]) -> str:
    """Short label for how a history ended."""
    if population(history[-1]) == 0:
        return "died_out"
    period = detect_period(history)
    if period == 1:
        return "still_life"
    if period is not None:
        return f"oscillator_p{period}"
    return "unresolved"
