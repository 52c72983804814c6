"""
Discrete spaces for lifelike simulations.

A space owns the cell values of a regular grid with one, two or three axes.
Internally the cells are kept as an mx.array in their native shape, with the
last declared axis outermost:

- OneDimensional(X):        shape [X]
- TwoDimensional(X, Y):     shape [Y, X]
- ThreeDimensional(X, Y, Z): shape [Z, Y, X]

Externally the state is only ever exchanged as a flat 1-D array where the
first declared axis varies fastest, i.e. flat index = y*X + x for two axes
and z*X*Y + y*X + x for three.
"""

import logging
import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Optional

import mlx.core as mx
import numpy as np

logger = logging.getLogger(__name__)

# Storage dtype for cell values
CELL_DTYPE = mx.uint32


class Dimension(Enum):
    """Number of axes a space has."""

    ONE = 1
    TWO = 2
    THREE = 3

    @classmethod
    def from_extents(cls, extents: tuple[int, ...]) -> "Dimension":
        """Pick the dimension matching a tuple of per-axis extents."""
        try:
            return cls(len(extents))
        except ValueError:
            raise ValueError(
                f"spaces have 1 to 3 axes, got {len(extents)} extents"
            ) from None


class ShapeMismatchError(ValueError):
    """
    A state does not fit the extents of the space it is written to.

    Attributes:
        expected: Cell count (flat writes) or native shape (patterns)
        actual: What was supplied, or None if it could not be shaped at all
    """

    def __init__(self, expected: Any, actual: Any, what: str = "state"):
        self.expected = expected
        self.actual = actual
        if actual is None:
            detail = "ragged or non-numeric data"
        else:
            detail = f"got {actual}"
        super().__init__(f"{what} shape mismatch: expected {expected}, {detail}")


class CellValueError(ValueError):
    """Cell values that cannot be stored as non-negative uint32 integers."""


# Largest value a uint32 cell holds
MAX_CELL_VALUE = 2**32 - 1


def _check_values(values: np.ndarray, what: str) -> None:
    if values.size == 0:
        return
    # bool, signed and unsigned integers only; floats would be truncated
    if values.dtype.kind not in "biu":
        raise CellValueError(
            f"{what} must hold non-negative integers, got dtype {values.dtype}"
        )
    if values.dtype.kind == "i" and values.min() < 0:
        raise CellValueError(f"{what} holds negative cell values, min {values.min()}")
    if values.dtype.kind in "iu" and values.max() > MAX_CELL_VALUE:
        raise CellValueError(
            f"{what} holds values above {MAX_CELL_VALUE}, max {values.max()}"
        )


def _to_array(state: Any, expected: Any, what: str) -> mx.array:
    try:
        # numpy rejects ragged nesting instead of building object arrays
        values = np.asarray(state)
    except (ValueError, TypeError) as e:
        raise ShapeMismatchError(expected, None, what) from e
    _check_values(values, what)
    if values.size == 0:
        values = values.astype(np.uint32)
    return mx.array(values)


def as_cells(state: Any) -> mx.array:
    """
    Convert an array-like of any shape into validated uint32 cell values.

    Raises:
        CellValueError: For negative, fractional or non-numeric values
    """
    return _to_array(state, "a regular array", "state").astype(CELL_DTYPE)


def as_flat(state: Any, cell_count: int) -> mx.array:
    """
    Convert an array-like into a flat uint32 state of exactly cell_count cells.

    Args:
        state: List, numpy array or mx.array holding the flat state
        cell_count: Required number of cells

    Returns:
        1-D mx.array of dtype uint32

    Raises:
        ShapeMismatchError: If the data is not 1-D or has the wrong length
        CellValueError: For negative, fractional or non-numeric values
    """
    cells = _to_array(state, cell_count, "flat state")
    if cells.ndim != 1:
        raise ShapeMismatchError(cell_count, tuple(cells.shape), "flat state")
    if cells.size != cell_count:
        raise ShapeMismatchError(cell_count, cells.size, "flat state")
    return cells.astype(CELL_DTYPE)


def _as_native(state: Any, shape: tuple[int, ...]) -> mx.array:
    cells = _to_array(state, shape, "pattern")
    if tuple(cells.shape) != shape:
        raise ShapeMismatchError(shape, tuple(cells.shape), "pattern")
    return cells.astype(CELL_DTYPE)


class DiscreteSpace(ABC):
    """
    Grid storage with fixed per-axis extents.

    Subclasses fix the number of axes. Cells are only read and written as a
    whole, through read_state / write_state.
    """

    def __init__(self, extents: tuple[int, ...], state: Optional[Any] = None):
        extents = tuple(int(e) for e in extents)
        if len(extents) != self.dimension().value:
            raise ValueError(
                f"{type(self).__name__} needs {self.dimension().value} extents, "
                f"got {len(extents)}"
            )
        for extent in extents:
            if extent < 1:
                raise ValueError(f"extents must be positive, got {extents}")

        self._extents = extents
        self._shape = tuple(reversed(extents))

        if state is None:
            self._cells = mx.zeros(self._shape, dtype=CELL_DTYPE)
        else:
            self._cells = _as_native(state, self._shape)

        logger.debug(
            "created %s with extents %s (%s)",
            type(self).__name__, extents, "seeded" if state is not None else "empty",
        )

    @abstractmethod
    def dimension(self) -> Dimension:
        """Which of the one-, two- or three-axis shapes this space is."""

    def size(self) -> tuple[int, ...]:
        """Per-axis extents in declaration order."""
        return self._extents

    @property
    def cell_count(self) -> int:
        """Total number of cells (product of the extents)."""
        return math.prod(self._extents)

    def read_state(self) -> mx.array:
        """
        Full grid content as a flat array.

        Returns:
            1-D uint32 mx.array of length cell_count, first axis fastest
        """
        return self._cells.reshape(-1)

    def write_state(self, state: Any) -> None:
        """
        Replace the grid content with a flat state.

        Args:
            state: Flat array-like of exactly cell_count values

        Raises:
            ShapeMismatchError: If the length does not match
            CellValueError: If a value is not a non-negative integer

        The space is left untouched when either is raised.
        """
        try:
            cells = as_flat(state, self.cell_count)
        except (ShapeMismatchError, CellValueError) as e:
            logger.debug("rejected write to %s: %s", type(self).__name__, e)
            raise
        self._cells = cells.reshape(self._shape)

    def update_state(self, mutator: Callable[[np.ndarray], Optional[Any]]) -> None:
        """
        Read, transform and write back the flat state.

        The mutator receives a writable numpy copy of the flat state. It may
        modify it in place and return None, or return a replacement state.
        Not atomic: callers sharing a space must serialize access themselves.
        """
        state = np.array(self.read_state())
        result = mutator(state)
        self.write_state(state if result is None else result)

    def copy(self) -> "DiscreteSpace":
        """Independent space with the same extents and content."""
        other = create_space(self._extents)
        other.write_state(self.read_state())
        return other

    def __repr__(self) -> str:
        extents = ", ".join(str(e) for e in self._extents)
        return f"{type(self).__name__}({extents})"


class OneDimensional(DiscreteSpace):
    """Linear array of X cells."""

    def __init__(self, x: int, state: Optional[Any] = None):
        super().__init__((x,), state)

    def dimension(self) -> Dimension:
        return Dimension.ONE


class TwoDimensional(DiscreteSpace):
    """
    Grid of X columns and Y rows.

    An initial pattern is given as Y rows of X values, indexed [y][x].
    """

    def __init__(self, x: int, y: int, state: Optional[Any] = None):
        super().__init__((x, y), state)

    def dimension(self) -> Dimension:
        return Dimension.TWO


class ThreeDimensional(DiscreteSpace):
    """Volume of X by Y by Z cells, patterns indexed [z][y][x]."""

    def __init__(self, x: int, y: int, z: int, state: Optional[Any] = None):
        super().__init__((x, y, z), state)

    def dimension(self) -> Dimension:
        return Dimension.THREE


_SPACE_TYPES = {
    Dimension.ONE: OneDimensional,
    Dimension.TWO: TwoDimensional,
    Dimension.THREE: ThreeDimensional,
}


def create_space(extents: tuple[int, ...], state: Optional[Any] = None) -> DiscreteSpace:
    """
    Create a space whose shape is chosen by the number of extents.

    Args:
        extents: One to three per-axis sizes, first axis first
        state: Optional initial pattern in native nesting ([z][y][x] order)

    Returns:
        OneDimensional, TwoDimensional or ThreeDimensional space
    """
    space_type = _SPACE_TYPES[Dimension.from_extents(tuple(extents))]
    return space_type(*extents, state=state)
