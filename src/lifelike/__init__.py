"""
lifelike - Life-like cellular automata on toroidal grids

Discrete spaces with one to three axes, exchanged as flat states, and a
birth/survival rule engine for two-axis grids.
"""

__version__ = "0.1.0"

from .config import Config
from .dynamics import Dynamic, LifeLikeAutomaton, life_update
from .rules import GAME_OF_LIFE, Rule, RuleError, get_rule
from .space import (
    CellValueError,
    Dimension,
    DiscreteSpace,
    OneDimensional,
    ShapeMismatchError,
    ThreeDimensional,
    TwoDimensional,
    create_space,
)

__all__ = [
    "Config",
    "Dimension",
    "DiscreteSpace",
    "OneDimensional",
    "TwoDimensional",
    "ThreeDimensional",
    "ShapeMismatchError",
    "CellValueError",
    "create_space",
    "Rule",
    "RuleError",
    "GAME_OF_LIFE",
    "get_rule",
    "Dynamic",
    "LifeLikeAutomaton",
    "life_update",
    "__version__",
]
