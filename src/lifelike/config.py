"""
Configuration dataclass for lifelike simulation runs.
"""

from dataclasses import dataclass, asdict
from typing import Any, Optional

from .patterns import PATTERNS, get_pattern
from .rules import Rule, get_rule

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """
    Complete configuration for a two-axis life simulation.

    Attributes:
        width: Number of columns (X extent)
        height: Number of rows (Y extent)
        rule: Preset name or rule string such as "B3/S23"
        steps: Number of generations to run
        seed: Random seed for the initial fill
        density: Probability that a cell starts alive in a random fill
        pattern: Named pattern placed at the grid centre instead of a random fill
        log_level: Logging level name for the command line driver
    """

    # Grid
    width: int = 64
    height: int = 64

    # Dynamics
    rule: str = "B3/S23"
    steps: int = 100

    # Initialization
    seed: Optional[int] = None
    density: float = 0.3
    pattern: Optional[str] = None

    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        self._validate()

    def _validate(self) -> None:
        """Check that all parameters are in valid ranges."""
        # Below 3 cells an axis wraps onto itself and neighbors repeat
        if self.width < 3:
            raise ValueError(f"width must be >= 3, got {self.width}")

        if self.height < 3:
            raise ValueError(f"height must be >= 3, got {self.height}")

        if self.steps < 0:
            raise ValueError(f"steps must be >= 0, got {self.steps}")

        if not 0 <= self.density <= 1:
            raise ValueError(f"density must be in [0, 1], got {self.density}")

        if self.pattern is not None and self.pattern.lower() not in PATTERNS:
            raise ValueError(f"pattern must be one of {sorted(PATTERNS)}, got {self.pattern}")

        if self.pattern is not None:
            rows = get_pattern(self.pattern)
            if len(rows) > self.height or len(rows[0]) > self.width:
                raise ValueError(
                    f"pattern {self.pattern} does not fit a {self.width}x{self.height} grid"
                )

        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level}")

        # Raises RuleError (a ValueError) for unparseable rules
        get_rule(self.rule)

    @property
    def extents(self) -> tuple[int, int]:
        """Grid extents (X, Y)."""
        return (self.width, self.height)

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    @property
    def life_rule(self) -> Rule:
        """The parsed rule."""
        return get_rule(self.rule)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        return cls(**d)

    @classmethod
    def from_args(cls, args: Any) -> "Config":
        """Create config from argparse namespace."""
        # Extract only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        config_dict = {k: v for k, v in vars(args).items() if k in known_fields and v is not None}
        return cls(**config_dict)
