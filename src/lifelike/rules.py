"""
Birth/survival rules for life-like cellular automata.

Rules are written in the usual B/S notation, e.g. "B3/S23" for Conway's
Game of Life: a cell is born with 3 live neighbors and keeps its value with
2 or 3.
"""

import re
from dataclasses import dataclass, field

# Largest live-neighbor count in a Moore neighborhood
MAX_NEIGHBORS = 8

_BS_NOTATION = re.compile(r"^B([0-8]*)/?S([0-8]*)$")
_SB_NOTATION = re.compile(r"^([0-8]*)/([0-8]*)$")


class RuleError(ValueError):
    """Invalid rule definition or rule string."""


@dataclass(frozen=True)
class Rule:
    """
    Outer-totalistic two-state rule.

    Attributes:
        birth: Neighbor counts that set a cell alive
        survival: Neighbor counts that keep a cell's current value
        states: Number of cell states, always 2 for life-like rules
    """

    birth: frozenset[int] = field(default_factory=frozenset)
    survival: frozenset[int] = field(default_factory=frozenset)
    states: int = 2

    def __post_init__(self) -> None:
        # Accept any iterable of counts but store frozensets
        object.__setattr__(self, "birth", frozenset(int(n) for n in self.birth))
        object.__setattr__(self, "survival", frozenset(int(n) for n in self.survival))
        self._validate()

    def _validate(self) -> None:
        for name, counts in (("birth", self.birth), ("survival", self.survival)):
            bad = sorted(n for n in counts if not 0 <= n <= MAX_NEIGHBORS)
            if bad:
                raise RuleError(
                    f"rule {name} counts must be in 0..{MAX_NEIGHBORS}, got {bad}"
                )
        if self.states != 2:
            raise RuleError(f"life-like rules have 2 states, got {self.states}")

    @classmethod
    def from_string(cls, rule_str: str) -> "Rule":
        """
        Parse a rule string.

        Accepts "B3/S23", "b3/s23", "B3S23" and the older survival-first
        form "23/3".
        """
        text = rule_str.upper().replace(" ", "")

        match = _BS_NOTATION.match(text)
        if match:
            birth, survival = match.groups()
        else:
            match = _SB_NOTATION.match(text)
            if not match:
                raise RuleError(f"cannot parse rule string {rule_str!r}")
            survival, birth = match.groups()

        return cls(birth={int(c) for c in birth}, survival={int(c) for c in survival})

    def to_string(self) -> str:
        """Canonical B/S notation, e.g. "B36/S23"."""
        b_str = "".join(str(n) for n in sorted(self.birth))
        s_str = "".join(str(n) for n in sorted(self.survival))
        return f"B{b_str}/S{s_str}"

    def __str__(self) -> str:
        return self.to_string()


GAME_OF_LIFE = Rule.from_string("B3/S23")
HIGHLIFE = Rule.from_string("B36/S23")
SEEDS = Rule.from_string("B2/S")
DAY_AND_NIGHT = Rule.from_string("B3678/S34678")
LIFE_WITHOUT_DEATH = Rule.from_string("B3/S012345678")
DIAMOEBA = Rule.from_string("B35678/S5678")

PRESETS: dict[str, Rule] = {
    "life": GAME_OF_LIFE,
    "highlife": HIGHLIFE,
    "seeds": SEEDS,
    "day_and_night": DAY_AND_NIGHT,
    "life_without_death": LIFE_WITHOUT_DEATH,
    "diamoeba": DIAMOEBA,
}


def get_rule(name: str) -> Rule:
    """Look up a preset by name, falling back to parsing a rule string."""
    preset = PRESETS.get(name.lower())
    if preset is not None:
        return preset
    return Rule.from_string(name)
