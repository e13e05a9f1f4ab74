"""Block heights."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .constants import DIFFCHANGE_INTERVAL, U64_MAX
from .epoch import Epoch

_DIGITS = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True, order=True)
class Height:
    """A block height."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= U64_MAX:
            raise ValueError(f"height out of range: {self.value}")

    def __str__(self) -> str:
        return str(self.value)

    def __add__(self, other: int) -> Height:
        return Height(self.value + other)

    def __sub__(self, other: int) -> Height:
        return Height(self.value - other)

    @classmethod
    def parse(cls, text: str) -> Height:
        """Parse a decimal height."""
        if not _DIGITS.fullmatch(text):
            raise ValueError(f"invalid height: {text!r}")
        return cls(int(text))

    def n(self) -> int:
        return self.value

    def subsidy(self) -> int:
        """Block subsidy in sats at this height."""
        return Epoch.from_height(self).subsidy()

    def starting_sat(self) -> int:
        """First sat mined in the block at this height."""
        epoch = Epoch.from_height(self)
        offset = self.value - epoch.starting_height().n()
        return epoch.starting_sat() + offset * epoch.subsidy()

    def period_offset(self) -> int:
        """Position within the current difficulty adjustment period."""
        return self.value % DIFFCHANGE_INTERVAL