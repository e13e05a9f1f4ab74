"""Degree notation for sats."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import CYCLE_EPOCHS, DIFFCHANGE_INTERVAL, SUBSIDY_HALVING_INTERVAL
from .height import Height


@dataclass(frozen=True)
class Degree:
    """A sat's position as cycle, epoch offset, period offset and block offset."""

    hour: int
    minute: int
    second: int
    third: int

    def __str__(self) -> str:
        return f"{self.hour}°{self.minute}′{self.second}″{self.third}‴"

    @classmethod
    def from_height(cls, height: Height, third: int) -> Degree:
        """Build the degree of the sat at offset ``third`` in block ``height``."""
        n = height.n()
        return cls(
            hour=n // (CYCLE_EPOCHS * SUBSIDY_HALVING_INTERVAL),
            minute=n % SUBSIDY_HALVING_INTERVAL,
            second=n % DIFFCHANGE_INTERVAL,
            third=third,
        )