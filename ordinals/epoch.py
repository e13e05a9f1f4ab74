"""Halving epochs and the sats each one starts at."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from .constants import COIN_VALUE, SUBSIDY_HALVING_INTERVAL

if TYPE_CHECKING:
    from .height import Height

_EPOCH_COUNT = 34
_FIRST_POST_SUBSIDY = 33


def _subsidy(n: int) -> int:
    return (50 * COIN_VALUE) >> n if n < _FIRST_POST_SUBSIDY else 0


def _starting_sats() -> tuple[int, ...]:
    sats = []
    total = 0
    for n in range(_EPOCH_COUNT):
        sats.append(total)
        total += SUBSIDY_HALVING_INTERVAL * _subsidy(n)
    return tuple(sats)


@dataclass(frozen=True, order=True)
class Epoch:
    """A subsidy halving epoch, numbered from zero."""

    n: int

    STARTING_SATS: ClassVar[tuple[int, ...]] = _starting_sats()
    FIRST_POST_SUBSIDY: ClassVar[Epoch]

    def __post_init__(self) -> None:
        if self.n < 0:
            raise ValueError(f"invalid epoch: {self.n}")

    def __str__(self) -> str:
        return str(self.n)

    def subsidy(self) -> int:
        """Block subsidy in sats during this epoch."""
        return _subsidy(self.n)

    def starting_sat(self) -> int:
        """First sat mined in this epoch."""
        if self.n < len(self.STARTING_SATS):
            return self.STARTING_SATS[self.n]
        return self.STARTING_SATS[-1]

    def starting_height(self) -> Height:
        """First block height of this epoch."""
        from .height import Height

        return Height(self.n * SUBSIDY_HALVING_INTERVAL)

    @classmethod
    def from_sat(cls, sat: int) -> Epoch:
        """The epoch in which a sat was mined."""
        if sat < 0:
            raise ValueError(f"invalid sat: {sat}")
        index = bisect_right(cls.STARTING_SATS, sat) - 1
        return cls(min(index, _FIRST_POST_SUBSIDY))

    @classmethod
    def from_height(cls, height: Height) -> Epoch:
        """The epoch containing a block height."""
        return cls(height.n() // SUBSIDY_HALVING_INTERVAL)


Epoch.FIRST_POST_SUBSIDY = Epoch(_FIRST_POST_SUBSIDY)