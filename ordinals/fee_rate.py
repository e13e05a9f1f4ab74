"""Fee rates in sats per virtual byte."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .constants import U64_MAX


@dataclass(frozen=True)
class FeeRate:
    """A non-negative, finite fee rate in sats per vbyte."""

    rate: float

    def __post_init__(self) -> None:
        rate = self.rate
        if math.isnan(rate) or math.isinf(rate) or math.copysign(1.0, rate) < 0:
            raise ValueError(f"invalid fee rate: {rate}")

    @classmethod
    def parse(cls, text: str) -> FeeRate:
        try:
            rate = float(text)
        except ValueError:
            raise ValueError(f"invalid float literal: {text!r}") from None
        return cls.from_float(rate)

    @classmethod
    def from_float(cls, rate: float) -> FeeRate:
        return cls(float(rate))

    def fee(self, vsize: int) -> int:
        """Fee in sats for a transaction of ``vsize`` vbytes, rounded half away from zero."""
        total = self.rate * vsize
        if not math.isfinite(total):
            return U64_MAX
        floor = math.floor(total)
        rounded = floor + 1 if total - floor >= 0.5 else floor
        return min(max(rounded, 0), U64_MAX)