"""Block times, confirmed or projected."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .constants import timestamp as _timestamp


@dataclass(frozen=True)
class Blocktime:
    """The time of a block, either confirmed on chain or expected in future."""

    timestamp: datetime
    is_confirmed: bool = True

    @classmethod
    def confirmed(cls, seconds: int) -> Blocktime:
        """A confirmed block time from a header time in seconds."""
        return cls(_timestamp(seconds), True)

    @classmethod
    def expected(cls, when: datetime) -> Blocktime:
        """A projected time for a block not yet mined."""
        return cls(when, False)

    def suffix(self) -> str:
        return "" if self.is_confirmed else " (expected)"