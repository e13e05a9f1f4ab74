"""Decimal notation for sats."""

from __future__ import annotations

from dataclasses import dataclass

from .height import Height


@dataclass(frozen=True)
class Decimal:
    """A sat written as block height and offset within that block."""

    height: Height
    offset: int

    def __str__(self) -> str:
        return f"{self.height}.{self.offset}"