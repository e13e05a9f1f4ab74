"""Tracking which sat ranges flow into which outputs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from ..height import Height
from .entry import SAT_RANGE_SIZE, load_sat_range, store_sat_range

SatRange = tuple[int, int]


class InsufficientInputsError(ValueError):
    """Raised when inputs carry fewer sats than the outputs need."""

    def __init__(self) -> None:
        super().__init__("insufficient inputs for transaction outputs")


def encode_ranges(ranges: Iterable[SatRange]) -> bytes:
    """Concatenate the encodings of sat ranges."""
    return b"".join(store_sat_range(sat_range) for sat_range in ranges)


def decode_ranges(data: bytes) -> list[SatRange]:
    """Decode whole 11-byte chunks; a trailing partial chunk is ignored."""
    whole = len(data) - len(data) % SAT_RANGE_SIZE
    return [
        load_sat_range(data[start : start + SAT_RANGE_SIZE])
        for start in range(0, whole, SAT_RANGE_SIZE)
    ]


def coinbase_range(height: Height) -> SatRange | None:
    """The range of new sats mined in a block, or None once the subsidy is gone."""
    subsidy = height.subsidy()
    if subsidy == 0:
        return None
    start = height.starting_sat()
    return (start, start + subsidy)


def assign_output_ranges(
    input_ranges: Iterable[SatRange], output_values: Iterable[int]
) -> tuple[list[list[SatRange]], list[SatRange]]:
    """Hand input sat ranges to outputs in order, first in first out.

    Returns the ranges of each output and the ranges left over as fees.
    """
    pending: deque[SatRange] = deque(input_ranges)
    outputs: list[list[SatRange]] = []

    for value in output_values:
        if value < 0:
            raise ValueError(f"invalid output value: {value}")
        assigned: list[SatRange] = []
        remaining = value
        while remaining > 0:
            if not pending:
                raise InsufficientInputsError()
            start, end = pending.popleft()
            if end - start > remaining:
                middle = start + remaining
                pending.appendleft((middle, end))
                end = middle
            assigned.append((start, end))
            remaining -= end - start
        outputs.append(assigned)

    return outputs, list(pending)