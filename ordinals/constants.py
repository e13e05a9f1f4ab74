"""Protocol constants and small helpers shared across the package."""

from datetime import datetime, timezone

COIN_VALUE = 100_000_000
DIFFCHANGE_INTERVAL = 2016
SUBSIDY_HALVING_INTERVAL = 210_000
CYCLE_EPOCHS = 6

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1


def timestamp(seconds: int) -> datetime:
    """Return the UTC datetime for a block header time in seconds."""
    if not 0 <= seconds <= U32_MAX:
        raise ValueError(f"block time out of range: {seconds}")
    return datetime.fromtimestamp(seconds, tz=timezone.utc)