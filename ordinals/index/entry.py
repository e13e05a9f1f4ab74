"""Fixed-width encodings of values kept in the index."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from ..constants import U32_MAX, U64_MAX
from ..inscription_id import InscriptionId, _format_txid, _parse_txid

_OUTPOINT_MAX_LEN = 75
_BASE_BITS = 51
_DELTA_BITS = 33
SAT_RANGE_SIZE = 11


@dataclass(frozen=True, order=True)
class OutPoint:
    """A transaction output, named by txid and output index."""

    txid: bytes
    vout: int

    def __post_init__(self) -> None:
        if len(self.txid) != 32:
            raise ValueError(f"txid must be 32 bytes, not {len(self.txid)}")
        if not 0 <= self.vout <= U32_MAX:
            raise ValueError(f"vout out of range: {self.vout}")

    def __str__(self) -> str:
        return f"{_format_txid(self.txid)}:{self.vout}"

    @classmethod
    def null(cls) -> OutPoint:
        """The outpoint spent by coinbase inputs, also used for lost sats."""
        return cls(bytes(32), U32_MAX)

    def is_null(self) -> bool:
        return self == OutPoint.null()

    @classmethod
    def parse(cls, text: str) -> OutPoint:
        """Parse ``<txid>:<vout>``."""
        if len(text) > _OUTPOINT_MAX_LEN:
            raise ValueError("vout should be at most 10 digits")
        colon = text.find(":")
        if colon < 0 or colon != text.rfind(":"):
            raise ValueError("OutPoint not in <txid>:<vout> format")
        try:
            txid = _parse_txid(text[:colon])
        except ValueError:
            raise ValueError("error parsing TXID") from None
        vout = text[colon + 1 :]
        if len(vout) > 1 and vout[0] in "0+":
            raise ValueError("no leading zeroes or + allowed in vout part")
        if not vout.isascii() or not vout.isdigit() or int(vout) > U32_MAX:
            raise ValueError("error parsing vout")
        return cls(txid, int(vout))

    def store(self) -> bytes:
        """Consensus encoding: txid bytes then little-endian vout."""
        return self.txid + struct.pack("<I", self.vout)

    @classmethod
    def load(cls, value: bytes) -> OutPoint:
        if len(value) != 36:
            raise ValueError(f"outpoint value must be 36 bytes, not {len(value)}")
        (vout,) = struct.unpack("<I", value[32:])
        return cls(bytes(value[:32]), vout)


@dataclass(frozen=True)
class InscriptionEntry:
    """What the index records about an inscription."""

    fee: int
    height: int
    number: int
    sat: int | None
    timestamp: int

    def store(self) -> tuple[int, int, int, int, int]:
        sat = U64_MAX if self.sat is None else self.sat
        return (self.fee, self.height, self.number, sat, self.timestamp)

    @classmethod
    def load(cls, value: tuple[int, int, int, int, int]) -> InscriptionEntry:
        fee, height, number, sat, timestamp = value
        return cls(
            fee=fee,
            height=height,
            number=number,
            sat=None if sat == U64_MAX else sat,
            timestamp=timestamp,
        )


def store_inscription_id(inscription_id: InscriptionId) -> bytes:
    """Txid bytes followed by the big-endian index."""
    return inscription_id.txid + struct.pack(">I", inscription_id.index)


def load_inscription_id(value: bytes) -> InscriptionId:
    if len(value) != 36:
        raise ValueError(f"inscription id value must be 36 bytes, not {len(value)}")
    (index,) = struct.unpack(">I", value[32:])
    return InscriptionId(bytes(value[:32]), index)


def store_sat_range(sat_range: tuple[int, int]) -> bytes:
    """Pack a half-open sat range as a 51-bit base and 33-bit length in 11 bytes."""
    start, end = sat_range
    if not 0 <= start < 1 << _BASE_BITS:
        raise ValueError(f"range start out of range: {start}")
    delta = end - start
    if not 0 <= delta < 1 << _DELTA_BITS:
        raise ValueError(f"invalid range length: {start}..{end}")
    return (start | delta << _BASE_BITS).to_bytes(SAT_RANGE_SIZE, "little")


def load_sat_range(value: bytes) -> tuple[int, int]:
    if len(value) != SAT_RANGE_SIZE:
        raise ValueError(f"sat range value must be {SAT_RANGE_SIZE} bytes, not {len(value)}")
    packed = int.from_bytes(value, "little")
    base = packed & ((1 << _BASE_BITS) - 1)
    delta = packed >> _BASE_BITS
    return (base, base + delta)