"""Inscription identifiers: a reveal transaction id and an index."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from .constants import U32_MAX

_TXID_LEN = 64
_MIN_LEN = _TXID_LEN + 2
_HEX = re.compile(r"[0-9a-fA-F]*")
_INDEX = re.compile(r"\+?[0-9]+")


def _parse_txid(text: str) -> bytes:
    """Parse a displayed txid into its 32 internal-order bytes."""
    if len(text) != _TXID_LEN:
        raise ValueError(f"bad hex string length {len(text)} (expected {_TXID_LEN})")
    if not _HEX.fullmatch(text):
        bad = next(char for char in text if char not in "0123456789abcdefABCDEF")
        raise ValueError(f"bad hex character {bad}")
    return bytes.fromhex(text)[::-1]


def _format_txid(txid: bytes) -> str:
    """Display a txid, most significant byte first."""
    return txid[::-1].hex()


class ParseErrorKind(Enum):
    CHARACTER = "character"
    LENGTH = "length"
    SEPARATOR = "separator"
    TXID = "txid"
    INDEX = "index"


class InscriptionIdParseError(ValueError):
    """Raised when text is not a valid inscription id."""

    def __init__(self, kind: ParseErrorKind, detail: object) -> None:
        messages = {
            ParseErrorKind.CHARACTER: f"invalid character: '{detail}'",
            ParseErrorKind.LENGTH: f"invalid length: {detail}",
            ParseErrorKind.SEPARATOR: f"invalid seprator: `{detail}`",
            ParseErrorKind.TXID: f"invalid txid: {detail}",
            ParseErrorKind.INDEX: f"invalid index: {detail}",
        }
        super().__init__(messages[kind])
        self.kind = kind
        self.detail = detail


@dataclass(frozen=True)
class InscriptionId:
    """An inscription, named by its reveal txid and its index there."""

    txid: bytes
    index: int = 0

    def __post_init__(self) -> None:
        if len(self.txid) != 32:
            raise ValueError(f"txid must be 32 bytes, not {len(self.txid)}")
        if not 0 <= self.index <= U32_MAX:
            raise ValueError(f"index out of range: {self.index}")

    def __str__(self) -> str:
        return f"{_format_txid(self.txid)}i{self.index}"

    @classmethod
    def parse(cls, text: str) -> InscriptionId:
        """Parse ``<txid>i<index>``."""
        bad = next((char for char in text if not char.isascii()), None)
        if bad is not None:
            raise InscriptionIdParseError(ParseErrorKind.CHARACTER, bad)

        if len(text) < _MIN_LEN:
            raise InscriptionIdParseError(ParseErrorKind.LENGTH, len(text))

        separator = text[_TXID_LEN]
        if separator != "i":
            raise InscriptionIdParseError(ParseErrorKind.SEPARATOR, separator)

        try:
            txid = _parse_txid(text[:_TXID_LEN])
        except ValueError as err:
            raise InscriptionIdParseError(ParseErrorKind.TXID, err) from None

        vout = text[_TXID_LEN + 1 :]
        if not _INDEX.fullmatch(vout):
            raise InscriptionIdParseError(ParseErrorKind.INDEX, "invalid digit found in string")
        index = int(vout)
        if index > U32_MAX:
            raise InscriptionIdParseError(
                ParseErrorKind.INDEX, "number too large to fit in target type"
            )

        return cls(txid, index)

    @classmethod
    def from_txid(cls, txid: bytes) -> InscriptionId:
        """The first inscription of a reveal transaction."""
        return cls(bytes(txid), 0)