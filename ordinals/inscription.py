"""Inscriptions carried in taproot witness envelopes."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .chain import Chain
from .media import Media, content_type_for_path
from .script import (
    OP_ENDIF,
    OP_FALSE,
    OP_IF,
    Instruction,
    Op,
    PushBytes,
    ScriptBuilder,
    ScriptError,
    instructions,
)

PROTOCOL_ID = b"ord"
BODY_TAG = b""
CONTENT_TYPE_TAG = b"\x01"
TAPROOT_ANNEX_PREFIX = 0x50
_CHUNK_SIZE = 520


class InscriptionErrorKind(Enum):
    EMPTY_WITNESS = "empty witness"
    INVALID_INSCRIPTION = "invalid inscription"
    KEY_PATH_SPEND = "key path spend"
    NO_INSCRIPTION = "no inscription"
    SCRIPT = "script error"
    UNRECOGNIZED_EVEN_FIELD = "unrecognized even field"


class InscriptionError(ValueError):
    """Raised when a witness holds no valid inscription."""

    def __init__(self, kind: InscriptionErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class Inscription:
    """Content and content type revealed in a witness envelope."""

    content_type: bytes | None = None
    body: bytes | None = None

    @classmethod
    def from_witness(cls, witness: Sequence[bytes]) -> Inscription | None:
        """The inscription in a witness, or None if it holds none."""
        try:
            return parse_witness(witness)
        except InscriptionError:
            return None

    @classmethod
    def from_transaction(cls, input_witnesses: Sequence[Sequence[bytes]]) -> Inscription | None:
        """The inscription in the first input's witness, if any."""
        if not input_witnesses:
            return None
        return cls.from_witness(input_witnesses[0])

    @classmethod
    def from_file(cls, chain: Chain, path: str | Path) -> Inscription:
        """Build an inscription from a file, checking the chain's size limit."""
        path = Path(path)
        try:
            body = path.read_bytes()
        except OSError as err:
            raise OSError(f"io error reading {path}: {err}") from err

        limit = chain.inscription_content_size_limit()
        if limit is not None and len(body) > limit:
            raise ValueError(
                f"content size of {len(body)} bytes exceeds {limit} byte limit "
                f"for {chain} inscriptions"
            )

        content_type = content_type_for_path(path)
        return cls(content_type=content_type.encode(), body=body)

    def append_reveal_script(self, builder: ScriptBuilder) -> bytes:
        """Append this inscription's envelope to ``builder`` and return the script."""
        builder.push_opcode(OP_FALSE).push_opcode(OP_IF).push_slice(PROTOCOL_ID)
        if self.content_type is not None:
            builder.push_slice(CONTENT_TYPE_TAG).push_slice(self.content_type)
        if self.body is not None:
            builder.push_slice(BODY_TAG)
            for start in range(0, len(self.body), _CHUNK_SIZE):
                builder.push_slice(self.body[start : start + _CHUNK_SIZE])
        builder.push_opcode(OP_ENDIF)
        return builder.into_script()

    def media(self) -> Media:
        if self.body is None:
            return Media.UNKNOWN
        content_type = self.content_type_text()
        if content_type is None:
            return Media.UNKNOWN
        try:
            return Media.parse(content_type)
        except ValueError:
            return Media.UNKNOWN

    def content_length(self) -> int | None:
        return None if self.body is None else len(self.body)

    def content_type_text(self) -> str | None:
        """The content type as text, or None if absent or not UTF-8."""
        if self.content_type is None:
            return None
        try:
            return self.content_type.decode("utf-8")
        except UnicodeDecodeError:
            return None

    def to_witness(self) -> list[bytes]:
        """A script-path witness revealing this inscription."""
        return [self.append_reveal_script(ScriptBuilder()), b""]


def parse_witness(witness: Sequence[bytes]) -> Inscription:
    """Parse the first inscription envelope in a witness, raising InscriptionError."""
    elements = [bytes(element) for element in witness]
    if not elements:
        raise InscriptionError(InscriptionErrorKind.EMPTY_WITNESS)
    if len(elements) == 1:
        raise InscriptionError(InscriptionErrorKind.KEY_PATH_SPEND)

    last = elements[-1]
    annex = bool(last) and last[0] == TAPROOT_ANNEX_PREFIX
    if len(elements) == 2 and annex:
        raise InscriptionError(InscriptionErrorKind.KEY_PATH_SPEND)

    script = elements[-1] if annex else elements[-2]
    return _Parser(script).parse_script()


_NOTHING = object()


class _Parser:
    def __init__(self, script: bytes) -> None:
        self._instructions: Iterator[Instruction] = instructions(script)
        self._peeked: object = _NOTHING

    def _pull(self) -> Instruction | None:
        try:
            return next(self._instructions, None)
        except ScriptError as err:
            raise InscriptionError(InscriptionErrorKind.SCRIPT) from err

    def _peek(self) -> Instruction | None:
        if self._peeked is _NOTHING:
            self._peeked = self._pull()
        return self._peeked  # type: ignore[return-value]

    def _advance(self) -> Instruction:
        if self._peeked is _NOTHING:
            instruction = self._pull()
        else:
            instruction = self._peeked  # type: ignore[assignment]
            self._peeked = _NOTHING
        if instruction is None:
            raise InscriptionError(InscriptionErrorKind.NO_INSCRIPTION)
        return instruction

    def _accept(self, instruction: Instruction) -> bool:
        if self._peek() == instruction:
            self._advance()
            return True
        return False

    def _expect_push(self) -> bytes:
        instruction = self._advance()
        if isinstance(instruction, PushBytes):
            return instruction.data
        raise InscriptionError(InscriptionErrorKind.INVALID_INSCRIPTION)

    def parse_script(self) -> Inscription:
        while True:
            if self._advance() == PushBytes(b""):
                inscription = self._parse_inscription()
                if inscription is not None:
                    return inscription

    def _parse_inscription(self) -> Inscription | None:
        if self._advance() != OP_IF:
            return None
        if not self._accept(PushBytes(PROTOCOL_ID)):
            raise InscriptionError(InscriptionErrorKind.NO_INSCRIPTION)

        fields: dict[bytes, bytes] = {}
        while True:
            instruction = self._advance()
            if instruction == PushBytes(BODY_TAG):
                body = bytearray()
                while not self._accept(OP_ENDIF):
                    body += self._expect_push()
                fields[BODY_TAG] = bytes(body)
                break
            if isinstance(instruction, PushBytes):
                tag = instruction.data
                if tag in fields:
                    raise InscriptionError(InscriptionErrorKind.INVALID_INSCRIPTION)
                fields[tag] = self._expect_push()
            elif instruction == OP_ENDIF:
                break
            else:
                raise InscriptionError(InscriptionErrorKind.INVALID_INSCRIPTION)

        body = fields.pop(BODY_TAG, None)
        content_type = fields.pop(CONTENT_TYPE_TAG, None)

        if any(tag and tag[0] % 2 == 0 for tag in fields):
            raise InscriptionError(InscriptionErrorKind.UNRECOGNIZED_EVEN_FIELD)

        return Inscription(content_type=content_type, body=body)


__all__ = [
    "Inscription",
    "InscriptionError",
    "InscriptionErrorKind",
    "Op",
    "parse_witness",
]