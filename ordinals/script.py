"""Minimal bitcoin script building and instruction decoding."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from dataclasses import dataclass

_PUSHBYTES_MAX = 0x4B
_PUSHDATA1 = 0x4C
_PUSHDATA2 = 0x4D
_PUSHDATA4 = 0x4E


class ScriptError(ValueError):
    """Raised when a script cannot be decoded."""


@dataclass(frozen=True)
class Op:
    """A non-push opcode."""

    code: int

    def __post_init__(self) -> None:
        if not 0 <= self.code <= 0xFF:
            raise ValueError(f"invalid opcode: {self.code}")


@dataclass(frozen=True)
class PushBytes:
    """A data push."""

    data: bytes


Instruction = Op | PushBytes

OP_FALSE = Op(0x00)
OP_IF = Op(0x63)
OP_ENDIF = Op(0x68)
OP_CHECKSIG = Op(0xAC)


class ScriptBuilder:
    """Accumulates opcodes and data pushes into a script."""

    def __init__(self) -> None:
        self._script = bytearray()

    def push_opcode(self, opcode: Op) -> ScriptBuilder:
        self._script.append(opcode.code)
        return self

    def push_slice(self, data: bytes) -> ScriptBuilder:
        """Push data with the smallest push opcode that can carry its length."""
        data = bytes(data)
        size = len(data)
        if size <= _PUSHBYTES_MAX:
            self._script.append(size)
        elif size < 0x100:
            self._script += bytes((_PUSHDATA1, size))
        elif size < 0x10000:
            self._script.append(_PUSHDATA2)
            self._script += struct.pack("<H", size)
        elif size < 0x100000000:
            self._script.append(_PUSHDATA4)
            self._script += struct.pack("<I", size)
        else:
            raise ValueError(f"push of {size} bytes is too large")
        self._script += data
        return self

    def into_script(self) -> bytes:
        return bytes(self._script)


def _read_length(script: bytes, position: int, width: int) -> tuple[int, int]:
    end = position + width
    if end > len(script):
        raise ScriptError("unexpected end of script")
    return int.from_bytes(script[position:end], "little"), end


def instructions(script: bytes) -> Iterator[Instruction]:
    """Decode a script lazily, raising ScriptError where it is malformed."""
    script = bytes(script)
    position = 0
    length = len(script)
    while position < length:
        code = script[position]
        position += 1
        if code <= _PUSHBYTES_MAX:
            size = code
        elif code == _PUSHDATA1:
            size, position = _read_length(script, position, 1)
        elif code == _PUSHDATA2:
            size, position = _read_length(script, position, 2)
        elif code == _PUSHDATA4:
            size, position = _read_length(script, position, 4)
        else:
            yield Op(code)
            continue
        if position + size > length:
            raise ScriptError("unexpected end of script")
        yield PushBytes(script[position : position + size])
        position += size