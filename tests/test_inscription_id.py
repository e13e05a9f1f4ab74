import pytest

from ordinals.inscription_id import (
    InscriptionId,
    InscriptionIdParseError,
    ParseErrorKind,
)

ONES = "1111111111111111111111111111111111111111111111111111111111111111"


def txid(n: int) -> bytes:
    return bytes([n * 0x11]) * 32


def inscription_id(n: int) -> InscriptionId:
    return InscriptionId(txid(n), n)


def test_display():
    assert str(inscription_id(1)) == ONES + "i1"
    assert str(InscriptionId(txid(1), 0)) == ONES + "i0"
    assert str(InscriptionId(txid(1), 0xFFFFFFFF)) == ONES + "i4294967295"


def test_from_str():
    assert InscriptionId.parse(ONES + "i1") == inscription_id(1)
    assert InscriptionId.parse(ONES + "i4294967295") == InscriptionId(txid(1), 0xFFFFFFFF)


def test_round_trip_keeps_text():
    text = "0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdefi1"
    assert str(InscriptionId.parse(text)) == text


def test_from_str_bad_character():
    with pytest.raises(InscriptionIdParseError) as info:
        InscriptionId.parse("→")
    assert info.value.kind is ParseErrorKind.CHARACTER
    assert info.value.detail == "→"
    assert str(info.value) == "invalid character: '→'"


def test_from_str_bad_length():
    with pytest.raises(InscriptionIdParseError) as info:
        InscriptionId.parse("foo")
    assert info.value.kind is ParseErrorKind.LENGTH
    assert info.value.detail == 3


def test_from_str_bad_separator():
    with pytest.raises(InscriptionIdParseError) as info:
        InscriptionId.parse("0" * 64 + "x0")
    assert info.value.kind is ParseErrorKind.SEPARATOR
    assert info.value.detail == "x"


def test_from_str_bad_index():
    with pytest.raises(InscriptionIdParseError) as info:
        InscriptionId.parse("0" * 64 + "ifoo")
    assert info.value.kind is ParseErrorKind.INDEX


def test_from_str_index_too_large():
    with pytest.raises(InscriptionIdParseError) as info:
        InscriptionId.parse(ONES + "i4294967296")
    assert info.value.kind is ParseErrorKind.INDEX


def test_from_str_bad_txid():
    with pytest.raises(InscriptionIdParseError) as info:
        InscriptionId.parse("x" + "0" * 63 + "i0")
    assert info.value.kind is ParseErrorKind.TXID


def test_from_txid_uses_index_zero():
    assert InscriptionId.from_txid(txid(1)) == InscriptionId.parse(ONES + "i0")