import pytest

from ordinals.config import Config
from ordinals.inscription_id import InscriptionId, InscriptionIdParseError

A = "8d363b28528b0cb86b5fd48615493fb175bdf132d2a3d20b4251bba3f130a5abi0"
B = "8d363b28528b0cb86b5fd48615493fb175bdf132d2a3d20b4251bba3f130a5abi1"


def test_inscriptions_can_be_hidden():
    a = InscriptionId.parse(A)
    b = InscriptionId.parse(B)
    config = Config(frozenset([a]))
    assert config.is_hidden(a)
    assert not config.is_hidden(b)


def test_default_hides_nothing():
    assert not Config().is_hidden(InscriptionId.parse(A))


def test_from_mapping():
    config = Config.from_mapping({"hidden": [A]})
    assert config == Config(frozenset([InscriptionId.parse(A)]))
    assert not config.is_hidden(InscriptionId.parse(B))


def test_from_mapping_requires_hidden():
    with pytest.raises(ValueError, match="hidden"):
        Config.from_mapping({})


def test_from_mapping_rejects_bad_id():
    with pytest.raises(InscriptionIdParseError):
        Config.from_mapping({"hidden": ["foo"]})