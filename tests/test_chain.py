from pathlib import Path

import pytest

from ordinals.chain import Chain, Network


@pytest.mark.parametrize(
    "text, chain",
    [
        ("mainnet", Chain.MAINNET),
        ("main", Chain.MAINNET),
        ("testnet", Chain.TESTNET),
        ("test", Chain.TESTNET),
        ("signet", Chain.SIGNET),
        ("regtest", Chain.REGTEST),
    ],
)
def test_parse(text, chain):
    assert Chain.parse(text) is chain


def test_parse_unknown_fails():
    with pytest.raises(ValueError):
        Chain.parse("moon")


def test_display_round_trips():
    for chain in Chain:
        assert Chain.parse(str(chain)) is chain


def test_network():
    assert Chain.MAINNET.network() is Network.BITCOIN
    assert Chain.TESTNET.network() is Network.TESTNET
    assert Chain.SIGNET.network() is Network.SIGNET
    assert Chain.REGTEST.network() is Network.REGTEST


def test_default_rpc_port():
    assert Chain.MAINNET.default_rpc_port() == 8332
    assert Chain.REGTEST.default_rpc_port() == 18443
    assert Chain.SIGNET.default_rpc_port() == 38332
    assert Chain.TESTNET.default_rpc_port() == 18332


def test_inscription_content_size_limit():
    assert Chain.MAINNET.inscription_content_size_limit() is None
    assert Chain.REGTEST.inscription_content_size_limit() is None
    assert Chain.TESTNET.inscription_content_size_limit() == 1024
    assert Chain.SIGNET.inscription_content_size_limit() == 1024


def test_first_inscription_height():
    assert Chain.MAINNET.first_inscription_height() == 767430
    assert Chain.REGTEST.first_inscription_height() == 0
    assert Chain.SIGNET.first_inscription_height() == 112402
    assert Chain.TESTNET.first_inscription_height() == 2413343


def test_join_with_data_dir(tmp_path):
    assert Chain.MAINNET.join_with_data_dir(tmp_path) == tmp_path
    assert Chain.TESTNET.join_with_data_dir(tmp_path) == tmp_path / "testnet3"
    assert Chain.SIGNET.join_with_data_dir(tmp_path) == tmp_path / "signet"
    assert Chain.REGTEST.join_with_data_dir(str(tmp_path)) == Path(tmp_path) / "regtest"