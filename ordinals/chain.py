"""Supported bitcoin chains."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class Network(Enum):
    """Bitcoin network a chain runs on."""

    BITCOIN = "bitcoin"
    TESTNET = "testnet"
    SIGNET = "signet"
    REGTEST = "regtest"


class Chain(Enum):
    """A bitcoin chain the indexer can follow."""

    MAINNET = "mainnet"
    TESTNET = "testnet"
    SIGNET = "signet"
    REGTEST = "regtest"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> Chain:
        """Parse a chain name, accepting the aliases ``main`` and ``test``."""
        aliases = {"main": cls.MAINNET, "test": cls.TESTNET}
        if text in aliases:
            return aliases[text]
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"invalid chain: {text!r}") from None

    def network(self) -> Network:
        return {
            Chain.MAINNET: Network.BITCOIN,
            Chain.TESTNET: Network.TESTNET,
            Chain.SIGNET: Network.SIGNET,
            Chain.REGTEST: Network.REGTEST,
        }[self]

    def default_rpc_port(self) -> int:
        return {
            Chain.MAINNET: 8332,
            Chain.REGTEST: 18443,
            Chain.SIGNET: 38332,
            Chain.TESTNET: 18332,
        }[self]

    def inscription_content_size_limit(self) -> int | None:
        """Maximum inscription body size in bytes, or None if unlimited."""
        if self in (Chain.TESTNET, Chain.SIGNET):
            return 1024
        return None

    def first_inscription_height(self) -> int:
        return {
            Chain.MAINNET: 767430,
            Chain.REGTEST: 0,
            Chain.SIGNET: 112402,
            Chain.TESTNET: 2413343,
        }[self]

    def join_with_data_dir(self, data_dir: str | Path) -> Path:
        """Directory holding this chain's data under ``data_dir``."""
        base = Path(data_dir)
        subdirectory = {
            Chain.TESTNET: "testnet3",
            Chain.SIGNET: "signet",
            Chain.REGTEST: "regtest",
        }.get(self)
        return base if subdirectory is None else base / subdirectory