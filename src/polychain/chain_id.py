# src/polychain/chain_id.py
from __future__ import annotations

from enum import IntEnum
from typing import Dict

from polychain.errors import BadChainId


class ChainId(IntEnum):
    """Closed set of supported chains.

    Values are persisted as discriminants. New chains are appended with the
    next free value; existing values never change.
    """

    COMPOUND = 0
    ETHEREUM = 1
    POLKADOT = 2
    SOLANA = 3
    TEZOS = 4

    @classmethod
    def default(cls) -> "ChainId":
        return cls.ETHEREUM

    @classmethod
    def from_str(cls, s: str) -> "ChainId":
        """Parse a chain tag such as "eth". ASCII case-insensitive; whitespace is not trimmed."""
        if not isinstance(s, str) or not s.isascii():
            raise BadChainId(details=s)
        chain = _TAGS.get(s.upper())
        if chain is None:
            raise BadChainId(details=s)
        return chain

    @property
    def tag(self) -> str:
        return _SHORT_NAMES[self]


_SHORT_NAMES: Dict[ChainId, str] = {
    ChainId.COMPOUND: "COMP",
    ChainId.ETHEREUM: "ETH",
    ChainId.POLKADOT: "DOT",
    ChainId.SOLANA: "SOL",
    ChainId.TEZOS: "TEZ",
}

# Only tags listed here are accepted from text config.
_TAGS: Dict[str, ChainId] = {
    "ETH": ChainId.ETHEREUM,
    "SOL": ChainId.SOLANA,
}


__all__ = ["ChainId"]
