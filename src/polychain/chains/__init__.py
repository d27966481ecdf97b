# src/polychain/chains/__init__.py
"""
Per-chain capability implementations.

`chain_for` is the single place that maps a ChainId to its implementation.
It is an explicit branch per chain, not a mutable registry: adding a ChainId
member without a branch here makes `chain_for` raise UnsupportedChain for it.
"""

from __future__ import annotations

from typing import Type

from polychain.chain_id import ChainId
from polychain.chains.base import Chain, PlaceholderChain
from polychain.chains.ethereum import Ethereum
from polychain.chains.placeholders import Compound, Polkadot, Solana, Tezos
from polychain.errors import UnsupportedChain


def chain_for(chain_id: ChainId) -> Type[Chain]:
    if chain_id == ChainId.COMPOUND:
        return Compound
    if chain_id == ChainId.ETHEREUM:
        return Ethereum
    if chain_id == ChainId.POLKADOT:
        return Polkadot
    if chain_id == ChainId.SOLANA:
        return Solana
    if chain_id == ChainId.TEZOS:
        return Tezos
    raise UnsupportedChain(details=chain_id)


__all__ = [
    "Chain",
    "Compound",
    "Ethereum",
    "PlaceholderChain",
    "Polkadot",
    "Solana",
    "Tezos",
    "chain_for",
]
