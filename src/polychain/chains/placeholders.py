# src/polychain/chains/placeholders.py
from __future__ import annotations

"""Chains that are enumerated but not onboarded.

Each needs its native scheme (sr25519 for Polkadot, ed25519 for Solana, ...)
before any operation can be filled in.
"""

from polychain.chain_id import ChainId
from polychain.chains.base import PlaceholderChain
from polychain.chains.events import EmptyEvent, PairEventId, WidePairEventId


class Compound(PlaceholderChain):
    ID = ChainId.COMPOUND
    NAME = "Compound"

    EventId = PairEventId
    Event = EmptyEvent


class Polkadot(PlaceholderChain):
    ID = ChainId.POLKADOT
    NAME = "Polkadot"

    EventId = PairEventId
    Event = EmptyEvent


class Solana(PlaceholderChain):
    ID = ChainId.SOLANA
    NAME = "Solana"

    EventId = PairEventId
    Event = EmptyEvent


class Tezos(PlaceholderChain):
    ID = ChainId.TEZOS
    NAME = "Tezos"

    EventId = WidePairEventId
    Event = EmptyEvent


__all__ = ["Compound", "Polkadot", "Solana", "Tezos"]
