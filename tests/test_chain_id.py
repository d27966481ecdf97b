from __future__ import annotations

import pytest

from polychain.chain_id import ChainId
from polychain.errors import BadChainId


def test_discriminants_are_stable() -> None:
    # Persisted values depend on these numbers; only append new chains.
    assert [(c.name, int(c)) for c in ChainId] == [
        ("COMPOUND", 0),
        ("ETHEREUM", 1),
        ("POLKADOT", 2),
        ("SOLANA", 3),
        ("TEZOS", 4),
    ]


def test_default_is_ethereum() -> None:
    assert ChainId.default() is ChainId.ETHEREUM


@pytest.mark.parametrize("tag", ["ETH", "eth", "Eth"])
def test_from_str_is_case_insensitive(tag: str) -> None:
    assert ChainId.from_str(tag) is ChainId.ETHEREUM


def test_from_str_sol() -> None:
    assert ChainId.from_str("sol") is ChainId.SOLANA


@pytest.mark.parametrize("tag", ["xyz", "", "ethereum", "DOT", "1", " eth", "eth ", "\teth", "\u017fol"])
def test_from_str_unknown_tag_is_bad_chain_id(tag: str) -> None:
    with pytest.raises(BadChainId) as ei:
        ChainId.from_str(tag)
    assert ei.value.code == "bad_chain_id"


def test_every_chain_has_a_short_tag() -> None:
    assert {c.tag for c in ChainId} == {"COMP", "ETH", "DOT", "SOL", "TEZ"}


def test_from_str_rejects_non_string() -> None:
    with pytest.raises(BadChainId):
        ChainId.from_str(None)  # type: ignore[arg-type]
