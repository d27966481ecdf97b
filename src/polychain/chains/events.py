# src/polychain/chains/events.py
from __future__ import annotations

"""Per-chain event identity and payload types.

Event ids are NamedTuples so they order lexicographically (block, then log
index). Payload integers are range-checked against the chain's widths.
"""

from dataclasses import dataclass
from typing import NamedTuple, Union

from polychain.errors import BadPayload

U32_MAX = (1 << 32) - 1
U64_MAX = (1 << 64) - 1
U128_MAX = (1 << 128) - 1


def _check_uint(v: int, hi: int, *, field: str) -> None:
    if isinstance(v, bool) or not isinstance(v, int) or v < 0 or v > hi:
        raise BadPayload(f"{field} out of range", details=v)


def _check_address(v: bytes, *, field: str, size: int = 20) -> None:
    if not isinstance(v, bytes) or len(v) != size:
        raise BadPayload(f"{field} must be {size} bytes", details=v)


# ---------------------------------------------------------------------------
# Ethereum
# ---------------------------------------------------------------------------


class EthEventId(NamedTuple):
    block_number: int
    log_index: int

    def validate(self) -> "EthEventId":
        _check_uint(self.block_number, U32_MAX, field="block_number")
        _check_uint(self.log_index, U32_MAX, field="log_index")
        return self


@dataclass(frozen=True, slots=True)
class Lock:
    asset: bytes
    holder: bytes
    amount: int

    def __post_init__(self) -> None:
        _check_address(self.asset, field="asset")
        _check_address(self.holder, field="holder")
        _check_uint(self.amount, U128_MAX, field="amount")


@dataclass(frozen=True, slots=True)
class LockCash:
    holder: bytes
    amount: int
    index: int

    def __post_init__(self) -> None:
        _check_address(self.holder, field="holder")
        _check_uint(self.amount, U128_MAX, field="amount")
        _check_uint(self.index, U128_MAX, field="index")


@dataclass(frozen=True, slots=True)
class Gov:
    pass


EthEventData = Union[Lock, LockCash, Gov]


@dataclass(frozen=True, slots=True)
class EthEvent:
    id: EthEventId
    data: EthEventData

    def __post_init__(self) -> None:
        if not isinstance(self.id, EthEventId):
            object.__setattr__(self, "id", EthEventId(*self.id))
        self.id.validate()
        if not isinstance(self.data, (Lock, LockCash, Gov)):
            raise BadPayload("unknown ethereum event data", details=type(self.data).__name__)


# ---------------------------------------------------------------------------
# Placeholder chains
# ---------------------------------------------------------------------------


class PairEventId(NamedTuple):
    """(u64, u64) event id used by Compound, Polkadot and Solana."""

    major: int
    minor: int

    def validate(self) -> "PairEventId":
        _check_uint(self.major, U64_MAX, field="major")
        _check_uint(self.minor, U64_MAX, field="minor")
        return self


class WidePairEventId(NamedTuple):
    """(u128, u128) event id used by Tezos."""

    major: int
    minor: int

    def validate(self) -> "WidePairEventId":
        _check_uint(self.major, U128_MAX, field="major")
        _check_uint(self.minor, U128_MAX, field="minor")
        return self


@dataclass(frozen=True, slots=True)
class EmptyEvent:
    pass


__all__ = [
    "EmptyEvent",
    "EthEvent",
    "EthEventData",
    "EthEventId",
    "Gov",
    "Lock",
    "LockCash",
    "PairEventId",
    "U128_MAX",
    "U32_MAX",
    "U64_MAX",
    "WidePairEventId",
]
