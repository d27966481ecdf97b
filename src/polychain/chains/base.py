# src/polychain/chains/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Type

from polychain.chain_id import ChainId
from polychain.errors import UnsupportedOperation


class Chain(ABC):
    """Capability contract every supported chain implements.

    Classes are never instantiated; the operations are classmethods and the
    associated types are class attributes so ledger code can stay generic over
    "which chain" while payload widths stay checked per chain.
    """

    ID: ClassVar[ChainId]
    NAME: ClassVar[str]

    # Associated types. Widths are byte lengths, integers are unsigned bit widths.
    ADDRESS_SIZE: ClassVar[int] = 20
    HASH_SIZE: ClassVar[int] = 32
    PUBLIC_KEY_SIZE: ClassVar[int] = 64
    SIGNATURE_SIZE: ClassVar[int] = 65
    AMOUNT_BITS: ClassVar[int] = 128
    CASH_INDEX_BITS: ClassVar[int] = 128
    RATE_BITS: ClassVar[int] = 128
    TIMESTAMP_BITS: ClassVar[int] = 128

    EventId: ClassVar[Type[tuple]]
    Event: ClassVar[type]

    @classmethod
    @abstractmethod
    def zero_hash(cls) -> bytes:
        ...

    @classmethod
    @abstractmethod
    def hash_bytes(cls, data: bytes) -> bytes:
        ...

    @classmethod
    @abstractmethod
    def recover_address(cls, data: bytes, signature: bytes) -> bytes:
        ...

    @classmethod
    @abstractmethod
    def sign_message(cls, message: bytes) -> bytes:
        ...

    @classmethod
    @abstractmethod
    def to_address(cls, addr: str) -> bytes:
        ...

    @classmethod
    @abstractmethod
    def signer_address(cls) -> bytes:
        ...

    @classmethod
    def format_address(cls, address: bytes) -> str:
        raise UnsupportedOperation(cls.NAME, "format_address")


class PlaceholderChain(Chain):
    """A chain that is enumerated but not onboarded yet. Every operation fails loudly."""

    @classmethod
    def _unsupported(cls, operation: str) -> UnsupportedOperation:
        return UnsupportedOperation(cls.NAME, operation)

    @classmethod
    def zero_hash(cls) -> bytes:
        raise cls._unsupported("zero_hash")

    @classmethod
    def hash_bytes(cls, data: bytes) -> bytes:
        raise cls._unsupported("hash_bytes")

    @classmethod
    def recover_address(cls, data: bytes, signature: bytes) -> bytes:
        raise cls._unsupported("recover_address")

    @classmethod
    def sign_message(cls, message: bytes) -> bytes:
        raise cls._unsupported("sign_message")

    @classmethod
    def to_address(cls, addr: str) -> bytes:
        raise cls._unsupported("to_address")

    @classmethod
    def signer_address(cls) -> bytes:
        raise cls._unsupported("signer_address")


__all__ = ["Chain", "PlaceholderChain"]
