# src/polychain/collaborators.py
from __future__ import annotations

"""Process-wide slots for the two external collaborators.

  - key manager: signing key lookup, public keys, signing
  - recovery primitive: ecdsa_recover(message, signature, use_chain_hash_convention)

Install once at node startup. Tests use the `using_*` context managers.
"""

import threading
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from polychain.crypto.eth import eth_recover
from polychain.crypto.keyring import KeyManager
from polychain.errors import KeyNotFound

RecoveryPrimitive = Callable[[bytes, bytes, bool], bytes]

_LOCK = threading.Lock()
_KEY_MANAGER: Optional[KeyManager] = None
_RECOVERY: RecoveryPrimitive = eth_recover


def set_key_manager(km: Optional[KeyManager]) -> None:
    global _KEY_MANAGER
    with _LOCK:
        _KEY_MANAGER = km


def get_key_manager() -> KeyManager:
    km = _KEY_MANAGER
    if km is None:
        raise KeyNotFound("no key manager installed")
    return km


def set_recovery_primitive(fn: Optional[RecoveryPrimitive]) -> None:
    """Install a recovery primitive; None restores the built-in secp256k1 one."""
    global _RECOVERY
    with _LOCK:
        _RECOVERY = fn or eth_recover


def get_recovery_primitive() -> RecoveryPrimitive:
    return _RECOVERY


@contextmanager
def using_key_manager(km: Optional[KeyManager]) -> Iterator[Optional[KeyManager]]:
    prev = _KEY_MANAGER
    set_key_manager(km)
    try:
        yield km
    finally:
        set_key_manager(prev)


@contextmanager
def using_recovery_primitive(fn: RecoveryPrimitive) -> Iterator[RecoveryPrimitive]:
    prev = _RECOVERY
    set_recovery_primitive(fn)
    try:
        yield fn
    finally:
        set_recovery_primitive(prev)


__all__ = [
    "RecoveryPrimitive",
    "get_key_manager",
    "get_recovery_primitive",
    "set_key_manager",
    "set_recovery_primitive",
    "using_key_manager",
    "using_recovery_primitive",
]
