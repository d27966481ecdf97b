# src/polychain/crypto/keyring.py
from __future__ import annotations

"""Key manager boundary.

The core never holds node keys itself. It asks a KeyManager for:
  - the signing key id configured for a chain
  - the public key behind a key id
  - a signature over a message with a key id

InMemoryKeyring is the local implementation used by dev nodes and tests.
Production deployments plug in their own KeyManager (HSM, remote signer, ...).
"""

import threading
from typing import Dict, Mapping, Optional, Protocol

from cryptography.hazmat.primitives.asymmetric import ec

from polychain.chain_id import ChainId
from polychain.config import SignerConfig
from polychain.crypto.eth import PRIVATE_KEY_SIZE, eth_sign, private_key_to_public_key
from polychain.errors import KeyNotFound

KeyId = str


class KeyManager(Protocol):
    def get_signing_key_id(self, chain_id: ChainId) -> Optional[KeyId]:
        ...

    def get_public_key(self, key_id: KeyId) -> bytes:
        ...

    def sign(self, message: bytes, key_id: KeyId) -> bytes:
        ...


def generate_secp256k1_private_key() -> bytes:
    sk = ec.generate_private_key(ec.SECP256K1())
    return sk.private_numbers().private_value.to_bytes(PRIVATE_KEY_SIZE, "big")


class InMemoryKeyring:
    """Process-local secp256k1 keyring.

    Signs with the Ethereum signed-message convention, so signatures recover
    through `eth_recover(..., prepend_preamble=True)`.
    """

    def __init__(
        self,
        private_keys: Optional[Mapping[KeyId, bytes]] = None,
        key_ids: Optional[Mapping[ChainId, KeyId]] = None,
    ) -> None:
        self._lock = threading.Lock()
        self._keys: Dict[KeyId, bytes] = {}
        self._key_ids: Dict[ChainId, KeyId] = dict(key_ids or {})
        for key_id, sk in (private_keys or {}).items():
            self.import_key(key_id, sk)

    @classmethod
    def from_config(cls, cfg: SignerConfig, private_keys: Mapping[KeyId, bytes]) -> "InMemoryKeyring":
        key_ids = {chain: key_id for chain, key_id in cfg.key_ids().items()}
        return cls(private_keys=private_keys, key_ids=key_ids)

    def import_key(self, key_id: KeyId, private_key: bytes) -> None:
        key_id = str(key_id or "").strip()
        if not key_id:
            raise ValueError("key_id must be a non-empty string")
        if not isinstance(private_key, (bytes, bytearray)) or len(private_key) != PRIVATE_KEY_SIZE:
            raise ValueError(f"private key must be {PRIVATE_KEY_SIZE} bytes")
        with self._lock:
            self._keys[key_id] = bytes(private_key)

    def generate(self, key_id: KeyId) -> bytes:
        """Create fresh key material under `key_id`; returns the public key."""
        self.import_key(key_id, generate_secp256k1_private_key())
        return self.get_public_key(key_id)

    def assign(self, chain_id: ChainId, key_id: KeyId) -> None:
        with self._lock:
            self._key_ids[ChainId(chain_id)] = key_id

    def get_signing_key_id(self, chain_id: ChainId) -> Optional[KeyId]:
        with self._lock:
            return self._key_ids.get(ChainId(chain_id))

    def _private_key(self, key_id: KeyId) -> bytes:
        with self._lock:
            sk = self._keys.get(key_id)
        if sk is None:
            raise KeyNotFound(details=key_id)
        return sk

    def get_public_key(self, key_id: KeyId) -> bytes:
        return private_key_to_public_key(self._private_key(key_id))

    def sign(self, message: bytes, key_id: KeyId) -> bytes:
        return eth_sign(message, self._private_key(key_id), prepend_preamble=True)


__all__ = ["InMemoryKeyring", "KeyId", "KeyManager", "generate_secp256k1_private_key"]
