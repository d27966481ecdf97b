# src/polychain/registry.py
from __future__ import annotations

"""ChainId-level constructors.

Each function dispatches to the chain implementation and wraps its raw
result in the tagged value for the same ChainId.
"""

from polychain.chain_id import ChainId
from polychain.chains import chain_for
from polychain.errors import BadPayload
from polychain.types import ChainAccount, ChainAsset, ChainHash, ChainSignature


def _message_bytes(data: bytes, *, field: str) -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise BadPayload(f"{field} must be bytes", details=type(data).__name__)
    return bytes(data)


def to_account(chain_id: ChainId, addr: str) -> ChainAccount:
    return ChainAccount(chain_id, chain_for(chain_id).to_address(addr))


def to_asset(chain_id: ChainId, addr: str) -> ChainAsset:
    return ChainAsset(chain_id, chain_for(chain_id).to_address(addr))


def signer_address(chain_id: ChainId) -> ChainAccount:
    """This node's own signing account on `chain_id`."""
    return ChainAccount(chain_id, chain_for(chain_id).signer_address())


def hash_bytes(chain_id: ChainId, data: bytes) -> ChainHash:
    return ChainHash(chain_id, chain_for(chain_id).hash_bytes(_message_bytes(data, field="data")))


def sign(chain_id: ChainId, message: bytes) -> ChainSignature:
    return ChainSignature(chain_id, chain_for(chain_id).sign_message(_message_bytes(message, field="message")))


def zero_hash(chain_id: ChainId) -> ChainHash:
    return ChainHash(chain_id, chain_for(chain_id).zero_hash())


__all__ = ["hash_bytes", "sign", "signer_address", "to_account", "to_asset", "zero_hash"]
