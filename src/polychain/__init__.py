# src/polychain/__init__.py
"""
polychain: multi-chain account / asset / signature layer.

  - chain_id: closed ChainId enumeration (append-only discriminants)
  - chains: per-chain capability implementations + chain_for dispatch
  - types: tagged values (ChainAccount, ChainAsset, ChainHash, ChainSignature, ...)
  - registry: ChainId-level constructors (to_account, sign, hash_bytes, ...)
  - codec: text ("ETH:0x...") and binary encodings
  - verify: signer recovery and claimed-account checks
  - collaborators: key manager / recovery primitive injection
"""

from __future__ import annotations

from polychain.chain_id import ChainId
from polychain.errors import ChainError
from polychain.types import (
    CashAsset,
    ChainAccount,
    ChainAccountSignature,
    ChainAsset,
    ChainAssetAccount,
    ChainHash,
    ChainSignature,
    ChainSignatureList,
)

__all__ = [
    "CashAsset",
    "ChainAccount",
    "ChainAccountSignature",
    "ChainAsset",
    "ChainAssetAccount",
    "ChainError",
    "ChainHash",
    "ChainId",
    "ChainSignature",
    "ChainSignatureList",
]
