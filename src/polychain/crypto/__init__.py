# src/polychain/crypto/__init__.py
"""
Crypto boundary:
  - eth: Keccak-256 and secp256k1 recoverable signatures (Ethereum conventions)
  - keyring: KeyManager protocol + in-memory keyring for dev nodes and tests
"""

from __future__ import annotations

__all__ = ["eth", "keyring"]
