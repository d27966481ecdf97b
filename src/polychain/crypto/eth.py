# src/polychain/crypto/eth.py
from __future__ import annotations

"""Ethereum secp256k1 primitives: Keccak-256, signed-message hashing,
recoverable signing and public key recovery.

Signatures are 65 bytes `r || s || v`. `eth_sign` emits v in {27, 28};
`eth_recover` accepts v in {0, 1, 27, 28}.
"""

from eth_hash.auto import keccak
from eth_keys import keys
from eth_keys.exceptions import BadSignature, ValidationError

from polychain.errors import SignatureRecoveryError, SigningError

ADDRESS_SIZE = 20
HASH_SIZE = 32
PUBLIC_KEY_SIZE = 64
PRIVATE_KEY_SIZE = 32
SIGNATURE_SIZE = 65

_PREAMBLE = b"\x19Ethereum Signed Message:\n"


def keccak256(data: bytes) -> bytes:
    return keccak(bytes(data))


def eth_signed_message_hash(message: bytes) -> bytes:
    """Keccak-256 of the message behind the personal-sign preamble."""
    message = bytes(message)
    return keccak256(_PREAMBLE + str(len(message)).encode("ascii") + message)


def _message_digest(message: bytes, prepend_preamble: bool) -> bytes:
    if prepend_preamble:
        return eth_signed_message_hash(message)
    return keccak256(message)


def public_key_bytes_to_eth_address(public_key: bytes) -> bytes:
    if len(public_key) != PUBLIC_KEY_SIZE:
        raise ValueError(f"public key must be {PUBLIC_KEY_SIZE} bytes (got {len(public_key)})")
    return keccak256(public_key)[-ADDRESS_SIZE:]


def private_key_to_public_key(private_key: bytes) -> bytes:
    return keys.PrivateKey(bytes(private_key)).public_key.to_bytes()


def eth_sign(message: bytes, private_key: bytes, prepend_preamble: bool = True) -> bytes:
    if len(private_key) != PRIVATE_KEY_SIZE:
        raise SigningError(details=f"private key must be {PRIVATE_KEY_SIZE} bytes")
    try:
        sk = keys.PrivateKey(bytes(private_key))
        sig = sk.sign_msg_hash(_message_digest(message, prepend_preamble))
    except (ValidationError, ValueError) as e:
        raise SigningError(details=str(e)) from e
    raw = sig.to_bytes()
    return raw[:64] + bytes([raw[64] + 27])


def _normalize_v(signature: bytes) -> bytes:
    if len(signature) != SIGNATURE_SIZE:
        raise SignatureRecoveryError(details=f"signature must be {SIGNATURE_SIZE} bytes (got {len(signature)})")
    v = signature[64]
    if v in (27, 28):
        v -= 27
    if v not in (0, 1):
        raise SignatureRecoveryError(details=f"invalid recovery id {signature[64]}")
    return bytes(signature[:64]) + bytes([v])


def eth_recover(message: bytes, signature: bytes, prepend_preamble: bool = True) -> bytes:
    """Recover the 20-byte address that produced `signature` over `message`."""
    normalized = _normalize_v(bytes(signature))
    digest = _message_digest(message, prepend_preamble)
    try:
        sig = keys.Signature(signature_bytes=normalized)
        public_key = sig.recover_public_key_from_msg_hash(digest)
    except (BadSignature, ValidationError, ValueError) as e:
        raise SignatureRecoveryError(details=str(e)) from e
    return public_key.to_canonical_address()


__all__ = [
    "ADDRESS_SIZE",
    "HASH_SIZE",
    "PUBLIC_KEY_SIZE",
    "SIGNATURE_SIZE",
    "eth_recover",
    "eth_sign",
    "eth_signed_message_hash",
    "keccak256",
    "private_key_to_public_key",
    "public_key_bytes_to_eth_address",
]
