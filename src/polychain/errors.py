# src/polychain/errors.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ChainError(Exception):
    """Canonical error type for chain dispatch, parsing and signature failures."""

    code: str
    reason: str
    details: Any | None = None

    def __str__(self) -> str:
        if self.details is None:
            return f"{self.code}:{self.reason}"
        return f"{self.code}:{self.reason}:{self.details}"


class BadAddress(ChainError):
    def __init__(self, reason: str = "bad address", details: Any | None = None) -> None:
        super().__init__("bad_address", reason, details)


class BadChainId(ChainError):
    def __init__(self, reason: str = "bad chain id", details: Any | None = None) -> None:
        super().__init__("bad_chain_id", reason, details)


class BadAsset(ChainError):
    def __init__(self, reason: str = "bad asset", details: Any | None = None) -> None:
        super().__init__("bad_asset", reason, details)


class BadPayload(ChainError):
    """A tagged value was built with a payload of the wrong type or width."""

    def __init__(self, reason: str = "bad payload", details: Any | None = None) -> None:
        super().__init__("bad_payload", reason, details)


class KeyNotFound(ChainError):
    def __init__(self, reason: str = "signing key not found", details: Any | None = None) -> None:
        super().__init__("key_not_found", reason, details)


class SigningError(ChainError):
    def __init__(self, reason: str = "signing failed", details: Any | None = None) -> None:
        super().__init__("signing_failed", reason, details)


class SignatureRecoveryError(ChainError):
    def __init__(self, reason: str = "signature recovery failed", details: Any | None = None) -> None:
        super().__init__("signature_recovery_error", reason, details)


class SignatureAccountMismatch(ChainError):
    """Recovered signer differs from the claimed account. Treat as a rejection."""

    def __init__(self, reason: str = "signature does not match account", details: Any | None = None) -> None:
        super().__init__("signature_account_mismatch", reason, details)


class ChainMismatch(ChainError):
    def __init__(self, reason: str = "values belong to different chains", details: Any | None = None) -> None:
        super().__init__("chain_mismatch", reason, details)


class UnsupportedChain(ChainError):
    def __init__(self, reason: str = "unsupported chain", details: Any | None = None) -> None:
        super().__init__("unsupported_chain", reason, details)


class UnsupportedOperation(ChainError):
    """The chain exists but has no implementation for the requested capability."""

    def __init__(self, chain: str, operation: str) -> None:
        super().__init__("unsupported_operation", f"{operation} not implemented for {chain}")
        self.chain = chain
        self.operation = operation


class DecodeError(ChainError):
    """Binary payload could not be decoded.

    `kind` narrows the failure: truncated, trailing_bytes, unknown_discriminant,
    unsupported_version, unknown_type.
    """

    def __init__(self, kind: str, reason: str) -> None:
        super().__init__("bad_encoding", reason, kind)
        self.kind = kind


__all__ = [
    "BadAddress",
    "BadAsset",
    "BadChainId",
    "BadPayload",
    "ChainError",
    "ChainMismatch",
    "DecodeError",
    "KeyNotFound",
    "SignatureAccountMismatch",
    "SignatureRecoveryError",
    "SigningError",
    "UnsupportedChain",
    "UnsupportedOperation",
]
