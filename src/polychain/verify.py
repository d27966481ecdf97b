# src/polychain/verify.py
from __future__ import annotations

"""Signature verification protocol.

Turns "a signature and a claimed signer" into "a verified signer". Every
failure raises; a SignatureAccountMismatch is a rejection, never a warning to
carry on past.
"""

import logging
from typing import List, Set, Tuple

from polychain.chain_id import ChainId
from polychain.errors import SignatureAccountMismatch
from polychain.registry import sign, signer_address
from polychain.structured_logging import log_event
from polychain.types import ChainAccount, ChainAccountSignature, ChainSignature, ChainSignatureList

_LOG = logging.getLogger("polychain.verify")


def recover_signer(message: bytes, signature: ChainSignature) -> ChainAccount:
    """Recover whichever account produced `signature`, with no claim to check."""
    account = signature.recover(message)
    log_event(_LOG, "signature_recovered", level=logging.DEBUG, chain=account.chain_id.tag, account=account.address)
    return account


def recover_account(message: bytes, account_signature: ChainAccountSignature) -> ChainAccount:
    try:
        return account_signature.recover_account(message)
    except SignatureAccountMismatch as e:
        log_event(
            _LOG,
            "signature_account_mismatch",
            level=logging.WARNING,
            chain=account_signature.chain_id.tag,
            details=e.details,
        )
        raise


def verify_account_signature(message: bytes, account: ChainAccount, signature: ChainSignature) -> ChainAccount:
    """Check that `account` signed `message`.

    Raises ChainMismatch when the account and signature are tagged with
    different chains.
    """
    return recover_account(message, ChainAccountSignature.from_parts(account, signature))


def sign_with_account(chain_id: ChainId, message: bytes) -> ChainAccountSignature:
    """Sign `message` with this node's key and attach the node's own account."""
    account = signer_address(chain_id)
    return ChainAccountSignature.from_parts(account, sign(chain_id, message))


def verify_signature_list(message: bytes, signatures: ChainSignatureList) -> Tuple[ChainAccount, ...]:
    """Verify every attestation in a signature list.

    Returns the verified signers in list order. Any mismatch rejects the whole
    list, and so does a signer appearing twice.
    """
    seen: Set[bytes] = set()
    verified: List[ChainAccount] = []
    for item in signatures:
        if item.address in seen:
            raise SignatureAccountMismatch("duplicate signer", details="0x" + item.address.hex())
        seen.add(item.address)
        verified.append(recover_account(message, item))
    log_event(_LOG, "signature_list_verified", chain=signatures.chain_id.tag, signers=len(verified))
    return tuple(verified)


__all__ = [
    "recover_account",
    "recover_signer",
    "sign_with_account",
    "verify_account_signature",
    "verify_signature_list",
]
