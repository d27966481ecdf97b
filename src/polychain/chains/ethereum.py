# src/polychain/chains/ethereum.py
from __future__ import annotations

import binascii
import logging

from polychain import collaborators
from polychain.chain_id import ChainId
from polychain.chains.base import Chain
from polychain.chains.events import EthEvent, EthEventId
from polychain.crypto.eth import keccak256, public_key_bytes_to_eth_address
from polychain.errors import BadAddress, ChainError, KeyNotFound, SignatureRecoveryError, SigningError
from polychain.structured_logging import log_event

_LOG = logging.getLogger("polychain.chains.ethereum")

_ADDRESS_TEXT_LEN = 42


class Ethereum(Chain):
    """Reference chain: Keccak-256 hashing, 0x-hex addresses, secp256k1 signatures."""

    ID = ChainId.ETHEREUM
    NAME = "Ethereum"

    EventId = EthEventId
    Event = EthEvent

    @classmethod
    def zero_hash(cls) -> bytes:
        return bytes(cls.HASH_SIZE)

    @classmethod
    def hash_bytes(cls, data: bytes) -> bytes:
        return keccak256(bytes(data))

    @classmethod
    def recover_address(cls, data: bytes, signature: bytes) -> bytes:
        if len(signature) != cls.SIGNATURE_SIZE:
            raise SignatureRecoveryError(details=f"signature must be {cls.SIGNATURE_SIZE} bytes")
        recover = collaborators.get_recovery_primitive()
        try:
            address = recover(bytes(data), bytes(signature), True)
        except ChainError:
            raise
        except Exception as e:
            raise SignatureRecoveryError(details=str(e)) from e
        if not isinstance(address, bytes) or len(address) != cls.ADDRESS_SIZE:
            raise SignatureRecoveryError("recovery primitive returned a malformed address")
        return address

    @classmethod
    def _key_id(cls) -> str:
        key_id = collaborators.get_key_manager().get_signing_key_id(cls.ID)
        if key_id is None:
            raise KeyNotFound(details=cls.ID.tag)
        return key_id

    @classmethod
    def sign_message(cls, message: bytes) -> bytes:
        key_id = cls._key_id()
        try:
            signature = collaborators.get_key_manager().sign(bytes(message), key_id)
        except ChainError:
            raise
        except Exception as e:
            raise SigningError(details=str(e)) from e
        if not isinstance(signature, bytes) or len(signature) != cls.SIGNATURE_SIZE:
            raise SigningError("signer returned a malformed signature", details=key_id)
        log_event(_LOG, "chain_sign", chain=cls.ID.tag, key_id=key_id, message_len=len(message))
        return signature

    @classmethod
    def to_address(cls, addr: str) -> bytes:
        if isinstance(addr, str) and len(addr) == _ADDRESS_TEXT_LEN and addr[0:2] == "0x":
            try:
                raw = binascii.unhexlify(addr[2:])
            except (binascii.Error, ValueError) as e:
                raise BadAddress(details=addr) from e
            if len(raw) == cls.ADDRESS_SIZE:
                return raw
        raise BadAddress(details=addr)

    @classmethod
    def format_address(cls, address: bytes) -> str:
        if len(address) != cls.ADDRESS_SIZE:
            raise BadAddress(details=address)
        return "0x" + bytes(address).hex()

    @classmethod
    def signer_address(cls) -> bytes:
        key_id = cls._key_id()
        public_key = collaborators.get_key_manager().get_public_key(key_id)
        if not isinstance(public_key, bytes) or len(public_key) != cls.PUBLIC_KEY_SIZE:
            raise KeyNotFound("public key unavailable or malformed", details=key_id)
        return public_key_bytes_to_eth_address(public_key)


__all__ = ["Ethereum"]
