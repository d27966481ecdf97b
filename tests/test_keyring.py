from __future__ import annotations

import pytest

from polychain.chain_id import ChainId
from polychain.config import SignerConfig
from polychain.crypto.eth import eth_recover, public_key_bytes_to_eth_address
from polychain.crypto.keyring import InMemoryKeyring, generate_secp256k1_private_key
from polychain.errors import KeyNotFound


def test_generated_keys_are_32_bytes_and_distinct() -> None:
    k1 = generate_secp256k1_private_key()
    k2 = generate_secp256k1_private_key()
    assert len(k1) == len(k2) == 32
    assert k1 != k2


def test_generate_and_sign_recovers_to_public_key_address() -> None:
    kr = InMemoryKeyring()
    pub = kr.generate("k1")
    assert len(pub) == 64
    sig = kr.sign(b"hello", "k1")
    assert eth_recover(b"hello", sig) == public_key_bytes_to_eth_address(pub)


def test_key_ids_come_from_signer_config() -> None:
    cfg = SignerConfig(eth_key_id="eth-main", log_level="INFO")
    kr = InMemoryKeyring.from_config(cfg, {"eth-main": generate_secp256k1_private_key()})
    assert kr.get_signing_key_id(ChainId.ETHEREUM) == "eth-main"
    assert kr.get_signing_key_id(ChainId.SOLANA) is None


def test_assign_changes_signing_key() -> None:
    kr = InMemoryKeyring()
    kr.generate("a")
    kr.assign(ChainId.ETHEREUM, "a")
    assert kr.get_signing_key_id(ChainId.ETHEREUM) == "a"


def test_unknown_key_id_is_key_not_found() -> None:
    kr = InMemoryKeyring()
    with pytest.raises(KeyNotFound):
        kr.get_public_key("missing")
    with pytest.raises(KeyNotFound):
        kr.sign(b"m", "missing")


@pytest.mark.parametrize("key_id,sk", [("", b"\x01" * 32), ("k", b"\x01" * 31), ("k", "01" * 32)])
def test_import_rejects_bad_material(key_id: str, sk: object) -> None:
    with pytest.raises(ValueError):
        InMemoryKeyring().import_key(key_id, sk)  # type: ignore[arg-type]
