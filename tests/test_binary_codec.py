from __future__ import annotations

import pytest

from polychain.chain_id import ChainId
from polychain.chains.events import U64_MAX, EthEvent, EthEventId, Gov, Lock, LockCash, PairEventId, WidePairEventId
from polychain.codec.binary import CODEC_VERSION, TYPE_CODES, decode, decode_versioned, encode, encode_versioned
from polychain.codec.scale import Reader, Writer
from polychain.errors import BadPayload, DecodeError
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

ADDR = bytes(range(20))
SIG = bytes(range(65))


def test_account_encoding_is_discriminant_then_payload() -> None:
    assert encode(ChainAccount.eth(ADDR)) == b"\x01" + ADDR
    assert encode(ChainAccount(ChainId.TEZOS, ADDR)) == b"\x04" + ADDR
    assert encode(ChainAsset(ChainId.COMPOUND, ADDR)) == b"\x00" + ADDR


def test_cash_asset_encoding() -> None:
    assert encode(CashAsset.cash()) == b"\x00"
    assert encode(CashAsset.of(ChainAsset.eth(ADDR))) == b"\x01\x01" + ADDR


def test_signature_list_uses_compact_length() -> None:
    lst = ChainSignatureList(ChainId.ETHEREUM, ((ADDR, SIG), (ADDR, SIG)))
    blob = encode(lst)
    assert blob[:2] == b"\x01\x08"  # chain, compact(2)
    assert len(blob) == 2 + 2 * (20 + 65)
    assert decode(ChainSignatureList, blob) == lst


def test_decode_restores_every_value_type() -> None:
    values = [
        ChainAccount(ChainId.SOLANA, ADDR),
        ChainAsset.eth(ADDR),
        ChainHash(ChainId.ETHEREUM, bytes(32)),
        ChainSignature(ChainId.POLKADOT, SIG),
        ChainAccountSignature(ChainId.ETHEREUM, ADDR, SIG),
        ChainSignatureList(ChainId.TEZOS),
        ChainAssetAccount(ChainId.ETHEREUM, ADDR, bytes(20)),
        CashAsset.cash(),
        CashAsset.of(ChainAsset.eth(ADDR)),
    ]
    for v in values:
        assert decode(type(v), encode(v)) == v


def test_eth_event_encoding() -> None:
    ev = EthEvent(id=EthEventId(7, 2), data=Lock(asset=ADDR, holder=bytes(20), amount=10**20))
    blob = encode(ev)
    assert blob[:8] == (7).to_bytes(4, "little") + (2).to_bytes(4, "little")
    assert blob[8] == 0
    assert decode(EthEvent, blob) == ev

    for data in [LockCash(holder=ADDR, amount=1, index=2), Gov()]:
        e2 = EthEvent(id=EthEventId(1, 0), data=data)
        assert decode(EthEvent, encode(e2)) == e2


def test_placeholder_event_id_encoding() -> None:
    pair = PairEventId(U64_MAX, 3)
    blob = encode(pair)
    assert blob == U64_MAX.to_bytes(8, "little") + (3).to_bytes(8, "little")
    assert decode(PairEventId, blob) == pair

    wide = WidePairEventId(1 << 100, 0)
    assert len(encode(wide)) == 32
    assert decode_versioned(encode_versioned(wide)) == wide


def test_out_of_range_event_id_is_bad_payload() -> None:
    with pytest.raises(BadPayload):
        encode(PairEventId(U64_MAX + 1, 0))
    with pytest.raises(BadPayload):
        encode(WidePairEventId(-1, 0))


def test_unknown_chain_discriminant_is_rejected() -> None:
    with pytest.raises(DecodeError) as ei:
        decode(ChainAccount, b"\x05" + ADDR)
    assert ei.value.kind == "unknown_discriminant"
    assert ei.value.code == "bad_encoding"


def test_unknown_cash_asset_variant_is_rejected() -> None:
    with pytest.raises(DecodeError) as ei:
        decode(CashAsset, b"\x02")
    assert ei.value.kind == "unknown_discriminant"


def test_unknown_event_variant_is_rejected() -> None:
    blob = (1).to_bytes(4, "little") + (0).to_bytes(4, "little") + b"\x09"
    with pytest.raises(DecodeError):
        decode(EthEvent, blob)


def test_truncated_and_trailing_input_is_rejected() -> None:
    with pytest.raises(DecodeError) as ei:
        decode(ChainAccount, b"\x01" + ADDR[:-1])
    assert ei.value.kind == "truncated"
    with pytest.raises(DecodeError) as ei2:
        decode(ChainAccount, b"\x01" + ADDR + b"\x00")
    assert ei2.value.kind == "trailing_bytes"


def test_signature_list_with_oversized_count_is_truncated() -> None:
    blob = Writer().u8(1).compact(1_000_000).to_bytes()
    with pytest.raises(DecodeError) as ei:
        decode(ChainSignatureList, blob)
    assert ei.value.kind == "truncated"


def test_versioned_envelope() -> None:
    v = ChainAccountSignature(ChainId.ETHEREUM, ADDR, SIG)
    blob = encode_versioned(v)
    assert blob[0] == CODEC_VERSION
    assert blob[1] == TYPE_CODES[ChainAccountSignature]
    assert blob[2:] == encode(v)
    assert decode_versioned(blob) == v


def test_versioned_envelope_rejects_unknown_version_and_type() -> None:
    body = encode(ChainAccount.eth(ADDR))
    with pytest.raises(DecodeError) as ei:
        decode_versioned(bytes([CODEC_VERSION + 1, TYPE_CODES[ChainAccount]]) + body)
    assert ei.value.kind == "unsupported_version"
    with pytest.raises(DecodeError) as ei2:
        decode_versioned(bytes([CODEC_VERSION, 200]) + body)
    assert ei2.value.kind == "unknown_type"


def test_type_codes_are_stable() -> None:
    assert {cls.__name__: code for cls, code in TYPE_CODES.items()} == {
        "ChainAccount": 1,
        "ChainAsset": 2,
        "ChainHash": 3,
        "ChainSignature": 4,
        "ChainAccountSignature": 5,
        "ChainSignatureList": 6,
        "CashAsset": 7,
        "ChainAssetAccount": 8,
        "EthEvent": 9,
        "PairEventId": 10,
        "WidePairEventId": 11,
    }


def test_unsupported_types_raise_type_error() -> None:
    with pytest.raises(TypeError):
        encode("not a chain value")
    with pytest.raises(TypeError):
        decode(str, b"")  # type: ignore[arg-type]


@pytest.mark.parametrize("n", [0, 1, 63, 64, 16383, 16384, 2**30 - 1, 2**30, 2**64])
def test_compact_integers(n: int) -> None:
    blob = Writer().compact(n).to_bytes()
    r = Reader(blob)
    assert r.compact() == n
    r.finish()


def test_compact_known_encodings() -> None:
    assert Writer().compact(0).to_bytes() == b"\x00"
    assert Writer().compact(1).to_bytes() == b"\x04"
    assert Writer().compact(64).to_bytes() == b"\x01\x01"
    assert Writer().compact(2**30).to_bytes() == b"\x03\x00\x00\x00\x40"
