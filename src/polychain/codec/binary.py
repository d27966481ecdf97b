# src/polychain/codec/binary.py
from __future__ import annotations

"""Binary encoding for persisted and transmitted chain values.

Bodies are SCALE-compatible: a one-byte ChainId discriminant followed by the
chain's fixed-width payload. `encode_versioned` adds a codec version byte and
a type code so a stored blob can be decoded without knowing its type.

Discriminants, variant indexes and type codes are explicit numbers. Only
append new ones; never renumber.
"""

from typing import Any, Callable, Dict, Type, TypeVar

from polychain.chain_id import ChainId
from polychain.chains import Chain, chain_for
from polychain.chains.events import EthEvent, EthEventId, Gov, Lock, LockCash, PairEventId, WidePairEventId
from polychain.codec.scale import Reader, Writer
from polychain.errors import DecodeError
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

T = TypeVar("T")

CODEC_VERSION = 1

# CashAsset variants
_CASH = 0
_CASH_ASSET = 1

# Ethereum EventData variants
_EVT_LOCK = 0
_EVT_LOCK_CASH = 1
_EVT_GOV = 2

# Versioned envelope type codes
TYPE_CODES: Dict[type, int] = {
    ChainAccount: 1,
    ChainAsset: 2,
    ChainHash: 3,
    ChainSignature: 4,
    ChainAccountSignature: 5,
    ChainSignatureList: 6,
    CashAsset: 7,
    ChainAssetAccount: 8,
    EthEvent: 9,
    PairEventId: 10,
    WidePairEventId: 11,
}


def _read_chain(r: Reader) -> ChainId:
    tag = r.u8()
    try:
        return ChainId(tag)
    except ValueError as e:
        raise DecodeError("unknown_discriminant", f"unknown chain discriminant {tag}") from e


def _chain(w: Writer, chain_id: ChainId) -> Type[Chain]:
    w.u8(int(chain_id))
    return chain_for(chain_id)


# ---------------------------------------------------------------------------
# Writers
# ---------------------------------------------------------------------------


def _write_account(w: Writer, v: ChainAccount) -> None:
    w.fixed(v.address, _chain(w, v.chain_id).ADDRESS_SIZE)


def _write_asset(w: Writer, v: ChainAsset) -> None:
    w.fixed(v.address, _chain(w, v.chain_id).ADDRESS_SIZE)


def _write_hash(w: Writer, v: ChainHash) -> None:
    w.fixed(v.digest, _chain(w, v.chain_id).HASH_SIZE)


def _write_signature(w: Writer, v: ChainSignature) -> None:
    w.fixed(v.signature, _chain(w, v.chain_id).SIGNATURE_SIZE)


def _write_account_signature(w: Writer, v: ChainAccountSignature) -> None:
    chain = _chain(w, v.chain_id)
    w.fixed(v.address, chain.ADDRESS_SIZE).fixed(v.signature, chain.SIGNATURE_SIZE)


def _write_signature_list(w: Writer, v: ChainSignatureList) -> None:
    chain = _chain(w, v.chain_id)
    w.compact(len(v.signatures))
    for address, signature in v.signatures:
        w.fixed(address, chain.ADDRESS_SIZE).fixed(signature, chain.SIGNATURE_SIZE)


def _write_asset_account(w: Writer, v: ChainAssetAccount) -> None:
    chain = _chain(w, v.chain_id)
    w.fixed(v.asset_address, chain.ADDRESS_SIZE).fixed(v.account_address, chain.ADDRESS_SIZE)


def _write_cash_asset(w: Writer, v: CashAsset) -> None:
    if v.asset is None:
        w.u8(_CASH)
        return
    w.u8(_CASH_ASSET)
    _write_asset(w, v.asset)


def _write_eth_event(w: Writer, v: EthEvent) -> None:
    w.u32(v.id.block_number).u32(v.id.log_index)
    data = v.data
    if isinstance(data, Lock):
        w.u8(_EVT_LOCK).fixed(data.asset, 20).fixed(data.holder, 20).u128(data.amount)
    elif isinstance(data, LockCash):
        w.u8(_EVT_LOCK_CASH).fixed(data.holder, 20).u128(data.amount).u128(data.index)
    elif isinstance(data, Gov):
        w.u8(_EVT_GOV)
    else:
        raise TypeError(f"unknown ethereum event data: {type(data).__name__}")


def _write_pair_event_id(w: Writer, v: PairEventId) -> None:
    v.validate()
    w.u64(v.major).u64(v.minor)


def _write_wide_pair_event_id(w: Writer, v: WidePairEventId) -> None:
    v.validate()
    w.u128(v.major).u128(v.minor)


# ---------------------------------------------------------------------------
# Readers
# ---------------------------------------------------------------------------


def _read_account(r: Reader) -> ChainAccount:
    chain_id = _read_chain(r)
    return ChainAccount(chain_id, r.fixed(chain_for(chain_id).ADDRESS_SIZE))


def _read_asset(r: Reader) -> ChainAsset:
    chain_id = _read_chain(r)
    return ChainAsset(chain_id, r.fixed(chain_for(chain_id).ADDRESS_SIZE))


def _read_hash(r: Reader) -> ChainHash:
    chain_id = _read_chain(r)
    return ChainHash(chain_id, r.fixed(chain_for(chain_id).HASH_SIZE))


def _read_signature(r: Reader) -> ChainSignature:
    chain_id = _read_chain(r)
    return ChainSignature(chain_id, r.fixed(chain_for(chain_id).SIGNATURE_SIZE))


def _read_account_signature(r: Reader) -> ChainAccountSignature:
    chain_id = _read_chain(r)
    chain = chain_for(chain_id)
    address = r.fixed(chain.ADDRESS_SIZE)
    return ChainAccountSignature(chain_id, address, r.fixed(chain.SIGNATURE_SIZE))


def _read_signature_list(r: Reader) -> ChainSignatureList:
    chain_id = _read_chain(r)
    chain = chain_for(chain_id)
    count = r.compact()
    pair_size = chain.ADDRESS_SIZE + chain.SIGNATURE_SIZE
    if count * pair_size > r.remaining():
        raise DecodeError("truncated", f"signature list claims {count} entries, not enough bytes")
    pairs = tuple((r.fixed(chain.ADDRESS_SIZE), r.fixed(chain.SIGNATURE_SIZE)) for _ in range(count))
    return ChainSignatureList(chain_id, pairs)


def _read_asset_account(r: Reader) -> ChainAssetAccount:
    chain_id = _read_chain(r)
    chain = chain_for(chain_id)
    asset_address = r.fixed(chain.ADDRESS_SIZE)
    return ChainAssetAccount(chain_id, asset_address, r.fixed(chain.ADDRESS_SIZE))


def _read_cash_asset(r: Reader) -> CashAsset:
    tag = r.u8()
    if tag == _CASH:
        return CashAsset.cash()
    if tag == _CASH_ASSET:
        return CashAsset.of(_read_asset(r))
    raise DecodeError("unknown_discriminant", f"unknown CashAsset variant {tag}")


def _read_eth_event(r: Reader) -> EthEvent:
    event_id = EthEventId(r.u32(), r.u32())
    tag = r.u8()
    if tag == _EVT_LOCK:
        data: Any = Lock(asset=r.fixed(20), holder=r.fixed(20), amount=r.u128())
    elif tag == _EVT_LOCK_CASH:
        data = LockCash(holder=r.fixed(20), amount=r.u128(), index=r.u128())
    elif tag == _EVT_GOV:
        data = Gov()
    else:
        raise DecodeError("unknown_discriminant", f"unknown ethereum event variant {tag}")
    return EthEvent(id=event_id, data=data)


def _read_pair_event_id(r: Reader) -> PairEventId:
    return PairEventId(r.u64(), r.u64())


def _read_wide_pair_event_id(r: Reader) -> WidePairEventId:
    return WidePairEventId(r.u128(), r.u128())


_WRITERS: Dict[type, Callable[[Writer, Any], None]] = {
    ChainAccount: _write_account,
    ChainAsset: _write_asset,
    ChainHash: _write_hash,
    ChainSignature: _write_signature,
    ChainAccountSignature: _write_account_signature,
    ChainSignatureList: _write_signature_list,
    CashAsset: _write_cash_asset,
    ChainAssetAccount: _write_asset_account,
    EthEvent: _write_eth_event,
    PairEventId: _write_pair_event_id,
    WidePairEventId: _write_wide_pair_event_id,
}

_READERS: Dict[type, Callable[[Reader], Any]] = {
    ChainAccount: _read_account,
    ChainAsset: _read_asset,
    ChainHash: _read_hash,
    ChainSignature: _read_signature,
    ChainAccountSignature: _read_account_signature,
    ChainSignatureList: _read_signature_list,
    CashAsset: _read_cash_asset,
    ChainAssetAccount: _read_asset_account,
    EthEvent: _read_eth_event,
    PairEventId: _read_pair_event_id,
    WidePairEventId: _read_wide_pair_event_id,
}

_TYPES_BY_CODE: Dict[int, type] = {code: cls for cls, code in TYPE_CODES.items()}


def _writer_for(value: Any) -> Callable[[Writer, Any], None]:
    fn = _WRITERS.get(type(value))
    if fn is None:
        raise TypeError(f"no binary encoding for {type(value).__name__}")
    return fn


def encode(value: Any) -> bytes:
    w = Writer()
    _writer_for(value)(w, value)
    return w.to_bytes()


def decode(cls: Type[T], data: bytes) -> T:
    """Decode exactly one `cls` value; the whole input must be consumed."""
    fn = _READERS.get(cls)
    if fn is None:
        raise TypeError(f"no binary decoding for {getattr(cls, '__name__', cls)!r}")
    r = Reader(data)
    value = fn(r)
    r.finish()
    return value


def encode_versioned(value: Any) -> bytes:
    fn = _writer_for(value)
    w = Writer().u8(CODEC_VERSION).u8(TYPE_CODES[type(value)])
    fn(w, value)
    return w.to_bytes()


def decode_versioned(data: bytes) -> Any:
    r = Reader(data)
    version = r.u8()
    if version != CODEC_VERSION:
        raise DecodeError("unsupported_version", f"unsupported codec version {version}")
    code = r.u8()
    cls = _TYPES_BY_CODE.get(code)
    if cls is None:
        raise DecodeError("unknown_type", f"unknown type code {code}")
    value = _READERS[cls](r)
    r.finish()
    return value


__all__ = ["CODEC_VERSION", "TYPE_CODES", "decode", "decode_versioned", "encode", "encode_versioned"]
