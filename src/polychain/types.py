# src/polychain/types.py
from __future__ import annotations

"""Tagged cross-chain value types.

Each value pairs a ChainId with a payload whose width is fixed by that chain's
associated types. Payload widths are checked at construction, so a value
that exists is always well-formed for its chain. All values are frozen and
hashable.
"""

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple

from polychain.chain_id import ChainId
from polychain.chains import chain_for
from polychain.errors import BadChainId, BadPayload, ChainMismatch, SignatureAccountMismatch


def _coerce_chain_id(v: Any) -> ChainId:
    if isinstance(v, ChainId):
        return v
    if isinstance(v, bool) or not isinstance(v, int):
        raise BadChainId(details=v)
    try:
        return ChainId(v)
    except ValueError as e:
        raise BadChainId(details=v) from e


def _coerce_bytes(v: Any, size: int, *, field: str) -> bytes:
    if isinstance(v, bytearray):
        v = bytes(v)
    if not isinstance(v, bytes):
        raise BadPayload(f"{field} must be bytes", details=type(v).__name__)
    if len(v) != size:
        raise BadPayload(f"{field} must be {size} bytes", details=len(v))
    return v


def _init_tagged(obj: Any, field: str, size_attr: str) -> None:
    chain_id = _coerce_chain_id(obj.chain_id)
    object.__setattr__(obj, "chain_id", chain_id)
    size = getattr(chain_for(chain_id), size_attr)
    object.__setattr__(obj, field, _coerce_bytes(getattr(obj, field), size, field=field))


@dataclass(frozen=True, slots=True, order=True)
class ChainAccount:
    """An external holder of value on some chain."""

    chain_id: ChainId
    address: bytes

    def __post_init__(self) -> None:
        _init_tagged(self, "address", "ADDRESS_SIZE")

    @classmethod
    def eth(cls, address: bytes) -> "ChainAccount":
        return cls(ChainId.ETHEREUM, address)


@dataclass(frozen=True, slots=True, order=True)
class ChainAsset:
    """A token or contract address on some chain."""

    chain_id: ChainId
    address: bytes

    def __post_init__(self) -> None:
        _init_tagged(self, "address", "ADDRESS_SIZE")

    @classmethod
    def eth(cls, address: bytes) -> "ChainAsset":
        return cls(ChainId.ETHEREUM, address)


@dataclass(frozen=True, slots=True)
class CashAsset:
    """Either the ledger's own unit (CASH) or a chain asset."""

    asset: Optional[ChainAsset] = None

    def __post_init__(self) -> None:
        if self.asset is not None and not isinstance(self.asset, ChainAsset):
            raise BadPayload("asset must be a ChainAsset", details=type(self.asset).__name__)

    @classmethod
    def cash(cls) -> "CashAsset":
        return cls(None)

    @classmethod
    def of(cls, asset: ChainAsset) -> "CashAsset":
        return cls(asset)

    @property
    def is_cash(self) -> bool:
        return self.asset is None


@dataclass(frozen=True, slots=True)
class ChainHash:
    chain_id: ChainId
    digest: bytes

    def __post_init__(self) -> None:
        _init_tagged(self, "digest", "HASH_SIZE")


@dataclass(frozen=True, slots=True)
class ChainSignature:
    chain_id: ChainId
    signature: bytes

    def __post_init__(self) -> None:
        _init_tagged(self, "signature", "SIGNATURE_SIZE")

    def recover(self, message: bytes) -> ChainAccount:
        """Recover whichever account produced this signature over `message`."""
        address = chain_for(self.chain_id).recover_address(bytes(message), self.signature)
        return ChainAccount(self.chain_id, address)


@dataclass(frozen=True, slots=True)
class ChainAssetAccount:
    """An (asset, account) pair on one chain."""

    chain_id: ChainId
    asset_address: bytes
    account_address: bytes

    def __post_init__(self) -> None:
        _init_tagged(self, "asset_address", "ADDRESS_SIZE")
        _init_tagged(self, "account_address", "ADDRESS_SIZE")

    @classmethod
    def from_parts(cls, asset: ChainAsset, account: ChainAccount) -> "ChainAssetAccount":
        if asset.chain_id != account.chain_id:
            raise ChainMismatch(details=(asset.chain_id.tag, account.chain_id.tag))
        return cls(asset.chain_id, asset.address, account.address)

    @property
    def asset(self) -> ChainAsset:
        return ChainAsset(self.chain_id, self.asset_address)

    @property
    def account(self) -> ChainAccount:
        return ChainAccount(self.chain_id, self.account_address)


@dataclass(frozen=True, slots=True)
class ChainAccountSignature:
    """A claimed signer and its signature, both on one chain.

    There is a single chain tag, so account and signature cannot disagree.
    Use `from_parts` to combine separately tagged values.
    """

    chain_id: ChainId
    address: bytes
    signature: bytes

    def __post_init__(self) -> None:
        _init_tagged(self, "address", "ADDRESS_SIZE")
        _init_tagged(self, "signature", "SIGNATURE_SIZE")

    @classmethod
    def from_parts(cls, account: ChainAccount, signature: ChainSignature) -> "ChainAccountSignature":
        if account.chain_id != signature.chain_id:
            raise ChainMismatch(details=(account.chain_id.tag, signature.chain_id.tag))
        return cls(account.chain_id, account.address, signature.signature)

    @property
    def account(self) -> ChainAccount:
        return ChainAccount(self.chain_id, self.address)

    def to_chain_signature(self) -> ChainSignature:
        return ChainSignature(self.chain_id, self.signature)

    def recover_account(self, message: bytes) -> ChainAccount:
        """Recover the signer and require it to equal the claimed account.

        Raises SignatureAccountMismatch when the signature is valid but was
        produced by a different key.
        """
        recovered = chain_for(self.chain_id).recover_address(bytes(message), self.signature)
        if recovered != self.address:
            raise SignatureAccountMismatch(
                details={"claimed": "0x" + self.address.hex(), "recovered": "0x" + recovered.hex()}
            )
        return ChainAccount(self.chain_id, recovered)


SignaturePair = Tuple[bytes, bytes]


@dataclass(frozen=True, slots=True)
class ChainSignatureList:
    """Ordered (address, signature) attestations from several signers on one chain."""

    chain_id: ChainId
    signatures: Tuple[SignaturePair, ...] = ()

    def __post_init__(self) -> None:
        chain_id = _coerce_chain_id(self.chain_id)
        chain = chain_for(chain_id)
        pairs = []
        for item in tuple(self.signatures or ()):
            if not isinstance(item, (tuple, list)) or len(item) != 2:
                raise BadPayload("signature list entries must be (address, signature) pairs", details=item)
            address = _coerce_bytes(item[0], chain.ADDRESS_SIZE, field="address")
            signature = _coerce_bytes(item[1], chain.SIGNATURE_SIZE, field="signature")
            pairs.append((address, signature))
        object.__setattr__(self, "chain_id", chain_id)
        object.__setattr__(self, "signatures", tuple(pairs))

    def __len__(self) -> int:
        return len(self.signatures)

    def __iter__(self) -> Iterator[ChainAccountSignature]:
        for address, signature in self.signatures:
            yield ChainAccountSignature(self.chain_id, address, signature)

    def signers(self) -> Tuple[ChainAccount, ...]:
        return tuple(ChainAccount(self.chain_id, address) for address, _ in self.signatures)

    def has_signer(self, account: ChainAccount) -> bool:
        if account.chain_id != self.chain_id:
            return False
        return any(address == account.address for address, _ in self.signatures)

    def with_signature(self, item: ChainAccountSignature) -> "ChainSignatureList":
        if item.chain_id != self.chain_id:
            raise ChainMismatch(details=(self.chain_id.tag, item.chain_id.tag))
        return ChainSignatureList(self.chain_id, self.signatures + ((item.address, item.signature),))


__all__ = [
    "CashAsset",
    "ChainAccount",
    "ChainAccountSignature",
    "ChainAsset",
    "ChainAssetAccount",
    "ChainHash",
    "ChainSignature",
    "ChainSignatureList",
    "SignaturePair",
]
