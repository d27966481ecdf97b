# src/polychain/codec/text.py
from __future__ import annotations

"""Text form used by genesis / chain-spec config: "<CHAIN>:<ADDRESS>".

The chain tag is case-insensitive; the address body is parsed by that chain.
Formatting only exists for chains that define an address text form.
"""

from typing import Tuple, Union

from polychain.chain_id import ChainId
from polychain.chains import chain_for
from polychain.errors import BadAsset
from polychain.registry import to_account, to_asset
from polychain.types import ChainAccount, ChainAsset


def _split(s: str) -> Tuple[ChainId, str]:
    if not isinstance(s, str) or ":" not in s:
        raise BadAsset(details=s)
    chain_str, address_str = s.split(":", 1)
    return ChainId.from_str(chain_str), address_str


def parse_account(s: str) -> ChainAccount:
    chain_id, address_str = _split(s)
    return to_account(chain_id, address_str)


def parse_asset(s: str) -> ChainAsset:
    chain_id, address_str = _split(s)
    return to_asset(chain_id, address_str)


def format_value(value: Union[ChainAccount, ChainAsset]) -> str:
    """Render as "ETH:0x<40 lowercase hex>"; chains without a text form raise UnsupportedOperation."""
    body = chain_for(value.chain_id).format_address(value.address)
    return f"{value.chain_id.tag}:{body}"


format_account = format_value
format_asset = format_value


__all__ = ["format_account", "format_asset", "format_value", "parse_account", "parse_asset"]
