# src/polychain/genesis.py
from __future__ import annotations

"""Genesis / chain-spec ingestion.

Chain values appear in genesis JSON in their text form ("ETH:0x..."), e.g.

  {
    "assets": ["ETH:0x...", ...],
    "validators": ["ETH:0x...", ...],
    "reporters": ["ETH:0x...", ...]
  }

Text is parsed with polychain.codec.text; dumping emits the same form.
"""

import json
from pathlib import Path
from typing import Annotated, Any, List

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, InstanceOf, PlainSerializer

from polychain.codec.text import format_account, format_asset, parse_account, parse_asset
from polychain.errors import ChainError
from polychain.types import ChainAccount, ChainAsset


def _parse_account(v: Any) -> Any:
    if isinstance(v, str):
        try:
            return parse_account(v)
        except ChainError as e:
            raise ValueError(str(e)) from e
    return v


def _parse_asset(v: Any) -> Any:
    if isinstance(v, str):
        try:
            return parse_asset(v)
        except ChainError as e:
            raise ValueError(str(e)) from e
    return v


AccountField = Annotated[
    InstanceOf[ChainAccount],
    BeforeValidator(_parse_account),
    PlainSerializer(format_account, return_type=str),
]

AssetField = Annotated[
    InstanceOf[ChainAsset],
    BeforeValidator(_parse_asset),
    PlainSerializer(format_asset, return_type=str),
]


class GenesisConfig(BaseModel):
    """Chain values seeded at genesis. Unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    assets: List[AssetField] = Field(default_factory=list)
    validators: List[AccountField] = Field(default_factory=list)
    reporters: List[AccountField] = Field(default_factory=list)

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json")


def load_genesis(path: str) -> GenesisConfig:
    """Load GenesisConfig from a JSON file.

    Raises FileNotFoundError for a missing file and ValueError (pydantic
    ValidationError) for malformed content.
    """
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(str(p))

    with p.open("r", encoding="utf-8") as f:
        obj = json.load(f)

    if not isinstance(obj, dict):
        raise ValueError("genesis config must be a JSON object")

    return GenesisConfig.model_validate(obj)


__all__ = ["AccountField", "AssetField", "GenesisConfig", "load_genesis"]
