# src/polychain/config.py
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from polychain.chain_id import ChainId

Json = Dict[str, Any]

_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _as_opt_str(v: Any) -> Optional[str]:
    if v is None:
        return None
    s = str(v).strip()
    return s or None


def _as_str(v: Any, default: str) -> str:
    if v is None:
        return str(default)
    s = str(v)
    return s if s.strip() else str(default)


@dataclass(frozen=True)
class SignerConfig:
    """Which key id this node signs with, per chain.

    Only Ethereum has a signing path today; other chains get a slot when they
    are onboarded.
    """

    eth_key_id: Optional[str]
    log_level: str

    def key_id_for(self, chain_id: ChainId) -> Optional[str]:
        if chain_id == ChainId.ETHEREUM:
            return self.eth_key_id
        return None

    def key_ids(self) -> Dict[ChainId, str]:
        out: Dict[ChainId, str] = {}
        for chain in ChainId:
            key_id = self.key_id_for(chain)
            if key_id is not None:
                out[chain] = key_id
        return out


def validate_signer_config(cfg: SignerConfig) -> None:
    """Fail-fast validation: a blank key id is a misconfiguration, not "no key"."""

    if cfg.eth_key_id is not None and (not isinstance(cfg.eth_key_id, str) or not cfg.eth_key_id.strip()):
        raise ValueError("eth_key_id must be a non-empty string when set")

    level = str(cfg.log_level or "").strip().upper()
    if level not in _ALLOWED_LOG_LEVELS:
        raise ValueError(f"log_level must be one of {sorted(_ALLOWED_LOG_LEVELS)}; got: {cfg.log_level!r}")


def default_signer_config() -> SignerConfig:
    return SignerConfig(eth_key_id=None, log_level="INFO")


def read_signer_config_file(path: str) -> SignerConfig:
    p = Path(path)
    raw = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError("signer config must be a JSON object")

    d = default_signer_config()
    cfg = SignerConfig(
        eth_key_id=_as_opt_str(raw.get("eth_key_id")),
        log_level=_as_str(raw.get("log_level"), d.log_level).strip().upper(),
    )
    validate_signer_config(cfg)
    return cfg


def signer_config_from_env() -> SignerConfig:
    d = default_signer_config()
    cfg = SignerConfig(
        eth_key_id=_as_opt_str(os.environ.get("POLYCHAIN_ETH_KEY_ID")),
        log_level=_as_str(os.environ.get("POLYCHAIN_LOG_LEVEL"), d.log_level).strip().upper(),
    )
    validate_signer_config(cfg)
    return cfg


def load_signer_config(*, config_path: Optional[str] = None) -> SignerConfig:
    p = config_path or os.environ.get("POLYCHAIN_SIGNER_CONFIG_PATH")
    if p:
        return read_signer_config_file(p)
    return signer_config_from_env()


__all__ = [
    "SignerConfig",
    "default_signer_config",
    "load_signer_config",
    "read_signer_config_file",
    "signer_config_from_env",
    "validate_signer_config",
]
