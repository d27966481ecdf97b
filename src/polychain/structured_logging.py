# src/polychain/structured_logging.py
from __future__ import annotations

import json
import logging
import sys
import time
from typing import Any, Dict, Optional

from polychain.config import SignerConfig, load_signer_config

Json = Dict[str, Any]


def _now_ms() -> int:
    return int(time.time() * 1000)


def configure_structured_logging(cfg: Optional[SignerConfig] = None) -> logging.Logger:
    """Route the "polychain" logger tree to stdout, one JSON event per line.

    The level comes from `cfg.log_level`, or from `load_signer_config()` when no
    config is passed. Handlers on the root logger are left alone so a host
    application keeps its own logging. Calling again only updates the level.
    """
    if cfg is None:
        cfg = load_signer_config()
    level = logging.getLevelName(cfg.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {cfg.log_level!r}")

    logger = logging.getLogger("polychain")
    logger.setLevel(level)
    if getattr(logger, "_polychain_configured", False):  # type: ignore[attr-defined]
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.handlers = [handler]
    logger.propagate = False
    setattr(logger, "_polychain_configured", True)  # type: ignore[attr-defined]
    return logger


def _jsonable(v: Any) -> Any:
    if isinstance(v, (bytes, bytearray)):
        return "0x" + bytes(v).hex()
    return v


def log_event(logger: logging.Logger, event: str, *, level: int = logging.INFO, **fields: Any) -> None:
    """Emit a single JSONL log event."""
    payload: Json = {"ts_ms": _now_ms(), "event": str(event)}
    payload.update({k: _jsonable(v) for k, v in fields.items()})
    try:
        logger.log(level, json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False))
    except (TypeError, ValueError):
        parts = [f"event={event}"] + [f"{k}={fields.get(k)!r}" for k in sorted(fields.keys())]
        logger.log(level, " ".join(parts))


__all__ = ["configure_structured_logging", "log_event"]
