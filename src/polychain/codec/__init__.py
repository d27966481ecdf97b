# src/polychain/codec/__init__.py
"""
Codecs for chain values:
  - text: "<CHAIN>:<ADDRESS>" strings used in genesis / chain-spec config
  - scale: SCALE-compatible primitive reader/writer
  - binary: tag-prefixed encoding of every tagged value, plus a versioned envelope
"""

from __future__ import annotations

__all__ = ["binary", "scale", "text"]
