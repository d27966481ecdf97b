from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure local "src/" takes precedence over any globally-installed "polychain" package.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

src_str = str(SRC)
if src_str not in sys.path:
    sys.path.insert(0, src_str)


@pytest.fixture(autouse=True)
def _reset_collaborators():
    from polychain.collaborators import set_key_manager, set_recovery_primitive

    set_key_manager(None)
    set_recovery_primitive(None)
    yield
    set_key_manager(None)
    set_recovery_primitive(None)
