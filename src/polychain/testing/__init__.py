# src/polychain/testing/__init__.py
"""Test-only helpers. Never import from production code paths."""
