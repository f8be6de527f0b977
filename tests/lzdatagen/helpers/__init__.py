"""Test helpers for lzdatagen unit tests."""

from __future__ import annotations

from .mocks import CountingSource, ScriptedSource, u32_for_fraction

__all__ = [
    "CountingSource",
    "ScriptedSource",
    "u32_for_fraction",
]
