"""Shared FastAPI dependencies."""

from __future__ import annotations

from composecheck.config import Options

_options: Options | None = None


def get_options() -> Options:
    """FastAPI dependency: return the loaded Options."""
    assert _options is not None, "Options not initialised"
    return _options
