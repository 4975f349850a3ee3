"""Tests for option loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from composecheck.config import DEFAULT_TEMPLATE, Options, load_options


def test_env_fallback_defaults(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("COMPOSECHECK_OPTIONS_PATH", str(tmp_path / "missing.json"))
    monkeypatch.delenv("COMPOSECHECK_MAX_DOCUMENT_CHARS", raising=False)
    monkeypatch.delenv("COMPOSECHECK_DEFAULT_TEMPLATE", raising=False)

    options = load_options()
    assert options.max_document_chars == 200_000
    assert options.default_template == DEFAULT_TEMPLATE


def test_env_overrides(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("COMPOSECHECK_OPTIONS_PATH", str(tmp_path / "missing.json"))
    monkeypatch.setenv("COMPOSECHECK_MAX_DOCUMENT_CHARS", "1024")
    monkeypatch.setenv("COMPOSECHECK_DEFAULT_TEMPLATE", "MERN Stack")

    options = load_options()
    assert options.max_document_chars == 1024
    assert options.default_template == "MERN Stack"


def test_options_file(tmp_path: Path, monkeypatch) -> None:
    opts_path = tmp_path / "options.json"
    opts_path.write_text(json.dumps({"max_document_chars": 10, "default_template": "WordPress + MySQL"}))
    monkeypatch.setenv("COMPOSECHECK_OPTIONS_PATH", str(opts_path))
    monkeypatch.setenv("COMPOSECHECK_MAX_DOCUMENT_CHARS", "99999")

    options = load_options()
    assert options.max_document_chars == 10
    assert options.default_template == "WordPress + MySQL"


def test_unknown_default_template(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("COMPOSECHECK_OPTIONS_PATH", str(tmp_path / "missing.json"))
    monkeypatch.setenv("COMPOSECHECK_DEFAULT_TEMPLATE", "LAMP")

    with pytest.raises(ValueError, match="LAMP"):
        load_options()


def test_max_document_chars_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        Options(max_document_chars=0)
