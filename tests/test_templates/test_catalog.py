"""Tests for the sample stack catalog."""

from __future__ import annotations

import pytest

from composecheck.templates import STACK_TEMPLATES, get_template, list_templates
from composecheck.validator import validate


def test_catalog_order() -> None:
    assert [t.name for t in list_templates()] == [
        "Node.js + PostgreSQL",
        "Python/Django + Redis",
        "WordPress + MySQL",
        "MERN Stack",
    ]


def test_get_template() -> None:
    template = get_template("MERN Stack")
    assert template is not None
    assert "mongo_data:/data/db" in template.content


def test_get_unknown_template() -> None:
    assert get_template("LAMP") is None


@pytest.mark.parametrize("name", list(STACK_TEMPLATES))
def test_templates_validate_cleanly(name: str) -> None:
    result = validate(STACK_TEMPLATES[name])
    assert result.valid is True
    assert result.issues == []
    assert len(result.services) >= 2
