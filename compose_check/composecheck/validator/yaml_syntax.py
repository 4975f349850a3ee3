"""YAML syntax validation using ruamel.yaml."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any

from ruamel.yaml import YAML, YAMLError
from ruamel.yaml.scalarbool import ScalarBoolean

from composecheck.validator.models import ValidationIssue, ValidationResult, ValidationSeverity

logger = logging.getLogger(__name__)


def to_plain(node: Any) -> Any:
    """Convert ruamel round-trip containers and scalars to plain Python values."""
    if hasattr(node, "items"):
        return {_plain_key(key): to_plain(value) for key, value in node.items()}
    if isinstance(node, (list, tuple)):
        return [to_plain(item) for item in node]
    # ScalarBoolean subclasses int, check it first
    if isinstance(node, ScalarBoolean):
        return bool(node)
    if isinstance(node, bool) or node is None:
        return node
    if isinstance(node, int):
        return int(node)
    if isinstance(node, float):
        return float(node)
    if isinstance(node, str):
        return str(node)
    return node


def _plain_key(key: Any) -> Any:
    # Complex keys ("? [a, b]") load as ruamel key containers
    if isinstance(key, (list, tuple)) or hasattr(key, "items"):
        return str(key)
    return to_plain(key)


def check_yaml_syntax(yaml_str: str) -> ValidationResult:
    """Parse YAML and check for syntax errors.

    Returns a ValidationResult with valid=True and the parsed tree on success,
    or valid=False with an error-level issue on failure. Blank input parses
    to an empty document so that it reports the missing services key rather
    than a parser failure.
    """
    if not yaml_str or not yaml_str.strip():
        return ValidationResult(valid=True, yaml_parsed={})

    yaml = YAML()
    yaml.preserve_quotes = True

    try:
        parsed = yaml.load(StringIO(yaml_str))
    except YAMLError as e:
        line = None
        if hasattr(e, "problem_mark") and e.problem_mark is not None:
            line = e.problem_mark.line + 1  # 0-indexed to 1-indexed
        logger.debug("YAML parse failed at line %s: %s", line, e)

        return ValidationResult(
            valid=False,
            state="parse_error",
            issues=[
                ValidationIssue(
                    severity=ValidationSeverity.error,
                    check_name="yaml_syntax",
                    message=str(e),
                    line=line,
                )
            ],
            error_count=1,
        )

    return ValidationResult(valid=True, yaml_parsed=to_plain(parsed))
