"""Validation pipeline: parse, check, then fold diagnostics into a verdict."""

from __future__ import annotations

import logging
from typing import Any

from composecheck.validator.compose_rules import check_compose
from composecheck.validator.models import (
    ServiceSummary,
    ValidationResult,
    ValidationSeverity,
)
from composecheck.validator.nodes import NodeKind, is_truthy, kind_of, to_text
from composecheck.validator.yaml_syntax import check_yaml_syntax

logger = logging.getLogger(__name__)


def summarize_services(document: Any) -> list[ServiceSummary]:
    """Build the services overview shown next to the diagnostics."""
    if kind_of(document) != NodeKind.mapping:
        return []
    services = document.get("services")
    if kind_of(services) != NodeKind.mapping:
        return []

    summaries: list[ServiceSummary] = []
    for name, definition in services.items():
        if kind_of(definition) != NodeKind.mapping:
            continue

        image = definition.get("image")
        build = definition.get("build")
        ports = definition.get("ports")
        summaries.append(
            ServiceSummary(
                name=to_text(name),
                image=to_text(image) if is_truthy(image) else None,
                build=(
                    (build if kind_of(build) == NodeKind.string else ".")
                    if is_truthy(build)
                    else None
                ),
                ports=(
                    [to_text(port) for port in ports]
                    if kind_of(ports) == NodeKind.sequence
                    else []
                ),
            )
        )
    return summaries


def validate_document(document: Any) -> ValidationResult:
    """Validate an already-parsed Compose document."""
    issues = check_compose(document)
    error_count = sum(1 for i in issues if i.severity == ValidationSeverity.error)
    warning_count = len(issues) - error_count

    return ValidationResult(
        valid=error_count == 0,
        state="valid" if error_count == 0 else "invalid",
        issues=issues,
        error_count=error_count,
        warning_count=warning_count,
        yaml_parsed=document,
        services=summarize_services(document),
    )


def validate(yaml_str: str) -> ValidationResult:
    """Run the full validation pipeline on Compose YAML text.

    Order: 1. YAML syntax → 2. Compose checks.
    If syntax fails, returns immediately with the parser message as the only issue.
    """
    # Step 1: YAML syntax
    syntax = check_yaml_syntax(yaml_str)
    if not syntax.valid:
        return syntax

    # Step 2: Compose document checks
    result = validate_document(syntax.yaml_parsed)
    logger.debug(
        "Compose validation produced %d errors and %d warnings",
        result.error_count,
        result.warning_count,
    )
    return result
