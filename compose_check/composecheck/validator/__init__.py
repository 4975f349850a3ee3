"""Validation pipeline for Docker Compose YAML."""

from composecheck.validator.compose_rules import check_compose
from composecheck.validator.models import (
    ServiceSummary,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
)
from composecheck.validator.pipeline import validate, validate_document

__all__ = [
    "ServiceSummary",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
    "check_compose",
    "validate",
    "validate_document",
]
