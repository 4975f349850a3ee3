"""Validation data models."""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field


class ValidationSeverity(str, Enum):
    """Severity level for validation issues."""

    error = "error"
    warning = "warning"


class ValidationIssue(BaseModel):
    """A single validation finding."""

    severity: ValidationSeverity
    check_name: str
    message: str
    path: str | None = None
    line: int | None = None


class ServiceSummary(BaseModel):
    """Overview row for one service of a parsed document."""

    name: str
    image: str | None = None
    build: str | None = None
    ports: list[str] = Field(default_factory=list)


class ValidationResult(BaseModel):
    """Aggregated result from the validation pipeline."""

    valid: bool = True
    state: Literal["parse_error", "invalid", "valid"] = "valid"
    issues: list[ValidationIssue] = Field(default_factory=list)
    error_count: int = 0
    warning_count: int = 0
    yaml_parsed: Any = None
    services: list[ServiceSummary] = Field(default_factory=list)
