"""Structural and semantic checks for a parsed Compose document."""

from __future__ import annotations

from typing import Any

from composecheck.validator.compose_schema import (
    VALID_RESTART_POLICIES,
    VALID_SERVICE_KEYS,
    VALID_TOP_LEVEL_KEYS,
    base_restart_policy,
    is_named_volume,
    is_valid_port_spec,
)
from composecheck.validator.dependency_graph import DependencyGraph, dependency_names
from composecheck.validator.models import ValidationIssue, ValidationSeverity
from composecheck.validator.nodes import NodeKind, is_truthy, kind_of, to_text


def _error(check_name: str, message: str, path: str | None = None) -> ValidationIssue:
    return ValidationIssue(
        severity=ValidationSeverity.error,
        check_name=check_name,
        message=message,
        path=path,
    )


def _warning(check_name: str, message: str, path: str | None = None) -> ValidationIssue:
    return ValidationIssue(
        severity=ValidationSeverity.warning,
        check_name=check_name,
        message=message,
        path=path,
    )


def check_top_level_keys(root: dict) -> list[ValidationIssue]:
    """Warn about unknown top-level keys and the obsolete version field."""
    issues: list[ValidationIssue] = []

    for key in root:
        name = to_text(key)
        if name not in VALID_TOP_LEVEL_KEYS:
            issues.append(
                _warning("top_level_keys", f'Unknown top-level key "{name}".', name)
            )

    if "version" in root:
        issues.append(
            _warning(
                "obsolete_version",
                'The "version" field is obsolete in Docker Compose v2+. '
                "It can be safely removed.",
                "version",
            )
        )

    return issues


def check_image_or_build(name: str, service: dict, path: str) -> list[ValidationIssue]:
    if is_truthy(service.get("image")) or is_truthy(service.get("build")):
        return []
    return [
        _error(
            "image_or_build",
            f'Service "{name}" must have either "image" or "build".',
            path,
        )
    ]


def check_service_keys(name: str, service: dict, path: str) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for key in service:
        key_name = to_text(key)
        if key_name not in VALID_SERVICE_KEYS:
            issues.append(
                _warning(
                    "service_keys",
                    f'Unknown key "{key_name}" in service "{name}".',
                    f"{path}.{key_name}",
                )
            )
    return issues


def check_restart_policy(name: str, service: dict, path: str) -> list[ValidationIssue]:
    """Accept the four restart policies, allowing a ":N" retry suffix."""
    if "restart" not in service:
        return []

    restart = to_text(service["restart"])
    if base_restart_policy(restart) in VALID_RESTART_POLICIES:
        return []
    return [
        _error(
            "restart_policy",
            f'Invalid restart policy "{restart}" in "{name}". '
            f"Valid: {', '.join(VALID_RESTART_POLICIES)}.",
            f"{path}.restart",
        )
    ]


def check_ports(name: str, service: dict, path: str) -> list[ValidationIssue]:
    """Warn about short-syntax port entries with an unusual shape.

    Long-syntax entries (mappings) are not checked.
    """
    ports = service.get("ports")
    if kind_of(ports) != NodeKind.sequence:
        return []

    issues: list[ValidationIssue] = []
    for port in ports:
        if kind_of(port) not in (NodeKind.string, NodeKind.number):
            continue
        port_str = to_text(port)
        if not is_valid_port_spec(port_str):
            issues.append(
                _warning(
                    "ports",
                    f'Unusual port format "{port_str}" in "{name}". '
                    'Expected format: "host:container" or "container".',
                    f"{path}.ports",
                )
            )
    return issues


def check_depends_on(
    name: str, service: dict, path: str, service_names: set[str],
) -> list[ValidationIssue]:
    """Check that every dependency names another defined service."""
    issues: list[ValidationIssue] = []
    for dep in dependency_names(service.get("depends_on")):
        if dep not in service_names:
            issues.append(
                _error(
                    "depends_on",
                    f'Service "{name}" depends on "{dep}", which is not defined.',
                    f"{path}.depends_on",
                )
            )
        if dep == name:
            issues.append(
                _error(
                    "depends_on",
                    f'Service "{name}" depends on itself.',
                    f"{path}.depends_on",
                )
            )
    return issues


def check_environment(name: str, service: dict, path: str) -> list[ValidationIssue]:
    environment = service.get("environment")
    if kind_of(environment) in (NodeKind.null, NodeKind.sequence, NodeKind.mapping):
        return []
    return [
        _error(
            "environment",
            f'"environment" in "{name}" must be a list or mapping.',
            f"{path}.environment",
        )
    ]


def check_named_volumes(
    name: str, service: dict, path: str, top_volumes: Any,
) -> list[ValidationIssue]:
    """Warn when a named volume is missing from the top-level volumes mapping.

    Without a top-level volumes mapping there is nothing to compare against.
    """
    volumes = service.get("volumes")
    if kind_of(volumes) != NodeKind.sequence:
        return []
    if kind_of(top_volumes) != NodeKind.mapping:
        return []

    declared = {to_text(key) for key in top_volumes}
    issues: list[ValidationIssue] = []
    for volume in volumes:
        if kind_of(volume) != NodeKind.string or not is_named_volume(volume):
            continue
        if volume not in declared:
            issues.append(
                _warning(
                    "named_volumes",
                    f'Volume "{volume}" used in "{name}" is not defined in '
                    'top-level "volumes".',
                    f"{path}.volumes",
                )
            )
    return issues


def check_service(
    name: str, definition: Any, service_names: set[str], top_volumes: Any,
) -> list[ValidationIssue]:
    """Run every per-service check on a single service definition."""
    path = f"services.{name}"

    if kind_of(definition) != NodeKind.mapping:
        return [_error("service_shape", f'Service "{name}" must be a mapping.', path)]

    issues: list[ValidationIssue] = []
    issues.extend(check_image_or_build(name, definition, path))
    issues.extend(check_service_keys(name, definition, path))
    issues.extend(check_restart_policy(name, definition, path))
    issues.extend(check_ports(name, definition, path))
    issues.extend(check_depends_on(name, definition, path, service_names))
    issues.extend(check_environment(name, definition, path))
    issues.extend(check_named_volumes(name, definition, path, top_volumes))
    return issues


def check_circular_dependencies(services: dict) -> list[ValidationIssue]:
    graph = DependencyGraph.from_services(services)
    return [
        _error(
            "circular_dependency",
            f'Circular dependency detected involving "{node}" and "{dep}".',
        )
        for node, dep in graph.find_cycle_edges()
    ]


def check_compose(document: Any) -> list[ValidationIssue]:
    """Validate a parsed Compose document.

    Returns diagnostics in the order the checks run. A document that is not
    a mapping, or that lacks a usable services mapping, stops validation at
    that point. Never raises for a parsed tree.
    """
    if kind_of(document) != NodeKind.mapping:
        return [_error("document_shape", "Document must be a YAML mapping (object).")]

    issues = check_top_level_keys(document)

    services = document.get("services")
    if not is_truthy(services):
        issues.append(_error("services", 'Missing required "services" key.'))
        return issues
    if kind_of(services) != NodeKind.mapping:
        issues.append(
            _error("services", '"services" must be a mapping of service definitions.')
        )
        return issues

    service_names = {to_text(name) for name in services}
    top_volumes = document.get("volumes")
    for name, definition in services.items():
        issues.extend(check_service(to_text(name), definition, service_names, top_volumes))

    issues.extend(check_circular_dependencies(services))
    return issues
