"""Service dependency graph and circular depends_on detection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from composecheck.validator.nodes import NodeKind, is_truthy, kind_of, to_text


def dependency_names(depends_on: Any) -> list[str]:
    """Normalize a depends_on value to a list of service names.

    The short syntax is a list of names, the long syntax a mapping keyed by
    name. Anything else names no dependencies.
    """
    if not is_truthy(depends_on):
        return []
    # Iterating a mapping yields its keys
    if kind_of(depends_on) in (NodeKind.sequence, NodeKind.mapping):
        return [to_text(dep) for dep in depends_on]
    return []


@dataclass
class _TraversalState:
    visited: set[str] = field(default_factory=set)
    on_stack: set[str] = field(default_factory=set)
    closing_edges: list[tuple[str, str]] = field(default_factory=list)


@dataclass
class DependencyGraph:
    """Directed graph of service -> dependency edges, keyed by service name.

    Only edges whose target is a defined service are kept.
    """

    edges: dict[str, list[str]] = field(default_factory=dict)

    @classmethod
    def from_services(cls, services: dict[str, Any]) -> DependencyGraph:
        names = [to_text(name) for name in services]
        defined = set(names)
        edges: dict[str, list[str]] = {}
        for name, definition in zip(names, services.values()):
            deps: list[str] = []
            if kind_of(definition) == NodeKind.mapping:
                deps = [
                    dep
                    for dep in dependency_names(definition.get("depends_on"))
                    if dep in defined
                ]
            edges[name] = deps
        return cls(edges=edges)

    def find_cycle_edges(self) -> list[tuple[str, str]]:
        """Return (service, dependency) pairs along every detected cycle.

        A depth-first search is started from every service in definition
        order. When the search reaches a service that is still on the stack,
        each frame unwinding back to the start reports the edge it followed,
        so one cycle usually yields several pairs and may be reported again
        from another entry point.
        """
        state = _TraversalState()
        for name in self.edges:
            self._visit(name, state)
        return state.closing_edges

    def _visit(self, node: str, state: _TraversalState) -> bool:
        if node in state.on_stack:
            return True
        if node in state.visited:
            return False

        state.visited.add(node)
        state.on_stack.add(node)
        for dep in self.edges.get(node, []):
            if self._visit(dep, state):
                state.closing_edges.append((node, dep))
                state.on_stack.discard(node)
                return True
        state.on_stack.discard(node)
        return False
