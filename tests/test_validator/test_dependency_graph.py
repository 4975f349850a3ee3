"""Tests for the service dependency graph."""

from __future__ import annotations

from composecheck.validator.dependency_graph import DependencyGraph, dependency_names


class TestDependencyNames:
    def test_list(self) -> None:
        assert dependency_names(["db", "cache"]) == ["db", "cache"]

    def test_mapping_keys(self) -> None:
        assert dependency_names({"db": {"condition": "service_started"}}) == ["db"]

    def test_scalar_and_empty(self) -> None:
        assert dependency_names("db") == []
        assert dependency_names(None) == []
        assert dependency_names([]) == []

    def test_stringifies_entries(self) -> None:
        assert dependency_names([1, True]) == ["1", "true"]


class TestFromServices:
    def test_drops_undefined_targets(self) -> None:
        graph = DependencyGraph.from_services(
            {
                "web": {"depends_on": ["db", "ghost"]},
                "db": {"image": "postgres"},
            }
        )
        assert graph.edges == {"web": ["db"], "db": []}

    def test_non_mapping_service_has_no_edges(self) -> None:
        graph = DependencyGraph.from_services({"web": "nginx", "db": None})
        assert graph.edges == {"web": [], "db": []}


class TestFindCycleEdges:
    def test_two_node_cycle_reports_each_frame(self) -> None:
        graph = DependencyGraph(edges={"a": ["b"], "b": ["a"]})
        assert graph.find_cycle_edges() == [("b", "a"), ("a", "b")]

    def test_three_node_cycle(self) -> None:
        graph = DependencyGraph(edges={"a": ["b"], "b": ["c"], "c": ["a"]})
        assert graph.find_cycle_edges() == [("c", "a"), ("b", "c"), ("a", "b")]

    def test_self_loop(self) -> None:
        graph = DependencyGraph(edges={"a": ["a"]})
        assert graph.find_cycle_edges() == [("a", "a")]

    def test_chain(self) -> None:
        graph = DependencyGraph(edges={"a": ["b"], "b": ["c"], "c": []})
        assert graph.find_cycle_edges() == []

    def test_diamond_is_acyclic(self) -> None:
        graph = DependencyGraph(
            edges={"a": ["b", "c"], "b": ["d"], "c": ["d"], "d": []},
        )
        assert graph.find_cycle_edges() == []

    def test_cycle_reached_from_outside(self) -> None:
        graph = DependencyGraph(edges={"entry": ["x"], "x": ["y"], "y": ["x"]})
        edges = graph.find_cycle_edges()
        assert ("y", "x") in edges
        assert edges[-1] == ("entry", "x")

    def test_independent_cycles(self) -> None:
        graph = DependencyGraph(
            edges={"a": ["b"], "b": ["a"], "c": ["d"], "d": ["c"]},
        )
        edges = graph.find_cycle_edges()
        assert ("b", "a") in edges
        assert ("d", "c") in edges

    def test_repeatable(self) -> None:
        graph = DependencyGraph(edges={"a": ["b"], "b": ["a"]})
        assert graph.find_cycle_edges() == graph.find_cycle_edges()
