# tests/utils_tests/test_graph_visualizer.py
# This file is part of Ordo - A Build-Order Conformance Checker
#
# Test suite for dependency graph visualization

from graphviz import Digraph

from core.verifier import verify_build_order
from utils import graph_visualizer
from utils.graph_visualizer import build_dependency_digraph, render_dependency_graph


class TestDependencyDigraph:

    def test_nodes_and_edges(self, project_graph):
        dot = build_dependency_digraph(project_graph)
        source = dot.source

        assert isinstance(dot, Digraph)
        for name in project_graph.projects():
            assert f"{name} [label={name}" in source
        assert "1 -> 2" in source
        assert "2 -> A" in source
        assert "2 -> B" in source
        assert "C ->" not in source

    def test_roots_drawn_as_boxes(self, project_graph):
        source = build_dependency_digraph(project_graph).source
        assert "1 [label=1 fillcolor=lightgrey shape=box" in source
        assert "A [label=A fillcolor=lightgrey shape=ellipse" in source

    def test_violations_highlighted(self, project_graph, dependency_order_log):
        report = verify_build_order(dependency_order_log, project_graph)
        source = build_dependency_digraph(project_graph, report).source

        assert "C [label=C fillcolor=lightcoral" in source
        assert "1 [label=1 fillcolor=palegreen" in source
        assert "3 violation(s)" in source

    def test_passing_report_label(self, project_graph):
        log = ["1s", "Cs", "1f", "2s", "2f", "As", "Bs", "Cf", "Af", "Bf"]
        report = verify_build_order(log, project_graph)
        assert "Build order: OK" in build_dependency_digraph(project_graph, report).source

    def test_render_without_dot_executable(self, project_graph, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("PATH", "")

        assert render_dependency_graph(project_graph, "deps") is None
        assert (tmp_path / graph_visualizer.VISUALIZATION_OUTPUT_FOLDER).is_dir()
