# utils/graph_visualizer.py
# This file is part of Ordo - A Build-Order Conformance Checker
#
# Graphviz rendering of a dependency graph with violations highlighted

import os
from typing import TYPE_CHECKING, Optional

from graphviz import Digraph, ExecutableNotFound

from utils.logger import get_logger

if TYPE_CHECKING:
    from core.graph import GraphAccessor
    from core.verifier import VerificationReport

VISUALIZATION_OUTPUT_FOLDER = "graph_visualizations"

_VIOLATION_COLOR = "lightcoral"
_OK_COLOR = "palegreen"
_UNCHECKED_COLOR = "lightgrey"


def build_dependency_digraph(
    graph: "GraphAccessor",
    report: Optional["VerificationReport"] = None,
    fmt: str = "png",
) -> Digraph:
    """Build a Graphviz digraph of the projects and their dependencies.

    Edges point from upstream to downstream. Root projects are drawn as boxes.
    When a report is given, projects named in a violation are filled red and
    the others green; without a report every project is grey.

    Args:
        graph: Dependency graph to draw
        report: Optional verification report used for colouring
        fmt: Output format used when the digraph is rendered
    """
    flagged = report.projects_in_violation() if report is not None else set()

    dot = Digraph(comment="Project dependencies", format=fmt)
    dot.attr(rankdir="TB", nodesep="0.6", ranksep="0.5")

    for name in graph.projects():
        if report is None:
            color = _UNCHECKED_COLOR
        else:
            color = _VIOLATION_COLOR if name in flagged else _OK_COLOR
        shape = "ellipse" if graph.upstream(name) else "box"
        dot.node(name, name, shape=shape, style="filled", fillcolor=color)

    for name in graph.projects():
        for downstream in sorted(graph.downstream(name)):
            dot.edge(name, downstream)

    if report is not None:
        status = "OK" if report.passed else f"{len(report.violations)} violation(s)"
        dot.attr(label=f"Build order: {status}", labelloc="t")

    return dot


def render_dependency_graph(
    graph: "GraphAccessor",
    base_filename: str,
    report: Optional["VerificationReport"] = None,
    fmt: str = "png",
) -> Optional[str]:
    """Render the dependency graph into the visualization folder.

    Returns:
        Path of the rendered file, or None if the Graphviz ``dot`` executable
        is not available
    """
    logger = get_logger()
    os.makedirs(VISUALIZATION_OUTPUT_FOLDER, exist_ok=True)
    output_path = os.path.join(VISUALIZATION_OUTPUT_FOLDER, base_filename)

    dot = build_dependency_digraph(graph, report, fmt)
    try:
        rendered = dot.render(output_path, view=False, cleanup=True)
    except ExecutableNotFound as e:
        logger.warning(
            f"Failed to render dependency graph to {output_path}.{fmt}: {e}. "
            "Ensure Graphviz executables (dot) are in your system's PATH."
        )
        return None

    logger.info(f"Dependency graph visualization saved to {rendered}")
    return rendered
