# parser/__init__.py
# This file is part of Ordo - A Build-Order Conformance Checker
#
# Parsing of textual dependency graph descriptions

"""Textual dependency graph descriptions.

A description lists dependency chains, one statement per ``;``::

    # 1 <- 2 <- A, 2 <- B, C has no dependencies
    1 -> 2 -> A, B;
    C;

Core Functions:
    parse: Converts a description into DependencyChain statements
    parse_graph: Builds a DependencyGraph from a description

Example:
    >>> from parser import parse_graph
    >>> graph = parse_graph("1 -> 2 -> A, B; C;")
    >>> sorted(graph.transitive_downstream("1"))
    ['2', 'A', 'B']
"""

from typing import List

from .ast_nodes import DependencyChain
from .exceptions import ParseError
from .grammar import _GraphParser
from core.exceptions import DependencyCycleError
from core.graph import DependencyGraph
from utils.logger import get_logger


def parse(source: str) -> List[DependencyChain]:
    """Parse a graph description into its statements.

    A fresh parser instance is used for each call.

    Raises:
        ParseError: The description is empty or malformed
    """
    return _GraphParser().parse(source)


def parse_graph(source: str) -> DependencyGraph:
    """Parse a graph description and build the dependency graph it declares.

    Projects are registered in order of first appearance.

    Raises:
        ParseError: The description is malformed or declares a dependency cycle
    """
    logger = get_logger()
    graph = DependencyGraph()

    for chain in parse(source):
        for name in chain.projects():
            graph.add_project(name)
        try:
            for upstream, downstream in chain.edges():
                graph.add_dependency(upstream, downstream)
        except DependencyCycleError as exc:
            raise ParseError(f"Invalid dependency in '{chain}': {exc}") from exc

    logger.debug(f"Built graph with {len(graph)} projects, roots: {graph.roots()}")
    return graph


__all__ = ["parse", "parse_graph", "ParseError", "DependencyChain"]

__version__ = "1.0.0"
__description__ = "Dependency graph description parsing"
