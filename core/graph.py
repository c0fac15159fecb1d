# core/graph.py
# This file is part of Ordo - A Build-Order Conformance Checker
#
# Dependency graph access: direct and transitive upstream/downstream sets

"""Dependency graph between projects.

The checker only reads a graph. Any object implementing ``GraphAccessor``
can be verified; ``DependencyGraph`` is an in-memory implementation used
when the graph is declared in a test or parsed from text.

Edges point from upstream to downstream: ``add_dependency("1", "2")`` means
project ``2`` depends on project ``1`` and is built after it.
"""

from __future__ import annotations
from collections import deque
from typing import Dict, FrozenSet, Iterable, List, Protocol, Set

from .exceptions import DependencyCycleError, UnknownProjectError
from utils.logger import get_logger


class GraphAccessor(Protocol):
    """Read-only view of a dependency graph."""

    def projects(self) -> List[str]: ...

    def upstream(self, name: str) -> FrozenSet[str]: ...

    def downstream(self, name: str) -> FrozenSet[str]: ...

    def transitive_upstream(self, name: str) -> FrozenSet[str]: ...

    def transitive_downstream(self, name: str) -> FrozenSet[str]: ...


class DependencyGraph:
    """Directed acyclic graph of project dependencies.

    Projects are identified by name. Insertion order of projects is kept so
    that iteration (and therefore violation reporting) is deterministic.
    """

    def __init__(self) -> None:
        self._upstream: Dict[str, Set[str]] = {}
        self._downstream: Dict[str, Set[str]] = {}

    def add_project(self, name: str) -> None:
        """Register a project; registering it again is a no-op.

        Raises:
            ValueError: If the name is empty
        """
        if not name:
            raise ValueError("Project name must not be empty")
        if name not in self._upstream:
            self._upstream[name] = set()
            self._downstream[name] = set()

    def add_dependency(self, upstream: str, downstream: str) -> None:
        """Record that ``downstream`` depends on ``upstream``.

        Unknown projects are registered first.

        Raises:
            DependencyCycleError: If the edge is a self-loop or closes a cycle
        """
        if upstream == downstream:
            raise DependencyCycleError(f"Project {upstream} cannot depend on itself")

        self.add_project(upstream)
        self.add_project(downstream)

        if upstream in self._walk(downstream, self._downstream):
            raise DependencyCycleError(
                f"{upstream} -> {downstream} would create a dependency cycle"
            )

        self._downstream[upstream].add(downstream)
        self._upstream[downstream].add(upstream)
        get_logger().debug(f"Dependency added: {upstream} -> {downstream}")

    def remove_dependency(self, upstream: str, downstream: str) -> None:
        """Remove a recorded dependency.

        Raises:
            KeyError: If the dependency does not exist
        """
        if downstream not in self._downstream.get(upstream, ()):
            raise KeyError(f"No dependency {upstream} -> {downstream}")
        self._downstream[upstream].discard(downstream)
        self._upstream[downstream].discard(upstream)

    def projects(self) -> List[str]:
        return list(self._upstream)

    def upstream(self, name: str) -> FrozenSet[str]:
        return frozenset(self._edges(name, self._upstream))

    def downstream(self, name: str) -> FrozenSet[str]:
        return frozenset(self._edges(name, self._downstream))

    def transitive_upstream(self, name: str) -> FrozenSet[str]:
        """All projects ``name`` depends on, directly or indirectly."""
        self._edges(name, self._upstream)
        return frozenset(self._walk(name, self._upstream))

    def transitive_downstream(self, name: str) -> FrozenSet[str]:
        """All projects depending on ``name``, directly or indirectly."""
        self._edges(name, self._downstream)
        return frozenset(self._walk(name, self._downstream))

    def roots(self) -> List[str]:
        """Projects with no upstream dependencies, in insertion order."""
        return [name for name, ups in self._upstream.items() if not ups]

    def __contains__(self, name: object) -> bool:
        return name in self._upstream

    def __len__(self) -> int:
        return len(self._upstream)

    def __repr__(self) -> str:
        edges = [
            f"{up}->{down}"
            for up, downs in self._downstream.items()
            for down in sorted(downs)
        ]
        return f"DependencyGraph(projects={self.projects()}, edges={edges})"

    @classmethod
    def from_edges(
        cls, edges: Iterable[tuple], projects: Iterable[str] = ()
    ) -> DependencyGraph:
        """Build a graph from (upstream, downstream) pairs plus standalone projects."""
        graph = cls()
        for name in projects:
            graph.add_project(name)
        for upstream, downstream in edges:
            graph.add_dependency(upstream, downstream)
        return graph

    def _edges(self, name: str, table: Dict[str, Set[str]]) -> Set[str]:
        try:
            return table[name]
        except KeyError:
            raise UnknownProjectError(name) from None

    @staticmethod
    def _walk(start: str, table: Dict[str, Set[str]]) -> Set[str]:
        # breadth-first closure over direct edges, excluding start
        seen: Set[str] = set()
        queue = deque(table.get(start, ()))
        while queue:
            current = queue.popleft()
            if current in seen:
                continue
            seen.add(current)
            queue.extend(table.get(current, ()))
        return seen
