# parser/ast_nodes.py
# This file is part of Ordo - A Build-Order Conformance Checker
#
# Syntax tree for dependency graph descriptions

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Tuple


@dataclass(frozen=True, slots=True)
class DependencyChain:
    """One statement of a graph description.

    ``1 -> 2 -> A, B;`` is the chain ``(("1",), ("2",), ("A", "B"))``: every
    project of a group is upstream of every project of the next group. A
    chain with a single group only declares projects.

    Attributes:
        groups: Comma-separated project groups, in arrow order
    """

    groups: Tuple[Tuple[str, ...], ...]

    def projects(self) -> List[str]:
        """Project names in order of appearance, without duplicates."""
        seen: List[str] = []
        for group in self.groups:
            for name in group:
                if name not in seen:
                    seen.append(name)
        return seen

    def edges(self) -> Iterator[Tuple[str, str]]:
        """(upstream, downstream) pairs declared by this chain."""
        for left, right in zip(self.groups, self.groups[1:]):
            for upstream in left:
                for downstream in right:
                    yield upstream, downstream

    def __str__(self) -> str:
        return " -> ".join(", ".join(group) for group in self.groups) + ";"
