# core/relation.py
# This file is part of Ordo - A Build-Order Conformance Checker
#
# Classification of how two projects are related in the dependency graph

from enum import Enum, auto

from .graph import GraphAccessor
from utils.logger import get_logger


class Relation(Enum):
    """How a subject project relates to another project.

    Values:
        UPSTREAM_OF: The subject is a dependee; the other project depends on it
        DOWNSTREAM_OF: The subject is a dependent; it depends on the other project
        UNRELATED: Neither project transitively depends on the other
    """

    UPSTREAM_OF = auto()
    DOWNSTREAM_OF = auto()
    UNRELATED = auto()

    def __str__(self) -> str:
        return self.name

    def inverse(self) -> "Relation":
        """The relation seen from the other project's side."""
        if self is Relation.UPSTREAM_OF:
            return Relation.DOWNSTREAM_OF
        if self is Relation.DOWNSTREAM_OF:
            return Relation.UPSTREAM_OF
        return Relation.UNRELATED


def classify(subject: str, other: str, graph: GraphAccessor) -> Relation:
    """Decide whether ``subject`` is upstream of, downstream of, or unrelated to ``other``.

    The relation is recomputed from the graph's transitive closures on every
    call.

    Args:
        subject: Project seen as "this" project
        other: A different project of the same graph
        graph: Graph both projects belong to

    Returns:
        Relation of subject to other

    Raises:
        ValueError: If subject and other are the same project
    """
    if subject == other:
        raise ValueError(f"Cannot classify project {subject} against itself")

    if other in graph.transitive_upstream(subject):
        relation = Relation.DOWNSTREAM_OF
    elif other in graph.transitive_downstream(subject):
        relation = Relation.UPSTREAM_OF
    else:
        relation = Relation.UNRELATED

    get_logger().pair_classified(subject, other, relation.name)
    return relation
