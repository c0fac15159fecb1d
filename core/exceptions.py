# core/exceptions.py
# This file is part of Ordo - A Build-Order Conformance Checker
#
# Error taxonomy for graph access, log lookup and order verification

"""Exceptions raised while verifying a build log against a dependency graph.

Every verification failure derives from ``AssertionError`` so that a test
driver calling the checker reports it as a failed assertion rather than an
error. Graph misuse derives from the built-in types a caller would expect
(``ValueError``, ``KeyError``).
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Dict, Sequence, Tuple

if TYPE_CHECKING:
    from .event import EventKind


class ViolationKind(Enum):
    """The invariant an OrderViolationError reports."""

    DEPENDENT_STARTED_EARLY = "dependent started before its dependee finished"
    UNRELATED_SERIALIZED = "unrelated projects did not overlap"
    ROOT_STARTED_LATE = "root project started after another project finished"

    def __str__(self) -> str:
        return self.name


class BuildOrderError(AssertionError):
    """Base class for every failure detected while checking a build log."""


class MissingEventError(BuildOrderError):
    """A required (project, event kind) token is absent from the build log."""

    def __init__(self, project: str, kind: "EventKind", token: str):
        self.project = project
        self.kind = kind
        self.token = token
        super().__init__(f"project event {token} not found in build log.")


class OrderViolationError(BuildOrderError):
    """One of the ordering invariants does not hold for the build log.

    Attributes:
        kind: The violated invariant
        projects: Project names involved, in the order they appear in the message
        positions: Log token -> index pairs contradicting the expectation
    """

    def __init__(
        self,
        kind: ViolationKind,
        projects: Sequence[str],
        positions: Dict[str, int],
        message: str,
    ):
        self.kind = kind
        self.projects: Tuple[str, ...] = tuple(projects)
        self.positions = dict(positions)
        self.message = message
        super().__init__(message)

    @property
    def key(self) -> tuple:
        """Identity of the violation, independent of which side found it."""
        if self.kind is ViolationKind.UNRELATED_SERIALIZED:
            return (self.kind, frozenset(self.projects))
        return (self.kind, self.projects)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, OrderViolationError) and self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        where = ", ".join(f"{token}@{index}" for token, index in self.positions.items())
        return f"{self.message} [{where}]" if where else self.message


class BuildOrderViolations(BuildOrderError):
    """Aggregate of every violation found during one verification pass."""

    def __init__(self, violations: Sequence[OrderViolationError]):
        self.violations = list(violations)
        lines = [f"{len(self.violations)} build order violation(s):"]
        lines.extend(f"  - {v}" for v in self.violations)
        super().__init__("\n".join(lines))


class UnexpectedOrderError(BuildOrderError):
    """The observed build log differs from an exact expected order."""

    def __init__(self, expected: Sequence[str], actual: Sequence[str], position: int):
        self.expected = list(expected)
        self.actual = list(actual)
        self.position = position
        want = self.expected[position] if position < len(self.expected) else "<end>"
        got = self.actual[position] if position < len(self.actual) else "<end>"
        super().__init__(
            f"build log differs from expected order at position {position}: "
            f"expected {want}, got {got} (expected {self.expected}, actual {self.actual})"
        )


class DependencyCycleError(ValueError):
    """Adding a dependency would make a project transitively depend on itself."""


class UnknownProjectError(KeyError):
    """A project name is not part of the dependency graph."""

    def __str__(self) -> str:
        return f"unknown project: {self.args[0]}"


class BuildLogFormatError(Exception):
    """Raised when a build log file or token has an invalid format."""

    pass
