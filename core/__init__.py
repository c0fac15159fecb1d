# core/__init__.py
# This file is part of Ordo - A Build-Order Conformance Checker
#
# Core module public API for build-order verification

"""Core components for checking that projects were built in dependency order.

A build log is an ordered list of tokens, one per build transition, such as
``["1s", "Cs", "1f", "Cf", "2s", "2f"]`` where the suffix ``s`` marks a
build starting and ``f`` a build finishing. Position in the log is the only
timing signal. The verifier combines the log with a dependency graph and
checks that dependents wait for their dependees, that unrelated projects
build concurrently, and that root projects are scheduled first.

Primary Components:
    BuildEvent, EventKind: Log token encoding
    DependencyGraph: In-memory dependency graph with transitive closures
    Relation, classify: Relation of one project to another
    index_of: Position of a project event in the log
    BuildOrderVerifier: Driver applying every check to every project pair
    VerificationPolicy: Selects which concurrency expectations apply

Example:
    >>> from core import DependencyGraph, assert_order_is_correct
    >>> graph = DependencyGraph.from_edges([("1", "2"), ("2", "A")])
    >>> assert_order_is_correct(["1s", "1f", "2s", "2f", "As", "Af"], graph)
"""

from .event import BuildEvent, EventKind, STARTED, FINISHED
from .exceptions import (
    BuildLogFormatError,
    BuildOrderError,
    BuildOrderViolations,
    DependencyCycleError,
    MissingEventError,
    OrderViolationError,
    UnexpectedOrderError,
    UnknownProjectError,
    ViolationKind,
)
from .graph import DependencyGraph, GraphAccessor
from .locator import event_token, index_of
from .policy import VerificationPolicy
from .relation import Relation, classify
from .verifier import (
    BuildOrderVerifier,
    VerificationReport,
    assert_both_started_before_either_finished,
    assert_dependent_not_started_before_dependee_finished,
    assert_order_is_correct,
    assert_order_matches_expected,
    assert_root_started_before_any_other_finished,
    verify_build_order,
)

__all__ = [
    "BuildEvent",
    "EventKind",
    "STARTED",
    "FINISHED",
    "BuildLogFormatError",
    "BuildOrderError",
    "BuildOrderViolations",
    "DependencyCycleError",
    "MissingEventError",
    "OrderViolationError",
    "UnexpectedOrderError",
    "UnknownProjectError",
    "ViolationKind",
    "DependencyGraph",
    "GraphAccessor",
    "event_token",
    "index_of",
    "VerificationPolicy",
    "Relation",
    "classify",
    "BuildOrderVerifier",
    "VerificationReport",
    "assert_both_started_before_either_finished",
    "assert_dependent_not_started_before_dependee_finished",
    "assert_order_is_correct",
    "assert_order_matches_expected",
    "assert_root_started_before_any_other_finished",
    "verify_build_order",
]

__version__ = "1.0.0"
__description__ = "Core components for build-order conformance checking"
