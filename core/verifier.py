# core/verifier.py
# This file is part of Ordo - A Build-Order Conformance Checker
#
# Ordering checks over a build log and the driver applying them to a graph

"""Build-order verification.

Three checks compare positions of START/FINISH tokens in a build log:

- a dependent project must not start before its dependee has finished;
- two unrelated projects must have overlapping build intervals;
- a root project must start before any build finishes.

``BuildOrderVerifier`` classifies every ordered pair of projects and applies
the matching check, collecting all violations into a ``VerificationReport``.
The last two checks express a concurrent scheduling policy and can be
switched off through ``VerificationPolicy``.

Example:
    >>> graph = DependencyGraph.from_edges([("1", "2")], projects=["C"])
    >>> log = ["1s", "Cs", "1f", "2s", "Cf", "2f"]
    >>> BuildOrderVerifier(graph).verify(log).passed
    True
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Set, Tuple

from .event import EventKind, has_ambiguous_name, is_finish_token
from .exceptions import (
    BuildOrderViolations,
    OrderViolationError,
    UnexpectedOrderError,
    ViolationKind,
)
from .graph import GraphAccessor
from .locator import event_token, index_of
from .policy import VerificationPolicy
from .relation import Relation, classify
from utils.logger import get_logger


def assert_dependent_not_started_before_dependee_finished(
    dependee: str, dependent: str, log: Sequence[str]
) -> None:
    """Fail if ``dependent`` started building before ``dependee`` finished.

    Raises:
        OrderViolationError: If the dependent's START precedes the dependee's FINISH
        MissingEventError: If either token is absent
    """
    dependee_finish = index_of(dependee, EventKind.FINISH, log)
    dependent_start = index_of(dependent, EventKind.START, log)
    if dependent_start < dependee_finish:
        raise OrderViolationError(
            ViolationKind.DEPENDENT_STARTED_EARLY,
            (dependee, dependent),
            {
                event_token(dependent, EventKind.START): dependent_start,
                event_token(dependee, EventKind.FINISH): dependee_finish,
            },
            f"{dependent} depends on {dependee}, but it started building "
            f"before {dependee} was finished building.",
        )


def assert_both_started_before_either_finished(
    project: str, other: str, log: Sequence[str]
) -> None:
    """Fail if one of two unrelated projects started only after the other finished.

    Raises:
        OrderViolationError: If the latest START comes after the earliest FINISH
        MissingEventError: If any of the four tokens is absent
    """
    this_start = index_of(project, EventKind.START, log)
    other_start = index_of(other, EventKind.START, log)
    this_finish = index_of(project, EventKind.FINISH, log)
    other_finish = index_of(other, EventKind.FINISH, log)

    latest_start = max(this_start, other_start)
    earliest_finish = min(this_finish, other_finish)
    if latest_start > earliest_finish:
        raise OrderViolationError(
            ViolationKind.UNRELATED_SERIALIZED,
            (project, other),
            {
                event_token(project, EventKind.START): this_start,
                event_token(project, EventKind.FINISH): this_finish,
                event_token(other, EventKind.START): other_start,
                event_token(other, EventKind.FINISH): other_finish,
            },
            f"{project} is unrelated to {other}, but one of these two projects "
            f"did not start until sometime after the other one was finished.",
        )


def assert_root_started_before_any_other_finished(root: str, log: Sequence[str]) -> None:
    """Fail if any build finished before the root project started.

    Raises:
        OrderViolationError: On the first FINISH token preceding the root's START
        MissingEventError: If the root's START token is absent
    """
    root_start = index_of(root, EventKind.START, log)
    for index, token in enumerate(log[:root_start]):
        if is_finish_token(token):
            raise OrderViolationError(
                ViolationKind.ROOT_STARTED_LATE,
                (root,),
                {token: index, event_token(root, EventKind.START): root_start},
                f"project ({token}) finished before top level project {root} started.",
            )


def assert_order_matches_expected(expected: Sequence[str], actual: Sequence[str]) -> None:
    """Fail unless the build log is exactly the expected sequence.

    Raises:
        UnexpectedOrderError: Naming the first position where the logs differ
    """
    expected = list(expected)
    actual = list(actual)
    if expected == actual:
        return
    position = next(
        (i for i, (want, got) in enumerate(zip(expected, actual)) if want != got),
        min(len(expected), len(actual)),
    )
    raise UnexpectedOrderError(expected, actual, position)


@dataclass
class VerificationReport:
    """Outcome of one verification pass.

    Attributes:
        violations: Distinct violations in the order they were found
        pairs_checked: Number of ordered project pairs classified
        roots_checked: Number of root projects checked
    """

    violations: List[OrderViolationError] = field(default_factory=list)
    pairs_checked: int = 0
    roots_checked: int = 0

    @property
    def passed(self) -> bool:
        return not self.violations

    def violations_of(self, kind: ViolationKind) -> List[OrderViolationError]:
        return [v for v in self.violations if v.kind is kind]

    def projects_in_violation(self) -> Set[str]:
        return {name for v in self.violations for name in v.projects}

    def raise_for_violations(self) -> None:
        """Raise BuildOrderViolations if any violation was found."""
        if self.violations:
            raise BuildOrderViolations(self.violations)

    def __str__(self) -> str:
        status = "passed" if self.passed else f"{len(self.violations)} violation(s)"
        return (
            f"VerificationReport({status}, pairs={self.pairs_checked}, "
            f"roots={self.roots_checked})"
        )


_Check = Tuple[Callable[..., None], Tuple[str, ...]]


class BuildOrderVerifier:
    """Checks a build log against a dependency graph.

    Every ordered pair of distinct projects is classified and checked:
    dependee/dependent pairs for ordering, unrelated pairs for overlap.
    Projects without upstream dependencies are additionally checked to have
    started before any build finished. A missing token is not a violation:
    the MissingEventError propagates because the log cannot be verified.
    """

    def __init__(self, graph: GraphAccessor, policy: Optional[VerificationPolicy] = None):
        self.graph = graph
        self.policy = policy or VerificationPolicy()

    def verify(
        self, log: Sequence[str], projects: Optional[Iterable[str]] = None
    ) -> VerificationReport:
        """Run every applicable check and collect the violations.

        Args:
            log: Build log tokens in temporal order
            projects: Project names to check (default: every project of the graph)

        Returns:
            VerificationReport with every distinct violation found
        """
        logger = get_logger()
        log = list(log)
        names = list(projects) if projects is not None else list(self.graph.projects())

        for name in names:
            if has_ambiguous_name(name):
                logger.warning(
                    f"Project name {name!r} ends in an event suffix; log lookups may be ambiguous"
                )

        logger.verification_start(len(names), len(log), str(self.policy))

        report = VerificationReport()
        seen: Set[OrderViolationError] = set()
        for check, args in self._checks(names, report):
            try:
                check(*args, log)
            except OrderViolationError as violation:
                if violation in seen:
                    continue
                seen.add(violation)
                report.violations.append(violation)
                logger.violation_found(str(violation))
                if self.policy.fail_fast:
                    break

        logger.final_result(report.passed, len(report.violations))
        return report

    def _checks(self, names: List[str], report: VerificationReport) -> Iterator[_Check]:
        for subject in names:
            for other in names:
                if subject == other:
                    continue
                relation = classify(subject, other, self.graph)
                report.pairs_checked += 1
                if relation is Relation.UPSTREAM_OF:
                    yield assert_dependent_not_started_before_dependee_finished, (subject, other)
                elif relation is Relation.DOWNSTREAM_OF:
                    yield assert_dependent_not_started_before_dependee_finished, (other, subject)
                elif self.policy.require_overlap:
                    yield assert_both_started_before_either_finished, (subject, other)

            if self.policy.require_roots_first and not self.graph.transitive_upstream(subject):
                report.roots_checked += 1
                yield assert_root_started_before_any_other_finished, (subject,)


def verify_build_order(
    log: Sequence[str],
    graph: GraphAccessor,
    projects: Optional[Iterable[str]] = None,
    policy: Optional[VerificationPolicy] = None,
) -> VerificationReport:
    """Verify a build log and return the report without raising."""
    return BuildOrderVerifier(graph, policy).verify(log, projects)


def assert_order_is_correct(
    log: Sequence[str],
    graph: GraphAccessor,
    projects: Optional[Iterable[str]] = None,
    policy: Optional[VerificationPolicy] = None,
) -> VerificationReport:
    """Verify a build log, raising BuildOrderViolations if any check fails.

    Returns:
        The passing VerificationReport
    """
    report = verify_build_order(log, graph, projects, policy)
    report.raise_for_violations()
    return report
