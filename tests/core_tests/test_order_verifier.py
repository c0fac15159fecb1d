# tests/core_tests/test_order_verifier.py
# This file is part of Ordo - A Build-Order Conformance Checker
#
# Test suite for the verification driver and its report

"""Tests for BuildOrderVerifier over the 1 -> 2 -> {A, B}, C graph.

In the out-of-order log every dependent starts before its dependee finishes::

    index: 0    1    2    3    4    5    6    7    8    9
    token: 1s   Cs   As   2s   Bs   1f   Cf   Af   2f   Bf
"""

import itertools

import pytest
from core.event import EventKind
from core.exceptions import (
    BuildOrderViolations,
    MissingEventError,
    ViolationKind,
)
from core.graph import DependencyGraph
from core.locator import index_of
from core.policy import VerificationPolicy
from core.relation import Relation, classify
from core.verifier import (
    BuildOrderVerifier,
    assert_order_is_correct,
    verify_build_order,
)


class TestBuildOrderVerifier:

    def test_out_of_order_log_reports_every_dependency_violation(
        self, project_graph, out_of_order_log
    ):
        report = BuildOrderVerifier(project_graph).verify(out_of_order_log)

        assert not report.passed
        pairs = [v.projects for v in report.violations]
        assert sorted(pairs) == sorted(
            [("1", "2"), ("1", "A"), ("1", "B"), ("2", "A"), ("2", "B")]
        )
        assert all(v.kind is ViolationKind.DEPENDENT_STARTED_EARLY for v in report.violations)

    def test_a_started_before_2_finished_is_reported(self, project_graph, out_of_order_log):
        report = verify_build_order(out_of_order_log, project_graph)
        violation = next(v for v in report.violations if v.projects == ("2", "A"))
        assert violation.positions == {"As": 2, "2f": 8}

    def test_violations_reported_once_per_pair(self, project_graph, out_of_order_log):
        report = verify_build_order(out_of_order_log, project_graph)
        assert len(report.violations) == len({v.key for v in report.violations})

    def test_dependency_order_log_passes_without_overlap_check(
        self, project_graph, dependency_order_log
    ):
        policy = VerificationPolicy(require_overlap=False)
        report = verify_build_order(dependency_order_log, project_graph, policy=policy)
        assert report.passed
        assert report.roots_checked == 2

    def test_dependency_order_log_serializes_c(self, project_graph, dependency_order_log):
        report = verify_build_order(dependency_order_log, project_graph)

        serialized = report.violations_of(ViolationKind.UNRELATED_SERIALIZED)
        assert {frozenset(v.projects) for v in serialized} == {
            frozenset({"C", "2"}),
            frozenset({"C", "A"}),
            frozenset({"C", "B"}),
        }
        assert len(report.violations) == 3

    def test_pairs_and_roots_counted(self, project_graph, dependency_order_log):
        report = verify_build_order(dependency_order_log, project_graph)
        assert report.pairs_checked == 5 * 4
        assert report.roots_checked == 2

    def test_root_started_late(self, project_graph):
        log = ["1s", "1f", "2s", "2f", "As", "Bs", "Af", "Bf", "Cs", "Cf"]
        report = verify_build_order(log, project_graph, policy=VerificationPolicy(require_overlap=False))
        assert [v.kind for v in report.violations] == [ViolationKind.ROOT_STARTED_LATE]
        assert report.violations[0].projects == ("C",)
        assert report.violations[0].positions == {"1f": 1, "Cs": 8}

    def test_fail_fast_stops_at_first_violation(self, project_graph, out_of_order_log):
        policy = VerificationPolicy(fail_fast=True)
        report = verify_build_order(out_of_order_log, project_graph, policy=policy)
        assert len(report.violations) == 1
        assert report.violations[0].projects == ("1", "2")

    def test_project_subset(self, project_graph, out_of_order_log):
        report = verify_build_order(out_of_order_log, project_graph, projects=["2", "C"])
        assert [v.projects for v in report.violations] == []
        assert report.pairs_checked == 2
        # 2 has upstream 1 even though 1 is not verified, so only C is a root
        assert report.roots_checked == 1

    def test_missing_event_propagates(self, project_graph):
        log = ["1s", "Cs", "1f", "Cf", "2s", "2f", "As", "Bs", "Af"]
        with pytest.raises(MissingEventError) as exc_info:
            verify_build_order(log, project_graph)
        assert exc_info.value.token == "Bf"

    def test_single_project_graph(self):
        graph = DependencyGraph.from_edges([], projects=["solo"])
        report = verify_build_order(["solos", "solof"], graph)
        assert report.passed
        assert report.pairs_checked == 0
        assert report.roots_checked == 1

    def test_report_str(self, project_graph, out_of_order_log):
        report = verify_build_order(out_of_order_log, project_graph)
        assert str(report) == "VerificationReport(5 violation(s), pairs=20, roots=2)"
        assert report.projects_in_violation() == {"1", "2", "A", "B"}


class TestAssertOrderIsCorrect:

    def test_raises_aggregate(self, project_graph, out_of_order_log):
        with pytest.raises(BuildOrderViolations) as exc_info:
            assert_order_is_correct(out_of_order_log, project_graph)

        aggregate = exc_info.value
        assert len(aggregate.violations) == 5
        message = str(aggregate)
        assert message.startswith("5 build order violation(s):")
        assert "A depends on 2, but it started building before 2 was finished building." in message

    def test_aggregate_is_an_assertion_failure(self, project_graph, out_of_order_log):
        with pytest.raises(AssertionError):
            assert_order_is_correct(out_of_order_log, project_graph)

    def test_returns_report_when_passing(self, project_graph):
        log = ["1s", "Cs", "1f", "2s", "As", "Bs", "2f", "Cf", "Af", "Bf"]
        # A and B start before 2 finishes
        with pytest.raises(BuildOrderViolations):
            assert_order_is_correct(log, project_graph)

        log = ["1s", "Cs", "1f", "2s", "2f", "As", "Bs", "Cf", "Af", "Bf"]
        report = assert_order_is_correct(log, project_graph)
        assert report.passed


class TestOrderProperties:
    """Properties every valid log satisfies, checked on a passing log."""

    VALID_LOG = ["1s", "Cs", "1f", "2s", "2f", "As", "Bs", "Cf", "Af", "Bf"]

    def test_dependents_start_after_dependees_finish(self, project_graph):
        for a, b in itertools.permutations(project_graph.projects(), 2):
            if classify(a, b, project_graph) is Relation.UPSTREAM_OF:
                assert index_of(b, EventKind.START, self.VALID_LOG) >= index_of(
                    a, EventKind.FINISH, self.VALID_LOG
                )

    def test_unrelated_projects_overlap(self, project_graph):
        for a, b in itertools.combinations(project_graph.projects(), 2):
            if classify(a, b, project_graph) is Relation.UNRELATED:
                starts = [index_of(p, EventKind.START, self.VALID_LOG) for p in (a, b)]
                finishes = [index_of(p, EventKind.FINISH, self.VALID_LOG) for p in (a, b)]
                assert max(starts) <= min(finishes)

    def test_roots_start_before_any_finish(self, project_graph):
        first_finish = next(i for i, t in enumerate(self.VALID_LOG) if t.endswith("f"))
        for root in project_graph.roots():
            assert index_of(root, EventKind.START, self.VALID_LOG) < first_finish

    def test_valid_log_passes(self, project_graph):
        assert verify_build_order(self.VALID_LOG, project_graph).passed
