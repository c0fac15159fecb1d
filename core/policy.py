# core/policy.py
# This file is part of Ordo - A Build-Order Conformance Checker
#
# Verification policy: which ordering expectations apply to a run

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class VerificationPolicy:
    """Selects the checks applied by a verification pass.

    Dependee-before-dependent ordering is always checked. The other two
    checks encode a scheduling policy that runs independent work
    concurrently, and only hold for schedulers configured that way.

    Attributes:
        require_overlap: Unrelated projects must have overlapping build intervals
        require_roots_first: Root projects must start before any build finishes
        fail_fast: Stop at the first violation instead of collecting all of them
    """

    require_overlap: bool = True
    require_roots_first: bool = True
    fail_fast: bool = False

    @classmethod
    def for_executors(cls, executors: int, fail_fast: bool = False) -> VerificationPolicy:
        """Policy matching a scheduler with ``executors`` parallel build slots.

        With a single executor unrelated builds are necessarily serialized and
        a root project may wait for other builds to finish, so only dependency
        ordering is checked.

        Raises:
            ValueError: If executors is less than 1
        """
        if executors < 1:
            raise ValueError(f"executors must be at least 1, got {executors}")
        concurrent = executors > 1
        return cls(
            require_overlap=concurrent,
            require_roots_first=concurrent,
            fail_fast=fail_fast,
        )

    @classmethod
    def dependencies_only(cls) -> VerificationPolicy:
        return cls(require_overlap=False, require_roots_first=False)

    def __str__(self) -> str:
        checks = ["dependencies"]
        if self.require_overlap:
            checks.append("overlap")
        if self.require_roots_first:
            checks.append("roots-first")
        mode = "fail-fast" if self.fail_fast else "exhaustive"
        return f"{'+'.join(checks)} ({mode})"
