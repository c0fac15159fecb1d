# tests/conftest.py
# This file is part of Ordo - A Build-Order Conformance Checker
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for build-order verification tests.

Most scenarios use the same five projects::

    1 <- 2 <- A
         2 <- B
    C (has no dependencies)

i.e. ``2`` depends on ``1``, ``A`` and ``B`` depend on ``2``, and ``C`` is
independent of everything else.
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Skip the session if the project packages cannot be imported."""
    try:
        import core
        import parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def project_graph():
    """The 1 -> 2 -> {A, B} graph with independent project C.

    Returns:
        DependencyGraph: Fresh graph for each test
    """
    from core.graph import DependencyGraph

    return DependencyGraph.from_edges(
        [("1", "2"), ("2", "A"), ("2", "B")], projects=["1", "2", "A", "B", "C"]
    )


@pytest.fixture
def out_of_order_log():
    """Log where A, B and 2 start before their dependees finish."""
    return ["1s", "Cs", "As", "2s", "Bs", "1f", "Cf", "Af", "2f", "Bf"]


@pytest.fixture
def dependency_order_log():
    """Log respecting every dependency, with C serialized against 2, A and B."""
    return ["1s", "Cs", "1f", "Cf", "2s", "2f", "As", "Bs", "Af", "Bf"]
