"""Shared fixtures for OrderTreeLib tests."""

import pytest

from ordertreelib import OrderedTree, TreeConfig, TraversalMode
from ordertreelib.testing import ReleaseTracker


@pytest.fixture(params=[TraversalMode.ITERATIVE, TraversalMode.RECURSIVE],
                ids=["iterative", "recursive"])
def mode(request):
    """Run a test once per traversal mode."""
    return request.param


@pytest.fixture
def tree(mode):
    """Empty tree in the current traversal mode."""
    return OrderedTree(config=TreeConfig(mode=mode))


@pytest.fixture
def tracker():
    return ReleaseTracker()


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large inputs, excluded by run_tests.py")
