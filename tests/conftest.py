"""Shared test fixtures for jmesplus.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import jmespath
import pytest

from jmesplus.evaluator import build_options
from jmesplus.registry import FunctionRegistry, default_registry


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def registry() -> FunctionRegistry:
    """Return the built-in function registry."""
    return default_registry()


@pytest.fixture()
def options() -> jmespath.Options:
    """Return evaluator options carrying the built-in functions."""
    return build_options()
