"""
Shared fixtures for the ecverify test suite.
"""

import pytest

from ecverify import G, RationalCommitment, ec_mul
from ecverify.config import config


@pytest.fixture(scope="module")
def generator():
    """Canonical G1 generator."""
    return G


@pytest.fixture(scope="module")
def small_multiples():
    """[k]G for k = 0..12, index k."""
    return [ec_mul(G, k) for k in range(13)]


@pytest.fixture(scope="module")
def rational_module():
    """Rational commitment module bound to G."""
    return RationalCommitment(G)


@pytest.fixture
def trusting_points():
    """Disable point validation for one test."""
    previous = config.validate_points
    config.validate_points = False
    yield config
    config.validate_points = previous
