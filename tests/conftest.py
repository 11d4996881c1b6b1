"""Shared pytest fixtures for all test modules."""

from typing import Dict

import pytest

from familialdisease.datasets import (
    CHARKES_2006_NMTC,
    COLORECTAL_PARAMETERS,
    PedigreeSample,
    ProbabilityParameters,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast, isolated unit tests")


@pytest.fixture
def charkes_sample() -> PedigreeSample:
    """Familial nonmedullary thyroid cancer kindreds (Charkes 2006, table 2)."""
    return CHARKES_2006_NMTC


@pytest.fixture
def colorectal_params() -> ProbabilityParameters:
    """Colorectal cancer parameters from the all-cases-familial examples."""
    return COLORECTAL_PARAMETERS


@pytest.fixture
def colorectal_all_familial_reference() -> Dict[tuple, float]:
    """Published all_familial values keyed by (m, k, r)."""
    return {
        (2, 8, 0): 0.6944444,
        (8, 8, 0): 0.232568,
        (2, 8, 1): 0.9722222,
        (8, 8, 1): 0.6046769,
    }
