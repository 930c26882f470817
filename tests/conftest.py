"""
Shared pytest fixtures for the fracfmt test suite.
"""

import pytest

from fracfmt_core.fraction import Fraction
from fracfmt_core.options import FORMAT_PRESET_DE, FORMAT_PRESET_EN, with_preset


@pytest.fixture
def en():
    """en-US preset: "," groups, "." decimals, subscript zero-skip."""
    return FORMAT_PRESET_EN


@pytest.fixture
def de():
    """de-DE preset: "." groups, "," decimals."""
    return FORMAT_PRESET_DE


@pytest.fixture
def ascii_opts():
    """en-US with the ASCII "(n)" zero-skip marker."""
    return with_preset(FORMAT_PRESET_EN, use_subscript=False)


@pytest.fixture
def third():
    """1/3 never terminates."""
    return Fraction(1, 3)


@pytest.fixture
def max_uint256():
    """Largest on-chain uint256 amount, 18 decimals."""
    return Fraction(2 ** 256 - 1, 10 ** 18)
