"""Pytest fixtures and configuration."""

import random

import pytest


@pytest.fixture
def valid_citizen_ids():
    """Valid citizen national IDs."""
    return [
        "1000000008",
        "1581872353",
        "1564437091",
        "1234567897",
    ]


@pytest.fixture
def valid_resident_ids():
    """Valid resident national IDs."""
    return [
        "2000000006",
        "2123456788",
    ]


@pytest.fixture
def invalid_ids():
    """Invalid national IDs keyed by expected error code."""
    return {
        "1000000009": "checksum_mismatch",
        "123456789": "wrong_length",
        "12345678901": "wrong_length",
        "12345a7890": "non_digit",
        "3000000004": "invalid_category",
        "": "wrong_length",
    }


@pytest.fixture
def seeded_rng():
    """Deterministic randomness source."""
    return random.Random(1234)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove SAUDI_ID_* variables from the environment."""
    for var in (
        "SAUDI_ID_DEFAULT_CATEGORY",
        "SAUDI_ID_MAX_GENERATE_COUNT",
        "SAUDI_ID_RECOGNIZER_SCORE",
        "SAUDI_ID_LOG_LEVEL",
        "SAUDI_ID_LOG_FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
