"""
Pytest fixtures for the maigacha test suite.

Provides temporary stores, sample items and deterministic random sources.
"""

import random

import pytest

from maigacha.models.pull_models import Category, Item
from maigacha.pull_store import PullStore


class FixedRandom:
    """Random source that replays a fixed sequence of draws."""

    def __init__(self, values):
        self.values = list(values)

    def random(self) -> float:
        if not self.values:
            raise AssertionError("FixedRandom ran out of values")
        return self.values.pop(0)


# =============================================================================
# RANDOMNESS FIXTURES
# =============================================================================


@pytest.fixture
def seeded_rng():
    """Provide a seeded generator for reproducible distribution tests."""
    return random.Random(1234)


@pytest.fixture
def fixed_rng():
    """Factory for a generator that returns the given draws in order."""
    return FixedRandom


# =============================================================================
# STORE FIXTURES
# =============================================================================


@pytest.fixture
def store_path(tmp_path):
    """Path to a store file that does not exist yet."""
    return tmp_path / "maigacha" / "maigacha.json"


@pytest.fixture
def store(store_path):
    return PullStore(store_path)


# =============================================================================
# ITEM FIXTURES
# =============================================================================


@pytest.fixture
def sample_items():
    """The README example: one common and one rare item."""
    return [
        Item(name="Item 1", category=Category.common, weight=0.5),
        Item(name="Item 2", category=Category.rare, weight=2.0),
    ]


@pytest.fixture
def mixed_items():
    """Several items per category, interleaved."""
    return [
        Item(name="Sword", category=Category.common, weight=1.0),
        Item(name="Crown", category=Category.rare, weight=0.25),
        Item(name="Shield", category=Category.common, weight=3.0),
        Item(name="Dragon Egg", category=Category.rare, weight=0.75),
    ]
