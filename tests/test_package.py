"""Tests for the public package surface."""

import unfolded_cycle
from unfolded_cycle import Cycle, analyze, find, prefix, unfold


class TestExports:
    """The top-level package re-exports the public API."""

    def test_all_names_importable(self):
        """Every name in __all__ resolves."""
        for name in unfolded_cycle.__all__:
            assert hasattr(unfolded_cycle, name)

    def test_scenarios_through_package(self):
        """Spot-check each operation via the package namespace."""
        assert next(unfold(lambda x: x, 3)) == 3
        assert find(lambda x: 1, 5) == Cycle([1])
        assert prefix(lambda x: 1, 5) == [5]
        assert analyze(lambda x: x * x % 7, 2).cycle == Cycle([4, 2])
