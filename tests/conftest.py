"""Shared test fixtures for unfolded-cycle tests."""

import pytest


# ─────────────────────────────────────────────────────────────────────
# SUCCESSOR FUNCTIONS
# ─────────────────────────────────────────────────────────────────────

def mod_three(x):
    return x % 3


def succ_mod_five(x):
    return (x + 1) % 5


def square_mod_seven(x):
    return x * x % 7


def always_one(_x):
    return 1


def lcg(x):
    """Small linear congruential generator, full period 16."""
    return (5 * x + 3) % 16


def collatz_step(x):
    return x // 2 if x % 2 == 0 else 3 * x + 1


# (f, z, expected prefix, expected cycle elements, in any rotation)
SCENARIOS = [
    pytest.param(mod_three, 10, [10], [1], id="mod-three"),
    pytest.param(succ_mod_five, 0, [], [0, 1, 2, 3, 4], id="succ-mod-five"),
    pytest.param(square_mod_seven, 2, [], [2, 4], id="square-mod-seven"),
    pytest.param(always_one, 5, [5], [1], id="self-loop"),
    pytest.param(collatz_step, 6, [6, 3, 10, 5, 16, 8], [4, 2, 1], id="collatz"),
]


# ─────────────────────────────────────────────────────────────────────
# FIXTURES
# ─────────────────────────────────────────────────────────────────────

@pytest.fixture(
    params=[p.values for p in SCENARIOS],
    ids=[p.id for p in SCENARIOS],
)
def scenario(request):
    """(f, z, prefix, cycle) tuples with known answers."""
    return request.param


@pytest.fixture
def rho_function():
    """Orbit with a long tail into a 3-cycle: 0 -> 1 -> ... -> 9 -> 7."""
    def f(x):
        return x + 1 if x < 9 else 7
    return f
