"""
Cycle detection for sequences unfolded from a successor function.

Given f and a seed z, the sequence z, f(z), f(f(z)), ... eventually loops
whenever the orbit of z is finite. These helpers find that loop, the run of
elements leading into it, and both at once.

None of them terminate if the orbit never repeats.
"""

import logging
from typing import Any, Callable, Iterator, TypeVar

from pydantic import BaseModel, ConfigDict, computed_field

from unfolded_cycle.config import get_log_every
from unfolded_cycle.cycle import Cycle

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ─────────────────────────────────────────────────────────────────────
# REPORT MODEL
# ─────────────────────────────────────────────────────────────────────


class CycleReport(BaseModel):
    """Prefix and cycle of one orbit z, f(z), f(f(z)), ...

    The prefix and the cycle's elements are disjoint; together they are
    every distinct element of the orbit. The prefix is stored as a tuple
    so the whole report is immutable and hashable.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    prefix: tuple[Any, ...]
    cycle: Cycle

    @computed_field
    @property
    def cycle_length(self) -> int:
        return len(self.cycle)

    @computed_field
    @property
    def prefix_length(self) -> int:
        return len(self.prefix)

    @computed_field
    @property
    def elements_visited(self) -> int:
        """Distinct elements in the orbit."""
        return self.prefix_length + self.cycle_length


# ─────────────────────────────────────────────────────────────────────
# SEQUENCE
# ─────────────────────────────────────────────────────────────────────


def unfold(f: Callable[[T], T], z: T) -> Iterator[T]:
    """
    Lazily generate z, f(z), f(f(z)), ...

    The generator never ends; slice it with itertools.islice or stop on a
    condition. Call unfold again for a fresh walk from the same seed.

    Examples:
        >>> from itertools import islice
        >>> list(islice(unfold(lambda x: (x + 1) % 3, 0), 5))
        [0, 1, 2, 0, 1]
    """
    x = z
    while True:
        yield x
        x = f(x)


# ─────────────────────────────────────────────────────────────────────
# DETECTION
# ─────────────────────────────────────────────────────────────────────


def find(f: Callable[[T], T], z: T) -> Cycle:
    """
    Find the cycle the sequence unfold(f, z) eventually enters.

    Walks the sequence once, sorting each element into one of three cases:
    new, seen once before, or seen twice before. Elements seen a second
    time are exactly the cycle's members, recorded in the order they come
    round again. The walk stops at the first element seen a third time,
    which is the point where every member has been recorded.

    Elements must be hashable. Never returns if the sequence has no cycle.

    Args:
        f: Pure successor function
        z: Seed value

    Returns:
        The Cycle, starting from the first element observed twice

    Examples:
        >>> find(lambda x: x * x % 7, 2) == Cycle([2, 4])
        True
    """
    log_every = get_log_every()
    seen_once: set = set()
    seen_twice: set = set()
    members: list = []

    for steps, x in enumerate(unfold(f, z)):
        if x in seen_twice:
            # Third sighting: every member has been re-encountered
            logger.debug(
                "Cycle closed after %d steps: length %d", steps, len(members)
            )
            return Cycle(members)
        if x in seen_once:
            # Second sighting means x lies on the cycle
            members.append(x)
            seen_twice.add(x)
        else:
            seen_once.add(x)

        if steps and steps % log_every == 0:
            logger.debug(
                "Walked %d elements (%d distinct, %d on cycle so far)",
                steps, len(seen_once), len(members),
            )

    raise AssertionError("unfold() is unbounded")  # pragma: no cover


def _prefix_before(f: Callable[[T], T], z: T, cycle: Cycle) -> list[T]:
    members = set(cycle)
    result = []
    for x in unfold(f, z):
        if x in members:
            return result
        result.append(x)
    raise AssertionError("unfold() is unbounded")  # pragma: no cover


def prefix(f: Callable[[T], T], z: T) -> list[T]:
    """
    Get the elements of unfold(f, z) that come before the cycle.

    Disjoint from the cycle found by find(f, z); together they hold every
    element of the sequence. Empty when z is itself on the cycle.

    Never returns if the sequence has no cycle.

    Examples:
        >>> prefix(lambda x: x % 3, 10)
        [10]
        >>> prefix(lambda x: (x + 1) % 5, 0)
        []
    """
    result = _prefix_before(f, z, find(f, z))
    logger.debug("Prefix length %d", len(result))
    return result


def analyze(f: Callable[[T], T], z: T) -> CycleReport:
    """
    Characterize the orbit of z under f: prefix, cycle and cycle length.

    Runs detection once and reuses the cycle for the prefix walk.
    """
    c = find(f, z)
    report = CycleReport(prefix=_prefix_before(f, z, c), cycle=c)
    logger.debug(
        "Orbit analysed: prefix %d, cycle %d",
        report.prefix_length, report.cycle_length,
    )
    return report
