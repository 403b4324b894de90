"""
The Cycle value type.

Holds one traversal of the loop an unfolded sequence settles into. The
starting element is whichever one the detector saw twice first, so
equality is rotation-invariant rather than positional.
"""

from collections import Counter
from itertools import cycle as _repeat
from typing import Any, Iterable, Iterator

from unfolded_cycle.config import get_repr_limit
from unfolded_cycle.errors import EmptyCycleError


class Cycle:
    """An immutable, non-empty loop of elements in traversal order.

    Examples:
        >>> Cycle([0, 1, 2]) == Cycle([2, 0, 1])
        True
        >>> Cycle([0, 1, 2]) == Cycle([0, 2, 1])
        False
        >>> len(Cycle([4, 2]))
        2
    """

    __slots__ = ("_elements",)

    def __init__(self, elements: Iterable[Any]):
        items = tuple(elements)
        if not items:
            raise EmptyCycleError("a cycle has at least one element")
        object.__setattr__(self, "_elements", items)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def length(self) -> int:
        """Number of elements before the cycle repeats."""
        return len(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    def to_list1(self) -> list[Any]:
        """One pass over the cycle, starting from an arbitrary element."""
        return list(self._elements)

    def to_list(self) -> Iterator[Any]:
        """Endless repetition of the cycle, starting from an arbitrary element.

        Each call returns a fresh iterator starting at the same element.
        """
        return _repeat(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cycle):
            return NotImplemented
        zs, ws = self._elements, other._elements
        n = len(zs)
        if n != len(ws):
            return False
        # Try every rotation of ws, stop at the first that lines up with zs
        for k in range(n):
            if zs == ws[k:] + ws[:k]:
                return True
        return False

    def __hash__(self) -> int:
        # Rotations share length and multiset, so they hash alike
        return hash((len(self._elements), frozenset(Counter(self._elements).items())))

    def __repr__(self) -> str:
        limit = get_repr_limit()
        shown = ", ".join(repr(x) for x in self._elements[:limit])
        if len(self._elements) > limit:
            shown += f", ... ({len(self._elements) - limit} more)"
        return f"Cycle([{shown}])"
