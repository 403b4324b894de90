"""
Exception hierarchy for cycle construction.

Detection itself signals nothing: exceptions raised by the successor
function or by element equality/hashing propagate unchanged.
"""


class CycleError(Exception):
    """Base exception for cycle construction errors."""
    pass


class EmptyCycleError(CycleError, ValueError):
    """A Cycle was built with no elements."""
    pass
