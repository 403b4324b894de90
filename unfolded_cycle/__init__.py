"""
unfolded-cycle: find the loop in z, f(z), f(f(z)), ...

Detects the cycle an eventually periodic sequence settles into, the prefix
leading to it, and compares cycles up to rotation.
"""

from unfolded_cycle.cycle import Cycle
from unfolded_cycle.cycle_detection import CycleReport, analyze, find, prefix, unfold
from unfolded_cycle.errors import CycleError, EmptyCycleError

__all__ = [
    "Cycle",
    "CycleReport",
    "analyze",
    "find",
    "prefix",
    "unfold",
    "CycleError",
    "EmptyCycleError",
]
