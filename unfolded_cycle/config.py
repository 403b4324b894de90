"""
Configuration constants and environment-backed settings for unfolded-cycle.
"""

import os


# ─────────────────────────────────────────────────────────────────────
# DEFAULTS
# ─────────────────────────────────────────────────────────────────────

DEFAULT_REPR_LIMIT: int = 10  # Leading elements shown by repr(Cycle)
DEFAULT_LOG_EVERY: int = 10000  # Walked elements between progress lines


# ─────────────────────────────────────────────────────────────────────
# ENVIRONMENT LOADING
# ─────────────────────────────────────────────────────────────────────

def _positive_int_from_env(key: str, default: int) -> int:
    try:
        value = int(os.environ.get(key, str(default)))
    except ValueError:
        return default
    return value if value >= 1 else default


def get_repr_limit() -> int:
    """
    Get how many cycle elements repr() shows before truncating.

    Set UNFOLDED_CYCLE_REPR_LIMIT in the environment (default: 10).
    """
    return _positive_int_from_env("UNFOLDED_CYCLE_REPR_LIMIT", DEFAULT_REPR_LIMIT)


def get_log_every() -> int:
    """
    Get the detector's debug progress interval, in walked elements.

    Set UNFOLDED_CYCLE_LOG_EVERY in the environment (default: 10000).
    """
    return _positive_int_from_env("UNFOLDED_CYCLE_LOG_EVERY", DEFAULT_LOG_EVERY)
