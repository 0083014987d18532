"""Global configuration for *infseq*.

This module centralises project-wide knobs so they can be tweaked from a
single location.  Two settings live here:

``DEBUG_CHECKS``
    The container and the index bijections are built around *preconditions*
    (non-negative tuple components, dereferencing only valid iterators,
    comparing iterators of the same vector).  By default none of these are
    checked at run time so the hot paths stay as cheap as the plain
    ``dict``/``bisect`` operations underneath.  Flip the flag on while
    debugging and violations raise ``ValueError`` / ``IndexError`` instead of
    silently producing garbage.  The environment variable ``INFSEQ_DEBUG=1``
    enables it at import time.

``DEFAULT_ZERO``
    The coefficient returned by :meth:`SparseVector.get` for indices that are
    not stored, unless a vector was created with its own ``zero``.
"""

from __future__ import annotations

import os

__all__ = [
    "DEBUG_CHECKS",
    "DEFAULT_ZERO",
    "set_debug_checks",
    "set_default_zero",
]

# -----------------------------------------------------------------------------
# Public constants
# -----------------------------------------------------------------------------

DEBUG_CHECKS: bool = os.environ.get("INFSEQ_DEBUG", "0") not in ("", "0", "false", "False")

DEFAULT_ZERO: float = 0.0

# -----------------------------------------------------------------------------
# Helper functions
# -----------------------------------------------------------------------------

def set_debug_checks(enabled: bool) -> bool:
    """Turn precondition checks on or off *in-place*.

    Returns the previous value so tests can restore it::

        old = set_debug_checks(True)
        try:
            ...
        finally:
            set_debug_checks(old)
    """
    global DEBUG_CHECKS
    previous = DEBUG_CHECKS
    DEBUG_CHECKS = bool(enabled)
    return previous


def set_default_zero(zero: float | int) -> None:
    """Change the global zero coefficient.

    Vectors that were created with an explicit ``zero`` keep theirs; vectors
    without one pick up the new value on the next :meth:`get`.
    """
    global DEFAULT_ZERO
    if isinstance(zero, bool) or not isinstance(zero, (int, float)):
        raise ValueError("Default zero must be an int or float.")
    DEFAULT_ZERO = zero
