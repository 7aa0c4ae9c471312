"""
Core type definitions for resultit.

Aliases shared across the adapters and their callers.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from kungfu import Result

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Effect = observation callback, result is ignored
type Effect[T] = Callable[[T], None]

# ============================================================================
# Concrete type shortcuts
# ============================================================================

# TryResult = Result with a type-erased error.
# NOTE: Not consumed by any adapter. It is the common error shape callers
#       converge on after flattening results nested with different error types
#       (see adapters.erase).
type TryResult[T] = Result[T, Exception]

# Nested = outer result wrapping a collection, the input shape of flatten_results
type Nested[T, E] = Result[Iterable[T], E]

__all__ = (
    "Effect",
    "Nested",
    "Predicate",
    "TryResult",
)
