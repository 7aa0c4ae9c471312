"""
Iterator adapters for fallible iterators.

Iterators whose items are kungfu results (Ok | Error) need adapters that
understand both branches:

- flatten_results: unroll Ok(collection) items, pass each Error through once
- stop_after_error: stop right after the first Error

The adapters are independent of each other and compose with any other
iterator transform. Flatten first, then stop, to halt at the first problem
no matter how deeply it was nested:

    from resultit import erase, flatten_results, stop_after_error

    nested = [
        Ok([Ok(1), Ok(2)]),
        Ok([Error(ParseError()), Ok(5)]),
        Ok([Ok(6), Ok(7)]),
    ]
    list(stop_after_error(map(erase, flatten_results(nested))))
    # [Ok(1), Ok(2), Error(ParseError())]

Architecture:
- Iterator classes (FlattenResults, StopAfterError) plus free functions
- *_async variants for async iterables
- Stream for fluent chaining
"""

# Core types
from ._types import Effect, Nested, Predicate, TryResult

# Internal helpers
from . import _helpers
from ._helpers import wrap_ok

# Adapters
from .adapters import (
    FlattenResults,
    FlattenResultsAsync,
    StopAfterError,
    StopAfterErrorAsync,
    erase,
    erase_errors,
    flatten_results,
    flatten_results_async,
    stop_after_error,
    stop_after_error_async,
)

# Transform/effects
from .transform import bimap_tap, tap, tap_async, tap_err, tap_err_async

# Collection operations
from .collection import partition, partition_async, sequence, sequence_async

# Fluent API
from .stream import Stream, stream

# Errors
from ._errors import ErasedError

__all__ = (
    # Types
    "Effect",
    "Nested",
    "Predicate",
    "TryResult",
    # Helpers
    "_helpers",
    "wrap_ok",
    # Adapters - sync
    "FlattenResults",
    "StopAfterError",
    "erase",
    "erase_errors",
    "flatten_results",
    "stop_after_error",
    # Adapters - async
    "FlattenResultsAsync",
    "StopAfterErrorAsync",
    "flatten_results_async",
    "stop_after_error_async",
    # Transform
    "bimap_tap",
    "tap",
    "tap_async",
    "tap_err",
    "tap_err_async",
    # Collection
    "partition",
    "partition_async",
    "sequence",
    "sequence_async",
    # Fluent
    "Stream",
    "stream",
    # Errors
    "ErasedError",
)
