from .erase import erase, erase_errors
from .flatten import FlattenResults, FlattenResultsAsync, flatten_results, flatten_results_async
from .stop import StopAfterError, StopAfterErrorAsync, stop_after_error, stop_after_error_async

__all__ = (
    # Flatten
    "FlattenResults",
    "FlattenResultsAsync",
    "flatten_results",
    "flatten_results_async",
    # Stop
    "StopAfterError",
    "StopAfterErrorAsync",
    "stop_after_error",
    "stop_after_error_async",
    # Erase
    "erase",
    "erase_errors",
)
