from .effects import bimap_tap, tap, tap_async, tap_err, tap_err_async

__all__ = (
    # Sync
    "bimap_tap",
    "tap",
    "tap_err",
    # Async
    "tap_async",
    "tap_err_async",
)
