"""Side effects adapters

Effects execute for observation only (logging, metrics, debugging)
and don't change the items flowing through. Each effect runs on the
pull that yields its item, never ahead of the consumer."""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Awaitable, Callable, Iterable, Iterator

from kungfu import Error, Ok, Result

from .._types import Effect


def tap[T, E](
    source: Iterable[Result[T, E]],
    *,
    effect: Effect[T],
) -> Iterator[Result[T, E]]:
    """Execute sync side effect on each Ok value, pass items through unchanged."""
    for item in source:
        match item:
            case Ok(value):
                effect(value)
            case Error(_):
                pass
        yield item


def tap_err[T, E](
    source: Iterable[Result[T, E]],
    *,
    effect: Effect[E],
) -> Iterator[Result[T, E]]:
    """
    Execute sync side effect on each Error, pass items through unchanged.

    Example:
        logger = logging.getLogger(__name__)
        rows = tap_err(flatten_results(pages), effect=lambda e: logger.warning("skipped: %s", e))
    """
    for item in source:
        match item:
            case Error(err):
                effect(err)
            case Ok(_):
                pass
        yield item


def bimap_tap[T, E](
    source: Iterable[Result[T, E]],
    *,
    on_ok: Effect[T],
    on_err: Effect[E],
) -> Iterator[Result[T, E]]:
    """Execute on_ok for Ok values and on_err for errors."""
    for item in source:
        match item:
            case Ok(value):
                on_ok(value)
            case Error(err):
                on_err(err)
        yield item


# Async variants
async def tap_async[T, E](
    source: AsyncIterable[Result[T, E]],
    *,
    effect: Callable[[T], Awaitable[None]],
) -> AsyncIterator[Result[T, E]]:
    """Await async side effect on each Ok value, pass items through unchanged."""
    async for item in source:
        match item:
            case Ok(value):
                await effect(value)
            case Error(_):
                pass
        yield item


async def tap_err_async[T, E](
    source: AsyncIterable[Result[T, E]],
    *,
    effect: Callable[[E], Awaitable[None]],
) -> AsyncIterator[Result[T, E]]:
    """Await async side effect on each Error, pass items through unchanged."""
    async for item in source:
        match item:
            case Error(err):
                await effect(err)
            case Ok(_):
                pass
        yield item


__all__ = (
    "bimap_tap",
    "tap",
    "tap_async",
    "tap_err",
    "tap_err_async",
)
