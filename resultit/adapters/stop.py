"""Stop after error

Truncate Iterable[Result[T, E]] right after the first Error.

Two states: active (initial) and halted (terminal). The pull that returns the
first Error flips the state; that Error is still delivered, every later pull
reports exhaustion without touching the source."""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator
from typing import assert_never

from kungfu import Error, Ok, Result


def _is_error[T, E](item: Result[T, E]) -> bool:
    match item:
        case Ok(_):
            return False
        case Error(_):
            return True
        case _ as unreachable:
            assert_never(unreachable)


class StopAfterError[T, E]:
    """
    Iterator adapter yielding items up to and including the first Error.

    Example:
        items = [Ok(1), Ok(2), Error("boom"), Ok(3)]
        list(StopAfterError(items))
        # [Ok(1), Ok(2), Error("boom")]

    Identity when the source has no errors. Applying it twice is the same as
    applying it once.
    """

    __slots__ = ("_source", "_halted")

    def __init__(self, source: Iterable[Result[T, E]], /) -> None:
        self._source: Iterator[Result[T, E]] | None = iter(source)
        self._halted = False

    @property
    def halted(self) -> bool:
        """True once an Error has been yielded."""
        return self._halted

    def __iter__(self) -> StopAfterError[T, E]:
        return self

    def __next__(self) -> Result[T, E]:
        if self._halted or self._source is None:
            raise StopIteration
        try:
            item = next(self._source)
        except StopIteration:
            self._source = None
            raise
        if _is_error(item):
            self._halted = True
            self._source = None
        return item


def stop_after_error[T, E](source: Iterable[Result[T, E]]) -> StopAfterError[T, E]:
    """Free-function form of StopAfterError."""
    return StopAfterError(source)


# Async variant
class StopAfterErrorAsync[T, E]:
    """Async counterpart of StopAfterError."""

    __slots__ = ("_source", "_halted")

    def __init__(self, source: AsyncIterable[Result[T, E]], /) -> None:
        self._source: AsyncIterator[Result[T, E]] | None = aiter(source)
        self._halted = False

    @property
    def halted(self) -> bool:
        return self._halted

    def __aiter__(self) -> StopAfterErrorAsync[T, E]:
        return self

    async def __anext__(self) -> Result[T, E]:
        if self._halted or self._source is None:
            raise StopAsyncIteration
        try:
            item = await anext(self._source)
        except StopAsyncIteration:
            self._source = None
            raise
        if _is_error(item):
            self._halted = True
            self._source = None
        return item


def stop_after_error_async[T, E](
    source: AsyncIterable[Result[T, E]],
) -> StopAfterErrorAsync[T, E]:
    """Free-function form of StopAfterErrorAsync."""
    return StopAfterErrorAsync(source)


__all__ = (
    "StopAfterError",
    "StopAfterErrorAsync",
    "stop_after_error",
    "stop_after_error_async",
)
