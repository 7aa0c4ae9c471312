"""Result flattening

Flatten Iterable[Result[Iterable[T], E]] into Iterator[Result[T, E]].

The builtin way to flatten (itertools.chain.from_iterable) only understands
iterables of iterables. Unwrapping each result first either raises on the first
Error or throws its context away. Here every source item is turned into a small
iterator of its own:

    Ok(collection) -> Ok(x) for each x in collection
    Error(e)       -> Error(e), exactly once

and those are joined lazily, so nothing is buffered beyond the collection
currently being unrolled."""

from __future__ import annotations

import itertools
from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator
from typing import assert_never

from kungfu import Error, Ok, Result

from .._helpers import Maybe, collapse, wrap_ok
from .._types import Nested


def _unroll[T, E](item: Nested[T, E]) -> Iterator[Result[T, E]]:
    """Split one source item into (success branch, failure branch) and chain them."""
    successes: Maybe[Iterable[T]] = ()
    failures: Maybe[Result[T, E]] = ()
    match item:
        case Ok(collection):
            successes = (collection,)
        case Error(_):
            failures = (item,)
        case _ as unreachable:
            assert_never(unreachable)
    return itertools.chain(map(wrap_ok, collapse(successes)), failures)


def _flatten[T, E](source: Iterable[Nested[T, E]]) -> Iterator[Result[T, E]]:
    return itertools.chain.from_iterable(map(_unroll, source))


class FlattenResults[T, E]:
    """
    Iterator adapter over Iterable[Result[Iterable[T], E]].

    Yields Ok(element) for every element of every Ok collection, in order,
    and passes each Error through as a single element. Never fails on its own.

    Example:
        results = [Ok([1, 2]), Ok([3, 4]), Error("boom"), Ok([5, 6])]
        list(FlattenResults(results))
        # [Ok(1), Ok(2), Ok(3), Ok(4), Error("boom"), Ok(5), Ok(6)]

    NOTE: Once exhausted the source is released and never pulled again,
          even if the caller keeps calling next().
    """

    __slots__ = ("_results",)

    def __init__(self, source: Iterable[Nested[T, E]], /) -> None:
        self._results: Iterator[Result[T, E]] | None = _flatten(source)

    def __iter__(self) -> FlattenResults[T, E]:
        return self

    def __next__(self) -> Result[T, E]:
        if self._results is None:
            raise StopIteration
        try:
            return next(self._results)
        except StopIteration:
            self._results = None
            raise


def flatten_results[T, E](
    source: Iterable[Nested[T, E]],
) -> FlattenResults[T, E]:
    """
    Free-function form of FlattenResults.

    Example:
        for item in flatten_results(fetch_pages()):
            match item:
                case Ok(row): ...
                case Error(err): ...
    """
    return FlattenResults(source)


# Async variant
class FlattenResultsAsync[T, E]:
    """
    Async counterpart of FlattenResults.

    Source is an AsyncIterable of results; each Ok may carry either a plain
    iterable or an async iterable. Only one inner iterator is open at a time.
    """

    __slots__ = ("_source", "_inner")

    def __init__(
        self,
        source: AsyncIterable[Result[Iterable[T] | AsyncIterable[T], E]],
        /,
    ) -> None:
        self._source: AsyncIterator[Result[Iterable[T] | AsyncIterable[T], E]] | None = aiter(source)
        self._inner: Iterator[T] | AsyncIterator[T] | None = None

    def __aiter__(self) -> FlattenResultsAsync[T, E]:
        return self

    async def __anext__(self) -> Result[T, E]:
        while self._source is not None:
            if self._inner is None:
                try:
                    item = await anext(self._source)
                except StopAsyncIteration:
                    self._source = None
                    raise
                match item:
                    case Ok(collection):
                        if isinstance(collection, AsyncIterable):
                            self._inner = aiter(collection)
                        else:
                            self._inner = iter(collection)
                    case Error(_):
                        return item
                    case _ as unreachable:
                        assert_never(unreachable)

            inner = self._inner
            try:
                if isinstance(inner, AsyncIterator):
                    value = await anext(inner)
                else:
                    value = next(inner)
            except (StopIteration, StopAsyncIteration):
                self._inner = None
                continue
            return wrap_ok(value)

        raise StopAsyncIteration


def flatten_results_async[T, E](
    source: AsyncIterable[Result[Iterable[T] | AsyncIterable[T], E]],
) -> FlattenResultsAsync[T, E]:
    """Free-function form of FlattenResultsAsync."""
    return FlattenResultsAsync(source)


__all__ = (
    "FlattenResults",
    "FlattenResultsAsync",
    "flatten_results",
    "flatten_results_async",
)
