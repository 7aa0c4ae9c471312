"""
Fluent chaining over iterators of results.

Every iterable gets the adapters as methods once wrapped:

    rows = (
        stream(pages)
        .flatten_results()
        .tap_err(log_error)
        .stop_after_error()
        .collect()
    )

Each method wraps the current iterator in one more lazy adapter and returns a
new Stream; nothing is pulled until the Stream itself is iterated.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable, Iterator

from kungfu import Result

from ._types import Effect, Nested, Predicate, TryResult
from .adapters.erase import erase_errors
from .adapters.flatten import flatten_results
from .adapters.stop import stop_after_error
from .collection.partition import partition
from .collection.sequence import sequence
from .transform.effects import tap, tap_err


class Stream[T]:
    """Lazy iterator wrapper exposing resultit adapters as methods."""

    __slots__ = ("_it",)

    def __init__(self, source: Iterable[T], /) -> None:
        self._it: Iterator[T] = iter(source)

    def __iter__(self) -> Stream[T]:
        return self

    def __next__(self) -> T:
        return next(self._it)

    # Adapters

    def flatten_results[U, E](self: Stream[Nested[U, E]]) -> Stream[Result[U, E]]:
        return Stream(flatten_results(self._it))

    def stop_after_error[U, E](self: Stream[Result[U, E]]) -> Stream[Result[U, E]]:
        return Stream(stop_after_error(self._it))

    def erase_errors(self) -> Stream[TryResult[typing.Any]]:
        return Stream(erase_errors(self._it))

    def tap[U, E](self: Stream[Result[U, E]], effect: Effect[U]) -> Stream[Result[U, E]]:
        return Stream(tap(self._it, effect=effect))

    def tap_err[U, E](self: Stream[Result[U, E]], effect: Effect[E]) -> Stream[Result[U, E]]:
        return Stream(tap_err(self._it, effect=effect))

    # Plain iterator transforms

    def map[U](self, f: Callable[[T], U], /) -> Stream[U]:
        return Stream(map(f, self._it))

    def filter(self, predicate: Predicate[T], /) -> Stream[T]:
        return Stream(filter(predicate, self._it))

    # Terminal operations

    def collect(self) -> list[T]:
        return list(self._it)

    def sequence[U, E](self: Stream[Result[U, E]]) -> Result[list[U], E]:
        return sequence(self._it)

    def partition[U, E](self: Stream[Result[U, E]]) -> tuple[list[U], list[E]]:
        return partition(self._it)


def stream[T](source: Iterable[T]) -> Stream[T]:
    """Start a fluent chain from any iterable."""
    return Stream(source)


__all__ = ("Stream", "stream")
