"""Test doubles and helpers shared by test modules.

The doubles record how far they were pulled, so laziness and the
no-look-ahead behaviour of the adapters can be asserted directly.
"""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator
from typing import Any

from kungfu import Error, Ok


class CountingSource:
    """Iterator over a fixed list that counts pulls.

    `pulled` counts items handed out, `polls` counts every __next__ call,
    including the ones answered with StopIteration.
    """

    def __init__(self, items: list[Any]) -> None:
        self._items = list(items)
        self.pulled = 0
        self.polls = 0

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        self.polls += 1
        if self.pulled >= len(self._items):
            raise StopIteration
        item = self._items[self.pulled]
        self.pulled += 1
        return item


class AsyncCountingSource:
    """Async counterpart of CountingSource."""

    def __init__(self, items: list[Any]) -> None:
        self._items = list(items)
        self.pulled = 0
        self.polls = 0

    def __aiter__(self) -> AsyncIterator[Any]:
        return self

    async def __anext__(self) -> Any:
        self.polls += 1
        if self.pulled >= len(self._items):
            raise StopAsyncIteration
        item = self._items[self.pulled]
        self.pulled += 1
        return item


class GuardedCollection:
    """Iterable that records how many elements were taken from it."""

    def __init__(self, items: list[Any]) -> None:
        self._items = list(items)
        self.consumed = 0
        self.started = False

    def __iter__(self) -> Iterator[Any]:
        self.started = True
        for item in self._items:
            self.consumed += 1
            yield item


class Boom(Exception):
    """Error payload used across tests."""


def unpack(item: Any) -> tuple[str, Any]:
    """Turn Ok(v) / Error(e) into ("ok", v) / ("err", e) for plain comparison."""
    match item:
        case Ok(value):
            return ("ok", value)
        case Error(err):
            return ("err", err)
    raise AssertionError(f"not a result: {item!r}")


def unpack_all(items: Iterable[Any]) -> list[tuple[str, Any]]:
    return [unpack(item) for item in items]


async def aunpack_all(items: AsyncIterable[Any]) -> list[tuple[str, Any]]:
    return [unpack(item) async for item in items]


async def agen(items: Iterable[Any]) -> AsyncIterator[Any]:
    for item in items:
        yield item
