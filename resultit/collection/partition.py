"""Partition

Split results into (successes, failures). Consumes the whole source."""

from __future__ import annotations

from collections.abc import AsyncIterable, Iterable

from kungfu import Error, Ok, Result


def partition[T, E](source: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    """Separate into (successes, failures), each in source order. Never fails."""
    successes: list[T] = []
    failures: list[E] = []

    for item in source:
        match item:
            case Ok(value):
                successes.append(value)
            case Error(err):
                failures.append(err)

    return successes, failures


async def partition_async[T, E](
    source: AsyncIterable[Result[T, E]],
) -> tuple[list[T], list[E]]:
    """Async counterpart of partition()."""
    successes: list[T] = []
    failures: list[E] = []

    async for item in source:
        match item:
            case Ok(value):
                successes.append(value)
            case Error(err):
                failures.append(err)

    return successes, failures


__all__ = ("partition", "partition_async")
