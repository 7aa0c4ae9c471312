"""Sequence

Flip structure: Iterable[Result[T, E]] -> Result[list[T], E]."""

from __future__ import annotations

from collections.abc import AsyncIterable, Iterable

from kungfu import Error, Ok, Result

from ..adapters.stop import stop_after_error, stop_after_error_async


def sequence[T, E](source: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """
    Collect all Ok values, or return the first Error.

    Implemented over stop_after_error, so nothing past the first
    Error is pulled from source.
    """
    values: list[T] = []
    for item in stop_after_error(source):
        match item:
            case Ok(value):
                values.append(value)
            case Error(err):
                return Error(err)
    return Ok(values)


async def sequence_async[T, E](source: AsyncIterable[Result[T, E]]) -> Result[list[T], E]:
    """Async counterpart of sequence()."""
    values: list[T] = []
    async for item in stop_after_error_async(source):
        match item:
            case Ok(value):
                values.append(value)
            case Error(err):
                return Error(err)
    return Ok(values)


__all__ = ("sequence", "sequence_async")
