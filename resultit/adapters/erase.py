"""Error erasure

Collapse nested results into TryResult[T].

Flattening results nested several levels deep leaves a different error type
at each level, e.g. Result[Result[int, ParseError], IOError]. erase() collapses
such a value into one Result[int, Exception], so the levels can be consumed
(and truncated with stop_after_error) as a single stream."""

from __future__ import annotations

import typing
from collections.abc import Iterable, Iterator
from typing import assert_never

from kungfu import Error, Ok, Result

from .._errors import ErasedError
from .._types import TryResult


def _to_exception(error: typing.Any) -> Exception:
    """Return error as is when it is an Exception, else wrap it in ErasedError."""
    if isinstance(error, Exception):
        return error
    return ErasedError(error)


def erase(result: Result[typing.Any, typing.Any]) -> TryResult[typing.Any]:
    """
    Collapse any depth of Ok(...) nesting and erase the error type.

    Examples:
        erase(Ok(Ok(1)))              # Ok(1)
        erase(Ok(Error(ValueError())))  # Error(ValueError())
        erase(Error("bad"))           # Error(ErasedError("bad"))
        erase(Ok(1))                  # Ok(1)
    """
    while True:
        match result:
            case Ok((Ok(_) | Error(_)) as inner):
                result = inner
            case Ok(_):
                return result
            case Error(err):
                return Error(_to_exception(err))
            case _ as unreachable:
                assert_never(unreachable)


def erase_errors(source: Iterable[Result[typing.Any, typing.Any]]) -> Iterator[TryResult[typing.Any]]:
    """Lazily apply erase() to every item of source."""
    return map(erase, source)


__all__ = ("erase", "erase_errors")
