"""Internal helpers for resultit.

Named functions used by the adapters in place of lambdas, so the mapping steps
stay importable and show up by name in reprs and tracebacks."""

from __future__ import annotations

import itertools
import typing
from collections.abc import Iterable, Iterator

from kungfu import Ok, Result

# Maybe = zero or one element, an optional value spelled as an iterable
type Maybe[T] = tuple[()] | tuple[T]


def wrap_ok[T](value: T) -> Result[T, typing.Never]:
    """Wrap a success value into Ok. Used as the map step of flatten_results."""
    return Ok(value)


def collapse[T](maybe: Maybe[Iterable[T]]) -> Iterator[T]:
    """
    Collapse an optional iterable into a plain iterator.

    An absent iterable gives an empty iterator. Nothing is pulled from the
    inner iterable until the returned iterator is advanced.
    """
    return itertools.chain.from_iterable(maybe)


__all__ = (
    "Maybe",
    "collapse",
    "wrap_ok",
)
