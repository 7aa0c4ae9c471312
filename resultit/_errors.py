from __future__ import annotations

import typing


class ErasedError(Exception):
    """Non-exception error payload lifted into an Exception by erase()."""

    payload: typing.Any

    def __init__(self, payload: typing.Any) -> None:
        self.payload = payload
        super().__init__(payload)

    def __str__(self) -> str:
        return str(self.payload)

    def __repr__(self) -> str:
        return f"ErasedError({self.payload!r})"


__all__ = ("ErasedError",)
