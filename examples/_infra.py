from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from kungfu import Error, Ok, Result

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Failure(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


@dataclass(frozen=True, slots=True)
class ParseFailure(Exception):
    line: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return f"cannot parse {self.line!r}"


@dataclass(slots=True)
class FakePager:
    """Pages of raw lines; some pages are unavailable."""

    pages: list[list[str]]
    broken: set[int] = field(default_factory=set)
    fetched: int = 0

    def fetch_pages(self) -> Iterator[Result[list[str], Failure]]:
        for index, page in enumerate(self.pages):
            self.fetched += 1
            if index in self.broken:
                yield Error(Failure(f"page {index}: unavailable"))
            else:
                yield Ok(page)


def parse_int(line: str) -> Result[int, ParseFailure]:
    try:
        return Ok(int(line))
    except ValueError:
        return Error(ParseFailure(line))


def banner(title: str) -> None:
    print()
    print("=" * len(title))
    print(title)
    print("=" * len(title))
