from __future__ import annotations

from _infra import FakePager, banner, parse_int

from kungfu import Error, Ok

from resultit import TryResult, stream


def main() -> None:
    banner("02_nested_errors: two error types, one stream")

    pager = FakePager(pages=[["1", "2"], ["3", "x"], ["5"]])

    # Result[list[Result[int, ParseFailure]], Failure]
    pages = (page.map(lambda lines: [parse_int(line) for line in lines]) for page in pager.fetch_pages())

    rows: list[TryResult[int]] = (
        stream(pages)
        .flatten_results()
        .erase_errors()
        .tap_err(lambda e: print(f"first problem: {e}"))
        .stop_after_error()
        .collect()
    )

    for item in rows:
        match item:
            case Ok(value):
                print(f"value: {value}")
            case Error(err):
                print(f"stopped at: {err!r}")


if __name__ == "__main__":
    main()
