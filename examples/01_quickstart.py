from __future__ import annotations

from _infra import FakePager, banner

from kungfu import Error, Ok

from resultit import flatten_results, stop_after_error


def main() -> None:
    banner("01_quickstart: flatten_results + stop_after_error")

    pager = FakePager(pages=[["1", "2"], ["3"], [], ["4", "5"]], broken={2})

    # Fail-open: every row, every page error relayed once.
    for item in flatten_results(pager.fetch_pages()):
        match item:
            case Ok(row):
                print(f"row: {row}")
            case Error(err):
                print(f"error: {err}")

    # Fail-stop: halt right after the first error, later pages are never fetched.
    pager = FakePager(pages=[["1", "2"], ["3"], [], ["4", "5"]], broken={1})
    rows = list(stop_after_error(flatten_results(pager.fetch_pages())))
    print(f"{len(rows)} items, fetched {pager.fetched} of {len(pager.pages)} pages")


if __name__ == "__main__":
    main()
