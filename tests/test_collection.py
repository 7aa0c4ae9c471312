"""sequence / partition: terminal operations over result iterators."""

from __future__ import annotations

from kungfu import Error, Ok

from helpers import CountingSource, unpack
from resultit import flatten_results, partition, sequence


class TestSequence:
    def test_all_ok(self) -> None:
        assert unpack(sequence([Ok(1), Ok(2), Ok(3)])) == ("ok", [1, 2, 3])

    def test_empty(self) -> None:
        assert unpack(sequence([])) == ("ok", [])

    def test_first_error_wins(self, boom: Exception, other_boom: Exception) -> None:
        assert unpack(sequence([Ok(1), Error(boom), Error(other_boom)])) == ("err", boom)

    def test_does_not_pull_past_the_error(self, boom: Exception) -> None:
        source = CountingSource([Ok(1), Error(boom), Ok(2), Ok(3)])

        sequence(source)

        assert source.pulled == 2

    def test_over_flattened_results(self) -> None:
        assert unpack(sequence(flatten_results([Ok([1, 2]), Ok([]), Ok([3])]))) == ("ok", [1, 2, 3])


class TestPartition:
    def test_splits_in_order(self, boom: Exception, other_boom: Exception) -> None:
        oks, errs = partition([Ok(1), Error(boom), Ok(2), Error(other_boom)])

        assert oks == [1, 2]
        assert errs == [boom, other_boom]

    def test_empty(self) -> None:
        assert partition([]) == ([], [])

    def test_consumes_everything(self, boom: Exception) -> None:
        source = CountingSource([Error(boom), Ok(1), Ok(2)])

        partition(source)

        assert source.pulled == 3
