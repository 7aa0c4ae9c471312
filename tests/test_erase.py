"""erase: collapsing nested results into TryResult."""

from __future__ import annotations

from kungfu import Error, Ok

from helpers import Boom, unpack, unpack_all
from resultit import ErasedError, erase, erase_errors


class TestErase:
    def test_plain_ok_is_kept(self) -> None:
        assert unpack(erase(Ok(1))) == ("ok", 1)

    def test_nested_ok_collapses(self) -> None:
        assert unpack(erase(Ok(Ok(Ok("deep"))))) == ("ok", "deep")

    def test_inner_error_surfaces(self) -> None:
        err = Boom("inner")

        assert unpack(erase(Ok(Error(err)))) == ("err", err)

    def test_exception_error_kept_as_is(self) -> None:
        err = Boom("outer")

        kind, value = unpack(erase(Error(err)))

        assert kind == "err"
        assert value is err

    def test_non_exception_error_is_wrapped(self) -> None:
        kind, value = unpack(erase(Ok(Error("bad row"))))

        assert kind == "err"
        assert isinstance(value, ErasedError)
        assert value.payload == "bad row"
        assert str(value) == "bad row"

    def test_collections_are_not_touched(self) -> None:
        items = [1, 2]

        kind, value = unpack(erase(Ok(items)))

        assert kind == "ok"
        assert value is items

    def test_erase_errors_is_lazy_map(self) -> None:
        pulled: list[int] = []

        def source():
            for n in range(3):
                pulled.append(n)
                yield Ok(Ok(n))

        out = erase_errors(source())
        assert pulled == []

        assert unpack(next(out)) == ("ok", 0)
        assert pulled == [0]
        assert unpack_all(out) == [("ok", 1), ("ok", 2)]


class TestErasedError:
    def test_repr_and_payload(self) -> None:
        err = ErasedError({"code": 7})

        assert err.payload == {"code": 7}
        assert repr(err) == "ErasedError({'code': 7})"
        assert isinstance(err, Exception)


class TestEraseErrorBranch:
    def test_deeply_nested_exception_is_the_same_object(self) -> None:
        err = Boom("deep")

        kind, value = unpack(erase(Ok(Ok(Error(err)))))

        assert kind == "err"
        assert value is err

    def test_outer_non_exception_payload_is_wrapped_once(self) -> None:
        kind, value = unpack(erase(Error(7)))

        assert kind == "err"
        assert isinstance(value, ErasedError)
        assert value.payload == 7

    def test_mixed_nesting_depths_in_one_stream(self) -> None:
        err = Boom("inner")
        source = [Ok(1), Ok(Ok("two")), Ok(Error(err)), Error("outer")]

        out = unpack_all(erase_errors(source))

        assert out[:3] == [("ok", 1), ("ok", "two"), ("err", err)]
        assert out[3][0] == "err"
        assert isinstance(out[3][1], ErasedError)
        assert out[3][1].payload == "outer"
