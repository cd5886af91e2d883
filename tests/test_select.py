"""Tests for type-directed selection."""

from collections.abc import Callable

import pytest
from kungfu import Error, Ok

from hlists import (
    NIL,
    AmbiguousElementError,
    ElementNotFoundError,
    HList,
    LHList,
    RHList,
    SelectorError,
    counter,
)


class TestLeftCounters:
    def test_candidates_count_from_last(self, make_left: Callable[..., LHList]) -> None:
        seq = make_left(1, "a", 2)
        assert seq.candidates(int) == (0, 2)
        assert seq.candidates(str) == (1,)
        assert seq.candidates(float) == ()

    def test_counter_selects_position(self, make_left: Callable[..., LHList]) -> None:
        seq = make_left(1, "a", 2)
        assert seq.get(int, 0) == 2
        assert seq.get(int, 2) == 1
        assert seq.get(int, counter(2)) == 1

    def test_wrong_type_at_counter(self, make_left: Callable[..., LHList]) -> None:
        seq = make_left(1, "a", 2)
        with pytest.raises(ElementNotFoundError) as exc_info:
            seq.get(int, 1)
        assert exc_info.value.counter == 1
        assert exc_info.value.needle is int

    def test_counter_past_first(self, make_left: Callable[..., LHList]) -> None:
        with pytest.raises(ElementNotFoundError, match="runs past"):
            make_left(1, "a").get(int, 5)


class TestRightCounters:
    def test_candidates_count_from_head(self, make_right: Callable[..., RHList]) -> None:
        seq = make_right(1, "a", 2)
        assert seq.candidates(int) == (0, 2)

    def test_counter_selects_position(self, make_right: Callable[..., RHList]) -> None:
        seq = make_right(1, "a", 2)
        assert seq.get(int, 0) == 1
        assert seq.get(int, 2) == 2
        assert seq.get(str, 1) == "a"

    def test_counter_past_last(self, make_right: Callable[..., RHList]) -> None:
        with pytest.raises(ElementNotFoundError, match="runs past"):
            make_right(1, "a").get(str, 3)


class TestInference:
    def test_unique_needle_is_found(self, builder: Callable[..., HList]) -> None:
        seq = builder(1, "two", 3.0)
        assert seq.get(str) == "two"
        assert seq.get(float) == 3.0

    def test_select_returns_ok(self, builder: Callable[..., HList]) -> None:
        result = builder(1, "two").select(str)
        assert isinstance(result, Ok)
        assert result.unwrap() == "two"

    def test_absent_needle(self, builder: Callable[..., HList]) -> None:
        match builder(1, "two").select(bytes):
            case Error(err):
                assert isinstance(err, ElementNotFoundError)
                assert err.counter is None
            case Ok(value):
                pytest.fail(f"unexpected selection {value!r}")

    def test_ambiguous_needle(self, builder: Callable[..., HList]) -> None:
        seq = builder(1, "a", 2)
        with pytest.raises(AmbiguousElementError) as exc_info:
            seq.get(int)
        assert exc_info.value.candidates == (0, 2)

    def test_selector_errors_share_base(self, builder: Callable[..., HList]) -> None:
        seq = builder(1, 2)
        with pytest.raises(SelectorError):
            seq.get(int)
        with pytest.raises(SelectorError):
            seq.get(str)

    def test_terminal_has_nothing(self) -> None:
        match NIL.select(int):
            case Error(err):
                assert isinstance(err, ElementNotFoundError)
            case Ok(value):
                pytest.fail(f"unexpected selection {value!r}")
        assert NIL.candidates(int) == ()
        with pytest.raises(ElementNotFoundError):
            NIL.get_mut(int)


class TestExactTypes:
    def test_bool_is_not_int(self, builder: Callable[..., HList]) -> None:
        seq = builder(True, 1)
        assert seq.get(bool) is True
        assert seq.get(int) == 1
        assert seq.candidates(int) != seq.candidates(bool)

    def test_subclass_is_not_base(self, builder: Callable[..., HList]) -> None:
        class Name(str):
            pass

        seq = builder(Name("n"), "plain")
        assert seq.get(str) == "plain"
        assert type(seq.get(Name)) is Name

    def test_bad_counter_type(self, builder: Callable[..., HList]) -> None:
        with pytest.raises(TypeError):
            builder(1).select(int, "0")  # type: ignore[arg-type]
