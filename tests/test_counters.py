"""Tests for type-level counters."""

import pytest

from hlists import ZERO, Counter, Successor, Zero, as_counter, counter


class TestConstruction:
    def test_zero_has_index_zero(self) -> None:
        assert Zero().index == 0
        assert ZERO == Zero()

    def test_successor_adds_one(self) -> None:
        assert Successor(ZERO).index == 1
        assert Successor(Successor(ZERO)).index == 2

    def test_counter_builds_peano_chain(self) -> None:
        assert counter(0) == ZERO
        assert counter(2) == Successor(Successor(Zero()))
        assert counter(5).index == 5

    def test_succ_method(self) -> None:
        assert ZERO.succ() == counter(1)
        assert counter(3).succ().index == 4

    def test_negative_ordinal_rejected(self) -> None:
        with pytest.raises(ValueError):
            counter(-1)

    def test_successor_requires_counter(self) -> None:
        with pytest.raises(TypeError):
            Successor(3)  # type: ignore[arg-type]


class TestConversion:
    def test_as_counter_accepts_int_and_counter(self) -> None:
        assert as_counter(3) == counter(3)
        c = counter(1)
        assert as_counter(c) is c

    def test_as_counter_rejects_bool_and_other_types(self) -> None:
        with pytest.raises(TypeError):
            as_counter(True)
        with pytest.raises(TypeError):
            as_counter("1")  # type: ignore[arg-type]

    def test_counter_is_usable_as_index(self) -> None:
        assert [10, 20, 30][counter(1)] == 20
        assert int(counter(4)) == 4

    def test_counters_are_hashable_values(self) -> None:
        assert len({counter(2), Successor(Successor(ZERO)), ZERO}) == 2
        assert isinstance(counter(2), Counter)

    def test_repr_shows_nesting(self) -> None:
        assert repr(counter(2)) == "Successor(Successor(Zero()))"
