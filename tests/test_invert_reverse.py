"""Tests for the invert and reverse isomorphisms."""

from collections.abc import Callable

from hlists import NIL, HList, LHList, LNode, RHList, RNode


class TestInvert:
    def test_left_to_right_preserves_order(self, make_left: Callable[..., LHList]) -> None:
        inverted = make_left(1, "a", 2.0).invert()
        assert isinstance(inverted, RNode)
        assert inverted.to_pairs() == (1, ("a", (2.0, ())))

    def test_right_to_left_preserves_order(self, make_right: Callable[..., RHList]) -> None:
        inverted = make_right(1, "a", 2.0).invert()
        assert isinstance(inverted, LNode)
        assert inverted.to_pairs() == ((((), 1), "a"), 2.0)

    def test_terminal_inverts_to_itself(self) -> None:
        assert NIL.invert() is NIL

    def test_round_trip(self, builder: Callable[..., HList]) -> None:
        twice = builder(1, "a", 2.0, None).invert().invert()
        assert twice == builder(1, "a", 2.0, None)
        assert twice.length == 4
        assert list(twice) == [1, "a", 2.0, None]

    def test_invert_keeps_signature(self, builder: Callable[..., HList]) -> None:
        seq = builder(1, "a", b"b")
        signature = seq.signature
        assert seq.invert().signature == signature


class TestReverse:
    def test_left_reverse(self, make_left: Callable[..., LHList]) -> None:
        reversed_seq = make_left(1, "a", 2.0).reverse()
        assert isinstance(reversed_seq, LNode)
        assert list(reversed_seq) == [2.0, "a", 1]

    def test_right_reverse(self, make_right: Callable[..., RHList]) -> None:
        reversed_seq = make_right(1, "a", 2.0).reverse()
        assert isinstance(reversed_seq, RNode)
        assert reversed_seq.to_pairs() == (2.0, ("a", (1, ())))

    def test_terminal_reverses_to_itself(self) -> None:
        assert NIL.reverse() is NIL

    def test_involution(self, builder: Callable[..., HList]) -> None:
        assert builder(1, "a", 2.0).reverse().reverse() == builder(1, "a", 2.0)

    def test_reverse_keeps_multiset_of_types(self, builder: Callable[..., HList]) -> None:
        seq = builder(1, "a", 2.0, "b")
        types = sorted(tp.__name__ for tp in seq.signature)
        reversed_types = sorted(tp.__name__ for tp in seq.reverse().signature)
        assert reversed_types == types

    def test_single_element_reverse(self, builder: Callable[..., HList]) -> None:
        assert builder("x").reverse() == builder("x")


class TestComposition:
    def test_invert_reverse_invert(self) -> None:
        seq = NIL.append(1).append(2).append(3.0)
        chained = seq.invert().reverse().invert()
        assert isinstance(chained, LNode)
        assert chained.to_pairs() == ((((), 3.0), 2), 1)
        restored = chained.reverse()
        assert restored == NIL.append(1).append(2).append(3.0)
        assert restored.to_pairs() == ((((), 1), 2), 3.0)

    def test_reverse_commutes_with_invert(self, make_left: Callable[..., LHList]) -> None:
        a = make_left(1, "a", 2.0).reverse().invert()
        b = make_left(1, "a", 2.0).invert().reverse()
        assert a == b
