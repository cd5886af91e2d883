"""Tests for tagged sequences and tag lookup."""

from collections.abc import Callable

import pytest
from kungfu import Error, Ok

from hlists import (
    NIL,
    HList,
    Indexed,
    InvalidTagError,
    LNode,
    RNode,
    TagCollisionError,
    TagNotFoundError,
    TagPolicy,
    UntaggedElementError,
    check_unique_tags,
    enumerate_tags,
    find_tagged,
)


class TestCarrier:
    def test_repr(self) -> None:
        assert repr(Indexed(0, 1.0)) == "Indexed[0](1.0)"

    @pytest.mark.parametrize("tag", [-1, True, "0", 1.0])
    def test_rejects_bad_tags(self, tag: object) -> None:
        with pytest.raises(InvalidTagError):
            Indexed(tag, "x")  # type: ignore[arg-type]

    def test_is_frozen(self) -> None:
        carrier = Indexed(0, "x")
        with pytest.raises(AttributeError):
            carrier.tag = 1  # type: ignore[misc]


class TestInsertion:
    def test_root_then_explicit(self) -> None:
        seq = NIL.append_indexed(1.0).append_indexed("x", tag=1)
        assert isinstance(seq, LNode)
        assert seq.tags() == (0, 1)
        assert seq.unindexed().to_pairs() == (((), 1.0), "x")

    def test_auto_tags_increase(self) -> None:
        seq = NIL.append_indexed("a").append_indexed("b").append_indexed("c")
        assert seq.tags() == (0, 1, 2)

    def test_auto_tag_follows_maximum(self) -> None:
        seq = NIL.append_indexed("a").append_indexed("b", tag=7).append_indexed("c")
        assert seq.tags() == (0, 7, 8)

    def test_root_tag_is_zero(self) -> None:
        assert NIL.append_indexed("a", tag=0).tags() == (0,)
        with pytest.raises(InvalidTagError):
            NIL.append_indexed("a", tag=3)
        with pytest.raises(InvalidTagError):
            NIL.append_indexed("a", tag=False)  # type: ignore[arg-type]

    def test_negative_tag(self) -> None:
        with pytest.raises(InvalidTagError):
            NIL.append_indexed("a").append_indexed("b", tag=-2)

    def test_right_folded_prepend(self) -> None:
        seq = NIL.prepend_indexed("x").prepend_indexed("y")
        assert isinstance(seq, RNode)
        assert seq.tags() == (1, 0)
        assert list(seq.unindexed()) == ["y", "x"]

    def test_foreign_end_insertion(self) -> None:
        left = NIL.append_indexed("a").prepend_indexed("z")
        assert left.tags() == (1, 0)
        right = NIL.prepend_indexed("a").append_indexed("z", tag=5)
        assert right.tags() == (0, 5)

    def test_untagged_sequence_rejects_tagged_insert(self, builder: Callable[..., HList]) -> None:
        with pytest.raises(UntaggedElementError):
            builder(1).append_indexed(2)
        with pytest.raises(UntaggedElementError):
            builder(1).prepend_indexed(2)


class TestProjection:
    def test_is_indexed(self, builder: Callable[..., HList]) -> None:
        assert NIL.is_indexed()
        assert not builder(1).is_indexed()
        assert builder(Indexed(0, 1)).is_indexed()

    def test_mixed_sequence_has_no_tags(self) -> None:
        seq = NIL.append_indexed(1).append(2)
        assert not seq.is_indexed()
        with pytest.raises(UntaggedElementError):
            seq.tags()

    def test_unindexed_keeps_representation(self, builder: Callable[..., HList]) -> None:
        tagged = builder(Indexed(0, 1), Indexed(1, "a"))
        side = tagged.side
        plain = tagged.unindexed()
        assert plain.side == side
        assert list(plain) == [1, "a"]

    def test_terminal_unindexed(self) -> None:
        assert NIL.unindexed() is NIL

    def test_enumerate_tags(self, builder: Callable[..., HList]) -> None:
        seq = enumerate_tags(builder("a", 2, 3.0))
        assert seq.tags() == (0, 1, 2)
        assert seq.get_tagged(1) == 2


class TestLookup:
    def test_get_tagged(self) -> None:
        seq = NIL.append_indexed("a").append_indexed("b", tag=4)
        assert seq.get_tagged(0) == "a"
        assert seq.get_tagged(4) == "b"

    def test_find_tagged_returns_result(self) -> None:
        seq = NIL.append_indexed("a")
        assert find_tagged(seq, 0).unwrap() == "a"
        match find_tagged(seq, 9):
            case Error(err):
                assert isinstance(err, TagNotFoundError)
                assert err.tag == 9
            case Ok(value):
                pytest.fail(f"unexpected value {value!r}")

    def test_missing_tag(self) -> None:
        with pytest.raises(TagNotFoundError):
            NIL.append_indexed("a").get_tagged(1)

    def test_collision_rejected_by_default(self) -> None:
        seq = NIL.append_indexed("a").append_indexed("b", tag=0)
        assert seq.tags() == (0, 0)
        with pytest.raises(TagCollisionError) as exc_info:
            seq.get_tagged(0)
        assert exc_info.value.count == 2

    def test_collision_last_wins(self) -> None:
        seq = NIL.append_indexed("a").append_indexed("b", tag=0)
        assert seq.get_tagged(0, policy=TagPolicy(on_collision="last")) == "b"

    def test_lookup_on_untagged(self, builder: Callable[..., HList]) -> None:
        with pytest.raises(UntaggedElementError):
            builder(1).get_tagged(0)

    def test_untagged_lookup_is_an_error_value(self, builder: Callable[..., HList]) -> None:
        match find_tagged(builder(1), 0):
            case Error(err):
                assert isinstance(err, UntaggedElementError)
            case Ok(value):
                pytest.fail(f"unexpected value {value!r}")
        match check_unique_tags(builder(1, 2)):
            case Error(err):
                assert isinstance(err, UntaggedElementError)
            case Ok(_):
                pytest.fail("untagged sequence reported as unique")

    def test_check_unique_tags(self) -> None:
        unique = NIL.append_indexed("a").append_indexed("b")
        assert check_unique_tags(unique).unwrap() is unique
        clashing = NIL.append_indexed("a").append_indexed("b", tag=0)
        match check_unique_tags(clashing):
            case Error(err):
                assert err.tag == 0
            case Ok(_):
                pytest.fail("collision not reported")

    def test_unknown_policy(self) -> None:
        with pytest.raises(ValueError):
            TagPolicy(on_collision="first")  # type: ignore[arg-type]
