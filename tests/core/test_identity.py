"""Tests for typed index handles.

Critical Invariants:
- Equality and hashing depend on the raw position only
- Negative or non-integer positions are rejected up front
"""

import pytest

from slotarena.core.identity import Idx


def test_round_trips_raw_position():
    idx: Idx[str] = Idx.from_raw(7)

    assert idx.to_raw() == 7
    assert int(idx) == 7


def test_equality_is_by_raw_position():
    """Two handles with the same position are indistinguishable."""
    assert Idx.from_raw(3) == Idx.from_raw(3)
    assert Idx.from_raw(3) != Idx.from_raw(4)
    assert hash(Idx.from_raw(3)) == hash(Idx.from_raw(3))


def test_is_not_equal_to_bare_int():
    assert Idx.from_raw(0) != 0


def test_usable_as_dict_key():
    lookup = {Idx.from_raw(1): "one"}

    assert lookup[Idx.from_raw(1)] == "one"


def test_usable_as_sequence_index():
    """__index__ lets a handle address plain lists directly."""
    assert ["a", "b", "c"][Idx.from_raw(2)] == "c"


def test_is_immutable():
    idx = Idx.from_raw(1)

    with pytest.raises(AttributeError):
        idx.raw = 2  # type: ignore[misc]


def test_rejects_negative_position():
    """CRITICAL: negative positions would wrap around list indexing."""
    with pytest.raises(ValueError, match="non-negative"):
        Idx.from_raw(-1)


@pytest.mark.parametrize("raw", [1.0, "1", True, None])
def test_rejects_non_int_position(raw):
    with pytest.raises(TypeError, match="must be an int"):
        Idx.from_raw(raw)  # type: ignore[arg-type]


def test_repr_shows_position():
    assert repr(Idx.from_raw(5)) == "Idx(5)"
