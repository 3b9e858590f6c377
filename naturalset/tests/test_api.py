from __future__ import annotations

import pytest

from naturalset import InvalidBits, InvalidElement, NaturalSet
from naturalset.api import (
    collect,
    delete,
    difference,
    disjoint,
    empty,
    equal,
    from_bits,
    intersection,
    length,
    member,
    naturalset,
    put,
    render,
    stream,
    subset,
    symmetric_difference,
    to_list,
    union,
)


def test_construction() -> None:
    assert empty() == NaturalSet()
    assert naturalset([1, 2, 3]).bits == 0b1110
    assert ([3, 1, 2] >> naturalset >> to_list) == [1, 2, 3]
    assert naturalset([1, 2, 3], lambda x: x * 10) == NaturalSet([10, 20, 30])
    assert (0b110 >> from_bits) == NaturalSet([1, 2])

    with pytest.raises(InvalidBits):
        from_bits(-3)

    with pytest.raises(InvalidElement):
        naturalset([-3])


def test_chaining() -> None:
    result = empty() >> put(3) >> put(1) >> put(3) >> delete(1) >> to_list
    assert result == [3]


def test_collect() -> None:
    assert (naturalset([9]) >> collect(range(3)) >> to_list) == [0, 1, 2, 9]


def test_member() -> None:
    ns = naturalset([1, 2, 3])
    assert ns >> member(2)
    assert not (ns >> member(4))
    assert not (ns >> member(-1))


def test_curried_argument_order() -> None:
    left, right = naturalset(range(1, 102)), naturalset(range(2, 101))
    assert difference(right, left) == naturalset([1, 101])
    assert (left >> difference(right)) == naturalset([1, 101])
    assert (right >> difference(left)) == empty()


def test_algebra() -> None:
    a, b = naturalset(range(1, 7)), naturalset(range(5, 16))
    assert (a >> union(b)) == naturalset(range(1, 16))
    assert (a >> intersection(b)) == naturalset([5, 6])
    assert (a >> symmetric_difference(b)) == naturalset(
        [1, 2, 3, 4, *range(7, 16)]
    )
    assert not (a >> disjoint(b))
    assert a >> disjoint(naturalset(range(8, 21)))
    assert (a >> intersection(b)) >> subset(a)
    assert a >> equal(naturalset([6, 5, 4, 3, 2, 1]))


def test_length() -> None:
    assert (naturalset(range(5, 16)) >> length) == 11


def test_stream() -> None:
    s = naturalset([10, 5, 7]) >> stream
    assert [element * 10 for element in s] == [50, 70, 100]
    assert list(s) == [5, 7, 10]


def test_render() -> None:
    assert (empty() >> render) == "NaturalSet([])"
    assert (naturalset([2, 1]) >> render) == "NaturalSet([1, 2])"


def test_public_names() -> None:
    import naturalset.api as api

    assert "union" in api.__all__
    assert "shiftable" not in api.__all__
