"""naturalset functional API.

.. note::

   The binary functions all take `right` and then `left` as arguments, **in
   that order**.

   This is intentional, and is the way the functions must be written to enable
   `currying <https://en.wikipedia.org/wiki/Currying>`_.  Currying is the
   technique that allows us to use the right shift operator (``>>``) to chain
   operations.

Examples
--------
>>> from naturalset.api import naturalset, put, delete, union, to_list
>>> [3, 1] >> naturalset >> put(2) >> delete(3) >> union([7]) >> to_list
[1, 2, 7]

"""

from __future__ import annotations

import inspect
from typing import Any, Callable, Iterable, List, Optional

import toolz
from public import private, public

from .naturalset import NaturalSet
from .stream import BitStream


@private  # type: ignore[misc]
class shiftable(toolz.curry):
    """Shiftable curry."""

    @property
    def __signature__(self) -> inspect.Signature:
        return inspect.signature(self.func)  # pragma: no cover

    def __rrshift__(self, other: Any) -> Any:
        return self(other)


@public  # type: ignore[misc]
def empty() -> NaturalSet:
    """Return the empty natural set."""
    return NaturalSet()


@public  # type: ignore[misc]
@shiftable
def from_bits(bits: int) -> NaturalSet:
    """Construct a natural set whose bit vector is `bits`.

    Examples
    --------
    >>> from naturalset.api import from_bits
    >>> 0b1011 >> from_bits
    NaturalSet([0, 1, 3])

    """
    return NaturalSet.from_bits(bits)


@public  # type: ignore[misc]
@shiftable
def naturalset(
    values: Iterable[Any], transform: Optional[Callable[[Any], int]] = None
) -> NaturalSet:
    """Construct a natural set from an iterable of natural numbers.

    Parameters
    ----------
    values
        An iterable of natural numbers, or of inputs to `transform`.
    transform
        A function applied to every value before it is inserted.

    Examples
    --------
    >>> from naturalset.api import naturalset
    >>> naturalset([3, 3, 2, 1])
    NaturalSet([1, 2, 3])
    >>> naturalset([1, 2, 3], lambda x: x * 10)
    NaturalSet([10, 20, 30])

    """
    return NaturalSet.from_iterable(values, transform)


@public  # type: ignore[misc]
@shiftable
def collect(values: Iterable[Any], natural_set: NaturalSet) -> NaturalSet:
    """Insert every one of `values` into `natural_set`.

    Examples
    --------
    >>> from naturalset.api import collect, empty
    >>> empty() >> collect([5, 1, 5])
    NaturalSet([1, 5])

    """
    return natural_set.into(values)


@public  # type: ignore[misc]
@shiftable
def put(element: int, natural_set: NaturalSet) -> NaturalSet:
    """Insert `element` into `natural_set`."""
    return natural_set.put(element)


@public  # type: ignore[misc]
@shiftable
def delete(element: int, natural_set: NaturalSet) -> NaturalSet:
    """Remove `element` from `natural_set`."""
    return natural_set.delete(element)


@public  # type: ignore[misc]
@shiftable
def member(element: Any, natural_set: NaturalSet) -> bool:
    """Return whether `element` is in `natural_set`."""
    return natural_set.member(element)


@public  # type: ignore[misc]
@shiftable
def union(right: Iterable[Any], left: NaturalSet) -> NaturalSet:
    """Return the members of `left` or `right`."""
    return left.union(right)


@public  # type: ignore[misc]
@shiftable
def intersection(right: Iterable[Any], left: NaturalSet) -> NaturalSet:
    """Return the members of both `left` and `right`."""
    return left.intersection(right)


@public  # type: ignore[misc]
@shiftable
def difference(right: Iterable[Any], left: NaturalSet) -> NaturalSet:
    """Return the members of `left` that are not in `right`.

    Examples
    --------
    >>> from naturalset.api import difference, naturalset
    >>> naturalset(range(1, 102)) >> difference(range(2, 101))
    NaturalSet([1, 101])

    """
    return left.difference(right)


@public  # type: ignore[misc]
@shiftable
def symmetric_difference(right: Iterable[Any], left: NaturalSet) -> NaturalSet:
    """Return the members of exactly one of `left` and `right`."""
    return left.symmetric_difference(right)


@public  # type: ignore[misc]
@shiftable
def subset(right: Iterable[Any], left: NaturalSet) -> bool:
    """Return whether `left` is a subset of `right`."""
    return left.issubset(right)


@public  # type: ignore[misc]
@shiftable
def disjoint(right: Iterable[Any], left: NaturalSet) -> bool:
    """Return whether `left` and `right` have no members in common."""
    return left.isdisjoint(right)


@public  # type: ignore[misc]
@shiftable
def equal(right: Iterable[Any], left: NaturalSet) -> bool:
    """Return whether `left` and `right` have the same members."""
    return left.equal(right)


@public  # type: ignore[misc]
@shiftable
def length(natural_set: NaturalSet) -> int:
    """Return the number of members of `natural_set`.

    This takes time proportional to the largest member.

    """
    return natural_set.length()


@public  # type: ignore[misc]
@shiftable
def stream(natural_set: NaturalSet) -> BitStream:
    """Return a lazy stream of the members of `natural_set`."""
    return natural_set.stream()


@public  # type: ignore[misc]
@shiftable
def to_list(natural_set: NaturalSet) -> List[int]:
    """Return the members of `natural_set` in ascending order."""
    return natural_set.to_list()


@public  # type: ignore[misc]
@shiftable
def render(natural_set: NaturalSet) -> str:
    """Return the canonical string form of `natural_set`."""
    return natural_set.render()
