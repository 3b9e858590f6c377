"""An immutable set of natural numbers stored as a single integer."""

from __future__ import annotations

from typing import AbstractSet, Any, Callable, Iterable, Iterator, List, Optional

from . import bits as bitops
from .protocols import Buildable, Enumerable, Renderable
from .stream import BitStream, Cursor


class NaturalSet(AbstractSet[int], Enumerable[int], Buildable, Renderable):
    """An immutable set of integers greater than or equal to zero.

    The members are stored in :attr:`bits`, an arbitrary precision
    :class:`int` used as a bit vector: bit ``k`` is set when ``k`` is a member.
    Operations that look like mutations return a new :class:`NaturalSet`.

    Examples
    --------
    >>> s = NaturalSet([3, 1, 2, 2])
    >>> s
    NaturalSet([1, 2, 3])
    >>> s.bits == 0b1110
    True
    >>> s.put(0)
    NaturalSet([0, 1, 2, 3])
    >>> s
    NaturalSet([1, 2, 3])

    """

    __slots__ = ("_bits",)

    def __init__(self, values: Iterable[Any] = ()) -> None:
        """Construct a natural set from `values`.

        Duplicates in `values` are ignored.

        Raises
        ------
        InvalidElement
            If any of `values` is not a natural number.

        """
        bits = 0
        for value in values:
            bits = bitops.set_bit(bits, value)
        self._bits = bits

    @classmethod
    def _wrap(cls, bits: int) -> NaturalSet:
        natural_set = cls.__new__(cls)
        natural_set._bits = bits
        return natural_set

    @classmethod
    def from_bits(cls, bits: int) -> NaturalSet:
        """Construct a natural set whose bit vector is `bits`.

        Raises
        ------
        InvalidBits
            If `bits` is negative.

        Examples
        --------
        >>> NaturalSet.from_bits(0)
        NaturalSet([])
        >>> NaturalSet.from_bits(1)
        NaturalSet([0])
        >>> NaturalSet.from_bits(2 ** 100 + 2)
        NaturalSet([1, 100])

        """
        return cls._wrap(bitops.check_bits(bits))

    @classmethod
    def from_iterable(
        cls,
        values: Iterable[Any],
        transform: Optional[Callable[[Any], int]] = None,
    ) -> NaturalSet:
        """Construct a natural set from `values`.

        Parameters
        ----------
        values
            Any iterable of natural numbers, or of inputs to `transform`.
        transform
            An optional function applied to each value before insertion.

        Examples
        --------
        >>> NaturalSet.from_iterable(range(3, 8))
        NaturalSet([3, 4, 5, 6, 7])
        >>> NaturalSet.from_iterable([1, 3, 1], lambda x: 2 * x)
        NaturalSet([2, 6])

        """
        if transform is not None:
            values = map(transform, values)
        return cls(values)

    @classmethod
    def _from_iterable(cls, values: Iterable[Any]) -> NaturalSet:
        # used by the collections.abc.Set operator mixins
        return cls(values)

    @classmethod
    def _coerce(cls, other: Iterable[Any]) -> NaturalSet:
        if isinstance(other, NaturalSet):
            return other
        return cls(other)

    @property
    def bits(self) -> int:
        """Return the bit vector holding the members of this set."""
        return self._bits

    def into(self, values: Iterable[Any]) -> NaturalSet:
        """Return a copy of this set with every one of `values` inserted."""
        bits = self._bits
        for value in values:
            bits = bitops.set_bit(bits, value)
        return self._wrap(bits)

    def put(self, element: int) -> NaturalSet:
        """Return a set containing the members of this one and `element`.

        Raises
        ------
        InvalidElement
            If `element` is not a natural number.

        """
        bits = bitops.set_bit(self._bits, element)
        return self if bits == self._bits else self._wrap(bits)

    def delete(self, element: int) -> NaturalSet:
        """Return a set containing the members of this one except `element`.

        Deleting an element that is not present returns an equal set.

        Raises
        ------
        InvalidElement
            If `element` is not a natural number.

        Examples
        --------
        >>> s = NaturalSet([1, 2, 3])
        >>> s.delete(4)
        NaturalSet([1, 2, 3])
        >>> s.delete(2)
        NaturalSet([1, 3])

        """
        bits = bitops.clear_bit(self._bits, element)
        return self if bits == self._bits else self._wrap(bits)

    def member(self, element: Any) -> bool:
        """Return whether `element` is in the set.

        Values that are not natural numbers are never members.

        """
        return bitops.test_bit(self._bits, element)

    __contains__ = member

    def union(self, other: Iterable[Any]) -> NaturalSet:
        """Return the members of either this set or `other`."""
        return self._wrap(self._bits | self._coerce(other)._bits)

    def intersection(self, other: Iterable[Any]) -> NaturalSet:
        """Return the members common to this set and `other`."""
        return self._wrap(self._bits & self._coerce(other)._bits)

    def difference(self, other: Iterable[Any]) -> NaturalSet:
        """Return the members of this set that are not in `other`.

        Examples
        --------
        >>> NaturalSet([1, 2]).difference(NaturalSet([2, 3, 4]))
        NaturalSet([1])

        """
        bits = self._bits
        return self._wrap(bits & (bits ^ self._coerce(other)._bits))

    def symmetric_difference(self, other: Iterable[Any]) -> NaturalSet:
        """Return the members of exactly one of this set and `other`."""
        return self._wrap(self._bits ^ self._coerce(other)._bits)

    def issubset(self, other: Iterable[Any]) -> bool:
        """Return whether every member of this set is in `other`."""
        return not self.difference(other)._bits

    def issuperset(self, other: Iterable[Any]) -> bool:
        """Return whether every member of `other` is in this set."""
        return self._coerce(other).issubset(self)

    def isdisjoint(self, other: Iterable[Any]) -> bool:
        """Return whether this set and `other` have no members in common."""
        return not self.intersection(other)._bits

    def equal(self, other: Iterable[Any]) -> bool:
        """Return whether this set and `other` have the same bit vector."""
        return self._bits == self._coerce(other)._bits

    def length(self) -> int:
        """Return the number of members.

        This counts the set bits of :attr:`bits`, so unlike ``len`` on a
        :class:`set` it takes time proportional to the largest member.

        Examples
        --------
        >>> NaturalSet([10, 20, 30]).length()
        3

        """
        return bitops.popcount(self._bits)

    count = length

    def __len__(self) -> int:
        return self.length()

    def __bool__(self) -> bool:
        return self._bits != 0

    def stream(self) -> BitStream:
        """Return a lazy, restartable stream of the members in ascending order.

        Examples
        --------
        >>> stream = NaturalSet([10, 5, 7]).stream()
        >>> [element * 10 for element in stream]
        [50, 70, 100]

        """
        return BitStream(self._bits)

    def __iter__(self) -> Iterator[int]:
        return Cursor(self._bits)

    def to_list(self) -> List[int]:
        """Return the members in ascending order."""
        return self.stream().to_list()

    def render(self) -> str:
        """Return the canonical representation, e.g. ``NaturalSet([1, 2])``."""
        return f"{type(self).__name__}({self.to_list()!r})"

    def __reduce__(self) -> Any:
        return type(self).from_bits, (self._bits,)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, NaturalSet):
            return self.equal(other)
        return super().__eq__(other)

    def __hash__(self) -> int:
        # the frozenset-compatible hash from collections.abc.Set
        return self._hash()

    def __le__(self, other: Any) -> bool:
        if isinstance(other, NaturalSet):
            return self.issubset(other)
        return super().__le__(other)

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, NaturalSet):
            return self._bits != other._bits and self.issubset(other)
        return super().__lt__(other)

    def __ge__(self, other: Any) -> bool:
        if isinstance(other, NaturalSet):
            return other.issubset(self)
        return super().__ge__(other)

    def __gt__(self, other: Any) -> bool:
        if isinstance(other, NaturalSet):
            return self._bits != other._bits and other.issubset(self)
        return super().__gt__(other)

    def __or__(self, other: Any) -> NaturalSet:
        if isinstance(other, NaturalSet):
            return self.union(other)
        return super().__or__(other)

    def __and__(self, other: Any) -> NaturalSet:
        if isinstance(other, NaturalSet):
            return self.intersection(other)
        return super().__and__(other)

    def __sub__(self, other: Any) -> NaturalSet:
        if isinstance(other, NaturalSet):
            return self.difference(other)
        return super().__sub__(other)

    def __xor__(self, other: Any) -> NaturalSet:
        if isinstance(other, NaturalSet):
            return self.symmetric_difference(other)
        return super().__xor__(other)
