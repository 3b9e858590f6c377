"""Lazy ascending enumeration of the set bits of an integer."""

from typing import Iterable, Iterator, List, Tuple

from .bits import lowest_set_bit


class Cursor(Iterator[int]):
    """A single pass over the set bits of an integer.

    The state of a cursor is the pair ``(remaining, index)``: the bits not yet
    examined, shifted so that the lowest one corresponds to ``index``. The
    cursor is exhausted once ``remaining`` is zero.

    """

    __slots__ = "remaining", "index"

    def __init__(self, bits: int) -> None:
        self.remaining = bits
        self.index = 0

    @property
    def state(self) -> Tuple[int, int]:
        """Return the ``(remaining, index)`` pair."""
        return self.remaining, self.index

    def __iter__(self) -> "Cursor":
        return self

    def __next__(self) -> int:
        remaining = self.remaining
        if not remaining:
            raise StopIteration

        # skip a run of clear low bits in one shift
        skip = lowest_set_bit(remaining)
        element = self.index + skip

        self.remaining = remaining >> (skip + 1)
        self.index = element + 1
        return element


class BitStream(Iterable[int]):
    """A restartable, lazy sequence of the set bit indices of `bits`.

    Every call to :func:`iter` starts an independent :class:`Cursor`, so a
    stream can be consumed any number of times.

    Examples
    --------
    >>> stream = BitStream(0b10100)
    >>> list(stream)
    [2, 4]
    >>> [element * 10 for element in stream]
    [20, 40]

    """

    __slots__ = ("bits",)

    def __init__(self, bits: int) -> None:
        self.bits = bits

    def __iter__(self) -> Cursor:
        return Cursor(self.bits)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.bits:#b})"

    def to_list(self) -> List[int]:
        """Drain a fresh cursor into a list."""
        return list(self)
