"""Primitive operations on an :class:`int` used as a bit vector.

Bit ``k`` of the integer (counting from the least significant bit) records
whether the natural number ``k`` is present. Python integers have arbitrary
precision, so none of these functions overflow as the bit pattern grows.

"""

import numbers
import operator
import sys
from typing import Any

from .errors import InvalidBits, InvalidElement


def is_natural(value: Any) -> bool:
    """Return whether `value` is an integer greater than or equal to zero.

    :class:`bool` values are rejected even though :class:`bool` subclasses
    :class:`int`.

    Examples
    --------
    >>> is_natural(0)
    True
    >>> is_natural(-1)
    False
    >>> is_natural(2.0)
    False
    >>> is_natural(True)
    False

    """
    return (
        isinstance(value, numbers.Integral)
        and not isinstance(value, bool)
        and value >= 0
    )


def check_element(element: Any) -> int:
    """Return `element` as an :class:`int`.

    Raises
    ------
    InvalidElement
        If `element` is not a natural number.

    """
    if not is_natural(element):
        raise InvalidElement(element)
    return operator.index(element)


def check_bits(bits: Any) -> int:
    """Return `bits` as an :class:`int`.

    Raises
    ------
    InvalidBits
        If `bits` is negative or not an integer.

    """
    if not is_natural(bits):
        raise InvalidBits(bits)
    return operator.index(bits)


def set_bit(bits: int, k: Any) -> int:
    """Return `bits` with bit `k` set.

    Examples
    --------
    >>> set_bit(0b0001, 2)
    5

    """
    return bits | (1 << check_element(k))


def clear_bit(bits: int, k: Any) -> int:
    """Return `bits` with bit `k` cleared.

    Clearing a bit that is already clear returns `bits` unchanged.

    """
    return bits & ~(1 << check_element(k))


def test_bit(bits: int, k: Any) -> bool:
    """Return whether bit `k` of `bits` is set.

    Unlike :func:`set_bit` and :func:`clear_bit` this never raises: asking
    about something that is not a natural number returns ``False``.

    """
    if not is_natural(k):
        return False
    return (bits >> operator.index(k)) & 1 == 1


def count_ones(bits: int) -> int:
    """Count the set bits of `bits` by repeatedly testing and shifting.

    This is the reference definition of the population count and takes time
    proportional to the position of the highest set bit.

    Examples
    --------
    >>> count_ones(0b1011)
    3

    """
    count = 0
    while bits:
        count += bits & 1
        bits >>= 1
    return count


if sys.version_info >= (3, 10):

    def popcount(bits: int) -> int:
        """Count the set bits of `bits` using :meth:`int.bit_count`."""
        return bits.bit_count()


else:  # pragma: no cover

    def popcount(bits: int) -> int:
        """Count the set bits of `bits` from its binary representation."""
        return bin(bits).count("1")


def lowest_set_bit(bits: int) -> int:
    """Return the index of the lowest set bit of a positive `bits`."""
    return (bits & -bits).bit_length() - 1
