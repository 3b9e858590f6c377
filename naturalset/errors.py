"""Exceptions raised, and values returned, on invalid use of a natural set."""

from typing import Any


class NaturalSetError(Exception):
    """Base class for natural set errors."""


class InvalidElement(NaturalSetError, ValueError):
    """Raised when a value that is not a natural number is used as an element."""

    def __init__(self, element: Any) -> None:
        super().__init__(f"element must be an integer >= 0, got {element!r}")
        self.element = element


class InvalidBits(NaturalSetError, ValueError):
    """Raised when a raw bit pattern is negative or not an integer."""

    def __init__(self, bits: Any) -> None:
        super().__init__(f"bits must be an integer >= 0, got {bits!r}")
        self.bits = bits


class UnsupportedCapability:
    """The result of asking a collection for an operation it does not support.

    Instances are returned rather than raised, and are always falsy.

    """

    __slots__ = "capability", "owner"

    def __init__(self, capability: str, owner: str) -> None:
        self.capability = capability
        self.owner = owner

    def __bool__(self) -> bool:
        return False

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, UnsupportedCapability):
            return NotImplemented
        return (self.capability, self.owner) == (other.capability, other.owner)

    def __hash__(self) -> int:
        return hash((self.capability, self.owner))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.capability!r}, {self.owner!r})"
