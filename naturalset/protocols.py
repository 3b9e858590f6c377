"""Collection protocol classes implemented by natural sets."""

import abc
import functools
from typing import Any, Callable, Iterable, Iterator, Type, TypeVar

from typing_extensions import Protocol

from .errors import UnsupportedCapability

B = TypeVar("B", bound="Buildable")


class Buildable(Protocol):
    """A protocol for collections that can be built from any iterable."""

    __slots__ = ()

    @classmethod
    @abc.abstractmethod
    def from_iterable(cls: Type[B], values: Iterable[Any]) -> B:
        """Construct a collection from `values`."""

    @abc.abstractmethod
    def into(self: B, values: Iterable[Any]) -> B:
        """Return a copy of `self` with `values` collected into it."""


E = TypeVar("E")
A = TypeVar("A")


class Enumerable(Protocol[E]):
    """A protocol for collections that can be counted, searched and folded.

    Positional access is not part of the protocol: :meth:`slice` returns an
    :class:`~naturalset.errors.UnsupportedCapability` unless overridden.

    """

    __slots__ = ()

    @abc.abstractmethod
    def __iter__(self) -> Iterator[E]:
        """Iterate over the elements of `self`."""

    @abc.abstractmethod
    def count(self) -> int:
        """Return the number of elements in `self`."""

    @abc.abstractmethod
    def member(self, value: Any) -> bool:
        """Return whether `value` is an element of `self`."""

    def reduce(self, function: Callable[[A, E], A], initial: A) -> A:
        """Fold `function` over the elements of `self`, starting at `initial`."""
        return functools.reduce(function, self, initial)

    def slice(self) -> UnsupportedCapability:
        """Report that constant time slicing is unavailable."""
        return UnsupportedCapability("slice", type(self).__name__)


class Renderable(Protocol):
    """A protocol for objects with a canonical debugging representation."""

    __slots__ = ()

    @abc.abstractmethod
    def render(self) -> str:
        """Return the canonical string representation of `self`."""

    def __repr__(self) -> str:
        return self.render()
