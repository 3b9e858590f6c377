"""Top-level package for naturalset.

A :class:`~naturalset.NaturalSet` is an immutable set of integers ``>= 0``
stored as a single Python :class:`int` used as a bit vector.

.. warning::
   Memory use is proportional to the largest member, not to the number of
   members. A set holding only ``1_000_000`` needs about 125 kB, so large
   sparse sets are a poor fit.

"""

import importlib.metadata

from naturalset.errors import (  # noqa: F401
    InvalidBits,
    InvalidElement,
    NaturalSetError,
    UnsupportedCapability,
)
from naturalset.naturalset import NaturalSet  # noqa: F401
from naturalset.stream import BitStream  # noqa: F401

__version__ = importlib.metadata.version(__name__)
