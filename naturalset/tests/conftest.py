from __future__ import annotations

import random

import pytest

from naturalset import NaturalSet


def random_elements(rng: random.Random, *, size: int, limit: int) -> list[int]:
    return [rng.randrange(limit) for _ in range(size)]


@pytest.fixture(scope="session")  # type: ignore[misc]
def samples() -> list[list[int]]:
    rng = random.Random(42)
    sequences = [[], [0], [1000], [3, 3, 3], list(range(64, 0, -1))]
    sequences.extend(
        random_elements(rng, size=rng.randrange(40), limit=limit)
        for limit in (8, 64, 65, 200, 5000)
        for _ in range(10)
    )
    return sequences


@pytest.fixture(scope="session")  # type: ignore[misc]
def sets(samples: list[list[int]]) -> list[NaturalSet]:
    return [NaturalSet(sample) for sample in samples]


@pytest.fixture(scope="session")  # type: ignore[misc]
def pairs(sets: list[NaturalSet]) -> list[tuple[NaturalSet, NaturalSet]]:
    rng = random.Random(7)
    return [(rng.choice(sets), rng.choice(sets)) for _ in range(200)]


@pytest.fixture(scope="session")  # type: ignore[misc]
def patterns() -> list[int]:
    rng = random.Random(1234)
    return [0, 1, 2**64 - 1, 2**64, 2**1000 + 1] + [
        rng.getrandbits(bits) for bits in (1, 7, 31, 32, 63, 64, 65, 128, 4096)
    ]
