from collections.abc import Callable, Generator, Iterable, MutableSequence, Sequence
from itertools import permutations
from random import Random
from typing import Any, NamedTuple, Optional


def _sampler(N: int, rng: Random) -> Generator[list[int], None, None]:
    arr = list(range(N))
    while True:
        rng.shuffle(arr)
        yield arr


class CmpAlgorithm(NamedTuple):
    name: str
    func: Callable[[MutableSequence], Optional[Any]]
    max_N: int
    lower_bound: Callable[[int], float]
    validator: Callable[[Sequence, Optional[Any]], bool]
    generator: Callable[[int], Iterable[Sequence[int]]] = lambda n: permutations(range(n))
    sampler: Callable[[int, Random], Generator[Sequence[int], None, None]] = _sampler
    min_N: int = 1
