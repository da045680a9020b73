from collections.abc import Callable, Generator, Iterable, MutableSequence, Sequence
from itertools import permutations
from math import factorial, log2
from random import Random
from typing import NamedTuple

from ..cmp_algorithms.CmpAlgorithm import _sampler


def is_sorted(arr: Sequence) -> bool:
    return all(arr[k] <= arr[k + 1] for k in range(len(arr) - 1))


class SortingAlgorithm(NamedTuple):
    name: str
    func: Callable[[MutableSequence], MutableSequence]
    max_N: int
    lower_bound: Callable[[int], float] = lambda n: log2(factorial(n))
    # the driver sorts in place and hands back the very same container
    validator: Callable[[Sequence, MutableSequence], bool] = lambda arr, ret: ret is arr and is_sorted(arr)
    generator: Callable[[int], Iterable[Sequence[int]]] = lambda n: permutations(range(n))
    sampler: Callable[[int, Random], Generator[Sequence[int], None, None]] = _sampler
    min_N: int = 0
