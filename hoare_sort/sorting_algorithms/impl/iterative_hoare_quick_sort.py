from collections.abc import MutableSequence
from typing import Optional

from ...cmp_algorithms.impl.hoare_partition import partition
from ..SortingAlgorithm import SortingAlgorithm
from .hoare_quick_sort import Array, resolve_range


def iterative_hoare_quick_sort(arr: MutableSequence, left: int, right: int) -> None:
    stack = [(left, right)]
    while stack:
        lo, hi = stack.pop()
        if lo >= hi:
            continue
        p = partition(arr, lo, hi)
        # smaller side on top: the stack holds at most log2(n) pending ranges
        if p - lo < hi - p:
            stack.append((p + 1, hi))
            stack.append((lo, p - 1))
        else:
            stack.append((lo, p - 1))
            stack.append((p + 1, hi))


def iterative_sort(arr: Array, left: Optional[int] = None, right: Optional[int] = None) -> Array:
    "Same contract as ``sort`` without recursion."
    iterative_hoare_quick_sort(arr, *resolve_range(arr, left, right))
    return arr


algorithm = SortingAlgorithm("iterative Hoare quick sort", iterative_sort, 8)
