from collections.abc import MutableSequence
from typing import Optional, TypeVar

from ...cmp_algorithms.impl.hoare_partition import InvalidRangeError, is_index, partition
from ..SortingAlgorithm import SortingAlgorithm

Array = TypeVar("Array", bound=MutableSequence)


def resolve_range(arr: MutableSequence, left: Optional[int], right: Optional[int]) -> tuple[int, int]:
    left = 0 if left is None else left
    right = len(arr) - 1 if right is None else right
    if not (is_index(left) and is_index(right)):
        raise InvalidRangeError(left, right, len(arr))
    return left, right


def hoare_quick_sort(arr: MutableSequence, left: int, right: int) -> None:
    if left < right:
        p = partition(arr, left, right)
        hoare_quick_sort(arr, left, p - 1)
        hoare_quick_sort(arr, p + 1, right)


def sort(arr: Array, left: Optional[int] = None, right: Optional[int] = None) -> Array:
    """Sort ``arr[left:right + 1]`` in place and return ``arr`` itself.

    The bounds are inclusive and default to the whole array. Recursion depth
    grows linearly on already-ordered input; use ``iterative_sort`` for large
    arrays of unknown order.
    """
    hoare_quick_sort(arr, *resolve_range(arr, left, right))
    return arr


algorithm = SortingAlgorithm("Hoare quick sort", sort, 8)
