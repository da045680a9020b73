from .cmp_algorithms.impl.hoare_partition import InvalidRangeError, TypeMismatchError, partition
from .sorting_algorithms.impl.hoare_quick_sort import sort
from .sorting_algorithms.impl.iterative_hoare_quick_sort import iterative_sort

__all__ = ["sort", "iterative_sort", "partition", "InvalidRangeError", "TypeMismatchError"]
