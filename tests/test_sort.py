from collections import Counter
from random import Random

import numpy as np
import pytest

from hoare_sort import InvalidRangeError, TypeMismatchError, iterative_sort, sort

drivers = pytest.mark.parametrize("driver", [sort, iterative_sort], ids=["recursive", "iterative"])


@drivers
def test_sort_demo_array(driver) -> None:
    arr = [40, 10, 100, 90, 20, 60, 30]
    assert driver(arr) is arr
    assert arr == [10, 20, 30, 40, 60, 90, 100]


@drivers
def test_sort_empty_and_single(driver) -> None:
    assert driver([]) == []
    assert driver([7]) == [7]


@drivers
def test_sort_duplicates(driver) -> None:
    assert driver([5, 5, 5, 5]) == [5, 5, 5, 5]
    assert driver([2, 1, 2, 1, 2]) == [1, 1, 2, 2, 2]


@drivers
def test_sort_reverse_sorted(driver) -> None:
    assert driver([5, 4, 3, 2, 1]) == [1, 2, 3, 4, 5]
    assert driver(list(range(300, 0, -1))) == list(range(1, 301))


@drivers
@pytest.mark.parametrize("seed", range(10))
def test_sort_random(driver, seed: int) -> None:
    r = Random(seed)
    arr = [r.randint(-50, 50) for _ in range(r.randint(0, 200))]
    original = list(arr)
    driver(arr)
    assert all(arr[k] <= arr[k + 1] for k in range(len(arr) - 1))
    assert Counter(arr) == Counter(original)


@drivers
def test_sort_idempotent(driver) -> None:
    arr = driver([3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5])
    once = list(arr)
    assert driver(arr) == once


@drivers
def test_sort_sub_range(driver) -> None:
    arr = [9, 8, 7, 6, 5, 4, 3, 2]
    assert driver(arr, 2, 5) is arr
    assert arr == [9, 8, 4, 5, 6, 7, 3, 2]


@drivers
def test_sort_only_left_bound(driver) -> None:
    assert driver([4, 3, 2, 1], 2) == [4, 3, 1, 2]


@drivers
def test_sort_degenerate_range_is_noop(driver) -> None:
    arr = [3, 1, 2]
    assert driver(arr, 2, 0) == [3, 1, 2]
    assert driver(arr, 1, 1) == [3, 1, 2]


@drivers
def test_sort_other_orderable_elements(driver) -> None:
    assert driver([2.5, -1.0, 0.0, 2.25]) == [-1.0, 0.0, 2.25, 2.5]
    assert driver(["pear", "apple", "fig"]) == ["apple", "fig", "pear"]


@drivers
def test_sort_numpy_array(driver) -> None:
    arr = np.array([40, 10, 100, 90, 20, 60, 30])
    assert driver(arr) is arr
    assert arr.tolist() == [10, 20, 30, 40, 60, 90, 100]


@drivers
@pytest.mark.parametrize("left, right", [(0, 5), (-1, 2), ("a", 2), (0, 1.5)])
def test_sort_invalid_range(driver, left, right) -> None:
    with pytest.raises(InvalidRangeError):
        driver([3, 1, 2], left, right)


@drivers
def test_sort_incomparable_elements(driver) -> None:
    with pytest.raises(TypeMismatchError):
        driver([3, "a", 1])


def test_iterative_sort_beyond_recursion_limit() -> None:
    n = 5_000
    assert iterative_sort(list(range(n, 0, -1))) == list(range(1, n + 1))
    assert iterative_sort(list(range(n))) == list(range(n))


@drivers
def test_sort_nan_does_not_hang(driver) -> None:
    with pytest.raises(TypeMismatchError):
        driver([1.0, float("nan"), float("nan")])
