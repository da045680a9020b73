import pytest

from hoare_sort.cmp_algorithms.cmp_algorithms import cmp_algorithms
from hoare_sort.sorting_algorithms.sorting_algorithms import sorting_algorithms


def test_registries_discover_impl_modules() -> None:
    assert sorted(x.name for x in sorting_algorithms) == ["Hoare quick sort", "iterative Hoare quick sort"]
    assert [x.name for x in cmp_algorithms] == ["Hoare partition"]


@pytest.mark.parametrize("algorithm", [*sorting_algorithms, *cmp_algorithms], ids=lambda x: x.name)
def test_algorithm_passes_own_validator(algorithm) -> None:
    for N in range(algorithm.min_N, 6):
        for val_array in algorithm.generator(N):
            arr = list(val_array)
            assert algorithm.validator(arr, algorithm.func(arr)), (algorithm.name, val_array)


def test_sorting_validator_rejects_copies() -> None:
    algorithm = sorting_algorithms[0]
    assert not algorithm.validator([1, 2], [1, 2])
    arr = [2, 1]
    assert not algorithm.validator(arr, arr)


def test_partition_lower_bound() -> None:
    assert cmp_algorithms[0].lower_bound(5) == 4
    assert cmp_algorithms[0].min_N == 1
