import logging
from collections.abc import Callable, Iterable
from itertools import product
from math import nan
from multiprocessing import Pool
from pathlib import Path
from random import Random
from time import thread_time
from typing import Optional, Union

import numpy as np
import pandas as pd
from tqdm import tqdm

from .cmp_algorithms.cmp_algorithms import cmp_algorithms
from .cmp_algorithms.CmpAlgorithm import CmpAlgorithm
from .Config import *
from .sorting_algorithms.sorting_algorithms import sorting_algorithms
from .sorting_algorithms.SortingAlgorithm import SortingAlgorithm

logger = logging.getLogger(__name__)

Algorithm = Union[SortingAlgorithm, CmpAlgorithm]
algorithms: list[Algorithm] = [*sorting_algorithms, *cmp_algorithms]


class InvalidAlgorithmError(Exception):
    def __init__(self, name: str, N: int) -> None:
        super().__init__(f"Invalid result from `{name}` with {N} elements")


class CountedElement:
    "Element wrapper that counts every comparison made through it."
    __slots__ = ["val", "cnt"]

    def __init__(self, val: int, cnt: list[int]) -> None:
        self.val = val
        self.cnt = cnt

    def __lt__(self, other: "CountedElement") -> bool:
        self.cnt[0] += 1
        return self.val < other.val

    def __le__(self, other: "CountedElement") -> bool:
        self.cnt[0] += 1
        return self.val <= other.val

    def __gt__(self, other: "CountedElement") -> bool:
        self.cnt[0] += 1
        return self.val > other.val

    def __ge__(self, other: "CountedElement") -> bool:
        self.cnt[0] += 1
        return self.val >= other.val


class CountingList(list):
    def __init__(self, iterable: Iterable = ()) -> None:
        super().__init__(iterable)
        self.writes = 0

    def __setitem__(self, key, value) -> None:
        self.writes += 1
        super().__setitem__(key, value)


def count_operations(algorithm: Algorithm, val_array: Iterable[int]) -> tuple[int, int]:
    cnt = [0]
    arr = CountingList(CountedElement(x, cnt) for x in val_array)
    ret = algorithm.func(arr)
    operation_cnt = (cnt[0], arr.writes // 2)
    if not algorithm.validator(arr, ret):
        raise InvalidAlgorithmError(algorithm.name, len(arr))
    return operation_cnt


def get_operation_cnts(algorithm: Algorithm, N: int) -> np.ndarray:
    """Comparisons and swaps of ``algorithm`` over inputs of size ``N``.

    Every permutation is run when ``N <= algorithm.max_N``; otherwise seeded
    random permutations are run until ``MAX_SAMPLE_TIME_MS`` of CPU time is
    spent. Returns an integer array of shape ``(runs, 2)``.
    """
    do_sample = N > algorithm.max_N
    if do_sample:
        start_time = thread_time()
    r = Random(SAMPLE_SEED)
    operation_cnts = []
    for val_array in algorithm.sampler(N, r) if do_sample else algorithm.generator(N):
        operation_cnts.append(count_operations(algorithm, val_array))
        if do_sample and int((thread_time() - start_time) * 1000) > MAX_SAMPLE_TIME_MS:
            break
    return np.array(operation_cnts, dtype=np.int64).reshape(-1, 2)


def _work(args: tuple[int, int]) -> str:
    algorithm_idx, N = args
    algorithm = algorithms[algorithm_idx]
    cnts = get_operation_cnts(algorithm, N)
    cmps, swaps = cnts[:, 0], cnts[:, 1]
    lower_bound = algorithm.lower_bound(N)
    ratio = nan if lower_bound <= 0 else cmps.mean() / lower_bound
    return ",".join(map(str, (algorithm.name, N, lower_bound, cmps.min(), cmps.max(), cmps.mean(), swaps.mean(), ratio)))


def generate_statistics(Ns: Optional[list[int]] = None, result_dir: Path = RESULT_DIR, progress: Callable = tqdm) -> None:
    Ns = STATISTICS_NS if Ns is None else Ns
    tasks = [(i, N) for i, N in product(range(len(algorithms)), Ns) if N >= algorithms[i].min_N]
    logger.info("init: %d tasks over %d algorithms", len(tasks), len(algorithms))
    result_dir.parent.mkdir(parents=True, exist_ok=True)
    with Pool() as pool, open(result_dir, "w") as f:
        f.write("name,N,lower bound,best cmp,worst cmp,avg cmp,avg swap,ratio\n")
        for result in progress(pool.imap_unordered(_work, tasks), total=len(tasks)):
            f.write(result + "\n")
            f.flush()
    logger.info("fin:  results written to %s", result_dir)


def sort_result(result_dir: Path = RESULT_DIR) -> pd.DataFrame:
    df = pd.read_csv(result_dir)
    df = df.sort_values(["name", "N"])
    df.to_csv(result_dir, index=False)
    for name, group in df.groupby("name"):
        group.drop(columns=["name"]).to_csv(result_dir.parent / f"{name}.csv", index=False)
    return df


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    generate_statistics()
    sort_result()
