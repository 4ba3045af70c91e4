from itertools import islice, product
from math import factorial, log2, nan
from multiprocessing import Pool
from operator import lt
from time import perf_counter

import numpy as np
import pandas as pd
from tqdm import tqdm

from .Config import *
from .sorting_algorithms.sorting_algorithms import sorting_algorithms
from .sorting_algorithms.SortingAlgorithm import SortingAlgorithm

COLUMNS = ("name", "N", "lower bound", "best", "worst", "avg", "ratio", "avg ms")


class InvalidSortingAlgorithmError(Exception):
    def __init__(self, name: str, N: int) -> None:
        super().__init__(f"Invalid sorting algorithm: `{name}` left a {N}-element input unsorted")


def countable_algorithms() -> list[SortingAlgorithm]:
    return [algorithm for algorithm in sorting_algorithms if not algorithm.natural_only]


def get_avg_operation_cnt(algorithm: SortingAlgorithm, N: int, samples: int = STATISTICS_SAMPLES) -> tuple[int, int, float, float]:
    "Best, worst and average comparison counts, and the average time in ms, over random permutations of range(N)."

    def less(x: int, y: int) -> bool:
        nonlocal operation_cnt
        operation_cnt += 1
        return x < y

    best = float("inf")
    worst = 0
    cnt_sum = 0
    elapsed_sum = 0.0
    rng = np.random.default_rng(SAMPLE_SEED)
    for arr in islice(algorithm.sampler(N, rng), samples):
        operation_cnt = 0
        start = perf_counter()
        algorithm.func(arr, less)
        elapsed_sum += perf_counter() - start
        if not algorithm.validator(arr, lt):
            raise InvalidSortingAlgorithmError(algorithm.name, N)
        cnt_sum += operation_cnt
        best = min(best, operation_cnt)
        worst = max(worst, operation_cnt)

    return best, worst, cnt_sum / samples, elapsed_sum * 1000 / samples


def _work(args: tuple[int, int]) -> str:
    algorithm_idx, N = args
    algorithm = countable_algorithms()[algorithm_idx]
    best, worst, avg, avg_ms = get_avg_operation_cnt(algorithm, N)
    lower_bound = log2(factorial(N))
    ratio = nan if lower_bound == 0 else avg / lower_bound
    # names contain commas
    return ",".join(map(str, (f'"{algorithm.name}"', N, lower_bound, best, worst, avg, ratio, avg_ms)))


def generate_statistics(Ns=STATISTICS_NS) -> None:
    tasks = list(product(range(len(countable_algorithms())), Ns))
    RESULT_DIR.parent.mkdir(parents=True, exist_ok=True)
    with Pool() as pool, open(RESULT_DIR, "w") as f:
        f.write(",".join(COLUMNS) + "\n")
        for result in tqdm(pool.imap_unordered(_work, tasks), total=len(tasks)):
            f.write(result + "\n")
            f.flush()


def sort_result() -> None:
    df = pd.read_csv(RESULT_DIR)
    df = df.sort_values(["name", "N"])
    df.to_csv(RESULT_DIR, index=False)
    tags = {algorithm.name: algorithm.tag for algorithm in sorting_algorithms}
    for name, group in df.groupby("name"):
        group.drop(columns=["name"]).to_csv(RESULT_DIR.parent / f"{tags[name]}.csv", index=False)


def main() -> None:
    generate_statistics()
    sort_result()


if __name__ == "__main__":
    main()
