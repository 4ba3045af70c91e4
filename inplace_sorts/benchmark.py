import traceback
from argparse import ArgumentParser
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from operator import lt
from time import perf_counter
from typing import Optional

import numpy as np

from .Config import *
from .sorting_algorithms.sorting_algorithms import get_algorithm, sorting_algorithms
from .sorting_algorithms.SortingAlgorithm import SortingAlgorithm, random_ints

FIXED_INPUTS: tuple[tuple[int, ...], ...] = (
    (111, 333, 222),
    (3, 7, 1, 5, 2, -6, 15, 4, 33, -5),
    (9, 9, 1, 8, 3, 0, 2, 0, 7, 15, 4, 3, 3),
    (2, 1),
    (1, 2),
    (5,),
    (),
)


@dataclass
class BenchmarkResult:
    tag: str
    N: int
    elapsed_ms: float
    ok: bool


def format_list(arr: Sequence, prefix: str = " ") -> str:
    return f"{prefix}[{', '.join(map(str, arr))}]"


def format_if_small(arr: Sequence, prefix: str = " ") -> str:
    return format_list(arr, prefix) if len(arr) <= PRINT_THRESHOLD else ""


def make_inputs(sizes: Iterable[int] = BENCHMARK_SIZES, seed: Optional[int] = None) -> list[list[int]]:
    rng = np.random.default_rng(seed)
    return [list(arr) for arr in FIXED_INPUTS] + [random_ints(N, rng) for N in sizes]


def run_one(arr: Sequence, algorithm: SortingAlgorithm) -> BenchmarkResult:
    "Sort a copy of `arr`, print a one-line report and return it as a result."
    work = list(arr)
    print(f"{algorithm.name}:", end="", flush=True)
    start = perf_counter()
    try:
        algorithm.func(work)
    except Exception:
        elapsed_ms = (perf_counter() - start) * 1000
        print(" FAIL!!!")
        traceback.print_exc()
        return BenchmarkResult(algorithm.tag, len(arr), elapsed_ms, False)
    elapsed_ms = (perf_counter() - start) * 1000

    ok = len(work) == len(arr) and algorithm.validator(work, lt) and Counter(work) == Counter(arr)
    print(f" {int(elapsed_ms)}ms{format_if_small(work)} {'OK.' if ok else 'FAIL!!!'}")
    return BenchmarkResult(algorithm.tag, len(arr), elapsed_ms, ok)


def run_benchmark(
    inputs: Iterable[Sequence],
    algorithms: Sequence[SortingAlgorithm] = sorting_algorithms,
    skip_slowest: bool = False,
) -> list[BenchmarkResult]:
    results = []
    for arr in inputs:
        print(f"{len(arr)}-element list{format_if_small(arr)}.")
        for algorithm in algorithms:
            if skip_slowest and algorithm.slow and len(arr) > SLOW_MAX_N:
                continue
            results.append(run_one(arr, algorithm))
        print()
    return results


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = ArgumentParser(description="Time every sorting algorithm on fixed and random inputs.")
    parser.add_argument("--skip-slowest", action="store_true", help=f"don't run quadratic algorithms on inputs longer than {SLOW_MAX_N}")
    parser.add_argument("--sizes", type=int, nargs="*", default=list(BENCHMARK_SIZES), help="lengths of the random inputs")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random inputs")
    parser.add_argument("--only", nargs="+", metavar="TAG", help="run only these algorithms")
    args = parser.parse_args(argv)

    algorithms = [get_algorithm(tag) for tag in args.only] if args.only else sorting_algorithms
    results = run_benchmark(make_inputs(args.sizes, args.seed), algorithms, args.skip_slowest)
    failed = [result for result in results if not result.ok]
    if failed:
        print(f"{len(failed)} of {len(results)} runs failed.")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
