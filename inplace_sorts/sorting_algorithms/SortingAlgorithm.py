from collections.abc import Callable, Generator, MutableSequence, Sequence
from operator import lt
from typing import Any, NamedTuple, TypeVar

import numpy as np

from ..Config import INT_MAX, INT_MIN

T = TypeVar("T")
Less = Callable[[Any, Any], bool]
SortFunc = Callable[..., None]


def possibly_unsorted(first: int, last: int) -> bool:
    return last - first >= 2


def midpoint(first: int, last: int) -> int:
    return first + (last - first) // 2


def is_sorted(arr: Sequence[T], less: Less = lt) -> bool:
    return not any(less(arr[i + 1], arr[i]) for i in range(len(arr) - 1))


def random_ints(N: int, rng: np.random.Generator) -> list[int]:
    "Uniformly distributed 32-bit signed integers, as plain Python ints."
    return rng.integers(INT_MIN, INT_MAX, size=N, endpoint=True).tolist()


def _sampler(N: int, rng: np.random.Generator) -> Generator[list[int], None, None]:
    while True:
        yield rng.permutation(N).tolist()


class SortingAlgorithm(NamedTuple):
    tag: str
    name: str
    func: SortFunc
    slow: bool = False
    stable: bool = False
    natural_only: bool = False
    sampler: Callable[[int, np.random.Generator], Generator[list[int], None, None]] = _sampler
    validator: Callable[[MutableSequence, Less], bool] = is_sorted

    def __call__(self, arr: MutableSequence, less: Less = lt) -> None:
        self.func(arr, less)
