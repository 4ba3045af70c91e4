from collections.abc import MutableSequence
from heapq import heapify, heappop
from operator import lt

import numpy as np

from ..SortingAlgorithm import Less, SortingAlgorithm


class UnsupportedOrderingError(ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"{name} only supports the natural ordering of the elements")


def less_to_key(less: Less):
    "Like functools.cmp_to_key, but from a less-than predicate, and the wrapped object stays reachable as `.obj`."

    class K:
        __slots__ = ["obj"]

        def __init__(self, obj):
            self.obj = obj

        def __lt__(self, other):
            return less(self.obj, other.obj)

        __hash__ = None

    return K


def timsort(arr: MutableSequence, less: Less = lt) -> None:
    if less is lt:
        arr.sort()
    else:
        arr.sort(key=less_to_key(less))


def heapq_sort(arr: MutableSequence, less: Less = lt) -> None:
    if less is lt:
        heap = list(arr)
        heapify(heap)
        arr[:] = [heappop(heap) for _ in range(len(heap))]
    else:
        key = less_to_key(less)
        heap = [key(x) for x in arr]
        heapify(heap)
        arr[:] = [heappop(heap).obj for _ in range(len(heap))]


def _numpy_sort(kind: str):
    def sort(arr: MutableSequence, less: Less = lt) -> None:
        if less is not lt:
            raise UnsupportedOrderingError(f"numpy.sort(kind={kind!r})")
        if len(arr) > 1:
            arr[:] = np.sort(np.asarray(arr), kind=kind).tolist()

    sort.__name__ = f"numpy_{kind}"
    return sort


numpy_quicksort = _numpy_sort("quicksort")
numpy_mergesort = _numpy_sort("mergesort")
numpy_heapsort = _numpy_sort("heapsort")

algorithms = [
    SortingAlgorithm("stdlib_timsort", "list.sort (Timsort)", timsort, stable=True),
    SortingAlgorithm("stdlib_heapq", "heapq.heapify + heapq.heappop (heapsort)", heapq_sort),
    SortingAlgorithm("numpy_quicksort", "numpy.sort (usually introsort)", numpy_quicksort, natural_only=True),
    SortingAlgorithm("numpy_mergesort", "numpy.sort, kind='mergesort' (usually radix sort or Timsort)", numpy_mergesort, stable=True, natural_only=True),
    SortingAlgorithm("numpy_heapsort", "numpy.sort, kind='heapsort'", numpy_heapsort, natural_only=True),
]
