from collections.abc import MutableSequence
from operator import lt

from ..SortingAlgorithm import Less, SortingAlgorithm, midpoint, possibly_unsorted


def merge(arr: MutableSequence, aux: list, first1: int, first2: int, last2: int, less: Less = lt) -> None:
    "Merge the sorted runs [first1, first2) and [first2, last2) through `aux`."
    i, j = first1, first2
    while i < first2 and j < last2:
        if less(arr[j], arr[i]):
            aux.append(arr[j])
            j += 1
        else:
            aux.append(arr[i])
            i += 1
    aux.extend(arr[i:first2])
    aux.extend(arr[j:last2])
    arr[first1:last2] = aux
    aux.clear()


def merge_sort(arr: MutableSequence, less: Less = lt) -> None:
    aux = []

    def impl(first: int, last: int) -> None:
        if possibly_unsorted(first, last):
            mid = midpoint(first, last)
            impl(first, mid)
            impl(mid, last)
            merge(arr, aux, first, mid, last, less)

    impl(0, len(arr))


def merge_sort_iterative(arr: MutableSequence, less: Less = lt) -> None:
    aux = []
    first, last = 0, len(arr)
    visited = None  # the range merged most recently
    intervals: list[tuple[int, int]] = []

    while first != last or intervals:
        # go left as far as possible
        while first != last:
            intervals.append((first, last))
            last = midpoint(first, last)

        first1, last2 = intervals[-1]
        first2 = midpoint(first1, last2)
        if possibly_unsorted(first2, last2) and visited != (first2, last2):
            first, last = first2, last2
        else:
            if first2 != first1:
                merge(arr, aux, first1, first2, last2, less)
            visited = (first1, last2)
            intervals.pop()


def merge_sort_bottomup(arr: MutableSequence, less: Less = lt) -> None:
    aux = []
    n = len(arr)
    width = 1
    while width < n:
        first1 = 0
        while first1 + width < n:
            first2 = first1 + width
            last2 = min(first2 + width, n)
            merge(arr, aux, first1, first2, last2, less)
            first1 = last2
        width *= 2


algorithms = [
    SortingAlgorithm("merge_topdown", "Mergesort (top-down, recursive)", merge_sort, stable=True),
    SortingAlgorithm("merge_topdown_iterative", "Mergesort (top-down, iterative)", merge_sort_iterative, stable=True),
    SortingAlgorithm("merge_bottomup", "Mergesort (bottom-up, iterative)", merge_sort_bottomup, stable=True),
]
