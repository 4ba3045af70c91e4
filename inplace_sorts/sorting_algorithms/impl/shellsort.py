from collections.abc import MutableSequence
from operator import lt

from ..gaps import GapGenerator, hibbard, quasi_ciura, sedgewick, sedgewick_1982, three_smooth, tokuda
from ..SortingAlgorithm import Less, SortingAlgorithm


def insertion_sort_subsequence(arr: MutableSequence, start: int, last: int, gap: int, less: Less = lt) -> None:
    "Insertion sort of arr[start], arr[start + gap], ... below `last`."
    for right in range(start + gap, last, gap):
        elem = arr[right]
        left = right
        while left - gap >= start and less(elem, arr[left - gap]):
            arr[left] = arr[left - gap]
            left -= gap
        arr[left] = elem


def shellsort(arr: MutableSequence, gaps: GapGenerator, less: Less = lt) -> None:
    n = len(arr)
    for gap in reversed(list(gaps(n))):
        for start in range(gap):
            insertion_sort_subsequence(arr, start, n, gap, less)


def _shellsort_with(gaps: GapGenerator):
    def sort(arr: MutableSequence, less: Less = lt) -> None:
        shellsort(arr, gaps, less)

    sort.__name__ = f"shellsort_{gaps.__name__}"
    sort.__doc__ = f"Shellsort with the {gaps.__name__} gap sequence."
    return sort


shellsort_hibbard = _shellsort_with(hibbard)
shellsort_3smooth = _shellsort_with(three_smooth)
shellsort_sedgewick = _shellsort_with(sedgewick)
shellsort_sedgewick_1982 = _shellsort_with(sedgewick_1982)
shellsort_tokuda = _shellsort_with(tokuda)
shellsort_quasi_ciura = _shellsort_with(quasi_ciura)

algorithms = [
    SortingAlgorithm("shellsort_hibbard", "Shellsort (Hibbard gap sequence)", shellsort_hibbard),
    SortingAlgorithm("shellsort_3smooth", "Shellsort (3-smooth gap sequence)", shellsort_3smooth),
    SortingAlgorithm("shellsort_sedgewick", "Shellsort (Sedgewick gap sequence)", shellsort_sedgewick),
    SortingAlgorithm("shellsort_sedgewick_1982", "Shellsort (Sedgewick 1982 gap sequence)", shellsort_sedgewick_1982),
    SortingAlgorithm("shellsort_tokuda", "Shellsort (Tokuda gap sequence)", shellsort_tokuda),
    SortingAlgorithm("shellsort_quasi_ciura", "Shellsort (Extended Ciura gap sequence)", shellsort_quasi_ciura),
]
