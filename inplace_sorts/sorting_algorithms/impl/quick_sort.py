"""Quicksort with Lomuto and Hoare partitioning.

All ranges are half-open, [first, last). Each partition scheme takes its
pivot from arr[first], so a pivot policy runs first and swaps the chosen
element to the front.
"""
from collections.abc import Callable, MutableSequence
from operator import lt

from ..SortingAlgorithm import Less, SortingAlgorithm, midpoint, possibly_unsorted


def lomuto_partition(arr: MutableSequence, first: int, last: int, less: Less = lt) -> int:
    "Partition a nonempty range around arr[first] and return the pivot's final index."
    pivot = arr[first]
    mid = first
    for cur in range(first + 1, last):
        if less(arr[cur], pivot):
            mid += 1
            arr[mid], arr[cur] = arr[cur], arr[mid]
    arr[first], arr[mid] = arr[mid], arr[first]
    return mid


def hoare_partition(arr: MutableSequence, first: int, last: int, less: Less = lt) -> int:
    """Partition a range of at least two elements around the value of arr[first].

    Returns j with first <= j < last - 1 such that nothing in [first, j] is
    greater than anything in [j + 1, last). The pivot itself may end up on
    either side.
    """
    pivot = arr[first]
    i, j = first - 1, last
    while True:
        i += 1
        while less(arr[i], pivot):
            i += 1
        j -= 1
        while less(pivot, arr[j]):
            j -= 1
        if i >= j:
            return j
        arr[i], arr[j] = arr[j], arr[i]


def bring_mid_to_front(arr: MutableSequence, first: int, last: int) -> None:
    mid = midpoint(first, last)
    arr[first], arr[mid] = arr[mid], arr[first]


def median_of_three(arr: MutableSequence, p: int, q: int, r: int, less: Less = lt) -> int:
    def iter_min(x: int, y: int) -> int:
        return y if less(arr[y], arr[x]) else x

    if less(arr[p], arr[q]):
        return iter_min(q, r) if less(arr[p], arr[r]) else p
    return iter_min(p, r) if less(arr[q], arr[r]) else q


def bring_median_of_three_to_front(arr: MutableSequence, first: int, last: int, less: Less = lt) -> None:
    m = median_of_three(arr, first, midpoint(first, last), last - 1, less)
    arr[first], arr[m] = arr[m], arr[first]


def _sort_pair(arr: MutableSequence, first: int, less: Less) -> None:
    if less(arr[first + 1], arr[first]):
        arr[first], arr[first + 1] = arr[first + 1], arr[first]


# A split partitions [first, last), which holds at least two elements, and
# returns (left_last, right_first): the halves still to sort are
# [first, left_last) and [right_first, last).
Split = Callable[[MutableSequence, int, int, Less], tuple[int, int]]


def split_lomuto_simple(arr: MutableSequence, first: int, last: int, less: Less = lt) -> tuple[int, int]:
    bring_mid_to_front(arr, first, last)
    p = lomuto_partition(arr, first, last, less)
    return p, p + 1


def split_lomuto_median_of_three(arr: MutableSequence, first: int, last: int, less: Less = lt) -> tuple[int, int]:
    if last - first == 2:
        _sort_pair(arr, first, less)
        return first, last
    bring_median_of_three_to_front(arr, first, last, less)
    p = lomuto_partition(arr, first, last, less)
    return p, p + 1


def split_hoare_median_of_three(arr: MutableSequence, first: int, last: int, less: Less = lt) -> tuple[int, int]:
    if last - first == 2:
        _sort_pair(arr, first, less)
        return first, last
    bring_median_of_three_to_front(arr, first, last, less)
    j = hoare_partition(arr, first, last, less)
    return j + 1, j + 1


def _quick_sort(arr: MutableSequence, less: Less, split: Split) -> None:
    def impl(first: int, last: int) -> None:
        # smaller half by recursion, larger half by this loop: depth is O(log n)
        while possibly_unsorted(first, last):
            left_last, right_first = split(arr, first, last, less)
            if left_last - first < last - right_first:
                impl(first, left_last)
                first = right_first
            else:
                impl(right_first, last)
                last = left_last

    impl(0, len(arr))


def _quick_sort_iterative(arr: MutableSequence, less: Less, split: Split) -> None:
    intervals = [(0, len(arr))]
    while intervals:
        first, last = intervals.pop()
        if not possibly_unsorted(first, last):
            continue
        left_last, right_first = split(arr, first, last, less)
        intervals.append((right_first, last))
        intervals.append((first, left_last))


def quick_sort_lomuto_simple(arr: MutableSequence, less: Less = lt) -> None:
    "Middle-element pivot, as in K&R 2 p. 87."
    _quick_sort(arr, less, split_lomuto_simple)


def quick_sort_lomuto_simple_iterative(arr: MutableSequence, less: Less = lt) -> None:
    _quick_sort_iterative(arr, less, split_lomuto_simple)


def quick_sort_lomuto(arr: MutableSequence, less: Less = lt) -> None:
    _quick_sort(arr, less, split_lomuto_median_of_three)


def quick_sort_lomuto_iterative(arr: MutableSequence, less: Less = lt) -> None:
    _quick_sort_iterative(arr, less, split_lomuto_median_of_three)


def quick_sort_hoare(arr: MutableSequence, less: Less = lt) -> None:
    _quick_sort(arr, less, split_hoare_median_of_three)


def quick_sort_hoare_iterative(arr: MutableSequence, less: Less = lt) -> None:
    _quick_sort_iterative(arr, less, split_hoare_median_of_three)


algorithms = [
    SortingAlgorithm("quick_lomuto_simple", "Quicksort (Lomuto partitioning, middle-element pivot, recursive)", quick_sort_lomuto_simple),
    SortingAlgorithm("quick_lomuto_simple_iterative", "Quicksort (Lomuto partitioning, middle-element pivot, iterative)", quick_sort_lomuto_simple_iterative),
    SortingAlgorithm("quick_lomuto", "Quicksort (Lomuto partitioning, median-of-three pivot, recursive)", quick_sort_lomuto),
    SortingAlgorithm("quick_lomuto_iterative", "Quicksort (Lomuto partitioning, median-of-three pivot, iterative)", quick_sort_lomuto_iterative),
    SortingAlgorithm("quick_hoare", "Quicksort (Hoare partitioning, median-of-three pivot, recursive)", quick_sort_hoare),
    SortingAlgorithm("quick_hoare_iterative", "Quicksort (Hoare partitioning, median-of-three pivot, iterative)", quick_sort_hoare_iterative),
]
