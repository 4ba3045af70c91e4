from collections.abc import MutableSequence
from operator import lt

from ..SortingAlgorithm import Less, SortingAlgorithm


def insertion_sort(arr: MutableSequence, less: Less = lt) -> None:
    for i in range(1, len(arr)):
        elem = arr[i]
        j = i
        while j > 0 and less(elem, arr[j - 1]):
            arr[j] = arr[j - 1]
            j -= 1
        arr[j] = elem


def insertion_sort_byswap(arr: MutableSequence, less: Less = lt) -> None:
    for i in range(1, len(arr)):
        j = i
        while j > 0 and less(arr[j], arr[j - 1]):
            arr[j - 1], arr[j] = arr[j], arr[j - 1]
            j -= 1


def upper_bound(arr: MutableSequence, first: int, last: int, key, less: Less = lt) -> int:
    "First index in the sorted range [first, last) whose element is greater than `key`."
    while first < last:
        mid = first + (last - first) // 2
        if less(key, arr[mid]):
            last = mid
        else:
            first = mid + 1
    return first


def binary_insertion_sort(arr: MutableSequence, less: Less = lt) -> None:
    for i in range(1, len(arr)):
        elem = arr[i]
        pos = upper_bound(arr, 0, i, elem, less)
        for j in range(i, pos, -1):
            arr[j] = arr[j - 1]
        arr[pos] = elem


def binary_insertion_sort_rotate(arr: MutableSequence, less: Less = lt) -> None:
    for i in range(1, len(arr)):
        pos = upper_bound(arr, 0, i, arr[i], less)
        if pos != i:
            arr[pos : i + 1] = [arr[i], *arr[pos:i]]


algorithms = [
    SortingAlgorithm("insertion", "Insertion sort", insertion_sort, slow=True, stable=True),
    SortingAlgorithm("insertion_byswap", "Insertion sort (by swap)", insertion_sort_byswap, slow=True, stable=True),
    SortingAlgorithm("binary_insertion", "Binary insertion sort", binary_insertion_sort, slow=True, stable=True),
    SortingAlgorithm("binary_insertion_rotate", "Binary insertion sort (by rotation)", binary_insertion_sort_rotate, slow=True, stable=True),
]
