from collections.abc import MutableSequence
from operator import lt

from ..SortingAlgorithm import Less, SortingAlgorithm


def pick_child(arr: MutableSequence, parent: int, n: int, less: Less = lt) -> int:
    "The larger child of `parent` in a heap of size `n`, or -1 for a leaf."
    left = 2 * parent + 1
    if left >= n:
        return -1
    right = left + 1
    if right < n and not less(arr[right], arr[left]):
        return right
    return left


def sift_down(arr: MutableSequence, parent: int, n: int, less: Less = lt) -> None:
    elem = arr[parent]
    while (child := pick_child(arr, parent, n, less)) != -1 and less(elem, arr[child]):
        arr[parent] = arr[child]
        parent = child
    arr[parent] = elem


def sift_down_byswap(arr: MutableSequence, parent: int, n: int, less: Less = lt) -> None:
    while (child := pick_child(arr, parent, n, less)) != -1 and less(arr[parent], arr[child]):
        arr[parent], arr[child] = arr[child], arr[parent]
        parent = child


def heapify(arr: MutableSequence, less: Less = lt, sift=sift_down) -> None:
    n = len(arr)
    if n < 2:
        return
    for parent in range(n // 2, -1, -1):
        sift(arr, parent, n, less)


def _heap_sort(arr: MutableSequence, less: Less, sift) -> None:
    n = len(arr)
    if n < 2:
        return
    heapify(arr, less, sift)
    for end in range(n - 1, 0, -1):
        arr[0], arr[end] = arr[end], arr[0]
        sift(arr, 0, end, less)


def heap_sort(arr: MutableSequence, less: Less = lt) -> None:
    _heap_sort(arr, less, sift_down)


def heap_sort_byswap(arr: MutableSequence, less: Less = lt) -> None:
    _heap_sort(arr, less, sift_down_byswap)


algorithms = [
    SortingAlgorithm("heap", "Heapsort", heap_sort),
    SortingAlgorithm("heap_byswap", "Heapsort (by swap)", heap_sort_byswap),
]
