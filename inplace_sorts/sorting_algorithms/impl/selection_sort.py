from collections.abc import MutableSequence
from operator import lt

from ..SortingAlgorithm import Less, SortingAlgorithm


def selection_sort(arr: MutableSequence, less: Less = lt) -> None:
    for i in range(len(arr) - 1):
        k = i
        for j in range(i + 1, len(arr)):
            if less(arr[j], arr[k]):
                k = j
        if k != i:
            arr[k], arr[i] = arr[i], arr[k]


algorithms = [SortingAlgorithm("selection", "Selection sort", selection_sort, slow=True)]
