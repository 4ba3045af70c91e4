from collections.abc import MutableSequence
from operator import lt

from ..SortingAlgorithm import Less, SortingAlgorithm


def gnome_sort(arr: MutableSequence, less: Less = lt) -> None:
    i = 1
    while i < len(arr):
        if i == 0 or not less(arr[i], arr[i - 1]):
            i += 1
        else:
            arr[i - 1], arr[i] = arr[i], arr[i - 1]
            i -= 1


algorithms = [SortingAlgorithm("gnome", "Gnome sort", gnome_sort, slow=True, stable=True)]
