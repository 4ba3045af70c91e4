from collections.abc import MutableSequence
from operator import lt

from ..SortingAlgorithm import Less, SortingAlgorithm


def bubble_sort(arr: MutableSequence, less: Less = lt) -> None:
    again = len(arr) > 1
    while again:
        again = False
        for j in range(len(arr) - 1):
            if less(arr[j + 1], arr[j]):
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                again = True


def bubble_sort_nonadaptive(arr: MutableSequence, less: Less = lt) -> None:
    for i in range(len(arr) - 2, -1, -1):
        for j in range(i + 1):
            if less(arr[j + 1], arr[j]):
                arr[j], arr[j + 1] = arr[j + 1], arr[j]


def bubble_sort_adaptive(arr: MutableSequence, less: Less = lt) -> None:
    # everything at or after `bound` is already in its final place
    bound = len(arr)
    while bound > 1:
        last_swap = 0
        for j in range(1, bound):
            if less(arr[j], arr[j - 1]):
                arr[j - 1], arr[j] = arr[j], arr[j - 1]
                last_swap = j
        bound = last_swap


algorithms = [
    SortingAlgorithm("bubble", "Bubble sort", bubble_sort, slow=True, stable=True),
    SortingAlgorithm("bubble_nonadaptive", "Bubble sort (non-adaptive)", bubble_sort_nonadaptive, slow=True, stable=True),
    SortingAlgorithm("bubble_adaptive", "Bubble sort (fully adaptive)", bubble_sort_adaptive, slow=True, stable=True),
]
