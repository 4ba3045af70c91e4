from .sorting_algorithms.sorting_algorithms import get_algorithm, labels, sorting_algorithms
from .sorting_algorithms.SortingAlgorithm import SortingAlgorithm, is_sorted

__all__ = ["SortingAlgorithm", "get_algorithm", "is_sorted", "labels", "sorting_algorithms"]
