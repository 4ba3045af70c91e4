import random
import unittest
from unittest import mock

from inplace_sorts.sorting_algorithms.impl import merge_sort as merge_sort_module
from inplace_sorts.sorting_algorithms.impl.heap_sort import heapify, pick_child, sift_down, sift_down_byswap
from inplace_sorts.sorting_algorithms.impl.insertion_sort import upper_bound
from inplace_sorts.sorting_algorithms.impl.merge_sort import merge, merge_sort, merge_sort_iterative
from inplace_sorts.sorting_algorithms.impl.quick_sort import (
    bring_median_of_three_to_front,
    hoare_partition,
    lomuto_partition,
    median_of_three,
    split_hoare_median_of_three,
    split_lomuto_median_of_three,
    split_lomuto_simple,
)


def is_max_heap(arr: list) -> bool:
    return all(not arr[(i - 1) // 2] < arr[i] for i in range(1, len(arr)))


class TestMerge(unittest.TestCase):
    def test_merge_adjacent_runs(self):
        arr = [0, 1, 4, 9, 2, 3, 10, 0]
        aux = []
        merge(arr, aux, 1, 4, 7)
        self.assertEqual(arr, [0, 1, 2, 3, 4, 9, 10, 0])
        self.assertEqual(aux, [])

    def test_merge_ties_favor_left_run(self):
        arr = [(1, "a"), (2, "b"), (1, "c"), (2, "d")]
        merge(arr, [], 0, 2, 4, lambda x, y: x[0] < y[0])
        self.assertEqual(arr, [(1, "a"), (1, "c"), (2, "b"), (2, "d")])

    def test_merge_with_empty_run(self):
        arr = [3, 4, 5]
        merge(arr, [], 0, 3, 3)
        self.assertEqual(arr, [3, 4, 5])

    def test_iterative_merges_in_recursive_order(self):
        data = list(range(37))
        random.Random(2).shuffle(data)

        def merges(sort) -> list[tuple[int, int, int]]:
            with mock.patch.object(merge_sort_module, "merge", wraps=merge) as spy:
                sort(list(data))
            return [call.args[2:5] for call in spy.call_args_list]

        recursive = merges(merge_sort)
        self.assertEqual(len(recursive), 36)
        self.assertEqual(merges(merge_sort_iterative), recursive)


class TestHeap(unittest.TestCase):
    def test_pick_child(self):
        arr = [0, 5, 5, 1]
        self.assertEqual(pick_child(arr, 0, 4), 2)
        self.assertEqual(pick_child(arr, 1, 4), 3)
        self.assertEqual(pick_child(arr, 0, 2), 1)
        self.assertEqual(pick_child(arr, 2, 4), -1)

    def test_sift_down_variants_agree(self):
        for sift in (sift_down, sift_down_byswap):
            with self.subTest(sift=sift.__name__):
                arr = [1, 9, 8, 7, 6, 5, 4]
                sift(arr, 0, len(arr))
                self.assertEqual(arr, [9, 7, 8, 1, 6, 5, 4])

    def test_heapify(self):
        r = random.Random(4)
        for n in range(30):
            data = [r.randint(0, 20) for _ in range(n)]
            for sift in (sift_down, sift_down_byswap):
                with self.subTest(n=n, sift=sift.__name__):
                    arr = list(data)
                    heapify(arr, sift=sift)
                    self.assertTrue(is_max_heap(arr))
                    self.assertEqual(sorted(arr), sorted(data))

    def test_heapify_empty_and_single(self):
        for sift in (sift_down, sift_down_byswap):
            with self.subTest(sift=sift.__name__):
                empty = []
                heapify(empty, sift=sift)
                self.assertEqual(empty, [])
                single = [3]
                heapify(single, sift=sift)
                self.assertEqual(single, [3])


class TestPartitions(unittest.TestCase):
    def test_lomuto_places_pivot(self):
        r = random.Random(8)
        for n in range(1, 40):
            arr = [r.randint(0, 9) for _ in range(n)]
            pivot = arr[0]
            p = lomuto_partition(arr, 0, n)
            with self.subTest(n=n):
                self.assertEqual(arr[p], pivot)
                self.assertTrue(all(x < pivot for x in arr[:p]))
                self.assertTrue(all(not x < pivot for x in arr[p + 1 :]))

    def test_lomuto_subrange(self):
        arr = [100, 3, 1, 2, -100]
        p = lomuto_partition(arr, 1, 4)
        self.assertEqual(p, 3)
        self.assertEqual(arr, [100, 2, 1, 3, -100])

    def test_hoare_splits(self):
        r = random.Random(9)
        for n in range(2, 60):
            data = [r.randint(0, 5) for _ in range(n)]
            with self.subTest(n=n):
                arr = list(data)
                j = hoare_partition(arr, 0, n)
                self.assertTrue(0 <= j < n - 1)
                self.assertLessEqual(max(arr[: j + 1]), min(arr[j + 1 :]))
                self.assertEqual(sorted(arr), sorted(data))

    def test_hoare_all_equal_does_not_overrun(self):
        for n in range(2, 20):
            with self.subTest(n=n):
                arr = [7] * n
                j = hoare_partition(arr, 0, n)
                self.assertTrue(0 <= j < n - 1)

    def test_hoare_pivot_is_extreme(self):
        arr = [0, 5, 4, 3, 2, 1]
        self.assertEqual(hoare_partition(arr, 0, 6), 0)
        arr = [9, 5, 4, 3, 2, 1]
        j = hoare_partition(arr, 0, 6)
        self.assertLessEqual(max(arr[: j + 1]), min(arr[j + 1 :]))

    def test_median_of_three(self):
        for a, b, c in ((1, 2, 3), (1, 3, 2), (2, 1, 3), (2, 3, 1), (3, 1, 2), (3, 2, 1), (2, 2, 1), (1, 2, 2)):
            arr = [a, b, c]
            with self.subTest(arr=arr):
                self.assertEqual(arr[median_of_three(arr, 0, 1, 2)], sorted(arr)[1])

    def test_bring_median_of_three_to_front(self):
        arr = [9, 0, 0, 5, 0, 0, 1]
        bring_median_of_three_to_front(arr, 0, len(arr))
        self.assertEqual(arr[0], 5)

    def test_splits_leave_ordered_halves(self):
        r = random.Random(10)
        for split in (split_lomuto_simple, split_lomuto_median_of_three, split_hoare_median_of_three):
            for n in range(2, 40):
                data = [r.randint(0, 6) for _ in range(n)]
                with self.subTest(split=split.__name__, n=n):
                    arr = list(data)
                    left_last, right_first = split(arr, 0, n)
                    self.assertTrue(0 <= left_last <= right_first <= n)
                    self.assertLess(left_last, n)
                    self.assertGreater(right_first, 0)
                    left, right = arr[:left_last], arr[right_first:]
                    middle = arr[left_last:right_first]
                    if left and right:
                        self.assertLessEqual(max(left), min(right))
                    for x in middle:
                        self.assertTrue(all(y <= x for y in left))
                        self.assertTrue(all(x <= y for y in right))
                    self.assertEqual(sorted(arr), sorted(data))

    def test_median_of_three_splits_sort_pairs(self):
        for split in (split_lomuto_median_of_three, split_hoare_median_of_three):
            with self.subTest(split=split.__name__):
                arr = [0, 2, 1, 3]
                self.assertEqual(split(arr, 1, 3), (1, 3))
                self.assertEqual(arr, [0, 1, 2, 3])

    def test_lomuto_split_excludes_pivot(self):
        arr = [3, 1, 4, 1, 5]
        left_last, right_first = split_lomuto_simple(arr, 0, 5)
        self.assertEqual(right_first, left_last + 1)
        self.assertEqual(arr[left_last], 4)

    def test_hoare_split_has_no_gap(self):
        arr = [5, 5, 5, 5, 5, 5]
        left_last, right_first = split_hoare_median_of_three(arr, 0, 6)
        self.assertEqual(left_last, right_first)
        self.assertTrue(0 < left_last < 6)


class TestUpperBound(unittest.TestCase):
    def test_upper_bound(self):
        arr = [1, 2, 2, 2, 5]
        self.assertEqual(upper_bound(arr, 0, 5, 2), 4)
        self.assertEqual(upper_bound(arr, 0, 5, 0), 0)
        self.assertEqual(upper_bound(arr, 0, 5, 9), 5)
        self.assertEqual(upper_bound(arr, 0, 0, 9), 0)


if __name__ == "__main__":
    unittest.main()
