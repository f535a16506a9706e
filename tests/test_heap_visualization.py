"""Tests for heap visualization."""

import sys
import os
import unittest

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from binary_heap import BinaryHeap, HeapType, EMPTY_HEAP_TEXT
from heap_visualization import tree_layout, plot_heap, plot_heap_sequence


class TestTreeLayout(unittest.TestCase):

    def test_empty_layout(self):
        self.assertEqual(tree_layout(0).shape, (0, 2))

    def test_negative_size_raises(self):
        with self.assertRaises(ValueError):
            tree_layout(-1)

    def test_levels(self):
        coords = tree_layout(16)
        expected_levels = [0, 1, 1, 2, 2, 2, 2, 3, 3, 3, 3, 3, 3, 3, 3, 4]
        np.testing.assert_array_equal(coords[:, 1], -np.array(expected_levels, dtype=float))

    def test_first_three_slots(self):
        coords = tree_layout(3)
        np.testing.assert_allclose(coords, [[0.5, 0.0], [0.25, -1.0], [0.75, -1.0]])

    def test_children_straddle_parent(self):
        coords = tree_layout(63)
        for i in range(31):
            self.assertLess(coords[2 * i + 1, 0], coords[i, 0])
            self.assertGreater(coords[2 * i + 2, 0], coords[i, 0])

    def test_x_stays_inside_unit_interval(self):
        coords = tree_layout(100)
        self.assertTrue(np.all(coords[:, 0] > 0))
        self.assertTrue(np.all(coords[:, 0] < 1))


class TestPlotHeap(unittest.TestCase):

    def tearDown(self):
        plt.close("all")

    def test_labels_follow_heap_layout(self):
        heap = BinaryHeap([5, 3, 8, 1, 9])
        ax = plot_heap(heap, title="heap")
        labels = [t.get_text() for t in ax.texts]
        self.assertEqual(labels, [str(v) for v in heap.get_heap()])
        self.assertEqual(ax.get_title(), "heap")

    def test_one_edge_per_child(self):
        heap = BinaryHeap(range(10), heap_type=HeapType.MAX)
        ax = plot_heap(heap)
        self.assertEqual(len(ax.lines), heap.size() - 1)

    def test_empty_heap_shows_sentinel(self):
        ax = plot_heap(BinaryHeap())
        self.assertEqual([t.get_text() for t in ax.texts], [EMPTY_HEAP_TEXT])
        self.assertEqual(len(ax.lines), 0)

    def test_uses_given_axes(self):
        fig, ax = plt.subplots()
        self.assertIs(plot_heap(BinaryHeap([1]), ax=ax), ax)

    def test_sequence_has_one_panel_per_heap(self):
        heaps = [BinaryHeap([1, 2]), BinaryHeap([3]), BinaryHeap()]
        fig = plot_heap_sequence(heaps, ["a", "b", "c"])
        self.assertEqual(len(fig.axes), 3)
        self.assertEqual([ax.get_title() for ax in fig.axes], ["a", "b", "c"])

    def test_sequence_title_count_mismatch_raises(self):
        with self.assertRaises(ValueError):
            plot_heap_sequence([BinaryHeap()], ["a", "b"])


if __name__ == "__main__":
    unittest.main()
