"""
Heap Visualization -- draw a heap snapshot as a binary tree.

Works only from ``BinaryHeap.get_heap()``: the array-heap numbering is enough
to recover every node's level and horizontal slot, so the drawing never needs
to touch the linked nodes themselves.
"""

from typing import List, Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from binary_heap import BinaryHeap, EMPTY_HEAP_TEXT

NODE_COLOR = "#3498db"
ROOT_COLOR = "#e74c3c"
EDGE_COLOR = "#2c3e50"


def tree_layout(size: int) -> np.ndarray:
    """
    Coordinates for the first ``size`` slots of a complete binary tree.

    Returns:
        Array of shape (size, 2). Column 0 is x in (0, 1), centred inside the
        node's share of its level; column 1 is y = -level.
    """
    if size < 0:
        raise ValueError("size must be a non-negative integer")
    index = np.arange(size)
    level = np.floor(np.log2(index + 1)).astype(int)
    # Guard against log2 rounding just below an exact power of two.
    level = np.where(2 ** (level + 1) - 1 <= index, level + 1, level)
    slot = index - (2 ** level - 1)
    x = (slot + 0.5) / 2.0 ** level
    y = -level.astype(float)
    return np.column_stack([x, y])


def plot_heap(heap: BinaryHeap, ax: Optional[Axes] = None, title: Optional[str] = None) -> Axes:
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 5))

    values = heap.get_heap()
    ax.set_axis_off()
    if title is not None:
        ax.set_title(title, fontsize=10, fontweight="bold")

    if not values:
        ax.text(0.5, 0.5, EMPTY_HEAP_TEXT, ha="center", va="center",
                fontsize=10, transform=ax.transAxes)
        return ax

    coords = tree_layout(len(values))
    for i in range(len(values)):
        for child in (2 * i + 1, 2 * i + 2):
            if child < len(values):
                ax.plot([coords[i, 0], coords[child, 0]],
                        [coords[i, 1], coords[child, 1]],
                        color=EDGE_COLOR, linewidth=1, zorder=1)

    colors = [ROOT_COLOR] + [NODE_COLOR] * (len(values) - 1)
    ax.scatter(coords[:, 0], coords[:, 1], s=600, c=colors, edgecolors="white", zorder=2)
    for (x, y), value in zip(coords, values):
        ax.text(x, y, str(value), ha="center", va="center", fontsize=9,
                color="white", fontweight="bold", zorder=3)

    depth = int(-coords[:, 1].min())
    ax.set_xlim(0, 1)
    ax.set_ylim(-depth - 0.5, 0.5)
    return ax


def plot_heap_sequence(snapshots: Sequence[BinaryHeap],
                       titles: Optional[Sequence[str]] = None) -> Figure:
    """One panel per heap, left to right."""
    if titles is not None and len(titles) != len(snapshots):
        raise ValueError("titles must match the number of snapshots")
    n = max(len(snapshots), 1)
    fig, axes = plt.subplots(1, n, figsize=(4 * n, 4), squeeze=False)
    panel_titles: List[Optional[str]] = list(titles) if titles is not None else [None] * n
    for ax, heap, title in zip(axes[0], snapshots, panel_titles):
        plot_heap(heap, ax=ax, title=title)
    if not snapshots:
        axes[0, 0].set_axis_off()
    fig.tight_layout()
    return fig
