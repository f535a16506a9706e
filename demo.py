"""
Linked Binary Heap Demo -- Scenario walkthrough, extraction ordering on random
data, MIN vs MAX layouts, and an add/remove-root timing benchmark.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from binary_heap import BinaryHeap, HeapType
from heap_visualization import plot_heap, plot_heap_sequence

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "green": "#27ae60",
    "dark": "#2c3e50",
}

BENCHMARK_SIZES = [250, 500, 1000, 2000, 4000, 8000]
BENCHMARK_REPEATS = 3


# ---------------------------------------------------------------------------
# Example 1: Scenario Walkthrough
# ---------------------------------------------------------------------------
def example_1_scenarios():
    """Insert, peek and drain small heaps, drawing each intermediate tree."""
    print("=" * 60)
    print("Example 1: Scenario Walkthrough")
    print("=" * 60)

    heap = BinaryHeap([5, 3, 8, 1, 9])
    print(f"\n  MIN heap from [5, 3, 8, 1, 9]: {heap}")
    print(f"    Root: {heap.get_root_value()}")
    assert heap.get_root_value() == 1

    snapshots = [heap.copy()]
    titles = ["After inserts"]
    drained = []
    while heap:
        drained.append(heap.remove_root())
        snapshots.append(heap.copy())
        titles.append(f"After removing {drained[-1]}")
    print(f"    Extraction order: {drained}")
    print(f"    Root after draining: {heap.get_root_value()}")
    print(f"    Rendering: {heap}")
    assert drained == [1, 3, 5, 8, 9]
    assert heap.get_root_value() is None

    max_heap = BinaryHeap([4, 4, 2], heap_type=HeapType.MAX)
    first = max_heap.remove_root()
    print(f"\n  MAX heap from [4, 4, 2]: removed {first}, root now {max_heap.get_root_value()}")
    assert first == 4 and max_heap.get_root_value() == 4

    fig = plot_heap_sequence(snapshots, titles)
    fig.suptitle("MIN heap: remove_root until empty", fontsize=12, fontweight="bold")
    fig.savefig(VIZ_DIR / "01_scenarios.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("\n  Saved: viz/01_scenarios.png")


# ---------------------------------------------------------------------------
# Example 2: Extraction Ordering on Random Data
# ---------------------------------------------------------------------------
def example_2_extraction_ordering():
    """Drain heaps built from random integers and compare with sorted()."""
    print("\n" + "=" * 60)
    print("Example 2: Extraction Ordering on Random Data")
    print("=" * 60)

    sizes = [1, 2, 7, 8, 15, 16, 100, 500]
    for heap_type in (HeapType.MIN, HeapType.MAX):
        for n in sizes:
            values = np.random.randint(-1000, 1000, size=n).tolist()
            heap = BinaryHeap(values, heap_type=heap_type)
            assert heap.validate()
            drained = list(heap)
            expected = sorted(values, reverse=heap_type is HeapType.MAX)
            assert drained == expected, f"{heap_type.name} n={n} out of order"
        print(f"  {heap_type.name}: sizes {sizes} all drain in sorted order")

    values = np.random.randint(0, 100, size=12).tolist()
    min_heap = BinaryHeap(values, heap_type=HeapType.MIN)
    max_heap = BinaryHeap(values, heap_type=HeapType.MAX)
    print(f"\n  Input:    {values}")
    print(f"  MIN heap: {min_heap}")
    print(f"  MAX heap: {max_heap}")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    plot_heap(min_heap, ax=axes[0], title="MIN heap")
    plot_heap(max_heap, ax=axes[1], title="MAX heap")
    fig.suptitle(f"Same input, both heap types: {values}", fontsize=10)
    fig.savefig(VIZ_DIR / "02_min_vs_max.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("\n  Saved: viz/02_min_vs_max.png")


# ---------------------------------------------------------------------------
# Example 3: Timing Benchmark
# ---------------------------------------------------------------------------
def example_3_timing_benchmark():
    """Time n adds and n remove_root calls against an n log n reference."""
    print("\n" + "=" * 60)
    print("Example 3: Timing Benchmark")
    print("=" * 60)

    add_times = []
    remove_times = []
    for n in BENCHMARK_SIZES:
        add_runs, remove_runs = [], []
        for _ in range(BENCHMARK_REPEATS):
            values = np.random.rand(n).tolist()
            heap = BinaryHeap()
            start = time.perf_counter()
            for v in values:
                heap.add(v)
            add_runs.append(time.perf_counter() - start)

            start = time.perf_counter()
            while heap:
                heap.remove_root()
            remove_runs.append(time.perf_counter() - start)
        add_times.append(np.median(add_runs))
        remove_times.append(np.median(remove_runs))
        print(f"  n={n:>5}: add {add_times[-1] * 1e3:8.2f} ms, "
              f"remove_root {remove_times[-1] * 1e3:8.2f} ms")

    sizes = np.array(BENCHMARK_SIZES, dtype=float)
    reference = sizes * np.log2(sizes)
    reference *= remove_times[-1] / reference[-1]

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    axes[0].plot(sizes, np.array(add_times) * 1e3, "o-", color=COLORS["blue"], label="add")
    axes[0].plot(sizes, np.array(remove_times) * 1e3, "o-", color=COLORS["red"], label="remove_root")
    axes[0].plot(sizes, reference * 1e3, "--", color=COLORS["dark"], label="n log n (scaled)")
    axes[0].set_xlabel("n")
    axes[0].set_ylabel("Total time (ms)")
    axes[0].set_title("Total time for n operations", fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    per_op = np.array(remove_times) / sizes * 1e6
    axes[1].plot(np.log2(sizes), per_op, "o-", color=COLORS["green"])
    axes[1].set_xlabel("log2(n)")
    axes[1].set_ylabel("remove_root time per call (us)")
    axes[1].set_title("Per-call cost grows with tree depth", fontsize=10, fontweight="bold")
    axes[1].grid(True, alpha=0.3)

    fig.savefig(VIZ_DIR / "03_timing_benchmark.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("\n  Saved: viz/03_timing_benchmark.png")


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    print("\n" + "=" * 60)
    print("Generating PDF report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))
    titles = {
        "01_scenarios.png": "Example 1: Scenario Walkthrough",
        "02_min_vs_max.png": "Example 2: Extraction Ordering, MIN vs MAX",
        "03_timing_benchmark.png": "Example 3: Timing Benchmark",
    }

    with PdfPages(str(report_path)) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "Linked Binary Heap", ha="center", fontsize=24, fontweight="bold")
        fig.text(0.5, 0.5, "Complete-tree heap on linked nodes with relinking heap-up / heap-down",
                 ha="center", fontsize=12)
        fig.text(0.5, 0.42, f"Seed: {SEED}", ha="center", fontsize=10)
        pdf.savefig(fig)
        plt.close(fig)

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Linked Binary Heap Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_scenarios()
    example_2_extraction_ordering()
    example_3_timing_benchmark()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
