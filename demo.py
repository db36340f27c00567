"""
AVL Tree Demo: Rotation walkthroughs and height-growth visualizations.

Generates:
- viz/*.png - Individual visualization files
- report.pdf - Comprehensive PDF report
"""

import logging
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.backends.backend_pdf import PdfPages

from avltree import AVLTree, print_tree, render_tree

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)


class RotationCounter(logging.Handler):
    """Counts rotation records emitted by avltree.tree."""

    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.count = 0

    def emit(self, record):
        if record.getMessage().startswith("rotate"):
            self.count += 1


def example_1_rotations():
    """Walk through the four rotation cases on three values."""
    print("=" * 60)
    print("Example 1: The Four Rotation Cases")
    print("=" * 60)

    cases = [
        ("Right-Right (single left rotation)", [1, 2, 3]),
        ("Left-Left (single right rotation)", [3, 2, 1]),
        ("Left-Right (double rotation)", [3, 1, 2]),
        ("Right-Left (double rotation)", [1, 3, 2]),
    ]
    for name, values in cases:
        tree = AVLTree(values)
        print(f"\n{name}: insert {values}")
        print(render_tree(tree))
        print(f"in-order: {tree.in_order()}, root: {tree.root.value}")


def example_2_removal():
    """Remove a value with two children and show the successor splice."""
    print("\n" + "=" * 60)
    print("Example 2: Removal")
    print("=" * 60)

    tree = AVLTree([10, 20, 30, 40, 50])
    print("Before remove(30):")
    print(render_tree(tree))
    tree.remove(30)
    print("\nAfter remove(30):")
    print(render_tree(tree))
    print(f"contains(30) = {tree.contains(30)}, size = {tree.size()}")
    print("Values:")
    print_tree(tree)


def example_3_height_growth():
    """Compare tree height against the AVL bounds for sorted and random input."""
    print("\n" + "=" * 60)
    print("Example 3: Height Growth")
    print("=" * 60)

    sizes = np.unique(np.logspace(0, 4, 40).astype(int))
    sorted_heights = []
    random_heights = []
    for n in sizes:
        sorted_heights.append(AVLTree(range(n)).height())
        random_heights.append(AVLTree(np.random.permutation(n).tolist()).height())

    lower = np.floor(np.log2(sizes))
    upper = 1.44 * np.log2(sizes + 2) - 1.328

    print(f"n = {sizes[-1]}: sorted height = {sorted_heights[-1]}, "
          f"random height = {random_heights[-1]}, bound = {upper[-1]:.2f}")

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.plot(sizes, sorted_heights, "o-", color="steelblue", label="Sorted insertion")
    ax.plot(sizes, random_heights, "s-", color="darkorange", label="Random insertion")
    ax.plot(sizes, lower, "g--", label="Perfect tree: floor(log2 n)")
    ax.plot(sizes, upper, "r--", label="AVL bound: 1.44 log2(n+2) - 1.328")
    ax.set_xscale("log")
    ax.set_xlabel("Number of elements")
    ax.set_ylabel("Tree height")
    ax.set_title("AVL Tree Height vs Size")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_height_growth.png", dpi=150)
    plt.close(fig)

    return fig


def example_4_rotation_cost():
    """Count rotations per insertion and removal."""
    print("\n" + "=" * 60)
    print("Example 4: Rotations per Operation")
    print("=" * 60)

    counter = RotationCounter()
    tree_logger = logging.getLogger("avltree.tree")
    previous_level = tree_logger.level
    tree_logger.addHandler(counter)
    tree_logger.setLevel(logging.DEBUG)
    tree_logger.propagate = False

    n = 2000
    values = np.random.permutation(n).tolist()
    tree: AVLTree[int] = AVLTree()
    insert_counts = []
    for value in values:
        before = counter.count
        tree.add(value)
        insert_counts.append(counter.count - before)

    remove_counts = []
    for value in np.random.permutation(n).tolist():
        before = counter.count
        tree.remove(value)
        remove_counts.append(counter.count - before)

    tree_logger.removeHandler(counter)
    tree_logger.setLevel(previous_level)
    tree_logger.propagate = True

    print(f"Mean rotations per insert: {np.mean(insert_counts):.3f}")
    print(f"Mean rotations per remove: {np.mean(remove_counts):.3f}")
    print(f"Max rotations in one remove: {np.max(remove_counts)}")

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    for ax, counts, title in ((axes[0], insert_counts, "Insertions"),
                              (axes[1], remove_counts, "Removals")):
        bins = np.arange(0, max(counts) + 2) - 0.5
        ax.hist(counts, bins=bins, color="steelblue", edgecolor="black", alpha=0.7)
        ax.set_xlabel("Rotations performed")
        ax.set_ylabel("Operations")
        ax.set_title(f"{title} (n = {n})")
        ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_rotation_cost.png", dpi=150)
    plt.close(fig)

    return fig


def generate_pdf_report(figures_data):
    """Generate comprehensive PDF report."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    pdf_path = VIZ_DIR.parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "AVL Tree", fontsize=36, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Height-Balanced Binary Search Tree", fontsize=24, ha="center")
        fig.text(0.5, 0.2, f"Seed: {SEED}", fontsize=12, ha="center", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        for title, image_name in figures_data:
            page = plt.figure(figsize=(11, 8.5))
            page.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            ax = page.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(plt.imread(VIZ_DIR / image_name))
            ax.axis("off")
            pdf.savefig(page)
            plt.close(page)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 24 + "AVL TREE DEMO" + " " * 21 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    example_1_rotations()
    example_2_removal()
    example_3_height_growth()
    example_4_rotation_cost()

    generate_pdf_report([
        ("Example 3: Height Growth", "03_height_growth.png"),
        ("Example 4: Rotation Cost", "04_rotation_cost.png"),
    ])

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()
