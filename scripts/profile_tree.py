"""
Profiling script for PyBST rebuild performance.

Compares inserting values one at a time (one rebuild per value) with a single
batch insertion (one rebuild in total), and profiles lookups and removals.
"""

import argparse
import cProfile
import io
import logging
import pstats
import time
from pstats import SortKey

import numpy as np

from pybst import BinarySearchTree

logger = logging.getLogger(__name__)


def create_values(n_values, seed=42):
    """Create n distinct random integers."""
    rng = np.random.default_rng(seed)
    return rng.choice(n_values * 10, size=n_values, replace=False).tolist()


def profile_single_adds(n_values):
    """Insert values one at a time."""
    tree = BinarySearchTree()
    for v in create_values(n_values):
        tree.add(v)
    return tree


def profile_batch_add(n_values):
    """Insert all values with one rebuild."""
    tree = BinarySearchTree()
    tree.add_all(create_values(n_values))
    return tree


def profile_locate(n_values):
    """Look up every stored value."""
    values = create_values(n_values)
    tree = BinarySearchTree(values=values)
    for v in values:
        tree.locate(v)
    return tree


def profile_removals(n_values):
    """Remove half of the values one at a time, then the rest as a batch."""
    values = create_values(n_values)
    tree = BinarySearchTree(values=values)
    half = len(values) // 2
    for v in values[:half]:
        tree.remove(v)
    tree.remove_all(values[half:])
    return tree


def benchmark_scenario(name, func, n_values):
    """Benchmark a scenario and print timing."""
    print(f"\n{'='*60}")
    print(f"Profiling: {name}")
    print('='*60)

    profiler = cProfile.Profile()

    start_time = time.time()
    profiler.enable()
    tree = func(n_values)
    profiler.disable()
    elapsed = time.time() - start_time

    print(f"\nTotal time: {elapsed:.3f}s")
    logger.info("%s: %d values, height %d", name, tree.size(), tree.height())

    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats(SortKey.CUMULATIVE)
    ps.print_stats(20)

    print("\nTop 20 functions by cumulative time:")
    print(s.getvalue())

    return profiler


def parse_args():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--single", type=int, default=500,
                        help="values for the one-at-a-time scenarios")
    parser.add_argument("--batch", type=int, default=50_000,
                        help="values for the batch and lookup scenarios")
    parser.add_argument("--dump", action="store_true",
                        help="write .prof files for each scenario")
    parser.add_argument("--verbose", action="store_true",
                        help="log every rebuild")
    return parser.parse_args()


def main():
    """Run all profiling scenarios."""
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    print("PyBST Performance Profiling")
    print("=" * 60)

    scenarios = [
        (f"Single adds ({args.single} values)", profile_single_adds, args.single),
        (f"Batch add ({args.batch} values)", profile_batch_add, args.batch),
        (f"Locate ({args.batch} values)", profile_locate, args.batch),
        (f"Removals ({args.single} values)", profile_removals, args.single),
    ]

    profilers = {}
    for name, func, n_values in scenarios:
        profilers[name] = benchmark_scenario(name, func, n_values)

    if args.dump:
        for name, profiler in profilers.items():
            filename = f"profile_{name.lower().replace(' ', '_').replace('(', '').replace(')', '')}.prof"
            profiler.dump_stats(filename)
            print(f"Saved: {filename}")

        print("\nTo view detailed profile, use:")
        print("  python -m pstats <profile_file>")


if __name__ == "__main__":
    main()
