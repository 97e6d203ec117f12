#!/usr/bin/env python3
"""
Performance Script for the Persistent Red-Black Tree

Tests:
1. Sequential insert throughput
2. Random insert throughput
3. Membership lookups (hits and misses)
4. Random delete throughput
5. In-order traversal
6. Async range iteration

Metrics:
- Operations per second (ops/sec)
- Latency (min, max, mean, median, p95, p99)

Every phase ends with a full invariant check of the tree it produced.
"""

import argparse
import asyncio
import logging
import random
import statistics
import time
from typing import List

from rbtree import RedBlackSet
from rbtree.logging_setup import configure_logging

logger = logging.getLogger(__name__)


class PerformanceTest:
    def __init__(self, count: int, seed: int):
        self.count = count
        self.rng = random.Random(seed)
        self.keys = list(range(count))

    @staticmethod
    def calculate_stats(latencies: List[int]) -> dict:
        """Calculate latency statistics (latencies in nanoseconds)."""
        if not latencies:
            return {}

        sorted_latencies = sorted(latencies)
        return {
            "min_us": min(latencies) / 1_000,
            "max_us": max(latencies) / 1_000,
            "mean_us": statistics.mean(latencies) / 1_000,
            "median_us": statistics.median(latencies) / 1_000,
            "p95_us": sorted_latencies[int(len(sorted_latencies) * 0.95)] / 1_000,
            "p99_us": sorted_latencies[int(len(sorted_latencies) * 0.99)] / 1_000,
        }

    def _report(self, name: str, count: int, elapsed: float, latencies: List[int]) -> dict:
        results = {
            "test": name,
            "count": count,
            "elapsed_sec": elapsed,
            "ops_per_sec": count / elapsed if elapsed > 0 else float("inf"),
            **self.calculate_stats(latencies),
        }
        self.print_results(results)
        return results

    @staticmethod
    def print_results(results: dict) -> None:
        print(f"\n{'='*60}")
        print(results["test"])
        print(f"{'='*60}")
        for key, value in results.items():
            if key == "test":
                continue
            if isinstance(value, float):
                print(f"  {key:>14}: {value:,.3f}")
            else:
                print(f"  {key:>14}: {value}")

    def _timed_inserts(self, name: str, keys: List[int]) -> tuple[RedBlackSet, dict]:
        tree = RedBlackSet()
        latencies = []
        start_time = time.perf_counter_ns()

        for i, key in enumerate(keys):
            op_start = time.perf_counter_ns()
            tree = tree.insert(key)
            latencies.append(time.perf_counter_ns() - op_start)

            if (i + 1) % 10000 == 0:
                logger.info(f"{name}: {i + 1}/{len(keys)} operations")

        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000
        tree.validate()
        return tree, self._report(name, len(keys), elapsed, latencies)

    def test_sequential_insert(self) -> tuple[RedBlackSet, dict]:
        """Ascending keys: the worst case for an unbalanced tree."""
        return self._timed_inserts("Sequential Insert", self.keys)

    def test_random_insert(self) -> tuple[RedBlackSet, dict]:
        keys = list(self.keys)
        self.rng.shuffle(keys)
        return self._timed_inserts("Random Insert", keys)

    def test_lookup(self, tree: RedBlackSet) -> dict:
        """Half hits, half misses."""
        probes = [self.rng.randrange(2 * self.count) for _ in range(self.count)]
        latencies = []
        hits = 0
        start_time = time.perf_counter_ns()

        for key in probes:
            op_start = time.perf_counter_ns()
            if key in tree:
                hits += 1
            latencies.append(time.perf_counter_ns() - op_start)

        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000
        results = self._report("Membership Lookup", len(probes), elapsed, latencies)
        logger.info(f"Lookup hit rate: {hits / len(probes):.2%}")
        return results

    def test_random_delete(self, tree: RedBlackSet) -> dict:
        keys = list(self.keys)
        self.rng.shuffle(keys)
        latencies = []
        start_time = time.perf_counter_ns()

        for i, key in enumerate(keys):
            op_start = time.perf_counter_ns()
            tree = tree.delete(key)
            latencies.append(time.perf_counter_ns() - op_start)

            if (i + 1) % 10000 == 0:
                logger.info(f"Random Delete: {i + 1}/{len(keys)} operations")

        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000
        tree.validate()
        if len(tree) != 0:
            raise RuntimeError(f"Tree not empty after deleting every key: {len(tree)} left")
        return self._report("Random Delete", len(keys), elapsed, latencies)

    def test_traversal(self, tree: RedBlackSet) -> dict:
        start_time = time.perf_counter_ns()
        keys = tree.in_order()
        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000
        if keys != sorted(keys):
            raise RuntimeError("In-order traversal is not sorted")
        return self._report("In-Order Traversal", len(keys), elapsed, [])

    async def test_async_range(self, tree: RedBlackSet) -> dict:
        """Iterate the middle half of the key space asynchronously."""
        start, end = self.count // 4, 3 * self.count // 4
        seen = 0
        start_time = time.perf_counter_ns()
        async for _ in tree.async_iterator(start, end):
            seen += 1
        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000
        return self._report("Async Range Iteration", seen, elapsed, [])


def run(count: int, seed: int) -> List[dict]:
    test = PerformanceTest(count, seed)
    results = []

    sequential, result = test.test_sequential_insert()
    results.append(result)
    logger.info(f"Sequential tree height {sequential.height()}, black-height {sequential.black_height()}")

    tree, result = test.test_random_insert()
    results.append(result)
    results.append(test.test_lookup(tree))
    results.append(test.test_traversal(tree))
    results.append(asyncio.run(test.test_async_range(tree)))
    results.append(test.test_random_delete(tree))

    # The tree built before the deletes is untouched by them.
    tree.validate()
    return results


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark the persistent red-black tree")
    parser.add_argument("--count", type=int, default=50_000, help="number of keys")
    parser.add_argument("--seed", type=int, default=12345, help="random seed")
    parser.add_argument("--log-level", default=None, help="overrides LOG_LEVEL")
    args = parser.parse_args()

    if args.count <= 0:
        parser.error(f"--count must be positive, got {args.count}")

    configure_logging(args.log_level)
    run(args.count, args.seed)


if __name__ == "__main__":
    main()
