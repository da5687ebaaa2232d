#!/usr/bin/env python3
"""Performance benchmarking suite for row comparisons.

This script times common/different row queries for each pairing method on
synthetic snapshot pairs of varying sizes, to show how the hashing cost
grows with row and column counts.
"""

import argparse
import time
from typing import Any

import numpy as np
import pandas as pd

from rowdiff import Method, Options, array_from_dataframe, get_common_rows, get_different_rows


def generate_snapshots(
    n_rows: int, n_cols: int, change_rate: float = 0.05, seed: int = 42
) -> tuple[list, list]:
    """Generate two arrays where the second is an edited, shuffled copy.

    Parameters
    ----------
    n_rows : int
        Number of data rows
    n_cols : int
        Number of columns
    change_rate : float
        Fraction of rows modified in the second snapshot

    Returns
    -------
    tuple[list, list]
        The old and new snapshot as arrays
    """
    rng = np.random.default_rng(seed)
    data = {"id": [f"ID-{i:08d}" for i in range(n_rows)]}
    for i in range(n_cols - 1):
        data[f"col_{i:03d}"] = rng.integers(0, 1000, n_rows).astype(str)
    old = pd.DataFrame(data)

    new = old.copy()
    changed = rng.random(n_rows) < change_rate
    if n_cols > 1:
        new.loc[changed, "col_000"] = "changed"
    new = new.sample(frac=1, random_state=seed)
    new = new[list(reversed(new.columns))]

    return array_from_dataframe(old), array_from_dataframe(new)


def benchmark_query(array1: list, array2: list, method: Method, query) -> dict[str, Any]:
    """Time a single query.

    Returns
    -------
    dict[str, Any]
        Runtime and result sizes
    """
    start_time = time.perf_counter()
    result = query(array1, array2, Options(method=method))
    runtime = time.perf_counter() - start_time
    return {
        "method": method.value,
        "query": query.__name__,
        "runtime": runtime,
        "rows1": len(result.indices1) - 1,
        "rows2": len(result.indices2) - 1,
    }


def run_benchmark_suite(
    n_rows_list: list[int] = [10_000, 100_000],
    n_cols_list: list[int] = [5, 20],
    methods: list[str] = ["match", "set", "direct"],
    n_trials: int = 3,
) -> list[dict[str, Any]]:
    """Run the benchmark over every size and method.

    Parameters
    ----------
    n_rows_list : list[int]
        Row counts to test
    n_cols_list : list[int]
        Column counts to test
    methods : list[str]
        Methods to benchmark
    n_trials : int
        Number of trials per configuration

    Returns
    -------
    list[dict[str, Any]]
        Detailed benchmark results
    """
    results = []
    total_configs = len(n_rows_list) * len(n_cols_list)
    config_num = 0

    print(f"Running benchmark suite: {total_configs} configurations x {len(methods)} methods x {n_trials} trials")
    print()

    for n_rows in n_rows_list:
        for n_cols in n_cols_list:
            config_num += 1
            print(f"[{config_num}/{total_configs}] Testing {n_rows} rows x {n_cols} cols")
            array1, array2 = generate_snapshots(n_rows, n_cols)

            for trial in range(n_trials):
                for name in methods:
                    method = Method(name)
                    for query in (get_common_rows, get_different_rows):
                        result = benchmark_query(array1, array2, method, query)
                        result.update(
                            {
                                "n_rows": n_rows,
                                "n_cols": n_cols,
                                "trial": trial,
                                "config_id": f"{n_rows}x{n_cols}",
                            }
                        )
                        results.append(result)
                        print(f"  {name} {query.__name__}: {result['runtime']:.3f}s")
            print()

    return results


def analyze_results(results: list[dict[str, Any]]) -> None:
    """Display mean runtimes and throughput per configuration."""
    df = pd.DataFrame(results)

    print("=" * 60)
    print("BENCHMARK RESULTS SUMMARY")
    print("=" * 60)
    print()

    print("MEAN RUNTIME (SECONDS):")
    runtimes = df.pivot_table(
        index=["config_id", "method"], columns="query", values="runtime", aggfunc="mean"
    )
    print(runtimes.round(3))
    print()

    print("THROUGHPUT (ROWS PER SECOND, BOTH SIDES):")
    df["throughput"] = 2 * df["n_rows"] / df["runtime"]
    print(df.groupby(["config_id", "method"])["throughput"].mean().round(0))


def main():
    """Main benchmark runner with command line interface."""
    parser = argparse.ArgumentParser(description="Benchmark rowdiff row comparisons")
    parser.add_argument("--rows", nargs="+", type=int, default=[10_000, 100_000],
                        help="List of row counts to test")
    parser.add_argument("--cols", nargs="+", type=int, default=[5, 20],
                        help="List of column counts to test")
    parser.add_argument("--methods", nargs="+", default=["match", "set", "direct"],
                        choices=[m.value for m in Method],
                        help="Methods to benchmark")
    parser.add_argument("--trials", type=int, default=3,
                        help="Number of trials per configuration")
    parser.add_argument("--save", type=str, help="Save detailed results to CSV file")
    parser.add_argument("--quick", action="store_true",
                        help="Run quick benchmark (fewer configurations)")

    args = parser.parse_args()

    if args.quick:
        results = run_benchmark_suite(
            n_rows_list=[1_000, 10_000],
            n_cols_list=[5],
            methods=args.methods,
            n_trials=1,
        )
    else:
        results = run_benchmark_suite(
            n_rows_list=args.rows,
            n_cols_list=args.cols,
            methods=args.methods,
            n_trials=args.trials,
        )

    analyze_results(results)

    if args.save:
        pd.DataFrame(results).to_csv(args.save, index=False)
        print(f"\nDetailed results saved to {args.save}")


if __name__ == "__main__":
    main()
