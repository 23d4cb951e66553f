#!/usr/bin/env python3
"""
Performance profiling script for the natural breaks engines.

Usage: uv run scripts/profile.py A B S T K

Where:
- A: Minimum number of values
- B: Maximum number of values
- S: Number of size points to test
- T: Number of trials per size
- K: Number of classes

Outputs CSV format: N,unique,quadratic_mean,loglinear_mean,quadratic_std,loglinear_std
"""

import sys
import time

import numpy as np

import natural_breaks

ENGINES = {
    "quadratic": natural_breaks.natural_breaks_quadratic,
    "loglinear": natural_breaks.natural_breaks,
}


def generate_test_data(n: int, seed: int) -> np.ndarray:
    """Mixed distribution rounded to 3 decimals, so values repeat like real legend data."""
    rng = np.random.default_rng(seed)
    data = np.concatenate(
        [
            rng.normal(0, 1, n // 3),
            rng.normal(10, 2, n // 3),
            rng.normal(20, 1, n - 2 * (n // 3)),
        ]
    )
    return np.round(data, 3)


def time_engine(name: str, data: np.ndarray, k: int) -> float:
    start = time.perf_counter()
    ENGINES[name](data, k)
    return time.perf_counter() - start


def profile_size(n: int, k: int, trials: int) -> tuple[int, dict]:
    """Profile both engines for a given dataset size."""
    results = {name: [] for name in ENGINES}
    n_unique = 0

    for trial in range(trials):
        data = generate_test_data(n, seed=42 + trial)
        n_unique = max(n_unique, np.unique(data).size)
        for name in ENGINES:
            results[name].append(time_engine(name, data, k))

    stats = {}
    for name, times in results.items():
        stats[f"{name}_mean"] = float(np.mean(times))
        stats[f"{name}_std"] = float(np.std(times))
    return n_unique, stats


def main():
    if len(sys.argv) != 6:
        print("Usage: profile.py A B S T K", file=sys.stderr)
        print("  A: Minimum number of values", file=sys.stderr)
        print("  B: Maximum number of values", file=sys.stderr)
        print("  S: Number of size points to test", file=sys.stderr)
        print("  T: Number of trials per size", file=sys.stderr)
        print("  K: Number of classes", file=sys.stderr)
        sys.exit(1)

    try:
        A, B, S, T, K = (int(arg) for arg in sys.argv[1:])
    except ValueError:
        print("Error: All arguments must be integers", file=sys.stderr)
        sys.exit(1)

    if A <= 0 or B <= A or S <= 0 or T <= 0 or K <= 0:
        print("Error: Invalid argument values", file=sys.stderr)
        sys.exit(1)

    # compile the kernels before timing anything
    warmup = generate_test_data(max(A, K + 1), seed=0)
    for name in ENGINES:
        time_engine(name, warmup, K)

    sizes = np.unique(np.round(np.exp(np.linspace(np.log(A), np.log(B), S))).astype(int))

    print("N,unique,quadratic_mean,loglinear_mean,quadratic_std,loglinear_std")
    for n in sizes:
        n_unique, stats = profile_size(n, K, T)
        print(
            f"{n},{n_unique},{stats['quadratic_mean']:.6f},{stats['loglinear_mean']:.6f},"
            f"{stats['quadratic_std']:.6f},{stats['loglinear_std']:.6f}"
        )


if __name__ == "__main__":
    main()
