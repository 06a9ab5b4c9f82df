"""
Strain Rate Benchmark Suite

Compares the NumPy and Numba strain rate implementations over a range of
grid sizes, in 2D and 3D.
"""

import numpy as np
import time
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from flowpost.components import VGT_COMPONENTS_2D, VGT_COMPONENTS_3D
from flowpost.tensors import velocity_gradient
from flowpost.strain_rate import compute_strain_rate, compute_strain_rate_fast


IMPLEMENTATIONS = {
    'numpy': compute_strain_rate,
    'numba': compute_strain_rate_fast,
}


def random_velocity_gradient(shape, seed=0):
    """Random velocity gradient record; 2D for 2-d shapes, 3D otherwise."""
    rng = np.random.default_rng(seed)
    names = VGT_COMPONENTS_2D if len(shape) == 2 else VGT_COMPONENTS_3D
    return velocity_gradient({name: rng.standard_normal(shape) for name in names})


def benchmark(func, vgt, num_repeats, warmup_repeats=3):
    """
    Time one strain rate implementation.

    Returns
    -------
    msps : float
        Million samples per second
    """
    # Warmup (includes Numba compilation)
    for _ in range(warmup_repeats):
        func(vgt)

    start = time.perf_counter()
    for _ in range(num_repeats):
        func(vgt)
    elapsed = time.perf_counter() - start

    n_samples = int(np.prod(vgt.shape))
    return num_repeats * n_samples / elapsed / 1e6


def run_full_benchmark(grid_shapes=None, num_repeats=50):
    """
    Run benchmark suite over all implementations and grid shapes.
    """
    if grid_shapes is None:
        grid_shapes = [
            (128, 128),
            (512, 512),
            (2048, 2048),
            (32, 32, 32),
            (64, 64, 64),
            (128, 128, 128),
        ]

    print("=" * 80)
    print("Strain Rate Benchmark Suite")
    print("=" * 80)
    print(f"Repeats: {num_repeats}")
    print()
    print(f"{'Grid':<16} " + " ".join(f"{impl:>12}" for impl in IMPLEMENTATIONS) + f" {'Speedup':>10}")
    print("-" * 80)

    results = {}
    for shape in grid_shapes:
        vgt = random_velocity_gradient(shape)
        row = {impl: benchmark(func, vgt, num_repeats) for impl, func in IMPLEMENTATIONS.items()}
        results[shape] = row

        label = "x".join(str(n) for n in shape)
        speedup = row['numba'] / row['numpy'] if row['numpy'] > 0 else 0.0
        print(f"{label:<16} " + " ".join(f"{row[impl]:>12.1f}" for impl in IMPLEMENTATIONS)
              + f" {speedup:>9.2f}x")

    print("=" * 80)
    print("Throughput in million samples per second")

    return results


if __name__ == "__main__":
    run_full_benchmark()
