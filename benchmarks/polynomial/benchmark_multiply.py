"""Benchmark polynomial multiplication and products.

Compares pairwise multiplication with the stacked (in-place) and sequence
(fold) forms of polynomial_product across different polynomial degrees.
"""

import time

import torch

from torchpoly import polynomial, polynomial_multiply, polynomial_product


def _time(fn, n_iterations: int, device: str) -> float:
    # Warmup
    for _ in range(10):
        fn()

    # Synchronize before timing (important for CUDA)
    if device == "cuda":
        torch.cuda.synchronize()

    start = time.perf_counter()
    for _ in range(n_iterations):
        fn()

    if device == "cuda":
        torch.cuda.synchronize()

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def benchmark_multiply(
    degree: int,
    n_iterations: int = 100,
    device: str = "cpu",
) -> float:
    """Benchmark multiplication of two polynomials of given degree.

    Returns
    -------
    float
        Average time per multiplication in milliseconds.
    """
    a = polynomial(torch.randn(degree + 1, device=device, dtype=torch.float64))
    b = polynomial(torch.randn(degree + 1, device=device, dtype=torch.float64))

    return _time(lambda: polynomial_multiply(a, b), n_iterations, device)


def benchmark_product(
    degree: int,
    factors: int = 4,
    n_iterations: int = 20,
    device: str = "cpu",
    method: str = "stacked",
) -> float:
    """Benchmark the product of several polynomials of given degree.

    Parameters
    ----------
    degree : int
        Degree of each factor.
    factors : int
        Number of factors.
    n_iterations : int
        Number of iterations for timing.
    device : str
        Device to run on ('cpu' or 'cuda').
    method : str
        'stacked' or 'sequence'.

    Returns
    -------
    float
        Average time per product in milliseconds.
    """
    coeffs = torch.randn(
        factors, degree + 1, device=device, dtype=torch.float64
    )

    if method == "stacked":
        stacked = polynomial(coeffs)
        fn = lambda: polynomial_product(stacked)  # noqa: E731
    elif method == "sequence":
        sequence = [polynomial(c) for c in coeffs]
        fn = lambda: polynomial_product(sequence)  # noqa: E731
    else:
        raise ValueError(f"Unknown method: {method}")

    return _time(fn, n_iterations, device)


def main():
    """Run multiplication benchmarks across degrees."""
    degrees = [8, 16, 32, 64, 128, 256]

    print("Polynomial Multiplication Benchmark")
    print("=" * 70)
    print(
        f"{'Degree':>8} {'Multiply (ms)':>16} "
        f"{'Stacked (ms)':>16} {'Sequence (ms)':>16}"
    )
    print("-" * 70)

    for degree in degrees:
        ms_multiply = benchmark_multiply(degree)
        ms_stacked = benchmark_product(degree, method="stacked")
        ms_sequence = benchmark_product(degree, method="sequence")

        print(
            f"{degree:>8} {ms_multiply:>16.4f} "
            f"{ms_stacked:>16.4f} {ms_sequence:>16.4f}"
        )

    print()
    print("Notes:")
    print("- Multiply is a direct O(n^2) convolution of two factors")
    print("- Stacked multiplies 4 equal-length factors in place")
    print("- Sequence folds the same 4 factors with polynomial_multiply")


if __name__ == "__main__":
    main()
