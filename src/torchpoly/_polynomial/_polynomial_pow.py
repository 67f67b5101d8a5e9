import torch

from ._polynomial import Polynomial
from ._polynomial_multiply import polynomial_multiply


def polynomial_pow(p: Polynomial, n: int) -> Polynomial:
    """Raise polynomial to non-negative integer power.

    Uses binary exponentiation (repeated squaring) for efficiency.

    Parameters
    ----------
    p : Polynomial
        Base polynomial.
    n : int
        Non-negative integer exponent.

    Returns
    -------
    Polynomial
        p raised to power n. For n = 0 this is the constant polynomial 1
        with the batch shape, dtype and device of p.

    Raises
    ------
    ValueError
        If n is negative.

    Examples
    --------
    >>> p = polynomial(torch.tensor([1.0, 1.0]))  # 1 + x
    >>> polynomial_pow(p, 3).coeffs  # 1 + 3x + 3x^2 + x^3
    tensor([1., 3., 3., 1.])
    """
    if n < 0:
        raise ValueError(f"Exponent must be non-negative, got {n}")

    coeffs = p.coeffs

    if n == 0:
        return Polynomial(
            coeffs=torch.ones(
                *coeffs.shape[:-1],
                1,
                dtype=coeffs.dtype,
                device=coeffs.device,
            )
        )

    if n == 1:
        return p

    # Square p once per bit of n, folding in the squares whose bit is set
    squares = p
    while not n & 1:
        squares = polynomial_multiply(squares, squares)
        n >>= 1

    result = squares
    n >>= 1

    while n:
        squares = polynomial_multiply(squares, squares)
        if n & 1:
            result = polynomial_multiply(result, squares)
        n >>= 1

    return result
