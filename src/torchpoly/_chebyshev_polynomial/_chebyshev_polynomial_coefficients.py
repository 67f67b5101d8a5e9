import warnings
from typing import Optional, Tuple

import torch
from torch import Tensor

from ._chebyshev_polynomial import ChebyshevPolynomial


def chebyshev_polynomial_coefficients(
    c: ChebyshevPolynomial,
    n: Optional[int] = None,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
    requires_grad: bool = False,
) -> Optional[Tensor]:
    """Power-basis coefficients of a Chebyshev polynomial.

    Parameters
    ----------
    c : ChebyshevPolynomial
        Polynomial to expand.
    n : int, optional
        Number of coefficients of the result. Defaults to c.order + 1.
    dtype : torch.dtype, optional
        The desired data type of the returned tensor. Defaults to
        ``torch.get_default_dtype()``.
    device : torch.device, optional
        The desired device of the returned tensor.
    requires_grad : bool, optional
        If True, the returned tensor will require gradients.

    Returns
    -------
    Tensor or None
        A 1-D tensor of size (n,) with coefficients in ascending order,
        zero-padded above the degree, or None if c.order > n - 1.

    Warnings
    --------
    UserWarning
        If dtype is an integer type that cannot hold every coefficient.
        The coefficients wrap around.

    Notes
    -----
    Runs the recurrence on coefficient vectors:

        t_0 = [1, 0, 0, ...]
        t_1 = [0, kind, 0, ...]
        t_k[0] = -t_{k-2}[0]
        t_k[i] = 2 * t_{k-1}[i-1] - t_{k-2}[i]   for i >= 1

    Examples
    --------
    >>> c = ChebyshevPolynomial.first_kind(3)  # T_3 = 4x^3 - 3x
    >>> chebyshev_polynomial_coefficients(c, dtype=torch.int64)
    tensor([ 0, -3,  0,  4])
    >>> chebyshev_polynomial_coefficients(c, 6, dtype=torch.int64)
    tensor([ 0, -3,  0,  4,  0,  0])
    >>> chebyshev_polynomial_coefficients(c, 3) is None
    True
    """
    if n is None:
        n = c.order + 1

    if c.order > n - 1:
        return None

    if dtype is None:
        dtype = torch.get_default_dtype()

    if not (dtype.is_floating_point or dtype.is_complex) and c.order > 0:
        low, high = _coefficient_range(c.kind, c.order)
        info = torch.iinfo(dtype)

        if low < info.min or high > info.max:
            warnings.warn(
                f"Coefficients of {c} span [{low}, {high}], which does not "
                f"fit in {dtype}. Coefficients will overflow.",
                stacklevel=2,
            )

    zero = torch.zeros((), dtype=dtype, device=device)
    one = torch.ones((), dtype=dtype, device=device)

    t_prev = torch.zeros(n, dtype=dtype, device=device)
    t_prev[0] = one

    if c.order == 0:
        return t_prev.requires_grad_(requires_grad)

    kind = zero
    for _ in range(c.kind):
        kind = kind + one

    two = one + one

    t = torch.zeros(n, dtype=dtype, device=device)
    t[1] = kind

    for _ in range(1, c.order):
        t_next = torch.empty_like(t)
        t_next[0] = -t_prev[0]
        t_next[1:] = two * t[:-1] - t_prev[1:]

        t_prev, t = t, t_next

    return t.requires_grad_(requires_grad)


def _coefficient_range(kind: int, order: int) -> Tuple[int, int]:
    """Smallest and largest coefficient, run in exact integers."""
    t_prev = [1]
    t = [0, kind]

    for _ in range(1, order):
        t_next = [-t_prev[0]] + [
            2 * t[i - 1] - (t_prev[i] if i < len(t_prev) else 0)
            for i in range(1, len(t) + 1)
        ]

        t_prev, t = t, t_next

    return min(t), max(t)
