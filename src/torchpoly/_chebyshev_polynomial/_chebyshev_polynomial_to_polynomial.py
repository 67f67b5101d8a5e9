from typing import Optional

import torch

from torchpoly._capacity_error import CapacityError
from torchpoly._polynomial import Polynomial, polynomial

from ._chebyshev_polynomial import ChebyshevPolynomial
from ._chebyshev_polynomial_coefficients import (
    chebyshev_polynomial_coefficients,
)


def chebyshev_polynomial_to_polynomial(
    c: ChebyshevPolynomial,
    n: Optional[int] = None,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
    requires_grad: bool = False,
) -> Polynomial:
    """Convert Chebyshev polynomial to power polynomial.

    Parameters
    ----------
    c : ChebyshevPolynomial
        Chebyshev polynomial.
    n : int, optional
        Number of coefficients of the result. Defaults to c.order + 1.
    dtype : torch.dtype, optional
        The desired data type of the coefficients.
    device : torch.device, optional
        The desired device of the coefficients.
    requires_grad : bool, optional
        If True, the coefficients will require gradients.

    Returns
    -------
    Polynomial
        Equivalent power polynomial with n coefficients.

    Raises
    ------
    CapacityError
        If c.order does not fit in n coefficients. The error carries c
        unchanged as ``error.polynomial``, so the conversion can be
        retried with a larger n.

    Examples
    --------
    >>> c = ChebyshevPolynomial.first_kind(2)
    >>> chebyshev_polynomial_to_polynomial(c).coeffs  # T_2 = 2x^2 - 1
    tensor([-1.,  0.,  2.])
    """
    coeffs = chebyshev_polynomial_coefficients(
        c, n, dtype=dtype, device=device, requires_grad=requires_grad
    )

    if coeffs is None:
        raise CapacityError(c, n)

    return polynomial(coeffs)
