import torch
from torch import Tensor

from ._chebyshev_polynomial import ChebyshevPolynomial


def chebyshev_polynomial_evaluate(
    c: ChebyshevPolynomial,
    x: Tensor,
) -> Tensor:
    """Evaluate Chebyshev polynomial at points using its recurrence.

    Parameters
    ----------
    c : ChebyshevPolynomial
        Polynomial to evaluate.
    x : Tensor
        Evaluation points, any shape.

    Returns
    -------
    Tensor
        Values c(x), same shape and dtype as x.

    Notes
    -----
    Runs the scalar recurrence

        t_0 = 1
        t_1 = kind * x
        t_k = 2 * x * t_{k-1} - t_{k-2}

    directly on x in O(order) steps, without materializing coefficients.

    Integer inputs are evaluated exactly as long as no intermediate value
    overflows the dtype.

    Examples
    --------
    >>> c = ChebyshevPolynomial.second_kind(2)  # U_2 = 4x^2 - 1
    >>> chebyshev_polynomial_evaluate(c, torch.tensor([0, 1, 2]))
    tensor([-1,  3, 15])
    """
    one = torch.ones((), dtype=x.dtype, device=x.device)

    t_prev = torch.ones_like(x)

    if c.order == 0:
        return t_prev

    kind = torch.zeros((), dtype=x.dtype, device=x.device)
    for _ in range(c.kind):
        kind = kind + one

    two = one + one

    t = kind * x

    for _ in range(1, c.order):
        t_prev, t = t, two * x * t - t_prev

    return t
