import torch
from torch import Tensor

from ._polynomial import Polynomial


def polynomial_evaluate(p: Polynomial, x: Tensor) -> Tensor:
    """Evaluate polynomial at points by accumulating powers of x.

    Parameters
    ----------
    p : Polynomial
        Polynomial with coefficients shape (...batch, N).
    x : Tensor
        Evaluation points, shape (...x_batch). The dtype of x does not
        have to match the dtype of the coefficients.

    Returns
    -------
    Tensor
        Values p(x), shape (...batch, ...x_batch). The dtype is the
        promotion of the coefficient dtype and the dtype of x.

    Notes
    -----
    The constant term is converted to the output dtype as is, without a
    multiplication by x^0. Every further term multiplies a running power
    of x by its coefficient and then advances the power:

        y = c_0
        x_pow = x
        y += x_pow * c_k;  x_pow *= x   for k = 1, ..., N-1

    This is Horner's method unrolled into a left-to-right sum, so no
    multiplicative identity is ever needed.

    An empty polynomial (N = 0) evaluates to zero.

    Examples
    --------
    >>> p = polynomial(torch.tensor([1.0, 2.0, 3.0]))  # 1 + 2x + 3x^2
    >>> polynomial_evaluate(p, torch.tensor([0.0, 1.0, 2.0]))
    tensor([ 1.,  6., 17.])
    """
    coeffs = p.coeffs

    batch_shape = coeffs.shape[:-1]
    N = coeffs.shape[-1]

    output_shape = batch_shape + x.shape
    common_dtype = torch.promote_types(coeffs.dtype, x.dtype)

    if N == 0:
        return torch.zeros(
            output_shape,
            dtype=common_dtype,
            device=coeffs.device,
        )

    # (...batch, N) -> (...batch, 1, ..., 1, N) so that each coefficient
    # broadcasts against x
    coeffs = coeffs.reshape(batch_shape + (1,) * x.dim() + (N,))
    x = x.to(common_dtype)

    y = coeffs[..., 0].to(common_dtype)
    x_pow = x

    for k in range(1, N):
        y = y + x_pow * coeffs[..., k]
        x_pow = x_pow * x

    return y.expand(output_shape).clone()
