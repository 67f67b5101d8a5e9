import torch
from torch import Tensor

from torchpoly._polynomial_error import PolynomialError

from ._polynomial_nd import PolynomialND


def polynomial_nd_evaluate(p: PolynomialND, x: Tensor) -> Tensor:
    """Evaluate multivariable polynomial at points.

    Parameters
    ----------
    p : PolynomialND
        Polynomial with coefficients shape (D_0, ..., D_{N-1}).
    x : Tensor
        Evaluation points, shape (...batch, N). x[..., n] is the value of
        the n-th variable.

    Returns
    -------
    Tensor
        Values p(x), shape (...batch). The dtype is the promotion of the
        coefficient dtype and the dtype of x.

    Raises
    ------
    PolynomialError
        If the last dimension of x is not the number of variables of p.

    Notes
    -----
    For every axis n the powers x_n^1, ..., x_n^{D_n - 1} are computed once
    and shared by all coefficients. x_n^0 is never formed: an axis at index
    0 simply does not take part in the product of powers. The coefficient
    at multi-index (0, ..., 0) is therefore added as is, and every other
    coefficient is multiplied by the product of the powers of its non-zero
    axes.

    A polynomial with an empty axis (some D_n = 0) evaluates to zero.

    Examples
    --------
    >>> p = polynomial_nd(torch.tensor([[1, 2], [3, 4]]))  # 1 + 2y + 3x + 4xy
    >>> polynomial_nd_evaluate(p, torch.tensor([[0, 0], [1, 1], [2, 3]]))
    tensor([ 1, 10, 37])
    """
    coeffs = p.coeffs
    N = coeffs.dim()

    if x.dim() == 0 or x.shape[-1] != N:
        raise PolynomialError(
            f"Expected evaluation points with last dimension {N}, "
            f"got shape {tuple(x.shape)}"
        )

    batch_shape = x.shape[:-1]
    common_dtype = torch.promote_types(coeffs.dtype, x.dtype)

    if coeffs.numel() == 0:
        return torch.zeros(
            batch_shape,
            dtype=common_dtype,
            device=coeffs.device,
        )

    if N == 0:
        return coeffs.to(common_dtype).expand(batch_shape).clone()

    x = x.to(common_dtype)

    # powers: (...batch, D_0, ..., D_n), product of the powers of the
    # non-zero axes among the first n + 1 axes.
    # has_power: (D_0, ..., D_n), whether any of those axes is non-zero.
    powers = None
    has_power = None

    for n, size in enumerate(coeffs.shape):
        axis_powers = _axis_powers(x[..., n], size)
        axis_has_power = torch.arange(size, device=coeffs.device) > 0

        if powers is None:
            powers = axis_powers
            has_power = axis_has_power
            continue

        axis_powers = axis_powers.reshape(batch_shape + (1,) * n + (size,))

        previous_powers = powers.unsqueeze(-1)
        previous_has_power = has_power.unsqueeze(-1)

        powers = torch.where(
            previous_has_power & axis_has_power,
            previous_powers * axis_powers,
            torch.where(previous_has_power, previous_powers, axis_powers),
        )
        has_power = previous_has_power | axis_has_power

    terms = torch.where(
        has_power,
        powers * coeffs,
        coeffs.to(common_dtype),
    )

    return terms.sum(dim=tuple(range(-N, 0)), dtype=common_dtype)


def _axis_powers(x: Tensor, size: int) -> Tensor:
    """Stack x^1, ..., x^{size - 1} along a new last dimension.

    Slot 0 holds zero as a placeholder for the absent x^0.
    """
    powers = [torch.zeros_like(x)]

    if size > 1:
        x_pow = x
        powers.append(x_pow)

        for _ in range(2, size):
            x_pow = x_pow * x
            powers.append(x_pow)

    return torch.stack(powers, dim=-1)
