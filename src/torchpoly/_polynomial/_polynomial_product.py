import functools
from typing import Iterable, Optional, Union

import torch
from torch import Tensor

from torchpoly._polynomial_error import PolynomialError

from ._polynomial import Polynomial, polynomial
from ._polynomial_multiply import polynomial_multiply
from ._polynomial_product_length import polynomial_product_length


def polynomial_product(
    polynomials: Union[Polynomial, Iterable[Union[Polynomial, Tensor]]],
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Polynomial:
    """Multiply many polynomials together.

    Parameters
    ----------
    polynomials : Polynomial or iterable of Polynomial
        Either a stacked Polynomial whose coefficients have shape
        (...batch, M, N), i.e. M factors of equal length N, or an iterable
        of polynomials (or coefficient tensors) of arbitrary lengths.
    dtype : torch.dtype, optional
        Dtype of the result when the iterable is empty. Defaults to
        ``torch.get_default_dtype()``.
    device : torch.device, optional
        Device of the result when the iterable is empty.

    Returns
    -------
    Polynomial
        The product. For stacked input its length is
        ``polynomial_product_length(*[N] * M)``: 0 if M = 0 or N = 0, N if
        M = 1 and M * (N - 1) + 1 otherwise.

    Raises
    ------
    PolynomialError
        If stacked coefficients have fewer than 2 dimensions.

    Notes
    -----
    The product of no polynomials is the empty polynomial (zero
    coefficients), not the constant 1. Callers that need a
    multiplicative identity must handle the empty case themselves.

    The stacked form multiplies the running product by each factor in
    place, reusing a single scratch buffer. It is not meant for autograd;
    use the iterable form when gradients are needed.

    Examples
    --------
    >>> a = polynomial(torch.tensor([1, 1]))  # 1 + x
    >>> polynomial_product([a, a, a]).coeffs
    tensor([1, 3, 3, 1])
    >>> polynomial_product(polynomial(torch.tensor([[1, 1], [1, 1]]))).coeffs
    tensor([1, 2, 1])
    """
    if isinstance(polynomials, Polynomial):
        return Polynomial(coeffs=_product_stacked(polynomials.coeffs))

    factors = [
        p if isinstance(p, Polynomial) else polynomial(p) for p in polynomials
    ]

    if len(factors) == 0:
        return Polynomial(
            coeffs=torch.zeros(
                0,
                dtype=dtype if dtype is not None else torch.get_default_dtype(),
                device=device,
            )
        )

    return functools.reduce(polynomial_multiply, factors)


def _product_stacked(coeffs: Tensor) -> Tensor:
    if coeffs.dim() < 2:
        raise PolynomialError(
            f"Stacked polynomials must have shape (..., M, N), "
            f"got {tuple(coeffs.shape)}"
        )

    batch_shape = coeffs.shape[:-2]
    M, N = coeffs.shape[-2], coeffs.shape[-1]

    length = polynomial_product_length(*[N] * M)

    if length == 0:
        return torch.zeros(
            *batch_shape,
            0,
            dtype=coeffs.dtype,
            device=coeffs.device,
        )

    # Resize every factor to the final length, filling with zeros
    padded = torch.zeros(
        *batch_shape,
        M,
        length,
        dtype=coeffs.dtype,
        device=coeffs.device,
    )
    padded[..., :N] = coeffs

    result = padded[..., 0, :].clone()
    scratch = torch.empty_like(result)

    for m in range(1, M):
        _multiply_accumulate(result, padded[..., m, :], N, scratch)

    return result


def _multiply_accumulate(
    accumulator: Tensor,
    factor: Tensor,
    n: int,
    scratch: Tensor,
) -> None:
    """accumulator <- accumulator * factor, in place.

    Only the first n coefficients of factor may be non-zero, so for output
    index k the factor index runs over [0, min(k + 1, n)).
    """
    for k in range(accumulator.shape[-1]):
        i = torch.arange(min(k + 1, n), device=accumulator.device)

        scratch[..., k] = (factor[..., i] * accumulator[..., k - i]).sum(-1)

    accumulator.copy_(scratch)
