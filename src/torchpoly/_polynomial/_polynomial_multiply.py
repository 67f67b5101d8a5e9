import torch
from torch import Tensor

from ._polynomial import Polynomial
from ._polynomial_product_length import polynomial_product_length


def polynomial_multiply(p: Polynomial, q: Polynomial) -> Polynomial:
    """Multiply two polynomials.

    Computes convolution of coefficients. Result degree is deg(p) + deg(q).

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to multiply. Their dtypes may differ.

    Returns
    -------
    Polynomial
        Product p * q with N_p + N_q - 1 coefficients, or no coefficients
        if either factor is empty. Trailing zeros are kept.

    Notes
    -----
    The product of an empty polynomial and anything is empty, not a copy
    of the other factor.

    Examples
    --------
    >>> p = polynomial(torch.tensor([1, 1]))  # 1 + x
    >>> q = polynomial(torch.tensor([1, -1]))  # 1 - x
    >>> polynomial_multiply(p, q).coeffs
    tensor([ 1,  0, -1])
    """
    p_coeffs = p.coeffs
    q_coeffs = q.coeffs

    # Get shapes
    p_batch = p_coeffs.shape[:-1]
    q_batch = q_coeffs.shape[:-1]
    n_p = p_coeffs.shape[-1]
    n_q = q_coeffs.shape[-1]

    broadcast_batch = torch.broadcast_shapes(p_batch, q_batch)
    common_dtype = torch.promote_types(p_coeffs.dtype, q_coeffs.dtype)

    # Handle empty polynomials
    if n_p == 0 or n_q == 0:
        return Polynomial(
            coeffs=torch.zeros(
                *broadcast_batch,
                0,
                dtype=common_dtype,
                device=p_coeffs.device,
            )
        )

    # Expand to broadcast shape
    p_expanded = p_coeffs.expand(*broadcast_batch, n_p)
    q_expanded = q_coeffs.expand(*broadcast_batch, n_q)

    # Flatten batch dimensions: (...batch, N) -> (B, N)
    batch_size = broadcast_batch.numel() if len(broadcast_batch) > 0 else 1
    p_flat = p_expanded.reshape(batch_size, n_p).to(common_dtype)
    q_flat = q_expanded.reshape(batch_size, n_q).to(common_dtype)

    result_flat = _multiply_direct(p_flat, q_flat)

    n_out = polynomial_product_length(n_p, n_q)

    assert result_flat.shape[-1] == n_out

    return Polynomial(coeffs=result_flat.reshape(*broadcast_batch, n_out))


def _multiply_direct(p: Tensor, q: Tensor) -> Tensor:
    """Convolve coefficient rows, (B, N1) x (B, N2) -> (B, N1 + N2 - 1).

    For output index k the valid pairs (i, j) with i + j = k are
    i in [max(0, k + 1 - N2), min(k + 1, N1)) and j = k - i.
    """
    n_p = p.shape[-1]
    n_q = q.shape[-1]
    n_out = n_p + n_q - 1

    result = torch.zeros(
        p.shape[0],
        n_out,
        dtype=p.dtype,
        device=p.device,
    )

    for k in range(n_out):
        i = torch.arange(
            max(0, k + 1 - n_q),
            min(k + 1, n_p),
            device=p.device,
        )

        result[:, k] += (p[:, i] * q[:, k - i]).sum(-1)

    return result
