import torch

from torchpoly._polynomial_error import PolynomialError

from ._polynomial import Polynomial


def polynomial_multiply_elementwise(
    p: Polynomial,
    q: Polynomial,
) -> Polynomial:
    """Multiply coefficients of two equal-length polynomials pairwise.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials with the same number of coefficients N. Batch
        dimensions broadcast and dtypes may differ.

    Returns
    -------
    Polynomial
        Polynomial with coefficients p.coeffs[..., i] * q.coeffs[..., i],
        N coefficients and the promoted dtype.

    Raises
    ------
    PolynomialError
        If p and q have a different number of coefficients.

    Notes
    -----
    This is not polynomial multiplication: the degree does not grow and
    no convolution takes place. Use polynomial_multiply for the product.

    Examples
    --------
    >>> p = polynomial(torch.tensor([1, 2, 3]))
    >>> q = polynomial(torch.tensor([4, 5, 6]))
    >>> polynomial_multiply_elementwise(p, q).coeffs
    tensor([ 4, 10, 18])
    """
    p_coeffs = p.coeffs
    q_coeffs = q.coeffs

    n_p = p_coeffs.shape[-1]
    n_q = q_coeffs.shape[-1]

    if n_p != n_q:
        raise PolynomialError(
            f"Element-wise multiplication needs equal lengths, "
            f"got {n_p} and {n_q}"
        )

    common_dtype = torch.promote_types(p_coeffs.dtype, q_coeffs.dtype)

    return Polynomial(
        coeffs=p_coeffs.to(common_dtype) * q_coeffs.to(common_dtype)
    )
