from typing import Union

from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchpoly._polynomial_error import PolynomialError


@tensorclass
class Polynomial:
    """Polynomial in power basis with ascending coefficients.

    Represents p(x) = coeffs[..., 0] + coeffs[..., 1]*x + coeffs[..., 2]*x^2 + ...

    Attributes
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (..., N) where N = degree + 1.
        coeffs[..., i] is the coefficient of x^i.
        Batch dimensions come first, coefficient dimension last.
        N may be 0, which represents the empty polynomial.

    Examples
    --------
    Single polynomial 1 + 2x + 3x^2:
        Polynomial(coeffs=torch.tensor([1, 2, 3]))

    Batch of 2 polynomials:
        Polynomial(coeffs=torch.tensor([[1.0, 2.0], [3.0, 4.0]]))
        # First: 1 + 2x, Second: 3 + 4x

    Operator overloading:
        p * q    # polynomial_multiply(p, q)
        p * c    # polynomial_scale(p, c)
        p ** n   # polynomial_pow(p, n)
        p(x)     # polynomial_evaluate(p, x)
    """

    coeffs: Tensor

    def __mul__(self, other: Union["Polynomial", Tensor]) -> "Polynomial":
        from ._polynomial_multiply import polynomial_multiply
        from ._polynomial_scale import polynomial_scale

        if isinstance(other, Polynomial):
            return polynomial_multiply(self, other)
        return polynomial_scale(self, other)

    def __rmul__(self, other: Union["Polynomial", Tensor]) -> "Polynomial":
        from ._polynomial_multiply import polynomial_multiply
        from ._polynomial_scale import polynomial_scale

        if isinstance(other, Polynomial):
            return polynomial_multiply(other, self)
        return polynomial_scale(self, other)

    def __call__(self, x: Tensor) -> Tensor:
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, x)

    def __pow__(self, n: int) -> "Polynomial":
        from ._polynomial_pow import polynomial_pow

        return polynomial_pow(self, n)


def polynomial(coeffs: Tensor) -> Polynomial:
    """Create polynomial from coefficient tensor.

    Parameters
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (..., N). N may be 0.

    Returns
    -------
    Polynomial
        Polynomial instance.

    Raises
    ------
    PolynomialError
        If coeffs is 0-dimensional (there is no coefficient axis).

    Examples
    --------
    >>> p = polynomial(torch.tensor([1.0, 2.0, 3.0]))  # 1 + 2x + 3x^2
    >>> p.coeffs
    tensor([1., 2., 3.])
    """
    if coeffs.dim() == 0:
        raise PolynomialError(
            "Polynomial coefficients must have a coefficient dimension, "
            "got a 0-dimensional tensor"
        )

    return Polynomial(coeffs=coeffs)
