from tensordict.tensorclass import tensorclass
from torch import Tensor


@tensorclass
class PolynomialND:
    """Multivariable polynomial in power basis.

    Represents

        p(x_0, ..., x_{N-1}) = sum_i coeffs[i_0, ..., i_{N-1}]
                               * x_0^{i_0} * ... * x_{N-1}^{i_{N-1}}

    Attributes
    ----------
    coeffs : Tensor
        Coefficient tensor of shape (D_0, ..., D_{N-1}). Every dimension is
        a variable; dimension n holds the coefficients of x_n^0 ...
        x_n^{D_n - 1}. A 0-dimensional tensor is a constant.

    Examples
    --------
    p(x, y) = 1 + 2y + 3x + 4xy:
        PolynomialND(coeffs=torch.tensor([[1, 2], [3, 4]]))
    """

    coeffs: Tensor

    def __call__(self, x: Tensor) -> Tensor:
        from ._polynomial_nd_evaluate import polynomial_nd_evaluate

        return polynomial_nd_evaluate(self, x)


def polynomial_nd(coeffs: Tensor) -> PolynomialND:
    """Create multivariable polynomial from coefficient tensor.

    Parameters
    ----------
    coeffs : Tensor
        Coefficients, shape (D_0, ..., D_{N-1}).

    Returns
    -------
    PolynomialND
        Polynomial instance in N variables.

    Examples
    --------
    >>> p = polynomial_nd(torch.tensor([[1, 2], [3, 4]]))
    >>> p.coeffs.dim()  # number of variables
    2
    """
    return PolynomialND(coeffs=coeffs)
