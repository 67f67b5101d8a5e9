"""torchpoly: polynomial kernels for PyTorch.

Evaluation, multiplication and products of power-basis polynomials,
multivariable evaluation, and Chebyshev polynomials of arbitrary kind.
"""

from ._capacity_error import CapacityError
from ._chebyshev_polynomial import (
    ChebyshevPolynomial,
    chebyshev_polynomial,
    chebyshev_polynomial_coefficients,
    chebyshev_polynomial_evaluate,
    chebyshev_polynomial_to_polynomial,
)
from ._degree_error import DegreeError
from ._parameter_error import ParameterError
from ._polynomial import (
    Polynomial,
    polynomial,
    polynomial_evaluate,
    polynomial_multiply,
    polynomial_multiply_elementwise,
    polynomial_pow,
    polynomial_product,
    polynomial_product_length,
    polynomial_scale,
)
from ._polynomial_error import PolynomialError
from ._polynomial_nd import (
    PolynomialND,
    polynomial_nd,
    polynomial_nd_evaluate,
)

__all__ = [
    "CapacityError",
    "ChebyshevPolynomial",
    "DegreeError",
    "ParameterError",
    "Polynomial",
    "PolynomialError",
    "PolynomialND",
    "chebyshev_polynomial",
    "chebyshev_polynomial_coefficients",
    "chebyshev_polynomial_evaluate",
    "chebyshev_polynomial_to_polynomial",
    "polynomial",
    "polynomial_evaluate",
    "polynomial_multiply",
    "polynomial_multiply_elementwise",
    "polynomial_nd",
    "polynomial_nd_evaluate",
    "polynomial_pow",
    "polynomial_product",
    "polynomial_product_length",
    "polynomial_scale",
]

__version__ = "0.1.0"
