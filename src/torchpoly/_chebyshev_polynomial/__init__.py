"""Chebyshev polynomials of arbitrary kind."""

from ._chebyshev_polynomial import ChebyshevPolynomial, chebyshev_polynomial
from ._chebyshev_polynomial_coefficients import (
    chebyshev_polynomial_coefficients,
)
from ._chebyshev_polynomial_evaluate import chebyshev_polynomial_evaluate
from ._chebyshev_polynomial_to_polynomial import (
    chebyshev_polynomial_to_polynomial,
)

__all__ = [
    "ChebyshevPolynomial",
    "chebyshev_polynomial",
    "chebyshev_polynomial_coefficients",
    "chebyshev_polynomial_evaluate",
    "chebyshev_polynomial_to_polynomial",
]
