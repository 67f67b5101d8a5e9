"""Hypothesis strategies for polynomial operator testing."""

from ._batch_shapes import batch_shapes
from ._chebyshev_polynomials import chebyshev_polynomials
from ._coefficients import coefficients
from ._integer_points import integer_points

__all__ = [
    # Shape strategies
    "batch_shapes",
    # Tensor strategies
    "coefficients",
    "integer_points",
    # Descriptor strategies
    "chebyshev_polynomials",
]
