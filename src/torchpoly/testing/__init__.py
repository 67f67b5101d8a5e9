"""Testing utilities for polynomial operators.

Example usage:

    import hypothesis

    from torchpoly import polynomial, polynomial_evaluate
    from torchpoly.testing.strategies import coefficients, integer_points

    @hypothesis.given(coefficients(), integer_points())
    def test_constant_term(c, x):
        ...
"""

from . import strategies

__all__ = [
    "strategies",
]
