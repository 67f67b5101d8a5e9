from ._polynomial import Polynomial, polynomial
from ._polynomial_evaluate import polynomial_evaluate
from ._polynomial_multiply import polynomial_multiply
from ._polynomial_multiply_elementwise import (
    polynomial_multiply_elementwise,
)
from ._polynomial_pow import polynomial_pow
from ._polynomial_product import polynomial_product
from ._polynomial_product_length import polynomial_product_length
from ._polynomial_scale import polynomial_scale

__all__ = [
    "Polynomial",
    "polynomial",
    "polynomial_evaluate",
    "polynomial_multiply",
    "polynomial_multiply_elementwise",
    "polynomial_pow",
    "polynomial_product",
    "polynomial_product_length",
    "polynomial_scale",
]
