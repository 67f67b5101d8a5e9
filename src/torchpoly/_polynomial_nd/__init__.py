from ._polynomial_nd import PolynomialND, polynomial_nd
from ._polynomial_nd_evaluate import polynomial_nd_evaluate

__all__ = [
    "PolynomialND",
    "polynomial_nd",
    "polynomial_nd_evaluate",
]
