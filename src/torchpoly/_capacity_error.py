from typing import Any

from torchpoly._polynomial_error import PolynomialError


class CapacityError(PolynomialError):
    """Polynomial does not fit in the requested number of coefficients.

    The polynomial that failed to fit is kept unchanged on the
    ``polynomial`` attribute so the caller can retry with a larger length.
    """

    def __init__(self, polynomial: Any, n: int):
        self.polynomial = polynomial
        self.n = n

        super().__init__(
            f"{polynomial!r} does not fit in {n} coefficient(s)"
        )
