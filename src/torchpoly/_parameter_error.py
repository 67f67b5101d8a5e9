from torchpoly._polynomial_error import PolynomialError


class ParameterError(PolynomialError):
    """Invalid polynomial parameters.

    Raised when parameterized polynomials (e.g. Chebyshev polynomials)
    have invalid parameters (e.g. a negative kind).
    """

    pass
