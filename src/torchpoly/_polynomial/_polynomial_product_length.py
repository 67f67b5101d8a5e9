def polynomial_product_length(*lengths: int) -> int:
    """Number of coefficients in the product of polynomials.

    Parameters
    ----------
    *lengths : int
        Coefficient counts of the factors.

    Returns
    -------
    int
        0 if there are no factors or any factor is empty, otherwise
        sum(n - 1 for n in lengths) + 1, i.e. the two-polynomial law
        N1 + N2 - 1 applied from left to right.

    Examples
    --------
    >>> polynomial_product_length(2, 3)
    4
    >>> polynomial_product_length(2, 2, 2)
    4
    >>> polynomial_product_length(5, 0)
    0
    """
    if len(lengths) == 0:
        return 0

    result = lengths[0]

    for n in lengths[1:]:
        if result == 0 or n == 0:
            return 0

        result = result + n - 1

    return result
