from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import torch
from torch import Tensor

from torchpoly._degree_error import DegreeError
from torchpoly._parameter_error import ParameterError

if TYPE_CHECKING:
    from torchpoly._polynomial import Polynomial


@dataclass(frozen=True)
class ChebyshevPolynomial:
    """Chebyshev polynomial of a given kind and order.

    Defined by the three-term recurrence

        P_0(x) = 1
        P_1(x) = kind * x
        P_k(x) = 2 * x * P_{k-1}(x) - P_{k-2}(x)

    kind = 1 gives T_k (first kind), kind = 2 gives U_k (second kind).
    Other non-negative kinds scale the seed term P_1 accordingly.

    Attributes
    ----------
    kind : int
        Scale of the order-1 seed term.
    order : int
        Degree of the polynomial.

    Raises
    ------
    ParameterError
        If kind is not a non-negative integer.
    DegreeError
        If order is not a non-negative integer.

    Examples
    --------
    >>> c = ChebyshevPolynomial.first_kind(2)  # T_2 = 2x^2 - 1
    >>> c(torch.tensor([0, 1, 2]))
    tensor([-1,  1,  7])
    """

    kind: int
    order: int

    def __post_init__(self):
        kind, order = self.kind, self.order

        if isinstance(kind, bool) or not isinstance(kind, int) or kind < 0:
            raise ParameterError(
                f"Chebyshev kind must be a non-negative integer, got {kind!r}"
            )

        if isinstance(order, bool) or not isinstance(order, int) or order < 0:
            raise DegreeError(
                f"Chebyshev order must be a non-negative integer, "
                f"got {order!r}"
            )

    @classmethod
    def first_kind(cls, order: int) -> ChebyshevPolynomial:
        """Chebyshev polynomial of the first kind, T_order."""
        return chebyshev_polynomial(1, order)

    @classmethod
    def second_kind(cls, order: int) -> ChebyshevPolynomial:
        """Chebyshev polynomial of the second kind, U_order."""
        return chebyshev_polynomial(2, order)

    def __call__(self, x: Tensor) -> Tensor:
        from ._chebyshev_polynomial_evaluate import (
            chebyshev_polynomial_evaluate,
        )

        return chebyshev_polynomial_evaluate(self, x)

    def to_polynomial(
        self,
        n: Optional[int] = None,
        *,
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None,
        requires_grad: bool = False,
    ) -> Polynomial:
        from ._chebyshev_polynomial_to_polynomial import (
            chebyshev_polynomial_to_polynomial,
        )

        return chebyshev_polynomial_to_polynomial(
            self, n, dtype=dtype, device=device, requires_grad=requires_grad
        )


def chebyshev_polynomial(kind: int, order: int) -> ChebyshevPolynomial:
    """Create Chebyshev polynomial descriptor.

    Parameters
    ----------
    kind : int
        Scale of the order-1 seed term, 1 for T_n and 2 for U_n. Must be
        non-negative.
    order : int
        Degree of the polynomial. Must be non-negative.

    Returns
    -------
    ChebyshevPolynomial
        Descriptor instance.

    Raises
    ------
    ParameterError
        If kind is not a non-negative integer.
    DegreeError
        If order is not a non-negative integer.

    Examples
    --------
    >>> chebyshev_polynomial(2, 3)
    ChebyshevPolynomial(kind=2, order=3)
    """
    return ChebyshevPolynomial(kind=kind, order=order)
