from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

if TYPE_CHECKING:
    from ._polynomial import Polynomial


def polynomial_scale(
    p: "Polynomial",
    c: Union[Tensor, int, float, complex],
) -> "Polynomial":
    """Multiply polynomial by scalar(s).

    Parameters
    ----------
    p : Polynomial
        Polynomial to scale.
    c : Tensor or number
        Scalar(s), broadcasts with batch dimensions.

    Returns
    -------
    Polynomial
        Scaled polynomial c * p. The dtype follows PyTorch type promotion
        between the coefficients and c.
    """
    from ._polynomial import Polynomial

    c = torch.as_tensor(c, device=p.coeffs.device)

    return Polynomial(coeffs=p.coeffs * c.unsqueeze(-1))
