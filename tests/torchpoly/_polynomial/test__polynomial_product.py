"""Tests for polynomial_product and polynomial_product_length."""

import functools

import hypothesis
import hypothesis.strategies
import pytest
import torch

from torchpoly import (
    PolynomialError,
    polynomial,
    polynomial_evaluate,
    polynomial_multiply,
    polynomial_pow,
    polynomial_product,
    polynomial_product_length,
)
from torchpoly.testing.strategies import coefficients


class TestPolynomialProductLength:
    """Tests for polynomial_product_length."""

    def test_two(self):
        """N1 + N2 - 1."""
        assert polynomial_product_length(3, 5) == 7

    def test_none(self):
        """No factors, no coefficients."""
        assert polynomial_product_length() == 0

    def test_single(self):
        """A single factor keeps its length."""
        assert polynomial_product_length(4) == 4

    @pytest.mark.parametrize("lengths", [(0, 3), (3, 0), (2, 0, 2)])
    def test_empty_factor(self, lengths):
        """Any empty factor empties the product."""
        assert polynomial_product_length(*lengths) == 0

    def test_iterative(self):
        """M factors of length N give M * (N - 1) + 1."""
        assert polynomial_product_length(*[4] * 5) == 5 * 3 + 1


class TestPolynomialProductSequence:
    """Tests for products of a sequence of polynomials."""

    def test_square(self):
        """product([A, A]) == mul(A, A)."""
        a = polynomial(torch.tensor([1, 1]))
        assert torch.equal(
            polynomial_product([a, a]).coeffs, torch.tensor([1, 2, 1])
        )

    def test_cube(self):
        """product([A, A, A]) == mul(mul(A, A), A)."""
        a = polynomial(torch.tensor([1, 1]))
        result = polynomial_product([a, a, a])
        assert torch.equal(result.coeffs, torch.tensor([1, 3, 3, 1]))
        assert torch.equal(
            result.coeffs,
            polynomial_multiply(polynomial_multiply(a, a), a).coeffs,
        )

    def test_cube_evaluation(self):
        """product([A, A, A])(x) == A(x)^3 for x in -128..127."""
        a = polynomial(torch.tensor([1, 1]))
        x = torch.arange(-128, 128)
        assert torch.equal(
            polynomial_evaluate(polynomial_product([a, a, a]), x),
            polynomial_evaluate(a, x) ** 3,
        )

    def test_different_lengths(self):
        """Factors may have different lengths."""
        a = polynomial(torch.tensor([1, 1]))
        b = polynomial(torch.tensor([1, 0, 1]))
        c = polynomial(torch.tensor([2]))
        assert torch.equal(
            polynomial_product([a, b, c]).coeffs,
            torch.tensor([2, 2, 2, 2]),
        )

    def test_accepts_tensors(self):
        """Raw coefficient tensors are accepted."""
        assert torch.equal(
            polynomial_product(
                [torch.tensor([1, 1]), torch.tensor([1, -1])]
            ).coeffs,
            torch.tensor([1, 0, -1]),
        )

    def test_accepts_generator(self):
        """Any iterable is accepted."""
        a = polynomial(torch.tensor([1, 1]))
        result = polynomial_product(a for _ in range(4))
        assert torch.equal(result.coeffs, torch.tensor([1, 4, 6, 4, 1]))

    def test_single(self):
        """A single factor is returned as is."""
        a = polynomial(torch.tensor([1, 2, 3]))
        assert torch.equal(polynomial_product([a]).coeffs, a.coeffs)

    def test_empty(self):
        """The product of nothing is the empty polynomial."""
        result = polynomial_product([])
        assert result.coeffs.shape == (0,)
        assert result.coeffs.dtype == torch.get_default_dtype()

    def test_empty_dtype(self):
        """dtype applies to the empty product."""
        result = polynomial_product([], dtype=torch.int64)
        assert result.coeffs.dtype == torch.int64

    def test_empty_factor(self):
        """An empty factor empties the product."""
        a = polynomial(torch.tensor([1, 1]))
        e = polynomial(torch.tensor([], dtype=torch.int64))
        assert polynomial_product([a, e, a]).coeffs.shape == (0,)

    def test_matches_pow(self):
        """product([A] * n) == A ** n."""
        a = polynomial(torch.tensor([2, -1, 1]))
        assert torch.equal(
            polynomial_product([a] * 5).coeffs, polynomial_pow(a, 5).coeffs
        )

    def test_gradient(self):
        """Gradients flow through the sequence form."""
        coeffs = torch.tensor([1.0, 1.0], requires_grad=True)
        a = polynomial(coeffs)
        polynomial_product([a, a]).coeffs.sum().backward()
        torch.testing.assert_close(coeffs.grad, torch.tensor([4.0, 4.0]))


class TestPolynomialProductStacked:
    """Tests for products of stacked, equal-length polynomials."""

    def test_square(self):
        """Two stacked copies of 1 + x."""
        p = polynomial(torch.tensor([[1, 1], [1, 1]]))
        assert torch.equal(
            polynomial_product(p).coeffs, torch.tensor([1, 2, 1])
        )

    def test_cube(self):
        """Three stacked copies of 1 + x."""
        p = polynomial(torch.tensor([[1, 1], [1, 1], [1, 1]]))
        assert torch.equal(
            polynomial_product(p).coeffs, torch.tensor([1, 3, 3, 1])
        )

    def test_no_factors(self):
        """M = 0 gives a well-defined empty result."""
        p = polynomial(torch.zeros(0, 3, dtype=torch.int64))
        result = polynomial_product(p)
        assert result.coeffs.shape == (0,)
        assert result.coeffs.dtype == torch.int64

    def test_empty_factors(self):
        """N = 0 gives an empty result."""
        p = polynomial(torch.zeros(3, 0))
        assert polynomial_product(p).coeffs.shape == (0,)

    def test_single_factor(self):
        """M = 1 gives the factor itself."""
        p = polynomial(torch.tensor([[1, 2, 3]]))
        assert torch.equal(
            polynomial_product(p).coeffs, torch.tensor([1, 2, 3])
        )

    def test_single_factor_not_aliased(self):
        """The result never shares memory with the input."""
        coeffs = torch.tensor([[1, 2, 3]])
        result = polynomial_product(polynomial(coeffs))
        result.coeffs.add_(1)
        assert torch.equal(coeffs, torch.tensor([[1, 2, 3]]))

    def test_length(self):
        """M * (N - 1) + 1 coefficients."""
        p = polynomial(torch.ones(4, 3))
        assert polynomial_product(p).coeffs.shape == (9,)

    def test_batched(self):
        """Leading dimensions are batch dimensions."""
        coeffs = torch.tensor(
            [
                [[1, 1], [1, 1]],
                [[1, -1], [1, 1]],
            ]
        )
        assert torch.equal(
            polynomial_product(polynomial(coeffs)).coeffs,
            torch.tensor([[1, 2, 1], [1, 0, -1]]),
        )

    def test_not_stacked_raises(self):
        """A single 1-D polynomial is not a stack."""
        with pytest.raises(PolynomialError):
            polynomial_product(polynomial(torch.tensor([1, 1])))

    def test_matches_sequence(self):
        """Stacked and sequence forms agree."""
        coeffs = torch.tensor([[1, -2, 3], [0, 1, 1], [2, 0, -1], [1, 1, 1]])
        stacked = polynomial_product(polynomial(coeffs))
        sequence = polynomial_product([polynomial(c) for c in coeffs])
        assert torch.equal(stacked.coeffs, sequence.coeffs)

    @hypothesis.given(hypothesis.strategies.data())
    @hypothesis.settings(deadline=None, max_examples=30)
    def test_property_matches_fold(self, data):
        """Stacked product equals a left fold of polynomial_multiply."""
        m = data.draw(hypothesis.strategies.integers(min_value=1, max_value=4))
        coeffs = data.draw(
            coefficients(batch_shape=(m,), min_length=1, max_length=4)
        )

        expected = functools.reduce(
            polynomial_multiply, [polynomial(c) for c in coeffs]
        )

        assert torch.equal(
            polynomial_product(polynomial(coeffs)).coeffs, expected.coeffs
        )
