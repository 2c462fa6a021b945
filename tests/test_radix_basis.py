"""
Tests for the prime basis, factorizer and radix context.
"""

import dataclasses

import pytest
from radix_basis import build_context, factor, primes_up_to


class TestPrimes:

    def test_small_limits(self):
        assert primes_up_to(1) == []
        assert primes_up_to(2) == [2]
        assert primes_up_to(10) == [2, 3, 5, 7]
        assert primes_up_to(13) == [2, 3, 5, 7, 11, 13]

    def test_factor(self):
        basis = (2, 3, 5, 7)
        assert factor(basis, 1) == (0, 0, 0, 0)
        assert factor(basis, 8) == (3, 0, 0, 0)
        assert factor(basis, 126) == (1, 2, 0, 1)

    def test_factor_outside_basis(self):
        with pytest.raises(ValueError):
            factor((2, 3, 5, 7), 22)
        with pytest.raises(ValueError):
            factor((2, 3, 5, 7), 0)


class TestContext:

    def test_radix_10(self):
        ctx = build_context(10)
        assert ctx.primes == (2, 3, 5, 7)
        assert ctx.base_factors == (1, 0, 1, 0)
        assert ctx.digit_factors[6] == (1, 1, 0, 0)
        assert ctx.digit_factors[9] == (0, 2, 0, 0)
        assert sorted(ctx.digit_factors) == list(range(2, 10))
        assert ctx.width == 4

    def test_radix_12(self):
        ctx = build_context(12)
        assert ctx.primes == (2, 3, 5, 7, 11)
        assert ctx.base_factors == (2, 1, 0, 0, 0)

    def test_prime_radix_includes_itself(self):
        """A prime radix sits in the last slot of its own basis."""
        ctx = build_context(7)
        assert ctx.primes == (2, 3, 5, 7)
        assert ctx.base_factors == (0, 0, 0, 1)
        assert 7 not in ctx.digit_factors

    @pytest.mark.parametrize("radix", [0, 2, 37])
    def test_invalid_radix(self, radix):
        with pytest.raises(ValueError):
            build_context(radix)

    def test_context_is_immutable(self):
        ctx = build_context(10)
        with pytest.raises(dataclasses.FrozenInstanceError):
            ctx.radix = 12
