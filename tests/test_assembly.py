"""
Tests for the divisibility pruner and the minimal assembler.
"""

from itertools import permutations, product

import pytest
from assembly import AssemblyError, assemble, divides, subtract
from persistence import digit_product, radix_digits
from radix_basis import build_context, factor
from search_driver import candidate_value
from stars_bars import StarsBars


def digit_exponents(ctx, value):
    """Sum of the prime-exponent contributions of every digit of value."""
    total = [0] * ctx.width
    for d in radix_digits(value, ctx.radix):
        for i, e in enumerate(factor(ctx.primes, d)):
            total[i] += e
    return tuple(total)


class TestDivides:

    GRID = list(product(range(3), repeat=3))

    def test_reflexive(self):
        for a in self.GRID:
            assert divides(a, a)

    def test_transitive(self):
        for a in self.GRID:
            for b in self.GRID:
                if not divides(a, b):
                    continue
                for c in self.GRID:
                    if divides(b, c):
                        assert divides(a, c)

    def test_componentwise(self):
        assert divides((2, 1, 0), (1, 1, 0))
        assert not divides((2, 0, 0), (1, 1, 0))

    def test_subtract(self):
        assert subtract((3, 2, 1), (1, 2, 0)) == (2, 0, 1)
        with pytest.raises(ValueError):
            subtract((0, 1), (1, 0))


class TestAssemble:

    def test_known_values(self):
        ctx = build_context(10)
        assert assemble(ctx, (0, 0, 0, 0)) == 0
        assert assemble(ctx, (1, 0, 1, 0)) == 25
        assert assemble(ctx, (0, 0, 0, 2)) == 77
        assert assemble(ctx, (0, 1, 2, 0)) == 355
        assert assemble(ctx, (3, 2, 0, 0)) == 89

    def test_wrong_length(self):
        with pytest.raises(ValueError):
            assemble(build_context(10), (1, 0))

    @pytest.mark.parametrize("radix", [10, 12, 7])
    def test_round_trip(self, radix):
        ctx = build_context(radix)
        for n in range(0, 6):
            for v in StarsBars(n, ctx.width):
                if radix == 7 and v[-1]:
                    continue
                value = assemble(ctx, v)
                if not any(v):
                    assert value == 0
                    continue
                digits = radix_digits(value, radix)
                assert 0 not in digits and 1 not in digits
                assert digit_exponents(ctx, value) == v

    def test_minimal_over_permutations(self):
        ctx = build_context(10)
        for n in range(1, 5):
            for v in StarsBars(n, ctx.width):
                value = assemble(ctx, v)
                s = str(value)
                assert value == min(int("".join(p)) for p in permutations(s))

    def test_prime_radix_needs_radix_digit(self):
        ctx = build_context(7)
        with pytest.raises(AssemblyError):
            assemble(ctx, (0, 0, 0, 1))
        assert issubclass(AssemblyError, ValueError)
        assert assemble(ctx, (1, 1, 0, 0)) == 6


class TestPruningSoundness:
    """divides(v, BaseFactors) implies a first digit product divisible by radix."""

    @pytest.mark.parametrize("radix", [10, 12, 7, 6])
    def test_first_digit_product(self, radix):
        ctx = build_context(radix)
        pruned = 0
        for n in range(1, 6):
            for v in StarsBars(n, ctx.width):
                if divides(v, ctx.base_factors):
                    pruned += 1
                    p = digit_product(candidate_value(ctx, v), radix)
                    assert p % radix == 0
        assert pruned > 0
