"""
Unit tests for the number theory primitives.

Tests:
- Primality test
- GCD
- Extended Euclidean Algorithm trace
- Modular inverse
"""

import pytest
from cipherlab.rsa.number_theory import (
    EuclideanStep, is_prime, gcd, extended_euclid, mod_inverse
)


class TestIsPrime:
    """Unit tests for trial-division primality."""

    def test_small_primes(self):
        """Known primes should be accepted."""
        primes = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 97, 101, 1009, 104729]
        for p in primes:
            assert is_prime(p), f"{p} should be prime"

    def test_composites(self):
        """Composites should be rejected, including 6k±1 squares."""
        composites = [4, 6, 8, 9, 10, 15, 21, 25, 35, 49, 77, 91, 100, 121, 143, 104730]
        for c in composites:
            assert not is_prime(c), f"{c} should not be prime"

    def test_one_and_below(self):
        """n <= 1 is never prime."""
        for n in (1, 0, -1, -7):
            assert not is_prime(n)


class TestGCD:
    """Unit tests for the Euclidean algorithm."""

    def test_gcd(self):
        assert gcd(48, 18) == 6
        assert gcd(17, 13) == 1
        assert gcd(3, 20) == 1

    def test_terminal_case(self):
        """gcd(a, 0) = a."""
        assert gcd(5, 0) == 5
        assert gcd(0, 5) == 5


class TestExtendedEuclid:
    """Unit tests for the extended Euclidean algorithm."""

    def test_textbook_trace(self):
        """Inverse of 3 mod 20 is 7, in three rows."""
        d, steps = extended_euclid(3, 20)
        assert d == 7
        assert steps == [
            EuclideanStep(q=6, r1=20, r2=3, r=2, t1=0, t2=1, t=-6),
            EuclideanStep(q=1, r1=3, r2=2, r=1, t1=1, t2=-6, t=7),
            EuclideanStep(q=2, r1=2, r2=1, r=0, t1=-6, t2=7, t=-20),
        ]

    def test_row_invariants(self):
        """Every row satisfies r = r1 - q*r2 and t = t1 - q*t2."""
        for a, m in [(17, 3120), (3, 20), (7, 40), (65537, 3120 * 7)]:
            _, steps = extended_euclid(a, m)
            for s in steps:
                assert s.r == s.r1 - s.q * s.r2
                assert s.t == s.t1 - s.q * s.t2
            # The loop ends exactly when the remainder reaches zero
            assert steps[-1].r == 0
            assert all(s.r2 > 0 for s in steps)

    def test_rows_shift(self):
        """Each row starts from the previous row's (r2, r) and (t2, t)."""
        _, steps = extended_euclid(17, 3120)
        for prev, cur in zip(steps, steps[1:]):
            assert (cur.r1, cur.r2) == (prev.r2, prev.r)
            assert (cur.t1, cur.t2) == (prev.t2, prev.t)

    def test_rsa_classic(self):
        """e = 17, φ(n) = 3120 gives d = 2753."""
        d, _ = extended_euclid(17, 3120)
        assert d == 2753

    def test_negative_coefficient_normalized(self):
        """A negative final t1 is brought into [0, m)."""
        d, steps = extended_euclid(3, 7)
        assert steps[-1].t2 == -2
        assert d == 5
        assert (3 * d) % 7 == 1

    def test_modulus_one(self):
        """m = 1 yields 0 with an empty trace."""
        assert extended_euclid(5, 1) == (0, [])


class TestModInverse:
    """Unit tests for mod_inverse."""

    def test_mod_inverse(self):
        # 3 * 7 ≡ 1 (mod 10)
        assert mod_inverse(3, 10) == 7

    def test_reduces_input(self):
        assert mod_inverse(13, 10) == 7

    def test_no_inverse(self):
        """Non-coprime values have no inverse."""
        with pytest.raises(ValueError):
            mod_inverse(4, 10)
