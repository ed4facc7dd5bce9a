"""Tests for the modular arithmetic helpers."""

import pytest

from py_icg.core.modular import is_prime, modular_inverse


class TestIsPrime:
    """Test trial-division primality."""

    @pytest.mark.parametrize("n", [2, 3, 5, 7, 11, 13, 101, 7919, 15485863])
    def test_primes(self, n):
        assert is_prime(n)

    @pytest.mark.parametrize("n", [0, 1, 4, 9, 15, 25, 49, 91, 7917, 15485865])
    def test_composites(self, n):
        assert not is_prime(n)

    def test_negative_numbers_are_not_prime(self):
        assert not is_prime(-7)


class TestModularInverse:
    """Test the extended Euclidean inverse."""

    @pytest.mark.parametrize("p", [5, 7, 11, 13, 101, 7919])
    def test_inverse_property(self, p):
        """Every nonzero residue mod a prime has an inverse."""
        for y in range(1, p):
            z = modular_inverse(y, p)
            assert 0 <= z < p
            assert (y * z) % p == 1

    def test_known_values(self):
        assert modular_inverse(3, 7) == 5
        assert modular_inverse(5, 7) == 3
        assert modular_inverse(6, 7) == 6

    def test_guard_values(self):
        """Zero, one and out-of-range inputs follow the documented contract."""
        assert modular_inverse(0, 7) == 0
        assert modular_inverse(1, 7) == 1
        assert modular_inverse(7, 7) == 0
        assert modular_inverse(9, 7) == 0
        assert modular_inverse(-3, 7) == 0

    def test_large_prime(self):
        """Values near the top of the 64-bit range need no overflow handling."""
        p = 18446744073709551557  # largest prime below 2**64
        y = p - 2
        assert (y * modular_inverse(y, p)) % p == 1
