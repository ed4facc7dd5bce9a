"""
Modular arithmetic helpers for the inversive congruential generator.
"""

import math


def is_prime(n: int) -> bool:
    """
    Determine whether n is prime by trial division.

    Only odd divisors up to isqrt(n) are tried. This is O(sqrt(n)), which is
    fine because it runs on (re)parametrization, never per sample.
    """
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False

    limit = math.isqrt(n)
    divisor = 3
    while divisor <= limit:
        if n % divisor == 0:
            return False
        divisor += 2
    return True


def modular_inverse(y: int, p: int) -> int:
    """
    Calculate the inverse of y in the ring of integers mod p.

    Uses the extended Euclidean algorithm on (p, y) so that

        (y * modular_inverse(y, p)) % p == 1

    whenever p is prime and 1 <= y < p.

    Args:
        y: Value to invert
        p: Prime modulus

    Returns:
        The inverse normalized into [0, p), or 0 when y is 0, negative or
        not smaller than p.
    """
    if y == 0:
        return 0
    if y == 1:
        return 1
    if y < 0 or y >= p:
        return 0

    r_prev, r = p, y
    t_prev, t = 0, 1
    while r != 0:
        q = r_prev // r
        r_prev, r = r, r_prev - q * r
        t_prev, t = t, t_prev - q * t

    # t_prev is the Bezout coefficient of y
    while t_prev < 0:
        t_prev += p
    return t_prev
