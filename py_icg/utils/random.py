"""
Process-wide random number generation.

This module owns a single shared ICG instance for callers who just want
random numbers without choosing primes and seeds. The generator is created
on first use from the settings (by default p=15485863, a=213, b=64, seeded
from the current time) and lives until the process exits.

All functions serialize access to the shared instance with a lock.
"""

import threading
import time
from typing import Optional

import structlog

from ..config.config import settings
from ..core.icg_prng import ICGPRNG

logger = structlog.get_logger()

# Global PRNG instance
_prng = None
_lock = threading.RLock()


def _reduce_seed(seed: int, prime: int) -> int:
    # A non-positive prime is left to ICGPRNG to flag as invalid
    return seed % prime if prime > 0 else seed


def _create_prng(seed: Optional[int] = None) -> ICGPRNG:
    prime = settings.prime
    if seed is None:
        seed = settings.seed if settings.seed is not None else int(time.time())

    prng = ICGPRNG(
        prime,
        settings.a,
        settings.b,
        _reduce_seed(seed, prime),
        clear_spare_on_reset=settings.clear_spare_on_reset,
        max_normal_attempts=settings.max_normal_attempts,
    )
    logger.info("Shared ICG initialized", p=prime, valid=prng.is_valid())
    return prng


def get_prng() -> ICGPRNG:
    """
    Get the shared ICG instance, creating it on first call.

    Returns:
        ICGPRNG instance
    """
    global _prng
    if _prng is None:
        with _lock:
            if _prng is None:
                _prng = _create_prng()
    return _prng


def set_random_seed(seed: int) -> None:
    """
    Restart the shared generator's sequence at the given seed.

    The seed is reduced modulo the shared prime so any non-negative integer
    is accepted.

    Args:
        seed: Seed integer to use
    """
    global _prng
    with _lock:
        if _prng is None:
            _prng = _create_prng(seed)
        else:
            _prng.reseed(_reduce_seed(seed, _prng.p))


def reset_prng() -> None:
    """Drop the shared generator so the next call rebuilds it from settings."""
    global _prng
    with _lock:
        _prng = None


def rand(range_: Optional[int] = None) -> int:
    """
    Random integer in [0, range_), or the raw value in [0, p) without range_.
    """
    prng = get_prng()
    with _lock:
        return prng.rand(range_)


def rand01() -> float:
    """Random float in [0, 1)."""
    prng = get_prng()
    with _lock:
        return prng.rand01()


def rand_interval(low: float, high: float) -> float:
    """Random float in [low, high)."""
    prng = get_prng()
    with _lock:
        return prng.rand_interval(low, high)


def rand_normal(mu: float, ss: float) -> float:
    """Random float from N(mu, ss); ss is the variance."""
    prng = get_prng()
    with _lock:
        return prng.rand_normal(mu, ss)


def rand_std_norm() -> float:
    """Random float from the standard normal distribution."""
    prng = get_prng()
    with _lock:
        return prng.rand_std_norm()
