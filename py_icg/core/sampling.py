"""
Batch sampling and sequence analysis for ICG generators.

Draws are collected into NumPy arrays so sample statistics can be checked
with vectorized operations.
"""

import numpy as np
import structlog
from dataclasses import dataclass
from typing import Optional

from .icg_prng import ICGPRNG

logger = structlog.get_logger()


@dataclass
class SampleSummary:
    """Summary statistics of a batch of samples."""

    count: int
    mean: float
    variance: float
    minimum: float
    maximum: float


def _check_size(size: int) -> None:
    if size <= 0:
        raise ValueError(f"size must be positive, got {size}")


def draw_raw(prng: ICGPRNG, size: int) -> np.ndarray:
    """
    Draw raw ICG values in [0, p).

    The array is int64 while p fits, uint64 up to 2**64 and object beyond.
    """
    _check_size(size)
    if prng.p <= np.iinfo(np.int64).max:
        dtype = np.int64
    elif prng.p <= np.iinfo(np.uint64).max + 1:
        dtype = np.uint64
    else:
        dtype = object
    return np.array([prng.rand() for _ in range(size)], dtype=dtype)


def draw_uniform(
    prng: ICGPRNG, size: int, low: float = 0.0, high: float = 1.0
) -> np.ndarray:
    """Draw uniform floats in [low, high)."""
    _check_size(size)
    samples = np.empty(size, dtype=np.float64)
    for i in range(size):
        samples[i] = prng.rand_interval(low, high)
    return samples


def draw_normal(
    prng: ICGPRNG, size: int, mean: float = 0.0, variance: float = 1.0
) -> np.ndarray:
    """Draw normally distributed floats with the given mean and variance."""
    _check_size(size)
    samples = np.empty(size, dtype=np.float64)
    for i in range(size):
        samples[i] = prng.rand_normal(mean, variance)
    return samples


def summarize(samples: np.ndarray) -> SampleSummary:
    """Compute count, mean, sample variance and range of a 1-D array."""
    samples = np.asarray(samples, dtype=np.float64)
    if samples.size == 0:
        raise ValueError("Cannot summarize an empty sample")

    return SampleSummary(
        count=int(samples.size),
        mean=float(np.mean(samples)),
        variance=float(np.var(samples, ddof=1)) if samples.size > 1 else 0.0,
        minimum=float(np.min(samples)),
        maximum=float(np.max(samples)),
    )


def find_period(prng: ICGPRNG, max_steps: int) -> Optional[int]:
    """
    Find the cycle length reached from the generator's current state.

    Works on a copy built from the generator's parameters, so the given
    generator is not advanced.

    Args:
        prng: Generator to inspect
        max_steps: Maximum number of raw values to draw

    Returns:
        The length of the cycle the sequence falls into, or None if no value
        repeats within max_steps draws (or the generator is invalid).
    """
    if max_steps <= 0:
        raise ValueError(f"max_steps must be positive, got {max_steps}")
    if not prng.is_valid():
        return None

    probe = ICGPRNG(prng.p, prng.a, prng.b, prng.current)
    seen = {}
    for step in range(max_steps):
        value = probe.rand()
        if value in seen:
            period = step - seen[value]
            logger.debug("Cycle detected", period=period, steps=step + 1)
            return period
        seen[value] = step

    return None
