#!/usr/bin/env python3
"""
Simple demo script showing the inversive congruential generator.
"""

import time

from py_icg.config import settings
from py_icg.core import ICGPRNG, draw_normal, find_period, summarize
from py_icg.utils import random as icg_random
from py_icg.utils.log_config import configure_logging


def main():
    """Demonstrate ICG sampling."""
    configure_logging(settings.log_level, settings.log_format)

    print("Py-ICG Demo")
    print("=" * 40)

    prime, a, b = 15485863, 213, 64
    prng = ICGPRNG(prime, a, b, int(time.time()) % prime)
    print(f"\nGenerator: p={prng.p}, a={prng.a}, b={prng.b}, valid={prng.is_valid()}")

    print(f"  rand(100)            -> {prng.rand(100)}")
    print(f"  rand01()             -> {prng.rand01():.6f}")
    print(f"  rand_interval(20,25) -> {prng.rand_interval(20.0, 25.0):.6f}")
    print(f"  rand_std_norm()      -> {prng.rand_std_norm():.6f}")
    print(f"  rand_normal(5, 2)    -> {prng.rand_normal(5.0, 2.0):.6f}")

    print("\nNormal sample N(5, 2), 10000 draws:")
    print("-" * 30)
    summary = summarize(draw_normal(prng, 10000, mean=5.0, variance=2.0))
    print(f"  mean={summary.mean:.4f} variance={summary.variance:.4f}")
    print(f"  range=[{summary.minimum:.3f}, {summary.maximum:.3f}]")

    period = find_period(prng, 100000)
    print(f"\nCycle within 100000 draws: {period if period is not None else 'none'}")

    # Degenerate but valid parameters
    tiny = ICGPRNG(7, 3, 5, 1)
    print(f"\nFixed point p=7, a=3, b=5: {[tiny.rand() for _ in range(5)]}")

    # Invalid parameters degrade to zeros
    broken = ICGPRNG(4, 1, 2, 3)
    print(f"Invalid p=4: valid={broken.is_valid()}, rand()={broken.rand()}")

    print("\nShared generator:")
    print("-" * 30)
    icg_random.set_random_seed(2024)
    print(f"  rand(6) rolls: {[icg_random.rand(6) + 1 for _ in range(10)]}")
    print(f"  rand_std_norm(): {icg_random.rand_std_norm():.6f}")


if __name__ == "__main__":
    main()
