"""Tests for the process-wide generator."""

import threading

import pytest

from py_icg.config.config import Settings
from py_icg.core.icg_prng import ICGPRNG
from py_icg.utils import random as icg_random


@pytest.fixture(autouse=True)
def fresh_prng():
    """Start every test without a shared generator."""
    icg_random.reset_prng()
    yield
    icg_random.reset_prng()


@pytest.fixture
def fixed_settings(monkeypatch):
    config = Settings(prime=15485863, a=213, b=64, seed=42)
    monkeypatch.setattr(icg_random, "settings", config)
    return config


class TestSharedInstance:
    """Test lazy one-time initialization."""

    def test_default_parameters(self):
        prng = icg_random.get_prng()

        assert isinstance(prng, ICGPRNG)
        assert prng.is_valid()
        assert (prng.p, prng.a, prng.b) == (15485863, 213, 64)
        assert 0 <= prng.seed < prng.p

    def test_same_instance(self):
        assert icg_random.get_prng() is icg_random.get_prng()

    def test_initialized_once_across_threads(self):
        results = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            results.append(icg_random.get_prng())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 8
        assert all(r is results[0] for r in results)

    def test_time_seed(self, monkeypatch):
        monkeypatch.setattr(icg_random, "settings", Settings(prime=7, a=3, b=5))
        monkeypatch.setattr(icg_random.time, "time", lambda: 15.9)

        # 15 % 7 == 1
        assert icg_random.get_prng().seed == 1

    def test_settings_seed(self, fixed_settings):
        assert icg_random.get_prng().seed == 42

    def test_settings_passed_through(self, monkeypatch):
        monkeypatch.setattr(
            icg_random,
            "settings",
            Settings(clear_spare_on_reset=False, max_normal_attempts=50),
        )
        prng = icg_random.get_prng()

        assert prng.clear_spare_on_reset is False
        assert prng.max_normal_attempts == 50


class TestDelegation:
    """Test the module-level sampling functions."""

    def test_matches_private_generator(self, fixed_settings):
        ref = ICGPRNG(15485863, 213, 64, 42)

        assert icg_random.rand() == ref.rand()
        assert icg_random.rand(100) == ref.rand(100)
        assert icg_random.rand01() == ref.rand01()
        assert icg_random.rand_interval(20.0, 25.0) == ref.rand_interval(20.0, 25.0)
        assert icg_random.rand_std_norm() == ref.rand_std_norm()
        assert icg_random.rand_normal(5.0, 2.0) == ref.rand_normal(5.0, 2.0)

    def test_ranges(self):
        for _ in range(200):
            assert 0 <= icg_random.rand(10) < 10
            assert 0.0 <= icg_random.rand01() < 1.0
            assert 20.0 <= icg_random.rand_interval(25.0, 20.0) < 25.0

    def test_set_random_seed_is_reproducible(self):
        icg_random.set_random_seed(1234)
        first = [icg_random.rand() for _ in range(10)]

        icg_random.set_random_seed(1234)
        assert [icg_random.rand() for _ in range(10)] == first

    def test_set_random_seed_reduces_modulo_prime(self):
        icg_random.set_random_seed(15485863 + 5)
        assert icg_random.get_prng().seed == 5

    def test_set_random_seed_reuses_instance(self):
        prng = icg_random.get_prng()
        icg_random.set_random_seed(99)

        assert icg_random.get_prng() is prng
        assert prng.seed == 99


class TestInvalidSettings:
    """A shared generator built from unusable settings degrades to zeros."""

    @pytest.mark.parametrize("prime", [0, -7])
    def test_non_positive_prime(self, monkeypatch, prime):
        monkeypatch.setattr(icg_random, "settings", Settings(prime=prime, a=1, b=1, seed=5))

        assert icg_random.rand() == 0
        assert icg_random.rand(10) == 0
        assert icg_random.rand01() == 0.0
        assert icg_random.rand_std_norm() == 0.0
        assert not icg_random.get_prng().is_valid()

    def test_set_random_seed_with_zero_prime(self, monkeypatch):
        monkeypatch.setattr(icg_random, "settings", Settings(prime=0, a=1, b=1))

        icg_random.set_random_seed(42)
        assert icg_random.get_prng().seed == 42

        icg_random.set_random_seed(43)
        assert icg_random.get_prng().seed == 43
        assert icg_random.rand() == 0
