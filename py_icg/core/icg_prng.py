"""
Inversive congruential generator (ICG).

An ICG produces pseudorandom numbers according to

    NEXT_RAND = (a * CUR_RAND^-1 + b) % p

where p is a prime and a, b are integers less than p. The sequence has
useful statistical properties and feeds normally distributed samples via the
polar Box-Muller method.

Not suitable for cryptographic use.
"""

import math
import numbers
from typing import Any, Optional, Sequence

import structlog

from .errors import InvalidGeneratorError, NormalSamplingError
from .modular import is_prime, modular_inverse

logger = structlog.get_logger()

# Rejection threshold for the polar Box-Muller method; keeps -2*ln(q)/q finite
BOX_MULLER_EPS = 0.0001


def _as_int(value):
    """Convert integral values (including NumPy scalars) to Python int."""
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return int(value)
    return value


class ICGPRNG:
    """
    Inversive congruential pseudorandom number generator.

    Construction never fails. Inappropriate parameters produce an invalid
    generator whose sampling methods all return 0.

    Not thread-safe: every draw mutates the generator state.

    Usage:
        prng = ICGPRNG(15485863, 213, 64, int(time.time()) % 15485863)
        prng.rand(100)              # 0 <= n < 100
        prng.rand01()               # 0.0 <= x < 1.0
        prng.rand_interval(20, 25)  # 20.0 <= x < 25.0
        prng.rand_std_norm()        # N(0, 1)
        prng.rand_normal(5.0, 2.0)  # N(5, 2), second argument is the variance
    """

    def __init__(
        self,
        p: int,
        a: int,
        b: int,
        seed: int,
        *,
        clear_spare_on_reset: bool = True,
        max_normal_attempts: Optional[int] = None,
    ):
        """
        Initialize the generator.

        Args:
            p: Prime modulus, must be > 3
            a: Multiplier, 0 <= a < p
            b: Offset, 0 <= b < p
            seed: Start of the sequence, 0 <= seed < p. Never emitted itself.
            clear_spare_on_reset: Discard the cached Box-Muller value when
                reparametrizing or reseeding
            max_normal_attempts: Optional cap on rejection loop iterations
                in rand_std_norm(); None means unbounded
        """
        self.clear_spare_on_reset = clear_spare_on_reset
        self.max_normal_attempts = max_normal_attempts

        self._spare_normal = 0.0
        self._has_spare = False

        self._set_parameters(p, a, b, seed)

    def _set_parameters(self, p, a, b, seed):
        self._p = _as_int(p)
        self._a = _as_int(a)
        self._b = _as_int(b)
        self._seed = _as_int(seed)
        self._current = self._seed
        self.call_count = 0
        self._check_valid()

    def _check_valid(self) -> None:
        """
        Set the validity state according to the current parameters.

        Valid iff p is a prime > 3 and a, b, seed all lie in [0, p).
        """
        params = (self._p, self._a, self._b, self._seed)
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in params):
            self._valid = False
        else:
            p = self._p
            self._valid = (
                p > 3
                and is_prime(p)
                and 0 <= self._a < p
                and 0 <= self._b < p
                and 0 <= self._seed < p
            )

        if not self._valid:
            logger.warning(
                "Invalid ICG parameters, generator will only produce zeros",
                p=self._p,
                a=self._a,
                b=self._b,
                seed=self._seed,
            )

    def _reset_spare(self) -> None:
        if self.clear_spare_on_reset:
            self._has_spare = False
            self._spare_normal = 0.0

    def reparametrize(self, p: int, a: int, b: int, seed: int) -> bool:
        """
        Reset all generation parameters and restart at the new seed.

        Returns:
            True iff the new parameters form a valid combination.
        """
        self._set_parameters(p, a, b, seed)
        self._reset_spare()
        logger.debug(
            "ICG reparametrized", p=self._p, a=self._a, b=self._b, valid=self._valid
        )
        return self._valid

    def reseed(self, seed: int) -> bool:
        """
        Reset the seed and restart the cycle there.

        Returns:
            True if the generator is valid after reseeding.
        """
        self._set_parameters(self._p, self._a, self._b, seed)
        self._reset_spare()
        logger.debug("ICG reseeded", valid=self._valid)
        return self._valid

    def is_valid(self) -> bool:
        """True iff this generator can produce random numbers."""
        return self._valid

    def ensure_valid(self) -> "ICGPRNG":
        """Raise InvalidGeneratorError unless the generator is valid."""
        if not self._valid:
            raise InvalidGeneratorError(self._p, self._a, self._b, self._seed)
        return self

    @property
    def p(self) -> int:
        return self._p

    @property
    def a(self) -> int:
        return self._a

    @property
    def b(self) -> int:
        return self._b

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def current(self) -> int:
        """Last raw value produced (the seed before the first draw)."""
        return self._current

    @property
    def has_spare(self) -> bool:
        """Whether a cached standard normal value is waiting to be returned."""
        return self._has_spare

    def _next_raw(self) -> int:
        if not self._valid:
            return 0

        self.call_count += 1

        # Zero has no inverse
        if self._current == 0:
            self._current = self._b
            return self._current

        inv = modular_inverse(self._current, self._p)
        self._current = (self._a * inv + self._b) % self._p
        return self._current

    def rand(self, range_: Optional[int] = None) -> int:
        """
        Generate a pseudorandom integer.

        Args:
            range_: Optional exclusive upper bound. Without it the raw ICG
                value in [0, p) is returned.

        Returns:
            An integer in [0, p), or in [0, range_) when range_ is given.
            Always 0 for an invalid generator.
        """
        if range_ is None:
            return self._next_raw()
        # Only roughly uniform, derived from the float transform
        return int(self.rand01() * range_)

    def rand01(self) -> float:
        """Generate a float in [0, 1)."""
        if not self._valid:
            return 0.0
        return float(self._next_raw()) / float(self._p)

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        return self.rand01()

    def rand_interval(self, low: float, high: float) -> float:
        """
        Generate a float in [min(low, high), max(low, high)).

        A degenerate interval (low == high) always yields low.
        """
        if not self._valid:
            return 0.0

        if low == high:
            return low
        if high < low:
            low, high = high, low

        return self.rand01() * (high - low) + low

    def rand_std_norm(self) -> float:
        """
        Generate a standard normally distributed value, Z ~ N(0, 1).

        Uses the polar Box-Muller method. Each accepted point yields two
        independent values; the second is cached and returned by the next
        call.

        The rejection loop is unbounded unless max_normal_attempts is set.
        It terminates with probability 1 for a non-degenerate sequence, but
        a pathological parameter choice can keep it spinning.

        Raises:
            NormalSamplingError: If max_normal_attempts is exceeded.
        """
        # An invalid generator only yields u1 = u2 = 0, which is never accepted
        if not self._valid:
            return 0.0

        if self._has_spare:
            self._has_spare = False
            return self._spare_normal

        attempts = 0
        while True:
            if self.max_normal_attempts is not None and attempts >= self.max_normal_attempts:
                logger.error(
                    "Box-Muller rejection loop exhausted",
                    attempts=attempts,
                    p=self._p,
                    a=self._a,
                    b=self._b,
                )
                raise NormalSamplingError(attempts)
            attempts += 1

            u1 = self.rand_interval(-1.0, 1.0)
            u2 = self.rand_interval(-1.0, 1.0)
            q = u1 * u1 + u2 * u2
            if BOX_MULLER_EPS < q <= 1.0:
                break

        r = math.sqrt(-2.0 * math.log(q) / q)

        self._spare_normal = r * u2
        self._has_spare = True
        return r * u1

    def rand_normal(self, mu: float, ss: float) -> float:
        """
        Generate a normally distributed value.

        Args:
            mu: Mean of the distribution
            ss: Variance of the distribution (not the standard deviation).
                Negative values yield NaN.

        Returns:
            A roughly N(mu, ss) distributed number, or 0.0 for an invalid
            generator.
        """
        if not self._valid:
            return 0.0
        sigma = math.sqrt(ss) if ss >= 0 else math.nan
        return sigma * self.rand_std_norm() + mu

    def choice(self, seq: Sequence[Any]) -> Any:
        """Choose a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self.rand(len(seq))]

    def __repr__(self) -> str:
        return (
            f"ICGPRNG(p={self._p}, a={self._a}, b={self._b}, seed={self._seed}, "
            f"valid={self._valid})"
        )
