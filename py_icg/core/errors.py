"""Exceptions raised by the opt-in strict paths of the generator."""


class ICGError(Exception):
    """Base class for generator errors."""


class InvalidGeneratorError(ICGError, ValueError):
    """Raised by ICGPRNG.ensure_valid() when the parameters are unusable."""

    def __init__(self, p, a, b, seed):
        self.p = p
        self.a = a
        self.b = b
        self.seed = seed
        super().__init__(
            f"Invalid ICG parameters: p={p}, a={a}, b={b}, seed={seed} "
            "(p must be a prime > 3 and 0 <= a, b, seed < p)"
        )


class NormalSamplingError(ICGError, RuntimeError):
    """Raised when the Box-Muller rejection loop exceeds its attempt limit."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(
            f"No point accepted inside the unit disk after {attempts} attempts"
        )
