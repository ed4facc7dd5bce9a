from pathlib import Path
from typing import Optional

from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings

import os

# Explicitly load .env for local/dev environments only if values are missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Settings for the shared generator, pulled from ICG_* environment variables."""

    # Shared generator parameters
    prime: int = Field(default=15485863, description="Prime modulus of the shared generator")
    a: int = Field(default=213, description="Multiplier parameter, must be < prime")
    b: int = Field(default=64, description="Offset parameter, must be < prime")
    seed: Optional[int] = Field(
        default=None, description="Fixed seed; defaults to the current time modulo prime"
    )

    # Sampling behaviour
    clear_spare_on_reset: bool = Field(
        default=True, description="Discard the cached Box-Muller value on reseed/reparametrize"
    )
    max_normal_attempts: Optional[int] = Field(
        default=None, description="Cap on Box-Muller rejection iterations (None = unbounded)"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    class Config:
        env_prefix = "ICG_"
        extra = "ignore"


# Instantiate singleton settings object
settings = Settings()
