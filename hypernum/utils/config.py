"""
Settings read from the environment and an optional .env file.
"""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_PRECISION = 53
DEFAULT_SEED = 20160101
DEFAULT_NILPOTENT_STEPS = 8


def load_dotenv(env_path: str | None = None) -> None:
    """Load key=value pairs from a .env file into os.environ (non-destructive for existing keys)."""
    path = Path(env_path) if env_path else Path.cwd() / ".env"
    if not path.exists():
        return
    try:
        with path.open("r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                if "=" not in line:
                    continue
                key, value = line.split("=", 1)
                key = key.strip()
                value = value.strip().strip('"').strip("'")
                os.environ.setdefault(key, value)
    except OSError:
        # An unreadable .env leaves the environment as it was
        return


@dataclass(frozen=True)
class Settings:
    precision: int = DEFAULT_PRECISION
    seed: int = DEFAULT_SEED
    nilpotent_steps: int = DEFAULT_NILPOTENT_STEPS


def _positive_int(name: str, default: int) -> int:
    value = int(os.getenv(name, default))
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def get_settings() -> Settings:
    """
    Effective settings from the environment.

    HYPERNUM_PRECISION        mantissa bits for scalars (default 53)
    HYPERNUM_SEED             seed for random sampling (default 20160101)
    HYPERNUM_NILPOTENT_STEPS  power limit for nilpotency checks (default 8)
    """
    return Settings(
        precision=_positive_int("HYPERNUM_PRECISION", DEFAULT_PRECISION),
        seed=int(os.getenv("HYPERNUM_SEED", DEFAULT_SEED)),
        nilpotent_steps=_positive_int("HYPERNUM_NILPOTENT_STEPS", DEFAULT_NILPOTENT_STEPS),
    )
