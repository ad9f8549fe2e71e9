"""
Bcrypt Configuration
====================
Tunable defaults for hashing cost and time slicing.
"""

import os
from dataclasses import dataclass
from functools import lru_cache

from .exceptions import InvalidCostError

MIN_COST = 4
MAX_COST = 31


@dataclass
class BcryptConfig:
    """Configuration for the hashing engine."""
    default_cost: int = int(os.environ.get("BCRYPT_DEFAULT_COST", "12"))
    slice_budget_ms: float = float(os.environ.get("BCRYPT_SLICE_BUDGET_MS", "1.0"))
    initial_batch_size: int = int(os.environ.get("BCRYPT_INITIAL_BATCH_SIZE", "1"))

    def __post_init__(self):
        if not MIN_COST <= self.default_cost <= MAX_COST:
            raise InvalidCostError(
                f"Cost must be between {MIN_COST} and {MAX_COST}",
                value=self.default_cost,
            )
        if self.slice_budget_ms <= 0:
            raise ValueError("slice_budget_ms must be positive")
        if self.initial_batch_size < 1:
            raise ValueError("initial_batch_size must be at least 1")

    @property
    def slice_budget_seconds(self) -> float:
        return self.slice_budget_ms / 1000.0


@lru_cache(maxsize=1)
def get_config() -> BcryptConfig:
    """Get cached config instance."""
    return BcryptConfig()
