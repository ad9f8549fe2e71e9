"""
Policy Models
=============
Configuration for password strength checks and generation.
"""

import os
from dataclasses import dataclass


@dataclass
class PolicyConfig:
    """Configuration for password policy."""
    min_length: int = int(os.environ.get("PASSWORD_MIN_LENGTH", "8"))
    min_length_no_extras: int = int(os.environ.get("PASSWORD_MIN_LENGTH_NO_EXTRAS", "12"))
    generated_length: int = int(os.environ.get("PASSWORD_GENERATED_LENGTH", "12"))
