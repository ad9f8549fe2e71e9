"""
Password Policy
===============
Strength checks, random password generation and the common-password list.

These consume nothing from the hashing engine.
"""

from .models import PolicyConfig
from .strength import check_password_strength, has_digit_and_punctuation
from .generator import generate_password
from .common import get_common_passwords, is_common_password

__all__ = [
    # Models
    "PolicyConfig",
    # Strength
    "check_password_strength",
    "has_digit_and_punctuation",
    # Generator
    "generate_password",
    # Common passwords
    "get_common_passwords",
    "is_common_password",
]
