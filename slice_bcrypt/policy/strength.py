"""
Password Strength
=================
Length, character-class and common-password checks.
"""

from typing import Optional, Tuple

from .common import is_common_password
from .models import PolicyConfig

DIGITS = "0123456789"
PUNCTUATION = " ,./!@#$%^&*();:?<>"

TOO_SHORT = "The password should be at least {min_length} characters long."
MISSING_EXTRA_CHARS = "The password should contain at least one number and one punctuation character."
TOO_COMMON = "The password you have chosen is very common. Please choose another one."


def has_digit_and_punctuation(password: str) -> bool:
    """Spaces count as punctuation."""
    return (
        any(c in DIGITS for c in password)
        and any(c in PUNCTUATION for c in password)
    )


def check_password_strength(
    password: str,
    min_length: Optional[int] = None,
    extra_chars: bool = True,
    common: bool = True,
    config: Optional[PolicyConfig] = None,
) -> Tuple[bool, Optional[str]]:
    """
    Check the strength of a password.

    Args:
        password: Password to check
        min_length: Minimum length; defaults to 8 when `extra_chars` is
            set and 12 otherwise
        extra_chars: Require at least one digit and one punctuation character
        common: Reject passwords from the common-password list
        config: Policy configuration supplying the default lengths

    Returns:
        Tuple of (ok, message); message is None when the password passes
    """
    config = config or PolicyConfig()
    if min_length is None:
        min_length = config.min_length if extra_chars else config.min_length_no_extras

    if len(password) < min_length:
        return False, TOO_SHORT.format(min_length=min_length)

    if extra_chars and not has_digit_and_punctuation(password):
        return False, MISSING_EXTRA_CHARS

    if common and is_common_password(password):
        return False, TOO_COMMON

    return True, None
