"""
Password Generator
==================
Random passwords guaranteed to contain a digit and a punctuation symbol.
"""

import secrets
import string
from typing import List, Optional

from .models import PolicyConfig

PUNCTUATION = ",./!@#$%^&*();:?<>"
ALPHABET = PUNCTUATION + string.ascii_uppercase + string.ascii_lowercase + string.digits

# Index ranges within ALPHABET
_FIRST_LETTER = len(PUNCTUATION)  # 18
_FIRST_DIGIT = len(ALPHABET) - len(string.digits)  # 70


def _draw(length: int) -> List[int]:
    return [secrets.randbelow(len(ALPHABET)) for _ in range(length)]


def _acceptable(codes: List[int]) -> bool:
    return (
        any(code < _FIRST_LETTER for code in codes)
        and any(code >= _FIRST_DIGIT for code in codes)
    )


def generate_password(length: Optional[int] = None, config: Optional[PolicyConfig] = None) -> str:
    """
    Generate a random password.

    Candidates are drawn uniformly from ALPHABET and rejected until one
    contains at least one punctuation symbol and one digit.

    Args:
        length: Number of characters (default 12)
        config: Policy configuration supplying the default length

    Returns:
        Password string
    """
    if length is None:
        length = (config or PolicyConfig()).generated_length
    if length < 2:
        raise ValueError("Password length must be at least 2")

    while True:
        codes = _draw(length)
        if _acceptable(codes):
            return "".join(ALPHABET[code] for code in codes)
