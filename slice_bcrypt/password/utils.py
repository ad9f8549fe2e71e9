"""
Password Utilities
==================
Utility functions for password management.
"""

from typing import Optional

from ..codec import decode
from ..config import BcryptConfig, get_config
from ..exceptions import BcryptError


def needs_rehash(hash: str, config: Optional[BcryptConfig] = None) -> bool:
    """
    Check if a hash needs to be upgraded.

    Returns True if:
    - Hash is a legacy $2a$ hash
    - Hash cost is below the configured default
    - Hash cannot be parsed

    Args:
        hash: The crypt string to check
        config: Engine configuration

    Returns:
        True if the hash should be re-computed
    """
    if not hash:
        return True

    config = config or get_config()
    try:
        parsed = decode(hash)
    except BcryptError:
        return True

    if parsed.minor != "b":
        return True
    return parsed.cost < config.default_cost
