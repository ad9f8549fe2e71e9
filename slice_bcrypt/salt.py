"""
Salt Generation
===============
Random salts rendered as `$2b$NN$<22 chars>` prefixes.
"""

import secrets
from typing import NamedTuple, Optional

import structlog

from .codec.crypt_string import SALT_BYTES, encode_salt
from .config import get_config
from .exceptions import EntropySourceError

logger = structlog.get_logger(__name__)


class Salt(NamedTuple):
    """A freshly generated salt: the encoded prefix and its raw bytes."""
    prefix: str
    raw: bytes


def generate(cost: Optional[int] = None) -> Salt:
    """
    Draw a new random salt.

    Args:
        cost: Rounds exponent, clamped into [4, 31]. Defaults to the
            configured default cost.

    Returns:
        Salt with the encoded prefix and the 16 raw bytes

    Raises:
        EntropySourceError: If the operating system random source fails
    """
    if cost is None:
        cost = get_config().default_cost

    try:
        raw = secrets.token_bytes(SALT_BYTES)
    except (OSError, NotImplementedError) as e:
        logger.error("bcrypt_entropy_failure", error=str(e))
        raise EntropySourceError("Random source unavailable") from e

    return Salt(prefix=encode_salt(raw, cost), raw=raw)


def generate_salt(cost: Optional[int] = None) -> str:
    """Generate a salt string for `hash_password`."""
    return generate(cost).prefix
