"""
Sync Password Operations
========================
Blocking password operations that run every resumption back to back.
"""

from typing import Optional, Union

import structlog

from .hasher import create_dummy_job, create_job, digests_match, parse_stored
from ..config import BcryptConfig
from ..engine import run_to_completion

logger = structlog.get_logger(__name__)


def hash_password_sync(
    password: Union[str, bytes],
    salt: Optional[str] = None,
    cost: Optional[int] = None,
    config: Optional[BcryptConfig] = None,
) -> str:
    """
    Hash a password, blocking until done (use async version when possible).

    Args:
        password: Plain text password
        salt: Salt string from generate_salt(); generated if omitted
        cost: Cost for a generated salt
        config: Engine configuration

    Returns:
        60-character crypt string
    """
    job = create_job(password, salt=salt, cost=cost, config=config)
    return run_to_completion(job)


def verify_password_sync(
    password: Union[str, bytes],
    hash: Union[str, bytes],
    config: Optional[BcryptConfig] = None,
) -> bool:
    """
    Verify a password against a stored crypt string.

    Re-hashes with the stored salt and cost and compares the digests in
    constant time.

    Raises:
        BcryptError: If the stored hash is malformed
    """
    stored = parse_stored(hash)
    computed = hash_password_sync(password, salt=stored.prefix, config=config)
    matched = digests_match(computed, stored)
    if not matched:
        logger.debug("bcrypt_verify_mismatch", cost=stored.cost)
    return matched


def dummy_hash_sync(config: Optional[BcryptConfig] = None) -> None:
    """
    Spend the time of one full hash and discard the result.

    Call this when no stored hash exists for a login attempt so the
    response takes as long as a real verification.
    """
    run_to_completion(create_dummy_job(config))
