"""
Async Password Hashing
======================
Event-loop friendly hashing: the job is resumed slice by slice and the
loop gets control back between slices.
"""

import asyncio
from typing import Optional, Tuple, Union

import structlog

from .hasher import create_dummy_job, create_job, digests_match, parse_stored
from ..config import BcryptConfig
from ..engine import Done, HashJob

logger = structlog.get_logger(__name__)


async def run_job(job: HashJob) -> str:
    """Drive a job to completion, yielding to the event loop after each slice."""
    with job:
        while True:
            result = job.resume()
            if isinstance(result, Done):
                return result.crypt_string
            await asyncio.sleep(0)


async def hash_password(
    password: Union[str, bytes],
    salt: Optional[str] = None,
    cost: Optional[int] = None,
    config: Optional[BcryptConfig] = None,
) -> str:
    """
    Hash a password with bcrypt.

    Args:
        password: Plain text password
        salt: Salt string from generate_salt(); generated if omitted
        cost: Cost for a generated salt
        config: Engine configuration

    Returns:
        Crypt string (includes version, cost, salt, and digest)
    """
    job = create_job(password, salt=salt, cost=cost, config=config)
    return await run_job(job)


async def verify_password(
    password: Union[str, bytes],
    hash: Union[str, bytes],
    config: Optional[BcryptConfig] = None,
) -> bool:
    """
    Verify a password against a stored crypt string.

    Args:
        password: Plain text password to verify
        hash: Stored crypt string

    Returns:
        True if password matches, False otherwise

    Raises:
        BcryptError: If the stored hash is malformed
    """
    stored = parse_stored(hash)
    computed = await hash_password(password, salt=stored.prefix, config=config)
    matched = digests_match(computed, stored)
    if not matched:
        logger.debug("bcrypt_verify_mismatch", cost=stored.cost)
    return matched


async def dummy_hash(config: Optional[BcryptConfig] = None) -> None:
    """Async version of dummy_hash_sync."""
    await run_job(create_dummy_job(config))


async def verify_and_upgrade(
    password: Union[str, bytes],
    hash: str,
    config: Optional[BcryptConfig] = None,
) -> Tuple[bool, Optional[str]]:
    """
    Verify password and return new hash if upgrade is needed.

    This is the recommended function for login flows.

    Args:
        password: Plain text password
        hash: Existing crypt string

    Returns:
        Tuple of (is_valid, new_hash_or_none)
    """
    is_valid = await verify_password(password, hash, config=config)

    if not is_valid:
        return False, None

    from .utils import needs_rehash
    if needs_rehash(hash, config=config):
        new_hash = await hash_password(password, config=config)
        logger.info("bcrypt_hash_upgraded")
        return True, new_hash

    return True, None
