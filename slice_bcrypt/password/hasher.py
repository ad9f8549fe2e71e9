"""
Password Hasher
===============
Job construction shared by the sync and async front ends.
"""

import hmac
from typing import Optional, Union

from ..codec import CryptString, decode
from ..config import BcryptConfig, get_config
from ..engine import HashJob
from ..exceptions import ParseError
from ..salt import generate_salt

# Fixed inputs for dummy_hash. The salt body is arbitrary but constant;
# the cost is taken from the configuration so timing matches real hashes.
DUMMY_PASSWORD = "slice-bcrypt dummy password"
DUMMY_SALT_BODY = "CCCCCCCCCCCCCCCCCCCCC."


def create_job(
    password: Union[str, bytes],
    salt: Optional[str] = None,
    cost: Optional[int] = None,
    config: Optional[BcryptConfig] = None,
) -> HashJob:
    """
    Create a hash job, generating a salt if none is given.

    Args:
        password: Plain text password
        salt: Salt string or existing crypt string
        cost: Cost for a generated salt (ignored when `salt` is given)
        config: Engine configuration

    Returns:
        A HashJob in the CREATED state
    """
    config = config or get_config()
    if salt is None:
        salt = generate_salt(config.default_cost if cost is None else cost)
    return HashJob(password, salt, config=config)


def create_dummy_job(config: Optional[BcryptConfig] = None) -> HashJob:
    """Job for the fixed dummy password at the configured cost."""
    config = config or get_config()
    salt = f"$2b${config.default_cost:02d}${DUMMY_SALT_BODY}"
    return HashJob(DUMMY_PASSWORD, salt, config=config)


def parse_stored(hash: Union[str, bytes]) -> CryptString:
    """
    Parse a stored crypt string, which must include a digest.

    Raises:
        BcryptError: If the hash is malformed or is only a salt
    """
    stored = decode(hash)
    if stored.raw_digest is None:
        raise ParseError("Stored hash has no digest", value=str(stored))
    return stored


def digests_match(computed: str, stored: CryptString) -> bool:
    """Compare the digest of a fresh hash with a stored one in constant time."""
    return hmac.compare_digest(decode(computed).raw_digest, stored.raw_digest)
