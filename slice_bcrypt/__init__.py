"""
slice-bcrypt
============
bcrypt password hashing as a resumable, time-sliced job.

Each resumption of a hash job runs only as many key-expansion rounds as
fit in a small time budget, so hashing can share a thread or event loop
with other work. Blocking and asyncio front ends are provided on top.
"""

__version__ = "0.1.0"

# Errors
from slice_bcrypt.exceptions import (
    BcryptError,
    ParseError,
    UnsupportedVersionError,
    InvalidCostError,
    InvalidSaltError,
    EntropySourceError,
    JobStateError,
)

# Configuration
from slice_bcrypt.config import BcryptConfig, get_config

# Logging
from slice_bcrypt.logging_setup import setup_logging

# Codec
from slice_bcrypt.codec import CryptString, decode, encode_salt

# Salt
from slice_bcrypt.salt import Salt, generate, generate_salt

# Engine
from slice_bcrypt.engine import (
    HashJob,
    JobState,
    Pending,
    Done,
    SliceController,
    resume,
)

# Erasure
from slice_bcrypt.erase import secure_erase

# Password Hashing
from slice_bcrypt.password import (
    hash_password,
    verify_password,
    dummy_hash,
    verify_and_upgrade,
    needs_rehash,
    hash_password_sync,
    verify_password_sync,
    dummy_hash_sync,
)

# Policy
from slice_bcrypt.policy import (
    PolicyConfig,
    check_password_strength,
    generate_password,
    is_common_password,
)

__all__ = [
    # Errors
    "BcryptError",
    "ParseError",
    "UnsupportedVersionError",
    "InvalidCostError",
    "InvalidSaltError",
    "EntropySourceError",
    "JobStateError",
    # Configuration
    "BcryptConfig",
    "get_config",
    # Logging
    "setup_logging",
    # Codec
    "CryptString",
    "decode",
    "encode_salt",
    # Salt
    "Salt",
    "generate",
    "generate_salt",
    # Engine
    "HashJob",
    "JobState",
    "Pending",
    "Done",
    "SliceController",
    "resume",
    # Erasure
    "secure_erase",
    # Password Hashing
    "hash_password",
    "verify_password",
    "dummy_hash",
    "verify_and_upgrade",
    "needs_rehash",
    "hash_password_sync",
    "verify_password_sync",
    "dummy_hash_sync",
    # Policy
    "PolicyConfig",
    "check_password_strength",
    "generate_password",
    "is_common_password",
]
