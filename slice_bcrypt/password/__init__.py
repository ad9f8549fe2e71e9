"""
Password Hashing
================
bcrypt password hashing, verification and timing equalization.

The async functions resume the hash job slice by slice and hand control
back to the event loop in between, so hashing never blocks other tasks
for longer than the configured slice budget. The *_sync variants run the
same job without yielding.
"""

# Re-export all public APIs
from .async_ops import (
    hash_password,
    verify_password,
    dummy_hash,
    verify_and_upgrade,
    run_job,
)
from .utils import needs_rehash
from .sync_ops import hash_password_sync, verify_password_sync, dummy_hash_sync
from .hasher import create_job, DUMMY_PASSWORD, DUMMY_SALT_BODY

__all__ = [
    # Async Operations
    "hash_password",
    "verify_password",
    "dummy_hash",
    "verify_and_upgrade",
    "run_job",
    # Utils
    "needs_rehash",
    # Sync Operations
    "hash_password_sync",
    "verify_password_sync",
    "dummy_hash_sync",
    # Hasher
    "create_job",
    "DUMMY_PASSWORD",
    "DUMMY_SALT_BODY",
]
