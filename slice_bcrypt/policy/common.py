"""
Common Passwords
================
Process-wide set of very common passwords, loaded once on first use.
"""

import threading
from importlib import resources
from typing import FrozenSet, Optional

import structlog

logger = structlog.get_logger(__name__)

_RESOURCE = "common_passwords.txt"

_common: Optional[FrozenSet[str]] = None
_load_lock = threading.Lock()


def _load() -> FrozenSet[str]:
    text = resources.files(__package__).joinpath(_RESOURCE).read_text(encoding="utf-8")
    words = frozenset(line.strip() for line in text.splitlines() if line.strip())
    logger.debug("common_passwords_loaded", count=len(words))
    return words


def get_common_passwords() -> FrozenSet[str]:
    """Get the common-password set, loading it on first call."""
    global _common
    if _common is None:
        with _load_lock:
            if _common is None:
                _common = _load()
    return _common


def is_common_password(password: str) -> bool:
    """True if the password appears in the common-password list."""
    return password in get_common_passwords()
