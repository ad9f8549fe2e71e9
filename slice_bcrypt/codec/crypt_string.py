"""
Crypt String Codec
==================
Parsing and rendering of `$2<minor>$<cost>$<salt><digest>` strings.
"""

from dataclasses import dataclass
from typing import Optional, Union

from . import bcrypt64
from ..config import MIN_COST, MAX_COST
from ..exceptions import (
    InvalidCostError,
    InvalidSaltError,
    ParseError,
    UnsupportedVersionError,
)

VERSION = "2"
MINOR_VERSIONS = ("a", "b")
DEFAULT_MINOR = "b"

SALT_BYTES = 16
DIGEST_BYTES = 23  # 24-byte ciphertext minus its last byte
SALT_CHARS = bcrypt64.encoded_length(SALT_BYTES)      # 22
DIGEST_CHARS = bcrypt64.encoded_length(DIGEST_BYTES)  # 31
PREFIX_CHARS = 7                                       # "$2b$12$"


@dataclass(frozen=True)
class CryptString:
    """A parsed crypt string. `raw_digest` is None for a bare salt."""
    version: str
    minor: str
    cost: int
    raw_salt: bytes
    raw_digest: Optional[bytes] = None

    @property
    def rounds(self) -> int:
        return 1 << self.cost

    @property
    def prefix(self) -> str:
        """The `$2b$NN$<salt>` part, usable as a salt string."""
        return (
            f"${self.version}{self.minor}${self.cost:02d}$"
            f"{bcrypt64.encode(self.raw_salt)}"
        )

    def __str__(self) -> str:
        if self.raw_digest is None:
            return self.prefix
        return self.prefix + bcrypt64.encode(self.raw_digest)


def clamp_cost(cost: int) -> int:
    """Clamp a cost factor into the supported range."""
    return max(MIN_COST, min(cost, MAX_COST))


def encode_salt(raw_salt: bytes, cost: int) -> str:
    """
    Render a `$2b$` salt prefix.

    Args:
        raw_salt: 16 random bytes
        cost: Rounds exponent, clamped into [4, 31]

    Returns:
        29-character salt string, e.g. "$2b$12$<22 chars>"
    """
    if len(raw_salt) != SALT_BYTES:
        raise InvalidSaltError(
            f"Salt must be {SALT_BYTES} bytes",
            value=len(raw_salt),
        )
    cost = clamp_cost(cost)
    return f"${VERSION}{DEFAULT_MINOR}${cost:02d}${bcrypt64.encode(raw_salt)}"


def render(minor: str, cost: int, raw_salt: bytes, raw_digest: bytes) -> str:
    """Render a complete 60-character crypt string."""
    return (
        f"${VERSION}{minor}${cost:02d}$"
        f"{bcrypt64.encode(raw_salt)}{bcrypt64.encode(raw_digest[:DIGEST_BYTES])}"
    )


def decode(value: Union[str, bytes]) -> CryptString:
    """
    Parse a salt string or a full crypt string.

    Args:
        value: "$2b$NN$<22 salt chars>" optionally followed by 31 digest chars

    Returns:
        CryptString

    Raises:
        ParseError: Structural mismatch (missing "$", bad cost digits, trailing junk)
        UnsupportedVersionError: Major version other than 2, or minor not in {a, b}
        InvalidCostError: Cost outside [4, 31]
        InvalidSaltError: Salt too short or not valid bcrypt base64
    """
    if isinstance(value, (bytes, bytearray)):
        try:
            text = bytes(value).decode("ascii")
        except UnicodeDecodeError:
            raise ParseError("Crypt string must be ASCII") from None
    else:
        text = value

    if not text or text[0] != "$":
        raise ParseError("Crypt string must start with '$'", value=text)

    if text[1:2] != VERSION:
        raise UnsupportedVersionError(
            "Unsupported bcrypt version",
            value=text[1:2],
        )

    minor = text[2:3]
    if minor not in MINOR_VERSIONS:
        raise UnsupportedVersionError(
            "Unsupported bcrypt minor version",
            value=minor,
        )

    if text[3:4] != "$":
        raise ParseError("Missing '$' after version", value=text)

    cost_text = text[4:6]
    if len(cost_text) != 2 or not all(c in "0123456789" for c in cost_text):
        raise ParseError("Cost must be two decimal digits", value=cost_text)
    if text[6:7] != "$":
        raise ParseError("Missing '$' after cost", value=text)

    cost = int(cost_text)
    if not MIN_COST <= cost <= MAX_COST:
        raise InvalidCostError(
            f"Cost must be between {MIN_COST} and {MAX_COST}",
            value=cost,
        )

    body = text[PREFIX_CHARS:]
    if len(body) < SALT_CHARS:
        raise InvalidSaltError("Salt is too short", value=body)
    raw_salt = bytes(bcrypt64.decode(body[:SALT_CHARS], SALT_BYTES))

    rest = body[SALT_CHARS:]
    if not rest:
        raw_digest = None
    elif len(rest) == DIGEST_CHARS:
        raw_digest = bytes(bcrypt64.decode(rest, DIGEST_BYTES))
    else:
        raise ParseError(
            f"Digest must be {DIGEST_CHARS} characters",
            value=len(rest),
        )

    return CryptString(
        version=VERSION,
        minor=minor,
        cost=cost,
        raw_salt=raw_salt,
        raw_digest=raw_digest,
    )
