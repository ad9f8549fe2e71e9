"""
Crypt String Codec
==================
bcrypt base64 and the $2x$NN$ crypt-string grammar.
"""

from . import bcrypt64
from .crypt_string import (
    CryptString,
    clamp_cost,
    decode,
    encode_salt,
    render,
    SALT_BYTES,
    DIGEST_BYTES,
)

__all__ = [
    "bcrypt64",
    "CryptString",
    "clamp_cost",
    "decode",
    "encode_salt",
    "render",
    "SALT_BYTES",
    "DIGEST_BYTES",
]
