"""
Blowfish
========
Key-schedule and block operations used by the bcrypt engine.
"""

from .cipher import BlowfishState, stream2word
from .constants import initial_state, pi_fraction_words

__all__ = [
    "BlowfishState",
    "stream2word",
    "initial_state",
    "pi_fraction_words",
]
