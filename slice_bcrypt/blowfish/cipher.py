"""
Blowfish Key Schedule
=====================
The Blowfish operations bcrypt needs: state initialization, salted and
unsalted key expansion, ECB block encryption and stream-to-word packing.

State lives in `array('I')` buffers so it can be zeroed in place.
"""

from array import array
from typing import Sequence, Tuple

from .constants import P_WORDS, initial_state
from ..erase import secure_erase

MASK = 0xFFFFFFFF
ROUNDS = 16


def stream2word(data: Sequence[int], databytes: int, j: int) -> Tuple[int, int]:
    """
    Pack the next four bytes of a cyclic byte stream into a word.

    Args:
        data: Byte stream
        databytes: Stream length; reading wraps to 0 once `j` reaches it
        j: Current read position

    Returns:
        Tuple of (word, next position)
    """
    word = 0
    for _ in range(4):
        if j >= databytes:
            j = 0
        word = ((word << 8) | data[j]) & MASK
        j += 1
    return word, j


class BlowfishState:
    """Mutable Blowfish P-array and S-boxes."""

    __slots__ = ("p", "s")

    def __init__(self):
        p, s = initial_state()
        self.p = array("I", p)
        self.s = [array("I", box) for box in s]

    @classmethod
    def initial(cls) -> "BlowfishState":
        """Fresh state seeded with the digits of pi."""
        return cls()

    def encipher(self, xl: int, xr: int) -> Tuple[int, int]:
        """Encrypt one 64-bit block given as two 32-bit halves."""
        p = self.p
        s0, s1, s2, s3 = self.s

        xl ^= p[0]
        for i in range(1, ROUNDS + 1, 2):
            xr ^= ((((s0[xl >> 24] + s1[(xl >> 16) & 0xFF]) ^ s2[(xl >> 8) & 0xFF])
                    + s3[xl & 0xFF]) & MASK) ^ p[i]
            xl ^= ((((s0[xr >> 24] + s1[(xr >> 16) & 0xFF]) ^ s2[(xr >> 8) & 0xFF])
                    + s3[xr & 0xFF]) & MASK) ^ p[i + 1]
        return xr ^ p[ROUNDS + 1], xl

    def _xor_key(self, key: Sequence[int], keybytes: int) -> None:
        p = self.p
        j = 0
        for i in range(P_WORDS):
            word, j = stream2word(key, keybytes, j)
            p[i] ^= word

    def expandstate(
        self,
        data: Sequence[int],
        databytes: int,
        key: Sequence[int],
        keybytes: int,
    ) -> None:
        """
        Expand the state with both key and salt (`data`) material.

        Every block encrypted while refilling the P-array and S-boxes is
        first XORed with the next two words of the salt stream.
        """
        self._xor_key(key, keybytes)

        encipher = self.encipher
        j = 0
        datal = datar = 0
        for table in [self.p] + self.s:
            for i in range(0, len(table), 2):
                word, j = stream2word(data, databytes, j)
                datal ^= word
                word, j = stream2word(data, databytes, j)
                datar ^= word
                datal, datar = encipher(datal, datar)
                table[i] = datal
                table[i + 1] = datar

    def expand0state(self, key: Sequence[int], keybytes: int) -> None:
        """Expand the state with key material only (the zero-salt pass)."""
        self._xor_key(key, keybytes)

        encipher = self.encipher
        datal = datar = 0
        for table in [self.p] + self.s:
            for i in range(0, len(table), 2):
                datal, datar = encipher(datal, datar)
                table[i] = datal
                table[i + 1] = datar

    def encrypt(self, words: array, blocks: int) -> None:
        """ECB-encrypt `blocks` 64-bit blocks of `words` in place."""
        encipher = self.encipher
        for i in range(0, 2 * blocks, 2):
            words[i], words[i + 1] = encipher(words[i], words[i + 1])

    def erase(self) -> None:
        """Zero the P-array and every S-box."""
        secure_erase(self.p)
        for box in self.s:
            secure_erase(box)
