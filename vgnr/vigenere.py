"""
Vigenère Polyalphabetic Cipher
==============================
Each letter of the text is Caesar-shifted by the matching letter of a
repeating keyword. Key "lemon" → shifts [11, 4, 12, 14, 13]:

    Key:        lemonlemonle
    Plaintext:  attackatdawn
    Ciphertext: lxfopvefrnhr

A one-letter key is a plain Caesar cipher ("d" shifts everything by 3).

Alphabet: ASCII A-Z only, case preserved. Anything else is rejected, in the
key and in the text alike. Nothing is passed through.

Historical note: Giovan Battista Bellaso, 1553, later credited to Blaise de
Vigenère. Broken by Kasiski in 1863: repeated plaintext fragments that line
up with the same key letters repeat in the ciphertext, and the distance
between repeats is a multiple of the key length. Not secure. Educational.
"""

import logging
from typing import Tuple

from .errors import DecryptError, EncryptError, InvalidKey

logger = logging.getLogger(__name__)


ALPHA = "abcdefghijklmnopqrstuvwxyz"
ALPHABET_LEN = len(ALPHA)


def shift_value(ch: str) -> int:
    """Zero-based alphabet position of an ASCII letter, or -1 if not one."""
    if len(ch) == 1 and ch.isascii() and ch.isalpha():
        return ALPHA.index(ch.lower())
    return -1


def shift_letter(ch: str, shift: int) -> str:
    """Shift one ASCII letter by `shift` places, keeping its case."""
    # +26 keeps the operand non-negative for decrypt shifts
    out = ALPHA[(ALPHA.index(ch.lower()) + shift + ALPHABET_LEN) % ALPHABET_LEN]
    return out.upper() if ch.isupper() else out


def tabula_recta() -> Tuple[str, ...]:
    """
    The Vigenère square: 26 rows, row i is the alphabet rotated left by i.

    Row = key letter, column = plaintext letter, cell = ciphertext letter.
    Display only; the cipher itself does the arithmetic.
    """
    return tuple(ALPHA[i:] + ALPHA[:i] for i in range(ALPHABET_LEN))


class Vigenere:
    """
    Vigenère cipher scheme bound to one key.

    The shift sequence is derived once here and never changes, so a scheme
    can be shared between threads freely. Keys are case-insensitive:
    Vigenere("LEMON") == Vigenere("lemon").
    """

    ALPHA        = ALPHA
    ALPHABET_LEN = ALPHABET_LEN

    __slots__ = ("_key", "_shifts")

    def __init__(self, key: str):
        if not isinstance(key, str) or not key:
            raise InvalidKey("Vigenère key must be a non-empty string.")
        shifts = tuple(shift_value(c) for c in key)
        if -1 in shifts:
            pos = shifts.index(-1)
            logger.debug(f"Rejected key: non-letter at position {pos}")
            raise InvalidKey(f"Vigenère key must be alphabetic (A-Z), got {key[pos]!r}.")
        object.__setattr__(self, "_key", key.lower())
        object.__setattr__(self, "_shifts", shifts)
        logger.debug(f"Vigenere scheme ready | period={len(shifts)}")

    @classmethod
    def new(cls, key: str) -> "Vigenere":
        return cls(key)

    def __setattr__(self, name, value):
        raise AttributeError("Vigenere schemes are immutable.")

    def __delattr__(self, name):
        raise AttributeError("Vigenere schemes are immutable.")

    def __reduce__(self):
        # copy and pickle rebuild through the constructor, not setattr
        return (self.__class__, (self._key,))

    @property
    def key(self) -> str:
        return self._key

    @property
    def shifts(self) -> Tuple[int, ...]:
        return self._shifts

    @property
    def period(self) -> int:
        return len(self._shifts)

    def keystream(self, length: int) -> str:
        """
        The key repeated out to `length` letters.
        "lemon", 12 → "lemonlemonle"
        """
        if length < 0:
            raise ValueError("Keystream length must be non-negative.")
        reps, rest = divmod(length, self.period)
        return self._key * reps + self._key[:rest]

    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt letter by letter; case preserved.
        Raises EncryptError on the first non-letter, returning nothing.
        """
        return self._transform(plaintext, 1, EncryptError)

    def decrypt(self, ciphertext: str) -> str:
        """Inverse of encrypt. Raises DecryptError on the first non-letter."""
        return self._transform(ciphertext, -1, DecryptError)

    def _transform(self, text: str, direction: int, error) -> str:
        shifts = self._shifts
        period = len(shifts)
        result = []
        for pos, ch in enumerate(text):
            if shift_value(ch) < 0:
                logger.debug(f"Rejected {ch!r} at position {pos}")
                raise error(ch, pos)
            result.append(shift_letter(ch, direction * shifts[pos % period]))
        return "".join(result)

    def __eq__(self, other):
        if not isinstance(other, Vigenere):
            return NotImplemented
        return self._shifts == other._shifts

    def __hash__(self):
        return hash(self._shifts)

    def __repr__(self):
        return f"Vigenere(period={self.period})"
