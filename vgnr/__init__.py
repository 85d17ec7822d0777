"""
vgnr — Le Chiffre Indéchiffrable
================================
The Vigenère polyalphabetic cipher (Bellaso 1553 / Vigenère).

    >>> from vgnr import Vigenere
    >>> scheme = Vigenere("lemon")
    >>> scheme.encrypt("attackatdawn")
    'lxfopvefrnhr'
    >>> scheme.decrypt("lxfopvefrnhr")
    'attackatdawn'

Please, do not use this for anything serious. It is a 16th century cipher
and falls to Kasiski examination. Try breaking it instead.

License: Apache 2.0
"""

__version__ = "1.0.0"

from .errors   import (
    VigenereError,
    InvalidKey,
    InvalidCharacter,
    EncryptError,
    DecryptError,
)
from .vigenere import Vigenere, shift_value, shift_letter, tabula_recta

__all__ = [
    "Vigenere",
    "shift_value",
    "shift_letter",
    "tabula_recta",
    "VigenereError",
    "InvalidKey",
    "InvalidCharacter",
    "EncryptError",
    "DecryptError",
]
