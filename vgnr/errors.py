"""
Error taxonomy for the Vigenère scheme.

Everything derives from ValueError: a bad key or a bad character is a bad
argument, and callers that already catch ValueError keep working.
"""


class VigenereError(ValueError):
    """Base class for every error raised by vgnr."""


class InvalidKey(VigenereError):
    """Key is empty or contains something other than A-Z / a-z."""


class InvalidCharacter(VigenereError):
    """Text contains a character outside A-Z / a-z."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(
            f"Character {char!r} at position {position} is not an ASCII letter."
        )


class EncryptError(InvalidCharacter):
    """Raised by Vigenere.encrypt."""


class DecryptError(InvalidCharacter):
    """Raised by Vigenere.decrypt."""
