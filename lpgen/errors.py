"""
Exceptions raised by the password generator.

All of them describe bad input: none is transient, so a caller should fix
the parameters and call again rather than retry the same call.
"""

from __future__ import annotations


class LessPassError(Exception):
    """Base class for every generator error."""


class UnsupportedAlgorithm(LessPassError, ValueError):
    """The requested PBKDF2 digest is not SHA-256, SHA-384 or SHA-512."""


class DerivationFailed(LessPassError):
    """The PBKDF2 primitive rejected its parameters or failed."""


class EmptyCharset(LessPassError, ValueError):
    """No character class is enabled."""


class InvalidLength(LessPassError, ValueError):
    """The password length cannot hold one character per enabled class."""


class InsufficientEntropy(LessPassError):
    """The entropy value ran out before the password was complete."""
