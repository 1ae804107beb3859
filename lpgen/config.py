"""
Configuration and data model for the deterministic password generator.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .errors import UnsupportedAlgorithm


LOWERCASE_LETTERS = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
SYMBOLS = "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"


class CharacterClass(enum.Flag):
    """
    Character classes a password may draw from.

    Members combine like a bitmask: ``CharacterClass.LOWERCASE |
    CharacterClass.DIGITS`` enables two classes.
    """

    NONE = 0
    LOWERCASE = 1
    UPPERCASE = 2
    DIGITS = 4
    SYMBOLS = 8

    LETTERS = LOWERCASE | UPPERCASE
    ALL = LETTERS | DIGITS | SYMBOLS


# Enabled classes are always concatenated in this order.
CLASS_ORDER: tuple[CharacterClass, ...] = (
    CharacterClass.LOWERCASE,
    CharacterClass.UPPERCASE,
    CharacterClass.DIGITS,
    CharacterClass.SYMBOLS,
)

ALPHABETS: dict[CharacterClass, str] = {
    CharacterClass.LOWERCASE: LOWERCASE_LETTERS,
    CharacterClass.UPPERCASE: UPPERCASE_LETTERS,
    CharacterClass.DIGITS: DIGITS,
    CharacterClass.SYMBOLS: SYMBOLS,
}


class HashAlgorithm(enum.Enum):
    """Digest used as the PBKDF2 pseudorandom function."""

    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    @classmethod
    def parse(cls, value: "HashAlgorithm | str") -> "HashAlgorithm":
        """
        Accept an enum member or a name like "sha256", "SHA-384", "Sha512".
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("-", "").replace("_", "")
            for member in cls:
                if member.value == key:
                    return member
        raise UnsupportedAlgorithm(
            f"Unsupported hash algorithm {value!r}; "
            "expected one of sha256, sha384, sha512."
        )


@dataclass(frozen=True)
class DerivationParameters:
    # Inputs to one PBKDF2 run. The salt is already composed by the caller
    # (see cli.build_salt); it is never parsed here.
    master_password: str
    salt: str
    iterations: int = 100_000
    algorithm: HashAlgorithm = HashAlgorithm.SHA256
    # Bytes of key material to derive; 32 gives 256 bits of entropy.
    key_size: int = 32

    def __repr__(self) -> str:
        # Keep secrets out of tracebacks and logs.
        return (
            f"DerivationParameters(iterations={self.iterations}, "
            f"algorithm={self.algorithm.name}, key_size={self.key_size})"
        )


@dataclass(frozen=True)
class GeneratorConfig:
    # Character classes the password is built from.
    charsets: CharacterClass = CharacterClass.ALL

    # Bytes of PBKDF2 output consumed by the renderer.
    key_size: int = 32

    algorithm: HashAlgorithm = HashAlgorithm.SHA256

    # Desired password length in characters.
    length: int = 16

    # PBKDF2 rounds: the only cost knob, never enforced here.
    iterations: int = 100_000

    # Bumped by the user to rotate a site's password; appended to the salt.
    counter: int = 1


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = GeneratorConfig()
