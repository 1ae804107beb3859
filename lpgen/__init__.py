"""
Deterministic stateless password generator (LessPass v2 compatible).
"""

from .config import CharacterClass, HashAlgorithm, DerivationParameters, GeneratorConfig, DEFAULT_CONFIG
from .errors import (
    LessPassError,
    UnsupportedAlgorithm,
    DerivationFailed,
    EmptyCharset,
    InvalidLength,
    InsufficientEntropy,
)
from .entropy import derive_entropy, derive_entropy_from
from .mapping import render_password
from .cli import build_salt, generate, generate_password, generate_password_with_meta
from .worker import LatestRequestRunner

__all__ = [
    "CharacterClass",
    "HashAlgorithm",
    "DerivationParameters",
    "GeneratorConfig",
    "DEFAULT_CONFIG",
    "LessPassError",
    "UnsupportedAlgorithm",
    "DerivationFailed",
    "EmptyCharset",
    "InvalidLength",
    "InsufficientEntropy",
    "derive_entropy",
    "derive_entropy_from",
    "render_password",
    "build_salt",
    "generate",
    "generate_password",
    "generate_password_with_meta",
    "LatestRequestRunner",
]
