"""
Command-line interface and high-level generator functions.
"""
from __future__ import annotations

import argparse
import logging
import math
import os
import sys
from dataclasses import dataclass, replace
from getpass import getpass

from .charsets import charsets_from_flags, get_character_set
from .config import CharacterClass, GeneratorConfig, HashAlgorithm, DEFAULT_CONFIG
from .entropy import derive_entropy, entropy_to_hex
from .errors import EmptyCharset, InvalidLength, LessPassError
from .mapping import render_password

logger = logging.getLogger(__name__)

MASTER_PASSWORD_ENV = "LPGEN_MASTER_PASSWORD"


@dataclass
class GenerationMeta:
    """
    Full result of one password generation.
    """
    # Final password
    password: str

    # Salt fed to PBKDF2 (site + login + hex counter)
    salt: str

    # PBKDF2 output, hex encoded
    entropy_hex: str

    # Strength / config metadata
    entropy_bits: float
    strength: str
    config: GeneratorConfig


def build_salt(site: str, login: str, counter: int = 1) -> str:
    """
    Compose the PBKDF2 salt: site, login and the counter in uppercase hex.
    """
    if isinstance(counter, bool) or not isinstance(counter, int) or counter < 1:
        raise ValueError(f"Counter must be a positive integer, got {counter!r}.")
    return f"{site}{login}{counter:X}"


def entropy_label(bits: float) -> str:
    if bits <= 0:
        return "Very weak"
    if bits < 50:
        return "Weak"
    if bits < 80:
        return "Moderate"
    if bits < 110:
        return "Strong"
    return "Very strong"


def generate(
    master_password: str,
    salt: str,
    charsets: CharacterClass = CharacterClass.ALL,
    key_size: int = 32,
    algorithm: HashAlgorithm | str = HashAlgorithm.SHA256,
    length: int = 16,
    iterations: int = 100_000,
) -> str:
    """
    Derive the password for one salt.

    The character selection and length are checked before PBKDF2 runs, so
    an invalid selection never pays for the key derivation.
    """
    _check_selection(charsets, length)
    entropy = derive_entropy(
        master_password, salt, charsets, key_size, algorithm, length, iterations
    )
    return render_password(charsets, entropy, length)


def _check_selection(charsets: CharacterClass, length: int) -> None:
    _combined, class_alphabets = get_character_set(charsets)
    if length <= 0 or length < len(class_alphabets):
        raise InvalidLength(
            f"Password length {length} cannot hold one character from each "
            f"of the {len(class_alphabets)} enabled character classes."
        )


def generate_password_with_meta(
    site: str,
    login: str,
    master_password: str,
    config: GeneratorConfig | None = None,
) -> GenerationMeta:
    """
    High-level generation pipeline with metadata:

    - Compose the salt from site, login and counter.
    - Stretch master password and salt with PBKDF2.
    - Render the entropy into a password.
    """
    cfg = config or DEFAULT_CONFIG

    salt = build_salt(site, login, cfg.counter)
    _check_selection(cfg.charsets, cfg.length)

    entropy = derive_entropy(
        master_password,
        salt,
        cfg.charsets,
        cfg.key_size,
        cfg.algorithm,
        cfg.length,
        cfg.iterations,
    )
    password = render_password(cfg.charsets, entropy, cfg.length)

    # --- theoretical entropy estimate (per password) ---
    combined, _class_alphabets = get_character_set(cfg.charsets)
    entropy_bits = len(password) * math.log2(len(combined))

    return GenerationMeta(
        password=password,
        salt=salt,
        entropy_hex=entropy_to_hex(entropy),
        entropy_bits=entropy_bits,
        strength=entropy_label(entropy_bits),
        config=cfg,
    )


def generate_password(
    site: str,
    login: str,
    master_password: str,
    config: GeneratorConfig | None = None,
) -> str:
    """
    High-level function: site + login + master password -> password.
    """
    meta = generate_password_with_meta(site, login, master_password, config)
    return meta.password


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lpgen",
        description=(
            "Stateless password generator: derives the same password for a "
            "site and login from your master password, every time."
        ),
    )
    parser.add_argument("site", help="Website or service name, e.g. example.org")
    parser.add_argument("login", help="Username or e-mail used on that site")

    parser.add_argument("-L", "--length", type=_positive_int, default=DEFAULT_CONFIG.length,
                        help="Password length (default: %(default)s)")
    parser.add_argument("-C", "--counter", type=_positive_int, default=DEFAULT_CONFIG.counter,
                        help="Counter, bump it to rotate a password (default: %(default)s)")
    parser.add_argument("-i", "--iterations", type=_positive_int, default=DEFAULT_CONFIG.iterations,
                        help="PBKDF2 iterations (default: %(default)s)")
    parser.add_argument("-d", "--digest", default=DEFAULT_CONFIG.algorithm.value,
                        choices=[member.value for member in HashAlgorithm],
                        help="PBKDF2 digest (default: %(default)s)")
    parser.add_argument("--key-size", type=_positive_int, default=DEFAULT_CONFIG.key_size,
                        help="Bytes of key material to derive (default: %(default)s)")

    parser.add_argument("--no-lowercase", action="store_true", help="Exclude lowercase letters")
    parser.add_argument("--no-uppercase", action="store_true", help="Exclude uppercase letters")
    parser.add_argument("--no-digits", action="store_true", help="Exclude digits")
    parser.add_argument("--no-symbols", action="store_true", help="Exclude symbols")

    parser.add_argument("-v", "--verbose", action="store_true", help="Log generation steps")
    return parser


def _read_master_password() -> str:
    from_env = os.environ.get(MASTER_PASSWORD_ENV)
    if from_env is not None:
        return from_env
    return getpass("Master password: ")


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for `python -m lpgen.cli`, `run_lpgen.py` and `lpgen`.
    """
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = replace(
        DEFAULT_CONFIG,
        charsets=charsets_from_flags(
            lowercase=not args.no_lowercase,
            uppercase=not args.no_uppercase,
            digits=not args.no_digits,
            symbols=not args.no_symbols,
        ),
        key_size=args.key_size,
        algorithm=HashAlgorithm.parse(args.digest),
        length=args.length,
        iterations=args.iterations,
        counter=args.counter,
    )

    if config.charsets == CharacterClass.NONE:
        print("Error: enable at least one character class.", file=sys.stderr)
        return 2
    if not args.site or not args.login:
        print("Error: site and login must not be empty.", file=sys.stderr)
        return 2

    master_password = _read_master_password()
    if not master_password:
        print("Error: master password must not be empty.", file=sys.stderr)
        return 2

    try:
        meta = generate_password_with_meta(args.site, args.login, master_password, config)
    except (EmptyCharset, InvalidLength) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    except LessPassError as exc:
        logger.debug("Generation failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logger.debug("Estimated strength: %.1f bits (%s)", meta.entropy_bits, meta.strength)
    print(meta.password)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
