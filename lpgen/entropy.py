"""
Entropy deriver:
Stretches the master password and salt with PBKDF2 into a fixed-length
pseudorandom byte string that the renderer treats as one big number.
"""

from __future__ import annotations

import logging

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from .config import CharacterClass, DerivationParameters, HashAlgorithm
from .errors import DerivationFailed

logger = logging.getLogger(__name__)

_DIGESTS = {
    HashAlgorithm.SHA256: hashes.SHA256,
    HashAlgorithm.SHA384: hashes.SHA384,
    HashAlgorithm.SHA512: hashes.SHA512,
}


def derive_entropy(
    master_password: str,
    salt: str,
    charsets: CharacterClass | None = None,
    key_size: int = 32,
    algorithm: HashAlgorithm | str = HashAlgorithm.SHA256,
    length: int | None = None,
    iterations: int = 100_000,
) -> bytes:
    """
    Run PBKDF2-HMAC over the UTF-8 bytes of ``master_password`` and ``salt``.

    ``charsets`` and ``length`` do not take part in the derivation. They are
    accepted so the signature lines up with the reference generator, whose
    outputs existing users depend on.

    Raises UnsupportedAlgorithm for an unknown digest and DerivationFailed
    when PBKDF2 cannot run with the given parameters.
    """
    digest = _DIGESTS[HashAlgorithm.parse(algorithm)]

    if iterations < 1:
        raise DerivationFailed(f"Iteration count must be positive, got {iterations}.")
    if key_size < 1:
        raise DerivationFailed(f"Key size must be positive, got {key_size}.")

    logger.debug(
        "Deriving %d bytes with PBKDF2-HMAC-%s over %d iterations",
        key_size,
        digest.name.upper(),
        iterations,
    )

    try:
        kdf = PBKDF2HMAC(
            algorithm=digest(),
            length=key_size,
            salt=salt.encode("utf-8"),
            iterations=iterations,
        )
        return kdf.derive(master_password.encode("utf-8"))
    except Exception as exc:
        raise DerivationFailed(f"PBKDF2 derivation failed: {exc}") from exc


def derive_entropy_from(params: DerivationParameters) -> bytes:
    """
    Same as derive_entropy(), taking an immutable parameter bundle.
    """
    return derive_entropy(
        params.master_password,
        params.salt,
        key_size=params.key_size,
        algorithm=params.algorithm,
        iterations=params.iterations,
    )


def entropy_to_hex(entropy: bytes) -> str:
    """
    Lowercase hex form of the derived bytes, as LessPass clients show it.
    """
    return entropy.hex()


def entropy_to_int(entropy: bytes | str | int) -> int:
    """
    Interpret entropy as a big-endian unsigned integer.

    Accepts raw bytes, a hex string, or an int (returned unchanged).
    """
    if isinstance(entropy, int):
        if entropy < 0:
            raise ValueError("Entropy must be an unsigned integer.")
        return entropy
    if isinstance(entropy, str):
        return int("0" + entropy, 16)
    return int.from_bytes(entropy, "big")
