"""Test PBKDF2 entropy derivation."""

from __future__ import annotations

import hashlib

import pytest

from lpgen import entropy
from lpgen.config import CharacterClass, DerivationParameters, HashAlgorithm
from lpgen.errors import DerivationFailed, UnsupportedAlgorithm

SALT = "example.orgcontact@example.org1"
ENTROPY_HEX = "dc33d431bce2b01182c613382483ccdb0e2f66482cbba5e9d07dab34acc7eb1e"
"""PBKDF2-HMAC-SHA256 of "password" and SALT, 100000 rounds, 32 bytes."""


def test_reference_entropy() -> None:
    derived = entropy.derive_entropy("password", SALT)
    assert entropy.entropy_to_hex(derived) == ENTROPY_HEX


@pytest.mark.parametrize(
    ['algorithm', 'name'],
    [
        (HashAlgorithm.SHA256, "sha256"),
        (HashAlgorithm.SHA384, "sha384"),
        (HashAlgorithm.SHA512, "sha512"),
    ],
)
def test_matches_hashlib_pbkdf2(algorithm: HashAlgorithm, name: str) -> None:
    derived = entropy.derive_entropy(
        "Düsseldorf", "ñsalt", key_size=48, algorithm=algorithm, iterations=1000
    )
    expected = hashlib.pbkdf2_hmac(
        name, "Düsseldorf".encode("utf-8"), "ñsalt".encode("utf-8"), 1000, 48
    )
    assert derived == expected


def test_key_size_sets_output_length() -> None:
    assert len(entropy.derive_entropy("pw", "salt", key_size=16, iterations=10)) == 16
    assert len(entropy.derive_entropy("pw", "salt", key_size=64, iterations=10)) == 64


def test_charsets_and_length_do_not_affect_derivation() -> None:
    first = entropy.derive_entropy(
        "pw", "salt", CharacterClass.ALL, 32, HashAlgorithm.SHA256, 16, 100
    )
    second = entropy.derive_entropy(
        "pw", "salt", CharacterClass.DIGITS, 32, HashAlgorithm.SHA256, 6, 100
    )
    assert first == second


def test_algorithm_by_name() -> None:
    by_enum = entropy.derive_entropy("pw", "salt", algorithm=HashAlgorithm.SHA384, iterations=10)
    by_name = entropy.derive_entropy("pw", "salt", algorithm="SHA-384", iterations=10)
    assert by_enum == by_name


def test_unsupported_algorithm() -> None:
    with pytest.raises(UnsupportedAlgorithm):
        entropy.derive_entropy("pw", "salt", algorithm="md5", iterations=10)


@pytest.mark.parametrize(['iterations', 'key_size'], [(0, 32), (-1, 32), (10, 0)])
def test_invalid_parameters_fail_derivation(iterations: int, key_size: int) -> None:
    with pytest.raises(DerivationFailed):
        entropy.derive_entropy("pw", "salt", key_size=key_size, iterations=iterations)


def test_parameter_bundle() -> None:
    params = DerivationParameters("password", SALT)
    assert entropy.entropy_to_hex(entropy.derive_entropy_from(params)) == ENTROPY_HEX


def test_parameter_bundle_repr_hides_secrets() -> None:
    text = repr(DerivationParameters("hunter2", "secret-salt"))
    assert "hunter2" not in text
    assert "secret-salt" not in text


def test_entropy_to_int() -> None:
    assert entropy.entropy_to_int(b"\x01\x00") == 256
    assert entropy.entropy_to_int("0100") == 256
    assert entropy.entropy_to_int("ff") == 255
    assert entropy.entropy_to_int(42) == 42
    with pytest.raises(ValueError):
        entropy.entropy_to_int(-1)
