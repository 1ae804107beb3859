"""Test character-set table construction."""

from __future__ import annotations

import pytest

from lpgen import charsets
from lpgen.config import (
    DIGITS,
    LOWERCASE_LETTERS,
    SYMBOLS,
    UPPERCASE_LETTERS,
    CharacterClass,
)
from lpgen.errors import EmptyCharset


def test_alphabets_are_the_literal_lesspass_ones() -> None:
    assert LOWERCASE_LETTERS == "abcdefghijklmnopqrstuvwxyz"
    assert UPPERCASE_LETTERS == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    assert DIGITS == "0123456789"
    assert SYMBOLS == "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"
    assert len(SYMBOLS) == 32


def test_alphabets_are_disjoint() -> None:
    joined = LOWERCASE_LETTERS + UPPERCASE_LETTERS + DIGITS + SYMBOLS
    assert len(set(joined)) == len(joined) == 94


def test_all_classes_concatenate_in_fixed_order() -> None:
    combined, per_class = charsets.get_character_set(CharacterClass.ALL)
    assert combined == LOWERCASE_LETTERS + UPPERCASE_LETTERS + DIGITS + SYMBOLS
    assert per_class == (LOWERCASE_LETTERS, UPPERCASE_LETTERS, DIGITS, SYMBOLS)


def test_order_does_not_depend_on_how_the_selection_was_built() -> None:
    selection = CharacterClass.SYMBOLS | CharacterClass.LOWERCASE
    combined, per_class = charsets.get_character_set(selection)
    assert combined == LOWERCASE_LETTERS + SYMBOLS
    assert per_class == (LOWERCASE_LETTERS, SYMBOLS)


@pytest.mark.parametrize(
    ['selection', 'expected'],
    [
        (CharacterClass.DIGITS, DIGITS),
        (CharacterClass.LETTERS, LOWERCASE_LETTERS + UPPERCASE_LETTERS),
        (CharacterClass.UPPERCASE | CharacterClass.DIGITS, UPPERCASE_LETTERS + DIGITS),
    ],
)
def test_combined_alphabet(selection: CharacterClass, expected: str) -> None:
    combined, _per_class = charsets.get_character_set(selection)
    assert combined == expected


def test_empty_selection_is_rejected() -> None:
    with pytest.raises(EmptyCharset):
        charsets.get_character_set(CharacterClass.NONE)


def test_enabled_classes() -> None:
    assert charsets.enabled_classes(CharacterClass.DIGITS | CharacterClass.UPPERCASE) == [
        CharacterClass.UPPERCASE,
        CharacterClass.DIGITS,
    ]
    assert charsets.enabled_classes(CharacterClass.NONE) == []


def test_charsets_from_flags() -> None:
    assert charsets.charsets_from_flags() == CharacterClass.ALL
    assert (
        charsets.charsets_from_flags(uppercase=False, symbols=False)
        == CharacterClass.LOWERCASE | CharacterClass.DIGITS
    )
    assert (
        charsets.charsets_from_flags(False, False, False, False)
        == CharacterClass.NONE
    )
