"""
Character-set tables: turn a class selection into the alphabets the
renderer indexes into.
"""

from __future__ import annotations

from typing import List, Tuple

from .config import ALPHABETS, CLASS_ORDER, CharacterClass
from .errors import EmptyCharset


def enabled_classes(charsets: CharacterClass) -> List[CharacterClass]:
    """
    Enabled classes, always in lowercase, uppercase, digits, symbols order.
    """
    return [cls for cls in CLASS_ORDER if cls in charsets]


def get_character_set(charsets: CharacterClass) -> Tuple[str, Tuple[str, ...]]:
    """
    Build the combined alphabet and the per-class alphabets for a selection.

    Returns ``(combined, class_alphabets)`` where ``combined`` is the
    concatenation of every enabled alphabet and ``class_alphabets`` holds
    them individually, both in the fixed class order.
    """
    classes = enabled_classes(charsets)
    if not classes:
        raise EmptyCharset("At least one character class must be enabled.")

    class_alphabets = tuple(ALPHABETS[cls] for cls in classes)
    return "".join(class_alphabets), class_alphabets


def charsets_from_flags(
    lowercase: bool = True,
    uppercase: bool = True,
    digits: bool = True,
    symbols: bool = True,
) -> CharacterClass:
    """
    Fold four on/off toggles into a CharacterClass selection.
    """
    charsets = CharacterClass.NONE
    if lowercase:
        charsets |= CharacterClass.LOWERCASE
    if uppercase:
        charsets |= CharacterClass.UPPERCASE
    if digits:
        charsets |= CharacterClass.DIGITS
    if symbols:
        charsets |= CharacterClass.SYMBOLS
    return charsets
