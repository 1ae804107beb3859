"""
Mapping logic: Render derived entropy into a password string.
"""

from __future__ import annotations

import logging
from typing import List

from .charsets import get_character_set
from .config import CharacterClass
from .entropy import entropy_to_int
from .errors import InsufficientEntropy, InvalidLength

logger = logging.getLogger(__name__)


def _consume(quotient: int, base: int) -> tuple[int, int]:
    if quotient == 0:
        raise InsufficientEntropy(
            "Entropy exhausted before the password was complete; "
            "use a larger key size or a shorter password."
        )
    return divmod(quotient, base)


def render_password(
    charsets: CharacterClass,
    entropy: int | bytes | str,
    length: int,
) -> str:
    """
    Turn entropy into a password of exactly ``length`` characters.

    The entropy is read as one big number and peeled off digit by digit,
    least significant first:

    - ``length - n`` characters from the combined alphabet, where ``n`` is
      the number of enabled classes.
    - One character from each enabled class, in class order.
    - Each of those is spliced into the password at a position taken from
      the remaining entropy, modulo the password's current length.

    The order of these steps fixes the output; changing it breaks
    compatibility with every other LessPass client.
    """
    combined, class_alphabets = get_character_set(charsets)
    class_count = len(class_alphabets)

    if length <= 0 or length < class_count:
        raise InvalidLength(
            f"Password length {length} cannot hold one character from each "
            f"of the {class_count} enabled character classes."
        )

    quotient = entropy_to_int(entropy)
    base = len(combined)

    password_chars: List[str] = []
    for _ in range(length - class_count):
        quotient, remainder = _consume(quotient, base)
        password_chars.append(combined[remainder])

    # One guaranteed character per rule.
    additional_chars: List[str] = []
    for alphabet in class_alphabets:
        quotient, remainder = _consume(quotient, len(alphabet))
        additional_chars.append(alphabet[remainder])

    password = "".join(password_chars)
    for char in additional_chars:
        if not password:
            # Nothing to divide by yet: only position 0 exists.
            password = char
            continue
        quotient, remainder = _consume(quotient, len(password))
        password = password[:remainder] + char + password[remainder:]

    logger.debug(
        "Rendered %d characters from %d character classes", len(password), class_count
    )
    return password
