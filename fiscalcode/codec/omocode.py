"""Omocodia: letter ↔ digit substitution at the 7 numeric positions.

When two people would receive the same fiscal code, the issuing office
replaces digits with letters starting from the rightmost numeric position
(place code, then day, then year). Letters map back to digits through
OMOCODE_LETTER_TO_DIGIT; the control character is recomputed on the
substituted form.
"""

from __future__ import annotations

from fiscalcode.codec.checksum import compute_control_character
from fiscalcode.codec.tables import (
    OMOCODE_DIGIT_TO_LETTER,
    OMOCODE_LETTER_TO_DIGIT,
    OMOCODE_POSITIONS,
    PARTIAL_CODE_LENGTH,
)


def normalize(code: str) -> str:
    """Replace omocode letters with their digits.

    Walks the eligible positions from the rightmost inward. A digit ends the
    walk (substitution is contiguous), while a letter outside the omocode
    alphabet means the code is not an omocode and it is returned untouched.
    """
    if len(code) < PARTIAL_CODE_LENGTH:
        msg = f"At least {PARTIAL_CODE_LENGTH} characters are needed, got {len(code)}"
        raise ValueError(msg)

    chars = list(code)
    for index in OMOCODE_POSITIONS:
        current = chars[index]
        if not current.isalpha():
            break

        digit = OMOCODE_LETTER_TO_DIGIT.get(current.upper())
        if digit is None:
            return code
        chars[index] = digit

    return "".join(chars)


def is_omocode(code: str) -> bool:
    """Check whether any eligible position carries an omocode letter."""
    return normalize(code) != code


def enumerate_omocodes(code: str) -> list[str]:
    """Build the omocodes of a normalized code.

    Substitution advances one eligible position at a time in priority order
    and each step is kept: the first omocode replaces position 14, the
    second positions 14 and 13, up to all seven. Every step recomputes the
    control character, and every omocode normalizes back to the digits of
    ``code``.

    Raises:
        ValueError: If an eligible position does not hold a digit.
    """
    chars = list(code[:PARTIAL_CODE_LENGTH])
    omocodes: list[str] = []
    for index in OMOCODE_POSITIONS:
        letter = OMOCODE_DIGIT_TO_LETTER.get(chars[index])
        if letter is None:
            msg = f"Position {index} of {code!r} is not a digit: {chars[index]!r}"
            raise ValueError(msg)
        chars[index] = letter
        partial = "".join(chars)
        omocodes.append(partial + compute_control_character(partial))
    return omocodes
