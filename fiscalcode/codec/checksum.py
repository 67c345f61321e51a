"""Control character (16th position) of a fiscal code.

Each of the first 15 characters is converted through the odd or even table
depending on its 1-indexed position, the values are summed and the remainder
modulo 26 selects the letter.
"""

from __future__ import annotations

from fiscalcode.codec.tables import ALPHABET, EVEN_VALUES, ODD_VALUES, PARTIAL_CODE_LENGTH


def compute_control_character(code: str) -> str:
    """Compute the control character from the first 15 characters of ``code``.

    Args:
        code: A partial (15) or full (16) fiscal code, any case.

    Returns:
        The uppercase control letter.

    Raises:
        ValueError: If ``code`` is shorter than 15 characters.
    """
    if len(code) < PARTIAL_CODE_LENGTH:
        msg = f"At least {PARTIAL_CODE_LENGTH} characters are needed, got {len(code)}"
        raise ValueError(msg)

    total = 0
    for i, char in enumerate(code.upper()[:PARTIAL_CODE_LENGTH]):
        if i % 2 == 0:  # odd position (1-indexed)
            total += ODD_VALUES.get(char, 0)
        else:  # even position (1-indexed)
            total += EVEN_VALUES.get(char, 0)
    return ALPHABET[total % 26]
