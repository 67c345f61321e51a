"""Surname and name fragments (positions 0–2 and 3–5)."""

from __future__ import annotations

from fiscalcode.codec.tables import VOWELS

_PART_LENGTH = 3
_FILLER = "X"


def encode_name_part(value: str) -> str:
    """Reduce a name or surname to its 3-letter fragment.

    Consonants first, then vowels, then ``X`` padding. The input is expected
    to be ASCII alphabetic (``PersonInput`` enforces it).
    """
    upper = value.upper()
    consonants = [c for c in upper if c not in VOWELS]
    if len(consonants) >= _PART_LENGTH:
        return "".join(consonants[:_PART_LENGTH])

    vowels = [c for c in upper if c in VOWELS]
    part = "".join(consonants + vowels)[:_PART_LENGTH]
    return part.ljust(_PART_LENGTH, _FILLER)
