"""Personal data a fiscal code is generated from."""

from __future__ import annotations

import re
from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

_PLACE_CODE_PATTERN = re.compile(r"[A-Za-z][0-9]{3}")


class Gender(str, Enum):
    """Gender as encoded in the day field (female → day + 40)."""

    MALE = "M"
    FEMALE = "F"


class PersonInput(BaseModel):
    """Validated input for ``generate``.

    Names are rejected, not cleaned, when they hold anything other than
    ASCII letters: no transliteration of accents, spaces or apostrophes.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    surname: str = Field(min_length=1)
    birthdate: date
    gender: Gender
    place_code: str = Field(description="Belfiore code, e.g. 'F205'")

    @field_validator("name", "surname")
    @classmethod
    def validate_ascii_letters(cls, v: str) -> str:
        """Only ASCII alphabetic characters are accepted."""
        if not (v.isascii() and v.isalpha()):
            msg = f"Only ASCII letters are allowed, got {v!r}"
            raise ValueError(msg)
        return v

    @field_validator("place_code")
    @classmethod
    def validate_place_code(cls, v: str) -> str:
        """Shape check only (1 letter + 3 digits), no registry lookup."""
        if not _PLACE_CODE_PATTERN.fullmatch(v):
            msg = f"Place code must be 1 letter followed by 3 digits, got {v!r}"
            raise ValueError(msg)
        return v.upper()
