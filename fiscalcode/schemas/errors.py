"""Verification error variants.

Every variant is a frozen pydantic model carrying the offending part, index
or value. The verifier returns exactly one of them, for the first rule that
fails; none of them is raised.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict


class VerifierError(BaseModel):
    """Base class for all fiscal code verification errors."""

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[str] = "verifier_error"

    @property
    def message(self) -> str:
        return "The fiscal code is invalid"

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Payload plus kind and message, for JSON output."""
        return {"kind": self.kind, "message": self.message, **self.model_dump()}


class InvalidLength(VerifierError):
    kind: ClassVar[str] = "invalid_length"

    length: int

    @property
    def message(self) -> str:
        return f"The fiscal code length should be 16 instead is `{self.length}`"


class NonAlphanumericCharacter(VerifierError):
    kind: ClassVar[str] = "non_alphanumeric_character"

    index: int

    @property
    def message(self) -> str:
        return (
            "The fiscal code should not contain any non alphanumeric character, "
            f"invalid character at position `{self.index}`"
        )


class InvalidSurname(VerifierError):
    kind: ClassVar[str] = "invalid_surname"

    part: str

    @property
    def message(self) -> str:
        return f"The fiscal code surname part should be 3 letters instead is `{self.part}`"


class InvalidName(VerifierError):
    kind: ClassVar[str] = "invalid_name"

    part: str

    @property
    def message(self) -> str:
        return f"The fiscal code name part should be 3 letters instead is `{self.part}`"


class InvalidBirthYear(VerifierError):
    kind: ClassVar[str] = "invalid_birth_year"

    part: str

    @property
    def message(self) -> str:
        return f"The fiscal code birth year part should be a 2 digits number instead is `{self.part}`"


class InvalidBirthMonth(VerifierError):
    kind: ClassVar[str] = "invalid_birth_month"

    part: str

    @property
    def message(self) -> str:
        return f"The fiscal code birth month part should be a month letter instead is `{self.part}`"


class InvalidBirthDayAndGender(VerifierError):
    kind: ClassVar[str] = "invalid_birth_day_and_gender"

    part: str

    @property
    def message(self) -> str:
        return (
            "The fiscal code birth day and gender part should be a 2 digits number "
            f"instead is `{self.part}`"
        )


class InvalidBirthDayAndGenderRange(VerifierError):
    kind: ClassVar[str] = "invalid_birth_day_and_gender_range"

    value: int

    @property
    def message(self) -> str:
        return (
            "The fiscal code birth day and gender part should be a 2 digits number "
            f"between 1-31 and 41-71 instead is `{self.value}`"
        )


class InvalidBirthPlace(VerifierError):
    kind: ClassVar[str] = "invalid_birth_place"

    part: str

    @property
    def message(self) -> str:
        return (
            "The fiscal code birth place part should be 1 letter and 3 digits "
            f"instead is `{self.part}`"
        )


class InvalidControlCharacter(VerifierError):
    kind: ClassVar[str] = "invalid_control_character"

    found: str
    expected: str

    @property
    def message(self) -> str:
        return (
            "The fiscal code control character is invalid, "
            f"found `{self.found}` expected `{self.expected}`"
        )


class InvalidBirthDate(VerifierError):
    """Raised only by the decoder: the fields pass but the date does not exist."""

    kind: ClassVar[str] = "invalid_birth_date"

    part: str

    @property
    def message(self) -> str:
        return f"The fiscal code birth date does not exist: `{self.part}`"
