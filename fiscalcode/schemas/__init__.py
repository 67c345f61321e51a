"""Pydantic schemas: person input, results and verification errors."""

from fiscalcode.schemas.errors import (
    InvalidBirthDate,
    InvalidBirthDayAndGender,
    InvalidBirthDayAndGenderRange,
    InvalidBirthMonth,
    InvalidBirthPlace,
    InvalidBirthYear,
    InvalidControlCharacter,
    InvalidLength,
    InvalidName,
    InvalidSurname,
    NonAlphanumericCharacter,
    VerifierError,
)
from fiscalcode.schemas.person import Gender, PersonInput
from fiscalcode.schemas.results import DecodedFiscalCode, VerificationResult

__all__ = [
    "DecodedFiscalCode",
    "Gender",
    "InvalidBirthDate",
    "InvalidBirthDayAndGender",
    "InvalidBirthDayAndGenderRange",
    "InvalidBirthMonth",
    "InvalidBirthPlace",
    "InvalidBirthYear",
    "InvalidControlCharacter",
    "InvalidLength",
    "InvalidName",
    "InvalidSurname",
    "NonAlphanumericCharacter",
    "PersonInput",
    "VerificationResult",
    "VerifierError",
]
