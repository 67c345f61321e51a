"""Fiscal code verification.

Fail-fast pipeline, first violated rule wins:
  length → charset → omocode normalization → surname → name → year →
  month → day/gender → place → control character.

Field shapes are checked on the normalized code, the control character on
the raw one. Errors are returned in the result, never raised.
"""

from __future__ import annotations

import logging

from fiscalcode.codec.checksum import compute_control_character
from fiscalcode.codec.omocode import normalize
from fiscalcode.codec.tables import CODE_LENGTH, FEMALE_DAY_OFFSET, MONTH_MAP
from fiscalcode.schemas.errors import (
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
from fiscalcode.schemas.results import VerificationResult

logger = logging.getLogger(__name__)

_MAX_DAY = 31


def _is_ascii_letters(value: str) -> bool:
    return value.isascii() and value.isalpha()


def _is_ascii_digits(value: str) -> bool:
    return value.isascii() and value.isdigit()


# ── Field rules ──────────────────────────────────────────────────────


def _check_characters(code: str) -> VerifierError | None:
    for index, char in enumerate(code):
        if not (char.isascii() and char.isalnum()):
            return NonAlphanumericCharacter(index=index)
    return None


def _check_surname(part: str) -> VerifierError | None:
    if len(part) == 3 and _is_ascii_letters(part):
        return None
    return InvalidSurname(part=part)


def _check_name(part: str) -> VerifierError | None:
    if len(part) == 3 and _is_ascii_letters(part):
        return None
    return InvalidName(part=part)


def _check_birth_year(part: str) -> VerifierError | None:
    if _is_ascii_digits(part):
        return None
    return InvalidBirthYear(part=part)


def _check_birth_month(part: str) -> VerifierError | None:
    if part in MONTH_MAP:
        return None
    return InvalidBirthMonth(part=part)


def _check_birth_day_and_gender(part: str) -> VerifierError | None:
    if not _is_ascii_digits(part):
        return InvalidBirthDayAndGender(part=part)

    value = int(part)
    if 1 <= value <= _MAX_DAY or FEMALE_DAY_OFFSET + 1 <= value <= FEMALE_DAY_OFFSET + _MAX_DAY:
        return None
    return InvalidBirthDayAndGenderRange(value=value)


def _check_birth_place(part: str) -> VerifierError | None:
    if len(part) == 4 and _is_ascii_letters(part[0]) and _is_ascii_digits(part[1:]):
        return None
    return InvalidBirthPlace(part=part)


def _check_control_character(code: str) -> VerifierError | None:
    expected = compute_control_character(code)
    found = code[CODE_LENGTH - 1]
    if found == expected:
        return None
    return InvalidControlCharacter(found=found, expected=expected)


# ── Public API ───────────────────────────────────────────────────────


def find_error(code: str) -> VerifierError | None:
    """Return the first rule ``code`` violates, or None when it is valid."""
    if len(code) != CODE_LENGTH:
        return InvalidLength(length=len(code))

    error = _check_characters(code)
    if error is not None:
        return error

    normalized = normalize(code)
    checks = (
        (_check_surname, normalized[0:3]),
        (_check_name, normalized[3:6]),
        (_check_birth_year, normalized[6:8]),
        (_check_birth_month, normalized[8:9]),
        (_check_birth_day_and_gender, normalized[9:11]),
        (_check_birth_place, normalized[11:15]),
        (_check_control_character, code),
    )
    for check, part in checks:
        error = check(part)
        if error is not None:
            return error
    return None


def verify(code: str) -> VerificationResult:
    """Verify a candidate fiscal code.

    Args:
        code: Any string. Case is ignored, omocode letters are accepted.

    Returns:
        VerificationResult with the raw code (case preserved) and, when
        invalid, the first error found.
    """
    error = find_error(code)
    if error is not None:
        logger.debug("Fiscal code %r rejected: %s", code, error.kind)
        return VerificationResult(valid=False, codice_fiscale=code, error=error)
    return VerificationResult(valid=True, codice_fiscale=code)


def is_valid(code: str) -> bool:
    """Shortcut for ``verify(code).valid``."""
    return find_error(code) is None
