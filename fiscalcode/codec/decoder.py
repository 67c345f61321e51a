"""Fiscal code decoder.

Extracts birthdate, age, gender and birthplace code from a fiscal code,
omocodes included. The birthplace is returned as a code only; resolving it
to a municipality is left to the caller.
"""

from __future__ import annotations

import logging
from datetime import date

from fiscalcode.codec.omocode import is_omocode, normalize
from fiscalcode.codec.tables import FEMALE_DAY_OFFSET, MONTH_MAP
from fiscalcode.codec.verifier import find_error
from fiscalcode.config import settings
from fiscalcode.schemas.errors import InvalidBirthDate
from fiscalcode.schemas.person import Gender
from fiscalcode.schemas.results import DecodedFiscalCode

logger = logging.getLogger(__name__)


def _infer_year(year_part: int, cutoff: int) -> int:
    """Two-digit years above the cutoff belong to the 1900s."""
    if year_part > cutoff:
        return 1900 + year_part
    return 2000 + year_part


def _age_on(birthdate: date, today: date) -> int:
    age = today.year - birthdate.year
    if (today.month, today.day) < (birthdate.month, birthdate.day):
        age -= 1
    return age


def decode(
    code: str,
    today: date | None = None,
    century_cutoff: int | None = None,
) -> DecodedFiscalCode:
    """Decode a fiscal code into personal data.

    Args:
        code: The 16-character fiscal code, any case.
        today: Reference date for the age and the default century cutoff.
            Defaults to ``date.today()``.
        century_cutoff: Two-digit years greater than this are read as 19xx.
            Defaults to ``settings.century_cutoff``, then to the last two
            digits of ``today``'s year.

    Returns:
        DecodedFiscalCode with birthdate, age, gender, birthplace code and
        validity.
    """
    error = find_error(code)
    if error is not None:
        return DecodedFiscalCode(valid=False, codice_fiscale=code, error=error)

    today = today or date.today()
    if century_cutoff is None:
        century_cutoff = settings.century_cutoff
    if century_cutoff is None:
        century_cutoff = today.year % 100

    normalized = normalize(code).upper()
    year = _infer_year(int(normalized[6:8]), century_cutoff)
    month = MONTH_MAP[normalized[8]]

    day_raw = int(normalized[9:11])
    if day_raw > FEMALE_DAY_OFFSET:
        gender = Gender.FEMALE
        day = day_raw - FEMALE_DAY_OFFSET
    else:
        gender = Gender.MALE
        day = day_raw

    try:
        birthdate = date(year, month, day)
        if birthdate > today and year >= 2000:
            year -= 100
            birthdate = date(year, month, day)
    except ValueError:
        logger.debug("Fiscal code %r has a non-existent birth date", code)
        return DecodedFiscalCode(
            valid=False,
            codice_fiscale=code,
            error=InvalidBirthDate(part=f"{year}-{month:02d}-{day:02d}"),
        )

    return DecodedFiscalCode(
        valid=True,
        codice_fiscale=code,
        birthdate=birthdate,
        age=_age_on(birthdate, today),
        gender=gender,
        birthplace_code=normalized[11:15],
        is_omocode=is_omocode(code),
    )
