"""Birth date and gender fragment (positions 6–10).

  - 00: year of birth (last 2 digits)
  - C:  month of birth (letter from MONTH_CODES)
  - 00: day of birth (1–31 male, 41–71 female)
"""

from __future__ import annotations

from datetime import date

from fiscalcode.codec.tables import FEMALE_DAY_OFFSET, MONTH_CODES
from fiscalcode.schemas.person import Gender


def encode_day_and_gender(day: int, gender: Gender) -> str:
    """Encode the day of birth, shifted by 40 for women, as 2 digits."""
    if gender == Gender.FEMALE:
        day += FEMALE_DAY_OFFSET
    return f"{day:02d}"


def encode_date_gender(birthdate: date, gender: Gender) -> str:
    """Encode birth date and gender into the 5-character fragment."""
    year_part = f"{birthdate.year % 100:02d}"
    month_part = MONTH_CODES[birthdate.month - 1]
    return year_part + month_part + encode_day_and_gender(birthdate.day, gender)
