"""Fiscal code generation: from personal data, at random, and omocodes.

CF format: AAABBB 00C00 D000 E
  - AAA:  surname consonants (then vowels, then X)
  - BBB:  name consonants (then vowels, then X)
  - 00C00: see date_gender
  - D000: birthplace code (codice catastale / Belfiore)
  - E:    check character
"""

from __future__ import annotations

import logging
import random

from fiscalcode.codec.checksum import compute_control_character
from fiscalcode.codec.date_gender import encode_date_gender, encode_day_and_gender
from fiscalcode.codec.name_part import encode_name_part
from fiscalcode.codec.omocode import enumerate_omocodes, normalize
from fiscalcode.codec.tables import ALPHABET, DIGITS, MONTH_CODES
from fiscalcode.fiscal_code import FiscalCode
from fiscalcode.schemas.person import Gender, PersonInput

logger = logging.getLogger(__name__)

# Random letters never use the first alphabet entry
_RANDOM_LETTERS = ALPHABET[1:]


def _with_control_character(partial: str) -> str:
    return partial + compute_control_character(partial)


def generate(person: PersonInput) -> FiscalCode:
    """Generate the fiscal code of a person.

    Deterministic: the same input always yields the same uppercase code.
    """
    partial = (
        encode_name_part(person.surname)
        + encode_name_part(person.name)
        + encode_date_gender(person.birthdate, person.gender)
        + person.place_code.upper()
    )
    code = _with_control_character(partial)
    logger.debug("Generated fiscal code %s", code)
    return FiscalCode._from_verified(code)


def generate_random(seed: int | None = None) -> FiscalCode:
    """Generate a random, structurally valid fiscal code.

    Args:
        seed: Seed for a reproducible sequence. None draws the seed from
            the operating system's entropy source.

    Returns:
        A FiscalCode that passes ``verify``.
    """
    rng = random.Random(seed)

    letters = "".join(rng.choice(_RANDOM_LETTERS) for _ in range(6))
    year = "".join(rng.choice(DIGITS) for _ in range(2))
    month = rng.choice(MONTH_CODES)
    day = encode_day_and_gender(rng.randint(1, 31), rng.choice((Gender.MALE, Gender.FEMALE)))
    place = rng.choice(_RANDOM_LETTERS) + "".join(rng.choice(DIGITS) for _ in range(3))

    code = _with_control_character(letters + year + month + day + place)
    logger.debug("Generated random fiscal code %s (seed=%s)", code, seed)
    return FiscalCode._from_verified(code)


def generate_omocodes(code: str) -> list[FiscalCode]:
    """Generate the 7 omocodes of ``code``.

    The input is normalized first, so an omocode and its base code share the
    same variants.

    Raises:
        ValueError: If ``code`` is too short or, once normalized, has a
            non-digit at an omocode position.
    """
    base = normalize(code).upper()
    return [FiscalCode._from_verified(omocode) for omocode in enumerate_omocodes(base)]
