"""Tests for the fiscal code decoder.

Tests cover:
- Valid decoding (known persons)
- Gender detection (male vs female)
- Century inference (argument, settings, default)
- Omocode decoding
- Invalid format, checksum and non-existent dates
- Age calculation
"""

from __future__ import annotations

from datetime import date

import pytest

from fiscalcode.codec.checksum import compute_control_character
from fiscalcode.codec.decoder import decode
from fiscalcode.codec.tables import MONTH_MAP
from fiscalcode.config import settings
from fiscalcode.schemas.errors import InvalidBirthDate, InvalidControlCharacter, InvalidLength
from fiscalcode.schemas.person import Gender

TODAY = date(2026, 10, 19)


class TestDecode:
    """Test full decoding."""

    def test_decode_female(self) -> None:
        result = decode("RSSMRA85H52F205C", today=TODAY)
        assert result.valid is True
        assert result.gender is Gender.FEMALE
        assert result.birthdate == date(1985, 6, 12)
        assert result.birthplace_code == "F205"
        assert result.is_omocode is False
        assert result.error is None

    def test_decode_male(self) -> None:
        result = decode("BNCMRC90C15H501W", today=TODAY)
        assert result.valid is True
        assert result.gender is Gender.MALE
        assert result.birthdate == date(1990, 3, 15)
        assert result.birthplace_code == "H501"

    def test_decode_gender_female_day_offset(self) -> None:
        """Female code has day + 40, so day 48 means born on the 8th."""
        result = decode("SCCPIX98L48M256N", today=TODAY)
        assert result.gender is Gender.FEMALE
        assert result.birthdate == date(1998, 7, 8)

    def test_decode_omocode(self) -> None:
        result = decode("BRNPRZ72D52F83VC", today=TODAY)
        assert result.valid is True
        assert result.is_omocode is True
        assert result.birthdate == date(1972, 4, 12)
        assert result.birthplace_code == "F839"

    def test_lowercase_input(self) -> None:
        result = decode("rssmra85H52F205C", today=TODAY)
        assert result.valid is True
        assert result.birthplace_code == "F205"
        assert result.codice_fiscale == "rssmra85H52F205C"

    def test_age_calculation(self) -> None:
        assert decode("RSSMRA85H52F205C", today=TODAY).age == 41
        assert decode("RSSMRA85H52F205C", today=date(2026, 6, 11)).age == 40

    def test_default_today(self) -> None:
        result = decode("RSSMRA85H52F205C")
        assert result.valid is True
        assert result.age is not None

    def test_all_months_decodable(self) -> None:
        assert set(MONTH_MAP.values()) == set(range(1, 13))


class TestCenturyInference:
    """Two-digit years above the cutoff belong to the 1900s."""

    def test_old_year_with_today(self) -> None:
        result = decode("VRDLGI50A01L219Q", today=TODAY)
        assert result.birthdate == date(1950, 1, 1)

    def test_recent_year_with_today(self) -> None:
        result = decode("PLTPPP23A07B544K", today=TODAY)
        assert result.birthdate == date(2023, 1, 7)

    def test_cutoff_year_later_than_today(self) -> None:
        """Year 26 read as 2026 would be in the future on 2026-10-19: it is 1926."""
        partial = "RSSMRA26T01F205"
        result = decode(partial + compute_control_character(partial), today=TODAY)
        assert result.valid is True
        assert result.birthdate == date(1926, 12, 1)
        assert result.age == 99

    def test_cutoff_year_earlier_than_today(self) -> None:
        partial = "RSSMRA26A01F205"
        result = decode(partial + compute_control_character(partial), today=TODAY)
        assert result.birthdate == date(2026, 1, 1)
        assert result.age == 0

    def test_explicit_cutoff(self) -> None:
        result = decode("VRDLGI50A01L219Q", today=TODAY, century_cutoff=60)
        assert result.birthdate == date(2050, 1, 1)

    def test_settings_cutoff(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "century_cutoff", 60)
        result = decode("VRDLGI50A01L219Q", today=TODAY)
        assert result.birthdate == date(2050, 1, 1)

    def test_argument_beats_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "century_cutoff", 60)
        result = decode("VRDLGI50A01L219Q", today=TODAY, century_cutoff=10)
        assert result.birthdate == date(1950, 1, 1)


class TestDecodeErrors:
    """Invalid codes come back with valid=False and the error."""

    def test_invalid_format_returns_error(self) -> None:
        result = decode("INVALID")
        assert result.valid is False
        assert result.error == InvalidLength(length=7)
        assert result.birthdate is None

    def test_invalid_checksum_returns_error(self) -> None:
        result = decode("RSSMRA85H52F205A")
        assert result.valid is False
        assert result.error == InvalidControlCharacter(found="A", expected="C")

    def test_non_existent_date(self) -> None:
        partial = "RSSMRA85B31F205"
        result = decode(partial + compute_control_character(partial), today=TODAY)
        assert result.valid is False
        assert result.error == InvalidBirthDate(part="1985-02-31")

    def test_leap_day(self) -> None:
        partial = "RSSMRA00B29F205"
        result = decode(partial + compute_control_character(partial), today=TODAY)
        assert result.valid is True
        assert result.birthdate == date(2000, 2, 29)
