"""Tests for fiscal code generation.

Tests cover:
- Known persons (female/male, short names)
- Determinism and round-trip through the verifier
- Seeded and unseeded random generation
- Omocode generation from plain and omocode codes
"""

from __future__ import annotations

from datetime import date

import pytest

from fiscalcode.codec.generator import generate, generate_omocodes, generate_random
from fiscalcode.codec.verifier import verify
from fiscalcode.fiscal_code import FiscalCode
from fiscalcode.schemas.person import Gender, PersonInput


def _person(**overrides: object) -> PersonInput:
    data: dict[str, object] = {
        "name": "PI",
        "surname": "SUCCHIO",
        "birthdate": date(1998, 7, 8),
        "gender": Gender.FEMALE,
        "place_code": "M256",
    }
    data.update(overrides)
    return PersonInput(**data)


class TestGenerate:
    """Test generation from personal data."""

    def test_female(self) -> None:
        assert generate(_person()).value == "SCCPIX98L48M256N"

    def test_male(self) -> None:
        assert generate(_person(gender=Gender.MALE)).value == "SCCPIX98L08M256J"

    def test_pluto_pippo_male(self) -> None:
        person = _person(
            name="PIPPO", surname="PLUTO", birthdate=date(2023, 1, 7),
            gender=Gender.MALE, place_code="B544",
        )
        assert generate(person).value == "PLTPPP23A07B544K"

    def test_pluto_pippo_female(self) -> None:
        person = _person(
            name="PIPPO", surname="PLUTO", birthdate=date(2022, 10, 2),
            gender=Gender.FEMALE, place_code="T567",
        )
        assert generate(person).value == "PLTPPP22R42T567K"

    def test_mixed_case_input_gives_uppercase(self) -> None:
        person = _person(name="Pi", surname="Succhio", place_code="m256")
        assert generate(person).value == "SCCPIX98L48M256N"

    def test_returns_fiscal_code(self) -> None:
        code = generate(_person())
        assert isinstance(code, FiscalCode)
        assert str(code) == "SCCPIX98L48M256N"

    def test_deterministic(self) -> None:
        assert generate(_person()) == generate(_person())

    @pytest.mark.parametrize(
        ("name", "surname", "birthdate", "gender", "place_code"),
        [
            ("Maria", "Rossi", date(1985, 6, 12), Gender.FEMALE, "F205"),
            ("Marco", "Bianchi", date(1990, 3, 15), Gender.MALE, "H501"),
            ("Al", "Wu", date(2000, 2, 29), Gender.MALE, "Z210"),
            ("Eva", "Oe", date(1901, 12, 31), Gender.FEMALE, "A001"),
            ("Giovanni", "Conti", date(2010, 10, 2), Gender.FEMALE, "Z111"),
        ],
    )
    def test_generated_codes_verify(
        self, name: str, surname: str, birthdate: date, gender: Gender, place_code: str
    ) -> None:
        person = PersonInput(
            name=name, surname=surname, birthdate=birthdate, gender=gender, place_code=place_code
        )
        code = generate(person).value
        assert len(code) == 16
        assert code == code.upper()
        assert verify(code).valid is True


class TestGenerateRandom:
    """Test random generation."""

    def test_random_codes_verify(self) -> None:
        for _ in range(1000):
            code = generate_random()
            assert verify(code.value).valid is True, code.value

    def test_seeded_codes_verify(self) -> None:
        for seed in range(500):
            assert verify(generate_random(seed).value).valid is True

    def test_same_seed_same_code(self) -> None:
        assert generate_random(19) == generate_random(19)

    def test_different_seeds(self) -> None:
        codes = {generate_random(seed).value for seed in range(50)}
        assert len(codes) > 1

    def test_random_codes_are_not_omocodes(self) -> None:
        for seed in range(100):
            assert generate_random(seed).is_omocode is False

    def test_first_letter_never_a(self) -> None:
        """Letters are drawn from B–Z."""
        for seed in range(200):
            code = generate_random(seed).value
            for index in (0, 1, 2, 3, 4, 5, 11):
                assert code[index] != "A"


class TestGenerateOmocodes:
    """Test omocode generation."""

    def test_from_plain_code(self) -> None:
        omocodes = generate_omocodes("ZLKESP25B55Y463L")
        assert len(omocodes) == 7
        assert omocodes[0].value == "ZLKESP25B55Y46PH"
        assert len({o.value for o in omocodes}) == 7
        assert all(verify(o.value).valid for o in omocodes)

    def test_from_omocode(self) -> None:
        """An omocode is normalized first: its first omocode is itself."""
        omocodes = generate_omocodes("BRNPRZ72D52F83VC")
        assert len(omocodes) == 7
        assert omocodes[0].value == "BRNPRZ72D52F83VC"

    def test_lowercase_input(self) -> None:
        omocodes = generate_omocodes("zlkesp25b55y463l")
        assert omocodes[0].value == "ZLKESP25B55Y46PH"

    def test_generated_code_omocodes(self) -> None:
        code = generate(_person())
        omocodes = generate_omocodes(code.value)
        assert len(omocodes) == 7
        assert code not in omocodes
        assert all(verify(o.value).valid for o in omocodes)

    def test_invalid_base_raises(self) -> None:
        with pytest.raises(ValueError):
            generate_omocodes("ZLKESP25B55Y4S3L")
