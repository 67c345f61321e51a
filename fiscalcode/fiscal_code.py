"""FiscalCode value type.

A FiscalCode always holds a string that passed verification: it is built by
``FiscalCode.parse``, by pydantic validation of the ``value`` field, or by
the generator.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, field_validator

if TYPE_CHECKING:
    from fiscalcode.schemas.errors import VerifierError
    from fiscalcode.schemas.results import DecodedFiscalCode


class InvalidFiscalCodeError(ValueError):
    """Raised by ``FiscalCode.parse``; carries the verifier error."""

    def __init__(self, error: VerifierError) -> None:
        self.error = error
        super().__init__(error.message)


class FiscalCode(BaseModel):
    """A verified 16-character fiscal code, case preserved."""

    model_config = ConfigDict(frozen=True)

    value: str

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str) -> str:
        from fiscalcode.codec.verifier import find_error

        error = find_error(v)
        if error is not None:
            raise ValueError(error.message)
        return v

    @classmethod
    def parse(cls, raw: str) -> FiscalCode:
        """Verify ``raw`` and wrap it.

        Raises:
            InvalidFiscalCodeError: With the first verifier error.
        """
        from fiscalcode.codec.verifier import find_error

        error = find_error(raw)
        if error is not None:
            raise InvalidFiscalCodeError(error)
        return cls._from_verified(raw)

    @classmethod
    def _from_verified(cls, code: str) -> FiscalCode:
        return cls.model_construct(value=code)

    def __str__(self) -> str:
        return self.value

    @property
    def is_omocode(self) -> bool:
        from fiscalcode.codec.omocode import is_omocode

        return is_omocode(self.value)

    def omocodes(self) -> list[FiscalCode]:
        """The 7 omocodes of this code's base form."""
        from fiscalcode.codec.generator import generate_omocodes

        return generate_omocodes(self.value)

    def decode(self, today: date | None = None) -> DecodedFiscalCode:
        from fiscalcode.codec.decoder import decode

        return decode(self.value, today=today)
