"""Result models returned by the verifier and the decoder."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, field_serializer

from fiscalcode.schemas.errors import VerifierError
from fiscalcode.schemas.person import Gender

if TYPE_CHECKING:
    from fiscalcode.fiscal_code import FiscalCode


# ---------------------------------------------------------------------------
# Verification
# ---------------------------------------------------------------------------


class VerificationResult(BaseModel):
    """Outcome of ``verify``: the raw input, case preserved, and the first error."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    codice_fiscale: str
    error: VerifierError | None = None

    @field_serializer("error")
    def serialize_error(self, error: VerifierError | None) -> dict[str, Any] | None:
        return error.to_dict() if error is not None else None

    @property
    def fiscal_code(self) -> FiscalCode | None:
        """The validated code, or None when verification failed."""
        if not self.valid:
            return None
        from fiscalcode.fiscal_code import FiscalCode

        return FiscalCode._from_verified(self.codice_fiscale)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


class DecodedFiscalCode(BaseModel):
    """Personal data read back from a fiscal code."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    codice_fiscale: str
    birthdate: date | None = None
    age: int | None = None
    gender: Gender | None = None
    birthplace_code: str | None = None  # Belfiore code, e.g. "F205"
    is_omocode: bool = False
    error: VerifierError | None = None

    @field_serializer("error")
    def serialize_error(self, error: VerifierError | None) -> dict[str, Any] | None:
        return error.to_dict() if error is not None else None
