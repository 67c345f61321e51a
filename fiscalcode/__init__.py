"""Italian fiscal code (codice fiscale) generation, verification and decoding.

Pure Python, no registry lookups: the birthplace is checked by shape only.
"""

from fiscalcode.codec import (
    compute_control_character,
    decode,
    generate,
    generate_omocodes,
    generate_random,
    is_omocode,
    is_valid,
    normalize,
    verify,
)
from fiscalcode.fiscal_code import FiscalCode, InvalidFiscalCodeError
from fiscalcode.schemas import (
    DecodedFiscalCode,
    Gender,
    PersonInput,
    VerificationResult,
    VerifierError,
)

__version__ = "0.1.0"

__all__ = [
    "DecodedFiscalCode",
    "FiscalCode",
    "Gender",
    "InvalidFiscalCodeError",
    "PersonInput",
    "VerificationResult",
    "VerifierError",
    "compute_control_character",
    "decode",
    "generate",
    "generate_omocodes",
    "generate_random",
    "is_omocode",
    "is_valid",
    "normalize",
    "verify",
]
