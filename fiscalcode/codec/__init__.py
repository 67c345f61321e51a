"""Fiscal code codec: checksum, encoders, omocodia, verifier, generator, decoder."""

from fiscalcode.codec.checksum import compute_control_character
from fiscalcode.codec.date_gender import encode_date_gender
from fiscalcode.codec.decoder import decode
from fiscalcode.codec.generator import generate, generate_omocodes, generate_random
from fiscalcode.codec.name_part import encode_name_part
from fiscalcode.codec.omocode import enumerate_omocodes, is_omocode, normalize
from fiscalcode.codec.verifier import find_error, is_valid, verify

__all__ = [
    "compute_control_character",
    "decode",
    "encode_date_gender",
    "encode_name_part",
    "enumerate_omocodes",
    "find_error",
    "generate",
    "generate_omocodes",
    "generate_random",
    "is_omocode",
    "is_valid",
    "normalize",
    "verify",
]
