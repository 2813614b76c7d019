"""Core modules for national ID parsing, validation and generation."""

from saudi_id.core.checksum import compute_check_digit, fold_sum, verify
from saudi_id.core.errors import (
    ChecksumMismatchError,
    GenerationError,
    InvalidCategoryError,
    InvalidPayloadError,
    NonDigitError,
    ParseError,
    PayloadCategoryError,
    RandomnessUnavailableError,
    SaudiIdError,
    WrongLengthError,
)
from saudi_id.core.generator import NationalIdGenerator, generate, generate_with_payload
from saudi_id.core.national_id import Category, NationalId, is_valid, parse

__all__ = [
    "Category",
    "NationalId",
    "parse",
    "is_valid",
    # Checksum
    "compute_check_digit",
    "fold_sum",
    "verify",
    # Generation
    "NationalIdGenerator",
    "generate",
    "generate_with_payload",
    # Errors
    "SaudiIdError",
    "ParseError",
    "WrongLengthError",
    "NonDigitError",
    "InvalidCategoryError",
    "ChecksumMismatchError",
    "GenerationError",
    "RandomnessUnavailableError",
    "PayloadCategoryError",
    "InvalidPayloadError",
]
