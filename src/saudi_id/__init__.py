"""
saudi-id: Saudi Arabian national ID numbers

Validate, parse and generate 10-digit national IDs for citizens and
residents.
"""

__version__ = "1.0.0"

from saudi_id.core.checksum import compute_check_digit, verify
from saudi_id.core.errors import GenerationError, ParseError, SaudiIdError
from saudi_id.core.generator import NationalIdGenerator, generate, generate_with_payload
from saudi_id.core.national_id import Category, NationalId, is_valid, parse

__all__ = [
    "Category",
    "NationalId",
    "NationalIdGenerator",
    "parse",
    "is_valid",
    "generate",
    "generate_with_payload",
    "compute_check_digit",
    "verify",
    "SaudiIdError",
    "ParseError",
    "GenerationError",
]
