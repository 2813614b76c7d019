"""
Pydantic models for machine-readable command output.
"""

from typing import Optional

from pydantic import BaseModel, Field

from saudi_id.core.errors import SaudiIdError
from saudi_id.core.national_id import Category, NationalId


class NationalIdRecord(BaseModel):
    """Outcome of validating or generating one national ID."""

    national_id: str = Field(..., description="Input or generated ID")
    valid: bool = Field(..., description="Whether the ID passed validation")
    category: Optional[Category] = Field(None, description="Holder category, when valid")
    error_code: Optional[str] = Field(None, description="Stable error code, when invalid")
    error: Optional[str] = Field(None, description="Human-readable error, when invalid")

    @classmethod
    def from_national_id(cls, national_id: NationalId) -> "NationalIdRecord":
        return cls(
            national_id=national_id.to_text(),
            valid=True,
            category=national_id.category,
        )

    @classmethod
    def from_error(cls, value: str, error: SaudiIdError) -> "NationalIdRecord":
        return cls(
            national_id=value,
            valid=False,
            error_code=error.code,
            error=str(error),
        )


class CheckDigitRecord(BaseModel):
    """Check digit computed for a payload."""

    payload: str
    check_digit: int = Field(..., ge=0, le=9)
    national_id: str


class ScanMatch(BaseModel):
    """A national ID found in free text."""

    national_id: str
    category: Category
    start: int = Field(..., ge=0, description="Start offset in the scanned text")
    end: int = Field(..., ge=0, description="End offset in the scanned text")
    score: float = Field(..., ge=0.0, le=1.0)
