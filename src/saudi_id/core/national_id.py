"""
Saudi national ID value type.

A national ID is 10 decimal digits: the leading digit is the holder category
(1 for citizens, 2 for residents), the trailing digit is a check digit over
the first nine. Instances are validated on construction and immutable
afterwards, so every live ``NationalId`` is a valid one.

Example:
    >>> national_id = parse("1000000008")
    >>> national_id.category
    <Category.CITIZEN: 'citizen'>
    >>> national_id.to_text()
    '1000000008'
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from saudi_id.core.checksum import ID_LENGTH, PAYLOAD_LENGTH, compute_check_digit
from saudi_id.core.errors import (
    ChecksumMismatchError,
    InvalidCategoryError,
    NonDigitError,
    ParseError,
    WrongLengthError,
)
from saudi_id.logging.setup import get_logger
from saudi_id.utils.masking import mask_national_id

logger = get_logger(__name__)

ASCII_DIGITS = "0123456789"


class Category(str, Enum):
    """Holder category encoded in the leading digit."""

    CITIZEN = "citizen"
    RESIDENT = "resident"

    @property
    def prefix(self) -> int:
        """Leading digit used for this category."""
        return CATEGORY_PREFIXES[self]

    @classmethod
    def from_prefix(cls, digit: int) -> "Category":
        """Look up the category for a leading digit.

        Raises:
            InvalidCategoryError: If the digit is not 1 or 2.
        """
        for category, prefix in CATEGORY_PREFIXES.items():
            if prefix == digit:
                return category
        raise InvalidCategoryError(digit)


CATEGORY_PREFIXES = {
    Category.CITIZEN: 1,
    Category.RESIDENT: 2,
}


@dataclass(frozen=True)
class NationalId:
    """A validated Saudi national ID.

    Attributes:
        digits: The 10 digits, category digit first and check digit last.

    Raises:
        ParseError: On construction, if the digits violate any invariant.
    """

    digits: tuple[int, ...]

    def __post_init__(self) -> None:
        digits = tuple(self.digits)
        object.__setattr__(self, "digits", digits)

        for position, digit in enumerate(digits):
            if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
                raise NonDigitError(digit, position)

        if len(digits) != ID_LENGTH:
            raise WrongLengthError(len(digits), ID_LENGTH)

        Category.from_prefix(digits[0])

        expected = compute_check_digit(digits[:PAYLOAD_LENGTH])
        if digits[PAYLOAD_LENGTH] != expected:
            raise ChecksumMismatchError(expected, digits[PAYLOAD_LENGTH])

    @classmethod
    def parse(cls, text: str) -> "NationalId":
        """Parse a 10-character string of ASCII digits.

        Whitespace and separators are not tolerated; strip them beforehand.

        Args:
            text: Candidate national ID.

        Returns:
            The validated NationalId.

        Raises:
            NonDigitError: A character is not an ASCII digit.
            WrongLengthError: The input is not exactly 10 digits.
            InvalidCategoryError: The leading digit is not 1 or 2.
            ChecksumMismatchError: The check digit is wrong.
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")

        try:
            for position, character in enumerate(text):
                if character not in ASCII_DIGITS:
                    raise NonDigitError(character, position)
            return cls(tuple(int(character) for character in text))
        except ParseError as e:
            logger.debug(
                "Rejected national ID",
                extra={
                    "event": "parse_rejected",
                    "code": e.code,
                    "masked_input": mask_national_id(text),
                },
            )
            raise

    @classmethod
    def from_digits(cls, digits: Iterable[int]) -> "NationalId":
        """Build a NationalId from a sequence of integer digits."""
        return cls(tuple(digits))

    @classmethod
    def from_int(cls, number: int) -> "NationalId":
        """Build a NationalId from its integer value.

        Negative numbers are rejected on the sign character.
        """
        if isinstance(number, bool) or not isinstance(number, int):
            raise TypeError(f"Expected int, got {type(number).__name__}")
        return cls.parse(str(number))

    @property
    def category(self) -> Category:
        return Category.from_prefix(self.digits[0])

    @property
    def payload(self) -> tuple[int, ...]:
        return self.digits[:PAYLOAD_LENGTH]

    @property
    def check_digit(self) -> int:
        return self.digits[PAYLOAD_LENGTH]

    def to_text(self) -> str:
        """Canonical 10-digit form."""
        return "".join(str(digit) for digit in self.digits)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"NationalId('{mask_national_id(self.to_text())}')"


def parse(text: str) -> NationalId:
    """Parse a national ID string. See :meth:`NationalId.parse`."""
    return NationalId.parse(text)


def is_valid(text: str) -> bool:
    """Check whether a string is a valid national ID.

    Examples:
        >>> is_valid("1000000008")
        True
        >>> is_valid("1000000009")
        False
    """
    if not text or not isinstance(text, str):
        return False
    try:
        NationalId.parse(text)
    except ParseError:
        return False
    return True
