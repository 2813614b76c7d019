"""Exceptions raised while parsing or generating national IDs.

The hierarchy is closed: every failure is one of the concrete classes below,
each with a stable ``code`` for callers that report errors as data.
"""

from typing import Optional


class SaudiIdError(ValueError):
    """Base class for all national ID errors."""

    code: str = "saudi_id_error"


class ParseError(SaudiIdError):
    """Raised when external input is not a valid national ID."""

    code = "parse_error"


class WrongLengthError(ParseError):
    """Input does not contain exactly 10 digits."""

    code = "wrong_length"

    def __init__(self, actual: int, expected: int = 10):
        self.actual = actual
        self.expected = expected
        super().__init__(f"National ID must have {expected} digits, got {actual}")


class NonDigitError(ParseError):
    """Input contains a character that is not an ASCII decimal digit."""

    code = "non_digit"

    def __init__(self, character: object, position: int):
        self.character = character
        self.position = position
        super().__init__(f"Non-digit character {character!r} at position {position}")


class InvalidCategoryError(ParseError):
    """Leading digit is neither 1 (citizen) nor 2 (resident)."""

    code = "invalid_category"

    def __init__(self, digit: int):
        self.digit = digit
        super().__init__(f"Leading digit must be 1 or 2, got {digit}")


class ChecksumMismatchError(ParseError):
    """Trailing digit does not match the computed check digit."""

    code = "checksum_mismatch"

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Check digit mismatch: expected {expected}, got {actual}")


class GenerationError(SaudiIdError):
    """Raised when a national ID cannot be generated."""

    code = "generation_error"


class RandomnessUnavailableError(GenerationError):
    """The randomness source failed to produce a digit."""

    code = "randomness_unavailable"

    def __init__(self, reason: Optional[str] = None):
        self.reason = reason
        message = "Randomness source unavailable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class PayloadCategoryError(GenerationError):
    """Payload for fixed generation does not start with 1 or 2."""

    code = "payload_category"

    def __init__(self, digit: int):
        self.digit = digit
        super().__init__(f"Payload must start with 1 or 2, got {digit}")


class InvalidPayloadError(GenerationError):
    """Payload for fixed generation is not 9 decimal digits."""

    code = "invalid_payload"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Invalid payload: {detail}")
