"""
National ID generator.

Produces valid national IDs for testing software: the category digit is
fixed, positions 1-8 are drawn from a randomness source and the check digit
is computed, so every generated ID passes validation by construction.

The randomness source is injected. It defaults to ``random.SystemRandom``
(OS entropy, safe to share between threads); pass a seeded
``random.Random`` for reproducible output.

Example:
    >>> gen = NationalIdGenerator(seed=42)
    >>> national_id = gen.generate(Category.RESIDENT)
    >>> national_id.to_text()[0]
    '2'
"""

import random
from typing import Optional, Sequence, Union

from saudi_id.core.checksum import PAYLOAD_LENGTH, compute_check_digit
from saudi_id.core.errors import (
    InvalidPayloadError,
    PayloadCategoryError,
    RandomnessUnavailableError,
)
from saudi_id.core.national_id import ASCII_DIGITS, CATEGORY_PREFIXES, Category, NationalId
from saudi_id.logging.setup import get_logger

logger = get_logger(__name__)

# Default upper bound for generate_many
DEFAULT_MAX_COUNT = 10000


class NationalIdGenerator:
    """Generator for random and fixed-payload national IDs.

    Attributes:
        max_count: Largest batch accepted by ``generate_many``.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        *,
        seed: Optional[int] = None,
        max_count: int = DEFAULT_MAX_COUNT,
    ):
        """Initialize the generator.

        Args:
            rng: Randomness source exposing ``randrange``. Takes precedence
                over ``seed``.
            seed: Seed for a private ``random.Random`` (reproducible output).
            max_count: Largest batch accepted by ``generate_many``.
        """
        if rng is None:
            rng = random.Random(seed) if seed is not None else random.SystemRandom()
        self._rng = rng
        self.max_count = max_count

    def generate(self, category: Union[Category, str]) -> NationalId:
        """Generate a random national ID of the given category.

        Raises:
            RandomnessUnavailableError: If the randomness source fails.
        """
        category = Category(category)
        payload = [category.prefix] + [self._draw_digit() for _ in range(PAYLOAD_LENGTH - 1)]
        national_id = self._assemble(payload)

        logger.debug(
            "Generated national ID",
            extra={"event": "id_generated", "category": category.value},
        )
        return national_id

    @staticmethod
    def generate_with_payload(payload: Union[str, Sequence[int]]) -> NationalId:
        """Generate the national ID for a fixed 9-digit payload.

        Args:
            payload: 9 digits as a string or a sequence of ints.

        Raises:
            InvalidPayloadError: If the payload is not 9 decimal digits.
            PayloadCategoryError: If the payload does not start with 1 or 2.
        """
        digits = _payload_digits(payload)
        if digits[0] not in CATEGORY_PREFIXES.values():
            raise PayloadCategoryError(digits[0])
        return NationalIdGenerator._assemble(digits)

    def generate_many(self, category: Union[Category, str], count: int) -> list[NationalId]:
        """Generate ``count`` random national IDs of one category."""
        if count <= 0:
            raise ValueError(f"count must be positive, got {count}")
        if count > self.max_count:
            raise ValueError(f"count must not exceed {self.max_count}, got {count}")
        return [self.generate(category) for _ in range(count)]

    def _draw_digit(self) -> int:
        try:
            digit = self._rng.randrange(10)
        except Exception as e:
            logger.warning(
                "Randomness source failed",
                extra={"event": "randomness_unavailable", "error": str(e)},
            )
            raise RandomnessUnavailableError(str(e)) from e

        if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
            raise RandomnessUnavailableError(f"source returned {digit!r}")
        return digit

    @staticmethod
    def _assemble(payload: list[int]) -> NationalId:
        return NationalId(tuple(payload) + (compute_check_digit(payload),))


def _payload_digits(payload: Union[str, Sequence[int]]) -> list[int]:
    """Normalize a payload to a list of ints, checking shape only."""
    if isinstance(payload, str):
        for position, character in enumerate(payload):
            if character not in ASCII_DIGITS:
                raise InvalidPayloadError(f"non-digit character {character!r} at position {position}")
        digits = [int(character) for character in payload]
    else:
        digits = list(payload)
        for position, digit in enumerate(digits):
            if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
                raise InvalidPayloadError(f"element {digit!r} at position {position} is not a digit")

    if len(digits) != PAYLOAD_LENGTH:
        raise InvalidPayloadError(f"expected {PAYLOAD_LENGTH} digits, got {len(digits)}")
    return digits


def generate(category: Union[Category, str], rng: Optional[random.Random] = None) -> NationalId:
    """Generate a random national ID. See :meth:`NationalIdGenerator.generate`."""
    return NationalIdGenerator(rng).generate(category)


def generate_with_payload(payload: Union[str, Sequence[int]]) -> NationalId:
    """Generate the national ID for a fixed payload."""
    return NationalIdGenerator.generate_with_payload(payload)
