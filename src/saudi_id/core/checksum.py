"""
Check digit algorithm for Saudi national IDs.

A Luhn-family fold-sum: digits at even positions (counting from the
category digit at 0) are doubled, and doubled values of 10 or more have 9
subtracted. The check digit brings the full 10-digit fold-sum to a multiple
of 10.

Example:
    >>> compute_check_digit([1, 0, 0, 0, 0, 0, 0, 0, 0])
    8
    >>> verify([1, 0, 0, 0, 0, 0, 0, 0, 0], 8)
    True
"""

from typing import Sequence


PAYLOAD_LENGTH = 9
ID_LENGTH = 10


def fold_digit(digit: int, position: int) -> int:
    """Weighted value of a single digit at the given position."""
    if position % 2 == 1:
        return digit

    value = digit * 2
    if value >= 10:
        value -= 9
    return value


def fold_sum(digits: Sequence[int]) -> int:
    """Sum of folded digit values.

    Works on the 9-digit payload as well as on a full 10-digit ID; for a
    valid ID the full sum is a multiple of 10.
    """
    return sum(fold_digit(digit, i) for i, digit in enumerate(digits))


def compute_check_digit(payload: Sequence[int]) -> int:
    """Compute the check digit for a 9-digit payload.

    Args:
        payload: The first 9 digits of the ID, category digit included.

    Returns:
        Check digit (0-9).

    Raises:
        ValueError: If the payload is not exactly 9 digits long. Digit values
            are not checked.
    """
    if len(payload) != PAYLOAD_LENGTH:
        raise ValueError(f"payload must be {PAYLOAD_LENGTH} digits, got {len(payload)}")
    return (10 - fold_sum(payload) % 10) % 10


def verify(payload: Sequence[int], claimed: int) -> bool:
    """Check whether ``claimed`` is the correct check digit for ``payload``.

    Raises:
        ValueError: If the payload is not exactly 9 digits long.
    """
    return claimed == compute_check_digit(payload)
