"""Masking helpers for keeping national IDs out of logs and output."""

import re

# 10-digit runs that look like a national ID (category digit 1 or 2)
_NATIONAL_ID_LIKE = re.compile(r"(?<!\d)[12]\d{9}(?!\d)")


def mask_national_id(value: str, visible_prefix: int = 1, visible_suffix: int = 2) -> str:
    """Mask the middle of a national ID, keeping the category and last digits.

    Inputs too short to keep both ends visible are masked completely.

    Args:
        value: Value to mask (need not be a valid ID).
        visible_prefix: Number of leading characters left visible.
        visible_suffix: Number of trailing characters left visible.

    Returns:
        Masked string of the same length.

    Examples:
        >>> mask_national_id("1000000008")
        '1*******08'
        >>> mask_national_id("123")
        '***'
    """
    if not value:
        return ""
    if visible_prefix < 0 or visible_suffix < 0:
        raise ValueError("Visible character counts cannot be negative")

    hidden = len(value) - visible_prefix - visible_suffix
    if hidden < visible_prefix + visible_suffix:
        return "*" * len(value)

    tail = value[len(value) - visible_suffix:] if visible_suffix else ""
    return f"{value[:visible_prefix]}{'*' * hidden}{tail}"


def sanitize_for_logging(text: str, placeholder: str = "[SA_NATIONAL_ID]") -> str:
    """Replace anything shaped like a national ID with a placeholder.

    Examples:
        >>> sanitize_for_logging("id 1000000008 rejected")
        'id [SA_NATIONAL_ID] rejected'
    """
    if not text:
        return ""
    return _NATIONAL_ID_LIKE.sub(placeholder, text)
