"""Utility functions."""

from saudi_id.utils.masking import mask_national_id, sanitize_for_logging

__all__ = [
    "mask_national_id",
    "sanitize_for_logging",
]
