"""Presidio recognizers for national IDs in free text."""

from saudi_id.recognizers.sa_national_id import (
    ENTITY_TYPE,
    SaudiNationalIdRecognizer,
    create_recognizer_from_settings,
    find_national_ids,
)

__all__ = [
    "ENTITY_TYPE",
    "SaudiNationalIdRecognizer",
    "create_recognizer_from_settings",
    "find_national_ids",
]
