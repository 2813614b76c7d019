"""
Saudi National ID Recognizer

Recognizes 10-digit Saudi national IDs in free text with checksum validation.
Format: CPPPPPPPPK (1 category digit + 8 digits + 1 check digit)
"""

from typing import Optional

from presidio_analyzer import Pattern, PatternRecognizer, RecognizerResult

from saudi_id.config.settings import DEFAULT_CONTEXT_WORDS, Settings
from saudi_id.core.national_id import is_valid

ENTITY_TYPE = "SA_NATIONAL_ID"


class SaudiNationalIdRecognizer(PatternRecognizer):
    """Recognizer for Saudi citizen and resident national IDs.

    Pattern matches are kept only when the check digit is correct. Their
    score is the configured base score, raised when a context word
    precedes the match (see ``find_national_ids``).

    Example:
        >>> recognizer = SaudiNationalIdRecognizer()
        >>> results = recognizer.analyze("ID: 1000000008", entities=["SA_NATIONAL_ID"])
        >>> [(r.start, r.end) for r in results]
        [(4, 14)]
    """

    PATTERN_REGEX = r"(?<!\d)[12]\d{9}(?!\d)"

    CONTEXT = DEFAULT_CONTEXT_WORDS

    PREFIX_WORDS = 5
    CONTEXT_SIMILARITY_FACTOR = 0.35
    MIN_SCORE_WITH_CONTEXT = 0.4

    def __init__(
        self,
        supported_language: str = "en",
        context: Optional[list[str]] = None,
        score: float = 0.5,
    ) -> None:
        """Initialize the recognizer.

        Args:
            supported_language: Language code (default: en).
            context: Context words; defaults to CONTEXT.
            score: Base score for pattern matches.
        """
        patterns = [
            Pattern(name="sa_national_id", regex=self.PATTERN_REGEX, score=score),
        ]

        super().__init__(
            supported_entity=ENTITY_TYPE,
            patterns=patterns,
            context=list(self.CONTEXT) if context is None else context,
            supported_language=supported_language,
        )

    def validate_result(self, pattern_text: str) -> Optional[bool]:
        """Leave the configured score in place for checksum-valid matches."""
        return None

    def invalidate_result(self, pattern_text: str) -> Optional[bool]:
        """Drop matches whose check digit is wrong."""
        return not is_valid(pattern_text)

    def enhance_with_context(self, text: str, results: list[RecognizerResult]) -> list[RecognizerResult]:
        """Raise the score of matches preceded by a context word.

        Looks at the PREFIX_WORDS words before each match, case-insensitively.
        The boost and floor follow Presidio's LemmaContextAwareEnhancer defaults.
        """
        context = [word.lower() for word in self.context if word]
        if not context:
            return results

        for result in results:
            window = " ".join(text[:result.start].split()[-self.PREFIX_WORDS:]).lower()
            if any(word in window for word in context):
                result.score = min(
                    max(result.score + self.CONTEXT_SIMILARITY_FACTOR, self.MIN_SCORE_WITH_CONTEXT),
                    1.0,
                )
        return results


def find_national_ids(
    text: str,
    recognizer: Optional[SaudiNationalIdRecognizer] = None,
) -> list[RecognizerResult]:
    """Find checksum-valid national IDs in text, ordered by position.

    Scores start at the recognizer's base score and are raised by context
    words in the few words before each match.

    Args:
        text: Text to scan.
        recognizer: Recognizer to use (a default one is created if omitted).

    Returns:
        Presidio results for each valid national ID.
    """
    if not text:
        return []
    recognizer = recognizer or SaudiNationalIdRecognizer()
    results = recognizer.analyze(text, entities=[ENTITY_TYPE])
    results = recognizer.enhance_with_context(text, results)
    return sorted(results, key=lambda r: r.start)


def create_recognizer_from_settings(settings: Settings, supported_language: str = "en") -> SaudiNationalIdRecognizer:
    """Create a recognizer using the configured score and context words."""
    return SaudiNationalIdRecognizer(
        supported_language=supported_language,
        context=list(settings.context_words),
        score=settings.recognizer_score,
    )
