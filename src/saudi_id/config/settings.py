"""Settings for the saudi-id command line tool and recognizer.

Settings are layered: built-in defaults, then an optional YAML file, then
``SAUDI_ID_*`` environment variables.

Example YAML configuration:

    default_category: resident
    max_generate_count: 500
    recognizer_score: 0.6
    context_words: ["national id", "iqama", "الهوية"]
    log_level: INFO
    log_format: text
"""

import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Optional

import yaml


VALID_CATEGORIES = {"citizen", "resident"}
VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
VALID_LOG_FORMATS = {"json", "text"}

DEFAULT_CONTEXT_WORDS = [
    "national id",
    "id number",
    "iqama",
    "resident id",
    "هوية",
    "الهوية الوطنية",
    "رقم الهوية",
    "إقامة",
]

# Environment variable -> settings field
ENV_VARS = {
    "SAUDI_ID_DEFAULT_CATEGORY": "default_category",
    "SAUDI_ID_MAX_GENERATE_COUNT": "max_generate_count",
    "SAUDI_ID_RECOGNIZER_SCORE": "recognizer_score",
    "SAUDI_ID_LOG_LEVEL": "log_level",
    "SAUDI_ID_LOG_FORMAT": "log_format",
}


@dataclass
class Settings:
    """Tool settings.

    Attributes:
        default_category: Category used by ``generate`` when none is given.
        max_generate_count: Largest batch a single ``generate`` call may produce.
        recognizer_score: Score of a checksum-valid match with no context word nearby.
        context_words: Words that raise recognizer confidence when nearby.
        log_level: Root log level.
        log_format: ``json`` or ``text``.
    """

    default_category: str = "citizen"
    max_generate_count: int = 10000
    recognizer_score: float = 0.5
    context_words: list[str] = field(default_factory=lambda: list(DEFAULT_CONTEXT_WORDS))
    log_level: str = "WARNING"
    log_format: str = "json"

    def __post_init__(self) -> None:
        """Normalize and validate configuration values."""
        self.default_category = str(self.default_category).lower()
        self.log_level = str(self.log_level).upper()
        self.log_format = str(self.log_format).lower()

        if self.default_category not in VALID_CATEGORIES:
            raise ValueError(
                f"default_category must be one of {sorted(VALID_CATEGORIES)}, got {self.default_category}"
            )
        if isinstance(self.max_generate_count, bool) or not isinstance(self.max_generate_count, int):
            raise ValueError(f"max_generate_count must be an integer, got {self.max_generate_count!r}")
        if self.max_generate_count <= 0:
            raise ValueError(f"max_generate_count must be positive, got {self.max_generate_count}")
        if isinstance(self.recognizer_score, bool) or not isinstance(self.recognizer_score, (int, float)):
            raise ValueError(f"recognizer_score must be a number, got {self.recognizer_score!r}")
        if not 0.0 < self.recognizer_score <= 1.0:
            raise ValueError(f"recognizer_score must be above 0.0 and at most 1.0, got {self.recognizer_score}")
        if not isinstance(self.context_words, list):
            raise ValueError(f"context_words must be a list, got {type(self.context_words).__name__}")
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, got {self.log_level}")
        if self.log_format not in VALID_LOG_FORMATS:
            raise ValueError(f"log_format must be one of {sorted(VALID_LOG_FORMATS)}, got {self.log_format}")


def load_settings_from_yaml(path: Path | str, base: Optional[Settings] = None) -> Settings:
    """Load settings from a YAML file.

    Args:
        path: Path to the YAML configuration file.
        base: Settings to start from (defaults to built-in defaults).

    Returns:
        Settings with values from the file applied.

    Raises:
        FileNotFoundError: If the configuration file doesn't exist.
        ValueError: If the YAML structure or a value is invalid.
        yaml.YAMLError: If the YAML is malformed.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    base = base or Settings()
    if data is None:
        return base

    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML structure: expected dict, got {type(data).__name__}")

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown settings: {', '.join(unknown)}")

    return replace(base, **data)


def load_settings_from_yaml_safe(
    path: Path | str, base: Optional[Settings] = None
) -> tuple[Settings, Optional[str]]:
    """Load settings, returning defaults and an error message on failure.

    Example:
        >>> settings, error = load_settings_from_yaml_safe("saudi_id.yaml")
        >>> if error:
        ...     print(f"Warning: {error}")
    """
    try:
        return load_settings_from_yaml(path, base), None
    except FileNotFoundError as e:
        return base or Settings(), str(e)
    except ValueError as e:
        return base or Settings(), f"Configuration error: {e}"
    except yaml.YAMLError as e:
        return base or Settings(), f"YAML parsing error: {e}"


def validate_environment(environ: Optional[dict[str, str]] = None) -> list[str]:
    """Validate ``SAUDI_ID_*`` environment variables.

    Returns:
        List of validation error messages (empty if all valid).
    """
    environ = os.environ if environ is None else environ
    errors = []

    category = environ.get("SAUDI_ID_DEFAULT_CATEGORY")
    if category is not None and category.lower() not in VALID_CATEGORIES:
        errors.append(f"SAUDI_ID_DEFAULT_CATEGORY must be citizen or resident, got: {category}")

    count_str = environ.get("SAUDI_ID_MAX_GENERATE_COUNT")
    if count_str is not None:
        try:
            if int(count_str) <= 0:
                errors.append(f"SAUDI_ID_MAX_GENERATE_COUNT must be positive, got: {count_str}")
        except ValueError:
            errors.append(f"SAUDI_ID_MAX_GENERATE_COUNT must be an integer, got: {count_str}")

    score_str = environ.get("SAUDI_ID_RECOGNIZER_SCORE")
    if score_str is not None:
        try:
            if not 0.0 < float(score_str) <= 1.0:
                errors.append(f"SAUDI_ID_RECOGNIZER_SCORE must be above 0 and at most 1, got: {score_str}")
        except ValueError:
            errors.append(f"SAUDI_ID_RECOGNIZER_SCORE must be a number, got: {score_str}")

    log_level = environ.get("SAUDI_ID_LOG_LEVEL")
    if log_level is not None and log_level.upper() not in VALID_LOG_LEVELS:
        errors.append(f"SAUDI_ID_LOG_LEVEL must be one of {sorted(VALID_LOG_LEVELS)}, got: {log_level}")

    log_format = environ.get("SAUDI_ID_LOG_FORMAT")
    if log_format is not None and log_format.lower() not in VALID_LOG_FORMATS:
        errors.append(f"SAUDI_ID_LOG_FORMAT must be json or text, got: {log_format}")

    return errors


def settings_from_env(base: Optional[Settings] = None, environ: Optional[dict[str, str]] = None) -> Settings:
    """Apply ``SAUDI_ID_*`` environment overrides to ``base``.

    Call :func:`validate_environment` first for readable error messages.
    """
    environ = os.environ if environ is None else environ
    overrides: dict[str, Any] = {}

    for var, name in ENV_VARS.items():
        value = environ.get(var)
        if value is None:
            continue
        if name == "max_generate_count":
            overrides[name] = int(value)
        elif name == "recognizer_score":
            overrides[name] = float(value)
        else:
            overrides[name] = value

    return replace(base or Settings(), **overrides)


def load_settings(path: Optional[Path | str] = None, environ: Optional[dict[str, str]] = None) -> Settings:
    """Build settings from defaults, an optional YAML file and the environment."""
    settings = Settings()
    if path is not None:
        settings = load_settings_from_yaml(path, settings)
    return settings_from_env(settings, environ)
