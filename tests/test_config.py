"""Tests for settings loading and validation."""

import pytest
import yaml

from saudi_id.config.settings import (
    DEFAULT_CONTEXT_WORDS,
    Settings,
    load_settings,
    load_settings_from_yaml,
    load_settings_from_yaml_safe,
    settings_from_env,
    validate_environment,
)


class TestSettings:
    """Tests for the Settings dataclass."""

    def test_defaults(self):
        settings = Settings()
        assert settings.default_category == "citizen"
        assert settings.max_generate_count == 10000
        assert settings.recognizer_score == 0.5
        assert settings.context_words == DEFAULT_CONTEXT_WORDS
        assert settings.log_level == "WARNING"
        assert settings.log_format == "json"

    def test_context_words_not_shared(self):
        a = Settings()
        a.context_words.append("extra")
        assert "extra" not in Settings().context_words

    def test_normalizes_case(self):
        settings = Settings(default_category="RESIDENT", log_level="info", log_format="TEXT")
        assert settings.default_category == "resident"
        assert settings.log_level == "INFO"
        assert settings.log_format == "text"

    def test_invalid_category(self):
        with pytest.raises(ValueError, match="default_category"):
            Settings(default_category="visitor")

    @pytest.mark.parametrize("count", [0, -5, "10", True])
    def test_invalid_max_count(self, count):
        with pytest.raises(ValueError, match="max_generate_count"):
            Settings(max_generate_count=count)

    @pytest.mark.parametrize("score", [-0.1, 0.0, 1.5, "high"])
    def test_invalid_score(self, score):
        with pytest.raises(ValueError, match="recognizer_score"):
            Settings(recognizer_score=score)

    def test_invalid_log_level(self):
        with pytest.raises(ValueError, match="log_level"):
            Settings(log_level="VERBOSE")

    def test_invalid_log_format(self):
        with pytest.raises(ValueError, match="log_format"):
            Settings(log_format="xml")


class TestLoadSettingsFromYaml:
    """Tests for YAML loading."""

    def test_load(self, tmp_path):
        path = tmp_path / "saudi_id.yaml"
        path.write_text(
            yaml.safe_dump(
                {
                    "default_category": "resident",
                    "max_generate_count": 50,
                    "context_words": ["iqama"],
                }
            ),
            encoding="utf-8",
        )

        settings = load_settings_from_yaml(path)

        assert settings.default_category == "resident"
        assert settings.max_generate_count == 50
        assert settings.context_words == ["iqama"]
        assert settings.log_level == "WARNING"

    def test_empty_file_returns_base(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_settings_from_yaml(path) == Settings()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_settings_from_yaml(tmp_path / "missing.yaml")

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError, match="expected dict"):
            load_settings_from_yaml(path)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "unknown.yaml"
        path.write_text("colour: blue\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Unknown settings: colour"):
            load_settings_from_yaml(path)

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("default_category: visitor\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_settings_from_yaml(path)


class TestLoadSettingsFromYamlSafe:
    """Tests for the non-raising loader."""

    def test_success(self, tmp_path):
        path = tmp_path / "ok.yaml"
        path.write_text("log_level: DEBUG\n", encoding="utf-8")

        settings, error = load_settings_from_yaml_safe(path)

        assert error is None
        assert settings.log_level == "DEBUG"

    def test_missing_file(self, tmp_path):
        settings, error = load_settings_from_yaml_safe(tmp_path / "missing.yaml")
        assert settings == Settings()
        assert "not found" in error

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("key: [unclosed\n", encoding="utf-8")

        settings, error = load_settings_from_yaml_safe(path)

        assert settings == Settings()
        assert error.startswith("YAML parsing error")

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("log_format: xml\n", encoding="utf-8")

        _, error = load_settings_from_yaml_safe(path)

        assert error.startswith("Configuration error")


class TestEnvironment:
    """Tests for environment overrides and validation."""

    def test_no_variables(self):
        assert validate_environment({}) == []
        assert settings_from_env(environ={}) == Settings()

    def test_overrides(self):
        environ = {
            "SAUDI_ID_DEFAULT_CATEGORY": "resident",
            "SAUDI_ID_MAX_GENERATE_COUNT": "25",
            "SAUDI_ID_RECOGNIZER_SCORE": "0.8",
            "SAUDI_ID_LOG_LEVEL": "debug",
            "SAUDI_ID_LOG_FORMAT": "text",
        }
        assert validate_environment(environ) == []

        settings = settings_from_env(environ=environ)

        assert settings.default_category == "resident"
        assert settings.max_generate_count == 25
        assert settings.recognizer_score == 0.8
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "text"

    def test_validation_errors(self):
        environ = {
            "SAUDI_ID_DEFAULT_CATEGORY": "visitor",
            "SAUDI_ID_MAX_GENERATE_COUNT": "many",
            "SAUDI_ID_RECOGNIZER_SCORE": "2",
            "SAUDI_ID_LOG_LEVEL": "loud",
            "SAUDI_ID_LOG_FORMAT": "xml",
        }
        errors = validate_environment(environ)
        assert len(errors) == 5

    def test_non_positive_count(self):
        errors = validate_environment({"SAUDI_ID_MAX_GENERATE_COUNT": "0"})
        assert errors == ["SAUDI_ID_MAX_GENERATE_COUNT must be positive, got: 0"]

    def test_environment_overrides_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("default_category: resident\nmax_generate_count: 10\n", encoding="utf-8")

        settings = load_settings(path, environ={"SAUDI_ID_MAX_GENERATE_COUNT": "3"})

        assert settings.default_category == "resident"
        assert settings.max_generate_count == 3

    def test_reads_os_environ(self, clean_env):
        clean_env.setenv("SAUDI_ID_DEFAULT_CATEGORY", "resident")
        assert load_settings().default_category == "resident"
