"""
Unit tests for settings loading.
"""

import pytest

from ypbank.config import CodecSettings, load_settings


class TestLoadSettings:
    """Tests for load_settings()"""

    def test_defaults(self, tmp_path):
        settings = load_settings(env_file=tmp_path / "missing.env")
        assert settings == CodecSettings()
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.default_output_format == "csv"

    def test_yaml_file(self, tmp_path):
        config = tmp_path / "ypbank.yaml"
        config.write_text("ypbank:\n  log_level: debug\n  default_output_format: bin\n")
        settings = load_settings(config, env_file=tmp_path / "missing.env")
        assert settings.log_level == "DEBUG"
        assert settings.default_output_format == "bin"

    def test_empty_yaml_file(self, tmp_path):
        config = tmp_path / "empty.yaml"
        config.write_text("")
        assert load_settings(config, env_file=tmp_path / "missing.env") == CodecSettings()

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        config = tmp_path / "ypbank.yaml"
        config.write_text("ypbank:\n  log_format: json\n")
        monkeypatch.setenv("LOG_FORMAT", "text")
        monkeypatch.setenv("YPBANK_OUTPUT_FORMAT", "txt")
        settings = load_settings(config, env_file=tmp_path / "missing.env")
        assert settings.log_format == "text"
        assert settings.default_output_format == "txt"

    def test_env_file(self, tmp_path, monkeypatch):
        env_file = tmp_path / "test.env"
        env_file.write_text("LOG_LEVEL=WARNING\n")
        settings = load_settings(env_file=env_file)
        assert settings.log_level == "WARNING"

    def test_missing_config_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "nope.yaml")

    def test_invalid_value(self, tmp_path):
        config = tmp_path / "ypbank.yaml"
        config.write_text("ypbank:\n  default_output_format: json\n")
        with pytest.raises(ValueError) as exc_info:
            load_settings(config, env_file=tmp_path / "missing.env")
        assert "default_output_format" in str(exc_info.value)

    def test_invalid_log_level(self, tmp_path):
        config = tmp_path / "ypbank.yaml"
        config.write_text("ypbank:\n  log_level: LOUD\n")
        with pytest.raises(ValueError):
            load_settings(config, env_file=tmp_path / "missing.env")

    def test_section_must_be_mapping(self, tmp_path):
        config = tmp_path / "ypbank.yaml"
        config.write_text("ypbank: [1, 2]\n")
        with pytest.raises(ValueError):
            load_settings(config, env_file=tmp_path / "missing.env")
