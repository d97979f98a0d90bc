"""Tests for SmartDocConfig loading."""

import pytest

from smartdoc.config import DEFAULT_MODEL, load_config


class TestLoadConfig:
    def test_defaults(self, tmp_path):
        config = load_config(tmp_path)
        assert config.api_key is None
        assert config.model_name == DEFAULT_MODEL
        assert config.services_folder == "services"
        assert config.extension == "js"
        assert config.max_tokens == 150
        assert config.temperature == 0.5

    def test_env_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SMARTDOC_API_KEY", "sk-1")
        monkeypatch.setenv("SMARTDOC_MODEL", "ollama:qwen2.5-coder")
        monkeypatch.setenv("SMARTDOC_EXTENSION", ".ts")
        monkeypatch.setenv("SMARTDOC_MAX_TOKENS", "400")
        monkeypatch.setenv("SMARTDOC_TEMPERATURE", "0")
        config = load_config(tmp_path)
        assert config.api_key == "sk-1"
        assert config.model_name == "ollama:qwen2.5-coder"
        assert config.extension == "ts"
        assert config.max_tokens == 400
        assert config.temperature == 0.0

    def test_openai_key_fallback(self, tmp_path, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-openai")
        assert load_config(tmp_path).api_key == "sk-openai"

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("SMARTDOC_API_KEY=from-file\nSMARTDOC_SERVICES_FOLDER=lib/services\n")
        config = load_config(tmp_path)
        assert config.api_key == "from-file"
        assert config.services_folder == "lib/services"

    def test_environment_wins_over_dotenv(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SMARTDOC_API_KEY", "from-env")
        (tmp_path / ".env").write_text("SMARTDOC_API_KEY=from-file\n")
        assert load_config(tmp_path).api_key == "from-env"

    def test_bad_number(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SMARTDOC_MAX_TOKENS", "lots")
        with pytest.raises(ValueError, match="SMARTDOC_MAX_TOKENS"):
            load_config(tmp_path)
