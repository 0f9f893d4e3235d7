"""
Tests for configuration loading.
"""

import pytest

from provision_analyzer.config import DEFAULT_CONFIG, load_app_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv('GROQ_API_KEY', raising=False)
    monkeypatch.delenv('LOG_LEVEL', raising=False)
    # Keep load_dotenv from picking up a developer's .env
    monkeypatch.setattr('provision_analyzer.config.load_dotenv', lambda: None)


def test_defaults_without_file(tmp_path):
    config = load_app_config(str(tmp_path / 'missing.yaml'))

    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG


def test_yaml_overrides_are_merged(tmp_path):
    config_file = tmp_path / 'config.yaml'
    config_file.write_text("summarization:\n  batch_size: 5\nllm:\n  api:\n    model: other-model\n")

    config = load_app_config(str(config_file))

    assert config['summarization']['batch_size'] == 5
    assert config['summarization']['fallback_summary'] == 'AI summary failed.'
    assert config['llm']['api']['model'] == 'other-model'
    assert config['llm']['generation_params']['temperature'] == 0.2
    assert DEFAULT_CONFIG['summarization']['batch_size'] == 10


def test_environment_secrets(tmp_path, monkeypatch):
    monkeypatch.setenv('GROQ_API_KEY', ' secret-key ')
    monkeypatch.setenv('LOG_LEVEL', 'DEBUG')

    config = load_app_config(str(tmp_path / 'missing.yaml'))

    assert config['llm']['api']['groq_api_key'] == 'secret-key'
    assert config['logging']['level'] == 'DEBUG'
    assert DEFAULT_CONFIG['llm']['api']['groq_api_key'] is None
