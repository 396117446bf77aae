"""Tests for the YAML configuration layer."""

import yaml

from dhpii_client.config import Config


class TestApiSettings:
    def test_defaults(self, isolated_config):
        assert isolated_config.get_api_settings() == {
            "base_url": "http://localhost:8000",
            "api_key": "dhpii-api-key",
        }

    def test_directories_created(self, isolated_config):
        assert isolated_config.config_dir.is_dir()
        assert isolated_config.logs_dir.is_dir()

    def test_set_persists_to_yaml(self, isolated_config):
        isolated_config.set_api_settings(base_url="https://pii.example.com/", api_key="k1")

        data = yaml.safe_load(isolated_config.global_config_path.read_text())
        assert data["api"] == {"base_url": "https://pii.example.com", "api_key": "k1"}

        reloaded = Config(isolated_config.config_dir)
        assert reloaded.get_api_settings()["base_url"] == "https://pii.example.com"

    def test_partial_update_keeps_other_value(self, isolated_config):
        isolated_config.set_api_settings(base_url="http://a", api_key="first")
        isolated_config.set_api_settings(api_key="second")

        settings = isolated_config.get_api_settings()
        assert settings == {"base_url": "http://a", "api_key": "second"}

    def test_environment_overrides_file(self, isolated_config, monkeypatch):
        isolated_config.set_api_settings(base_url="http://file", api_key="file-key")
        monkeypatch.setenv(Config.ENV_BASE_URL, "http://env")
        monkeypatch.setenv(Config.ENV_API_KEY, "env-key")

        assert isolated_config.get_api_settings() == {"base_url": "http://env", "api_key": "env-key"}

    def test_empty_environment_value_is_ignored(self, isolated_config, monkeypatch):
        monkeypatch.setenv(Config.ENV_BASE_URL, "")
        assert isolated_config.get_api_settings()["base_url"] == "http://localhost:8000"


class TestRequestDefaults:
    def test_defaults(self, isolated_config):
        assert isolated_config.get_request_defaults() == {"language": "en", "confidence_threshold": 0.4}

    def test_set_and_merge(self, isolated_config):
        isolated_config.set_request_defaults(confidence_threshold=0.7)

        assert isolated_config.get_request_defaults() == {"language": "en", "confidence_threshold": 0.7}

    def test_sections_are_independent(self, isolated_config):
        isolated_config.set_request_defaults(language="fr")
        isolated_config.set_api_settings(api_key="k")

        config = isolated_config.load_global_config()
        assert config["defaults"] == {"language": "fr"}
        assert config["api"] == {"api_key": "k"}
