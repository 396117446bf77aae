# dhpii_client/config/settings.py

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

from ..client.api import DEFAULT_BASE_URL, DEFAULT_API_KEY


class Config:
    """Configuration management for the DHPII console"""

    DEFAULT_CONFIG_DIR = Path.home() / ".dhpii"

    # Environment variables win over config.yaml
    ENV_BASE_URL = "DHPII_BASE_URL"
    ENV_API_KEY = "DHPII_API_KEY"

    DEFAULT_API_CONFIG = {
        'base_url': DEFAULT_BASE_URL,
        'api_key': DEFAULT_API_KEY,
    }

    # Form defaults used by the console commands
    DEFAULT_REQUEST_CONFIG = {
        'language': 'en',
        'confidence_threshold': 0.4,
    }

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir else self.DEFAULT_CONFIG_DIR
        self.logs_dir = self.config_dir / "logs"
        self.global_config_path = self.config_dir / "config.yaml"

        self._ensure_directories()

    def _ensure_directories(self):
        """Ensure configuration directories exist"""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(parents=True, exist_ok=True)

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """Load YAML file"""
        if not path.exists():
            return {}
        with open(path, 'r') as f:
            return yaml.safe_load(f) or {}

    def _save_yaml(self, path: Path, data: Dict[str, Any]):
        """Save YAML file"""
        with open(path, 'w') as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    # Global config methods

    def load_global_config(self) -> Dict[str, Any]:
        """Load global configuration"""
        return self._load_yaml(self.global_config_path)

    def save_global_config(self, config: Dict[str, Any]):
        """Save global configuration"""
        self._save_yaml(self.global_config_path, config)

    # API connection

    def get_api_settings(self) -> Dict[str, str]:
        """
        Resolve the API connection settings.

        Precedence: environment variables, then config.yaml, then built-in defaults.

        Returns:
            dict with keys: base_url, api_key
        """
        settings = self.DEFAULT_API_CONFIG.copy()
        settings.update(self.load_global_config().get('api') or {})

        base_url = os.environ.get(self.ENV_BASE_URL)
        if base_url:
            settings['base_url'] = base_url

        api_key = os.environ.get(self.ENV_API_KEY)
        if api_key:
            settings['api_key'] = api_key

        return settings

    def set_api_settings(self, base_url: Optional[str] = None, api_key: Optional[str] = None):
        """Persist API connection settings; None leaves a value untouched"""
        config = self.load_global_config()
        api = config.get('api') or {}

        if base_url is not None:
            api['base_url'] = base_url.rstrip('/')
        if api_key is not None:
            api['api_key'] = api_key

        config['api'] = api
        self.save_global_config(config)

    # Request defaults

    def get_request_defaults(self) -> Dict[str, Any]:
        """Default language and confidence threshold for console commands"""
        defaults = self.DEFAULT_REQUEST_CONFIG.copy()
        defaults.update(self.load_global_config().get('defaults') or {})
        return defaults

    def set_request_defaults(
        self,
        language: Optional[str] = None,
        confidence_threshold: Optional[float] = None
    ):
        """Persist request defaults; None leaves a value untouched"""
        config = self.load_global_config()
        defaults = config.get('defaults') or {}

        if language is not None:
            defaults['language'] = language
        if confidence_threshold is not None:
            defaults['confidence_threshold'] = confidence_threshold

        config['defaults'] = defaults
        self.save_global_config(config)
