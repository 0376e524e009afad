"""Configuration loader for Isla icon bot."""

import os
from pathlib import Path
from typing import Optional

import yaml
from shared.config.env_loader import load_bot_env


class ConfigError(Exception):
    """Raised when configuration is missing or invalid."""
    pass


_TRUTHY = {'1', 'true', 'yes', 'on'}


class Config:
    """
    Configuration manager for Isla.

    Loads config.yaml and environment variables. Environment variables
    override the YAML values where an override is documented below.
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize configuration.

        Args:
            config_path: Path to config.yaml. If None, looks in same directory as this file.

        Raises:
            ConfigError: If required configuration is missing or invalid.
        """
        load_bot_env('isla')

        if config_path is None:
            config_path = Path(__file__).parent / "config.yaml"
        else:
            config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            try:
                self._config = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Could not parse {config_path}: {e}") from e

        self._validate_config()

    def _validate_config(self) -> None:
        """Validate that all required configuration is present."""
        required_keys = ['name', 'version', 'server', 'icons']
        for key in required_keys:
            if key not in self._config:
                raise ConfigError(f"Missing required config key: {key}")

        port = os.getenv('ISLA_PORT')
        if port is not None and not port.isdigit():
            raise ConfigError(f"ISLA_PORT must be a number, got {port!r}")

    # Application metadata
    @property
    def name(self) -> str:
        """Bot name."""
        return self._config['name']

    @property
    def version(self) -> str:
        """Bot version."""
        return str(self._config['version'])

    @property
    def description(self) -> str:
        """Bot description."""
        return self._config.get('description', '')

    @property
    def emoji(self) -> str:
        """Bot emoji."""
        return self._config.get('emoji', '🎨')

    # Server configuration
    @property
    def server_host(self) -> str:
        """Server host to bind to."""
        return self._config['server'].get('host', '0.0.0.0')

    @property
    def server_port(self) -> int:
        """Server port (ISLA_PORT overrides config.yaml)."""
        return int(os.getenv('ISLA_PORT') or self._config['server'].get('port', 8031))

    @property
    def log_level(self) -> str:
        """Logging level (ISLA_LOG_LEVEL overrides config.yaml)."""
        level = os.getenv('ISLA_LOG_LEVEL') or self._config['server'].get('log_level', 'INFO')
        return level.upper()

    # Icon configuration
    @property
    def cache_control(self) -> str:
        """Cache-Control header sent with icon responses."""
        return self._config['icons'].get('cache_control', 'public, max-age=31536000, immutable')

    @property
    def warm_on_startup(self) -> bool:
        """Render the whole catalog at startup (ISLA_WARM_CACHE overrides config.yaml)."""
        env_value = os.getenv('ISLA_WARM_CACHE')
        if env_value is not None:
            return env_value.strip().lower() in _TRUTHY
        return bool(self._config['icons'].get('warm_on_startup', False))

    @property
    def manifest(self) -> dict:
        """Web app manifest fields (name, short_name, start_url, display)."""
        manifest = self._config.get('manifest') or {}
        return {
            'name': manifest.get('name', self.name),
            'short_name': manifest.get('short_name', manifest.get('name', self.name)),
            'start_url': manifest.get('start_url', '/'),
            'display': manifest.get('display', 'standalone'),
        }
