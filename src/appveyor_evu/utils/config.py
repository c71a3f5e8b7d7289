"""Configuration file support for appveyor-evu."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from appveyor_evu.utils.errors import ConfigurationError

TOKEN_ENV_VAR = "APPVEYOR_API_TOKEN"
DEFAULT_API_URL = "https://ci.appveyor.com/api/"


class ApiConfig(BaseModel):
    """AppVeyor API configuration."""

    base_url: str = Field(default=DEFAULT_API_URL, description="API base URL")
    token: str | None = Field(default=None, description="API bearer token")
    timeout: float = Field(default=30.0, description="Request timeout in seconds")


class OutputConfig(BaseModel):
    """Output configuration."""

    default_format: str = Field(default="csv", description="Default matrix output format")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    verbosity: str = Field(default="warn", description="Default log verbosity")
    structured: bool = Field(default=False, description="Use key=value log format")


class EvuConfig(BaseModel):
    """Main configuration for appveyor-evu."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Environment name aliases, e.g. {"prod": "Production (EU)"}
    aliases: dict[str, str] = Field(
        default_factory=dict, description="Environment name aliases"
    )

    def resolve_token(self, explicit: str | None = None) -> str | None:
        """Pick the API token: explicit value, then environment, then file."""
        return explicit or os.environ.get(TOKEN_ENV_VAR) or self.api.token

    def resolve_names(self, names: list[str]) -> list[str]:
        """Expand configured aliases in a list of environment names."""
        return [self.aliases.get(name, name) for name in names]


def get_config_paths() -> list[Path]:
    """Get possible configuration file paths.

    Returns:
        List of paths to check for configuration files
    """
    paths = []

    # Current directory
    paths.append(Path.cwd() / ".appveyor-evu.yaml")
    paths.append(Path.cwd() / "appveyor-evu.yaml")

    # Home directory
    home = Path.home()
    paths.append(home / ".appveyor-evu.yaml")
    paths.append(home / ".config" / "appveyor-evu" / "config.yaml")

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        paths.append(Path(xdg_config) / "appveyor-evu" / "config.yaml")

    return paths


def load_config(config_path: Path | str | None = None) -> EvuConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file. If None, searches default locations.

    Returns:
        Loaded configuration

    Raises:
        ConfigurationError: If an explicit path does not exist or a file is invalid
    """
    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            return _load_config_file(path)
        raise ConfigurationError(f"Config file not found: {config_path}")

    for path in get_config_paths():
        if path.exists():
            return _load_config_file(path)

    return EvuConfig()


def _load_config_file(path: Path) -> EvuConfig:
    """Load configuration from a specific file."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file {path}: {e}") from e

    if data is None:
        return EvuConfig()
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")

    try:
        return EvuConfig.model_validate(data)
    except ValueError as e:
        raise ConfigurationError(f"Invalid config file {path}: {e}") from e


def save_config(config: EvuConfig, config_path: Path | str | None = None) -> Path:
    """Save configuration to file.

    Args:
        config: Configuration to save
        config_path: Path to save to. Defaults to ~/.config/appveyor-evu/config.yaml

    Returns:
        Path where config was saved
    """
    if config_path is None:
        config_path = Path.home() / ".config" / "appveyor-evu" / "config.yaml"
    else:
        config_path = Path(config_path)

    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(mode="json", exclude_defaults=True)
    config_path.write_text(
        yaml.dump(data, default_flow_style=False, sort_keys=False), encoding="utf-8"
    )

    return config_path


def get_default_config() -> EvuConfig:
    """Get the default configuration."""
    return EvuConfig()


# Global config instance
_config: EvuConfig | None = None


def get_config() -> EvuConfig:
    """Get the global configuration instance.

    Loads from file on first call.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: EvuConfig | None) -> None:
    """Set (or reset, with None) the global configuration instance."""
    global _config
    _config = config
