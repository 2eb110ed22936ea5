from pathlib import Path

import yaml

from pcli.core.models.config import AppConfig

DEFAULT_CONFIG_FILE = "config.yaml"

_config_cache: AppConfig | None = None


def get_config(config_file_path: str | None = None) -> AppConfig:
    """
    Load and return the application configuration as a cached singleton.

    This function reads a YAML configuration file and returns an instance of `AppConfig`.
    It uses an internal cache to avoid reloading and reparsing the file on subsequent calls.

    If no file path is provided, it defaults to `"config.yaml"` in the current working
    directory, and a missing default file yields the built-in defaults. Relative
    command paths are resolved against the directory holding the file.

    Args:
        config_file_path (str | None): Path to the YAML configuration file.
            If None, defaults to `"config.yaml"`.

    Returns:
        AppConfig: The parsed application configuration.

    Raises:
        FileNotFoundError: If an explicitly given config file does not exist.
        yaml.YAMLError: If the YAML content cannot be parsed.
        pydantic.ValidationError: If the content does not match the `AppConfig` schema.
    """
    global _config_cache

    if _config_cache is None:
        explicit = config_file_path is not None
        path = Path(config_file_path if explicit else DEFAULT_CONFIG_FILE)

        if not path.exists() and not explicit:
            _config_cache = AppConfig()
            return _config_cache

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        config = AppConfig(**data)
        base_dir = path.resolve().parent
        config.commands.paths = [
            str(p if p.is_absolute() else base_dir / p)
            for p in map(Path, config.commands.paths)
        ]
        _config_cache = config

    return _config_cache


def reset_config() -> None:
    """Drop the cached configuration. Mainly useful for testing."""
    global _config_cache
    _config_cache = None
