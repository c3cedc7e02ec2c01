"""Configuration loading utilities."""

import json
import os
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError

from pwcheck.config.schema import Config, RulesConfig
from pwcheck.errors import ConfigError


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".pwcheck" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from file, environment and defaults.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object.

    Raises:
        ConfigError: If the file is not valid JSON or fails validation.
    """
    path = config_path or get_config_path()

    raw: dict[str, Any] = {}
    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Failed to load config from {path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigError(f"Config root in {path} must be a JSON object")
        raw = convert_keys(loaded)
        logger.debug("Loaded config from {}", path)

    try:
        return Config(**raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {_format_errors(e)}") from e


def save_config(config: Config, config_path: Path | None = None) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    _atomic_write_config(path, config)


def apply_overrides(config: Config, **overrides: Any) -> Config:
    """Return a copy of ``config`` with non-None rule overrides applied.

    Values are re-validated, so an override such as a non-numeric similarity
    threshold raises ``ConfigError`` before any evaluation starts.
    """
    updates = {key: value for key, value in overrides.items() if value is not None}
    if not updates:
        return config
    merged = config.rules.model_dump()
    merged.update(updates)
    try:
        rules = RulesConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {_format_errors(e)}") from e
    return config.model_copy(update={"rules": rules})


def _format_errors(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def _atomic_write_config(path: Path, config: Config) -> None:
    """Atomically write config as camelCase JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    data = convert_to_camel(config.model_dump(mode="json"))
    tmp_name = f".{path.name}.tmp-{os.getpid()}"
    tmp_path = path.with_name(tmp_name)
    with open(tmp_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    os.replace(tmp_path, path)


def convert_keys(data: Any) -> Any:
    """Convert camelCase keys to snake_case for Pydantic."""
    if isinstance(data, dict):
        return {camel_to_snake(k): convert_keys(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_keys(item) for item in data]
    return data


def convert_to_camel(data: Any) -> Any:
    """Convert snake_case keys to camelCase."""
    if isinstance(data, dict):
        return {snake_to_camel(k): convert_to_camel(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_to_camel(item) for item in data]
    return data


def camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case."""
    result = []
    for i, char in enumerate(name):
        if char.isupper() and i > 0:
            result.append("_")
        result.append(char.lower())
    return "".join(result)


def snake_to_camel(name: str) -> str:
    """Convert snake_case to camelCase."""
    components = name.split("_")
    return components[0] + "".join(x.title() for x in components[1:])
