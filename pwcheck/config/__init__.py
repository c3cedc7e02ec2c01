"""Configuration module for pwcheck."""

from pwcheck.config.loader import get_config_path, load_config
from pwcheck.config.schema import Config, RulesConfig

__all__ = ["Config", "RulesConfig", "load_config", "get_config_path"]
