"""Configuration module for rpcgate."""

from rpcgate.config.loader import load_config, save_config, get_config_path
from rpcgate.config.schema import Config
from rpcgate.config.access import get_config, clear_config_cache

__all__ = ["Config", "load_config", "save_config", "get_config_path", "get_config", "clear_config_cache"]
