"""Utility functions."""
from .config_manager import AppConfig, ConfigManager, write_config_template
from .logger import setup_logging

__all__ = ["AppConfig", "ConfigManager", "write_config_template", "setup_logging"]
