"""
Config Module
Configuration management.
"""

from .settings import ConfigManager, Config, get_contexts_path, DEFAULT_URI_SCHEME

__all__ = [
    "ConfigManager",
    "Config",
    "get_contexts_path",
    "DEFAULT_URI_SCHEME",
]
