"""Configuration loading for schematic-nav."""
from .app_config import DEFAULT_CONFIG_FILE, load_symbolic_configuration, resolve_config_path
from .translator_config import TranslatorConfig, load_translator_config

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "load_symbolic_configuration",
    "resolve_config_path",
    "TranslatorConfig",
    "load_translator_config",
]
