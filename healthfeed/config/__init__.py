"""Configuration management for the health news feed."""

from .loader import DEFAULT_CONFIG_PATH, Config, load_config, save_config
from .models import (
    CacheConfig,
    ClassificationConfig,
    ConfigModel,
    EnrichmentConfig,
    LLMConfig,
    NewsConfig,
)

__all__ = [
    "Config",
    "ConfigModel",
    "NewsConfig",
    "LLMConfig",
    "CacheConfig",
    "EnrichmentConfig",
    "ClassificationConfig",
    "DEFAULT_CONFIG_PATH",
    "load_config",
    "save_config",
]
