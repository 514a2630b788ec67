"""Configuration management for the Q&A generator."""

from .loader import DEFAULT_CONFIG_PATH, Config, load_config, save_config
from .models import ConfigModel, DatabaseConfig, GenerationConfig, LLMConfig, RankingConfig

__all__ = [
    "Config",
    "ConfigModel",
    "DatabaseConfig",
    "GenerationConfig",
    "LLMConfig",
    "RankingConfig",
    "DEFAULT_CONFIG_PATH",
    "load_config",
    "save_config",
]
