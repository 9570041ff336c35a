"""VetVax — Модуль конфігурації"""
from .settings import (
    VetVaxConfig,
    get_default_config,
    ExtractionConfig,
    ProcessingConfig,
    CacheConfig,
    StoreConfig,
)
from .loader import save_config, load_config, save_yaml, load_yaml

__all__ = [
    "VetVaxConfig",
    "get_default_config",
    "ExtractionConfig",
    "ProcessingConfig",
    "CacheConfig",
    "StoreConfig",
    "save_config",
    "load_config",
    "save_yaml",
    "load_yaml",
]
