from .manager import config_manager, ConfigManager
from .models import Settings, LogConfig, LogLevel, AppConfig, StoreConfig

__all__ = [
    "config_manager",
    "ConfigManager",
    "Settings",
    "LogConfig",
    "LogLevel",
    "AppConfig",
    "StoreConfig",
]
