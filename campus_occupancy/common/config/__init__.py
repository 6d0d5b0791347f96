from .manager import ConfigManager, validate
from .models import AppConfig, PredictionConfig, DatabaseConfig, ServerConfig

__all__ = [
    "ConfigManager", "validate",
    "AppConfig", "PredictionConfig", "DatabaseConfig", "ServerConfig",
]
