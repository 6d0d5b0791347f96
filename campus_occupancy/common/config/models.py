import os
from dataclasses import dataclass, field

DEFAULT_DATABASE_URL = "sqlite:///./campus_occupancy.db"

@dataclass
class PredictionConfig:
    lookback_days: int = 30
    cache_ttl_hours: float = 6.0
    min_insight_confidence: float = 0.6

@dataclass
class DatabaseConfig:
    backend: str = "sql"  # sql | memory
    url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL))
    echo: bool = False

@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000

@dataclass
class AppConfig:
    prediction: PredictionConfig = field(default_factory=PredictionConfig)
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    log_level: str = "INFO"
