from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException
from pathlib import Path
from typing import Optional, Union

from .models import AppConfig
from ..exceptions import ConfigurationError

class ConfigManager:
    """Centralizes loading and validation of configuration."""

    def __init__(self, config_dir: Path = Path("conf")):
        self.config_dir = Path(config_dir)

    def load_prediction_config(self, profile: str = "default") -> DictConfig:
        """Loads a prediction profile merged over the structured defaults."""
        config_path = self.config_dir / "prediction" / f"{profile}.yaml"

        if not config_path.exists():
            raise ConfigurationError(f"Config not found: {config_path}")

        return self.from_mapping(OmegaConf.load(config_path))

    @staticmethod
    def from_mapping(overrides: Optional[Union[dict, DictConfig]] = None) -> DictConfig:
        """Builds a validated configuration from plain overrides."""
        base = OmegaConf.structured(AppConfig)
        try:
            cfg = OmegaConf.merge(base, overrides or {})
        except OmegaConfBaseException as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        validate(cfg)
        return cfg

def validate(cfg: DictConfig) -> None:
    if cfg.prediction.lookback_days <= 0:
        raise ConfigurationError("prediction.lookback_days must be positive")
    if cfg.prediction.cache_ttl_hours <= 0:
        raise ConfigurationError("prediction.cache_ttl_hours must be positive")
    if not 0.0 <= cfg.prediction.min_insight_confidence <= 1.0:
        raise ConfigurationError("prediction.min_insight_confidence must be within [0, 1]")
    if cfg.database.backend not in ("sql", "memory"):
        raise ConfigurationError(f"Unknown database.backend: {cfg.database.backend}")
