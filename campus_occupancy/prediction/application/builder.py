from datetime import datetime, timedelta
from typing import Callable, Dict, Optional

from omegaconf import DictConfig

from ..domain import ObservationRepository, PredictionCacheRepository
from ..infrastructure import (
    SqlObservationRepository,
    SqlPredictionCacheRepository,
    InMemoryObservationRepository,
    InMemoryPredictionCacheRepository,
)
from .cache import PredictionCache
from .history import ObservationHistory
from .service import PredictionService
from ...common.database import create_db_engine, create_session_factory, init_db
from ...common.logging import setup_logger

logger = setup_logger(__name__)


class PredictionApplicationBuilder:
    """
    Builder pattern for constructing the prediction service.
    Centralizes component instantiation and wiring.
    """

    def __init__(self, config: DictConfig, clock: Callable[[], datetime] = datetime.now):
        self.config = config
        self.clock = clock

        # Components
        self.session_factory = None
        self.observation_repository: Optional[ObservationRepository] = None
        self.cache_repository: Optional[PredictionCacheRepository] = None
        self.cache: Optional[PredictionCache] = None
        self.history: Optional[ObservationHistory] = None
        self.service: Optional[PredictionService] = None

    def build_repositories(self) -> 'PredictionApplicationBuilder':
        db_cfg = self.config.database
        if db_cfg.backend == "memory":
            logger.info("Using in-memory observation store")
            self.observation_repository = InMemoryObservationRepository()
            self.cache_repository = InMemoryPredictionCacheRepository()
            return self

        logger.info(f"Connecting to observation store: {db_cfg.url}")
        engine = create_db_engine(db_cfg.url, echo=db_cfg.echo)
        init_db(engine)
        self.session_factory = create_session_factory(engine)
        self.observation_repository = SqlObservationRepository(self.session_factory)
        self.cache_repository = SqlPredictionCacheRepository(self.session_factory)
        return self

    def build_cache(self) -> 'PredictionApplicationBuilder':
        if not self.cache_repository:
            self.build_repositories()
        ttl = timedelta(hours=self.config.prediction.cache_ttl_hours)
        self.cache = PredictionCache(self.cache_repository, ttl=ttl, clock=self.clock)
        return self

    def build_history(self) -> 'PredictionApplicationBuilder':
        if not self.observation_repository:
            self.build_repositories()
        self.history = ObservationHistory(
            self.observation_repository,
            lookback_days=self.config.prediction.lookback_days,
            clock=self.clock,
        )
        return self

    def build_service(self) -> PredictionService:
        if not self.cache:
            self.build_cache()
        if not self.history:
            self.build_history()

        self.service = PredictionService(
            observations=self.observation_repository,
            history=self.history,
            cache=self.cache,
            clock=self.clock,
        )
        return self.service

    def get_components(self) -> Dict:
        """Returns built components for external use"""
        return {
            'observation_repository': self.observation_repository,
            'cache_repository': self.cache_repository,
            'cache': self.cache,
            'history': self.history,
            'service': self.service,
        }
