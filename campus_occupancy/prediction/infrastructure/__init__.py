from .repositories import SqlObservationRepository, SqlPredictionCacheRepository
from .memory import InMemoryObservationRepository, InMemoryPredictionCacheRepository
