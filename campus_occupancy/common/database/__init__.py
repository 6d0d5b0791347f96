from .database import Base, init_db, create_db_engine, create_session_factory
from .models import ObservationDB, PredictionCacheDB

__all__ = [
    "Base", "init_db", "create_db_engine", "create_session_factory",
    "ObservationDB", "PredictionCacheDB",
]
