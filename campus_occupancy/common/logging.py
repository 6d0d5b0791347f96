import logging
import time
from functools import wraps
from typing import Callable, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
SLOW_CALL_SECONDS = 0.5

def setup_logger(name: str, level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Sets up a logger with the project format. Handlers are attached once per name.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(level)
    return logger

def set_package_level(level: Union[int, str], package: str = "campus_occupancy") -> None:
    """
    Applies a level to every logger already created under a package.
    """
    for name, logger in logging.Logger.manager.loggerDict.items():
        if isinstance(logger, logging.Logger) and (name == package or name.startswith(package + ".")):
            logger.setLevel(level)

def log_execution_time(logger: logging.Logger, slow_threshold: float = SLOW_CALL_SECONDS):
    """
    Decorator timing a call. Slow calls are logged at WARNING, the rest at DEBUG;
    failures are logged with traceback and re-raised.
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(f"{func.__qualname__} failed: {e}", exc_info=True)
                raise
            elapsed = time.perf_counter() - start
            if elapsed > slow_threshold:
                logger.warning(f"{func.__qualname__} took {elapsed:.3f}s")
            else:
                logger.debug(f"{func.__qualname__} executed in {elapsed:.3f}s")
            return result
        return wrapper
    return decorator
