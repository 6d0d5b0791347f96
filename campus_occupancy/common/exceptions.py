class OccupancyError(Exception):
    """Base exception for all occupancy forecasting errors."""
    pass

class ObservationFetchError(OccupancyError):
    """Raised when historical observations cannot be read from the store."""
    pass

class ObservationStoreError(OccupancyError):
    """Raised when a new observation cannot be written to the store."""
    pass

class CacheStorageError(OccupancyError):
    """Raised when the prediction cache backing store fails."""
    pass

class ConfigurationError(OccupancyError):
    """Raised when configuration is invalid."""
    pass
