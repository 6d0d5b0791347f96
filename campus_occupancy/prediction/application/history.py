from datetime import datetime, timedelta
from typing import Callable, List, Optional

from ..domain import Observation, ObservationRepository

DEFAULT_LOOKBACK_DAYS = 30


class ObservationHistory:
    """
    Reads the rolling window of recent observations, newest first.
    Store failures propagate as ObservationFetchError.
    """

    def __init__(
        self,
        repository: ObservationRepository,
        lookback_days: int = DEFAULT_LOOKBACK_DAYS,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.repository = repository
        self.lookback_days = lookback_days
        self.clock = clock

    def cutoff(self) -> datetime:
        return self.clock() - timedelta(days=self.lookback_days)

    def fetch(self, location_id: Optional[str] = None) -> List[Observation]:
        return self.repository.query(location_id=location_id, observed_after=self.cutoff())
