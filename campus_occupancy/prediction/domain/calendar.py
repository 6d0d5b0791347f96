"""
Mapping between wall-clock time and the (day-of-week, interval) grid.

Days are numbered from Sunday = 0; a day holds 48 half-hour intervals.
"""
from datetime import datetime
from typing import Optional

TIME_INTERVAL_MINUTES = 30
INTERVALS_PER_DAY = 48  # 24 hours * 2
DAYS_PER_WEEK = 7

def time_interval_of(timestamp: datetime) -> int:
    return timestamp.hour * 2 + timestamp.minute // TIME_INTERVAL_MINUTES

def day_of_week_of(timestamp: datetime) -> int:
    # datetime.weekday() counts from Monday = 0
    return (timestamp.weekday() + 1) % DAYS_PER_WEEK

def current_time_interval(now: Optional[datetime] = None) -> int:
    return time_interval_of(now or datetime.now())

def current_day_of_week(now: Optional[datetime] = None) -> int:
    return day_of_week_of(now or datetime.now())

def _format_time(hours: int, minutes: int) -> str:
    return f"{hours:02d}:{minutes:02d}"

def time_slot_label(interval: int) -> str:
    """
    Label for the half-open interval, e.g. 24 -> "12:00-12:30".
    The last interval ends at midnight: 47 -> "23:30-00:00".
    """
    hours = interval // 2
    minutes = (interval % 2) * TIME_INTERVAL_MINUTES
    next_interval = interval + 1
    next_hours = (next_interval // 2) % 24
    next_minutes = (next_interval % 2) * TIME_INTERVAL_MINUTES
    return f"{_format_time(hours, minutes)}-{_format_time(next_hours, next_minutes)}"
