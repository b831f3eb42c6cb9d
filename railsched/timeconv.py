"""Conversions between clock strings and seconds since midnight."""

from datetime import datetime
from typing import Optional

_DIGITS = frozenset("0123456789")


def convert_to_seconds(time_str: str) -> int:
    """Parse an ``HhM`` time such as ``12h30`` into seconds since midnight."""
    h_pos = time_str.find("h")
    if h_pos <= 0 or h_pos == len(time_str) - 1:
        raise ValueError(
            "Invalid time format. Expected format: NhN where N is a number between 0 and 23."
        )
    hour_str, minute_str = time_str[:h_pos], time_str[h_pos + 1:]
    if not (set(hour_str) <= _DIGITS and set(minute_str) <= _DIGITS):
        raise ValueError("Invalid time format. Hour and minute must be numeric.")
    hour, minute = int(hour_str), int(minute_str)
    if not 0 <= hour <= 23:
        raise ValueError("Hour value out of range. Must be between 0 and 23.")
    if not 0 <= minute <= 59:
        raise ValueError("Minute value out of range. Must be between 0 and 59.")
    return hour * 3600 + minute * 60


def to_time_string(total_seconds: int) -> str:
    """Format seconds as ``HhM`` without padding; seconds are dropped."""
    hour, rest = divmod(total_seconds, 3600)
    return f"{hour}h{rest // 60}"


def to_hhmmss(seconds: int) -> str:
    """Format seconds as zero-padded ``HH:MM:SS``."""
    minutes, secs = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def current_time_string(now: Optional[datetime] = None) -> str:
    """Return ``HHMM_DD-MM-YYYY`` for ``now`` (local time by default)."""
    moment = now if now is not None else datetime.now()
    return moment.strftime("%H%M_%d-%m-") + str(moment.year)