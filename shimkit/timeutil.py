"""Date and time helpers."""

import re
import time
from datetime import datetime
from typing import Optional

STD_DATE_LAYOUT = "%Y-%m-%d"
STD_DATE_TIME_LAYOUT = "%Y-%m-%d %H:%M:%S"
STD_COMPACT_DATE_LAYOUT = "%Y%m%d"
STD_COMPACT_DATE_TIME_LAYOUT = "%Y%m%d%H%M%S"

_DATE_SHAPE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_DATE_TIME_SHAPE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}")


def get_time_version() -> str:
    """Return a version tag such as ``v20240101120000_123456789`` from local time."""
    nanos = time.time_ns()
    moment = datetime.fromtimestamp(nanos // 1_000_000_000)
    return f"v{moment.strftime(STD_COMPACT_DATE_TIME_LAYOUT)}_{nanos % 1_000_000_000}"


def _parse_local(text: str, shape: "re.Pattern[str]", layout: str) -> Optional[datetime]:
    if not shape.fullmatch(text):
        return None
    try:
        return datetime.strptime(text, layout).astimezone()
    except ValueError:
        return None


class StdDateStr(str):
    """A ``YYYY-MM-DD`` date string."""

    def get_time(self) -> Optional[datetime]:
        """Return local midnight of this date, or ``None`` if it does not parse."""
        return _parse_local(str(self), _DATE_SHAPE, STD_DATE_LAYOUT)


class StdDateTimeStr(str):
    """A ``YYYY-MM-DD HH:MM:SS`` date and time string."""

    def get_time(self) -> Optional[datetime]:
        """Return this local date and time, or ``None`` if it does not parse."""
        return _parse_local(str(self), _DATE_TIME_SHAPE, STD_DATE_TIME_LAYOUT)


def timestamp_to_layout(timestamp: int, layout: str) -> str:
    """Format a Unix timestamp in local time with a ``strftime`` layout."""
    return datetime.fromtimestamp(timestamp).strftime(layout)