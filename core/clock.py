from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo


def local_now(time_zone: Optional[str] = None) -> datetime:
    """Current time in ``time_zone``, or the host's local time when none is configured."""
    if time_zone:
        return datetime.now(ZoneInfo(time_zone))
    return datetime.now()
