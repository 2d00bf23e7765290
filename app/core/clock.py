"""Wall-clock helpers bound to the configured timezone.

Datetimes are stored naive, in local time of ``settings.TIMEZONE``.
"""

from datetime import date, datetime

import pytz

from app.config import get_settings

settings = get_settings()
tz = pytz.timezone(settings.TIMEZONE)


def now() -> datetime:
    """Current local time as a naive datetime."""
    return datetime.now(tz).replace(tzinfo=None)


def today() -> date:
    return datetime.now(tz).date()


def to_local_naive(value: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone(tz).replace(tzinfo=None)
