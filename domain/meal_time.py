"""
Resolution of a meal's ``when`` timestamp from the optional ``day`` and ``hour``
strings sent by clients.

``day`` is a calendar date (``YYYY-MM-DD``) and ``hour`` a time of day
(``HH:MM`` or ``HH:MM:SS``). Empty strings are treated as missing values.
"""

from datetime import datetime, date, time
from typing import Optional

from app.exceptions import ServiceValidationError

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMATS = ("%H:%M", "%H:%M:%S")


def parse_day(day: str) -> date:
    """Parse a ``YYYY-MM-DD`` string, raising ServiceValidationError on bad input."""
    try:
        return datetime.strptime(day.strip(), DATE_FORMAT).date()
    except ValueError as e:
        raise ServiceValidationError(
            f"Invalid day '{day}', expected YYYY-MM-DD",
            details={"field": "day", "value": day},
        ) from e


def parse_hour(hour: str) -> time:
    """Parse an ``HH:MM`` or ``HH:MM:SS`` string, raising ServiceValidationError on bad input."""
    for fmt in TIME_FORMATS:
        try:
            return datetime.strptime(hour.strip(), fmt).time()
        except ValueError:
            continue
    raise ServiceValidationError(
        f"Invalid hour '{hour}', expected HH:MM",
        details={"field": "hour", "value": hour},
    )


def combine(day: str, hour: str) -> datetime:
    """Parse ``"{day} {hour}"`` into a single timestamp."""
    return datetime.combine(parse_day(day), parse_hour(hour))


def resolve_meal_time(
    day: Optional[str], hour: Optional[str], now: Optional[datetime] = None
) -> datetime:
    """
    Timestamp for a new meal.

    Both ``day`` and ``hour`` must be given for them to be used; with either
    one missing the meal is stamped with the current instant.
    """
    if day and hour:
        return combine(day, hour)
    return now or datetime.utcnow()


def merge_meal_time(
    existing: datetime, day: Optional[str], hour: Optional[str]
) -> datetime:
    """
    Timestamp for an edited meal, falling back to the stored ``existing`` value.

    - day and hour: both replaced
    - day only: new date, time of day kept from ``existing``
    - hour only: date kept from ``existing``, new time of day
    - neither: ``existing`` unchanged
    """
    if day and hour:
        return combine(day, hour)
    if day:
        return datetime.combine(parse_day(day), existing.time())
    if hour:
        return datetime.combine(existing.date(), parse_hour(hour))
    return existing
