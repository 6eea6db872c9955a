"""Reference date resolution."""

import re
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from nomnom.domain.errors import InvalidDateError

_OFFSET_PATTERN = re.compile(r"^[+-]?\d+$")
_ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def today_in(timezone_name: str) -> date:
    """Return the current calendar date in a timezone."""
    return datetime.now(tz=ZoneInfo(timezone_name)).date()


def resolve_reference_date(raw: str | None, today: date) -> date:
    """Resolve ``YYYY-MM-DD`` or a day offset such as ``-1`` against today."""
    if raw is None or not raw.strip():
        return today
    value = raw.strip()
    if _OFFSET_PATTERN.match(value):
        return today + timedelta(days=int(value))
    if _ISO_DATE_PATTERN.match(value):
        try:
            return date.fromisoformat(value)
        except ValueError as exc:
            raise InvalidDateError(value) from exc
    raise InvalidDateError(value)
