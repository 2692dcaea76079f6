"""Local calendar helpers shared by every operation that needs "today"."""

from datetime import date, datetime
from zoneinfo import ZoneInfo

from calorie_ledger.domain.charts import FormDefaults

MINUTE_FORMAT = "%Y-%m-%dT%H:%M"


def local_now(timezone_name: str | None = None) -> datetime:
    """Return naive local wall-clock time truncated to the minute."""
    if timezone_name:
        now = datetime.now(tz=ZoneInfo(timezone_name))
    else:
        now = datetime.now().astimezone()
    return now.replace(second=0, microsecond=0, tzinfo=None)


def local_today(timezone_name: str | None = None) -> date:
    """Return the current local calendar day."""
    return local_now(timezone_name).date()


def format_minute(value: datetime) -> str:
    """Format a timestamp as ``YYYY-MM-DDTHH:MM``."""
    return value.strftime(MINUTE_FORMAT)


def parse_timestamp(
    raw: datetime | str | None, timezone_name: str | None = None
) -> datetime | None:
    """Parse an ISO-8601 timestamp into naive local time at minute precision.

    Naive input is taken as already local. Aware input is converted to the
    configured zone (or the host zone) before the offset is dropped.
    """
    if raw is None:
        return None
    if isinstance(raw, datetime):
        value = raw
    elif isinstance(raw, str):
        cleaned = raw.strip()
        if not cleaned:
            return None
        try:
            value = datetime.fromisoformat(cleaned)
        except ValueError:
            return None
    else:
        return None
    if value.tzinfo is not None:
        zone = ZoneInfo(timezone_name) if timezone_name else None
        value = value.astimezone(zone).replace(tzinfo=None)
    return value.replace(second=0, microsecond=0)


def form_defaults(now: datetime) -> FormDefaults:
    """Return cleared form values with the time preset to ``now``."""
    return FormDefaults(name="", calories="", time=format_minute(now))
