import re
from datetime import date, datetime

from app.errors import ValidationError

DAY_FORMAT = "%Y-%m-%d"
DAY_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def normalize_day(value: date | datetime) -> date:
    """Collapse a timestamp to its calendar day, keeping the value's own local date."""
    if isinstance(value, datetime):
        return value.date()
    return value


def today() -> date:
    return normalize_day(datetime.now())


def parse_day(raw: str) -> date:
    if not isinstance(raw, str) or not DAY_PATTERN.fullmatch(raw):
        raise ValidationError("invalid date format, use YYYY-MM-DD")
    try:
        return datetime.strptime(raw, DAY_FORMAT).date()
    except ValueError as exc:
        raise ValidationError("invalid date format, use YYYY-MM-DD") from exc
