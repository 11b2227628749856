from datetime import date, datetime, time
import calendar
from kakeibo.utils.constants import DATE_FORMAT, MONTH_FORMAT

# ── Display date format options ───────────────────────────────────────────────

DATE_FORMAT_OPTIONS = ["YYYY/MM/DD", "MM/DD/YYYY", "DD/MM/YYYY", "YYYY-MM-DD", "DD.MM.YYYY"]

_STRFTIME_MAP = {
    "YYYY/MM/DD": "%Y/%m/%d",
    "MM/DD/YYYY": "%m/%d/%Y",
    "DD/MM/YYYY": "%d/%m/%Y",
    "YYYY-MM-DD": "%Y-%m-%d",
    "DD.MM.YYYY": "%d.%m.%Y",
}


def today() -> date:
    return date.today()


def now_local() -> datetime:
    """Current time as an aware datetime in the local time zone."""
    return datetime.now().astimezone()


def current_month_str() -> str:
    return date.today().strftime(MONTH_FORMAT)


def parse_date(date_str: str) -> date | None:
    """Parse a date string in YYYY-MM-DD format, returning None on failure."""
    if not date_str:
        return None
    for fmt in ("%Y-%m-%d", "%Y/%m/%d", "%Y.%m.%d"):
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue
    return None


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)


def format_month(d: date) -> str:
    return d.strftime(MONTH_FORMAT)


def parse_month(month_str: str) -> date | None:
    """Return the first day of the given YYYY-MM month string."""
    if not month_str:
        return None
    try:
        return datetime.strptime(month_str, MONTH_FORMAT).date()
    except ValueError:
        return None


def to_iso_timestamp(value: datetime) -> str:
    """Serialize a datetime as ISO 8601 with its UTC offset.

    Naive values are taken to be local time.
    """
    return value.astimezone().isoformat(timespec="milliseconds")


def parse_timestamp(value: str) -> datetime | None:
    """Parse a stored ISO 8601 timestamp into local time, None on failure.

    Accepts a trailing "Z" UTC designator.
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    return parsed.astimezone()


def month_of(value: str) -> str | None:
    """YYYY-MM of a stored timestamp, in local time."""
    parsed = parse_timestamp(value)
    return format_month(parsed) if parsed else None


def combine_with_time(d: date, at: datetime) -> datetime:
    """Attach the clock time of `at` to the calendar day `d`."""
    return datetime.combine(d, time(at.hour, at.minute, at.second, at.microsecond)).astimezone()


def clamp_day_to_month(year: int, month: int, day: int) -> int:
    """Clamp day to valid range for the given year/month."""
    max_day = calendar.monthrange(year, month)[1]
    return min(day, max_day)


def add_months(d: date, n: int) -> date:
    """Add n months to date d, clamping day to month end."""
    month = d.month - 1 + n
    year = d.year + month // 12
    month = month % 12 + 1
    day = clamp_day_to_month(year, month, d.day)
    return d.replace(year=year, month=month, day=day)


def friendly_month(month_str: str) -> str:
    """Convert YYYY-MM to e.g. 'February 2026'."""
    d = parse_month(month_str)
    if d is None:
        return month_str
    return d.strftime("%B %Y")


def format_display_date(date_str: str, fmt_key: str = "YYYY/MM/DD") -> str:
    """Convert a YYYY-MM-DD storage string to the user-facing display format."""
    if not date_str:
        return date_str
    d = parse_date(date_str)
    if d is None:
        return date_str
    return d.strftime(_STRFTIME_MAP.get(fmt_key, "%Y/%m/%d"))


def format_display_timestamp(value: str, fmt_key: str = "YYYY/MM/DD") -> str:
    """Render a stored ISO timestamp as a local calendar date."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return value
    return parsed.strftime(_STRFTIME_MAP.get(fmt_key, "%Y/%m/%d"))


def parse_display_date(display_str: str, fmt_key: str) -> date | None:
    """Parse a date in the given display format. Returns None on failure.

    Falls back to ISO 8601 parse if the display format doesn't match.
    """
    if not display_str:
        return None
    fmt = _STRFTIME_MAP.get(fmt_key, "%Y/%m/%d")
    try:
        return datetime.strptime(display_str.strip(), fmt).date()
    except ValueError:
        return parse_date(display_str)
