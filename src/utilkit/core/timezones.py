import os
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..lib.log import logger

__all__ = [
    'LOCAL', 'LOCAL_TZ_ENV', 'FixedOffset', 'TIMEZONES',
    'get', 'get_all', 'local', 'names', 'now', 'parse_timezone',
]

LOCAL = "Local"
LOCAL_TZ_ENV = "UTILKIT_LOCAL_TZ"

_HOUR = 3600
_MINUTE = 60


@dataclass(frozen=True, slots=True)
class FixedOffset:
    """
    A named, constant offset from UTC, without daylight saving
    """
    name: str
    offset: int  # seconds east of UTC
    description: str = ""

    @property
    def tzinfo(self) -> timezone:
        """
        The offset as a ``datetime.timezone``
        """
        return timezone(timedelta(seconds=self.offset), self.name)

    def utcoffset(self) -> timedelta:
        return timedelta(seconds=self.offset)

    def __str__(self) -> str:
        sign = '-' if self.offset < 0 else '+'
        hours, rest = divmod(abs(self.offset), _HOUR)
        return f"UTC{sign}{hours:02d}:{rest // _MINUTE:02d}"


TIMEZONES: dict[str, FixedOffset] = {tz.name: tz for tz in (
    FixedOffset("UTC", 0, "Coordinated Universal Time"),

    # European
    FixedOffset("GMT", 0, "Greenwich Mean Time"),
    FixedOffset("CET", 1 * _HOUR, "Central European Time"),
    FixedOffset("CEST", 2 * _HOUR, "Central European Summer Time"),

    # US
    FixedOffset("EST", -5 * _HOUR, "Eastern Standard Time"),
    FixedOffset("EDT", -4 * _HOUR, "Eastern Daylight Time"),
    FixedOffset("CST", -6 * _HOUR, "Central Standard Time"),
    FixedOffset("CDT", -5 * _HOUR, "Central Daylight Time"),
    FixedOffset("MST", -7 * _HOUR, "Mountain Standard Time"),
    FixedOffset("MDT", -6 * _HOUR, "Mountain Daylight Time"),
    FixedOffset("PST", -8 * _HOUR, "Pacific Standard Time"),
    FixedOffset("PDT", -7 * _HOUR, "Pacific Daylight Time"),
    FixedOffset("AST", -4 * _HOUR, "Atlantic Standard Time"),
    FixedOffset("ADT", -3 * _HOUR, "Atlantic Daylight Time"),
    FixedOffset("HST", -10 * _HOUR, "Hawaii Standard Time"),
    FixedOffset("AKST", -9 * _HOUR, "Alaska Standard Time"),
    FixedOffset("AKDT", -8 * _HOUR, "Alaska Daylight Time"),

    # Australia
    FixedOffset("AEST", 10 * _HOUR, "Australian Eastern Standard Time"),
    FixedOffset("AEDT", 11 * _HOUR, "Australian Eastern Daylight Time"),
    FixedOffset("ACST", 9 * _HOUR + 30 * _MINUTE, "Australian Central Standard Time"),
    FixedOffset("ACDT", 10 * _HOUR + 30 * _MINUTE, "Australian Central Daylight Time"),
    FixedOffset("AWST", 8 * _HOUR, "Australian Western Standard Time"),

    # New Zealand
    FixedOffset("NZST", 12 * _HOUR, "New Zealand Standard Time"),
    FixedOffset("NZDT", 13 * _HOUR, "New Zealand Daylight Time"),

    # Asia
    FixedOffset("IST", 5 * _HOUR + 30 * _MINUTE, "India Standard Time"),
    FixedOffset("JST", 9 * _HOUR, "Japan Standard Time"),
    FixedOffset("KST", 9 * _HOUR, "Korea Standard Time"),

    # Africa
    FixedOffset("SAST", 2 * _HOUR, "South Africa Standard Time"),

    # Indonesia
    FixedOffset("WIB", 7 * _HOUR, "Western Indonesia Time"),
    FixedOffset("WITA", 8 * _HOUR, "Central Indonesia Time"),
    FixedOffset("WIT", 9 * _HOUR, "Eastern Indonesia Time"),

    FixedOffset("ART", -3 * _HOUR, "Argentina Time"),
    FixedOffset("EAT", 3 * _HOUR, "East Africa Time"),
    FixedOffset("MSK", 3 * _HOUR, "Moscow Standard Time"),
    FixedOffset("HKT", 8 * _HOUR, "Hong Kong Time"),
    FixedOffset("SGT", 8 * _HOUR, "Singapore Time"),
    FixedOffset("PHT", 8 * _HOUR, "Philippine Time"),
)}


def local() -> FixedOffset:
    """
    Return the caller-local timezone with its current UTC offset.

    The ``UTILKIT_LOCAL_TZ`` environment variable overrides the system timezone, it accepts
    anything ``parse_timezone()`` does.

    :return: Fixed offset descriptor of the local zone
    """
    override = os.environ.get(LOCAL_TZ_ENV, "").strip()
    if override and override != LOCAL:
        dt = datetime.now(parse_timezone(override))
    else:
        dt = datetime.now().astimezone()
    offset = dt.utcoffset() or timedelta(0)
    return FixedOffset(dt.tzname() or LOCAL, int(offset.total_seconds()), "Local Time")


def get(abbreviation: str, default: FixedOffset | None = None) -> FixedOffset:
    """
    Look up a timezone abbreviation (case-sensitive, e.g. "UTC", "CEST", "PST").

    :param abbreviation: Timezone abbreviation, or "Local"
    :param default: Returned for unknown abbreviations. If None, the local zone is used.
    :return: The fixed offset descriptor
    """
    if abbreviation == LOCAL:
        return local()
    try:
        return TIMEZONES[abbreviation]
    except KeyError:
        logger.debug("Unknown timezone abbreviation %r, falling back to %s",
                     abbreviation, "the given default" if default is not None else "local time")
        return default if default is not None else local()


def get_all() -> list[FixedOffset]:
    """
    Return every known timezone: UTC, the local zone, then the rest of the table.
    """
    return [TIMEZONES["UTC"], local()] + [tz for name, tz in TIMEZONES.items() if name != "UTC"]


def names() -> list[str]:
    """
    Return the recognised abbreviations, in the order of ``get_all()``.
    """
    return ["UTC", LOCAL] + [name for name in TIMEZONES if name != "UTC"]


def now(abbreviation: str) -> datetime:
    """
    Return the current time in the fixed offset of an abbreviation.
    """
    return datetime.now(get(abbreviation).tzinfo)


def parse_timezone(text: str) -> tzinfo:
    """
    Parse timezone string into a tzinfo object. Supports:
    - abbreviations of the registry (e.g. "CEST") and "Local"
    - IANA timezone names (e.g. "America/New_York")
    - UTC±HH[MM] format (e.g. "UTC-5", "UTC+0530", "UTC+05:30")
    - GMT±HH[MM] format (e.g. "GMT-5")
    - Raw offset (e.g. "+0530", "-05:00")

    :param text: Timezone string
    :return: tzinfo object
    :raises ValueError: If timezone format is invalid
    """
    text = text.strip()
    if text == LOCAL:
        return local().tzinfo
    return _parse_timezone(text)


@lru_cache(maxsize=128)
def _parse_timezone(text: str) -> tzinfo:
    if text in TIMEZONES:
        return TIMEZONES[text].tzinfo

    # Try as IANA timezone
    if text:
        try:
            return ZoneInfo(text)
        except (ZoneInfoNotFoundError, ValueError):
            pass

    # Parse UTC/GMT±HHMM format with optional colon
    match = re.match(r'^(UTC|GMT)?([+-])(\d{1,2})(?::?(\d{2}))?$', text)
    if not match:
        raise ValueError(
            f"Invalid timezone format: {text!r}. "
            "Use an abbreviation (e.g. 'CEST'), an IANA name (e.g. 'America/New_York') "
            "or UTC/GMT±HHMM format (e.g. 'UTC-5', 'GMT+0530')"
        )

    _, sign, hours, minutes = match.groups()
    hours = int(hours)
    minutes = int(minutes) if minutes else 0
    if hours > 23 or minutes > 59:
        raise ValueError(f"Timezone offset out of range: {text!r}")

    seconds = hours * _HOUR + minutes * _MINUTE
    if sign == '-':
        seconds = -seconds
    if seconds == 0:
        return timezone.utc
    offset = FixedOffset("", seconds)
    return timezone(offset.utcoffset(), str(offset))
