"""
Timezone abbreviation lookup
"""
from datetime import datetime, tzinfo

from ..core import timezones as _timezones
from ..core.timezones import FixedOffset

__all__ = ['FixedOffset', 'all', 'get', 'local', 'names', 'now', 'parse']


# noinspection PyShadowingBuiltins
def all() -> list[FixedOffset]:
    """
    Return every known timezone, UTC and the local zone first.

    :return: List of fixed offset descriptors
    """
    return _timezones.get_all()


def get(abbreviation: str, default: FixedOffset | None = None) -> FixedOffset:
    """
    Return the fixed offset of a timezone abbreviation.

    :param abbreviation: Timezone abbreviation (e.g. "CET")
    :param default: Returned for unknown abbreviations, the local zone if None
    :return: Fixed offset descriptor
    """
    return _timezones.get(abbreviation, default)


def local() -> FixedOffset:
    """
    Return the local timezone with its current offset.
    """
    return _timezones.local()


def names() -> list[str]:
    """
    Return the recognised abbreviations.
    """
    return _timezones.names()


def now(abbreviation: str) -> datetime:
    """
    Return the current time in the timezone of an abbreviation.
    """
    return _timezones.now(abbreviation)


def parse(text: str) -> tzinfo:
    """
    Parse an abbreviation, IANA name or UTC offset into a tzinfo.

    :raises ValueError: If the format is invalid
    """
    return _timezones.parse_timezone(text)
