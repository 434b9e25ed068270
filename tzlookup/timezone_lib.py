"""
Timezone Lookup Library

Resolves IANA timezone identifiers against the bundled reference table and
returns the country code and standard UTC offset for each zone. Reverse
lookups by country code and by offset are served from indices that are
built on first use and kept for the life of the process.

Usage:
    from tzlookup.timezone_lib import (
        decode,
        is_valid,
        by_country_code,
        by_utc_offset,
        current,
    )

    #Exact lookup, raises TimezoneNotFoundError for unknown identifiers
    decode("Europe/Berlin")

    #Membership test with the same exact-match rules
    is_valid("europe/berlin")

    #All zones of a country / all zones sharing a standard offset
    by_country_code("AU")
    by_utc_offset(5.5)

    #Zone configured on this host
    current()

Author: Dan Parker
License: GPL v3
Version: 1.1.0
"""

import logging
import os
import threading
import warnings
from decimal import Decimal
from numbers import Real
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, NamedTuple, Optional, Tuple
from zoneinfo import ZoneInfoNotFoundError

import tzlocal

from .config_data import CONFIG
from .timezone_data import TIMEZONE_DATA

__version__ = "1.1.0"
__author__ = "Dan Parker"
__license__ = "GPLv3"

logger = logging.getLogger(__name__)

# === MODULE STATE ===
_country_index: Optional[Mapping[str, Tuple["Timezone", ...]]] = None
_country_index_lock = threading.Lock()
_offset_index: Optional[Mapping[float, Tuple["Timezone", ...]]] = None
_offset_index_lock = threading.Lock()


class TimezoneNotFoundError(LookupError):
    """Raised when an identifier is not present in the reference table."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f'timezone "{identifier}": timezone not found')


class Timezone(NamedTuple):
    """Timezone metadata returned by lookups."""

    identifier: str
    country_code: str
    utc_offset: float

    @property
    def country_codes(self) -> List[str]:
        """Every country code associated with the zone, as a new list."""
        return [self.country_code] if self.country_code else []

    @property
    def tz_identifier(self) -> str:
        """Deprecated alias of ``identifier``."""
        warnings.warn(
            "Timezone.tz_identifier is deprecated, use Timezone.identifier",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.identifier


def decode(identifier: str) -> Timezone:
    """
    Look up a timezone by its exact IANA identifier.

    Args:
        identifier (str): Timezone identifier (e.g., "America/New_York")

    Returns:
        Timezone: Identifier, country code and standard UTC offset

    Raises:
        TimezoneNotFoundError: If the identifier is not in the table

    Note:
        No trimming or case folding is applied. "europe/london" and
        " Europe/London" are both unknown.
    """
    record = TIMEZONE_DATA.get(identifier)
    if record is None:
        logger.debug(f"Unknown timezone identifier: {identifier!r}")
        raise TimezoneNotFoundError(identifier)

    country_code, utc_offset = record
    return Timezone(identifier, country_code, utc_offset)


def is_valid(identifier: str) -> bool:
    """Return True if the identifier is present in the table."""
    return identifier in TIMEZONE_DATA


def all_timezones() -> List[str]:
    """
    Get every known timezone identifier.

    Returns:
        list: Identifiers sorted ascending. A new list is returned on every
        call so callers are free to modify it.
    """
    return sorted(TIMEZONE_DATA)


def _build_index(key_func: Callable[[Timezone], object]) -> Mapping:
    """Group every timezone by ``key_func`` and freeze the result."""
    groups: Dict[object, List[Timezone]] = {}
    for identifier, (country_code, utc_offset) in TIMEZONE_DATA.items():
        timezone = Timezone(identifier, country_code, utc_offset)
        groups.setdefault(key_func(timezone), []).append(timezone)

    return MappingProxyType({
        key: tuple(sorted(members, key=lambda tz: tz.identifier))
        for key, members in groups.items()
    })


def _get_country_index() -> Mapping[str, Tuple[Timezone, ...]]:
    global _country_index

    if _country_index is None:
        with _country_index_lock:
            if _country_index is None:
                index = _build_index(lambda tz: tz.country_code)
                logger.info(f"Built country code index with {len(index)} countries")
                _country_index = index
    return _country_index


def _get_offset_index() -> Mapping[float, Tuple[Timezone, ...]]:
    global _offset_index

    if _offset_index is None:
        with _offset_index_lock:
            if _offset_index is None:
                index = _build_index(lambda tz: tz.utc_offset)
                logger.info(f"Built UTC offset index with {len(index)} offsets")
                _offset_index = index
    return _offset_index


def by_country_code(country_code: str) -> Tuple[Timezone, ...]:
    """
    Get all timezones associated with a country.

    Args:
        country_code (str): ISO 3166-1 alpha-2 code (e.g., "US")

    Returns:
        tuple: Matching timezones sorted by identifier, empty if none match
    """
    return _get_country_index().get(country_code, ())


def by_utc_offset(utc_offset: float) -> Tuple[Timezone, ...]:
    """
    Get all timezones sharing a standard UTC offset.

    Args:
        utc_offset (float): Offset in hours (e.g., 5.5 or -3.5)

    Returns:
        tuple: Matching timezones sorted by identifier, empty if none match

    Raises:
        TypeError: If the offset is not a number
    """
    if isinstance(utc_offset, bool) or not isinstance(utc_offset, (Real, Decimal)):
        raise TypeError(f"UTC offset must be a number, got {type(utc_offset).__name__}")
    return _get_offset_index().get(float(utc_offset), ())


def _host_timezone_name() -> Optional[str]:
    """
    Read the timezone name configured on this host.

    Returns:
        str: Configured name, or None if the host configuration can't be read

    Note:
        A TZ environment variable holding a zone name is returned as-is,
        even when no such zone exists, so the caller sees the name that was
        actually configured. File paths in TZ and the system configuration
        are resolved by tzlocal.
    """
    tz_env = os.environ.get("TZ", "").lstrip(":")
    if tz_env and not os.path.isabs(tz_env):
        return tz_env

    try:
        # tzlocal caches the name, reload so a changed /etc/localtime is seen
        tzlocal.reload_localzone()
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.warning(f"Could not reload host timezone configuration: {e}")
        return None

    return tzlocal.get_localzone_name()


def current() -> Timezone:
    """
    Get the timezone configured on this host.

    Returns:
        Timezone: Metadata for the host's timezone

    Raises:
        TimezoneNotFoundError: If the host's timezone is not in the table

    Note:
        The host configuration is read again on every call. A zone name
        set in TZ is decoded as-is, so an unknown name there raises instead
        of falling back to the system configuration.
    """
    host_name = _host_timezone_name()
    logger.debug(f"Host timezone reported as {host_name!r}")
    return decode(host_name or "")


def current_or_default(default: Optional[str] = None) -> Timezone:
    """
    Get the host's timezone, falling back to a default when it is unknown.

    Args:
        default (str): Identifier to use instead of the host's timezone.
            Defaults to CONFIG["default_tz"].

    Returns:
        Timezone: Host timezone or the default

    Raises:
        TimezoneNotFoundError: If the fallback identifier is unknown as well
    """
    try:
        return current()
    except TimezoneNotFoundError as e:
        fallback = default if default is not None else CONFIG["default_tz"]
        logger.warning(f"Host timezone not recognised ({e}), using {fallback}")
        return decode(fallback)


def get_library_info() -> Dict[str, object]:
    """
    Get information about library state.

    Returns:
        dict: Dictionary containing library statistics
    """
    return {
        "version": __version__,
        "timezones_loaded": len(TIMEZONE_DATA),
        "country_index_built": _country_index is not None,
        "offset_index_built": _offset_index is not None,
    }
