"""
tzlookup - IANA timezone reference data

Maps IANA timezone identifiers to their country code and standard UTC
offset, with reverse lookups by country and by offset.

Usage:
    import tzlookup

    tz = tzlookup.decode("Asia/Kolkata")
    tz.country_code   # "IN"
    tz.utc_offset     # 5.5

    tzlookup.by_country_code("JP")

Author: Dan Parker
License: GPL v3
"""

from .config_data import CONFIG, configure_logging
from .timezone_lib import (
    Timezone,
    TimezoneNotFoundError,
    __version__,
    all_timezones,
    by_country_code,
    by_utc_offset,
    current,
    current_or_default,
    decode,
    get_library_info,
    is_valid,
)

__all__ = [
    "CONFIG",
    "Timezone",
    "TimezoneNotFoundError",
    "__version__",
    "all_timezones",
    "by_country_code",
    "by_utc_offset",
    "configure_logging",
    "current",
    "current_or_default",
    "decode",
    "get_library_info",
    "is_valid",
]
