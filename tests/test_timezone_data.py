import string

import pytest

from tzlookup import all_timezones, decode
from tzlookup.timezone_data import TIMEZONE_DATA


def test_dataset_is_read_only():
    with pytest.raises(TypeError):
        TIMEZONE_DATA["Mars/Olympus_Mons"] = ("", 0.0)


def test_record_integrity():
    for identifier, (country_code, utc_offset) in TIMEZONE_DATA.items():
        if country_code:
            assert len(country_code) == 2, identifier
            assert all(c in string.ascii_uppercase for c in country_code), identifier

        assert -12 <= utc_offset <= 14, identifier
        assert (utc_offset * 4).is_integer(), identifier

        assert decode(identifier) == (identifier, country_code, utc_offset)


def test_only_utc_zones_lack_country():
    assert sorted(k for k, (cc, _) in TIMEZONE_DATA.items() if not cc) == ["Etc/UTC", "UTC"]


def test_all_timezones_sorted_and_unique():
    identifiers = all_timezones()
    assert len(identifiers) == len(TIMEZONE_DATA)
    assert identifiers == sorted(identifiers)
    assert len(set(identifiers)) == len(identifiers)
    assert identifiers[0] == "Africa/Abidjan"


def test_all_timezones_returns_new_list():
    first = all_timezones()
    first.clear()
    assert len(all_timezones()) == len(TIMEZONE_DATA)
