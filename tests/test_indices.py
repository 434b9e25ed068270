import threading
import time
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal
from fractions import Fraction

import pytest

from tzlookup import by_country_code, by_utc_offset, decode, get_library_info
from tzlookup import timezone_lib


@pytest.fixture
def fresh_indices(monkeypatch):
    """Drop the cached indices for the duration of a test."""
    monkeypatch.setattr(timezone_lib, "_country_index", None)
    monkeypatch.setattr(timezone_lib, "_offset_index", None)


@pytest.fixture
def build_counter(monkeypatch):
    calls = []
    original = timezone_lib._build_index

    def counting_build(key_func):
        calls.append(key_func)
        # widen the race window for concurrent first callers
        time.sleep(0.05)
        return original(key_func)

    monkeypatch.setattr(timezone_lib, "_build_index", counting_build)
    return calls


def test_by_country_code_us():
    zones = by_country_code("US")
    assert len(zones) > 1
    assert all(tz.country_code == "US" for tz in zones)
    identifiers = [tz.identifier for tz in zones]
    assert identifiers == sorted(identifiers)
    assert "America/New_York" in identifiers


def test_by_country_code_unknown_is_empty():
    assert by_country_code("ZZ") == ()


def test_by_country_code_jp():
    assert by_country_code("JP") == (decode("Asia/Tokyo"),)


def test_by_country_code_is_case_sensitive():
    assert by_country_code("jp") == ()


def test_by_utc_offset_zero():
    zones = by_utc_offset(0)
    identifiers = [tz.identifier for tz in zones]
    assert "Europe/London" in identifiers
    assert identifiers == sorted(identifiers)
    assert all(tz.utc_offset == 0 for tz in zones)


def test_by_utc_offset_half_hour():
    identifiers = [tz.identifier for tz in by_utc_offset(5.5)]
    assert "Asia/Kolkata" in identifiers


def test_by_utc_offset_int_and_float_agree():
    assert by_utc_offset(1) == by_utc_offset(1.0)


def test_by_utc_offset_unknown_is_empty():
    assert by_utc_offset(99) == ()


def test_by_utc_offset_accepts_other_numeric_types():
    kolkata_group = by_utc_offset(5.5)
    assert by_utc_offset(Decimal("5.5")) == kolkata_group
    assert by_utc_offset(Fraction(11, 2)) == kolkata_group
    assert "Asia/Kolkata" in [tz.identifier for tz in kolkata_group]


def test_by_utc_offset_rejects_bools():
    with pytest.raises(TypeError):
        by_utc_offset(False)


def test_by_utc_offset_rejects_non_numbers():
    with pytest.raises(TypeError):
        by_utc_offset("5.5")


def test_queries_are_idempotent():
    assert by_country_code("AU") == by_country_code("AU")
    assert by_utc_offset(-5) == by_utc_offset(-5)


def test_results_are_immutable():
    zones = by_country_code("US")
    with pytest.raises(AttributeError):
        zones.append(decode("Europe/London"))
    with pytest.raises(TypeError):
        timezone_lib._get_country_index()["ZZ"] = ()


def test_every_zone_is_indexed_once():
    index = timezone_lib._get_country_index()
    identifiers = [tz.identifier for zones in index.values() for tz in zones]
    assert sorted(identifiers) == sorted(timezone_lib.TIMEZONE_DATA)


def test_indices_build_lazily(fresh_indices, build_counter):
    info = get_library_info()
    assert not info["country_index_built"]
    assert not info["offset_index_built"]

    by_country_code("FR")
    assert len(build_counter) == 1
    info = get_library_info()
    assert info["country_index_built"]
    assert not info["offset_index_built"]

    by_country_code("DE")
    assert len(build_counter) == 1

    by_utc_offset(1)
    assert len(build_counter) == 2
    assert get_library_info()["offset_index_built"]


def test_concurrent_first_country_lookup(fresh_indices, build_counter):
    workers = 16
    barrier = threading.Barrier(workers)

    def lookup():
        barrier.wait()
        return by_country_code("US")

    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(lambda _: lookup(), range(workers)))

    assert len(build_counter) == 1
    assert all(result == results[0] for result in results)
    identifiers = [tz.identifier for tz in results[0]]
    assert len(identifiers) == len(set(identifiers))


def test_concurrent_first_offset_lookup(fresh_indices, build_counter):
    workers = 16
    barrier = threading.Barrier(workers)

    def lookup():
        barrier.wait()
        return by_utc_offset(1)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(lambda _: lookup(), range(workers)))

    assert len(build_counter) == 1
    assert results[0]
    assert all(result == results[0] for result in results)


def test_concurrent_decode():
    identifiers = [
        "Europe/London", "America/New_York", "Asia/Tokyo",
        "Australia/Sydney", "Africa/Cairo", "Pacific/Auckland",
    ]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda i: decode(identifiers[i % len(identifiers)]), range(100)))

    for i, tz in enumerate(results):
        assert tz.identifier == identifiers[i % len(identifiers)]
