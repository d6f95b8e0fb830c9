from datetime import date, datetime

import pytest

from tourflight_intel.flight_keys import (
    build_flight_key,
    flight_key_for_segment,
    group_segments,
    parse_date_token,
    resolve_departure_date,
)
from tourflight_intel.navitas import parse_navitas_text

BASE = ("AA", "1234", "2024-01-15", "LAX", "JFK")


def test_key_layout():
    assert build_flight_key(*BASE) == "AA-1234-2024-01-15-LAX-JFK"


def test_key_is_deterministic():
    assert build_flight_key(*BASE) == build_flight_key(*BASE)


@pytest.mark.parametrize("position, value", [(0, "UA"), (1, "1235"), (2, "2024-01-16"), (3, "BUR"), (4, "EWR")])
def test_changing_any_part_changes_the_key(position, value):
    args = list(BASE)
    args[position] = value
    assert build_flight_key(*args) != build_flight_key(*BASE)


def test_builder_does_no_validation():
    assert build_flight_key("", "", "", "", "") == "----"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ({"depDate": "2024-01-15"}, "2024-01-15"),
        ({"dep_date": "01/15/2024"}, "2024-01-15"),
        ({"date": date(2024, 1, 15)}, "2024-01-15"),
        ({"departure_date": datetime(2024, 1, 15, 23, 30)}, "2024-01-15"),
        ({"departure_time": "2024-04-30T09:30:00+11:00"}, "2024-04-30"),
        ({"dep_time_local": "2024-04-30T23:50:00-07:00"}, "2024-04-30"),
        ({"dateRaw": "10Aug"}, "2023-08-10"),
        ({"navitas_text": "AA 1234 LAX-JFK 15JAN 9:30A-6:40P"}, "2023-01-15"),
    ],
)
def test_resolve_departure_date(raw, expected):
    assert resolve_departure_date(raw, reference_year=2023) == expected


def test_explicit_date_wins_over_text():
    raw = {"depDate": "2024-02-01", "navitas_text": "AA 1234 LAX-JFK 15JAN 9:30A-6:40P"}
    assert resolve_departure_date(raw, reference_year=2023) == "2024-02-01"


@pytest.mark.parametrize(
    "raw",
    [
        {},
        {"depDate": "soon"},
        {"dateRaw": "31FEB"},
        {"dateRaw": "15XYZ"},
        {"departure_time": "9:30A"},
        {"navitas_text": "no flight here"},
    ],
)
def test_unresolvable_date_is_empty(raw):
    assert resolve_departure_date(raw, reference_year=2024) == ""


def test_parse_date_token():
    assert parse_date_token("5mar", 2025) == "2025-03-05"
    assert parse_date_token(None, 2025) is None


def test_text_and_manual_entry_share_a_key():
    pasted = {"navitas_text": "UA 0099 MEL-LAX 30APR 9:30A-6:40A"}
    manual = {
        "airline_iata": "ua",
        "flight_number": "99",
        "dep_iata": "MEL",
        "arr_iata": "LAX",
        "departure_time": "2024-04-30T09:30:00+11:00",
    }
    assert flight_key_for_segment(pasted, reference_year=2024) == "UA-99-2024-04-30-MEL-LAX"
    assert flight_key_for_segment(manual) == "UA-99-2024-04-30-MEL-LAX"


def test_delimiter_is_stripped_from_codes():
    raw = {"airline": "A-A", "flight_number": "12-34", "origin": "L-AX", "destination": "JFK", "depDate": "2024-01-15"}
    assert flight_key_for_segment(raw) == "AA-1234-2024-01-15-LAX-JFK"


def test_group_segments_collapses_identical_flights():
    records = [
        {"id": 1, "navitas_text": "AA 1234 LAX-JFK 15JAN 9:30A-6:40P"},
        {"id": 2, "airline": "AA", "flightNumber": "1234", "origin": "LAX", "destination": "JFK", "depDate": "2024-01-15"},
        {"id": 3, "airline": "UA", "flightNumber": "1", "origin": "SFO", "destination": "EWR", "depDate": "2024-01-15"},
        {"id": 4, "origin": "SFO"},
    ]
    groups = group_segments(records, reference_year=2024)

    assert [g.key for g in groups] == [
        "AA-1234-2024-01-15-LAX-JFK",
        "UA-1-2024-01-15-SFO-EWR",
    ]
    assert [m["id"] for m in groups[0].members] == [1, 2]
    assert groups[0].segment.dep_time_raw == "9:30A"
    assert len(groups[1].members) == 1


def test_group_parsed_navitas_segments():
    result = parse_navitas_text(
        "Evan Lodge\nAA 2689 10Aug PHX LAX  10:15A 11:43A\n\n"
        "Ana Ruiz\nAA 2689 10Aug PHX LAX  10:15A 11:43A\nAA 8453 10Aug LAX HND  2:15P 5:25P +1"
    )
    records = [s.to_record() for o in result.options for s in o.segments]
    groups = group_segments(records, reference_year=2025)

    assert [g.key for g in groups] == [
        "AA-2689-2025-08-10-PHX-LAX",
        "AA-8453-2025-08-10-LAX-HND",
    ]
    assert len(groups[0].members) == 2
    assert groups[1].segment.day_offset == 1


def test_group_segments_normalizes_each_record_once(monkeypatch):
    import tourflight_intel.flight_keys as flight_keys

    calls = []
    real = flight_keys.normalize_segment

    def counting(raw):
        calls.append(raw)
        return real(raw)

    monkeypatch.setattr(flight_keys, "normalize_segment", counting)
    records = [
        {"airline": "AA", "flightNumber": "1234", "origin": "LAX", "destination": "JFK", "depDate": "2024-01-15"},
        {"airline": "AA", "flightNumber": "1234", "origin": "LAX", "destination": "JFK", "depDate": "2024-01-15"},
    ]

    groups = flight_keys.group_segments(records)

    assert len(groups) == 1
    assert len(calls) == 2


def test_camel_case_departure_time_is_not_a_date_source():
    assert resolve_departure_date({"departureTime": "2024-04-30T09:30:00+11:00"}) == ""
