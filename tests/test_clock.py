import pytest

from tourflight_intel.clock import compute_duration_min, format_clock, format_duration, parse_local_clock


@pytest.mark.parametrize(
    "raw, minutes",
    [
        ("9A", 540),
        ("9:05A", 545),
        ("08:00A", 480),
        ("12P", 720),
        ("12A", 0),
        ("11:30p", 1410),
        (" 6:40P ", 1120),
    ],
)
def test_parse_local_clock(raw, minutes):
    assert parse_local_clock(raw) == minutes


@pytest.mark.parametrize("raw", [None, "", "13:00P", "9:60A", "0A", "0930", "noon"])
def test_parse_local_clock_rejects(raw):
    assert parse_local_clock(raw) is None


def test_format_clock():
    assert format_clock("9A") == "9:00 AM"
    assert format_clock("12P") == "12:00 PM"
    assert format_clock("11:30P") == "11:30 PM"
    assert format_clock("later") == "later"
    assert format_clock(None) == ""


def test_compute_duration_min():
    assert compute_duration_min("9A", "11A") == 120
    assert compute_duration_min("11P", "1A", 1) == 120
    # missing +1 marker still yields a positive duration
    assert compute_duration_min("11P", "1A", 0) == 120
    assert compute_duration_min("2:15P", "5:25P", 1) == 1630
    assert compute_duration_min("9A", None) is None


def test_format_duration():
    assert format_duration(120) == "2h00"
    assert format_duration(90) == "1h30"
    assert format_duration(None) == "—"
