from tourflight_intel.models import NavitasSegment
from tourflight_intel.navitas import parse_navitas_text
from tourflight_intel.segments import normalize_segment

SINGLE_OPTION = """Evan Lodge
AA 2689 10Aug PHX LAX  10:15A 11:43A
AA 8453 10Aug LAX HND  2:15P 5:25P +1
AA 170  15Aug HND LAX 11:55A 6:00A
AA 1668 15Aug LAX PHX 10:00A 11:26A
TOTAL FARE INC TAX  USD5790.81
Reference: UCWYOJ"""


def test_single_option():
    result = parse_navitas_text(SINGLE_OPTION)

    assert result.errors == []
    assert len(result.options) == 1

    option = result.options[0]
    assert option.passenger == "Evan Lodge"
    assert option.total_fare == 5790.81
    assert option.currency == "USD"
    assert option.reference == "UCWYOJ"
    assert option.source == "navitas"
    assert option.raw == SINGLE_OPTION
    assert option.errors == []
    assert len(option.segments) == 4


def test_segments_are_parsed_field_by_field():
    segments = parse_navitas_text(SINGLE_OPTION).options[0].segments

    assert segments[0] == NavitasSegment(
        airline="AA",
        flight_number="2689",
        date_raw="10Aug",
        origin="PHX",
        destination="LAX",
        dep_time_raw="10:15A",
        arr_time_raw="11:43A",
        day_offset=0,
    )
    assert segments[1].day_offset == 1
    assert segments[1].destination == "HND"
    assert segments[2].flight_number == "170"
    assert segments[2].date_raw == "15Aug"


def test_multiple_options_split_on_blank_lines():
    text = (
        "Evan Lodge\nAA 2689 10Aug PHX LAX  10:15A 11:43A\nReference: UCWYOJ\n"
        "\n   \n"
        "Maria Chen\nUA 100 11Aug LAX SFO 8:00A 9:25A\nTOTAL FARE INC TAX  USD412.00"
    )
    result = parse_navitas_text(text)

    assert [o.passenger for o in result.options] == ["Evan Lodge", "Maria Chen"]
    assert result.options[1].total_fare == 412.0
    assert result.options[1].reference is None


def test_spelled_out_codes_are_translated():
    result = parse_navitas_text("BATWO EIGHTZEROZERO 29Jun LAX LHR 5:05P 11:35A +1")
    seg = result.options[0].segments[0]

    assert seg.airline == "BA"
    assert seg.flight_number == "800"
    assert seg.day_offset == 1


def test_unknown_lines_are_soft_errors():
    result = parse_navitas_text("Evan Lodge\nAA 2689 10Aug PHX LAX 10:15A 11:43A\nWindow seat requested")
    option = result.options[0]

    assert result.errors == []
    assert option.errors == ['Unrecognized line: "Window seat requested"']
    assert len(option.segments) == 1


def test_malformed_reference_is_ignored():
    result = parse_navitas_text("AA 2689 10Aug PHX LAX  10:15A 11:43A\nReference: ABC")
    option = result.options[0]

    assert option.errors == []
    assert option.reference is None
    assert len(option.segments) == 1


def test_fare_and_reference_keep_pasted_case():
    result = parse_navitas_text(
        "AA 2689 10Aug PHX LAX  10:15A 11:43A\nTOTAL FARE INC TAX usd100.00\nreference: ucwyoj"
    )
    option = result.options[0]

    assert option.errors == []
    assert option.currency == "usd"
    assert option.total_fare == 100.0
    assert option.reference == "ucwyoj"


def test_block_without_flights_is_reported():
    result = parse_navitas_text("Just some notes\n\nAA 2689 10Aug PHX LAX 10:15A 11:43A")

    assert len(result.options) == 1
    assert result.errors == ["Block 1: No valid flight segments found"]


def test_empty_and_non_text_input():
    for value in ("", "   \n\t  ", None, 42):
        result = parse_navitas_text(value)
        assert result.options == []
        assert result.errors == ["Invalid input: expected non-empty string"]


def test_parsed_segment_feeds_the_normalizer():
    seg = parse_navitas_text(SINGLE_OPTION).options[0].segments[1]
    normalized = normalize_segment(seg.to_record())

    assert normalized.airline == "AA"
    assert normalized.flight_number == "8453"
    assert normalized.origin == "LAX"
    assert normalized.destination == "HND"
    assert normalized.dep_time_raw == "2:15P"
    assert normalized.arr_time_raw == "5:25P"
    assert normalized.day_offset == 1
