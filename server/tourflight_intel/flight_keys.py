"""
Flight keys for the "By Flight" view.

The same physical flight shows up once per option it appears in, entered
through different paths (Navitas paste, manual form, legacy text rows).
A key of ``airline-flightNumber-depDate-origin-destination`` collapses
them into one group.

``build_flight_key`` is a plain join. Cleaning happens in
``flight_key_for_segment``: codes are stripped of the delimiter and the
date is always ISO ``YYYY-MM-DD``, so a key splits back unambiguously.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional

from .config import FLIGHT_KEY_DELIMITER, NAVITAS_TEXT_FIELD, settings
from .logging_utils import log_event
from .models import FlightGroup, NormalizedSegment
from .patterns import patterns
from .segments import normalize_segment

logger = logging.getLogger("tourflight.flight_keys")

MONTHS: Dict[str, int] = {
    "JAN": 1, "FEB": 2, "MAR": 3, "APR": 4,
    "MAY": 5, "JUN": 6, "JUL": 7, "AUG": 8,
    "SEP": 9, "OCT": 10, "NOV": 11, "DEC": 12,
}

# Checked in order; the first one that yields a date wins
DATE_FIELDS = ("depDate", "dep_date", "departure_date", "flight_date", "date")
DATETIME_FIELDS = ("departure_time", "dep_time_local", "dep_scheduled")
DATE_TOKEN_FIELDS = ("dateRaw", "date_raw")

_DATE_FORMATS = ("%Y-%m-%d", "%m/%d/%Y", "%d.%m.%Y")


def build_flight_key(
    airline: str,
    flight_number: str,
    dep_date: str,
    origin: str,
    destination: str,
) -> str:
    """
    >>> build_flight_key("AA", "1234", "2024-01-15", "LAX", "JFK")
    'AA-1234-2024-01-15-LAX-JFK'
    """
    return FLIGHT_KEY_DELIMITER.join((airline, flight_number, dep_date, origin, destination))


def _from_date_value(value: Any) -> Optional[str]:
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    m = patterns.ISO_DATE_PREFIX.match(text)
    if m:
        text = m.group(0)
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date().isoformat()
        except ValueError:
            continue
    return None


def _from_iso_datetime(value: Any) -> Optional[str]:
    if isinstance(value, datetime):
        return value.date().isoformat()
    if not isinstance(value, str):
        return None
    # Wall-clock date at the departure airport, no timezone shift
    m = patterns.ISO_DATE_PREFIX.match(value.strip())
    return _from_date_value(m.group(0)) if m else None


def parse_date_token(token: Any, year: int) -> Optional[str]:
    """"15JAN" / "10Aug" + year -> ISO date, None if not a real calendar date."""
    if not isinstance(token, str):
        return None
    m = patterns.DATE_TOKEN.match(token.strip())
    if not m:
        return None
    month = MONTHS.get(m.group(2).upper())
    if month is None:
        return None
    try:
        return date(year, month, int(m.group(1))).isoformat()
    except ValueError:
        return None


def resolve_departure_date(raw: Mapping[str, Any], reference_year: Optional[int] = None) -> str:
    """ISO departure date found in a segment record, or "" when there is none."""
    if not isinstance(raw, Mapping):
        return ""

    for key in DATE_FIELDS:
        resolved = _from_date_value(raw.get(key))
        if resolved:
            return resolved

    for key in DATETIME_FIELDS:
        resolved = _from_iso_datetime(raw.get(key))
        if resolved:
            return resolved

    year = reference_year or settings.reference_year or date.today().year
    for key in DATE_TOKEN_FIELDS:
        resolved = parse_date_token(raw.get(key), year)
        if resolved:
            return resolved

    text = raw.get(NAVITAS_TEXT_FIELD)
    if text:
        m = patterns.NAVITAS_COMPONENT_DATE.match(str(text))
        if m:
            resolved = parse_date_token(m.group(1), year)
            if resolved:
                return resolved

    return ""


def _clean_part(value: str) -> str:
    return "".join(value.split()).replace(FLIGHT_KEY_DELIMITER, "")


def _clean_flight_number(value: str) -> str:
    number = _clean_part(value)
    # "0099" and "99" are the same flight
    if number.isdigit():
        return number.lstrip("0") or "0"
    return number


def flight_key_for_segment(raw: Mapping[str, Any], reference_year: Optional[int] = None) -> str:
    return _key_for(normalize_segment(raw), raw, reference_year)


def _key_for(segment: NormalizedSegment, raw: Mapping[str, Any], reference_year: Optional[int]) -> str:
    return build_flight_key(
        _clean_part(segment.airline),
        _clean_flight_number(segment.flight_number),
        resolve_departure_date(raw, reference_year),
        _clean_part(segment.origin),
        _clean_part(segment.destination),
    )


def group_segments(
    records: Iterable[Mapping[str, Any]],
    reference_year: Optional[int] = None,
) -> List[FlightGroup]:
    """
    Group segment records by flight key, keeping first-seen order.

    Records without an airline or flight number cannot be keyed and are skipped.
    """
    groups: Dict[str, FlightGroup] = {}
    skipped = 0

    for record in records:
        segment = normalize_segment(record)
        if not segment.airline or not segment.flight_number:
            skipped += 1
            continue

        key = _key_for(segment, record, reference_year)
        group = groups.get(key)
        if group is None:
            group = FlightGroup(key=key, segment=segment)
            groups[key] = group
        group.members.append(dict(record))

    log_event(logger, "segments_grouped", groups=len(groups), skipped=skipped)
    return list(groups.values())
