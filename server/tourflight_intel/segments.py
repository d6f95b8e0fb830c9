"""
Segment adapter.

Option components reach us from several places that never agreed on field
names: the Navitas paste parser, the manual entry form (``*_iata`` /
``*_local`` names) and rows stored before structured columns existed,
where only ``navitas_text`` is populated. ``normalize_segment`` folds all
of them into one ``NormalizedSegment``.

Resolution is best effort. Nothing here raises on bad data; a field that
cannot be resolved comes back as ``""`` (codes) or ``None`` (times).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import ValidationError

from .airlines import get_airline_name
from .config import NAVITAS_TEXT_FIELD
from .logging_utils import log_event
from .models import EnrichmentResult, FlightSegment, NormalizedSegment
from .patterns import patterns

logger = logging.getLogger("tourflight.segments")

# Target field -> source keys, highest priority first.
FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "airline": ("airline", "airline_code", "airline_iata", "carrier"),
    "flight_number": ("flightNumber", "flight_number", "number"),
    "origin": ("origin", "from", "departureAirport", "dep_airport", "dep_iata", "dep"),
    "destination": ("destination", "to", "arrivalAirport", "arr_airport", "arr_iata", "arr"),
    "dep_time_raw": ("depTimeRaw", "departureTime", "dep_time", "dep_time_local", "dep", "dep_local"),
    "arr_time_raw": ("arrTimeRaw", "arrivalTime", "arr_time", "arr_time_local", "arr", "arr_local"),
    "day_offset": ("dayOffset", "plusDays", "arrivalDayOffset", "arrival_plus_days"),
}

_CORE_FIELDS = ("airline", "flight_number", "origin", "destination")

# Regex group -> field, for the navitas_text fallback
_TEXT_GROUPS = (
    ("airline", 1),
    ("flight_number", 2),
    ("origin", 3),
    ("destination", 4),
    ("dep_time_raw", 5),
    ("arr_time_raw", 6),
)


def _first_defined(raw: Mapping, keys: Tuple[str, ...]) -> Any:
    """First value whose key is present and not None; "" and 0 still count."""
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def _as_code(value: Any) -> str:
    return str(value).strip().upper() if value else ""


def _as_text(value: Any) -> str:
    return str(value).strip() if value else ""


def _as_optional_text(value: Any) -> Optional[str]:
    return str(value) if value else None


def _as_day_offset(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        offset = value
    elif isinstance(value, float):
        offset = int(value) if math.isfinite(value) else 0
    else:
        m = patterns.LEADING_INT.match(str(value))
        offset = int(m.group(1)) if m else 0
    return max(offset, 0)


def _as_enrichment(value: Any) -> Optional[EnrichmentResult]:
    if value is None or isinstance(value, EnrichmentResult):
        return value
    if not isinstance(value, Mapping):
        return None
    try:
        return EnrichmentResult.model_validate(dict(value))
    except ValidationError as e:
        log_event(
            logger,
            "segment_enrichment_dropped",
            level=logging.DEBUG,
            error_count=e.error_count(),
        )
        return None


def _fill_from_text(resolved: Dict[str, Any], text: Any) -> None:
    m = patterns.NAVITAS_COMPONENT.match(str(text))
    if not m:
        log_event(logger, "segment_text_fallback_miss", level=logging.DEBUG, text=str(text)[:80])
        return

    filled = []
    for field, group in _TEXT_GROUPS:
        if not resolved[field]:
            resolved[field] = m.group(group)
            filled.append(field)

    log_event(logger, "segment_text_fallback_hit", level=logging.DEBUG, filled_fields=filled)


def normalize_segment(raw: Mapping[str, Any]) -> NormalizedSegment:
    """
    Resolve a loosely-typed segment mapping into a NormalizedSegment.

    >>> normalize_segment({"airline_iata": "ua", "flight_number": 5678,
    ...                    "dep_iata": "lax", "arr_iata": "sfo"}).origin
    'LAX'
    """
    if not isinstance(raw, Mapping):
        raw = {}

    resolved: Dict[str, Any] = {
        field: _first_defined(raw, keys) for field, keys in FIELD_ALIASES.items()
    }

    # Legacy rows only carry the booking line text
    text = raw.get(NAVITAS_TEXT_FIELD)
    if text and not all(resolved[f] for f in _CORE_FIELDS):
        _fill_from_text(resolved, text)

    return NormalizedSegment(
        airline=_as_code(resolved["airline"]),
        flight_number=_as_text(resolved["flight_number"]),
        origin=_as_code(resolved["origin"]),
        destination=_as_code(resolved["destination"]),
        dep_time_raw=_as_optional_text(resolved["dep_time_raw"]),
        arr_time_raw=_as_optional_text(resolved["arr_time_raw"]),
        day_offset=_as_day_offset(resolved["day_offset"]),
        enrichment=_as_enrichment(raw.get("enrichment")),
    )


def get_flight_iata(airline: str, flight_number: str) -> str:
    """("AA", "100") -> "AA100"."""
    return f"{airline}{flight_number}"


def _pair(dep: Optional[str], arr: Optional[str], prefix: str = "") -> Optional[str]:
    if dep and arr:
        return f"{prefix}{dep} → {prefix}{arr}"
    if dep:
        return f"{prefix}{dep}"
    if arr:
        return f"{prefix}{arr}"
    return None


def _wall_clock(iso: str) -> Optional[str]:
    try:
        dt = datetime.fromisoformat(iso.replace("Z", "+00:00"))
    except ValueError:
        return None
    return dt.strftime("%I:%M %p")


def _scheduled_range(dep_iso: Optional[str], arr_iso: Optional[str]) -> Optional[str]:
    if not dep_iso or not arr_iso:
        return None
    dep = _wall_clock(dep_iso)
    arr = _wall_clock(arr_iso)
    if not dep or not arr:
        return None
    return f"{dep} → {arr}"


def extend_with_enrichment(
    segment: NormalizedSegment,
    enrichment: Optional[EnrichmentResult],
) -> FlightSegment:
    """
    Build a FlightSegment from a normalized segment and provider data.

    The core fields are copied as-is; enrichment only adds display strings.
    """
    extra: Dict[str, Any] = {
        "flight_iata": get_flight_iata(segment.airline, segment.flight_number),
    }

    data = enrichment.data if enrichment else None
    if data:
        extra.update(
            airline_name=data.airline_name,
            aircraft=data.aircraft,
            status=data.status,
            terminals=_pair(data.dep_terminal, data.arr_terminal, prefix="T"),
            gates=_pair(data.dep_gate, data.arr_gate),
            scheduled_times=_scheduled_range(data.dep_scheduled, data.arr_scheduled),
        )

    core = set(NormalizedSegment.model_fields) - {"enrichment"}
    return FlightSegment(
        **segment.model_dump(include=core),
        enrichment=enrichment,
        **extra,
    )


def has_enrichment(segment: Union[NormalizedSegment, FlightSegment]) -> bool:
    return segment.enrichment is not None


def get_airline_display_name(segment: Union[NormalizedSegment, FlightSegment]) -> str:
    if isinstance(segment, FlightSegment) and segment.airline_name:
        return segment.airline_name
    enrichment = segment.enrichment
    if enrichment and enrichment.data and enrichment.data.airline_name:
        return enrichment.data.airline_name
    return get_airline_name(segment.airline)
