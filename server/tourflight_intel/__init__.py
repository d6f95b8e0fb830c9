"""
tourflight_intel package

Public API:
    - normalize_segment(raw: Mapping[str, Any]) -> NormalizedSegment
    - build_flight_key(airline, flight_number, dep_date, origin, destination) -> str
    - flight_key_for_segment / group_segments / resolve_departure_date
    - parse_navitas_text(text: str) -> ParseResult
    - extend_with_enrichment / enrichment_result
    - NormalizedSegment, FlightSegment, EnrichmentResult, EnrichedFlight
"""

from .clock import compute_duration_min, format_clock, format_duration, parse_local_clock
from .enrichment import (
    enriched_flight_from_airlabs,
    enriched_flight_from_aviationstack,
    enrichment_result,
)
from .errors import InvalidInputError, TourFlightError
from .flight_keys import (
    build_flight_key,
    flight_key_for_segment,
    group_segments,
    resolve_departure_date,
)
from .models import (
    EnrichedFlight,
    EnrichmentResult,
    FlightGroup,
    FlightSegment,
    NavitasOption,
    NavitasSegment,
    NormalizedSegment,
    ParseResult,
)
from .navitas import NavitasParser, parse_navitas_text
from .segments import (
    FIELD_ALIASES,
    extend_with_enrichment,
    get_airline_display_name,
    get_flight_iata,
    has_enrichment,
    normalize_segment,
)

__all__ = [
    "normalize_segment",
    "FIELD_ALIASES",
    "get_flight_iata",
    "extend_with_enrichment",
    "has_enrichment",
    "get_airline_display_name",
    "build_flight_key",
    "flight_key_for_segment",
    "group_segments",
    "resolve_departure_date",
    "parse_navitas_text",
    "NavitasParser",
    "enriched_flight_from_airlabs",
    "enriched_flight_from_aviationstack",
    "enrichment_result",
    "parse_local_clock",
    "format_clock",
    "compute_duration_min",
    "format_duration",
    "TourFlightError",
    "InvalidInputError",
    "NormalizedSegment",
    "FlightSegment",
    "EnrichmentResult",
    "EnrichedFlight",
    "FlightGroup",
    "NavitasSegment",
    "NavitasOption",
    "ParseResult",
]
