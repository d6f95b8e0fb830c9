from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from .models import EnrichedFlight, EnrichmentResult, EnrichmentSource


def _text(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def _section(item: Mapping, key: str) -> Mapping:
    value = item.get(key)
    return value if isinstance(value, Mapping) else {}


def enriched_flight_from_airlabs(item: Mapping[str, Any]) -> EnrichedFlight:
    """
    Flatten one Airlabs ``/flight`` row.

    Aircraft prefers the IATA type code over ICAO; status is lowercased.
    """
    duration = item.get("duration")
    status = _text(item.get("status"))
    return EnrichedFlight(
        flight_iata=_text(item.get("flight_iata")),
        airline_name=_text(item.get("airline_name")),
        airline_iata=_text(item.get("airline_iata")),
        aircraft=_text(item.get("aircraft_iata")) or _text(item.get("aircraft_icao")),
        status=status.lower() if status else None,
        dep_iata=_text(item.get("dep_iata")),
        arr_iata=_text(item.get("arr_iata")),
        dep_scheduled=_text(item.get("dep_scheduled")),
        arr_scheduled=_text(item.get("arr_scheduled")),
        dep_terminal=_text(item.get("dep_terminal")),
        arr_terminal=_text(item.get("arr_terminal")),
        dep_gate=_text(item.get("dep_gate")),
        arr_gate=_text(item.get("arr_gate")),
        duration=duration if isinstance(duration, int) and not isinstance(duration, bool) else None,
    )


def enriched_flight_from_aviationstack(item: Mapping[str, Any]) -> EnrichedFlight:
    """Flatten one AviationStack ``/flights`` row (nested departure/arrival objects)."""
    departure = _section(item, "departure")
    arrival = _section(item, "arrival")
    airline = _section(item, "airline")
    flight = _section(item, "flight")
    aircraft = _section(item, "aircraft")

    airline_iata = _text(airline.get("iata"))
    flight_iata = _text(flight.get("iata"))
    if not flight_iata and airline_iata and flight.get("number"):
        flight_iata = f"{airline_iata}{flight['number']}"

    status = _text(item.get("flight_status"))
    return EnrichedFlight(
        flight_iata=flight_iata,
        airline_name=_text(airline.get("name")),
        airline_iata=airline_iata,
        aircraft=_text(aircraft.get("iata")) or _text(aircraft.get("icao")),
        status=status.lower() if status else None,
        dep_iata=_text(departure.get("iata")),
        arr_iata=_text(arrival.get("iata")),
        dep_scheduled=_text(departure.get("scheduled")),
        arr_scheduled=_text(arrival.get("scheduled")),
        dep_terminal=_text(departure.get("terminal")),
        arr_terminal=_text(arrival.get("terminal")),
        dep_gate=_text(departure.get("gate")),
        arr_gate=_text(arrival.get("gate")),
    )


def _from_cache(item: Mapping[str, Any]) -> EnrichedFlight:
    return EnrichedFlight.model_validate(dict(item))


_MAPPERS = {
    "airlabs": enriched_flight_from_airlabs,
    "aviationstack": enriched_flight_from_aviationstack,
    # cache rows are EnrichedFlight dumps already
    "cache": _from_cache,
}


def enrichment_result(
    source: EnrichmentSource,
    item: Optional[Mapping[str, Any]],
    cached: bool = False,
    error: Optional[str] = None,
) -> EnrichmentResult:
    """Wrap a provider row (or its absence) the way segment enrichment expects."""
    mapper = _MAPPERS.get(source)
    if item is None or mapper is None:
        return EnrichmentResult(
            data=None,
            source=source,
            success=False,
            error=error or "No flight data",
            cached=cached,
        )
    return EnrichmentResult(data=mapper(item), source=source, success=True, cached=cached)
