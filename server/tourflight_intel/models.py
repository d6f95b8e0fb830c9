# models.py
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

EnrichmentSource = Literal["airlabs", "aviationstack", "cache", "fallback"]


class EnrichedFlight(BaseModel):
    """Flight data from a third-party provider, flattened to one shape."""

    model_config = ConfigDict(frozen=True)

    flight_iata: Optional[str] = None
    airline_name: Optional[str] = None
    airline_iata: Optional[str] = None
    aircraft: Optional[str] = None
    status: Optional[str] = None
    dep_iata: Optional[str] = None
    arr_iata: Optional[str] = None
    dep_scheduled: Optional[str] = None
    arr_scheduled: Optional[str] = None
    dep_terminal: Optional[str] = None
    arr_terminal: Optional[str] = None
    dep_gate: Optional[str] = None
    arr_gate: Optional[str] = None
    duration: Optional[int] = None


class EnrichmentResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    data: Optional[EnrichedFlight] = None
    source: EnrichmentSource = "fallback"
    success: bool = False
    error: Optional[str] = None
    cached: Optional[bool] = None


class NormalizedSegment(BaseModel):
    """Canonical flight segment; the four code fields are always strings."""

    model_config = ConfigDict(frozen=True)

    airline: str = ""
    flight_number: str = ""
    origin: str = ""
    destination: str = ""
    dep_time_raw: Optional[str] = None
    arr_time_raw: Optional[str] = None
    day_offset: int = Field(default=0, ge=0)
    enrichment: Optional[EnrichmentResult] = None


class FlightSegment(NormalizedSegment):
    """NormalizedSegment plus presentation strings derived from enrichment."""

    flight_iata: Optional[str] = None
    airline_name: Optional[str] = None
    aircraft: Optional[str] = None
    status: Optional[str] = None
    terminals: Optional[str] = None
    gates: Optional[str] = None
    scheduled_times: Optional[str] = None


class NavitasSegment(BaseModel):
    model_config = ConfigDict(frozen=True)

    airline: str
    flight_number: str
    date_raw: str
    origin: str
    destination: str
    dep_time_raw: str
    arr_time_raw: str
    day_offset: int = 0

    def to_record(self) -> Dict[str, Any]:
        """Mapping in the field names normalize_segment understands."""
        return {
            "airline": self.airline,
            "flightNumber": self.flight_number,
            "origin": self.origin,
            "destination": self.destination,
            "depTimeRaw": self.dep_time_raw,
            "arrTimeRaw": self.arr_time_raw,
            "dayOffset": self.day_offset,
            "dateRaw": self.date_raw,
        }


class NavitasOption(BaseModel):
    passenger: Optional[str] = None
    total_fare: Optional[float] = None
    currency: Optional[str] = None
    reference: Optional[str] = None
    segments: List[NavitasSegment] = Field(default_factory=list)
    source: Literal["navitas"] = "navitas"
    raw: str = ""
    errors: List[str] = Field(default_factory=list)


class ParseResult(BaseModel):
    options: List[NavitasOption] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)


class FlightGroup(BaseModel):
    key: str
    segment: NormalizedSegment
    members: List[Dict[str, Any]] = Field(default_factory=list)
