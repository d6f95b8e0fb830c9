from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from starlette.status import HTTP_400_BAD_REQUEST

from .errors import InvalidInputError, TourFlightError
from .flight_keys import build_flight_key, flight_key_for_segment, group_segments
from .logging_utils import configure_logging, log_event, new_request_id
from .models import FlightGroup, NormalizedSegment, ParseResult
from .navitas import parse_navitas_text
from .segments import normalize_segment

# ------------------------------------------------------------------------------
# APP + LOGGING SETUP
# ------------------------------------------------------------------------------

configure_logging()
logger = logging.getLogger("tourflight.api")

app = FastAPI(title="TourFlight Intel", version="1.0.0")


# ------------------------------------------------------------------------------
# REQUEST / RESPONSE MODELS
# ------------------------------------------------------------------------------

class NavitasRequest(BaseModel):
    text: Any = None


class SegmentsRequest(BaseModel):
    segments: List[Dict[str, Any]] = Field(default_factory=list)
    reference_year: Optional[int] = None


class FlightKeyRequest(BaseModel):
    airline: str
    flight_number: str
    dep_date: str
    origin: str
    destination: str


class FlightKeyResponse(BaseModel):
    key: str


class NormalizeResponse(BaseModel):
    segments: List[NormalizedSegment]
    keys: List[str]


class GroupResponse(BaseModel):
    groups: List[FlightGroup]
    total_groups: int


# ------------------------------------------------------------------------------
# REQUEST LOGGING MIDDLEWARE
# ------------------------------------------------------------------------------

@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    rid = new_request_id()
    start = time.time()

    log_event(
        logger,
        "http_request_started",
        method=request.method,
        path=request.url.path,
        client_ip=request.client.host if request.client else None,
        request_id=rid,
    )

    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        log_event(
            logger,
            "http_request_finished",
            method=request.method,
            path=request.url.path,
            status_code=status_code,
            duration_ms=int((time.time() - start) * 1000),
            request_id=rid,
        )


# ------------------------------------------------------------------------------
# ROUTES
# ------------------------------------------------------------------------------

@app.get("/health")
async def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.exception_handler(TourFlightError)
async def tourflight_error_handler(request: Request, exc: TourFlightError) -> JSONResponse:
    log_event(
        logger,
        "request_rejected",
        level=logging.WARNING,
        path=request.url.path,
        reason=str(exc),
    )
    return JSONResponse(status_code=HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


@app.post("/navitas/parse", response_model=ParseResult)
async def parse_navitas(body: NavitasRequest) -> ParseResult:
    if not isinstance(body.text, str):
        raise InvalidInputError("text must be a string")
    return parse_navitas_text(body.text)


@app.post("/segments/normalize", response_model=NormalizeResponse)
async def normalize(body: SegmentsRequest) -> NormalizeResponse:
    return NormalizeResponse(
        segments=[normalize_segment(s) for s in body.segments],
        keys=[flight_key_for_segment(s, body.reference_year) for s in body.segments],
    )


@app.post("/flights/group", response_model=GroupResponse)
async def group(body: SegmentsRequest) -> GroupResponse:
    groups = group_segments(body.segments, body.reference_year)
    return GroupResponse(groups=groups, total_groups=len(groups))


@app.post("/flights/key", response_model=FlightKeyResponse)
async def flight_key(body: FlightKeyRequest) -> FlightKeyResponse:
    return FlightKeyResponse(
        key=build_flight_key(
            body.airline,
            body.flight_number,
            body.dep_date,
            body.origin,
            body.destination,
        )
    )
