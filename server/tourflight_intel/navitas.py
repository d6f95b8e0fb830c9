# navitas.py
"""
Navitas paste parser.

A paste holds one or more option blocks separated by blank lines:

    Evan Lodge
    AA 2689 10Aug PHX LAX  10:15A 11:43A
    AA 8453 10Aug LAX HND  2:15P 5:25P +1
    TOTAL FARE INC TAX  USD5790.81
    Reference: UCWYOJ

Unknown lines are kept as soft errors on the option instead of failing the
whole paste; blocks without any flight line are reported in the global
error list.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from .logging_utils import log_event
from .models import NavitasOption, NavitasSegment, ParseResult
from .patterns import patterns

logger = logging.getLogger("tourflight.navitas")

# Some GDS screens spell codes out letter by letter
SPELLED_AIRLINES = {
    "BATWO": "BA",
}

SPELLED_FLIGHT_NUMBERS = {
    "EIGHTZEROZERO": "800",
    "FOURFIVETHREE": "453",
    "FOURONETWO": "412",
    "SEVENFIVE": "75",
}


class NavitasParser:
    def parse(self, text: Any) -> ParseResult:
        if not text or not isinstance(text, str) or not text.strip():
            return ParseResult(errors=["Invalid input: expected non-empty string"])

        blocks = [b.strip() for b in patterns.BLOCK_SPLIT.split(text.strip()) if b.strip()]
        options: List[NavitasOption] = []
        errors: List[str] = []

        for number, block in enumerate(blocks, 1):
            try:
                option = self._parse_block(block)
            except ValueError as e:
                errors.append(f"Block {number}: {e}")
                continue

            if option.segments:
                options.append(option)
            else:
                errors.append(f"Block {number}: No valid flight segments found")

        log_event(
            logger,
            "navitas_parsed",
            blocks=len(blocks),
            options=len(options),
            segments=sum(len(o.segments) for o in options),
            errors=len(errors),
        )
        return ParseResult(options=options, errors=errors)

    def _parse_block(self, block: str) -> NavitasOption:
        passenger: Optional[str] = None
        total_fare: Optional[float] = None
        currency: Optional[str] = None
        reference: Optional[str] = None
        segments: List[NavitasSegment] = []
        errors: List[str] = []

        lines = [line.strip() for line in block.split("\n") if line.strip()]
        for line in lines:
            m = patterns.PASSENGER.match(line)
            if m and passenger is None:
                passenger = m.group(1)
                continue

            segment = self._parse_flight_line(line)
            if segment is not None:
                segments.append(segment)
                continue

            m = patterns.FARE_LINE.match(line)
            if m:
                currency = m.group(1)
                total_fare = float(m.group(2))
                continue

            m = patterns.REFERENCE_LINE.match(line)
            if m:
                reference = m.group(1)
                continue

            # a malformed PNR is ignored, not reported
            if patterns.REFERENCE_PREFIX.match(line):
                continue

            errors.append(f'Unrecognized line: "{line}"')

        return NavitasOption(
            passenger=passenger,
            total_fare=total_fare,
            currency=currency,
            reference=reference,
            segments=segments,
            raw=block,
            errors=errors,
        )

    @staticmethod
    def _parse_flight_line(line: str) -> Optional[NavitasSegment]:
        m = patterns.FLIGHT_LINE.match(line)
        if not m:
            return None

        airline, flight_number, date_raw, origin, destination, dep, arr, plus = m.groups()
        return NavitasSegment(
            airline=SPELLED_AIRLINES.get(airline, airline),
            flight_number=SPELLED_FLIGHT_NUMBERS.get(flight_number, flight_number),
            date_raw=date_raw,
            origin=origin,
            destination=destination,
            dep_time_raw=dep,
            arr_time_raw=arr,
            day_offset=int(plus) if plus else 0,
        )


_parser = NavitasParser()


def parse_navitas_text(text: Any) -> ParseResult:
    return _parser.parse(text)
