# patterns.py
import re


class Patterns:
    # "AA 1234 LAX-JFK 15JAN 9:30A-6:40P" stored on option components
    NAVITAS_COMPONENT = re.compile(
        r"^([A-Z]{2})\s*(\d+)\s+([A-Z]{3})-([A-Z]{3})\s+\d{2}[A-Z]{3}\s+([\d:]+[AP]?)-([\d:]+[AP]?)",
        re.I,
    )
    # Date token inside a component line, e.g. the "15JAN" above
    NAVITAS_COMPONENT_DATE = re.compile(r"^[A-Z]{2}\s*\d+\s+[A-Z]{3}-[A-Z]{3}\s+(\d{2}[A-Z]{3})\b", re.I)

    # Navitas paste lines
    PASSENGER = re.compile(r"^([A-Z][a-z]+(?:\s+[A-Z][a-z]+)+)$")
    FLIGHT_LINE = re.compile(
        r"^([A-Z]{2,5})\s+([A-Z0-9]+|\d{1,4})\s+(\d{1,2}[A-Za-z]{3})\s+([A-Z]{3})\s+([A-Z]{3})"
        r"\s+(\d{1,2}:\d{2}[AP])\s+(\d{1,2}:\d{2}[AP])(?:\s+\+(\d))?$"
    )
    FARE_LINE = re.compile(r"^TOTAL\s+FARE\s+INC\s+TAX\s+([A-Z]{3})\s*(\d+(?:\.\d{2})?)$", re.I)
    REFERENCE_LINE = re.compile(r"^Reference:\s+([A-Z0-9]{6})$", re.I)
    REFERENCE_PREFIX = re.compile(r"^Reference:", re.I)
    BLOCK_SPLIT = re.compile(r"\n\s*\n")

    DATE_TOKEN = re.compile(r"^(\d{1,2})([A-Za-z]{3})$")
    ISO_DATE_PREFIX = re.compile(r"^(\d{4})-(\d{2})-(\d{2})")
    LOCAL_CLOCK = re.compile(r"^(\d{1,2})(?::(\d{2}))?([AP])$", re.I)
    # Nine digits at most; longer runs are not a day count
    LEADING_INT = re.compile(r"^\s*([+-]?\d{1,9})(?!\d)")


patterns = Patterns()
