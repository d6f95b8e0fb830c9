# airlines.py
# ---------------------------------------------------------------------
# Carriers the tour desk books most often. Extend freely; lookups fall
# back to the IATA code for anything missing.

from typing import Optional

AIRLINE_CODES: dict[str, dict[str, str]] = {
    # ==== U.S. ====
    "AA": {"icao": "AAL", "name": "American Airlines"},
    "UA": {"icao": "UAL", "name": "United Airlines"},
    "DL": {"icao": "DAL", "name": "Delta Air Lines"},
    "WN": {"icao": "SWA", "name": "Southwest Airlines"},
    "B6": {"icao": "JBU", "name": "JetBlue Airways"},
    "AS": {"icao": "ASA", "name": "Alaska Airlines"},
    "NK": {"icao": "NKS", "name": "Spirit Airlines"},
    "F9": {"icao": "FFT", "name": "Frontier Airlines"},
    "HA": {"icao": "HAL", "name": "Hawaiian Airlines"},
    "OO": {"icao": "SKW", "name": "SkyWest Airlines"},

    # ==== CANADA / LATIN AMERICA ====
    "AC": {"icao": "ACA", "name": "Air Canada"},
    "WS": {"icao": "WJA", "name": "WestJet"},
    "AM": {"icao": "AMX", "name": "Aeroméxico"},
    "LA": {"icao": "LAN", "name": "LATAM Airlines"},
    "CM": {"icao": "CMP", "name": "Copa Airlines"},

    # ==== EUROPE ====
    "BA": {"icao": "BAW", "name": "British Airways"},
    "VS": {"icao": "VIR", "name": "Virgin Atlantic"},
    "AF": {"icao": "AFR", "name": "Air France"},
    "KL": {"icao": "KLM", "name": "KLM Royal Dutch Airlines"},
    "LH": {"icao": "DLH", "name": "Lufthansa"},
    "LX": {"icao": "SWR", "name": "Swiss International Air Lines"},
    "IB": {"icao": "IBE", "name": "Iberia"},
    "EI": {"icao": "EIN", "name": "Aer Lingus"},
    "SK": {"icao": "SAS", "name": "Scandinavian Airlines"},
    "AY": {"icao": "FIN", "name": "Finnair"},
    "U2": {"icao": "EZY", "name": "easyJet"},
    "FR": {"icao": "RYR", "name": "Ryanair"},

    # ==== MIDDLE EAST ====
    "EK": {"icao": "UAE", "name": "Emirates"},
    "QR": {"icao": "QTR", "name": "Qatar Airways"},
    "EY": {"icao": "ETD", "name": "Etihad Airways"},
    "TK": {"icao": "THY", "name": "Turkish Airlines"},

    # ==== ASIA / PACIFIC ====
    "JL": {"icao": "JAL", "name": "Japan Airlines"},
    "NH": {"icao": "ANA", "name": "All Nippon Airways"},
    "CX": {"icao": "CPA", "name": "Cathay Pacific"},
    "SQ": {"icao": "SIA", "name": "Singapore Airlines"},
    "KE": {"icao": "KAL", "name": "Korean Air"},
    "QF": {"icao": "QFA", "name": "Qantas"},
    "VA": {"icao": "VOZ", "name": "Virgin Australia"},
    "NZ": {"icao": "ANZ", "name": "Air New Zealand"},
}


def get_airline_name(code: Optional[str]) -> str:
    """
    "aa" -> "American Airlines", "ZZ" -> "ZZ", None -> "".
    """
    if not code:
        return ""
    key = str(code).strip().upper()
    entry = AIRLINE_CODES.get(key)
    return entry["name"] if entry else key
