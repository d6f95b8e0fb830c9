"""Exceptions raised at the edges of tourflight_intel.

The normalization core never raises on bad data; these cover caller
mistakes such as handing a non-text payload to the Navitas parser over HTTP.
"""


class TourFlightError(Exception):
    """Base class for all tourflight_intel errors."""


class InvalidInputError(TourFlightError):
    """Input has the wrong shape for the requested operation."""
