"""Local clock strings as printed on Navitas lines ("9A", "9:05A", "12P")."""

from __future__ import annotations

from typing import Optional

from .patterns import patterns


def parse_local_clock(raw: Optional[str]) -> Optional[int]:
    """Minutes since midnight, or None when the string is not a 12-hour clock."""
    if not raw:
        return None
    m = patterns.LOCAL_CLOCK.match(raw.strip())
    if not m:
        return None

    hour = int(m.group(1))
    minute = int(m.group(2) or "00")
    if hour < 1 or hour > 12 or minute > 59:
        return None

    meridiem = m.group(3).upper()
    if meridiem == "P" and hour != 12:
        hour += 12
    if meridiem == "A" and hour == 12:
        hour = 0
    return hour * 60 + minute


def format_clock(raw: Optional[str]) -> str:
    """"9A" -> "9:00 AM"; anything unparseable is returned unchanged."""
    mins = parse_local_clock(raw)
    if mins is None:
        return raw or ""
    h24, minute = divmod(mins, 60)
    meridiem = "PM" if h24 >= 12 else "AM"
    h12 = h24 % 12 or 12
    return f"{h12}:{minute:02d} {meridiem}"


def compute_duration_min(
    dep_raw: Optional[str],
    arr_raw: Optional[str],
    day_offset: int = 0,
) -> Optional[int]:
    dep = parse_local_clock(dep_raw)
    arr = parse_local_clock(arr_raw)
    if dep is None or arr is None:
        return None
    delta = arr - dep + day_offset * 24 * 60
    if delta < 0:
        # arrival printed without its +1 marker
        delta += 24 * 60
    return delta if delta >= 0 else None


def format_duration(mins: Optional[int]) -> str:
    if mins is None:
        return "—"
    hours, minute = divmod(mins, 60)
    return f"{hours}h{minute:02d}"
