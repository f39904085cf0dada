# notebook 1- 2-geo lookup

from __future__ import annotations

from typing import NamedTuple, Optional


class GeoPosition(NamedTuple):
    lat: float
    lon: float
    color: str


FALLBACK_COLOR = "#94a3b8"
FALLBACK_POSITION = GeoPosition(0.0, 0.0, FALLBACK_COLOR)

# ==================================================
# Static region table (name -> position + map color)
# ==================================================
REGION_COORDINATES: dict[str, GeoPosition] = {
    # GCC
    "Abu Dhabi": GeoPosition(24.466667, 54.366669, "#f87171"),
    "Dubai": GeoPosition(25.276987, 55.296249, "#f87171"),
    "Sharjah": GeoPosition(25.357125, 55.405167, "#f87171"),
    "Riyadh": GeoPosition(24.713552, 46.675296, "#f87171"),
    "Doha": GeoPosition(25.2854, 51.5310, "#f87171"),
    "Kuwait City": GeoPosition(29.3759, 47.9774, "#f87171"),
    "Manama": GeoPosition(26.2285, 50.5860, "#f87171"),

    # North America
    "New York": GeoPosition(40.712776, -74.005974, "#4ade80"),
    "California": GeoPosition(36.778259, -119.417931, "#4ade80"),
    "Toronto": GeoPosition(43.6532, -79.3832, "#4ade80"),

    # Europe
    "London": GeoPosition(51.507351, -0.127758, "#fbbf24"),
    "Paris": GeoPosition(48.856613, 2.352222, "#fbbf24"),
    "Berlin": GeoPosition(52.520008, 13.404954, "#fbbf24"),

    # Asia
    "Singapore": GeoPosition(1.352083, 103.819836, "#60a5fa"),
    "Tokyo": GeoPosition(35.689487, 139.691711, "#60a5fa"),

    # Africa
    "Cairo": GeoPosition(30.033333, 31.233334, "#a78bfa"),
}


def lookup(region: Optional[str]) -> GeoPosition:
    """Exact-name lookup. Unknown names get (0, 0) and the neutral color."""
    if region is None:
        return FALLBACK_POSITION

    return REGION_COORDINATES.get(region, FALLBACK_POSITION)


def is_unmapped(lat: float, lon: float) -> bool:
    return lat == 0 and lon == 0
