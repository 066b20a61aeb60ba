"""Nearest-city lookup used to pre-select a city at signup."""
from __future__ import annotations

import math
from typing import NamedTuple

EARTH_RADIUS_MILES = 3959


class CityLocation(NamedTuple):
    name: str
    lat: float
    lng: float


MAJOR_CITIES: tuple[CityLocation, ...] = (
    CityLocation("San Francisco", 37.7749, -122.4194),
    CityLocation("New York", 40.7128, -74.006),
    CityLocation("Los Angeles", 34.0522, -118.2437),
    CityLocation("Chicago", 41.8781, -87.6298),
    CityLocation("Seattle", 47.6062, -122.3321),
    CityLocation("Austin", 30.2672, -97.7431),
    CityLocation("Boston", 42.3601, -71.0589),
    CityLocation("Denver", 39.7392, -104.9903),
    CityLocation("Miami", 25.7617, -80.1918),
    CityLocation("Portland", 45.5152, -122.6784),
    CityLocation("London", 51.5074, -0.1278),
    CityLocation("Paris", 48.8566, 2.3522),
    CityLocation("Tokyo", 35.6762, 139.6503),
    CityLocation("Sydney", -33.8688, 151.2093),
    CityLocation("Toronto", 43.6532, -79.3832),
    CityLocation("Vancouver", 49.2827, -123.1207),
    CityLocation("Mexico City", 19.4326, -99.1332),
    CityLocation("São Paulo", -23.5505, -46.6333),
    CityLocation("Singapore", 1.3521, 103.8198),
    CityLocation("Hong Kong", 22.3193, 114.1694),
)


def distance_miles(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two coordinates (haversine)."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    return EARTH_RADIUS_MILES * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def find_nearest_city(latitude: float, longitude: float) -> str:
    nearest = min(
        MAJOR_CITIES,
        key=lambda city: distance_miles(latitude, longitude, city.lat, city.lng),
    )
    return nearest.name


def all_cities() -> list[str]:
    return [city.name for city in MAJOR_CITIES]
