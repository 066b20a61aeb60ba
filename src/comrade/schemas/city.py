"""Static city catalogue used by the feed selector."""

from pydantic import BaseModel


class City(BaseModel):
    """City a feed can be scoped to."""

    id: str
    name: str
    country: str


CITIES: tuple[City, ...] = (
    City(id="sf", name="San Francisco", country="USA"),
    City(id="nyc", name="New York", country="USA"),
    City(id="la", name="Los Angeles", country="USA"),
    City(id="chicago", name="Chicago", country="USA"),
    City(id="seattle", name="Seattle", country="USA"),
    City(id="austin", name="Austin", country="USA"),
    City(id="boston", name="Boston", country="USA"),
    City(id="denver", name="Denver", country="USA"),
    City(id="miami", name="Miami", country="USA"),
    City(id="portland", name="Portland", country="USA"),
)


def city_name(city_id: str) -> str:
    """Return the display name for a city id, or the id itself if unknown."""
    for city in CITIES:
        if city.id == city_id:
            return city.name
    return city_id or "Unknown"
