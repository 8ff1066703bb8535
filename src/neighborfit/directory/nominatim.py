"""Place search against OpenStreetMap Nominatim, used to seed the catalog."""

from typing import Optional

from geopy.geocoders import Nominatim
from pydantic import BaseModel, Field
from rich.console import Console

from neighborfit.config.settings import (
    DIRECTORY_SEARCH_LIMIT,
    DIRECTORY_TIMEOUT,
    DIRECTORY_USER_AGENT,
)
from neighborfit.utils.cache import TimedCache

console = Console()


class DirectoryHit(BaseModel):
    """A raw place search result."""

    place_id: str
    display_name: str
    lat: float
    lon: float

    @property
    def short_name(self) -> str:
        """Text before the first comma of the display name."""
        return self.display_name.split(",")[0].strip()

    @classmethod
    def from_raw(cls, raw: dict) -> "DirectoryHit":
        lat = float(raw["lat"])
        lon = float(raw["lon"])
        place_id = raw.get("place_id")
        return cls(
            place_id=str(place_id) if place_id else f"{lat}_{lon}",
            display_name=raw["display_name"],
            lat=lat,
            lon=lon,
        )


class NominatimDirectory:
    """Best-effort area search for a city.

    Errors from the geocoder are raised to the caller; the catalog builder
    decides how to degrade.
    """

    def __init__(
        self,
        cache: Optional[TimedCache] = None,
        geolocator: Optional[Nominatim] = None,
        user_agent: str = DIRECTORY_USER_AGENT,
        timeout: float = DIRECTORY_TIMEOUT,
    ):
        self.cache = cache if cache is not None else TimedCache()
        self.geolocator = geolocator or Nominatim(user_agent=user_agent)
        self.timeout = timeout

    def search(self, city: str, limit: int = DIRECTORY_SEARCH_LIMIT) -> list[DirectoryHit]:
        """Search for places matching a city name."""
        cache_key = f"neighborhoods_{city}_{limit}"
        return self.cache.get_or_fetch(cache_key, lambda: self._fetch(city, limit))

    def _fetch(self, city: str, limit: int) -> list[DirectoryHit]:
        console.print(f"[dim]Searching directory for {city} (limit {limit})[/]")
        locations = self.geolocator.geocode(
            city,
            exactly_one=False,
            limit=limit,
            addressdetails=True,
            extratags=True,
            timeout=self.timeout,
        )
        hits = []
        for location in locations or []:
            raw = getattr(location, "raw", None) or {}
            try:
                hits.append(DirectoryHit.from_raw(raw))
            except (KeyError, TypeError, ValueError) as e:
                console.print(f"[yellow]Skipping malformed directory result: {e}[/]")
        return hits
