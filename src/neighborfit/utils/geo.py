"""Geographic utilities for distance and commute estimates."""

import math
import random
from typing import Tuple, Union

from neighborfit.config.settings import COMMUTE_SPEEDS_KMH, COORDINATE_SPREAD_DEG
from neighborfit.models.neighborhood import Coordinates

EARTH_RADIUS_KM = 6371

Point = Union[Coordinates, Tuple[float, float]]


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate the great circle distance between two points in km."""
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def _as_pair(point: Point) -> Tuple[float, float]:
    if isinstance(point, Coordinates):
        return point.lat, point.lng
    return point[0], point[1]


def distance_km(a: Point, b: Point) -> float:
    """Distance in km between two coordinates or (lat, lng) tuples."""
    lat1, lon1 = _as_pair(a)
    lat2, lon2 = _as_pair(b)
    return haversine_distance(lat1, lon1, lat2, lon2)


def estimate_commute_minutes(distance: float, mode: str = "car") -> int:
    """
    Estimate a commute from straight-line distance.

    Uses a fixed average speed per transport mode; unknown modes travel at
    car speed. Rough numbers only, real routes are longer.
    """
    mode = getattr(mode, "value", mode)
    speed_kmh = COMMUTE_SPEEDS_KMH.get(mode, COMMUTE_SPEEDS_KMH["car"])
    return int(math.floor(distance / speed_kmh * 60 + 0.5))


def jitter_coordinates(
    lat: float, lng: float, rng: random.Random, spread: float = COORDINATE_SPREAD_DEG
) -> Coordinates:
    """Pick a point within +/- spread/2 degrees of a center."""
    return Coordinates(
        lat=lat + (rng.random() - 0.5) * spread,
        lng=lng + (rng.random() - 0.5) * spread,
    )
