"""Synthetic neighborhood generation.

Stands in for real amenity, lifestyle, demographic and transport data.
Values are drawn from fixed ranges and then nudged by rules keyed on tags
derived from the area name (e.g. "Banjara Hills" is upscale, "Lajpat Nagar"
is residential) and on the city (tier multiplier, metro network).

Only the shape of the output is stable: every record carries every key, with
values inside the documented ranges. Exact values depend on the random
source, which callers can seed or replace.
"""

import math
import random
import re
from enum import Enum
from typing import Optional

from neighborfit.config.settings import (
    METRO_LINE_COUNT,
    NO_METRO_DISTANCE,
    NO_METRO_LABEL,
    CityConfig,
    get_city_config,
)
from neighborfit.directory.nominatim import DirectoryHit
from neighborfit.models.neighborhood import (
    Amenities,
    Coordinates,
    Demographics,
    Lifestyle,
    Neighborhood,
    Transport,
)
from neighborfit.utils.geo import jitter_coordinates


class AreaTag(str, Enum):
    """Traits inferred from an area name (or, for METRO_CITY, its city)."""
    BUSINESS_DISTRICT = "business_district"
    RESIDENTIAL = "residential"
    UPSCALE = "upscale"
    CENTRAL = "central"
    HERITAGE = "heritage"
    TRANSIT_CORE = "transit_core"
    PREMIUM = "premium"
    METRO_CITY = "metro_city"


# Substrings (lowercase) that mark an area with a tag
TAG_KEYWORDS: dict[AreaTag, tuple[str, ...]] = {
    AreaTag.BUSINESS_DISTRICT: ("business", "commercial", "central"),
    AreaTag.RESIDENTIAL: ("residential", "colony", "nagar"),
    AreaTag.UPSCALE: ("hills", "park", "gardens"),
    AreaTag.CENTRAL: ("central", "main", "center", "business"),
    AreaTag.HERITAGE: ("old", "heritage"),
    AreaTag.TRANSIT_CORE: ("central", "main"),
    AreaTag.PREMIUM: ("hills", "park", "gardens", "central"),
}

# Base draws: randrange(low, high)
AMENITY_RANGES: dict[str, tuple[int, int]] = {
    "restaurants": (8, 20),
    "schools": (3, 9),
    "hospitals": (2, 6),
    "parks": (2, 7),
    "shopping": (5, 13),
    "entertainment": (3, 9),
    "gym": (2, 6),
    "public_transport": (5, 15),
}

# Multiplicative boosts; several tags compound
AMENITY_BOOSTS: dict[AreaTag, dict[str, float]] = {
    AreaTag.BUSINESS_DISTRICT: {
        "restaurants": 1.5,
        "shopping": 1.3,
        "entertainment": 1.4,
        "public_transport": 1.2,
    },
    AreaTag.RESIDENTIAL: {"schools": 1.4, "parks": 1.3, "hospitals": 1.2},
    AreaTag.UPSCALE: {"gym": 1.5, "parks": 1.4, "entertainment": 1.2},
}

LIFESTYLE_RANGES: dict[str, tuple[int, int]] = {
    "quietness": (5, 8),
    "nightlife": (4, 8),
    "walkability": (5, 8),
    "green_spaces": (4, 8),
    "cultural_activities": (4, 8),
    "family_friendly": (6, 9),
}

# Applied in this order. Each entry is key -> (delta, floor); results are capped at 10.
LIFESTYLE_ADJUSTMENTS: list[tuple[AreaTag, dict[str, tuple[int, int]]]] = [
    (AreaTag.CENTRAL, {"quietness": (-2, 2), "nightlife": (3, 0), "walkability": (2, 0)}),
    (AreaTag.UPSCALE, {"quietness": (2, 0), "green_spaces": (3, 0), "family_friendly": (1, 0)}),
    (AreaTag.HERITAGE, {"cultural_activities": (3, 0), "walkability": (-1, 3)}),
    (AreaTag.METRO_CITY, {"nightlife": (1, 0), "cultural_activities": (1, 0)}),
]

LIFESTYLE_MAX = 10

POPULATION_RANGE = (30000, 110000)
AVERAGE_AGE_RANGE = (25, 45)
FAMILY_RATIO_MIN = 0.3
FAMILY_RATIO_SPAN = 0.5

# (metro distance m, bus stops, commute minutes)
TRANSPORT_RANGES = ((200, 3200), (3, 15), (15, 65))
TRANSIT_CORE_RANGES = ((100, 900), (8, 16), (10, 35))

PREMIUM_RENT_FACTOR = 1.3
RENT_VARIATION_MIN = 0.6
RENT_VARIATION_SPAN = 0.8


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def classify_area(name: str) -> frozenset[AreaTag]:
    """Derive tags for an area by case-insensitive substring match on its name."""
    lowered = (name or "").lower()
    return frozenset(
        tag for tag, keywords in TAG_KEYWORDS.items()
        if any(keyword in lowered for keyword in keywords)
    )


def area_tags(city_config: CityConfig, name: str) -> frozenset[AreaTag]:
    """Name-derived tags plus the city-level METRO_CITY tag."""
    tags = classify_area(name)
    if city_config.has_metro:
        tags = tags | {AreaTag.METRO_CITY}
    return tags


def generate_amenities(
    city_config: CityConfig, tags: frozenset[AreaTag], rng: random.Random
) -> Amenities:
    counts = {}
    for key, (low, high) in AMENITY_RANGES.items():
        value = float(rng.randrange(low, high))
        for tag, boosts in AMENITY_BOOSTS.items():
            if tag in tags and key in boosts:
                value *= boosts[key]
        counts[key] = max(0, _round_half_up(value * city_config.tier_multiplier))
    return Amenities(**counts)


def generate_lifestyle(tags: frozenset[AreaTag], rng: random.Random) -> Lifestyle:
    scores = {key: rng.randrange(low, high) for key, (low, high) in LIFESTYLE_RANGES.items()}
    for tag, adjustments in LIFESTYLE_ADJUSTMENTS:
        if tag not in tags:
            continue
        for key, (delta, floor) in adjustments.items():
            scores[key] = _clamp(scores[key] + delta, floor, LIFESTYLE_MAX)
    return Lifestyle(**{key: _clamp(value, 0, LIFESTYLE_MAX) for key, value in scores.items()})


def generate_demographics(rng: random.Random) -> Demographics:
    return Demographics(
        population=rng.randrange(*POPULATION_RANGE),
        average_age=rng.randrange(*AVERAGE_AGE_RANGE),
        family_ratio=FAMILY_RATIO_MIN + rng.random() * FAMILY_RATIO_SPAN,
    )


def generate_transport(
    city_config: CityConfig, tags: frozenset[AreaTag], rng: random.Random
) -> Transport:
    metro_range, bus_range, commute_range = (
        TRANSIT_CORE_RANGES if AreaTag.TRANSIT_CORE in tags else TRANSPORT_RANGES
    )
    if city_config.has_metro:
        metro_distance = rng.randrange(*metro_range)
    else:
        metro_distance = NO_METRO_DISTANCE
    bus_stops = rng.randrange(*bus_range)
    average_commute = rng.randrange(*commute_range)

    if city_config.has_metro:
        nearest_metro = f"{city_config.name} Metro Line {rng.randint(1, METRO_LINE_COUNT)}"
    else:
        nearest_metro = NO_METRO_LABEL

    return Transport(
        nearest_metro=nearest_metro,
        metro_distance=metro_distance,
        bus_stops=bus_stops,
        average_commute=average_commute,
    )


def estimate_rent(
    city_config: CityConfig, tags: frozenset[AreaTag], rng: random.Random
) -> int:
    """Monthly rent: city base, premium uplift, then 60-140% variation."""
    rent = float(city_config.base_rent)
    if AreaTag.PREMIUM in tags:
        rent *= PREMIUM_RENT_FACTOR
    variation = RENT_VARIATION_MIN + rng.random() * RENT_VARIATION_SPAN
    return _round_half_up(rent * variation)


def neighborhood_id_for(city: str, name: str, prefix: str = "predefined") -> str:
    slug = re.sub(r"\s+", "_", name)
    return f"{prefix}_{city}_{slug}"


def generate_neighborhood(
    city: str,
    name: str,
    rng: Optional[random.Random] = None,
    coordinates: Optional[Coordinates] = None,
    neighborhood_id: Optional[str] = None,
) -> Neighborhood:
    """
    Build a complete neighborhood record for an area of a city.

    Args:
        city: City name; unknown cities use default lookup values
        name: Area display name, drives the tag-based adjustments
        rng: Random source (a fresh unseeded one if omitted)
        coordinates: Known location; otherwise jittered around the city center
        neighborhood_id: Explicit id; otherwise derived from city and name
    """
    rng = rng or random.Random()
    city_config = get_city_config(city)
    tags = area_tags(city_config, name)

    if coordinates is None:
        coordinates = jitter_coordinates(city_config.lat, city_config.lng, rng)

    return Neighborhood(
        id=neighborhood_id or neighborhood_id_for(city_config.name, name),
        name=name,
        coordinates=coordinates,
        city=city_config.name,
        state=city_config.state,
        average_rent=estimate_rent(city_config, tags, rng),
        amenities=generate_amenities(city_config, tags, rng),
        lifestyle=generate_lifestyle(tags, rng),
        demographics=generate_demographics(rng),
        transport=generate_transport(city_config, tags, rng),
    )


def neighborhood_from_hit(
    hit: DirectoryHit, city: str, rng: Optional[random.Random] = None
) -> Neighborhood:
    """Convert a directory hit, keeping its name, location and id."""
    return generate_neighborhood(
        city,
        hit.short_name,
        rng=rng,
        coordinates=Coordinates(lat=hit.lat, lng=hit.lon),
        neighborhood_id=hit.place_id,
    )
