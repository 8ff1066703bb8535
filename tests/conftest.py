"""Shared fixtures and builders for the NeighborFit test suite."""

import random

import pytest

from neighborfit.config.settings import AMENITY_KEYS, LIFESTYLE_KEYS
from neighborfit.models.neighborhood import (
    Amenities,
    Coordinates,
    Demographics,
    Lifestyle,
    Neighborhood,
    Transport,
)
from neighborfit.models.preferences import AmenityWeights, LifestyleWeights, UserPreferences


class MinRandom(random.Random):
    """Random source that always returns the low end of every range."""

    def random(self):
        return 0.0

    def randrange(self, start, stop=None, step=1):
        return start

    def randint(self, a, b):
        return a

    def choice(self, seq):
        return seq[0]


class MaxRandom(random.Random):
    """Random source that always returns the high end of every range."""

    def random(self):
        return 0.999999

    def randrange(self, start, stop=None, step=1):
        return stop - 1

    def randint(self, a, b):
        return b

    def choice(self, seq):
        return seq[-1]


def make_neighborhood(
    name="Test Area",
    city="Delhi",
    rent=20000,
    commute=20,
    amenity=10,
    lifestyle=10,
    family_ratio=0.5,
    amenities=None,
    lifestyle_values=None,
    neighborhood_id=None,
):
    """Build a neighborhood with uniform amenity/lifestyle values unless overridden."""
    amenity_values = {key: amenity for key in AMENITY_KEYS}
    amenity_values.update(amenities or {})
    lifestyle_scores = {key: lifestyle for key in LIFESTYLE_KEYS}
    lifestyle_scores.update(lifestyle_values or {})
    return Neighborhood(
        id=neighborhood_id or f"test_{name}",
        name=name,
        coordinates=Coordinates(lat=28.6, lng=77.2),
        city=city,
        state="Delhi",
        average_rent=rent,
        amenities=Amenities(**amenity_values),
        lifestyle=Lifestyle(**lifestyle_scores),
        demographics=Demographics(population=50000, average_age=30, family_ratio=family_ratio),
        transport=Transport(
            nearest_metro="Delhi Metro Line 2",
            metro_distance=500,
            bus_stops=6,
            average_commute=commute,
        ),
    )


def make_preferences(
    city="Delhi",
    budget=25000,
    commute_tolerance=45,
    amenity_weight=5,
    lifestyle_weight=5,
    amenity_weights=None,
    lifestyle_weights=None,
    **kwargs,
):
    """Build preferences with uniform importance weights unless overridden."""
    amenity_values = {key: amenity_weight for key in AMENITY_KEYS}
    amenity_values.update(amenity_weights or {})
    lifestyle_values = {key: lifestyle_weight for key in LIFESTYLE_KEYS}
    lifestyle_values.update(lifestyle_weights or {})
    return UserPreferences(
        work_location=city,
        budget=budget,
        commute_tolerance=commute_tolerance,
        amenity_preferences=AmenityWeights(**amenity_values),
        lifestyle=LifestyleWeights(**lifestyle_values),
        **kwargs,
    )


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def preferences():
    return make_preferences()
