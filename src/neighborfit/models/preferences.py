"""User preference model submitted for a neighborhood search."""

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from neighborfit.config.settings import (
    AMENITY_KEYS,
    LIFESTYLE_KEYS,
    get_city_config,
    is_known_city,
    known_city_names,
)
from neighborfit.models.neighborhood import KeyedValues


class TransportMode(str, Enum):
    """How the user commutes."""
    walking = "walking"
    cycling = "cycling"
    public_transport = "public_transport"
    car = "car"


class HousingType(str, Enum):
    apartment = "apartment"
    house = "house"
    any = "any"


class AmenityWeights(KeyedValues):
    """Importance (0-10) the user places on each amenity."""

    keys: ClassVar[tuple[str, ...]] = AMENITY_KEYS

    restaurants: int = Field(7, ge=0, le=10)
    schools: int = Field(5, ge=0, le=10)
    hospitals: int = Field(8, ge=0, le=10)
    parks: int = Field(6, ge=0, le=10)
    shopping: int = Field(7, ge=0, le=10)
    entertainment: int = Field(5, ge=0, le=10)
    gym: int = Field(6, ge=0, le=10)
    public_transport: int = Field(8, ge=0, le=10, alias="publicTransport")


class LifestyleWeights(KeyedValues):
    """Importance (0-10) the user places on each lifestyle aspect."""

    keys: ClassVar[tuple[str, ...]] = LIFESTYLE_KEYS

    quietness: int = Field(6, ge=0, le=10)
    nightlife: int = Field(4, ge=0, le=10)
    walkability: int = Field(7, ge=0, le=10)
    green_spaces: int = Field(6, ge=0, le=10, alias="greenSpaces")
    cultural_activities: int = Field(5, ge=0, le=10, alias="culturalActivities")
    family_friendly: int = Field(5, ge=0, le=10, alias="familyFriendly")


class UserPreferences(BaseModel):
    """Housing preferences for one search request.

    Accepts both snake_case field names and the camelCase names a web form
    would submit (``workLocation``, ``amenityPreferences`` ...).
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    work_location: str = Field(alias="workLocation", description="Supported city name")
    budget: float = Field(25000, gt=0, description="Monthly rent budget")
    family_size: int = Field(1, ge=1, alias="familySize", description="5 means 5 or more")
    transport_mode: TransportMode = Field(TransportMode.public_transport, alias="transportMode")
    amenity_preferences: AmenityWeights = Field(
        default_factory=AmenityWeights, alias="amenityPreferences"
    )
    lifestyle: LifestyleWeights = Field(default_factory=LifestyleWeights)
    housing_type: HousingType = Field(HousingType.apartment, alias="housingType")
    commute_tolerance: float = Field(
        45, gt=0, alias="commuteTolerance", description="Acceptable commute in minutes"
    )

    @field_validator("work_location")
    @classmethod
    def _known_city(cls, value: str) -> str:
        if not is_known_city(value):
            raise ValueError(
                f"Unknown city: {value}. Available: {', '.join(known_city_names())}"
            )
        return get_city_config(value).name
