"""Data models for generated neighborhoods and their match results."""

from typing import ClassVar, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field

from neighborfit.config.settings import AMENITY_KEYS, LIFESTYLE_KEYS


class KeyedValues(BaseModel):
    """Base for the fixed-key mappings (amenities, lifestyle)."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    keys: ClassVar[tuple[str, ...]] = ()

    def items(self) -> Iterator[tuple[str, int]]:
        """Yield (key, value) pairs in the fixed key order."""
        for key in self.keys:
            yield key, getattr(self, key)

    def as_dict(self) -> dict[str, int]:
        return dict(self.items())


class Amenities(KeyedValues):
    """Amenity counts near a neighborhood."""

    keys: ClassVar[tuple[str, ...]] = AMENITY_KEYS

    restaurants: int = Field(ge=0)
    schools: int = Field(ge=0)
    hospitals: int = Field(ge=0)
    parks: int = Field(ge=0)
    shopping: int = Field(ge=0)
    entertainment: int = Field(ge=0)
    gym: int = Field(ge=0)
    public_transport: int = Field(ge=0, alias="publicTransport")


class Lifestyle(KeyedValues):
    """Lifestyle scores on a 0-10 scale."""

    keys: ClassVar[tuple[str, ...]] = LIFESTYLE_KEYS

    quietness: int = Field(ge=0, le=10)
    nightlife: int = Field(ge=0, le=10)
    walkability: int = Field(ge=0, le=10)
    green_spaces: int = Field(ge=0, le=10, alias="greenSpaces")
    cultural_activities: int = Field(ge=0, le=10, alias="culturalActivities")
    family_friendly: int = Field(ge=0, le=10, alias="familyFriendly")


class Coordinates(BaseModel):
    lat: float
    lng: float


class Demographics(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    population: int = Field(ge=0)
    average_age: int = Field(ge=0, alias="averageAge")
    family_ratio: float = Field(ge=0.0, le=1.0, alias="familyRatio")


class Transport(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    nearest_metro: str = Field(alias="nearestMetro", description="Metro line name or 'Not Available'")
    metro_distance: int = Field(
        alias="metroDistance", description="Distance to the metro in meters, -1 if there is none"
    )
    bus_stops: int = Field(ge=0, alias="busStops")
    average_commute: int = Field(ge=0, alias="averageCommute", description="Minutes")

    @property
    def has_metro(self) -> bool:
        return self.metro_distance >= 0


class Neighborhood(BaseModel):
    """A candidate residential area, generated fresh for each search."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    coordinates: Coordinates
    city: str
    state: str
    average_rent: int = Field(ge=0, alias="averageRent", description="Monthly rent")
    amenities: Amenities
    lifestyle: Lifestyle
    demographics: Demographics
    transport: Transport


class ScoreBreakdown(BaseModel):
    """The five normalized sub-scores behind a match score."""

    amenities: float = Field(ge=0.0, le=1.0)
    lifestyle: float = Field(ge=0.0, le=1.0)
    budget: float = Field(ge=0.0, le=1.0)
    commute: float = Field(ge=0.0, le=1.0)
    demographics: float = Field(ge=0.0, le=1.0)


class NeighborhoodMatch(BaseModel):
    """A neighborhood paired with its suitability score and explanations."""

    neighborhood: Neighborhood
    score: int = Field(ge=0, le=100)
    reasons: list[str] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    breakdown: Optional[ScoreBreakdown] = None
