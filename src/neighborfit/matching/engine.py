"""Score neighborhoods against user preferences and rank them."""

import math
from typing import Iterable, Optional

from neighborfit.config.settings import (
    AMENITY_SATURATION,
    BUDGET_STEPS,
    COMMUTE_STEPS,
    RATIO_FLOOR_SCORE,
    REASON_MIN_AMENITY_COUNT,
    REASON_SCORE_THRESHOLD,
    SCORING_WEIGHTS,
    STRENGTH_AMENITY_COUNT,
    STRENGTH_LIFESTYLE_SCORE,
    TOP_PRIORITY_IMPORTANCE,
    WEAKNESS_AMENITY_COUNT,
    WEAKNESS_LIFESTYLE_SCORE,
    get_city_config,
)
from neighborfit.models.neighborhood import Neighborhood, NeighborhoodMatch, ScoreBreakdown
from neighborfit.models.preferences import UserPreferences


def _label(key: str) -> str:
    return key.replace("_", " ")


def _stepped_score(ratio: float, steps: list[tuple[float, float]]) -> float:
    for max_ratio, score in steps:
        if ratio <= max_ratio:
            return score
    return RATIO_FLOOR_SCORE


def _weighted_average(pairs: Iterable[tuple[float, float]]) -> float:
    """Average of (value, weight) pairs; 0 when all weights are 0."""
    total = 0.0
    total_weight = 0.0
    for value, weight in pairs:
        total += value * weight
        total_weight += weight
    return total / total_weight if total_weight > 0 else 0.0


def amenity_score(preferences: UserPreferences, neighborhood: Neighborhood) -> float:
    """Importance-weighted amenity coverage, each amenity saturating at 10."""
    counts = neighborhood.amenities
    return _weighted_average(
        (min(getattr(counts, key) / AMENITY_SATURATION, 1.0), importance)
        for key, importance in preferences.amenity_preferences.items()
    )


def lifestyle_score(preferences: UserPreferences, neighborhood: Neighborhood) -> float:
    values = neighborhood.lifestyle
    return _weighted_average(
        (getattr(values, key) / 10, importance)
        for key, importance in preferences.lifestyle.items()
    )


def budget_score(preferences: UserPreferences, neighborhood: Neighborhood) -> float:
    return _stepped_score(neighborhood.average_rent / preferences.budget, BUDGET_STEPS)


def commute_score(preferences: UserPreferences, neighborhood: Neighborhood) -> float:
    return _stepped_score(
        neighborhood.transport.average_commute / preferences.commute_tolerance, COMMUTE_STEPS
    )


def demographics_score(preferences: UserPreferences, neighborhood: Neighborhood) -> float:
    """Neutral 0.5, nudged by the family ratio for households of two or more."""
    score = 0.5
    if preferences.family_size > 1:
        score += (neighborhood.demographics.family_ratio - 0.5) * 0.5
    return max(0.0, min(1.0, score))


def score_breakdown(preferences: UserPreferences, neighborhood: Neighborhood) -> ScoreBreakdown:
    return ScoreBreakdown(
        amenities=amenity_score(preferences, neighborhood),
        lifestyle=lifestyle_score(preferences, neighborhood),
        budget=budget_score(preferences, neighborhood),
        commute=commute_score(preferences, neighborhood),
        demographics=demographics_score(preferences, neighborhood),
    )


def composite_score(breakdown: ScoreBreakdown) -> int:
    """Weighted sum of the sub-scores on a 0-100 integer scale."""
    total = sum(getattr(breakdown, name) * weight for name, weight in SCORING_WEIGHTS.items())
    return max(0, min(100, int(math.floor(total * 100 + 0.5))))


def generate_reasons(
    preferences: UserPreferences, neighborhood: Neighborhood, breakdown: ScoreBreakdown
) -> list[str]:
    reasons = []
    currency = get_city_config(neighborhood.city).currency

    if breakdown.budget > REASON_SCORE_THRESHOLD:
        reasons.append(f"Rent is within your budget ({currency} {neighborhood.average_rent:,})")

    if breakdown.commute > REASON_SCORE_THRESHOLD:
        reasons.append(f"Short commute time ({neighborhood.transport.average_commute} minutes)")

    for amenity, importance in preferences.amenity_preferences.items():
        if importance < TOP_PRIORITY_IMPORTANCE:
            continue
        count = getattr(neighborhood.amenities, amenity)
        if count > REASON_MIN_AMENITY_COUNT:
            reasons.append(f"Great {_label(amenity)} availability ({count} nearby)")

    return reasons


def analyze_strengths_weaknesses(neighborhood: Neighborhood) -> tuple[list[str], list[str]]:
    strengths = []
    weaknesses = []

    for amenity, count in neighborhood.amenities.items():
        if count > STRENGTH_AMENITY_COUNT:
            strengths.append(f"Excellent {_label(amenity)} availability")
        elif count < WEAKNESS_AMENITY_COUNT:
            weaknesses.append(f"Limited {_label(amenity)} options")

    for aspect, value in neighborhood.lifestyle.items():
        if value > STRENGTH_LIFESTYLE_SCORE:
            strengths.append(f"High {_label(aspect)} score")
        elif value < WEAKNESS_LIFESTYLE_SCORE:
            weaknesses.append(f"Low {_label(aspect)} score")

    return strengths, weaknesses


def calculate_match(preferences: UserPreferences, neighborhood: Neighborhood) -> NeighborhoodMatch:
    """Score one neighborhood and explain the result."""
    breakdown = score_breakdown(preferences, neighborhood)
    strengths, weaknesses = analyze_strengths_weaknesses(neighborhood)
    return NeighborhoodMatch(
        neighborhood=neighborhood,
        score=composite_score(breakdown),
        reasons=generate_reasons(preferences, neighborhood, breakdown),
        strengths=strengths,
        weaknesses=weaknesses,
        breakdown=breakdown,
    )


def rank_neighborhoods(
    preferences: UserPreferences, neighborhoods: list[Neighborhood]
) -> list[NeighborhoodMatch]:
    """Score every neighborhood, best first. Ties keep their input order."""
    matches = [calculate_match(preferences, n) for n in neighborhoods]
    return sorted(matches, key=lambda m: m.score, reverse=True)


def filter_matches(
    matches: list[NeighborhoodMatch],
    min_score: int = 0,
    within_budget: bool = False,
    budget: Optional[float] = None,
) -> list[NeighborhoodMatch]:
    """Keep matches at or above min_score and, optionally, with rent within budget."""
    filtered = list(matches)
    if min_score > 0:
        filtered = [m for m in filtered if m.score >= min_score]
    if within_budget and budget is not None:
        filtered = [m for m in filtered if m.neighborhood.average_rent <= budget]
    return filtered
