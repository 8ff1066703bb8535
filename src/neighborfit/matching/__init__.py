"""Preference matching and ranking."""

from neighborfit.matching.engine import calculate_match, filter_matches, rank_neighborhoods

__all__ = ["calculate_match", "filter_matches", "rank_neighborhoods"]
