"""Tests for the end-to-end search pipeline."""

import random

from neighborfit.pipeline import SearchResult, run_search

from conftest import make_preferences


class FailingDirectory:
    def search(self, city, limit=20):
        raise ConnectionError("no network")


def test_offline_search_ranks_whole_catalog():
    result = run_search(make_preferences(city="Pune"), rng=random.Random(5))
    assert len(result.matches) == 24
    assert result.filtered == result.matches
    scores = [m.score for m in result.matches]
    assert scores == sorted(scores, reverse=True)
    assert result.catalog.predefined == 24
    assert result.duration_seconds is not None


def test_filters_applied():
    preferences = make_preferences(city="Pune", budget=25000)
    result = run_search(preferences, rng=random.Random(5), min_score=50, within_budget=True)
    assert all(m.score >= 50 for m in result.filtered)
    assert all(m.neighborhood.average_rent <= 25000 for m in result.filtered)
    assert len(result.filtered) <= len(result.matches)


def test_directory_failure_still_returns_matches():
    result = run_search(
        make_preferences(city="Chennai"), directory=FailingDirectory(), rng=random.Random(2)
    )
    assert result.catalog.directory_failed
    assert len(result.matches) == 24


def test_seeded_runs_are_reproducible():
    a = run_search(make_preferences(city="Jaipur"), rng=random.Random(11))
    b = run_search(make_preferences(city="Jaipur"), rng=random.Random(11))
    assert [m.model_dump() for m in a.matches] == [m.model_dump() for m in b.matches]
    assert len(a.matches) == 25


def test_print_summary(capsys):
    result = run_search(make_preferences(city="Kolkata"), rng=random.Random(1))
    result.print_summary()
    out = capsys.readouterr().out
    assert "Catalog" in out
    assert "Synthetic padding" in out


def test_duration_requires_both_timestamps():
    assert SearchResult(preferences=make_preferences()).duration_seconds is None
