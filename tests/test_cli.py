"""Tests for the typer CLI."""

import json

from typer.testing import CliRunner

from neighborfit.cli.main import app, load_preferences

runner = CliRunner()


def test_cities_lists_supported_cities():
    result = runner.invoke(app, ["cities"])
    assert result.exit_code == 0
    assert "Supported Cities" in result.output
    assert "Kanpur" in result.output


def test_offline_search_with_details():
    result = runner.invoke(app, ["search", "Pune", "--offline", "--seed", "3", "--details", "1"])
    assert result.exit_code == 0, result.output
    assert "Neighborhood Matches" in result.output
    assert "Neighborhood Details" in result.output


def test_unknown_city_exits_with_error():
    result = runner.invoke(app, ["search", "Atlantis", "--offline"])
    assert result.exit_code == 1
    assert "Invalid preferences" in result.output


def test_missing_city_exits_with_error():
    result = runner.invoke(app, ["search", "--offline"])
    assert result.exit_code == 1


def test_missing_preferences_file(tmp_path):
    result = runner.invoke(
        app, ["search", "--offline", "--preferences", str(tmp_path / "nope.json")]
    )
    assert result.exit_code == 1
    assert "not found" in result.output


def test_invalid_details_rank():
    result = runner.invoke(app, ["search", "Delhi", "--offline", "--seed", "1", "--details", "99"])
    assert result.exit_code == 1
    assert "No match at rank 99" in result.output


def test_preferences_file_and_export(tmp_path):
    prefs = tmp_path / "prefs.json"
    prefs.write_text(
        json.dumps(
            {
                "workLocation": "Chennai",
                "budget": 30000,
                "amenityPreferences": {"schools": 10},
                "commuteTolerance": 60,
            }
        )
    )
    out_dir = tmp_path / "output"
    result = runner.invoke(
        app,
        [
            "search",
            "--preferences",
            str(prefs),
            "--offline",
            "--seed",
            "4",
            "--export",
            "--output-dir",
            str(out_dir),
        ],
    )
    assert result.exit_code == 0, result.output
    assert (out_dir / "neighborhood_matches.xlsx").exists()


def test_load_preferences_overrides_file_values(tmp_path):
    prefs = tmp_path / "prefs.json"
    prefs.write_text(json.dumps({"workLocation": "Chennai", "budget": 30000}))
    preferences = load_preferences(prefs, {"work_location": "mumbai", "budget": None})
    assert preferences.work_location == "Mumbai"
    assert preferences.budget == 30000


def test_partial_preferences_file_takes_city_from_argument(tmp_path):
    prefs = tmp_path / "prefs.json"
    prefs.write_text(json.dumps({"budget": 30000, "commuteTolerance": 60}))
    preferences = load_preferences(prefs, {"work_location": "Pune"})
    assert preferences.work_location == "Pune"
    assert preferences.budget == 30000
    assert preferences.commute_tolerance == 60


def test_city_argument_replaces_invalid_city_in_file(tmp_path):
    prefs = tmp_path / "prefs.json"
    prefs.write_text(json.dumps({"workLocation": "Atlantis", "familySize": 2}))
    preferences = load_preferences(prefs, {"work_location": "delhi", "family_size": None})
    assert preferences.work_location == "Delhi"
    assert preferences.family_size == 2


def test_search_with_partial_preferences_file(tmp_path):
    prefs = tmp_path / "prefs.json"
    prefs.write_text(json.dumps({"budget": 30000, "amenityPreferences": {"gym": 10}}))
    result = runner.invoke(
        app, ["search", "Pune", "--preferences", str(prefs), "--offline", "--seed", "2"]
    )
    assert result.exit_code == 0, result.output
    assert "Neighborhood Matches" in result.output


def test_preferences_file_must_be_an_object(tmp_path):
    prefs = tmp_path / "prefs.json"
    prefs.write_text(json.dumps(["Pune"]))
    result = runner.invoke(app, ["search", "Pune", "--preferences", str(prefs), "--offline"])
    assert result.exit_code == 1
    assert "Invalid preferences" in result.output


def test_load_preferences_without_file():
    preferences = load_preferences(None, {"work_location": "Delhi", "family_size": 4})
    assert preferences.work_location == "Delhi"
    assert preferences.family_size == 4
