"""Tests for the Excel export."""

from openpyxl import load_workbook

from neighborfit.export.excel import export_to_excel, match_to_row, matches_to_dataframe
from neighborfit.matching.engine import rank_neighborhoods

from conftest import make_neighborhood, make_preferences


def ranked(preferences):
    return rank_neighborhoods(
        preferences,
        [
            make_neighborhood(name="Saket", rent=15000),
            make_neighborhood(name="Dwarka", rent=40000),
        ],
    )


def test_row_contents():
    preferences = make_preferences(transport_mode="car")
    match = ranked(preferences)[0]
    row = match_to_row(1, match, preferences)
    assert row["rank"] == 1
    assert row["name"] == "Saket"
    assert row["score"] == match.score
    assert row["budget_score"] == 1.0
    assert isinstance(row["estimated_commute_min"], int)
    assert row["distance_km"] >= 0


def test_row_without_preferences_has_no_estimate():
    match = ranked(make_preferences())[0]
    assert match_to_row(1, match)["estimated_commute_min"] is None


def test_dataframe_columns_and_order():
    df = matches_to_dataframe(ranked(make_preferences()))
    assert list(df["name"]) == ["Saket", "Dwarka"]
    assert list(df["rank"]) == [1, 2]
    assert df.columns[0] == "rank"


def test_export_writes_workbook(tmp_path):
    preferences = make_preferences()
    path = export_to_excel(ranked(preferences), tmp_path / "out", preferences=preferences)
    assert path == tmp_path / "out" / "neighborhood_matches.xlsx"
    assert path.exists()

    ws = load_workbook(path).active
    assert ws.title == "Neighborhood Matches"
    assert ws["A1"].value == "Rank"
    assert ws["B1"].value == "Neighborhood"
    assert ws["B2"].value == "Saket"
    assert ws.max_row == 3
    assert ws.freeze_panes == "C2"
    assert ws.auto_filter.ref == "A1:R3"


def test_export_custom_filename(tmp_path):
    path = export_to_excel(ranked(make_preferences()), tmp_path, filename="delhi.xlsx")
    assert path.name == "delhi.xlsx"
    # No preferences: the estimate column is left empty
    ws = load_workbook(path).active
    assert ws["I2"].value is None


def test_score_bands_and_number_formats(tmp_path):
    preferences = make_preferences()
    matches = ranked(preferences)
    # Saket: every sub-score maxed except demographics; Dwarka: rent 1.6x budget
    assert [m.score for m in matches] == [95, 77]

    path = export_to_excel(matches, tmp_path, preferences=preferences)
    ws = load_workbook(path).active
    assert ws["E1"].value == "Match Score"
    assert ws["E2"].fill.start_color.rgb.endswith("C6EFCE")
    assert ws["E3"].fill.start_color.rgb.endswith("FFEB9C")
    assert ws["F2"].number_format == "#,##0"
    assert ws["M2"].number_format == "0.00"
    assert ws["P2"].alignment.wrap_text
    assert not ws["B2"].alignment.wrap_text
    assert ws.column_dimensions["P"].width == 48
