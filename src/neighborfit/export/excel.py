"""Export ranked neighborhood matches to Excel format."""

from pathlib import Path
from typing import Optional

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.utils.dataframe import dataframe_to_rows
from openpyxl.worksheet.worksheet import Worksheet
from rich.console import Console

from neighborfit.config.settings import (
    EXCEL_FILENAME,
    FAIR_MATCH_SCORE,
    GOOD_MATCH_SCORE,
    get_city_config,
)
from neighborfit.models.neighborhood import NeighborhoodMatch
from neighborfit.models.preferences import UserPreferences
from neighborfit.utils.geo import distance_km, estimate_commute_minutes

console = Console()


# Column order and display names
COLUMN_ORDER = [
    ("rank", "Rank"),
    ("name", "Neighborhood"),
    ("city", "City"),
    ("state", "State"),
    ("score", "Match Score"),
    ("average_rent", "Rent"),
    ("average_commute", "Commute (min)"),
    ("distance_km", "Distance to Center (km)"),
    ("estimated_commute_min", "Est. Commute by Mode (min)"),
    ("nearest_metro", "Nearest Metro"),
    ("amenity_score", "Amenities"),
    ("lifestyle_score", "Lifestyle"),
    ("budget_score", "Budget"),
    ("commute_score", "Commute"),
    ("demographics_score", "Demographics"),
    ("reasons", "Reasons"),
    ("strengths", "Strengths"),
    ("weaknesses", "Weaknesses"),
]

# Multi-line explanation columns wrap; everything else stays on one line
TEXT_COLUMNS = {"reasons", "strengths", "weaknesses"}

COLUMN_WIDTHS = {
    "rank": 6,
    "name": 28,
    "state": 16,
    "nearest_metro": 24,
    "reasons": 48,
    "strengths": 40,
    "weaknesses": 40,
}
DEFAULT_WIDTH = 13

NUMBER_FORMATS = {
    "average_rent": "#,##0",
    "distance_km": "0.0",
    "amenity_score": "0.00",
    "lifestyle_score": "0.00",
    "budget_score": "0.00",
    "commute_score": "0.00",
    "demographics_score": "0.00",
}

HEADER_FONT = Font(bold=True, color="FFFFFF")
HEADER_FILL = PatternFill(start_color="2563EB", end_color="2563EB", fill_type="solid")
HEADER_BORDER = Border(bottom=Side(style="medium"))

GOOD_SCORE_COLOR = "C6EFCE"
FAIR_SCORE_COLOR = "FFEB9C"
POOR_SCORE_COLOR = "FFC7CE"


def match_to_row(
    rank: int, match: NeighborhoodMatch, preferences: Optional[UserPreferences] = None
) -> dict:
    """Flatten a match into one spreadsheet row."""
    n = match.neighborhood
    city_config = get_city_config(n.city)
    distance = distance_km(n.coordinates, (city_config.lat, city_config.lng))

    row = {
        "rank": rank,
        "name": n.name,
        "city": n.city,
        "state": n.state,
        "score": match.score,
        "average_rent": n.average_rent,
        "average_commute": n.transport.average_commute,
        "distance_km": round(distance, 2),
        "estimated_commute_min": None,
        "nearest_metro": n.transport.nearest_metro,
        "reasons": "\n".join(match.reasons),
        "strengths": "\n".join(match.strengths),
        "weaknesses": "\n".join(match.weaknesses),
    }
    if preferences is not None:
        row["estimated_commute_min"] = estimate_commute_minutes(distance, preferences.transport_mode)
    if match.breakdown is not None:
        b = match.breakdown
        row["amenity_score"] = round(b.amenities, 2)
        row["lifestyle_score"] = round(b.lifestyle, 2)
        row["budget_score"] = round(b.budget, 2)
        row["commute_score"] = round(b.commute, 2)
        row["demographics_score"] = round(b.demographics, 2)
    return row


def matches_to_dataframe(
    matches: list[NeighborhoodMatch], preferences: Optional[UserPreferences] = None
) -> pd.DataFrame:
    """Convert ranked matches to a pandas DataFrame."""
    data = [match_to_row(rank, match, preferences) for rank, match in enumerate(matches, start=1)]
    df = pd.DataFrame(data, columns=[key for key, _ in COLUMN_ORDER])
    return df


def _score_fill(score: int) -> PatternFill:
    if score >= GOOD_MATCH_SCORE:
        color = GOOD_SCORE_COLOR
    elif score >= FAIR_MATCH_SCORE:
        color = FAIR_SCORE_COLOR
    else:
        color = POOR_SCORE_COLOR
    return PatternFill(start_color=color, end_color=color, fill_type="solid")


def style_match_sheet(ws: Worksheet) -> None:
    """Header band, per-column widths and number formats, score color bands."""
    for cell in ws[1]:
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = Alignment(horizontal="center", vertical="center", wrap_text=True)
        cell.border = HEADER_BORDER

    for index, (key, _) in enumerate(COLUMN_ORDER, start=1):
        ws.column_dimensions[get_column_letter(index)].width = COLUMN_WIDTHS.get(key, DEFAULT_WIDTH)
        number_format = NUMBER_FORMATS.get(key)
        alignment = Alignment(vertical="top", wrap_text=key in TEXT_COLUMNS)
        for (cell,) in ws.iter_rows(min_row=2, min_col=index, max_col=index):
            cell.alignment = alignment
            if number_format:
                cell.number_format = number_format
            if key == "score" and cell.value is not None:
                cell.fill = _score_fill(cell.value)

    # Rank and name stay visible while scrolling
    ws.freeze_panes = "C2"
    ws.auto_filter.ref = ws.dimensions


def export_to_excel(
    matches: list[NeighborhoodMatch],
    output_dir: Path,
    filename: str = None,
    preferences: Optional[UserPreferences] = None,
) -> Path:
    """Export ranked matches to an Excel file."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    filename = filename or EXCEL_FILENAME
    filepath = output_dir / filename

    console.print(f"[cyan]Exporting {len(matches)} matches to Excel...[/]")

    df = matches_to_dataframe(matches, preferences)
    df = df.rename(columns={key: display for key, display in COLUMN_ORDER})

    wb = Workbook()
    ws = wb.active
    ws.title = "Neighborhood Matches"

    for r_idx, row in enumerate(dataframe_to_rows(df, index=False, header=True)):
        for c_idx, value in enumerate(row, start=1):
            if isinstance(value, float) and pd.isna(value):
                value = None
            ws.cell(row=r_idx + 1, column=c_idx, value=value)

    style_match_sheet(ws)

    wb.save(filepath)
    console.print(f"[green]Excel file saved: {filepath}[/]")

    return filepath
