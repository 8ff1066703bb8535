"""CLI entry point for NeighborFit."""

import json
import random
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from neighborfit.config.settings import (
    CITIES,
    FAIR_MATCH_SCORE,
    GOOD_MATCH_SCORE,
    OUTPUT_DIR,
    get_city_config,
)
from neighborfit.models.neighborhood import NeighborhoodMatch
from neighborfit.models.preferences import HousingType, TransportMode, UserPreferences
from neighborfit.utils.geo import distance_km, estimate_commute_minutes

app = typer.Typer(
    name="neighborfit", help="Find neighborhoods that match your lifestyle and budget"
)
console = Console()

# How many explanation lines the results table shows per match
TABLE_REASONS = 1
TABLE_STRENGTHS = 2
TABLE_WEAKNESSES = 2


def load_preferences(
    preferences_file: Optional[Path], overrides: dict
) -> UserPreferences:
    """
    Build preferences from an optional JSON document plus CLI overrides.

    The document may be partial (e.g. no workLocation when the city is given
    on the command line). Overrides that are set replace the document's value
    under either its field name or its camelCase alias. Validation happens
    once, on the merged result.
    """
    data = {}
    if preferences_file is not None:
        data = json.loads(preferences_file.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            return UserPreferences.model_validate(data)

    for name, value in overrides.items():
        if value is None:
            continue
        alias = UserPreferences.model_fields[name].alias
        if alias:
            data.pop(alias, None)
        data[name] = value
    return UserPreferences.model_validate(data)


def _format_rent(match: NeighborhoodMatch) -> str:
    currency = get_city_config(match.neighborhood.city).currency
    return f"{currency} {match.neighborhood.average_rent:,}"


def _score_style(score: int) -> str:
    if score >= GOOD_MATCH_SCORE:
        return "green"
    if score >= FAIR_MATCH_SCORE:
        return "yellow"
    return "red"


def print_matches(matches: list[NeighborhoodMatch], limit: Optional[int] = None) -> None:
    """Render ranked matches as a table."""
    table = Table(title="Neighborhood Matches", show_header=True, show_lines=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Neighborhood", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Rent", justify="right")
    table.add_column("Commute", justify="right")
    table.add_column("Why")
    table.add_column("Strengths", style="green")
    table.add_column("Weaknesses", style="red")

    shown = matches[:limit] if limit else matches
    for rank, match in enumerate(shown, start=1):
        n = match.neighborhood
        style = _score_style(match.score)
        table.add_row(
            str(rank),
            n.name,
            f"[{style}]{match.score}%[/]",
            _format_rent(match),
            f"{n.transport.average_commute} min",
            "\n".join(match.reasons[:TABLE_REASONS]),
            "\n".join(match.strengths[:TABLE_STRENGTHS]),
            "\n".join(match.weaknesses[:TABLE_WEAKNESSES]),
        )
    console.print(table)


def print_match_details(match: NeighborhoodMatch, preferences: UserPreferences) -> None:
    """Render the detail view for one match."""
    n = match.neighborhood
    city_config = get_city_config(n.city)
    distance = distance_km(n.coordinates, (city_config.lat, city_config.lng))
    estimate = estimate_commute_minutes(distance, preferences.transport_mode)

    lines = [
        f"[bold]{n.name}[/], {n.city}, {n.state}",
        f"Match score: [{_score_style(match.score)}]{match.score}%[/]",
        f"Average rent: {_format_rent(match)}",
        f"Location: {n.coordinates.lat:.4f}, {n.coordinates.lng:.4f} "
        f"({distance:.1f} km from the city center, ~{estimate} min by "
        f"{preferences.transport_mode.value.replace('_', ' ')})",
        "",
        "[bold]Transport[/]",
        f"  Nearest metro: {n.transport.nearest_metro}"
        + (f" ({n.transport.metro_distance} m)" if n.transport.has_metro else ""),
        f"  Bus stops: {n.transport.bus_stops}",
        f"  Average commute: {n.transport.average_commute} min",
        "",
        "[bold]Demographics[/]",
        f"  Population: {n.demographics.population:,}",
        f"  Average age: {n.demographics.average_age}",
        f"  Families: {n.demographics.family_ratio:.0%}",
    ]
    console.print(Panel("\n".join(lines), title="Neighborhood Details"))

    grid = Table(show_header=True)
    grid.add_column("Amenity", style="cyan")
    grid.add_column("Nearby", justify="right")
    grid.add_column("Lifestyle", style="cyan")
    grid.add_column("Score /10", justify="right")
    amenities = list(n.amenities.items())
    lifestyle = list(n.lifestyle.items())
    for i in range(max(len(amenities), len(lifestyle))):
        a_key, a_value = amenities[i] if i < len(amenities) else ("", "")
        l_key, l_value = lifestyle[i] if i < len(lifestyle) else ("", "")
        grid.add_row(a_key.replace("_", " "), str(a_value), l_key.replace("_", " "), str(l_value))
    console.print(grid)

    if match.breakdown is not None:
        b = match.breakdown
        console.print(
            f"[dim]Amenities {b.amenities:.2f} | Lifestyle {b.lifestyle:.2f} | "
            f"Budget {b.budget:.2f} | Commute {b.commute:.2f} | "
            f"Demographics {b.demographics:.2f}[/]"
        )
    for title, items, style in (
        ("Why this neighborhood", match.reasons, "cyan"),
        ("Strengths", match.strengths, "green"),
        ("Weaknesses", match.weaknesses, "red"),
    ):
        if items:
            console.print(f"\n[bold]{title}:[/]")
            for item in items:
                console.print(f"  [{style}]•[/] {item}")


@app.command()
def search(
    city: Optional[str] = typer.Argument(None, help="City you work in (e.g. Bangalore)"),
    preferences_file: Optional[Path] = typer.Option(
        None, "--preferences", "-p", help="JSON preferences document"
    ),
    budget: Optional[float] = typer.Option(None, "--budget", "-b", help="Monthly rent budget"),
    family_size: Optional[int] = typer.Option(None, "--family-size", help="Household size (5 = 5+)"),
    transport_mode: Optional[TransportMode] = typer.Option(
        None, "--transport", "-t", help="How you commute"
    ),
    housing_type: Optional[HousingType] = typer.Option(None, "--housing", help="Housing type"),
    commute_tolerance: Optional[float] = typer.Option(
        None, "--commute-tolerance", "-c", help="Acceptable commute in minutes"
    ),
    min_score: int = typer.Option(0, "--min-score", help="Hide matches below this score"),
    within_budget: bool = typer.Option(
        False, "--within-budget", help="Hide neighborhoods above your budget"
    ),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Show only the top N rows"),
    details: Optional[int] = typer.Option(
        None, "--details", "-d", help="Show the detail view for the match at this rank"
    ),
    export: bool = typer.Option(False, "--export", "-e", help="Write results to Excel"),
    output_dir: Path = typer.Option(OUTPUT_DIR, "--output-dir", "-o", help="Output directory"),
    offline: bool = typer.Option(
        False, "--offline", help="Skip the Nominatim lookup, use synthetic areas only"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible output"),
):
    """
    Rank neighborhoods in a city against your preferences.

    Examples:
        neighborfit search Bangalore --budget 30000
        neighborfit search -p prefs.json --min-score 70 --within-budget
        neighborfit search Pune --offline --seed 7 --details 1
    """
    from neighborfit.directory.nominatim import NominatimDirectory
    from neighborfit.pipeline import run_search
    from neighborfit.utils.cache import TimedCache

    overrides = {
        "work_location": city,
        "budget": budget,
        "family_size": family_size,
        "transport_mode": transport_mode,
        "housing_type": housing_type,
        "commute_tolerance": commute_tolerance,
    }
    if preferences_file is not None and not preferences_file.exists():
        console.print(f"[red]Preferences file not found: {preferences_file}[/]")
        raise typer.Exit(1)
    try:
        preferences = load_preferences(preferences_file, overrides)
    except (ValidationError, json.JSONDecodeError) as e:
        console.print(f"[red]Invalid preferences:[/]\n{escape(str(e))}")
        raise typer.Exit(1)

    console.print(f"[bold]NeighborFit - {preferences.work_location}[/]")
    console.print(f"   Budget: {preferences.budget:,.0f}")
    console.print(f"   Commute tolerance: {preferences.commute_tolerance:.0f} min")
    if min_score:
        console.print(f"   Filter: score >= {min_score}")
    if within_budget:
        console.print("   Filter: within budget")

    directory = None if offline else NominatimDirectory(cache=TimedCache())
    rng = random.Random(seed) if seed is not None else None

    result = run_search(
        preferences,
        directory=directory,
        rng=rng,
        min_score=min_score,
        within_budget=within_budget,
    )
    result.print_summary()

    if not result.filtered:
        console.print("[yellow]No neighborhoods match your filters. Try adjusting them.[/]")
    else:
        print_matches(result.filtered, limit=limit)

    if details is not None:
        if not 1 <= details <= len(result.filtered):
            console.print(f"[red]No match at rank {details}[/]")
            raise typer.Exit(1)
        print_match_details(result.filtered[details - 1], preferences)

    if export and result.filtered:
        from neighborfit.export.excel import export_to_excel

        path = export_to_excel(result.filtered, output_dir, preferences=preferences)
        console.print(f"  Excel: {path}")


@app.command()
def cities():
    """List supported cities."""
    table = Table(title="Supported Cities", show_header=True)
    table.add_column("City", style="cyan")
    table.add_column("State")
    table.add_column("Base rent", justify="right")
    table.add_column("Tier", justify="right")
    table.add_column("Metro")
    table.add_column("Known areas", justify="right")

    for config in CITIES.values():
        table.add_row(
            config.name,
            config.state,
            f"{config.currency} {config.base_rent:,}",
            f"{config.tier_multiplier:.1f}",
            "yes" if config.has_metro else "no",
            str(len(config.areas)),
        )
    console.print(table)


if __name__ == "__main__":
    app()
