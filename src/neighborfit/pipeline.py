"""Search pipeline: preferences -> catalog -> ranked matches -> filters."""

import random
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.table import Table

from neighborfit.catalog.builder import CatalogBuilder, CatalogStats
from neighborfit.directory.nominatim import NominatimDirectory
from neighborfit.matching.engine import filter_matches, rank_neighborhoods
from neighborfit.models.neighborhood import NeighborhoodMatch
from neighborfit.models.preferences import UserPreferences

console = Console()


@dataclass
class SearchResult:
    """Outcome of one search request."""
    preferences: UserPreferences
    matches: list[NeighborhoodMatch] = field(default_factory=list)
    filtered: list[NeighborhoodMatch] = field(default_factory=list)
    catalog: CatalogStats = field(default_factory=CatalogStats)
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    @property
    def duration_seconds(self) -> Optional[float]:
        if self.start_time and self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return None

    def print_summary(self) -> None:
        """Print where the catalog came from and how many matches survived filtering."""
        table = Table(title="Catalog", show_header=True)
        table.add_column("Source", style="cyan")
        table.add_column("Count", justify="right")

        stats = self.catalog
        if stats.fallback:
            table.add_row("[yellow]Generic fallback[/]", str(len(self.matches)))
        else:
            directory = str(stats.directory_hits)
            if stats.directory_failed:
                directory += " [yellow](lookup failed)[/]"
            table.add_row("Directory", directory)
            table.add_row("Well-known areas", str(stats.predefined))
            table.add_row("Duplicates removed", str(stats.duplicates_removed))
            table.add_row("Synthetic padding", str(stats.padded))
            table.add_row("Truncated", str(stats.truncated))
        console.print(table)

        console.print(
            f"Found [bold]{len(self.filtered)}[/] of {len(self.matches)} neighborhoods "
            "based on your preferences."
        )


def run_search(
    preferences: UserPreferences,
    directory: Optional[NominatimDirectory] = None,
    rng: Optional[random.Random] = None,
    min_score: int = 0,
    within_budget: bool = False,
) -> SearchResult:
    """
    Run one search for the preferences' work location.

    1. Build the neighborhood catalog for the city
    2. Score and rank every neighborhood
    3. Apply the score and budget filters
    """
    result = SearchResult(preferences=preferences, start_time=datetime.now())
    city = preferences.work_location

    console.print(f"[bold cyan]Analyzing {city} areas based on your preferences...[/]")
    builder = CatalogBuilder(directory=directory, rng=rng)
    catalog = builder.assemble(city)
    result.catalog = catalog.stats

    result.matches = rank_neighborhoods(preferences, catalog.neighborhoods)
    result.filtered = filter_matches(
        result.matches,
        min_score=min_score,
        within_budget=within_budget,
        budget=preferences.budget,
    )
    result.end_time = datetime.now()
    return result
