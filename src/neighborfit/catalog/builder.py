"""Assemble the per-search neighborhood catalog for a city."""

import random
import re
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Optional

from rich.console import Console

from neighborfit.config.settings import (
    CATALOG_MAX_SIZE,
    CATALOG_MIN_SIZE,
    CATALOG_PAD_TARGET,
    DIRECTORY_MAX_RESULTS,
    DIRECTORY_SEARCH_LIMIT,
    FALLBACK_AREAS,
    SYNTHETIC_AREA_MAX_NUMBER,
    SYNTHETIC_AREA_TYPES,
    get_city_config,
)
from neighborfit.catalog.synthetic import (
    generate_neighborhood,
    neighborhood_from_hit,
    neighborhood_id_for,
)
from neighborfit.directory.nominatim import DirectoryHit, NominatimDirectory
from neighborfit.models.neighborhood import Neighborhood

console = Console()

SYNTHETIC_NAME_SPACE = len(SYNTHETIC_AREA_TYPES) * SYNTHETIC_AREA_MAX_NUMBER


@dataclass
class CatalogStats:
    """Where the entries of one catalog came from."""
    directory_hits: int = 0
    directory_failed: bool = False
    predefined: int = 0
    duplicates_removed: int = 0
    padded: int = 0
    truncated: int = 0
    fallback: bool = False


@dataclass
class CatalogResult:
    neighborhoods: list[Neighborhood] = field(default_factory=list)
    stats: CatalogStats = field(default_factory=CatalogStats)


def dedupe_key(neighborhood: Neighborhood) -> tuple[str, str]:
    """(city, lowercase name with whitespace runs as underscores)."""
    return neighborhood.city, re.sub(r"\s+", "_", neighborhood.name.lower())


def deduplicate(neighborhoods: list[Neighborhood]) -> list[Neighborhood]:
    """Drop repeated (city, name) entries, keeping the first occurrence."""
    seen = set()
    unique = []
    for neighborhood in neighborhoods:
        key = dedupe_key(neighborhood)
        if key in seen:
            continue
        seen.add(key)
        unique.append(neighborhood)
    return unique


def predefined_areas(city: str) -> list[str]:
    """Well-known area names for a city (empty for unlisted cities)."""
    return list(get_city_config(city).areas)


class CatalogBuilder:
    """Builds a deduplicated, size-bounded neighborhood list for a city.

    Never raises: directory failures count as zero hits and any other error
    switches to a fixed list of generic areas.
    """

    def __init__(
        self,
        directory: Optional[NominatimDirectory] = None,
        rng: Optional[random.Random] = None,
        min_size: int = CATALOG_MIN_SIZE,
        pad_target: int = CATALOG_PAD_TARGET,
        max_size: int = CATALOG_MAX_SIZE,
    ):
        self.directory = directory
        self.rng = rng or random.Random()
        self.min_size = min_size
        self.pad_target = max(pad_target, min_size)
        self.max_size = max_size
        if self.pad_target > SYNTHETIC_NAME_SPACE:
            raise ValueError(
                f"pad_target {self.pad_target} exceeds the {SYNTHETIC_NAME_SPACE} "
                "distinct synthetic area names"
            )

    def build(self, city: str) -> list[Neighborhood]:
        return self.assemble(city).neighborhoods

    def assemble(self, city: str) -> CatalogResult:
        """Build the catalog and report where its entries came from."""
        stats = CatalogStats()
        try:
            neighborhoods = self._build(city, stats)
        except Exception as e:
            console.print(f"[red]Error generating neighborhood data for {city}: {e}[/]")
            stats = CatalogStats(fallback=True)
            neighborhoods = self.fallback_neighborhoods(city)
        return CatalogResult(neighborhoods=neighborhoods, stats=stats)

    def _build(self, city: str, stats: CatalogStats) -> list[Neighborhood]:
        # Both lookups are independent; records are generated after the join
        # so the directory entries always come first.
        with ThreadPoolExecutor(max_workers=2) as pool:
            futures = {
                "directory": pool.submit(self._fetch_hits, city, stats),
                "predefined": pool.submit(predefined_areas, city),
            }
            hits = futures["directory"].result()
            areas = futures["predefined"].result()

        stats.directory_hits = len(hits)
        stats.predefined = len(areas)

        candidates = [neighborhood_from_hit(hit, city, self.rng) for hit in hits]
        candidates.extend(generate_neighborhood(city, name, self.rng) for name in areas)

        neighborhoods = deduplicate(candidates)
        stats.duplicates_removed = len(candidates) - len(neighborhoods)

        if len(neighborhoods) < self.min_size:
            extra = self.synthetic_neighborhoods(
                city,
                self.pad_target - len(neighborhoods),
                taken={dedupe_key(n) for n in neighborhoods},
            )
            stats.padded = len(extra)
            neighborhoods.extend(extra)

        if len(neighborhoods) > self.max_size:
            stats.truncated = len(neighborhoods) - self.max_size
            neighborhoods = neighborhoods[: self.max_size]

        return neighborhoods

    def _fetch_hits(self, city: str, stats: CatalogStats) -> list[DirectoryHit]:
        if self.directory is None:
            return []
        try:
            hits = self.directory.search(city, DIRECTORY_SEARCH_LIMIT)
        except Exception as e:
            console.print(f"[yellow]Directory lookup failed for {city}, using synthetic areas: {e}[/]")
            stats.directory_failed = True
            return []
        return list(hits or [])[:DIRECTORY_MAX_RESULTS]

    def synthetic_neighborhoods(
        self, city: str, count: int, taken: Optional[set] = None
    ) -> list[Neighborhood]:
        """Generate `count` areas named like "Sector 12", skipping taken names.

        Raises ValueError when fewer than `count` synthetic names are free.
        """
        taken = set(taken or ())
        city_name = get_city_config(city).name
        free = sum(
            (city_name, re.sub(r"\s+", "_", f"{area_type} {number}".lower())) not in taken
            for area_type in SYNTHETIC_AREA_TYPES
            for number in range(1, SYNTHETIC_AREA_MAX_NUMBER + 1)
        )
        if count > free:
            raise ValueError(f"Only {free} synthetic area names left for {city_name}, need {count}")
        neighborhoods = []
        while len(neighborhoods) < count:
            area_type = self.rng.choice(SYNTHETIC_AREA_TYPES)
            number = self.rng.randint(1, SYNTHETIC_AREA_MAX_NUMBER)
            name = f"{area_type} {number}"
            key = (city_name, re.sub(r"\s+", "_", name.lower()))
            if key in taken:
                continue
            taken.add(key)
            neighborhoods.append(generate_neighborhood(city, name, self.rng))
        return neighborhoods

    def fallback_neighborhoods(self, city: str) -> list[Neighborhood]:
        """Generic areas used when catalog assembly fails."""
        city_name = get_city_config(city).name
        return [
            generate_neighborhood(
                city,
                area,
                self.rng,
                neighborhood_id=neighborhood_id_for(city_name, str(index), prefix="fallback"),
            )
            for index, area in enumerate(FALLBACK_AREAS)
        ]


def build_catalog(
    city: str,
    directory: Optional[NominatimDirectory] = None,
    rng: Optional[random.Random] = None,
) -> list[Neighborhood]:
    """Build the neighborhood catalog for a city."""
    return CatalogBuilder(directory=directory, rng=rng).build(city)
