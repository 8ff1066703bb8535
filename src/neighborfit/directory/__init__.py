"""External place directory used to seed neighborhood catalogs."""

from neighborfit.directory.nominatim import DirectoryHit, NominatimDirectory

__all__ = ["DirectoryHit", "NominatimDirectory"]
