"""
Package Search - Keyword search for a package-manager CLI.

Fetches the remote package catalog and ranks installable packages and
their commands against user keywords.
"""

__version__ = "1.0.0"


def __getattr__(name: str):
    """Lazy import for the HTTP and console stack."""
    if name == "fetch_catalog":
        from package_search.core.fetcher import fetch_catalog

        return fetch_catalog
    if name == "search_packages":
        from package_search.core.matcher import search_packages

        return search_packages
    if name == "Catalog":
        from package_search.models.package import Catalog

        return Catalog
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["Catalog", "fetch_catalog", "search_packages", "__version__"]
