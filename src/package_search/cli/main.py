"""
Package Search CLI — Keyword search over the remote CLI package catalog.

Usage:
    package-search search proxy
    package-search search edge dns --verbose
    package-search search purge --catalog-url https://example.com/package-list
"""

import logging
import sys

import click

from package_search import __version__
from package_search.core.fetcher import CATALOG_URL


@click.group()
@click.version_option(version=__version__, prog_name="package-search")
def cli():
    """Package Search — Find installable CLI packages by keyword."""
    pass


@cli.command()
@click.argument("keywords", nargs=-1)
@click.option(
    "--catalog-url",
    envvar="PACKAGE_SEARCH_CATALOG_URL",
    default=CATALOG_URL,
    show_default=True,
    help="Package list to search.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
def search(keywords, catalog_url, verbose):
    """Search for packages and commands matching KEYWORDS."""
    from rich.console import Console

    from package_search.core.errors import SearchError
    from package_search.core.fetcher import fetch_catalog
    from package_search.core.matcher import search_packages, validate_keywords
    from package_search.core.presenter import print_results

    # Configure logging
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)

    try:
        keywords = validate_keywords(keywords)
        catalog = fetch_catalog(catalog_url)
        results = search_packages(keywords, catalog)
    except SearchError as e:
        Console(stderr=True).print(str(e), style="red", markup=False, highlight=False)
        sys.exit(1)

    print_results(results, Console())


if __name__ == "__main__":
    cli()
