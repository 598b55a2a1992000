"""
Example: Search the package catalog from Python.

Usage:
    python examples/search_catalog.py edge dns
"""

import sys

from rich.console import Console

from package_search import fetch_catalog, search_packages
from package_search.core.presenter import print_results


def main():
    keywords = sys.argv[1:] or ["purge"]

    # One blocking fetch per search
    catalog = fetch_catalog()
    results = search_packages(keywords, catalog)

    print_results(results, Console())


if __name__ == "__main__":
    main()
