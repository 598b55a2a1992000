"""Shared fixtures: a small package list in the catalog's wire format."""

import copy

import pytest

from package_search.models.package import Catalog

CATALOG_DATA = {
    "version": 1.0,
    "packages": [
        {
            "title": "Property Manager",
            "name": "property",
            "version": "0.5.0",
            "url": "https://github.com/example/cli-property",
            "issues": "https://github.com/example/cli-property/issues",
            "commands": [
                {
                    "name": "property",
                    "aliases": ["prop"],
                    "description": "Manage property configurations",
                },
                {"name": "list", "aliases": [], "description": "List available items"},
            ],
            "requirements": {"node": "7.0.0"},
        },
        {
            "title": "Fast Purge",
            "name": "purge",
            "version": "1.0.1",
            "url": "https://github.com/example/cli-purge",
            "issues": "https://github.com/example/cli-purge/issues",
            "commands": [
                {
                    "name": "purge",
                    "aliases": ["invalidate", "delete"],
                    "description": "Purge content from the edge cache",
                },
            ],
            "requirements": {"go": "1.8.0"},
        },
        {
            "title": "Edge DNS",
            "name": "dns",
            "version": "0.2.0",
            "url": "https://github.com/example/cli-dns",
            "issues": "https://github.com/example/cli-dns/issues",
            "commands": [
                {"name": "dns", "aliases": [], "description": "Manage DNS zones and records"},
            ],
            "requirements": {"python": "3.6.0"},
        },
    ],
}


@pytest.fixture
def catalog_data():
    return copy.deepcopy(CATALOG_DATA)


@pytest.fixture
def catalog(catalog_data):
    return Catalog.from_dict(catalog_data)
