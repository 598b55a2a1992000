"""
Catalog Fetcher — Downloads the remote package list.

Performs a single blocking GET against the catalog endpoint and decodes
the body into a Catalog. There is no retry, caching or timeout: a failed
fetch ends the search.
"""

import logging

import httpx

from package_search.core.errors import FetchError
from package_search.models.package import Catalog

logger = logging.getLogger(__name__)

CATALOG_URL = "https://developer.akamai.com/cli/package-list"


def fetch_catalog(url: str = CATALOG_URL, client: httpx.Client | None = None) -> Catalog:
    """
    Fetch and decode the remote package list.

    Args:
        url: Catalog endpoint returning the package list JSON document.
        client: Optional HTTP client to use. It is left open; a client
            created here is closed before returning.

    Returns:
        The decoded Catalog.

    Raises:
        FetchError: On transport failure, a non-success status, or a body
            that is not a well-formed package list.
    """
    owns_client = client is None
    if owns_client:
        client = httpx.Client(timeout=None, follow_redirects=True)

    logger.debug(f"Fetching package list from {url}")
    try:
        resp = client.get(url)
        resp.raise_for_status()
        catalog = Catalog.from_dict(resp.json())
    except (httpx.HTTPError, ValueError, TypeError, AttributeError) as e:
        logger.debug(f"Package list fetch failed ({type(e).__name__}): {e}")
        raise FetchError(f"Unable to fetch remote Package List ({e})") from e
    finally:
        if owns_client:
            client.close()

    logger.debug(f"Fetched package list v{catalog.version}: {len(catalog.packages)} packages")
    return catalog
