"""
Keyword Matcher — Weighted hit scoring over the package catalog.

Every keyword is matched case-insensitively as a substring against the
package name, title and each command's name, aliases and description.
Hits accumulate across fields and keywords into a single package score.
"""

import logging
from collections.abc import Sequence

from package_search.core.errors import InputError
from package_search.models.package import Catalog, Command, Package, ScoreTable

logger = logging.getLogger(__name__)

NAME_HIT = 100
TITLE_HIT = 50
COMMAND_NAME_HIT = 30
COMMAND_ALIAS_HIT = 20
COMMAND_DESCRIPTION_HIT = 1


def validate_keywords(keywords: Sequence[str]) -> list[str]:
    """Return keywords as a list, raising InputError when there are none."""
    if not keywords:
        raise InputError("You must specify one or more keywords")
    return list(keywords)


def score_command(command: Command, keyword: str) -> int:
    """
    Score one command against one lowercased keyword.

    A non-zero result means the command matched.
    """
    hits = 0
    if keyword in command.name.lower():
        hits += COMMAND_NAME_HIT

    for alias in command.aliases:
        if keyword in alias.lower():
            hits += COMMAND_ALIAS_HIT

    if keyword in command.description.lower():
        hits += COMMAND_DESCRIPTION_HIT

    return hits


def score_package(package: Package, keywords: Sequence[str]) -> int:
    """
    Score a package against all keywords and narrow its commands.

    A command is kept when it matched under any keyword. The package's
    command list is replaced in place, keeping catalog order.
    """
    hits = 0
    matched: set[int] = set()

    for keyword in keywords:
        keyword = keyword.lower()
        if keyword in package.name.lower():
            hits += NAME_HIT

        if keyword in package.title.lower():
            hits += TITLE_HIT

        for index, command in enumerate(package.commands):
            command_hits = score_command(command, keyword)
            if command_hits:
                hits += command_hits
                matched.add(index)

    package.commands = [cmd for index, cmd in enumerate(package.commands) if index in matched]
    return hits


def search_packages(keywords: Sequence[str], catalog: Catalog) -> ScoreTable:
    """
    Score every catalog package and bucket the matches by score.

    Raises:
        InputError: If no keywords were given.
    """
    keywords = validate_keywords(keywords)
    results: ScoreTable = {}

    for package in catalog.packages:
        hits = score_package(package, keywords)
        if hits > 0:
            logger.debug(f"{package.name}: {hits} hits, {len(package.commands)} matching commands")
            results.setdefault(hits, {})[package.name] = package

    logger.debug(f"{sum(len(tier) for tier in results.values())} packages matched {keywords}")
    return results
