"""
Result Presenter — Ranked, colorized search output.
"""

from rich.console import Console
from rich.text import Text

from package_search.models.package import Package, ScoreTable


def format_aliases(aliases: list[str]) -> str:
    """Render a command's aliases as shown after its name."""
    if len(aliases) == 1:
        return f"(alias: {aliases[0]})"
    if len(aliases) > 1:
        return f"(aliases: {', '.join(aliases)})"
    return ""


def rank_results(results: ScoreTable) -> list[tuple[int, Package]]:
    """Order matches by descending score, then by package name."""
    return [
        (hits, results[hits][name])
        for hits in sorted(results, reverse=True)
        for name in sorted(results[hits])
    ]


def count_results(results: ScoreTable) -> int:
    """Number of distinct matching packages."""
    return len({name for tier in results.values() for name in tier})


def _line(console: Console, text: str = "", style: str = "") -> None:
    console.print(Text(text, style=style), soft_wrap=True, highlight=False)


def print_results(results: ScoreTable, console: Console) -> None:
    """Print the result count followed by each package and its matching commands."""
    _line(console, f"Results Found: {count_results(results)}", "yellow")
    _line(console)
    _line(console)

    for hits, package in rank_results(results):
        _line(console, f"Package: {package.title} ({package.name}) (rank: {hits})", "green")
        _line(console)
        for command in package.commands:
            heading = f"    Command: {command.name} {format_aliases(command.aliases)}"
            _line(console, heading.rstrip(), "bold white")
            _line(console, f"        {command.description}")
            _line(console)
