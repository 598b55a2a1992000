"""
Catalog Model — Remote CLI package catalog.

Defines the in-memory form of the JSON package list served by the
catalog endpoint: a versioned list of packages, each exposing commands.
"""

from dataclasses import asdict, dataclass, field


def _text(data: dict, key: str) -> str:
    """String field, with missing keys and JSON null decoded as empty."""
    return data.get(key) or ""


@dataclass
class Command:
    """One CLI subcommand offered by a package."""

    name: str
    aliases: list[str] = field(default_factory=list)
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Command":
        """
        Raises:
            TypeError: If ``aliases`` is present but not a list.
        """
        aliases = data.get("aliases") or []
        if not isinstance(aliases, list):
            raise TypeError(f"'aliases' must be a list, got {type(aliases).__name__}")

        return cls(
            name=_text(data, "name"),
            aliases=[alias for alias in aliases if alias is not None],
            description=_text(data, "description"),
        )


@dataclass
class Requirements:
    """Per-language runtime requirements (version constraints)."""

    go: str = ""
    php: str = ""
    node: str = ""
    ruby: str = ""
    python: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Requirements":
        return cls(
            go=_text(data, "go"),
            php=_text(data, "php"),
            node=_text(data, "node"),
            ruby=_text(data, "ruby"),
            python=_text(data, "python"),
        )


@dataclass
class Package:
    """
    One installable package listed in the catalog.

    ``commands`` is narrowed in place by the matcher to the commands that
    matched a search, so a Package must not be reused across searches.
    """

    title: str
    name: str
    version: str = ""
    url: str = ""
    issues: str = ""
    commands: list[Command] = field(default_factory=list)
    requirements: Requirements = field(default_factory=Requirements)

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Package":
        """Deserialize from a catalog package entry."""
        return cls(
            title=_text(data, "title"),
            name=_text(data, "name"),
            version=_text(data, "version"),
            url=_text(data, "url"),
            issues=_text(data, "issues"),
            commands=[Command.from_dict(cmd) for cmd in data.get("commands") or []],
            requirements=Requirements.from_dict(data.get("requirements") or {}),
        )


@dataclass
class Catalog:
    """The package list as downloaded from the catalog endpoint."""

    version: float = 0
    packages: list[Package] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Catalog":
        """
        Build a Catalog from the decoded JSON document.

        Raises:
            TypeError: If the document is not an object or its packages
                are not a list of objects.
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")

        packages = data.get("packages") or []
        if not isinstance(packages, list) or not all(isinstance(p, dict) for p in packages):
            raise TypeError("'packages' must be a list of objects")

        return cls(
            version=data.get("version") or 0,
            packages=[Package.from_dict(p) for p in packages],
        )


# score -> package name -> package
ScoreTable = dict[int, dict[str, Package]]
