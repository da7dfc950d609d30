from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Literal, Mapping

PortKind = Literal["port", "userstyle"]

# Keys consumed into typed fields; everything else a schema admits lands in `extra`.
_ENTRY_KEYS = {"name", "categories", "url", "alias", "supports", "platform", "readme"}


@dataclass(frozen=True)
class Category:
    key: str
    name: str
    emoji: str
    description: str | None = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Category":
        return cls(key=raw["key"], name=raw["name"], emoji=raw["emoji"], description=raw.get("description"))


@dataclass(frozen=True)
class Showcase:
    title: str
    link: str
    description: str

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Showcase":
        return cls(title=raw["title"], link=raw["link"], description=raw["description"])


@dataclass(frozen=True)
class MappedPort:
    """A port or a userstyle, tagged with the catalog it came from.

    Userstyles never carry an ``alias``; ``from_userstyle`` enforces that.
    """

    slug: str
    kind: PortKind
    name: str
    categories: tuple[str, ...]
    url: str | None = None
    alias: str | None = None
    supports: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    platform: Any = None
    readme: Any = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    @property
    def primary_category(self) -> str:
        return self.categories[0]

    @classmethod
    def from_port(cls, slug: str, raw: Mapping[str, Any]) -> "MappedPort":
        return cls._build(slug, "port", raw, alias=raw.get("alias"))

    @classmethod
    def from_userstyle(cls, slug: str, raw: Mapping[str, Any]) -> "MappedPort":
        return cls._build(slug, "userstyle", raw, alias=None)

    @classmethod
    def _build(cls, slug: str, kind: PortKind, raw: Mapping[str, Any], alias: str | None) -> "MappedPort":
        return cls(
            slug=slug,
            kind=kind,
            name=raw["name"],
            categories=tuple(raw["categories"]),
            url=raw.get("url"),
            alias=alias,
            supports=dict(raw.get("supports") or {}),
            platform=raw.get("platform"),
            readme=raw.get("readme"),
            extra={k: v for k, v in raw.items() if k not in _ENTRY_KEYS},
        )


@dataclass(frozen=True)
class Row:
    """One rendered list item. ``readme`` and ``platform`` are not carried."""

    slug: str
    kind: PortKind
    name: str
    url: str
    categories: tuple[str, ...]
    alias: str | None = None
    supports: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    extra: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_port(cls, port: MappedPort, url: str) -> "Row":
        return cls(
            slug=port.slug,
            kind=port.kind,
            name=port.name,
            url=url,
            categories=port.categories,
            alias=port.alias,
            supports=port.supports,
            extra=port.extra,
        )

    def renamed(self, name: str) -> "Row":
        return replace(self, name=name)


@dataclass(frozen=True)
class Sources:
    ports: Mapping[str, Mapping[str, Any]]
    showcases: tuple[Showcase, ...] | None
    categories: tuple[Category, ...]
    userstyles: Mapping[str, Mapping[str, Any]]
