from __future__ import annotations

import unicodedata
from typing import Any, Callable, Iterable, Mapping

from ..errors import ConfigurationError
from .models import MappedPort, Row

GITHUB_ORG_URL = "https://github.com/catppuccin"
USERSTYLES_TREE_URL = "https://github.com/catppuccin/userstyles/tree/main/styles"

OverwriteHook = Callable[[str], None]


def merge(
    ports: Mapping[str, Mapping[str, Any]],
    userstyles: Mapping[str, Mapping[str, Any]],
    on_overwrite: OverwriteHook | None = None,
) -> dict[str, MappedPort]:
    """Merge both catalogs into one slug namespace, ports first.

    A userstyle sharing a slug with a port replaces it.
    """
    merged: dict[str, MappedPort] = {slug: MappedPort.from_port(slug, raw) for slug, raw in ports.items()}
    for slug, raw in userstyles.items():
        if slug in merged and on_overwrite is not None:
            on_overwrite(slug)
        merged[slug] = MappedPort.from_userstyle(slug, raw)
    return merged


def resolve_url(port: MappedPort) -> str:
    if port.url:
        return port.url
    if port.kind == "port":
        return f"{GITHUB_ORG_URL}/{port.alias or port.slug}"
    return f"{USERSTYLES_TREE_URL}/{port.slug}"


def _base_letters(name: str) -> str:
    decomposed = unicodedata.normalize("NFKD", name.casefold())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def sort_key(row: Row) -> tuple[str, str, str]:
    # Base letters first, then accents, then lowercase ahead of uppercase.
    return (_base_letters(row.name), row.name.casefold(), row.name.swapcase())


def expand(port: MappedPort, url: str) -> list[Row]:
    row = Row.from_port(port, url)
    return [row, *(row.renamed(variant["name"]) for variant in port.supports.values())]


def group(mapped: Mapping[str, MappedPort], known_slugs: Iterable[str]) -> dict[str, list[Row]]:
    known = set(known_slugs)
    buckets: dict[str, list[Row]] = {}
    for slug, port in mapped.items():
        bucket = buckets.setdefault(port.primary_category, [])
        if port.alias and port.alias not in known:
            raise ConfigurationError(f"port `{slug}` points to an alias `{port.alias}` that doesn't exist")
        bucket.extend(expand(port, resolve_url(port)))
    for bucket in buckets.values():
        bucket.sort(key=sort_key)
    return buckets
