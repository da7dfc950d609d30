from __future__ import annotations

from ..core.context import RunContext
from ..core.network import fetch_text
from ..core.schema_utils import validate_yaml
from ..errors import ConfigurationError, NetworkError
from ..io.fs import read_text
from ..logging import log_event
from .models import Category, Showcase, Sources

PORTS_SCHEMA = "ports.schema.json"
CATEGORIES_SCHEMA = "categories.schema.json"
USERSTYLES_SCHEMA = "userstyles.schema.json"


def fetch_userstyles(ctx: RunContext) -> str:
    if ctx.userstyles_file is not None:
        return read_text(ctx.userstyles_file)
    if ctx.no_network:
        raise NetworkError(f"network access is forbidden; cannot fetch {ctx.userstyles_url}")
    return fetch_text(ctx.userstyles_url)


def load_sources(ctx: RunContext) -> Sources:
    ports_yaml = read_text(ctx.ports_path)
    categories_yaml = read_text(ctx.categories_path)
    userstyles_yaml = fetch_userstyles(ctx)

    ports_data = validate_yaml(ports_yaml, PORTS_SCHEMA, ctx.ports_path.name, (CATEGORIES_SCHEMA,))
    categories_data = validate_yaml(categories_yaml, CATEGORIES_SCHEMA, ctx.categories_path.name)
    userstyles_data = validate_yaml(userstyles_yaml, USERSTYLES_SCHEMA, "userstyles.yml", (CATEGORIES_SCHEMA,))

    if not ports_data or not ports_data.get("ports"):
        raise ConfigurationError(f"{ctx.ports_path.name} has no ports")
    if not categories_data:
        raise ConfigurationError(f"{ctx.categories_path.name} has no categories")
    if not userstyles_data or not userstyles_data.get("userstyles"):
        raise ConfigurationError("userstyles.yml has no userstyles")

    showcases = ports_data.get("showcases")
    sources = Sources(
        ports=ports_data["ports"],
        showcases=tuple(Showcase.from_dict(s) for s in showcases) if showcases is not None else None,
        categories=tuple(Category.from_dict(c) for c in categories_data),
        userstyles=userstyles_data["userstyles"],
    )
    log_event(
        ctx,
        "info",
        "loader",
        "sources-loaded",
        ports=len(sources.ports),
        userstyles=len(sources.userstyles),
        categories=len(sources.categories),
    )
    return sources
