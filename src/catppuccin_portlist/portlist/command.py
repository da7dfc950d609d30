from __future__ import annotations

import argparse
from dataclasses import dataclass

from ..core.context import RunContext
from ..errors import ScriptError
from ..exit_codes import ERR_DRIFT, OK
from ..io.fs import read_text, write_text
from ..logging import log_event
from ..readme import update_section
from .catalog import group, merge
from .loader import load_sources
from .models import Category, Row, Showcase
from .render import render_port_list, render_showcases


@dataclass(frozen=True)
class Prepared:
    categories: tuple[Category, ...]
    buckets: dict[str, list[Row]]
    showcases: tuple[Showcase, ...] | None


def prepare(ctx: RunContext) -> Prepared:
    """Load, validate, merge and group. Every failure here is fatal."""
    sources = load_sources(ctx)

    def _overwritten(slug: str) -> None:
        log_event(ctx, "warn", "catalog", "slug-overwritten", slug=slug, by="userstyle")

    mapped = merge(sources.ports, sources.userstyles, on_overwrite=_overwritten)
    buckets = group(mapped, mapped.keys())
    log_event(ctx, "info", "catalog", "grouped", entries=len(mapped), buckets=len(buckets))
    return Prepared(categories=sources.categories, buckets=buckets, showcases=sources.showcases)


def splice(ctx: RunContext, document: str, prepared: Prepared) -> tuple[str, bool]:
    """Apply both sections; returns the best-effort document and whether every splice succeeded."""
    port_content = render_port_list(prepared.categories, prepared.buckets)
    showcase_content = render_showcases(prepared.showcases)
    try:
        document = update_section(document, port_content, "portlist")
        if showcase_content:
            document = update_section(document, showcase_content, "showcase")
    except ScriptError as exc:
        log_event(ctx, "error", "readme", "update-failed", path=ctx.readme_path, error=str(exc))
        return document, False
    return document, True


def run_generate(ctx: RunContext, check: bool = False) -> int:
    prepared = prepare(ctx)
    original = read_text(ctx.readme_path)
    if check:
        updated, complete = splice(ctx, original, prepared)
        if not complete or updated != original:
            log_event(ctx, "error", "readme", "drift", path=ctx.readme_path)
            return ERR_DRIFT
        log_event(ctx, "info", "readme", "up-to-date", path=ctx.readme_path)
        return OK
    document = original
    try:
        document, _ = splice(ctx, original, prepared)
    finally:
        write_text(ctx.readme_path, document)
        log_event(ctx, "info", "readme", "written", path=ctx.readme_path, changed=document != original)
    return OK


def run_generate_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    return run_generate(ctx, check=ns.check)


def configure_generate_parser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    p = sub.add_parser("generate", help="regenerate the README port list and showcase sections")
    p.add_argument("--repo-root", help="repository root (defaults to the current directory)")
    p.add_argument("--ports", help="ports catalog path, relative to the repository root")
    p.add_argument("--categories", help="categories catalog path, relative to the repository root")
    p.add_argument("--readme", help="README path, relative to the repository root")
    p.add_argument("--userstyles-url", help="override the remote userstyles catalog URL")
    p.add_argument("--userstyles-file", help="read the userstyles catalog from a local file instead of fetching it")
    p.add_argument("--check", action="store_true", help="fail if the README is out of date; never writes")
