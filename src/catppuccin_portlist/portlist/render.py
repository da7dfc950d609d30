from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from .models import Category, Row, Showcase


def render_category(category: Category, rows: Sequence[Row]) -> str:
    items = "\n".join(f"- [{row.name}]({row.url})" for row in rows)
    return f"<details open>\n<summary>{category.emoji} {category.name}</summary>\n\n{items}\n\n</details>"


def render_port_list(categories: Iterable[Category], buckets: Mapping[str, Sequence[Row]]) -> str:
    return "\n".join(
        render_category(category, buckets[category.key]) for category in categories if buckets.get(category.key)
    )


def render_showcases(showcases: Sequence[Showcase] | None) -> str | None:
    if not showcases:
        return None
    return "\n".join(f"- [{s.title}]({s.link}) - {s.description}" for s in showcases)
