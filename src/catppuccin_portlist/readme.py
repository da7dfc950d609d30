"""Marker-delimited section replacement for generated README content.

A section named ``portlist`` is delimited by::

    <!-- AUTOGEN:PORTLIST START -->
    ...
    <!-- AUTOGEN:PORTLIST END -->
"""

from __future__ import annotations

from .errors import SectionNotFoundError

PREAMBLE = "<!-- the following section is auto-generated, do not edit -->"


def markers(section: str) -> tuple[str, str]:
    tag = section.upper()
    return f"<!-- AUTOGEN:{tag} START -->", f"<!-- AUTOGEN:{tag} END -->"


def update_section(document: str, content: str, section: str) -> str:
    start, end = markers(section)
    if document.count(start) != 1 or document.count(end) != 1:
        raise SectionNotFoundError(f"README section `{section}` needs exactly one `{start}` and one `{end}` marker")
    before, rest = document.split(start, 1)
    if end not in rest:
        raise SectionNotFoundError(f"README section `{section}`: `{end}` appears before `{start}`")
    _, after = rest.split(end, 1)
    return f"{before}{start}\n{PREAMBLE}\n{content}\n{end}{after}"
