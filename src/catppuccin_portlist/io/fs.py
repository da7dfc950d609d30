from __future__ import annotations

from pathlib import Path

from ..errors import LoadError


def read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"cannot read {path}: {exc}") from exc


def write_text(path: Path, text: str) -> None:
    path.write_text(text, encoding="utf-8")
