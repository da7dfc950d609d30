from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from ..run_id import make_run_id

OutputFormat = Literal["text", "json"]
NetworkMode = Literal["allow", "forbid"]

USERSTYLES_URL = "https://raw.githubusercontent.com/catppuccin/userstyles/refs/heads/main/scripts/userstyles.yml"

DEFAULT_PORTS = "resources/ports.yml"
DEFAULT_CATEGORIES = "resources/categories.yml"
DEFAULT_README = "README.md"


def _resolve(root: Path, raw: str) -> Path:
    path = Path(raw)
    return path if path.is_absolute() else root / path


@dataclass(frozen=True)
class RunContext:
    run_id: str
    repo_root: Path
    ports_path: Path
    categories_path: Path
    readme_path: Path
    userstyles_url: str
    userstyles_file: Path | None
    output_format: OutputFormat
    network_mode: NetworkMode
    quiet: bool

    @property
    def no_network(self) -> bool:
        return self.network_mode == "forbid"

    @classmethod
    def from_args(
        cls,
        repo_root: str | None = None,
        run_id: str | None = None,
        ports: str | None = None,
        categories: str | None = None,
        readme: str | None = None,
        userstyles_url: str | None = None,
        userstyles_file: str | None = None,
        output_format: OutputFormat = "text",
        network_mode: NetworkMode = "allow",
        quiet: bool = False,
    ) -> "RunContext":
        root = Path(repo_root).resolve() if repo_root else Path.cwd().resolve()
        resolved_run_id = run_id or os.environ.get("RUN_ID") or make_run_id(root)
        return cls(
            run_id=resolved_run_id,
            repo_root=root,
            ports_path=_resolve(root, ports or DEFAULT_PORTS),
            categories_path=_resolve(root, categories or DEFAULT_CATEGORIES),
            readme_path=_resolve(root, readme or DEFAULT_README),
            userstyles_url=userstyles_url or USERSTYLES_URL,
            userstyles_file=_resolve(root, userstyles_file) if userstyles_file else None,
            output_format=output_format,
            network_mode=network_mode,
            quiet=quiet,
        )
