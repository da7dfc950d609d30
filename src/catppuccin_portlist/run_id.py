from __future__ import annotations

import subprocess
from datetime import datetime, timezone
from pathlib import Path


def make_run_id(repo_root: Path, prefix: str = "portlist") -> str:
    ts = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
    sha = "unknown"
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"],
            cwd=repo_root,
            text=True,
            stderr=subprocess.DEVNULL,
        ).strip()
        if out:
            sha = out
    except (OSError, subprocess.CalledProcessError):
        pass
    return f"{prefix}-{ts}-{sha}"
