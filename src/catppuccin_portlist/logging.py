from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .core.context import RunContext

_ALWAYS = {"warn", "error"}


def log_event(ctx: RunContext, level: str, component: str, action: str, **fields: object) -> None:
    if ctx.quiet and level not in _ALWAYS:
        return
    payload: dict[str, object] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "level": level,
        "component": component,
        "action": action,
        "run_id": ctx.run_id,
    }
    payload.update(fields)
    if ctx.output_format == "json":
        print(json.dumps(payload, sort_keys=True, default=str), flush=True)
    else:
        extras = " ".join(f"{k}={v}" for k, v in sorted(fields.items()))
        print(f"[{level}] {component}:{action} run_id={ctx.run_id} {extras}".strip(), flush=True)
