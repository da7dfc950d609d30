from __future__ import annotations

import argparse
import json
import os
import sys

from . import __version__
from .core.context import RunContext
from .errors import ScriptError
from .exit_codes import ERR_INTERNAL
from .portlist.command import configure_generate_parser, run_generate_command

TOOL = "catppuccin-portlist"

COMMANDS = {
    "generate": run_generate_command,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=TOOL)
    p.add_argument("--version", action="version", version=f"{TOOL} {__version__}")
    p.add_argument("--run-id", help="run identifier for log events")
    p.add_argument("--format", choices=["text", "json"], default=None, help="log and error output format")
    p.add_argument("--network", choices=["allow", "forbid"], default="allow", help="network access mode")
    p.add_argument("--quiet", action="store_true", help="only emit warnings and errors")
    sub = p.add_subparsers(dest="cmd", required=True)
    configure_generate_parser(sub)
    return p


def _render_error(as_json: bool, message: str, code: int, kind: str) -> str:
    if as_json:
        return json.dumps(
            {
                "schema_version": 1,
                "tool": TOOL,
                "status": "fail",
                "error": {"message": message, "code": code, "kind": kind},
            },
            sort_keys=True,
        )
    return message


def main(argv: list[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)
    fmt = ns.format or ("json" if "CI" in os.environ else "text")
    try:
        ctx = RunContext.from_args(
            repo_root=ns.repo_root,
            run_id=ns.run_id,
            ports=ns.ports,
            categories=ns.categories,
            readme=ns.readme,
            userstyles_url=ns.userstyles_url,
            userstyles_file=ns.userstyles_file,
            output_format=fmt,
            network_mode=ns.network,
            quiet=ns.quiet,
        )
        return COMMANDS[ns.cmd](ctx, ns)
    except ScriptError as exc:
        print(_render_error(fmt == "json", str(exc), exc.code, exc.kind), file=sys.stderr)
        return exc.code
    except Exception as exc:  # pragma: no cover
        print(_render_error(fmt == "json", f"internal error: {exc}", ERR_INTERNAL, "internal_error"), file=sys.stderr)
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
