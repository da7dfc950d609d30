"""Port list generation: load, merge, group, render."""

from .catalog import group, merge, resolve_url
from .command import run_generate
from .render import render_port_list, render_showcases

__all__ = ["group", "merge", "render_port_list", "render_showcases", "resolve_url", "run_generate"]
