"""Filesystem helpers."""

from .fs import read_text, write_text

__all__ = ["read_text", "write_text"]
