"""Shared helpers for running external tools."""

from eletract.lib.process import CommandRunner, resolve_command

__all__ = ["CommandRunner", "resolve_command"]
