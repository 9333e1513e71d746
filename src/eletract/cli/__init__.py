"""Command-line interface for eletract."""

from eletract.cli.main import cli

__all__ = ["cli"]
