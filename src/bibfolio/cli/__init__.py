"""Command-line interface for bibfolio."""

from bibfolio.cli.main import cli

__all__ = ["cli"]
