"""Shared helpers for CLI commands"""

import logging
from typing import Dict, Iterable

import click
from rich.console import Console
from rich.logging import RichHandler


def setup_logging(debug: bool = False) -> None:
    """
    Configure logging for the CLI

    Log records go to stderr so they never mix with the prompt itself.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def parse_assignments(values: Iterable[str], option: str) -> Dict[str, str]:
    """Turn ``name=value`` pairs from a repeated option into a dict"""
    assignments = {}
    for item in values:
        name, sep, value = item.partition('=')
        if not sep or not name:
            raise click.BadParameter(f"expected name=value, got '{item}'", param_hint=option)
        assignments[name] = value
    return assignments
