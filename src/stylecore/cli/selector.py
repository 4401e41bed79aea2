"""CLI command: stylecore selector -- display a parsed selector chain."""

from __future__ import annotations

import dataclasses
import json
import sys

import click

from stylecore.config import StylecoreConfig
from stylecore.errors import SelectorParseError
from stylecore.selector import parse_selector


@click.command()
@click.argument("text")
@click.pass_obj
def selector(config: StylecoreConfig, text: str) -> None:
    """Parse a selector string and display its compound levels.

    The targeted element is listed first, followed by each ancestor
    requirement.
    """
    try:
        parsed = parse_selector(text)
    except SelectorParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    if config.output_format == "json":
        click.echo(json.dumps(dataclasses.asdict(parsed), indent=2))
        return

    click.echo(f"Levels: {parsed.depth}")
    for index, level in enumerate(parsed.chain()):
        role = "target" if index == 0 else f"ancestor {index}"
        parts = [f"  [{role}]"]
        parts.append("ids=" + ",".join(level.ids) if level.ids else "ids=-")
        parts.append("classes=" + ",".join(level.classes) if level.classes else "classes=-")
        click.echo("  ".join(parts))
