"""CLI command: stylecore properties -- list the supported style properties."""

from __future__ import annotations

import json

import click

from stylecore.config import StylecoreConfig
from stylecore.rules import RULE_TYPES


@click.command()
@click.pass_obj
def properties(config: StylecoreConfig) -> None:
    """List every supported property with its value type."""
    if config.output_format == "json":
        rows = [
            {
                "property": rule_type.property_name,
                "rule": rule_type.__name__,
                "domain": rule_type.domain,
                "accepts_global": rule_type.accepts_global,
            }
            for rule_type in RULE_TYPES
        ]
        click.echo(json.dumps(rows, indent=2))
        return

    width = max(len(rule_type.property_name) for rule_type in RULE_TYPES)
    for rule_type in RULE_TYPES:
        domain = rule_type.domain
        if rule_type.accepts_global:
            domain = f"Value[{domain}]"
        click.echo(f"{rule_type.property_name.ljust(width)}  {domain}")
