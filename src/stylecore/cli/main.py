"""stylecore CLI entry point: Click group with subcommands."""

import click

from stylecore import __version__
from stylecore.config import OUTPUT_FORMATS, StylecoreConfig, configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="stylecore")
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    help="Logging level for the stylecore logger.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="text",
    show_default=True,
    help="Output format.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, output_format: str) -> None:
    """stylecore - typed model of CSS selectors and style rules."""
    try:
        config = StylecoreConfig(log_level=log_level, output_format=output_format)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--log-level") from exc
    configure_logging(config)
    ctx.obj = config


# Import and register subcommands
from stylecore.cli.properties import properties  # noqa: E402
from stylecore.cli.selector import selector  # noqa: E402

cli.add_command(selector)
cli.add_command(properties)
