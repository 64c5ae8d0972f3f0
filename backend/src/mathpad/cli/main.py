"""mathpad CLI entry point."""

import click

from mathpad.config import configure_logging


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level.",
)
def cli(log_level: str):
    """mathpad: expression evaluator CLI."""
    configure_logging(log_level)


# Register subcommands
from mathpad.cli.eval_cmd import eval_cmd, functions  # noqa: E402
from mathpad.cli.serve_cmd import serve  # noqa: E402

cli.add_command(eval_cmd)
cli.add_command(functions)
cli.add_command(serve)
