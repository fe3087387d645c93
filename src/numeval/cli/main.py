"""numeval CLI entry point."""

import logging
import os

import click


@click.group()
@click.option(
    "--log-level",
    default=lambda: os.environ.get("NUMEVAL_LOG_LEVEL", "WARNING"),
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity (default: NUMEVAL_LOG_LEVEL or WARNING).",
)
def cli(log_level: str):
    """numeval: numeric expression evaluator CLI."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
from numeval.cli.expr_cmd import eval_cmd, functions, tree  # noqa: E402

cli.add_command(eval_cmd)
cli.add_command(functions)
cli.add_command(tree)
