"""
Command line entry point.
"""

import logging
import sys

import click

from .exceptions import InputStreamError
from .interpreter import Interpreter

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.argument("input_file", metavar="INPUT", type=click.File("rb"), default="-")
@click.option(
    "--log-level",
    envvar="TXDB_LOG_LEVEL",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level for diagnostics on stderr. Can also be set via TXDB_LOG_LEVEL env var.",
)
@click.pass_context
def main(ctx, input_file, log_level):
    """Run database commands read from INPUT (stdin by default), one per line."""
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, log_level.upper()),
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )

    interpreter = Interpreter()
    try:
        exit_code = interpreter.run(input_file, click.echo)
    except InputStreamError as e:
        logger.debug("Aborting: %s", e)
        click.echo(str(e), err=True)
        ctx.exit(1)
    ctx.exit(exit_code)
