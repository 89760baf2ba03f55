import typer

from ..app import app
from ...lib.log import setup_logger

# Import commands
from . import tz, array

__all__ = ['tz', 'array']


@app.callback()
def setup(
        ctx: typer.Context,
        log_level: str = typer.Option(
            "WARNING",
            "--log-level", "-l",
            envvar="UTILKIT_LOG_LEVEL",
            help="Log level (DEBUG, INFO, WARNING, ERROR)",
        ),
):
    """
    utilkit Command Line Interface
    """
    if ctx.resilient_parsing:
        return

    # If no subcommand is provided, show complete help like --help
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)

    setup_logger(log_level)
