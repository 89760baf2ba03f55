from typer import Typer, Argument, Option, Exit, secho, colors, echo
from rich.table import Table

from ..app import app, app_state
from ...core import timezones

__all__ = []

app_tz = Typer(help="Timezone abbreviation commands")
app.add_typer(app_tz, name="tz")


def _known(abbreviation: str) -> bool:
    return abbreviation in timezones.TIMEZONES or abbreviation == timezones.LOCAL


@app_tz.command(name="list")
def list_timezones():
    """
    List the known timezone abbreviations and their UTC offsets
    """
    table = Table(title="Timezones")
    table.add_column("Abbreviation", style="cyan", no_wrap=True)
    table.add_column("Offset", no_wrap=True)
    table.add_column("Description")

    for name, tz in zip(timezones.names(), timezones.get_all()):
        table.add_row(name, str(tz), tz.description)

    app_state.console.print(table)


@app_tz.command()
def get(
        abbreviation: str = Argument(..., show_default=False, help="Timezone abbreviation (e.g. CET)"),
        strict: bool = Option(False, '--strict', '-s',
                              help="Fail for unknown abbreviations instead of using local time"),
):
    """
    Show the UTC offset of a timezone abbreviation
    """
    if not _known(abbreviation):
        if strict:
            secho(f"Error: Unknown timezone abbreviation: {abbreviation}", err=True, fg=colors.RED)
            raise Exit(1)
        secho(f"Unknown timezone abbreviation '{abbreviation}', using local time", err=True,
              fg=colors.YELLOW)

    tz = timezones.get(abbreviation)
    echo(f"{tz.name}\t{tz}\t{tz.description}")


@app_tz.command()
def now(
        abbreviation: str = Argument("UTC", help="Timezone abbreviation (e.g. CET)"),
):
    """
    Show the current time in the timezone of an abbreviation
    """
    echo(timezones.now(abbreviation).isoformat(timespec="seconds"))
