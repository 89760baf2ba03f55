import json
from typing import Any

from typer import Typer, Argument, Option, Exit, secho, colors, echo

from ..app import app
from ...types.sequence import Sequence

__all__ = []

app_array = Typer(help="Sequence commands, input is a JSON array")
app.add_typer(app_array, name="array")


def parse_sequence(values: str) -> Sequence[Any]:
    """
    Parse a JSON array into a sequence, exit with an error if it is not one
    """
    try:
        items = json.loads(values)
    except json.JSONDecodeError as e:
        secho(f"Error: Invalid JSON: {e}", err=True, fg=colors.RED)
        raise Exit(1)
    if not isinstance(items, list):
        secho("Error: Input must be a JSON array", err=True, fg=colors.RED)
        raise Exit(1)
    return Sequence(items)


@app_array.command()
def flat(
        values: str = Argument(..., show_default=False, help="JSON array, e.g. '[1, [2, [3]]]'"),
        depth: int = Option(1, '--depth', '-d', min=0, help="Number of nesting levels to remove"),
):
    """
    Flatten nested arrays
    """
    echo(json.dumps(parse_sequence(values).flat(depth).values()))


@app_array.command()
def join(
        values: str = Argument(..., show_default=False, help="JSON array"),
        separator: str = Option(",", '--sep', '-s', help="Separator"),
):
    """
    Join the elements into a string
    """
    echo(parse_sequence(values).join(separator))


@app_array.command()
def sort(
        values: str = Argument(..., show_default=False, help="JSON array"),
        reverse: bool = Option(False, '--reverse', '-r', help="Sort in descending order"),
):
    """
    Sort the elements (stable)
    """
    seq = parse_sequence(values)
    try:
        seq.sort((lambda a, b: a > b) if reverse else None)
    except TypeError as e:
        secho(f"Error: Elements are not comparable: {e}", err=True, fg=colors.RED)
        raise Exit(1)
    echo(json.dumps(seq.values()))
