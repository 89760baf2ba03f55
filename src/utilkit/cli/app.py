import os
from dataclasses import dataclass, field

import typer
from rich.console import Console

__all__ = ["app", "app_state"]

app = typer.Typer(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
    rich_markup_mode="rich",
)


@dataclass(slots=True)
class AppState:
    """
    Application state variables
    """
    no_color: bool = field(default_factory=lambda: bool(os.getenv("NO_COLOR")))
    _console: Console | None = None

    @property
    def console(self) -> Console:
        """
        The console used for rich output
        """
        if self._console is None:
            self._console = Console(no_color=self.no_color, highlight=False)
        return self._console


app_state = AppState()
