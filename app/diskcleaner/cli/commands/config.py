"""Settings management commands.

Provides commands to show, locate and initialize the user settings file.
"""

from typing import Annotated

import typer
from rich.table import Table

from diskcleaner.cli.types import load_settings_or_exit
from diskcleaner.core.errors import SettingsError
from diskcleaner.core.paths import get_settings_path
from diskcleaner.core.settings import Settings, save_settings
from diskcleaner.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and initialize user settings.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective settings (file values merged with defaults)."""
    settings = load_settings_or_exit()
    settings_path = get_settings_path()

    table = Table(
        title="Settings",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Key", style="bold")
    table.add_column("Value")
    table.add_column("Description", style="muted")

    for name, field in Settings.model_fields.items():
        value = getattr(settings, name)
        display = "-" if value is None else str(value)
        table.add_row(name, display, field.description or "")

    console.print(table)
    if settings_path.exists():
        console.print(f"\n[dim]Loaded from {settings_path}[/dim]")
    else:
        console.print(f"\n[dim]No settings file at {settings_path}; showing defaults.[/dim]")


@app.command()
def path() -> None:
    """Print the settings file location."""
    typer.echo(str(get_settings_path()))


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing settings file."),
    ] = False,
) -> None:
    """Write a settings file populated with the defaults."""
    settings_path = get_settings_path()
    if settings_path.exists() and not force:
        print_info(f"Settings file already exists: {settings_path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        written = save_settings(Settings(), settings_path)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Settings written to {written}")
