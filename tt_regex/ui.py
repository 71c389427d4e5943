"""User interface components - pattern output and compilation breakdown."""

from rich.text import Text
from rich.table import Table
from rich.console import Console

from tt_regex.constants import CONSOLE_STYLES
from tt_regex.core.pattern import CompiledInterval

# Pattern output must stay byte-exact for piping into grep
console = Console(highlight=False)
err_console = Console(stderr=True)


def print_pattern(pattern: str):
    """Print the compiled pattern on stdout without markup processing."""
    console.print(pattern, markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_error(message: str):
    """Print an error line on stderr."""
    err_console.print(f"Error: {message}", style=CONSOLE_STYLES['error'],
                      markup=False, highlight=False, emoji=False, soft_wrap=True)


def display_field_table(compiled: CompiledInterval, title: str = "Field Breakdown"):
    """Display how each timestamp field was compiled."""
    table = Table(title=title)
    table.add_column("Field", style=CONSOLE_STYLES['info'], no_wrap=True)
    table.add_column("Start", justify="right", style="magenta")
    table.add_column("End", justify="right", style="magenta")
    table.add_column("Mode", style=CONSOLE_STYLES['warning'])
    table.add_column("Fragment", style=CONSOLE_STYLES['success'], no_wrap=True)

    for field in compiled.fields:
        width = field.spec.width
        table.add_row(
            field.spec.name,
            f"{field.start:0{width}d}",
            f"{field.end:0{width}d}",
            field.mode,
            Text(field.fragment),
        )

    err_console.print(table)
    err_console.print(f"{compiled.start} → {compiled.end}", style=CONSOLE_STYLES['dim'])
