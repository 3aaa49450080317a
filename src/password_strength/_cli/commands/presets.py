import click
from rich.console import Console
from rich.table import Column, Table

from .check import load_presets

__all__ = ["presets"]

COLUMNS = (
    ("minLength", "min_length"),
    ("maxLength", "max_length"),
    ("minUpper", "min_upper"),
    ("minLower", "min_lower"),
    ("minNumeric", "min_numeric"),
    ("minSpecial", "min_special"),
    ("checkUsername", "check_username"),
    ("checkEmail", "check_email"),
)


@click.command()
@click.pass_context
def presets(ctx: click.Context) -> None:
    """List the available presets and their rule parameters."""
    table = Table(
        Column("Preset", no_wrap=True), *(title for title, _ in COLUMNS)
    )
    for name, spec in load_presets(ctx.obj).items():
        row = spec.model_dump()
        table.add_row(
            str(name),
            *(
                "-" if row[field] is None else str(row[field]).lower()
                for _, field in COLUMNS
            ),
        )

    Console().print(table)
