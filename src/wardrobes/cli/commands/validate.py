"""Validate command for checking layout state documents.

This module provides the `validate-state` command, which checks that a JSON
file is a layout document of the current schema version.
"""

from pathlib import Path
from typing import Annotated

import typer

from wardrobes.application.serialization import state_from_json
from wardrobes.domain.exceptions import StateShapeError


def validate_state_command(
    state_file: Annotated[
        Path,
        typer.Argument(help="Path to the layout state JSON file to validate"),
    ],
) -> None:
    """Validate a layout state document.

    Exit codes:
        0 - Document is a valid layout
        1 - Document is missing, not JSON, or does not match the schema

    Example:
        wardrobes validate-state wardrobe.json
    """
    if not state_file.exists():
        typer.echo(f"File not found: {state_file}", err=True)
        raise typer.Exit(code=1)

    try:
        state = state_from_json(state_file.read_text(encoding="utf-8"))
    except StateShapeError as e:
        _display_shape_error(e)
        raise typer.Exit(code=1)

    typer.echo(
        f"Valid layout: {len(state.doors)} doors, {len(state.shelves)} shelves, "
        f"{len(state.columns)} columns"
    )


def _display_shape_error(error: StateShapeError) -> None:
    typer.echo("Errors:", err=True)
    if not error.details:
        typer.echo(f"  {error.message}", err=True)
    for detail in error.details:
        path = detail.get("path") or "<root>"
        typer.echo(f"  {path}: {detail.get('message', 'Unknown error')}", err=True)
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            typer.echo(f"    Value: {value!r}", err=True)
    typer.echo()
    typer.echo("Validation failed.", err=True)
