"""Typer CLI for editing wardrobe layouts with free-text commands."""

import asyncio
import json
import logging
from pathlib import Path
from typing import Annotated, Any

import typer

from wardrobes.application import (
    OutcomeKind,
    ServiceFactory,
    state_from_json,
    state_to_json,
)
from wardrobes.application.config import ConfigError, PipelineSettings, load_settings
from wardrobes.cli.commands import validate_state_command
from wardrobes.domain import (
    Intent,
    IntentAction,
    IntentParameters,
    IntentValidator,
    LayoutEngine,
    LayoutState,
    StateNotFoundError,
    StateShapeError,
)
from wardrobes.infrastructure import JsonFileLayoutRepository
from wardrobes.infrastructure.llm import check_ollama_sync

logger = logging.getLogger(__name__)

# Exit codes for `apply`.
EXIT_APPLIED = 0
EXIT_INVALID = 1
EXIT_NEEDS_CLARIFICATION = 2


app = typer.Typer(
    name="wardrobes",
    help="Edit parametric wardrobe layouts with plain-language commands.",
)

app.command(name="validate-state")(validate_state_command)


ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON settings file"),
]
LLMOption = Annotated[
    bool,
    typer.Option("--llm", help="Parse with the configured Ollama model (falls back to keywords)"),
]


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """Edit parametric wardrobe layouts with plain-language commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_settings(config_file: Path | None, use_llm: bool) -> PipelineSettings:
    try:
        settings = load_settings(config_file)
    except ConfigError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=1)
    if use_llm and not settings.llm.enabled:
        settings = settings.model_copy(
            update={"llm": settings.llm.model_copy(update={"enabled": True})}
        )
    return settings


def _echo_json(data: dict[str, Any]) -> None:
    typer.echo(json.dumps(data, indent=2))


@app.command()
def parse(
    text: Annotated[str, typer.Argument(help="Command text, e.g. 'add 2 doors'")],
    config_file: ConfigOption = None,
    use_llm: LLMOption = False,
) -> None:
    """Parse a command and print the resulting intent."""
    settings = _load_settings(config_file, use_llm)
    parser = ServiceFactory(settings=settings).create_parser()
    intent = asyncio.run(parser.parse(text))
    _echo_json(intent.to_dict())


@app.command()
def apply(
    text: Annotated[str, typer.Argument(help="Command text, e.g. 'add 2 doors'")],
    state_file: Annotated[
        Path | None,
        typer.Option("--state", "-s", help="Layout state JSON file to apply the command to"),
    ] = None,
    state_id: Annotated[
        str | None,
        typer.Option("--state-id", help="Identifier of a stored layout (requires --store)"),
    ] = None,
    store: Annotated[
        Path | None,
        typer.Option("--store", help="Directory of stored layouts"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the new layout here when applied"),
    ] = None,
    config_file: ConfigOption = None,
    use_llm: LLMOption = False,
) -> None:
    """Apply a command to a layout and print the outcome.

    Exit codes:
        0 - Command applied
        1 - Command rejected, or the layout could not be read
        2 - Command not understood; a clarification is printed

    Example:
        wardrobes apply "add 3 shelves" --state wardrobe.json -o wardrobe.json
    """
    if (state_file is None) == (state_id is None):
        typer.echo("Provide exactly one of --state or --state-id", err=True)
        raise typer.Exit(code=1)
    if state_id is not None and store is None:
        typer.echo("--state-id requires --store", err=True)
        raise typer.Exit(code=1)

    settings = _load_settings(config_file, use_llm)
    repository = JsonFileLayoutRepository(store) if store is not None else None
    command = ServiceFactory(settings=settings, repository=repository).create_process_command()

    try:
        state = None
        if state_file is not None:
            if not state_file.exists():
                typer.echo(f"File not found: {state_file}", err=True)
                raise typer.Exit(code=1)
            state = state_from_json(state_file.read_text(encoding="utf-8"))
        outcome = command.execute_sync(text, state=state, state_id=state_id)
    except StateShapeError as e:
        typer.echo(f"Invalid layout state: {e}", err=True)
        raise typer.Exit(code=1)
    except StateNotFoundError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    _echo_json(outcome.to_dict())

    if outcome.kind is OutcomeKind.NEEDS_CLARIFICATION:
        raise typer.Exit(code=EXIT_NEEDS_CLARIFICATION)
    if outcome.kind is OutcomeKind.INVALID:
        raise typer.Exit(code=EXIT_INVALID)

    if output_file is not None:
        output_file.write_text(state_to_json(outcome.state), encoding="utf-8")
        typer.echo(f"Layout written to: {output_file}", err=True)


@app.command(name="new-state")
def new_state(
    width: Annotated[
        float | None, typer.Option("--width", "-w", help="Width in cm (100-400)")
    ] = None,
    height: Annotated[
        float | None, typer.Option("--height", "-h", help="Height in cm (150-300)")
    ] = None,
    depth: Annotated[
        float | None, typer.Option("--depth", "-d", help="Depth in cm (40-80)")
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the layout here instead of stdout"),
    ] = None,
) -> None:
    """Create an empty layout document, optionally with dimensions."""
    state = LayoutState()
    if width is not None or height is not None or depth is not None:
        intent = Intent(
            action=IntentAction.SET_DIMENSIONS,
            confidence=1.0,
            parameters=IntentParameters(width=width, height=height, depth=depth),
        )
        validation = IntentValidator().validate(intent)
        if not validation.valid:
            typer.echo(f"Error: {validation.error}", err=True)
            raise typer.Exit(code=1)
        state = LayoutEngine().apply(state, intent)

    text = state_to_json(state)
    if output_file is not None:
        output_file.write_text(text, encoding="utf-8")
        typer.echo(f"Layout written to: {output_file}", err=True)
    else:
        typer.echo(text)


@app.command(name="check-llm")
def check_llm(config_file: ConfigOption = None) -> None:
    """Check that the configured Ollama server and model are available."""
    settings = _load_settings(config_file, use_llm=False)
    ready, message = check_ollama_sync(
        base_url=settings.llm.ollama_url,
        model_name=settings.llm.model,
    )
    typer.echo(message, err=not ready)
    if not ready:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
