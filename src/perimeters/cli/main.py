"""Typer CLI for perimeter print ordering."""

import json
import logging
from pathlib import Path
from typing import Annotated, Any

import typer

from perimeters.application import LayerInput, LayerOrderOutput, OrderLayerCommand
from perimeters.application.config import (
    MAX_WALLS,
    ConfigError,
    WallPayload,
    WallsConfig,
    load_config,
    load_layer,
)
from perimeters.cli.commands import validate_command
from perimeters.domain import WallGenerator, WallSequence, generate_order, is_valid_order


def _parse_sequence(value: str) -> WallSequence:
    """Parse a wall sequence given as a config key or a legacy integer code."""
    try:
        if value.strip().isdigit():
            return WallSequence.from_code(int(value))
        return WallSequence.from_key(value)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _parse_generator(value: str) -> WallGenerator:
    try:
        return WallGenerator(value.lower())
    except ValueError:
        valid = ", ".join(g.value for g in WallGenerator)
        typer.echo(f"Error: Unknown wall generator {value!r}. Valid values: {valid}", err=True)
        raise typer.Exit(code=1)


def _resolve_walls_config(
    config_file: Path | None,
    sequence: str | None,
    generator: str | None,
    wall_count: int | None = None,
) -> WallsConfig:
    """Merge a config file (if any) with CLI overrides.

    CLI values take precedence over the file; anything left unset falls
    back to the WallsConfig defaults.
    """
    walls = WallsConfig()
    if config_file is not None:
        try:
            walls = load_config(config_file).walls
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

    overrides: dict[str, Any] = {}
    if sequence is not None:
        overrides["sequence"] = _parse_sequence(sequence)
    if generator is not None:
        overrides["generator"] = _parse_generator(generator)
    if wall_count is not None:
        overrides["wall_count"] = wall_count
    return walls.model_copy(update=overrides)


def _output_to_dict(result: LayerOrderOutput) -> dict[str, Any]:
    return {
        "layer": result.layer,
        "islands": [
            {
                "order": island.order,
                "walls": [
                    WallPayload.from_entity(wall).model_dump(mode="json")
                    for wall in island.walls
                ],
            }
            for island in result.islands
        ],
    }


app = typer.Typer(
    name="perimeters",
    help="Plan the print order of perimeter walls on a layer.",
)

app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Plan the print order of perimeter walls on a layer."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )


@app.command()
def order(
    walls: Annotated[
        int | None,
        typer.Option(
            "--walls", "-n", min=0, max=MAX_WALLS, help="Number of walls on the island"
        ),
    ] = None,
    sequence: Annotated[
        str | None,
        typer.Option("--sequence", "-s", help="Wall sequence key or legacy code"),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    check: Annotated[
        bool,
        typer.Option("--check", help="Verify the order is a permutation of all walls"),
    ] = False,
) -> None:
    """Print the 1-based wall print order for a wall count."""
    config = _resolve_walls_config(config_file, sequence, None, walls)
    if config.wall_count is None:
        typer.echo("Error: Wall count required (use --walls or walls.wall_count)", err=True)
        raise typer.Exit(code=1)

    result = generate_order(config.wall_count, config.sequence)
    typer.echo(f"{config.sequence.label}: {' '.join(str(i) for i in result)}")

    if check:
        if not is_valid_order(result, config.wall_count):
            typer.echo("Order is not a permutation of the walls", err=True)
            raise typer.Exit(code=1)
        typer.echo("Order check passed.")


@app.command()
def sequences() -> None:
    """List the available wall sequences."""
    for seq in WallSequence:
        typer.echo(f"{seq.code}  {seq.value:<24}  {seq.label}")


@app.command()
def reorder(
    layer_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON layer file with island walls"),
    ],
    sequence: Annotated[
        str | None,
        typer.Option("--sequence", "-s", help="Wall sequence key or legacy code"),
    ] = None,
    generator: Annotated[
        str | None,
        typer.Option("--generator", "-g", help="Wall generator: classic or arachne"),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the reordered layer to this file"),
    ] = None,
) -> None:
    """Reorder the walls of every island in a layer file."""
    config = _resolve_walls_config(config_file, sequence, generator)

    try:
        payload = load_layer(layer_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    layer_input = LayerInput(
        islands=[island.to_entities(config.generator) for island in payload.islands],
        layer=payload.layer,
    )
    result = OrderLayerCommand().execute(layer_input, config)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    text = json.dumps(_output_to_dict(result), indent=2)
    if output_file is not None:
        output_file.write_text(text, encoding="utf-8")
        typer.echo(f"Wrote {output_file}")
    else:
        typer.echo(text)


if __name__ == "__main__":
    app()
