from pathlib import Path

import click
from rich.console import Console

from ...exceptions import IllegalMappingOperationError, PrimitiveParseError
from ..helpers import build_inspector, resolve_mapping

console = Console()


@click.command()
@click.argument("modules", nargs=-1)
@click.option("--type", "type_name", required=True, help="Wire-format name of the primitive")
@click.option("--text", required=True, help="Wire-format text to parse")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a fhir_introspection.toml config file",
)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v, -vv)")
def parse_command(
    modules: tuple[str, ...],
    type_name: str,
    text: str,
    config_file: Path | None,
    verbose: int,
) -> None:
    inspector, logger = build_inspector(modules, config_file, verbose, console)
    mapping = resolve_mapping(inspector, type_name)
    try:
        value = mapping.parse(text)
    except IllegalMappingOperationError as exc:
        raise click.ClickException(str(exc)) from exc
    except PrimitiveParseError as exc:
        logger.error(str(exc))
        raise click.exceptions.Exit(1) from exc
    console.print(repr(value), markup=False, highlight=False)
